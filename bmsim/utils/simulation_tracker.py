"""Drives a timed item manager and records the state of its items.

Copyright 2025 Google LLC

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    https://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

from typing import Any, Final, Mapping, Sequence

from absl import logging
import pandas as pd

from bmsim.models import timed_item
from bmsim.simulator import maintenance_rotation
from bmsim.simulator import periodic_signal
from bmsim.simulator import timed_item_manager as timed_item_manager_py

HISTORY_COLUMNS: Final[Sequence[str]] = (
    'minute',
    'item',
    'item_type',
    'reading',
    'room_number',
    'time_elapsed',
)


def _item_record(
    minute: int, index: int, item: timed_item.TimedItem
) -> Mapping[str, Any]:
  record = {
      'minute': minute,
      'item': index,
      'item_type': type(item).__name__,
      'reading': None,
      'room_number': None,
      'time_elapsed': None,
  }
  if isinstance(item, periodic_signal.PeriodicSignal):
    record['reading'] = item.current_reading
  elif isinstance(item, maintenance_rotation.MaintenanceRotation):
    if not item.retired:
      record['room_number'] = item.current_room.room_number
    record['time_elapsed'] = item.time_elapsed_current_room
  return record


class SimulationTracker:
  """Advances the simulation minute by minute and keeps a history.

  After every minute one record per registered timed item is kept: signals
  contribute their current reading, rotations the room under maintenance and
  the minutes spent on it. A retired rotation has no room number.
  """

  def __init__(self, manager: timed_item_manager_py.TimedItemManager):
    self._manager = manager
    self._records: list[Mapping[str, Any]] = []

  @property
  def manager(self) -> timed_item_manager_py.TimedItemManager:
    return self._manager

  def step(self) -> None:
    """Elapses one minute and records the resulting state."""
    self._manager.elapse_one_minute()
    minute = self._manager.minutes_elapsed
    for index, item in enumerate(self._manager.timed_items):
      self._records.append(_item_record(minute, index, item))

  def run(self, minutes: int) -> pd.DataFrame:
    """Steps the given number of minutes and returns the whole history."""
    if minutes < 0:
      raise ValueError(f'Cannot run a negative number of minutes: {minutes}.')
    for _ in range(minutes):
      self.step()
    logging.info(
        'Simulated %d minutes, now at minute %d.',
        minutes,
        self._manager.minutes_elapsed,
    )
    return self.history

  @property
  def history(self) -> pd.DataFrame:
    return pd.DataFrame(self._records, columns=list(HISTORY_COLUMNS))

  def reset(self) -> None:
    """Forgets the recorded history; the simulated items are not rewound."""
    self._records = []
