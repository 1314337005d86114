"""Scheduler that advances every timed item in the simulation.

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

import threading
from typing import Sequence

from absl import logging

from bmsim.models import timed_item


class TimedItemManager:
  """Advances registered timed items in lockstep.

  One manager is created per simulation and handed to every timed item at
  construction; each item registers itself. A call to elapse_one_minute()
  advances every registered item exactly once, in registration order, so a
  later item observes the already-advanced state of an earlier one.

  Attributes:
    minutes_elapsed: Number of completed calls to elapse_one_minute().
    timed_items: Snapshot of the registered items, in registration order.
  """

  def __init__(self):
    self._timed_items: list[timed_item.TimedItem] = []
    self._minutes_elapsed = 0
    # Reentrant: items may register further items while being advanced.
    self._lock = threading.RLock()
    logging.info('Created timed item manager.')

  def register_timed_item(self, item: timed_item.TimedItem) -> None:
    """Appends an item to the end of the advance order.

    The same item may be registered more than once, in which case it is
    advanced once per registration.

    Args:
      item: The timed item to advance on every elapsed minute.
    """
    with self._lock:
      self._timed_items.append(item)
      logging.debug(
          'Registered %s as timed item %d.',
          type(item).__name__,
          len(self._timed_items),
      )

  def elapse_one_minute(self) -> None:
    """Advances every registered item by one minute, in registration order.

    Items registered while the minute is elapsing are first advanced on the
    next call.
    """
    with self._lock:
      for item in tuple(self._timed_items):
        item.elapse_one_minute()
      self._minutes_elapsed += 1

  @property
  def minutes_elapsed(self) -> int:
    return self._minutes_elapsed

  @property
  def timed_items(self) -> Sequence[timed_item.TimedItem]:
    return tuple(self._timed_items)

  def __len__(self) -> int:
    return len(self._timed_items)
