"""Models a sensor signal that cycles through a fixed series of readings.

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

from typing import Final, Sequence

from bmsim.models import timed_item
from bmsim.simulator import timed_item_manager as timed_item_manager_py
from bmsim.utils import errors

MIN_UPDATE_FREQUENCY: Final[int] = 1
MAX_UPDATE_FREQUENCY: Final[int] = 5


class PeriodicSignal(timed_item.TimedItem):
  """A timed signal that steps through its readings and wraps around.

  Each reading is held for update_frequency minutes. After
  len(readings) * update_frequency minutes the signal is back at readings[0].

  Attributes:
    readings: The raw readings, one per update period.
    update_frequency: Minutes between changes of the current reading.
    time_elapsed: Minutes elapsed since the signal was created.
    current_reading: The reading observed at the current minute.
  """

  def __init__(
      self,
      readings: Sequence[int],
      update_frequency: int,
      manager: timed_item_manager_py.TimedItemManager,
  ):
    if not isinstance(update_frequency, int):
      raise errors.InvalidConfigurationError(
          f'Update frequency must be a whole number of minutes, got'
          f' {update_frequency!r}.'
      )
    if (
        update_frequency < MIN_UPDATE_FREQUENCY
        or update_frequency > MAX_UPDATE_FREQUENCY
    ):
      raise errors.InvalidConfigurationError(
          f'Update frequency must be between {MIN_UPDATE_FREQUENCY} and'
          f' {MAX_UPDATE_FREQUENCY} minutes, got {update_frequency}.'
      )
    if not readings:
      raise errors.InvalidConfigurationError(
          'Readings must contain at least one value.'
      )
    if any(reading < 0 for reading in readings):
      raise errors.InvalidConfigurationError(
          'All readings must be non-negative.'
      )

    self._readings = tuple(readings)
    self._update_frequency = update_frequency
    self._time_elapsed = 0
    self._current_reading = self._readings[0]
    manager.register_timed_item(self)

  @property
  def readings(self) -> Sequence[int]:
    return self._readings

  @property
  def update_frequency(self) -> int:
    return self._update_frequency

  @property
  def time_elapsed(self) -> int:
    return self._time_elapsed

  @property
  def current_reading(self) -> int:
    return self._current_reading

  @property
  def rotation_duration(self) -> int:
    """Minutes taken to cycle through every reading once."""
    return len(self._readings) * self._update_frequency

  def elapse_one_minute(self) -> None:
    self._time_elapsed += 1
    index = (
        self._time_elapsed % self.rotation_duration
    ) // self._update_frequency
    self._current_reading = self._readings[index]

  def __repr__(self) -> str:
    return (
        f'{type(self).__name__}(freq={self._update_frequency},'
        f' readings={list(self._readings)})'
    )
