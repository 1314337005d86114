"""Concrete sensor kinds built on the periodic signal.

Each sensor reports a hazard level, and comfort sensors also a comfort level,
both as whole percentages in [0, 100]. Levels depend only on the current
reading and the sensor's own fixed configuration.

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

import abc
import enum
from typing import Final, Sequence

import gin

from bmsim.simulator import periodic_signal
from bmsim.simulator import timed_item_manager as timed_item_manager_py
from bmsim.utils import conversion_utils
from bmsim.utils import errors

# Upper bounds (exclusive) of each CO2 hazard band, in ppm.
_CO2_HAZARD_BANDS: Final[Sequence[tuple[int, int]]] = (
    (1000, 0),
    (2000, 25),
    (5000, 50),
)
MAX_LEVEL: Final[int] = 100


class SensorCategory(enum.Enum):
  """How a hazard evaluator should treat a sensor's output."""

  ENVIRONMENTAL = 'environmental'
  OCCUPANCY = 'occupancy'


class HazardSensor(periodic_signal.PeriodicSignal, metaclass=abc.ABCMeta):
  """A periodic signal that contributes to the hazard level of a room."""

  category: SensorCategory = SensorCategory.ENVIRONMENTAL

  @property
  @abc.abstractmethod
  def hazard_level(self) -> int:
    """Returns the hazard level in [0, 100] for the current reading."""


class ComfortSensor(metaclass=abc.ABCMeta):
  """Mixin for sensors that also report how comfortable a room is."""

  @property
  @abc.abstractmethod
  def comfort_level(self) -> int:
    """Returns 100 if the current reading is comfortable, else 0."""


@gin.configurable
class CarbonDioxideSensor(HazardSensor, ComfortSensor):
  """Measures CO2 concentration in parts per million.

  Attributes:
    ideal_value: CO2 concentration (ppm) that is most comfortable.
    variation_limit: Deviation scale (ppm). The room is comfortable while the
      reading is less than half of this away from the ideal value.
  """

  def __init__(
      self,
      readings: Sequence[int],
      update_frequency: int,
      manager: timed_item_manager_py.TimedItemManager,
      ideal_value: int = 600,
      variation_limit: int = 250,
  ):
    if ideal_value <= 0:
      raise errors.InvalidConfigurationError('Ideal CO2 value must be > 0.')
    if variation_limit <= 0:
      raise errors.InvalidConfigurationError(
          'CO2 variation limit must be > 0.'
      )
    if ideal_value - variation_limit < 0:
      raise errors.InvalidConfigurationError(
          'Ideal CO2 value - variation limit must be >= 0.'
      )
    super().__init__(readings, update_frequency, manager)
    self._ideal_value = ideal_value
    self._variation_limit = variation_limit

  @property
  def ideal_value(self) -> int:
    return self._ideal_value

  @property
  def variation_limit(self) -> int:
    return self._variation_limit

  @property
  def hazard_level(self) -> int:
    for upper_bound, level in _CO2_HAZARD_BANDS:
      if self.current_reading < upper_bound:
        return level
    return MAX_LEVEL

  @property
  def comfort_level(self) -> int:
    deviation = abs(self.current_reading - self._ideal_value)
    if deviation >= self._variation_limit:
      return 0
    # Comfortable only while less than half the variation limit away.
    if conversion_utils.round_half_up(deviation / self._variation_limit):
      return 0
    return MAX_LEVEL


@gin.configurable
class OccupancySensor(HazardSensor, ComfortSensor):
  """Counts the people present in a room.

  Attributes:
    capacity: Number of people the room is rated for.
  """

  category = SensorCategory.OCCUPANCY

  def __init__(
      self,
      readings: Sequence[int],
      update_frequency: int,
      manager: timed_item_manager_py.TimedItemManager,
      capacity: int,
  ):
    if capacity < 0:
      raise errors.InvalidConfigurationError('Capacity must be >= 0.')
    super().__init__(readings, update_frequency, manager)
    self._capacity = capacity

  @property
  def capacity(self) -> int:
    return self._capacity

  @property
  def hazard_level(self) -> int:
    if self.current_reading >= self._capacity:
      return MAX_LEVEL
    return conversion_utils.percentage(self.current_reading, self._capacity)

  @property
  def comfort_level(self) -> int:
    if self.current_reading >= self._capacity:
      return 0
    if conversion_utils.round_half_up(self.current_reading / self._capacity):
      return 0
    return MAX_LEVEL


@gin.configurable
class TemperatureSensor(HazardSensor):
  """Measures air temperature in degrees Celsius.

  A reading at or above the fire threshold is an absolute hazard; anything
  below it is no hazard at all.

  Attributes:
    fire_threshold: Temperature at which a fire is assumed.
  """

  def __init__(
      self,
      readings: Sequence[int],
      update_frequency: int,
      manager: timed_item_manager_py.TimedItemManager,
      fire_threshold: int = 68,
  ):
    super().__init__(readings, update_frequency, manager)
    self._fire_threshold = fire_threshold

  @property
  def fire_threshold(self) -> int:
    return self._fire_threshold

  @property
  def hazard_level(self) -> int:
    return MAX_LEVEL if self.current_reading >= self._fire_threshold else 0
