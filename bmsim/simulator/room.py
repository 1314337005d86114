"""Models a room as seen by the maintenance and evacuation logic.

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

import enum
from typing import Final, Optional, Sequence, Type, TypeVar

import gin

from bmsim.hazard_evaluation import hazard_evaluator as hazard_evaluator_py
from bmsim.simulator import sensors as sensors_py
from bmsim.utils import errors

MIN_AREA: Final[float] = 5.0

_SensorT = TypeVar('_SensorT', bound=sensors_py.HazardSensor)


class RoomType(enum.Enum):
  """Room categories, in increasing order of maintenance intensity."""

  STUDY = 'study'
  OFFICE = 'office'
  LABORATORY = 'laboratory'


class RoomState(enum.Enum):
  OPEN = 'open'
  MAINTENANCE = 'maintenance'
  EVACUATE = 'evacuate'


@gin.configurable
class Room:
  """A room on a floor, holding its sensors and its current status flags.

  Attributes:
    room_number: Number of the room, unique on its floor.
    room_type: Category of the room.
    area: Floor area of the room in m^2, at least MIN_AREA.
    sensors: Sensors installed in the room, at most one of each kind.
    hazard_evaluator: Optional evaluator combining the room's hazard sensors.
    fire_drill_ongoing: Whether a fire drill is in progress in the room.
    maintenance_ongoing: Whether the room is currently being maintained.
    evacuation_hazard_threshold: Hazard level above which the room must be
      evacuated.
  """

  def __init__(
      self,
      room_number: int,
      room_type: RoomType,
      area: float,
      evacuation_hazard_threshold: int = 50,
  ):
    if area < MIN_AREA:
      raise errors.InvalidConfigurationError(
          f'Room area must be at least {MIN_AREA} m^2, got {area}.'
      )
    self._room_number = room_number
    self._room_type = room_type
    self._area = area
    self._evacuation_hazard_threshold = evacuation_hazard_threshold
    self._sensors: list[sensors_py.HazardSensor] = []
    self._hazard_evaluator: Optional[hazard_evaluator_py.HazardEvaluator] = (
        None
    )
    self._fire_drill_ongoing = False
    self._maintenance_ongoing = False

  @property
  def room_number(self) -> int:
    return self._room_number

  @property
  def room_type(self) -> RoomType:
    return self._room_type

  @property
  def area(self) -> float:
    return self._area

  @property
  def sensors(self) -> Sequence[sensors_py.HazardSensor]:
    return tuple(self._sensors)

  def add_sensor(self, sensor: sensors_py.HazardSensor) -> None:
    """Installs a sensor, rejecting a second sensor of the same kind."""
    if self.get_sensor(type(sensor)) is not None:
      raise errors.InvalidConfigurationError(
          f'Room {self._room_number} already has a {type(sensor).__name__}.'
      )
    self._sensors.append(sensor)

  def get_sensor(self, sensor_type: Type[_SensorT]) -> Optional[_SensorT]:
    for sensor in self._sensors:
      if type(sensor) is sensor_type:  # pylint: disable=unidiomatic-typecheck
        return sensor
    return None

  @property
  def hazard_evaluator(self) -> Optional[hazard_evaluator_py.HazardEvaluator]:
    return self._hazard_evaluator

  @hazard_evaluator.setter
  def hazard_evaluator(
      self, value: Optional[hazard_evaluator_py.HazardEvaluator]
  ) -> None:
    self._hazard_evaluator = value

  @property
  def fire_drill_ongoing(self) -> bool:
    return self._fire_drill_ongoing

  def set_fire_drill(self, ongoing: bool) -> None:
    self._fire_drill_ongoing = ongoing

  @property
  def maintenance_ongoing(self) -> bool:
    return self._maintenance_ongoing

  def set_maintenance(self, ongoing: bool) -> None:
    """Sets the maintenance flag; only a MaintenanceRotation calls this."""
    self._maintenance_ongoing = ongoing

  def evaluate_room_state(self) -> RoomState:
    """Returns the room's state, with evacuation taking precedence.

    A room must be evacuated during a fire drill, or when its hazard evaluator
    reports a level above the evacuation threshold.
    """
    if self._fire_drill_ongoing:
      return RoomState.EVACUATE
    if (
        self._hazard_evaluator is not None
        and self._hazard_evaluator.evaluate_hazard_level()
        > self._evacuation_hazard_threshold
    ):
      return RoomState.EVACUATE
    if self._maintenance_ongoing:
      return RoomState.MAINTENANCE
    return RoomState.OPEN

  def __repr__(self) -> str:
    return (
        f'Room(#{self._room_number}, type={self._room_type.name},'
        f' area={self._area:.2f}m^2)'
    )
