"""Models a floor: the set of rooms a maintenance rotation may visit.

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

from typing import Optional, Sequence

from bmsim.simulator import maintenance_rotation as maintenance_rotation_py
from bmsim.simulator import room as room_py
from bmsim.simulator import timed_item_manager as timed_item_manager_py
from bmsim.utils import errors


class Floor:
  """A floor of the building and its rooms.

  Attributes:
    floor_number: Number of floors above ground, ground floor being 1.
    rooms: Rooms on the floor, in the order they were added.
    maintenance_rotation: The floor's current rotation, or None.
  """

  def __init__(
      self,
      floor_number: int,
      manager: timed_item_manager_py.TimedItemManager,
  ):
    self._floor_number = floor_number
    self._manager = manager
    self._rooms: list[room_py.Room] = []
    self._maintenance_rotation: Optional[
        maintenance_rotation_py.MaintenanceRotation
    ] = None

  @property
  def floor_number(self) -> int:
    return self._floor_number

  @property
  def rooms(self) -> Sequence[room_py.Room]:
    return tuple(self._rooms)

  @property
  def maintenance_rotation(
      self,
  ) -> Optional[maintenance_rotation_py.MaintenanceRotation]:
    return self._maintenance_rotation

  def add_room(self, room: room_py.Room) -> None:
    if self.get_room_by_number(room.room_number) is not None:
      raise errors.InvalidConfigurationError(
          f'Floor {self._floor_number} already has room {room.room_number}.'
      )
    self._rooms.append(room)

  def get_room_by_number(self, room_number: int) -> Optional[room_py.Room]:
    for room in self._rooms:
      if room.room_number == room_number:
        return room
    return None

  def create_maintenance_rotation(
      self, room_order: Sequence[room_py.Room]
  ) -> maintenance_rotation_py.MaintenanceRotation:
    """Replaces the floor's maintenance rotation with one over room_order.

    The previous rotation, if any, is retired first so that its current room
    is no longer marked as under maintenance. It is only retired once the new
    order has been validated.

    Args:
      room_order: Rooms of this floor on which to perform maintenance, in
        order.

    Returns:
      The new rotation, already registered with the floor's manager.

    Raises:
      InvalidConfigurationError: If the order is empty, contains a room not on
        this floor, or has a room directly following itself.
    """
    maintenance_rotation_py.validate_room_order(room_order, self._rooms)
    if self._maintenance_rotation is not None:
      self._maintenance_rotation.retire()
    self._maintenance_rotation = maintenance_rotation_py.MaintenanceRotation(
        room_order, self._manager, floor_rooms=self._rooms
    )
    return self._maintenance_rotation
