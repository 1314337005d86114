"""Cycles the rooms of a floor through maintenance, one room at a time.

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

from typing import Collection, Final, Mapping, Optional, Sequence

from absl import logging
import gin

from bmsim.models import timed_item
from bmsim.simulator import room as room_py
from bmsim.simulator import timed_item_manager as timed_item_manager_py
from bmsim.utils import conversion_utils
from bmsim.utils import errors

DEFAULT_TYPE_MULTIPLIERS: Final[Mapping[str, float]] = {
    room_py.RoomType.STUDY.name: 1.0,
    room_py.RoomType.OFFICE.name: 1.5,
    room_py.RoomType.LABORATORY.name: 2.0,
}


@gin.configurable
class MaintenanceRotation(timed_item.TimedItem):
  """Maintains the rooms in a fixed order, wrapping around forever.

  Exactly one room of the order is under maintenance at any time. Each room
  is maintained for get_maintenance_time(room) minutes before the next room
  in the order takes over. Time does not accumulate while the current room
  must be evacuated.

  Attributes:
    room_order: Rooms to maintain, in order.
    current_room: The room currently under maintenance.
    time_elapsed_current_room: Minutes spent maintaining the current room.
  """

  def __init__(
      self,
      room_order: Sequence[room_py.Room],
      manager: timed_item_manager_py.TimedItemManager,
      floor_rooms: Optional[Collection[room_py.Room]] = None,
      base_minutes: float = 5.0,
      minutes_per_square_metre: float = 0.2,
      type_multipliers: Optional[Mapping[str, float]] = None,
  ):
    """Creates the rotation, starts maintaining room_order[0] and registers.

    Args:
      room_order: Rooms to maintain, in order. No room may directly follow
        itself, where the last room is considered to be followed by the first.
      manager: Manager that advances the rotation every minute.
      floor_rooms: If given, the rooms of the owning floor; every room of the
        order must be one of them.
      base_minutes: Maintenance minutes every room needs regardless of size.
      minutes_per_square_metre: Extra maintenance minutes per m^2 of area.
      type_multipliers: Map of RoomType name to duration multiplier.

    Raises:
      InvalidConfigurationError: If the order is empty, contains a room not on
        the floor, or has a room directly following itself.
    """
    validate_room_order(room_order, floor_rooms)

    self._room_order = tuple(room_order)
    self._base_minutes = base_minutes
    self._minutes_per_square_metre = minutes_per_square_metre
    self._type_multipliers = dict(
        type_multipliers
        if type_multipliers is not None
        else DEFAULT_TYPE_MULTIPLIERS
    )
    self._current_index = 0
    self._time_elapsed = 0
    self._retired = False

    self._room_order[0].set_maintenance(True)
    manager.register_timed_item(self)
    logging.info(
        'Started maintenance rotation over rooms %s.',
        [room.room_number for room in self._room_order],
    )

  @property
  def room_order(self) -> Sequence[room_py.Room]:
    return self._room_order

  @property
  def current_room(self) -> room_py.Room:
    if self._retired:
      raise RuntimeError('Retired maintenance rotation has no current room.')
    return self._room_order[self._current_index]

  @property
  def time_elapsed_current_room(self) -> int:
    return self._time_elapsed

  @property
  def retired(self) -> bool:
    return self._retired

  def get_maintenance_time(self, room: room_py.Room) -> int:
    """Returns the minutes needed to maintain the room.

    Args:
      room: Room on which to perform maintenance.
    """
    base_time = room.area * self._minutes_per_square_metre + self._base_minutes
    multiplier = self._type_multipliers[room.room_type.name]
    return conversion_utils.round_half_up(base_time * multiplier)

  def elapse_one_minute(self) -> None:
    if self._retired:
      return

    room = self.current_room
    if room.evaluate_room_state() == room_py.RoomState.EVACUATE:
      logging.debug(
          'Maintenance of room %d paused for evacuation.', room.room_number
      )
      return

    if self._time_elapsed >= self.get_maintenance_time(room):
      self._advance()
    else:
      self._time_elapsed += 1

  def skip_current_maintenance(self) -> None:
    """Stops maintaining the current room and moves on to the next one."""
    if self._retired:
      raise RuntimeError('Cannot skip maintenance on a retired rotation.')
    self._advance()

  def retire(self) -> None:
    """Ends the rotation; it stops maintaining and ignores further minutes.

    A manager cannot unregister items, so a replaced rotation is retired
    rather than removed.
    """
    if self._retired:
      return
    self.current_room.set_maintenance(False)
    self._retired = True
    logging.info('Retired maintenance rotation.')

  def _advance(self) -> None:
    previous = self._room_order[self._current_index]
    previous.set_maintenance(False)
    self._current_index = (self._current_index + 1) % len(self._room_order)
    current = self._room_order[self._current_index]
    current.set_maintenance(True)
    logging.info(
        'Maintenance moved from room %d to room %d after %d minutes.',
        previous.room_number,
        current.room_number,
        self._time_elapsed,
    )
    self._time_elapsed = 0

  def __repr__(self) -> str:
    current = 'retired' if self._retired else f'#{self.current_room.room_number}'
    return (
        f'MaintenanceRotation(currentRoom={current},'
        f' currentElapsed={self._time_elapsed})'
    )


def validate_room_order(
    room_order: Sequence[room_py.Room],
    floor_rooms: Optional[Collection[room_py.Room]],
) -> None:
  """Raises InvalidConfigurationError if room_order cannot be rotated."""
  if not room_order:
    raise errors.InvalidConfigurationError(
        'The room order must contain at least one room.'
    )

  if floor_rooms is not None:
    for room in room_order:
      if room not in floor_rooms:
        raise errors.InvalidConfigurationError(
            f'Room {room.room_number} is not on this floor.'
        )

  if len(room_order) < 2:
    return
  for i, room in enumerate(room_order):
    following = room_order[(i + 1) % len(room_order)]
    if room is following:
      raise errors.InvalidConfigurationError(
          f'Room {room.room_number} cannot be maintained twice in a row.'
      )
