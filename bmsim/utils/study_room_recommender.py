"""Recommends the most comfortable open study room in a building.

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

from typing import Iterable, Optional, Tuple

from absl import logging
import numpy as np

from bmsim.simulator import floor as floor_py
from bmsim.simulator import room as room_py
from bmsim.simulator import sensors as sensors_py


def get_room_comfort(room: room_py.Room) -> float:
  """Returns the mean comfort level of the room's comfort sensors, or 0."""
  levels = [
      sensor.comfort_level
      for sensor in room.sensors
      if isinstance(sensor, sensors_py.ComfortSensor)
  ]
  if not levels:
    return 0.0
  return float(np.mean(levels))


def _best_study_room_on_floor(
    floor: floor_py.Floor,
) -> Tuple[Optional[room_py.Room], float]:
  best_room = None
  best_comfort = -1.0
  for room in floor.rooms:
    if room.room_type != room_py.RoomType.STUDY:
      continue
    if room.evaluate_room_state() != room_py.RoomState.OPEN:
      continue
    comfort = get_room_comfort(room)
    if comfort > best_comfort:
      best_room, best_comfort = room, comfort
  return best_room, best_comfort


def recommend_study_room(
    floors: Iterable[floor_py.Floor],
) -> Optional[room_py.Room]:
  """Returns the most suitable study room, climbing floors while it improves.

  The search starts at the lowest floor holding an open study room and takes
  the most comfortable one there. It then moves up one floor at a time, but
  only while the floor above offers a strictly more comfortable open study
  room; otherwise the current best is returned.

  Args:
    floors: Floors of the building, in any order.

  Returns:
    The recommended room, or None if no study room on any floor is open.
  """
  best_room = None
  best_comfort = -1.0
  for floor in sorted(floors, key=lambda f: f.floor_number):
    room, comfort = _best_study_room_on_floor(floor)
    if best_room is None:
      best_room, best_comfort = room, comfort
      continue
    if room is None or comfort <= best_comfort:
      break
    best_room, best_comfort = room, comfort

  if best_room is not None:
    logging.debug(
        'Recommended study room %d with comfort %.1f.',
        best_room.room_number,
        best_comfort,
    )
  return best_room
