"""Tests for study_room_recommender.

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

from absl.testing import absltest
from absl.testing import parameterized

from bmsim.simulator import floor as floor_py
from bmsim.simulator import room as room_py
from bmsim.simulator import sensors
from bmsim.simulator import timed_item_manager
from bmsim.utils import study_room_recommender

Room = room_py.Room
RoomType = room_py.RoomType


class StudyRoomRecommenderTest(parameterized.TestCase):

  def setUp(self):
    super().setUp()
    self.manager = timed_item_manager.TimedItemManager()

  def _room(self, number, co2=None, people=None, room_type=RoomType.STUDY):
    room = Room(number, room_type, 20.0)
    if co2 is not None:
      room.add_sensor(
          sensors.CarbonDioxideSensor([co2], 1, self.manager, 600, 250)
      )
    if people is not None:
      room.add_sensor(
          sensors.OccupancySensor([people], 1, self.manager, capacity=10)
      )
    return room

  def _floor(self, number, *rooms):
    floor = floor_py.Floor(number, self.manager)
    for room in rooms:
      floor.add_room(room)
    return floor

  @parameterized.named_parameters(
      ('co2_comfortable', 600, None, 100.0),
      ('co2_uncomfortable', 725, None, 0.0),
      ('co2_and_quiet', 600, 2, 100.0),
      ('co2_and_crowded', 600, 8, 50.0),
      ('no_comfort_sensors', None, None, 0.0),
  )
  def test_get_room_comfort(self, co2, people, expected):
    room = self._room(1, co2=co2, people=people)

    self.assertEqual(study_room_recommender.get_room_comfort(room), expected)

  def test_temperature_sensor_does_not_count(self):
    room = self._room(1, co2=600, people=8)
    room.add_sensor(sensors.TemperatureSensor([20], 1, self.manager))

    self.assertEqual(study_room_recommender.get_room_comfort(room), 50.0)

  def test_no_floors(self):
    self.assertIsNone(study_room_recommender.recommend_study_room([]))

  def test_no_study_rooms(self):
    floors = [
        self._floor(1, self._room(101, co2=600, room_type=RoomType.OFFICE)),
        self._floor(2, self._room(201, room_type=RoomType.LABORATORY)),
    ]

    self.assertIsNone(study_room_recommender.recommend_study_room(floors))

  def test_picks_most_comfortable_on_floor(self):
    best = self._room(102, co2=600)
    floor = self._floor(1, self._room(101, co2=725), best, self._room(103))

    self.assertIs(study_room_recommender.recommend_study_room([floor]), best)

  def test_room_without_comfort_sensors_recommended_if_only_one(self):
    only = self._room(101)
    floor = self._floor(1, only)

    self.assertIs(study_room_recommender.recommend_study_room([floor]), only)

  def test_skips_rooms_not_open(self):
    maintained = self._room(101, co2=600)
    maintained.set_maintenance(True)
    drilled = self._room(102, co2=600)
    drilled.set_fire_drill(True)
    open_room = self._room(103, co2=850)
    floor = self._floor(1, maintained, drilled, open_room)

    self.assertIs(
        study_room_recommender.recommend_study_room([floor]), open_room
    )

  def test_climbs_while_floors_improve(self):
    top = self._room(301, co2=600)
    floors = [
        self._floor(1, self._room(101, co2=850)),
        self._floor(2, self._room(201, co2=600, people=8)),
        self._floor(3, top),
    ]

    self.assertIs(study_room_recommender.recommend_study_room(floors), top)

  def test_stops_at_first_floor_not_better(self):
    second = self._room(201, co2=600, people=8)
    floors = [
        self._floor(1, self._room(101, co2=850)),
        self._floor(2, second),
        self._floor(3, self._room(301, co2=700, people=6)),
        self._floor(4, self._room(401, co2=600)),
    ]

    self.assertIs(study_room_recommender.recommend_study_room(floors), second)

  def test_stops_at_floor_without_open_study_room(self):
    first = self._room(101, co2=850)
    floors = [
        self._floor(1, first),
        self._floor(2, self._room(201, co2=600, room_type=RoomType.OFFICE)),
        self._floor(3, self._room(301, co2=600)),
    ]

    self.assertIs(study_room_recommender.recommend_study_room(floors), first)

  def test_skips_lower_floors_without_study_rooms(self):
    second = self._room(201, co2=725)
    floors = [
        self._floor(1, self._room(101, co2=600, room_type=RoomType.OFFICE)),
        self._floor(2, second),
    ]

    self.assertIs(study_room_recommender.recommend_study_room(floors), second)

  def test_floors_sorted_by_number(self):
    top = self._room(201, co2=600)
    floors = [
        self._floor(2, top),
        self._floor(1, self._room(101, co2=725)),
    ]

    self.assertIs(study_room_recommender.recommend_study_room(floors), top)


if __name__ == '__main__':
  absltest.main()
