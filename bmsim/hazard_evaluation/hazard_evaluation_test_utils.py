"""Test helpers for the hazard evaluation module.

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

from bmsim.simulator import sensors


class LevelSensor(sensors.HazardSensor):
  """Hazard sensor whose hazard level is simply its current reading."""

  def __init__(
      self,
      levels,
      manager,
      category=sensors.SensorCategory.ENVIRONMENTAL,
  ):
    if isinstance(levels, int):
      levels = [levels]
    super().__init__(levels, 1, manager)
    self.category = category

  @property
  def hazard_level(self):
    return self.current_reading


def occupancy_level_sensor(levels, manager):
  return LevelSensor(levels, manager, sensors.SensorCategory.OCCUPANCY)
