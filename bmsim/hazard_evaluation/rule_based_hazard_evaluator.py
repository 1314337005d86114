"""Evaluates hazard levels using a fixed set of rules.

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

from absl import logging

from bmsim.hazard_evaluation import hazard_evaluator
from bmsim.simulator import sensors as sensors_py


class RuleBasedHazardEvaluator(hazard_evaluator.HazardEvaluator):
  """Combines hazard sensors by averaging, gated by occupancy.

  Rules, for two or more sensors:
    * Any non-occupancy sensor at the maximum level makes the location
      maximally hazardous.
    * Otherwise the level is the floored mean of the non-occupancy sensors.
    * If an occupancy sensor is present, that mean is multiplied by
      occupancy_level // 100, which is 1 only when the room is at capacity.

  A single sensor's level is returned unchanged, and no sensors means no
  hazard.

  Attributes:
    sensors: Sensors evaluated when none are passed explicitly.
  """

  def __init__(self, sensors: Sequence[sensors_py.HazardSensor]):
    self._sensors = tuple(sensors)

  @property
  def sensors(self) -> Sequence[sensors_py.HazardSensor]:
    return self._sensors

  @property
  def name(self) -> str:
    return 'RuleBased'

  def evaluate_hazard_level(
      self, sensors: Optional[Sequence[sensors_py.HazardSensor]] = None
  ) -> int:
    sensors = self._sensors if sensors is None else tuple(sensors)

    if not sensors:
      return 0
    if len(sensors) == 1:
      return sensors[0].hazard_level

    occupancy_sensor = None
    other_levels = []
    for sensor in sensors:
      if sensor.category == sensors_py.SensorCategory.OCCUPANCY:
        if occupancy_sensor is not None:
          logging.warning(
              'More than one occupancy sensor given; only the last is used.'
          )
        occupancy_sensor = sensor
        continue
      level = sensor.hazard_level
      if level == sensors_py.MAX_LEVEL:
        return sensors_py.MAX_LEVEL
      other_levels.append(level)

    mean_level = sum(other_levels) // len(other_levels) if other_levels else 0
    if occupancy_sensor is None:
      return mean_level
    return mean_level * (occupancy_sensor.hazard_level // sensors_py.MAX_LEVEL)
