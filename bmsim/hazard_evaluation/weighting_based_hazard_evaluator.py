"""Evaluates hazard levels as a weighted average of sensor levels.

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

from typing import Final, Mapping, Optional, Sequence

from bmsim.hazard_evaluation import hazard_evaluator
from bmsim.simulator import sensors as sensors_py
from bmsim.utils import conversion_utils
from bmsim.utils import errors

TOTAL_WEIGHTING: Final[int] = 100


class WeightingBasedHazardEvaluator(hazard_evaluator.HazardEvaluator):
  """Weights each sensor's hazard level by a percentage.

  Attributes:
    weightings: Map of sensor to its weighting in [0, 100]. The weightings sum
      to exactly 100.
  """

  def __init__(self, weightings: Mapping[sensors_py.HazardSensor, int]):
    """Initializes the evaluator.

    Args:
      weightings: Map of sensor to its weighting.

    Raises:
      InvalidConfigurationError: If a weighting is outside [0, 100] or the
        weightings do not sum to 100.
    """
    for sensor, weighting in weightings.items():
      if weighting < 0 or weighting > TOTAL_WEIGHTING:
        raise errors.InvalidConfigurationError(
            f'Weighting of {sensor!r} must be in [0, {TOTAL_WEIGHTING}], got'
            f' {weighting}.'
        )
    total = sum(weightings.values())
    if total != TOTAL_WEIGHTING:
      raise errors.InvalidConfigurationError(
          f'Weightings must sum to {TOTAL_WEIGHTING}, got {total}.'
      )
    self._weightings = dict(weightings)

  @property
  def weightings(self) -> Mapping[sensors_py.HazardSensor, int]:
    return dict(self._weightings)

  @property
  def name(self) -> str:
    return 'WeightingBased'

  def get_weightings(self) -> list[int]:
    """Returns the weightings of all monitored sensors, in mapping order."""
    return list(self._weightings.values())

  def evaluate_hazard_level(
      self, sensors: Optional[Sequence[sensors_py.HazardSensor]] = None
  ) -> int:
    """Returns the weighted average of the sensors' hazard levels.

    Each sensor is paired with its own weighting only and counts once, even
    if it is passed more than once.

    Args:
      sensors: Configured sensors to evaluate. Defaults to all of them.

    Raises:
      KeyError: If a sensor has no configured weighting.
    """
    if sensors is None:
      sensors = self._weightings.keys()
    else:
      sensors = dict.fromkeys(sensors)
    weighted_sum = sum(
        sensor.hazard_level * self._weightings[sensor] for sensor in sensors
    )
    return conversion_utils.round_half_up(weighted_sum / TOTAL_WEIGHTING)
