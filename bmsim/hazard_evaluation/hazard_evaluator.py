"""Base class for strategies combining hazard sensors into one level.

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
from typing import Optional, Sequence

from bmsim.simulator import sensors as sensors_py


class HazardEvaluator(metaclass=abc.ABCMeta):
  """Computes the hazard level of a location from several hazard sensors.

  Evaluators are not timed items: they are evaluated on demand against the
  sensors' current readings.
  """

  @abc.abstractmethod
  def evaluate_hazard_level(
      self, sensors: Optional[Sequence[sensors_py.HazardSensor]] = None
  ) -> int:
    """Returns the hazard level of a location, in [0, 100].

    Args:
      sensors: Sensors to evaluate. Defaults to the sensors the evaluator was
        configured with.
    """

  @property
  @abc.abstractmethod
  def name(self) -> str:
    """Short name identifying the evaluation strategy."""

  def __str__(self) -> str:
    return self.name
