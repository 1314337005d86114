"""Numeric conversion helpers shared across the simulation.

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

import math


def round_half_up(value: float) -> int:
  """Rounds to the nearest integer, with halves rounded towards +infinity.

  The builtin round() uses banker's rounding, so round(2.5) == 2. Levels and
  durations in the simulation always round halves up: 2.5 -> 3, -2.5 -> -2.

  Args:
    value: The value to round.

  Returns:
    The rounded integer.
  """
  return int(math.floor(value + 0.5))


def percentage(numerator: float, denominator: float) -> int:
  """Returns numerator / denominator as a whole percentage, rounded half up."""
  return round_half_up(100.0 * numerator / denominator)
