"""Contract for anything advanced one simulated minute at a time.

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


class TimedItem(metaclass=abc.ABCMeta):
  """An item whose state changes as simulated time passes.

  Timed items own all of their state. They are advanced by a
  TimedItemManager, never by each other.
  """

  @abc.abstractmethod
  def elapse_one_minute(self) -> None:
    """Advances the item by one simulated minute."""
