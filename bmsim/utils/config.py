"""Loading of the simulation's gin configuration.

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

import os
from typing import Optional, Sequence

from absl import logging
import gin

# pylint: disable=unused-import
# these imports are necessary for proper gin setup, even if not referenced
# do not remove
from bmsim.simulator.maintenance_rotation import MaintenanceRotation
from bmsim.simulator.room import Room
from bmsim.simulator.sensors import CarbonDioxideSensor
from bmsim.simulator.sensors import OccupancySensor
from bmsim.simulator.sensors import TemperatureSensor

# pylint: enable=unused-import

# Path to the root directory of the package:
ROOT_DIR = os.path.join(os.path.dirname(__file__), "..")
CONFIG_PATH = os.path.join(ROOT_DIR, "configs")
DEFAULT_CONFIG_FILE = "default.gin"


def get_default_config_path() -> str:
  """Get path to the default gin config.

  Returns:
      Path to the default gin config.
  """
  return os.path.join(CONFIG_PATH, DEFAULT_CONFIG_FILE)


def load_config(
    config_files: Optional[Sequence[str]] = None,
    bindings: Optional[Sequence[str]] = None,
) -> None:
  """Replaces the active gin configuration.

  Args:
      config_files: Gin files to parse, in order. Defaults to the default
        config.
      bindings: Extra gin bindings applied after the files, e.g.
        "TemperatureSensor.fire_threshold = 60".
  """
  if config_files is None:
    config_files = [get_default_config_path()]

  with gin.unlock_config():
    gin.clear_config()
    gin.parse_config_files_and_bindings(config_files, bindings)
  logging.info(
      "Loaded gin config from %s with %d bindings.",
      list(config_files),
      len(bindings or []),
  )
