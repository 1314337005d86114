"""Tests for periodic_signal.

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

from bmsim.simulator import periodic_signal
from bmsim.simulator import timed_item_manager
from bmsim.utils import errors


class PeriodicSignalTest(parameterized.TestCase):

  def setUp(self):
    super().setUp()
    self.manager = timed_item_manager.TimedItemManager()

  def test_init_attributes(self):
    signal = periodic_signal.PeriodicSignal([24, 25, 26], 2, self.manager)

    self.assertEqual(signal.current_reading, 24)
    self.assertEqual(signal.time_elapsed, 0)
    self.assertEqual(signal.update_frequency, 2)
    self.assertSequenceEqual(signal.readings, (24, 25, 26))
    self.assertEqual(signal.rotation_duration, 6)

  def test_registers_with_manager(self):
    signal = periodic_signal.PeriodicSignal([1], 1, self.manager)

    self.assertSequenceEqual(self.manager.timed_items, (signal,))

  def test_readings_are_copied(self):
    readings = [3, 4]
    signal = periodic_signal.PeriodicSignal(readings, 1, self.manager)

    readings[0] = 99

    self.assertEqual(signal.current_reading, 3)
    self.assertSequenceEqual(signal.readings, (3, 4))

  @parameterized.named_parameters(
      ('frequency_zero', [1, 2], 0),
      ('frequency_six', [1, 2], 6),
      ('frequency_negative', [1, 2], -1),
      ('frequency_fractional', [1, 2], 2.5),
      ('frequency_whole_float', [1, 2], 2.0),
      ('frequency_string', [1, 2], '2'),
      ('empty_readings', [], 3),
      ('negative_reading', [4, -1, 6], 1),
  )
  def test_init_raises_error(self, readings, update_frequency):
    with self.assertRaises(errors.InvalidConfigurationError):
      periodic_signal.PeriodicSignal(readings, update_frequency, self.manager)
    self.assertLen(self.manager, 0)

  def test_invalid_configuration_is_value_error(self):
    with self.assertRaises(ValueError):
      periodic_signal.PeriodicSignal([], 1, self.manager)

  @parameterized.parameters(1, 5)
  def test_boundary_frequencies_accepted(self, update_frequency):
    signal = periodic_signal.PeriodicSignal([0], update_frequency, self.manager)

    self.assertEqual(signal.update_frequency, update_frequency)

  def test_zero_reading_accepted(self):
    signal = periodic_signal.PeriodicSignal([0, 0], 1, self.manager)

    self.assertEqual(signal.current_reading, 0)

  def test_holds_each_reading_for_update_frequency_minutes(self):
    signal = periodic_signal.PeriodicSignal([10, 20, 30], 2, self.manager)
    observed = []
    for _ in range(8):
      self.manager.elapse_one_minute()
      observed.append(signal.current_reading)

    self.assertEqual(observed, [10, 20, 20, 30, 30, 10, 10, 20])
    self.assertEqual(signal.time_elapsed, 8)

  @parameterized.named_parameters(
      ('single_reading', [7], 3),
      ('frequency_one', [1, 2, 3, 4], 1),
      ('frequency_five', [5, 0, 9], 5),
      ('frequency_three', [24, 25, 25, 23, 26], 3),
  )
  def test_reading_follows_closed_form(self, readings, update_frequency):
    signal = periodic_signal.PeriodicSignal(
        readings, update_frequency, self.manager
    )
    rotation = len(readings) * update_frequency

    for minute in range(1, 3 * rotation + 1):
      signal.elapse_one_minute()
      expected = readings[(minute % rotation) // update_frequency]
      self.assertEqual(signal.current_reading, expected, msg=f'at {minute}')

  @parameterized.parameters(1, 2, 3, 4, 5)
  def test_wraps_to_first_reading_after_full_rotation(self, update_frequency):
    readings = [11, 12, 13]
    signal = periodic_signal.PeriodicSignal(
        readings, update_frequency, self.manager
    )

    for _ in range(len(readings) * update_frequency):
      signal.elapse_one_minute()

    self.assertEqual(signal.current_reading, 11)


if __name__ == '__main__':
  absltest.main()
