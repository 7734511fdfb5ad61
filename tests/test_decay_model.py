import os
import sys
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from algorithms import DetrainingDecayModel
from config import ScoringConfigLoader


class DetrainingDecayModelTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.model = DetrainingDecayModel(ScoringConfigLoader().load())

    def test_tau_selection(self) -> None:
        self.assertEqual(self.model.tau_half_days(45, 2), 42)
        self.assertEqual(self.model.tau_half_days(45, 0.5), 28)
        self.assertEqual(self.model.tau_half_days(30, 2), 56)
        self.assertEqual(self.model.tau_half_days(30, 0), 35)
        self.assertEqual(self.model.tau_half_days(40, 1), 42)

    def test_no_inactivity(self) -> None:
        self.assertEqual(self.model.decay_factor(0, 30, 2), 1.0)
        self.assertEqual(self.model.decay_factor(-3, 30, 2), 1.0)

    def test_floor_after_two_tau(self) -> None:
        self.assertEqual(self.model.decay_factor(112, 30, 2), 0.5)
        self.assertEqual(self.model.decay_factor(1000, 30, 2), 0.5)
        self.assertEqual(self.model.decay_factor(56, 45, 0), 0.5)

    def test_power_law(self) -> None:
        self.assertAlmostEqual(self.model.decay_factor(14, 30, 2), 1 - 0.25**1.5)
        self.assertAlmostEqual(self.model.decay_factor(14, 30, 2), 0.875)

    def test_clamped_to_floor_before_two_tau(self) -> None:
        self.assertEqual(self.model.decay_factor(56, 30, 2), 0.5)

    def test_non_increasing(self) -> None:
        values = [self.model.decay_factor(d, 50, 3) for d in range(0, 120)]
        for prev, cur in zip(values, values[1:]):
            self.assertGreaterEqual(prev, cur)
        for v in values:
            self.assertTrue(0.5 <= v <= 1.0)

    def test_apply_decay(self) -> None:
        score = 80.0
        self.assertAlmostEqual(self.model.apply_decay(score, 14, 30, 2), 70.0)
        self.assertEqual(score, 80.0)
        self.assertEqual(self.model.apply_decay(score, 0, 30, 2), 80.0)

    def test_decay_record(self) -> None:
        factor = self.model.decay(14, 30, 2)
        self.assertEqual(factor.tau_half_days, 56)
        self.assertAlmostEqual(factor.retention, 0.875)


if __name__ == "__main__":
    unittest.main()
