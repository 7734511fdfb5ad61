import os
import sys
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from algorithms import ScoreAggregator
from models import MuscleContribution


class ScoreAggregatorTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.contributions = [
            MuscleContribution(exercise_id="bench", muscle_group_id="chest", is_primary=True, contribution_percentage=60),
            MuscleContribution(exercise_id="bench", muscle_group_id="triceps", contribution_percentage=25),
            MuscleContribution(exercise_id="bench", muscle_group_id="shoulders", contribution_percentage=15),
            MuscleContribution(exercise_id="ohp", muscle_group_id="shoulders", is_primary=True, contribution_percentage=70),
            MuscleContribution(exercise_id="ohp", muscle_group_id="triceps", contribution_percentage=30),
            MuscleContribution(exercise_id="row", muscle_group_id="back", is_primary=True, contribution_percentage=80),
        ]
        self.exercise_scores = {"bench": 60.0, "ohp": 40.0}

    def test_muscle_group_score(self) -> None:
        self.assertAlmostEqual(ScoreAggregator.muscle_group_score([80.0, 40.0], [3.0, 1.0]), 70.0)

    def test_muscle_group_score_zero_weight(self) -> None:
        self.assertEqual(ScoreAggregator.muscle_group_score([80.0, 40.0], [0.0, 0.0]), 0.0)
        self.assertEqual(ScoreAggregator.muscle_group_score([], []), 0.0)

    def test_muscle_group_score_missing_weight(self) -> None:
        self.assertAlmostEqual(ScoreAggregator.muscle_group_score([80.0, 40.0], [2.0]), 80.0)

    def test_overall_counts_untrained_groups(self) -> None:
        scores = [60.0, 40.0, 0.0, 0.0]
        overall = ScoreAggregator.overall_score(scores)
        self.assertAlmostEqual(overall, 100.0 / 4)
        self.assertLess(overall, (60.0 + 40.0) / 2)

    def test_overall_empty(self) -> None:
        self.assertEqual(ScoreAggregator.overall_score([]), 0.0)

    def test_training_a_group_raises_overall(self) -> None:
        before = ScoreAggregator.overall_score([50.0, 0.0, 0.0])
        after = ScoreAggregator.overall_score([50.0, 10.0, 0.0])
        self.assertGreater(after, before)

    def test_muscle_group_scores(self) -> None:
        result = ScoreAggregator.muscle_group_scores(
            self.exercise_scores,
            self.contributions,
            muscle_groups=["chest", "triceps", "shoulders", "back", "calves"],
        )
        self.assertAlmostEqual(result["chest"], 60.0)
        self.assertAlmostEqual(result["triceps"], (60.0 * 25 + 40.0 * 30) / 55)
        self.assertAlmostEqual(result["shoulders"], (60.0 * 15 + 40.0 * 70) / 85)
        self.assertEqual(result["back"], 0.0)
        self.assertEqual(result["calves"], 0.0)

    def test_muscle_group_scores_min_contribution(self) -> None:
        result = ScoreAggregator.muscle_group_scores(
            self.exercise_scores, self.contributions, min_contribution=50
        )
        self.assertEqual(set(result), {"chest", "shoulders"})
        self.assertAlmostEqual(result["shoulders"], 40.0)


if __name__ == "__main__":
    unittest.main()
