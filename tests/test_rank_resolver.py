import os
import sys
import unittest

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
from algorithms import RankResolver
from config import ScoringConfigLoader
from scoring_schema import TIER_ORDER, RankTier


class RankResolverTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self.ranks = RankResolver(ScoringConfigLoader().load())

    def test_thresholds(self) -> None:
        self.assertEqual(
            self.ranks.thresholds(),
            [
                (RankTier.BRONZE, 0),
                (RankTier.SILVER, 25),
                (RankTier.GOLD, 50),
                (RankTier.DIAMOND, 70),
                (RankTier.APEX, 85),
                (RankTier.MYTHIC, 95),
            ],
        )

    def test_rank_and_progress(self) -> None:
        self.assertEqual(self.ranks.rank_tier(52), RankTier.GOLD)
        self.assertAlmostEqual(self.ranks.rank_progress(52), 10.0)
        self.assertAlmostEqual(self.ranks.rank_progress(12.5), 50.0)

    def test_exact_boundaries(self) -> None:
        for tier, minimum in self.ranks.thresholds():
            self.assertEqual(self.ranks.rank_tier(minimum), tier)
            self.assertAlmostEqual(self.ranks.rank_progress(minimum), 100.0 if tier is RankTier.MYTHIC else 0.0)

    def test_just_below_boundary(self) -> None:
        self.assertEqual(self.ranks.rank_tier(94.99), RankTier.APEX)
        self.assertEqual(self.ranks.rank_tier(24.999), RankTier.BRONZE)

    def test_monotonic(self) -> None:
        previous = 0
        for step in range(0, 221):
            position = TIER_ORDER.index(self.ranks.rank_tier(step / 2 - 5))
            self.assertGreaterEqual(position, previous)
            previous = position

    def test_below_lowest_tier(self) -> None:
        self.assertEqual(self.ranks.rank_tier(-5), RankTier.BRONZE)
        self.assertEqual(self.ranks.rank_progress(-5), 0.0)

    def test_top_tier(self) -> None:
        self.assertEqual(self.ranks.rank_tier(100), RankTier.MYTHIC)
        self.assertEqual(self.ranks.rank_progress(97), 100.0)
        self.assertIsNone(RankResolver.next_tier(RankTier.MYTHIC))
        self.assertEqual(RankResolver.next_tier(RankTier.GOLD), RankTier.DIAMOND)

    def test_rank_info(self) -> None:
        info = self.ranks.rank_info(52)
        self.assertEqual(info.tier, RankTier.GOLD)
        self.assertEqual(info.color, "#ffd700")
        self.assertAlmostEqual(info.progress, 10.0)
        self.assertEqual(info.score, 52)


if __name__ == "__main__":
    unittest.main()
