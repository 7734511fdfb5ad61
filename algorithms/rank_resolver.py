from models import RankInfo
from scoring_schema import TIER_ORDER, RankTier, ScoringConfig

from .math_tools import MathTools


class RankResolver:
    """Resolve scores into rank tiers and progress toward the next tier."""

    def __init__(self, config: ScoringConfig) -> None:
        self.config = config

    def thresholds(self) -> list[tuple[RankTier, float]]:
        """Tier minimums in ascending order."""
        return [(tier, self.config.rank_tiers[tier].minimum) for tier in TIER_ORDER]

    def rank_tier(self, score: float) -> RankTier:
        """Highest tier whose minimum is at or below ``score``.

        Scores below the lowest minimum still resolve to the lowest tier.
        """
        result = TIER_ORDER[0]
        for tier, minimum in self.thresholds():
            if score >= minimum:
                result = tier
        return result

    @staticmethod
    def next_tier(tier: RankTier) -> RankTier | None:
        position = TIER_ORDER.index(tier)
        if position + 1 < len(TIER_ORDER):
            return TIER_ORDER[position + 1]
        return None

    def rank_progress(self, score: float) -> float:
        """Percent progress from the current tier minimum to the next one."""
        tier = self.rank_tier(score)
        upper = self.next_tier(tier)
        if upper is None:
            return 100.0
        lower_min = self.config.rank_tiers[tier].minimum
        upper_min = self.config.rank_tiers[upper].minimum
        progress = (score - lower_min) / (upper_min - lower_min) * 100
        return MathTools.clamp(progress, 0.0, 100.0)

    def rank_info(self, score: float) -> RankInfo:
        tier = self.rank_tier(score)
        return RankInfo(
            tier=tier,
            score=score,
            color=self.config.rank_tiers[tier].color,
            progress=self.rank_progress(score),
        )
