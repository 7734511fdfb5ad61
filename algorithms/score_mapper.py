from models import Sex
from scoring_schema import ScoringConfig

from .math_tools import MathTools


class ExerciseScoreMapper:
    """Map normalized strength onto the bounded exercise score.

    The map is affine in the strength ratio and saturates at the configured
    score bounds; it is not a logistic curve.
    """

    def __init__(self, config: ScoringConfig) -> None:
        self.config = config

    def base_rel_norm(self, sex: Sex | str) -> float:
        norms = self.config.scoring.base_rel_norm
        value = sex.value if isinstance(sex, Sex) else str(sex).lower()
        if value == Sex.FEMALE.value:
            return norms.female
        if value == Sex.MALE.value:
            return norms.male
        return norms.other

    def relative_norm(self, sex: Sex | str, strength_standard: float = 1.0) -> float:
        return self.base_rel_norm(sex) * strength_standard

    def exercise_score(self, relative_strength: float, rel_norm: float) -> float:
        scoring = self.config.scoring
        if rel_norm <= 0:
            return MathTools.clamp(0.0, scoring.min_score, scoring.max_score)
        ratio = relative_strength / rel_norm
        score = scoring.base_score_multiplier * ratio + scoring.base_score_offset
        return MathTools.clamp(score, scoring.min_score, scoring.max_score)
