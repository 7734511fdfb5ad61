from typing import Iterable, Mapping, Sequence

from models import MuscleContribution

from .math_tools import MathTools


class ScoreAggregator:
    """Combine exercise scores into muscle-group and overall scores."""

    @staticmethod
    def muscle_group_score(scores: Sequence[float], weights: Sequence[float]) -> float:
        """Volume-weighted mean of exercise scores, 0.0 when no weight is given."""
        return MathTools.weighted_mean(scores, weights)

    @staticmethod
    def overall_score(muscle_group_scores: Sequence[float]) -> float:
        """Mean over every muscle group.

        Untrained groups count with their 0 score so that training any
        group always raises the overall score.
        """
        return MathTools.mean(list(muscle_group_scores))

    @classmethod
    def muscle_group_scores(
        cls,
        exercise_scores: Mapping[str, float],
        contributions: Iterable[MuscleContribution],
        muscle_groups: Iterable[str] | None = None,
        min_contribution: float = 0.0,
    ) -> dict[str, float]:
        """Score each muscle group from per-exercise scores.

        Each contribution row weights its exercise's score by the
        contribution percentage. Rows below ``min_contribution`` and rows for
        exercises without a score are skipped. Groups named in
        ``muscle_groups`` but never trained score 0.
        """
        grouped: dict[str, tuple[list[float], list[float]]] = {}
        for contrib in contributions:
            if contrib.contribution_percentage < min_contribution:
                continue
            if contrib.exercise_id not in exercise_scores:
                continue
            scores, weights = grouped.setdefault(contrib.muscle_group_id, ([], []))
            scores.append(exercise_scores[contrib.exercise_id])
            weights.append(contrib.contribution_percentage)

        result = {name: 0.0 for name in (muscle_groups or [])}
        for name, (scores, weights) in grouped.items():
            result[name] = cls.muscle_group_score(scores, weights)
        return result
