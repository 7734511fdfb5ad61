from __future__ import annotations

from typing import Iterable, Mapping, Sequence

from algorithms import (
    DetrainingDecayModel,
    ExerciseScoreMapper,
    OneRepMaxEstimator,
    RankResolver,
    RecoveryModel,
    RelativeStrengthNormalizer,
    ScoreAggregator,
    VolumeModel,
)
from config import DEFAULT_CONFIG_PATH, ScoringConfigLoader
from models import (
    ExerciseDifficulty,
    LiftObservation,
    MuscleContribution,
    OneRepMaxEstimate,
    PersonContext,
    RankInfo,
    RecoveryContext,
    RecoveryState,
    ScoreResult,
    Sex,
    VolumeLandmarks,
)
from scoring_schema import DEFAULT_SESSION_RPE, RankTier, ScoringConfig


class ScoringService:
    """Strength scoring, ranking, recovery and detraining for one configuration.

    The service binds a frozen :class:`ScoringConfig` at construction and holds
    no other state, so a single instance can be shared between threads.
    """

    def __init__(self, config: ScoringConfig) -> None:
        self.config = config
        self.estimator = OneRepMaxEstimator(config)
        self.normalizer = RelativeStrengthNormalizer(config)
        self.mapper = ExerciseScoreMapper(config)
        self.aggregator = ScoreAggregator()
        self.ranks = RankResolver(config)
        self.recovery = RecoveryModel(config)
        self.detraining = DetrainingDecayModel(config)
        self.volume = VolumeModel(config)

    @classmethod
    def from_yaml(cls, path: str = DEFAULT_CONFIG_PATH) -> "ScoringService":
        return cls(ScoringConfigLoader(path).load())

    # -- one-rep max -------------------------------------------------------

    def estimate_one_rep_max(
        self, load_kg: float, reps: int, rir: float | None = None, method: str | None = None
    ) -> float:
        return self.estimator.estimate(load_kg, reps, rir, method)

    def is_low_confidence(self, reps: int) -> bool:
        return self.estimator.is_low_confidence(reps)

    def best_estimate(self, observations: Iterable[LiftObservation]) -> OneRepMaxEstimate:
        return self.estimator.best_estimate(observations)

    # -- normalization and scores -----------------------------------------

    def relative_strength(
        self, one_rm_kg: float, bodyweight_kg: float, exponent: float | None = None
    ) -> float:
        return self.normalizer.relative_strength(one_rm_kg, bodyweight_kg, exponent)

    def age_adjustment_factor(self, age: float) -> float:
        return self.normalizer.age_adjustment_factor(age)

    def relative_norm(self, sex: Sex | str, strength_standard: float = 1.0) -> float:
        return self.mapper.relative_norm(sex, strength_standard)

    def exercise_score(self, relative_strength: float, rel_norm: float) -> float:
        return self.mapper.exercise_score(relative_strength, rel_norm)

    def strength_score(
        self,
        one_rm_kg: float,
        person: PersonContext,
        difficulty: ExerciseDifficulty | None = None,
    ) -> ScoreResult:
        """Run the full pipeline from an estimated max to an exercise score."""
        difficulty = difficulty or ExerciseDifficulty()
        adjusted = self.normalizer.adjusted_relative_strength(
            one_rm_kg, person.bodyweight_kg, person.age
        )
        rel_norm = self.mapper.relative_norm(person.sex, difficulty.strength_standard)
        return ScoreResult(score=self.mapper.exercise_score(adjusted, rel_norm))

    # -- aggregation -------------------------------------------------------

    def muscle_group_score(self, scores: Sequence[float], weights: Sequence[float]) -> float:
        return self.aggregator.muscle_group_score(scores, weights)

    def muscle_group_scores(
        self,
        exercise_scores: Mapping[str, float],
        contributions: Iterable[MuscleContribution],
        muscle_groups: Iterable[str] | None = None,
        min_contribution: float = 0.0,
    ) -> dict[str, float]:
        return self.aggregator.muscle_group_scores(
            exercise_scores, contributions, muscle_groups, min_contribution
        )

    def overall_score(self, muscle_group_scores: Sequence[float]) -> float:
        return self.aggregator.overall_score(muscle_group_scores)

    # -- ranks -------------------------------------------------------------

    def rank_tier(self, score: float) -> RankTier:
        return self.ranks.rank_tier(score)

    def rank_progress(self, score: float) -> float:
        return self.ranks.rank_progress(score)

    def rank_info(self, score: float) -> RankInfo:
        return self.ranks.rank_info(score)

    # -- recovery and detraining ------------------------------------------

    def recovery_state(
        self,
        hours_since_session: float,
        session_rpe: float | None = DEFAULT_SESSION_RPE,
        context: RecoveryContext | None = None,
    ) -> RecoveryState:
        return self.recovery.recovery_state(hours_since_session, session_rpe, context)

    def decay_factor(self, days_inactive: float, age: float, training_age_years: float) -> float:
        return self.detraining.decay_factor(days_inactive, age, training_age_years)

    def apply_decay(
        self, score: float, days_inactive: float, age: float, training_age_years: float
    ) -> float:
        return self.detraining.apply_decay(score, days_inactive, age, training_age_years)

    # -- volume ------------------------------------------------------------

    def volume_landmarks(self, training_age_years: float) -> VolumeLandmarks:
        return self.volume.volume_landmarks(training_age_years)

    def volume_load(self, sets: int, reps: int, load_kg: float) -> float:
        return self.volume.volume_load(sets, reps, load_kg)
