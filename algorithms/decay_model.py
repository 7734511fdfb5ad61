from models import DecayFactor
from scoring_schema import ScoringConfig

from .math_tools import MathTools


class DetrainingDecayModel:
    """Power-law loss of an earned score during inactivity."""

    TRAINED_YEARS: float = 1.0

    def __init__(self, config: ScoringConfig) -> None:
        self.config = config

    def tau_half_days(self, age: float, training_age_years: float) -> float:
        decay = self.config.decay
        older = age >= decay.age_threshold
        trained = training_age_years >= self.TRAINED_YEARS
        if older:
            return decay.tau_half_days.older_trained if trained else decay.tau_half_days.older_novice
        return decay.tau_half_days.young_trained if trained else decay.tau_half_days.young_novice

    def decay(self, days_inactive: float, age: float, training_age_years: float) -> DecayFactor:
        """Retention after ``days_inactive`` days: ``1 - (days / tau) ** alpha``.

        No inactivity keeps the full score; from ``2 * tau`` days on the
        retention sits at the configured floor.
        """
        tau = self.tau_half_days(age, training_age_years)
        min_retention = self.config.decay.min_retention
        if not days_inactive > 0:
            retention = 1.0
        elif days_inactive >= 2 * tau:
            retention = min_retention
        else:
            phi = 1 - (days_inactive / tau) ** self.config.decay.alpha
            retention = MathTools.clamp(phi, min_retention, 1.0)
        return DecayFactor(retention=retention, tau_half_days=tau)

    def decay_factor(self, days_inactive: float, age: float, training_age_years: float) -> float:
        return self.decay(days_inactive, age, training_age_years).retention

    def apply_decay(
        self, score: float, days_inactive: float, age: float, training_age_years: float
    ) -> float:
        return score * self.decay_factor(days_inactive, age, training_age_years)
