"""Continuous-time recovery model for a trained muscle group.

Recovery follows an exponential approach to 1.0 with a time constant (tau)
that starts from a session-intensity table and is scaled by exercise type,
eccentric loading, training age and sleep. The recovered fraction is then
thresholded into three readiness states.
"""

import logging
import math

from models import RecoveryContext, RecoveryState, RecoveryStatus
from scoring_schema import DEFAULT_SESSION_RPE, DEFAULT_TAU_HOURS, RPE_MAX, RPE_MIN, ScoringConfig
from exceptions import PreconditionError

from .math_tools import MathTools

logger = logging.getLogger(__name__)


class RecoveryModel:
    """Compute recovered fraction and readiness status from elapsed time."""

    def __init__(self, config: ScoringConfig) -> None:
        self.config = config

    def base_tau_hours(self, session_rpe: float | None) -> float:
        """Base tau for a session RPE, rounded and clamped to 5-10.

        Missing or non-numeric RPE falls back to ``DEFAULT_TAU_HOURS``.
        """
        try:
            rpe = float(session_rpe)
        except (TypeError, ValueError):
            rpe = math.nan
        if math.isnan(rpe):
            logger.debug("Malformed session RPE %r, using tau %s h", session_rpe, DEFAULT_TAU_HOURS)
            return DEFAULT_TAU_HOURS
        key = MathTools.round_half_up(MathTools.clamp(rpe, RPE_MIN, RPE_MAX))
        return self.config.recovery.base_tau_hours.get(key, DEFAULT_TAU_HOURS)

    def exercise_type_multiplier(self, is_compound: bool) -> float:
        types = self.config.recovery.multipliers.exercise_type
        return types.compound if is_compound else types.isolation

    def eccentric_multiplier(self, is_eccentric_heavy: bool) -> float:
        return self.config.recovery.multipliers.eccentric_heavy if is_eccentric_heavy else 1.0

    def training_age_multiplier(self, training_age_years: float) -> float:
        bands = self.config.recovery.multipliers.training_age
        if training_age_years < 1:
            return bands.novice
        if training_age_years < 3:
            return bands.intermediate
        if training_age_years < 5:
            return bands.advanced
        return bands.expert

    def sleep_multiplier(self, sleep_hours: float) -> float:
        bands = self.config.recovery.multipliers.sleep_hours
        if sleep_hours >= 8:
            return bands.over_8
        if sleep_hours >= 7:
            return bands.from_7_to_8
        if sleep_hours >= 6:
            return bands.from_6_to_7
        if sleep_hours >= 5:
            return bands.from_5_to_6
        return bands.under_5

    def adjusted_tau_hours(
        self, session_rpe: float | None, context: RecoveryContext | None = None
    ) -> float:
        ctx = context or RecoveryContext()
        tau = self.base_tau_hours(session_rpe)
        tau *= self.exercise_type_multiplier(ctx.is_compound)
        tau *= self.eccentric_multiplier(ctx.is_eccentric_heavy)
        tau *= self.training_age_multiplier(ctx.training_age_years)
        tau *= self.sleep_multiplier(ctx.sleep_hours)
        return tau

    @staticmethod
    def recovery_fraction(hours_since_session: float, tau_hours: float) -> float:
        """Return ``1 - exp(-hours / tau)`` within [0, 1].

        Negative elapsed time counts as no time elapsed.
        """
        if not tau_hours > 0:
            raise PreconditionError(f"tau must be positive, got {tau_hours}", field="tau_hours")
        hours = hours_since_session if hours_since_session > 0 else 0.0
        return MathTools.clamp(-math.expm1(-hours / tau_hours), 0.0, 1.0)

    def status_for(self, fraction: float) -> RecoveryStatus:
        states = self.config.recovery.states
        if fraction < states.need_recovery.maximum:
            return RecoveryStatus.NEED_RECOVERY
        if fraction < states.recovering.maximum:
            return RecoveryStatus.RECOVERING
        return RecoveryStatus.READY

    def recovery_state(
        self,
        hours_since_session: float,
        session_rpe: float | None = DEFAULT_SESSION_RPE,
        context: RecoveryContext | None = None,
    ) -> RecoveryState:
        tau = self.adjusted_tau_hours(session_rpe, context)
        fraction = self.recovery_fraction(hours_since_session, tau)
        return RecoveryState(fraction=fraction, status=self.status_for(fraction), tau_hours=tau)
