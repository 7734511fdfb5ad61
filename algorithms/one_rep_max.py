import logging
import math
from typing import Iterable

from models import LiftObservation, OneRepMaxEstimate
from scoring_schema import DEFAULT_RIR_PERCENTAGE, ONE_RM_METHODS, ScoringConfig

logger = logging.getLogger(__name__)


class OneRepMaxEstimator:
    """Estimate a one-rep max from a working set.

    Out-of-range inputs never raise: non-positive reps give 0 and negative
    loads are treated as 0, since these are live user-entered numbers.
    """

    EPL_COEFF: float = 0.0333
    BRZ_NUMERATOR: float = 1.0278
    BRZ_COEFF: float = 0.0278
    # Last rep count with a positive Brzycki denominator (1.0278 - 0.0278 * 36 = 0.027).
    BRZ_MAX_REPS: int = 36

    def __init__(self, config: ScoringConfig) -> None:
        self.config = config

    @classmethod
    def brzycki(cls, load_kg: float, reps: int) -> float:
        """Brzycki estimate, reliable for 1-10 reps.

        Rep counts past ``BRZ_MAX_REPS`` are clamped so the estimate stays
        finite and non-decreasing instead of crossing the singularity.
        """
        if reps <= 0:
            return 0.0
        load = max(0.0, float(load_kg))
        if reps == 1:
            return load
        if reps > cls.BRZ_MAX_REPS:
            logger.debug("Brzycki reps %s clamped to %s", reps, cls.BRZ_MAX_REPS)
            reps = cls.BRZ_MAX_REPS
        return load / (cls.BRZ_NUMERATOR - cls.BRZ_COEFF * reps)

    @classmethod
    def epley(cls, load_kg: float, reps: int) -> float:
        """Epley estimate, monotonic for all rep counts."""
        if reps <= 0:
            return 0.0
        load = max(0.0, float(load_kg))
        if reps == 1:
            return load
        return load * (1 + cls.EPL_COEFF * reps)

    def percentage_for_rir(self, rir: float) -> float:
        """Fraction of 1RM lifted for a single at ``rir`` reps in reserve."""
        try:
            value = float(rir)
        except (TypeError, ValueError):
            value = math.nan
        key = int(value) if value.is_integer() else None
        pct = self.config.rir_to_percentage.get(key) if key is not None else None
        if pct is None:
            logger.debug("No RIR percentage for %s, using %s", rir, DEFAULT_RIR_PERCENTAGE)
            return DEFAULT_RIR_PERCENTAGE
        return pct

    def rir_based(self, load_kg: float, rir: float) -> float:
        return max(0.0, float(load_kg)) / self.percentage_for_rir(rir)

    def estimate(
        self,
        load_kg: float,
        reps: int,
        rir: float | None = None,
        method: str | None = None,
    ) -> float:
        """Estimate 1RM with the configured method.

        A single with a reported RIR uses the RIR percentage table; every
        other set uses ``method`` or the configured default method.
        """
        if reps <= 0:
            return 0.0
        if rir is not None and reps == 1:
            return self.rir_based(load_kg, rir)
        method = method or self.config.one_rm_estimation.default_method
        if method not in ONE_RM_METHODS:
            raise ValueError(f"unknown 1RM method: {method}")
        if method == "epley":
            return self.epley(load_kg, reps)
        return self.brzycki(load_kg, reps)

    def is_low_confidence(self, reps: int) -> bool:
        return reps > self.config.one_rm_estimation.low_confidence_threshold

    def best_estimate(self, observations: Iterable[LiftObservation]) -> OneRepMaxEstimate:
        """Return the highest estimate across working sets, 0 when none qualify."""
        best = OneRepMaxEstimate(value_kg=0.0, reps=0, low_confidence=False)
        for obs in observations:
            value = self.estimate(obs.load_kg, obs.reps, obs.rir)
            if value > best.value_kg:
                best = OneRepMaxEstimate(
                    value_kg=value,
                    reps=obs.reps,
                    low_confidence=self.is_low_confidence(obs.reps),
                )
        return best
