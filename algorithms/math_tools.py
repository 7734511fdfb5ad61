import math
from typing import Sequence

import numpy as np


class MathTools:
    """Provides essential mathematical utilities for scoring calculations."""

    @staticmethod
    def clamp(value: float, min_value: float, max_value: float) -> float:
        """Clamp ``value`` to the inclusive range [min_value, max_value]."""
        if min_value > max_value:
            raise ValueError("min_value must not exceed max_value")
        if math.isnan(value):
            return min_value
        return max(min_value, min(value, max_value))

    @staticmethod
    def round_half_up(value: float) -> int:
        """Round to the nearest integer with halves going up (7.5 -> 8)."""
        return int(math.floor(value + 0.5))

    @staticmethod
    def mean(values: Sequence[float]) -> float:
        """Arithmetic mean, 0.0 for an empty sequence."""
        if len(values) == 0:
            return 0.0
        return float(np.mean(np.asarray(values, dtype=float)))

    @staticmethod
    def weighted_mean(values: Sequence[float], weights: Sequence[float]) -> float:
        """Return sum(v * w) / sum(w).

        Values without a matching weight count with weight 0; surplus weights
        are ignored. A zero total weight yields 0.0.
        """
        if len(values) == 0 or len(weights) == 0:
            return 0.0
        vals = np.asarray(values, dtype=float)
        w = np.zeros(len(vals), dtype=float)
        n = min(len(vals), len(weights))
        w[:n] = np.asarray(weights[:n], dtype=float)
        total = float(np.sum(w))
        if total == 0:
            return 0.0
        return float(np.dot(vals, w)) / total

    @staticmethod
    def volume_load(sets: int, reps: int, load_kg: float) -> float:
        """Compute training volume as sets times reps times load."""
        return float(sets * reps * load_kg)
