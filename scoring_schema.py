from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Literal, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from exceptions import ConfigError

# Engine-level fallbacks. These are the only constants the engine applies
# without reading them from the configuration.
DEFAULT_RIR_PERCENTAGE = 0.85
DEFAULT_TAU_HOURS = 36.0
DEFAULT_SESSION_RPE = 7
RPE_MIN = 5
RPE_MAX = 10
DEFAULT_CONFIG_VERSION = "unversioned"
DEFAULT_BASE_REL_NORM = {"male": 1.0, "female": 0.8, "other": 1.0}

AGE_BANDS = ("18-24", "25-35", "36-45", "46-55", "56-65", "65+")
ONE_RM_METHODS = ("brzycki", "epley")


class RankTier(str, Enum):
    """Rank tiers ordered from lowest to highest."""

    BRONZE = "bronze"
    SILVER = "silver"
    GOLD = "gold"
    DIAMOND = "diamond"
    APEX = "apex"
    MYTHIC = "mythic"


TIER_ORDER: tuple[RankTier, ...] = tuple(RankTier)


class _Section(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class OneRmEstimationConfig(_Section):
    default_method: Literal["brzycki", "epley"] = Field(alias="defaultMethod")
    low_confidence_threshold: int = Field(alias="lowConfidenceThreshold", ge=0)


class BaseRelNormConfig(_Section):
    male: float = Field(default=DEFAULT_BASE_REL_NORM["male"], gt=0)
    female: float = Field(default=DEFAULT_BASE_REL_NORM["female"], gt=0)
    other: float = Field(default=DEFAULT_BASE_REL_NORM["other"], gt=0)


class ScoringSection(_Section):
    allometric_exponent: float = Field(alias="allometricExponent", gt=0)
    base_score_multiplier: float = Field(alias="baseScoreMultiplier")
    base_score_offset: float = Field(alias="baseScoreOffset")
    min_score: float = Field(alias="minScore")
    max_score: float = Field(alias="maxScore")
    base_rel_norm: BaseRelNormConfig = Field(default_factory=BaseRelNormConfig, alias="baseRelNorm")

    @model_validator(mode="after")
    def check_score_bounds(self) -> "ScoringSection":
        if self.min_score >= self.max_score:
            raise ValueError("minScore must be lower than maxScore")
        return self


class RankTierConfig(_Section):
    minimum: float = Field(alias="min")
    color: str


class ExerciseTypeMultipliers(_Section):
    compound: float = Field(gt=0)
    isolation: float = Field(gt=0)


class TrainingAgeMultipliers(_Section):
    novice: float = Field(gt=0)
    intermediate: float = Field(gt=0)
    advanced: float = Field(gt=0)
    expert: float = Field(gt=0)


class SleepMultipliers(_Section):
    under_5: float = Field(alias="<5", gt=0)
    from_5_to_6: float = Field(alias="5-6", gt=0)
    from_6_to_7: float = Field(alias="6-7", gt=0)
    from_7_to_8: float = Field(alias="7-8", gt=0)
    over_8: float = Field(alias="8+", gt=0)


class RecoveryMultipliers(_Section):
    exercise_type: ExerciseTypeMultipliers = Field(alias="exerciseType")
    eccentric_heavy: float = Field(alias="eccentricHeavy", gt=0)
    training_age: TrainingAgeMultipliers = Field(alias="trainingAge")
    sleep_hours: SleepMultipliers = Field(alias="sleepHours")


class StateBound(_Section):
    maximum: float = Field(alias="max", ge=0.0, le=1.0)


class RecoveryStates(_Section):
    need_recovery: StateBound
    recovering: StateBound

    @model_validator(mode="after")
    def check_ordered(self) -> "RecoveryStates":
        if self.need_recovery.maximum >= self.recovering.maximum:
            raise ValueError("need_recovery.max must be lower than recovering.max")
        return self


class RecoverySection(_Section):
    base_tau_hours: dict[int, float] = Field(alias="baseTauHours")
    multipliers: RecoveryMultipliers
    states: RecoveryStates

    @field_validator("base_tau_hours")
    @classmethod
    def check_rpe_table(cls, value: dict[int, float]) -> Mapping[int, float]:
        expected = set(range(RPE_MIN, RPE_MAX + 1))
        if set(value) != expected:
            raise ValueError(f"keys must be exactly RPE {RPE_MIN}-{RPE_MAX}")
        if any(tau <= 0 for tau in value.values()):
            raise ValueError("tau hours must be positive")
        return MappingProxyType(value)


class TauHalfDays(_Section):
    older_trained: float = Field(alias="olderTrained", gt=0)
    older_novice: float = Field(alias="olderNovice", gt=0)
    young_trained: float = Field(alias="youngTrained", gt=0)
    young_novice: float = Field(alias="youngNovice", gt=0)


class DecaySection(_Section):
    tau_half_days: TauHalfDays = Field(alias="tauHalfDays")
    age_threshold: int = Field(alias="ageThreshold", ge=0)
    alpha: float = Field(gt=0)
    min_retention: float = Field(alias="minRetention", ge=0.0, le=1.0)


class VolumeLandmarkConfig(_Section):
    mev: int = Field(ge=0)
    mav: int = Field(ge=0)
    mrv: int = Field(ge=0)

    @model_validator(mode="after")
    def check_ordered(self) -> "VolumeLandmarkConfig":
        if not self.mev <= self.mav <= self.mrv:
            raise ValueError("landmarks must satisfy mev <= mav <= mrv")
        return self


class VolumeLandmarksSection(_Section):
    novice: VolumeLandmarkConfig
    intermediate: VolumeLandmarkConfig
    advanced: VolumeLandmarkConfig


class ScoringConfig(_Section):
    """Immutable snapshot of every constant and lookup table the engine uses."""

    version: str = DEFAULT_CONFIG_VERSION
    one_rm_estimation: OneRmEstimationConfig = Field(alias="oneRmEstimation")
    rir_to_percentage: dict[int, float] = Field(alias="rirToPercentage")
    scoring: ScoringSection
    age_adjustment_factors: dict[str, float] = Field(alias="ageAdjustmentFactors")
    rank_tiers: dict[RankTier, RankTierConfig] = Field(alias="rankTiers")
    recovery: RecoverySection
    decay: DecaySection
    volume_landmarks: VolumeLandmarksSection = Field(alias="volumeLandmarks")

    @field_validator("rir_to_percentage")
    @classmethod
    def check_percentages(cls, value: dict[int, float]) -> Mapping[int, float]:
        for rir, pct in value.items():
            if rir < 0:
                raise ValueError("RIR keys must be non-negative")
            if not 0.0 < pct <= 1.0:
                raise ValueError(f"percentage for RIR {rir} must be in (0, 1]")
        return MappingProxyType(value)

    @field_validator("age_adjustment_factors")
    @classmethod
    def check_age_bands(cls, value: dict[str, float]) -> Mapping[str, float]:
        missing = [band for band in AGE_BANDS if band not in value]
        if missing:
            raise ValueError(f"missing age bands: {', '.join(missing)}")
        unknown = [band for band in value if band not in AGE_BANDS]
        if unknown:
            raise ValueError(f"unknown age bands: {', '.join(unknown)}")
        if any(factor <= 0 for factor in value.values()):
            raise ValueError("age adjustment factors must be positive")
        return MappingProxyType(value)

    @field_validator("rank_tiers")
    @classmethod
    def check_tiers(cls, value: dict[RankTier, RankTierConfig]) -> Mapping[RankTier, RankTierConfig]:
        missing = [tier.value for tier in TIER_ORDER if tier not in value]
        if missing:
            raise ValueError(f"missing rank tiers: {', '.join(missing)}")
        minimums = [value[tier].minimum for tier in TIER_ORDER]
        if any(lower >= upper for lower, upper in zip(minimums, minimums[1:])):
            raise ValueError("rank tier minimums must strictly increase from bronze to mythic")
        return MappingProxyType(value)


def _error_field(error: dict) -> str:
    return ".".join(str(part) for part in error.get("loc", ()))


def validate_config(data: Mapping) -> ScoringConfig:
    """Validate raw configuration data and return a frozen ``ScoringConfig``."""
    if not isinstance(data, Mapping):
        raise ConfigError("configuration must be a mapping")
    try:
        return ScoringConfig.model_validate(dict(data))
    except ValidationError as e:
        first = e.errors()[0]
        raise ConfigError(first["msg"], field=_error_field(first) or None) from e
