from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from scoring_schema import RankTier


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


class RecoveryStatus(str, Enum):
    NEED_RECOVERY = "need_recovery"
    RECOVERING = "recovering"
    READY = "ready"


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class LiftObservation(_Record):
    """One completed working set. Warm-up sets never reach the engine."""

    load_kg: float
    reps: int
    rir: int | None = None


class PersonContext(_Record):
    """Attributes of the lifter for one scoring call.

    ``bodyweight_kg`` must be positive before any relative strength is
    computed; the check happens where body weight is used.
    """

    bodyweight_kg: float
    sex: Sex = Sex.MALE
    age: int = Field(default=25, ge=0)
    training_age_years: float = Field(default=0.0, ge=0.0)


class ExerciseDifficulty(_Record):
    strength_standard: float = Field(default=1.0, gt=0.0)


class MuscleContribution(_Record):
    exercise_id: str
    muscle_group_id: str
    is_primary: bool = False
    contribution_percentage: float = Field(ge=0.0, le=100.0)


class ScoreResult(_Record):
    score: float


class OneRepMaxEstimate(_Record):
    value_kg: float
    reps: int
    low_confidence: bool


class RankInfo(_Record):
    tier: RankTier
    score: float
    color: str
    progress: float


class RecoveryContext(_Record):
    """Optional modifiers for the recovery time constant."""

    is_compound: bool = True
    is_eccentric_heavy: bool = False
    training_age_years: float = 1.0
    sleep_hours: float = 7.0


class RecoveryState(_Record):
    fraction: float
    status: RecoveryStatus
    tau_hours: float


class DecayFactor(_Record):
    retention: float
    tau_half_days: float


class VolumeLandmarks(_Record):
    level: str
    mev: int
    mav: int
    mrv: int
