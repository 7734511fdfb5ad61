from models import VolumeLandmarks
from scoring_schema import ScoringConfig

from .math_tools import MathTools


class VolumeModel:
    """Weekly set landmarks by training level."""

    def __init__(self, config: ScoringConfig) -> None:
        self.config = config

    @staticmethod
    def training_level(training_age_years: float) -> str:
        if training_age_years < 1:
            return "novice"
        if training_age_years < 3:
            return "intermediate"
        return "advanced"

    def volume_landmarks(self, training_age_years: float) -> VolumeLandmarks:
        level = self.training_level(training_age_years)
        landmarks = getattr(self.config.volume_landmarks, level)
        return VolumeLandmarks(level=level, mev=landmarks.mev, mav=landmarks.mav, mrv=landmarks.mrv)

    @staticmethod
    def volume_load(sets: int, reps: int, load_kg: float) -> float:
        return MathTools.volume_load(sets, reps, load_kg)
