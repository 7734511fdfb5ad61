from .math_tools import MathTools
from .one_rep_max import OneRepMaxEstimator
from .strength_normalizer import RelativeStrengthNormalizer
from .score_mapper import ExerciseScoreMapper
from .aggregator import ScoreAggregator
from .rank_resolver import RankResolver
from .recovery_model import RecoveryModel
from .decay_model import DetrainingDecayModel
from .volume_model import VolumeModel
from .weight_converter import WeightConverter, LengthConverter

__all__ = [
    "MathTools",
    "OneRepMaxEstimator",
    "RelativeStrengthNormalizer",
    "ExerciseScoreMapper",
    "ScoreAggregator",
    "RankResolver",
    "RecoveryModel",
    "DetrainingDecayModel",
    "VolumeModel",
    "WeightConverter",
    "LengthConverter",
]
