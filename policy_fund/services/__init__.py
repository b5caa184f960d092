"""
Services package for the Policy Fund Matching Engine
"""

from .normalizer import ProfileNormalizationError, normalize_profile
from .track_service import TrackService
from .eligibility_service import EligibilityService
from .scoring import ScoringPipeline
from .ranking_service import RankingService
from .classifier import Classifier
from .matching_service import MatchingService

__all__ = [
    "ProfileNormalizationError",
    "normalize_profile",
    "TrackService",
    "EligibilityService",
    "ScoringPipeline",
    "RankingService",
    "Classifier",
    "MatchingService"
]
