"""
Data models for the policy fund matching engine
"""

from .fund import (
    PolicyFundKnowledge,
    EligibilityCriteria,
    RequiredConditions,
    NumericRange,
    BusinessAgeRange,
    FundingPurpose,
    SupportTerms,
    Institution,
    CatalogDefect,
    TRACK_ORDER,
)
from .company import CompanyProfile, NormalizedProfile, MatchOptions, MatchRequest
from .result import (
    CheckResult,
    EligibilityResult,
    ScoreAdjustment,
    ScoredFund,
    TrackDecision,
    MatchedFund,
    ConditionalFund,
    ExcludedFund,
    ClassifiedMatchResult,
)

__all__ = [
    "PolicyFundKnowledge",
    "EligibilityCriteria",
    "RequiredConditions",
    "NumericRange",
    "BusinessAgeRange",
    "FundingPurpose",
    "SupportTerms",
    "Institution",
    "CatalogDefect",
    "TRACK_ORDER",
    "CompanyProfile",
    "NormalizedProfile",
    "MatchOptions",
    "MatchRequest",
    "CheckResult",
    "EligibilityResult",
    "ScoreAdjustment",
    "ScoredFund",
    "TrackDecision",
    "MatchedFund",
    "ConditionalFund",
    "ExcludedFund",
    "ClassifiedMatchResult",
]
