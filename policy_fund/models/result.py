"""
Pydantic models for eligibility, scoring and classification results
"""
from typing import List, Optional, Literal
from pydantic import BaseModel, Field, ConfigDict

from .fund import FundTrack


CheckStatus = Literal["pass", "fail", "warning", "bonus", "unknown"]
CheckCategory = Literal[
    "exclusion",
    "scale",
    "business_age",
    "revenue",
    "employee_count",
    "industry",
    "credit",
    "certification",
    "export",
    "funding_purpose",
    "condition",
    "evidence",
    "restart",
    "owner",
    "bonus",
]
AdjustmentKind = Literal["bonus", "penalty", "warning", "reason", "exclusion"]
ConfidenceLabel = Literal["전용·우선", "유력", "대안", "플랜B"]
ReasonCode = Literal[
    "track-blocked",
    "hard-exclusion",
    "delinquency",
    "credit-issue",
    "scale-not-met",
    "requirement-not-met",
    "policy-purpose-mismatch",
    "insufficient-evidence",
    "graduation-cap",
    "below-threshold",
    "rank-cutoff",
]


class CheckResult(BaseModel):
    """One evaluated criterion"""
    category: CheckCategory
    condition: str = Field(..., description="Criterion label")
    status: CheckStatus
    description: str = Field(..., description="Human readable outcome")
    impact: int = Field(0, description="Points added to the eligibility score")
    rule: Optional[str] = Field(None, description="Rule identifier for failures")

    model_config = ConfigDict(frozen=True)


class EligibilityResult(BaseModel):
    """All checks for one (profile, fund) pair"""
    fund_id: str
    fund_name: str
    institution_id: str
    track: FundTrack
    is_eligible: bool = Field(..., description="True when no hard check failed")
    eligibility_score: int = Field(..., ge=0, le=100)
    hard_exclusion: Optional[CheckResult] = Field(
        None, description="Absolute exclusion that short-circuited evaluation"
    )
    checks: List[CheckResult] = Field(default_factory=list)
    passed: List[CheckResult] = Field(default_factory=list)
    failed: List[CheckResult] = Field(default_factory=list)
    warnings: List[CheckResult] = Field(default_factory=list)
    bonuses: List[CheckResult] = Field(default_factory=list)
    unknown: List[CheckResult] = Field(default_factory=list)

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "fund_id": "semas-disabled",
                "fund_name": "장애인기업지원자금",
                "institution_id": "semas",
                "track": "exclusive",
                "is_eligible": True,
                "eligibility_score": 70,
                "checks": [
                    {
                        "category": "condition",
                        "condition": "장애인기업",
                        "status": "pass",
                        "description": "장애인기업 요건 충족",
                        "impact": 0
                    }
                ]
            }
        }
    )


class ScoreAdjustment(BaseModel):
    """One attributable bonus, penalty, warning or exclusion from a scoring evaluator"""
    evaluator_id: str
    evaluator_name: str
    kind: AdjustmentKind
    points: int = 0
    message: str = ""

    model_config = ConfigDict(frozen=True)


class ScoredFund(BaseModel):
    """Score after the evaluator pipeline, with its attributable adjustments"""
    fund_id: str
    base_score: int
    score: int
    excluded_by: Optional[str] = Field(None, description="Evaluator that forced exclusion")
    is_perfect_match: bool = False
    adjustments: List[ScoreAdjustment] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def warnings(self) -> List[str]:
        return [a.message for a in self.adjustments if a.kind in ("warning", "penalty") and a.message]

    @property
    def reasons(self) -> List[str]:
        return [a.message for a in self.adjustments if a.kind in ("bonus", "reason") and a.message]


class TrackDecision(BaseModel):
    """Tracks a company may and may not apply to"""
    allowed_tracks: List[FundTrack]
    blocked_tracks: List[FundTrack]
    allowed_track_labels: List[str] = Field(default_factory=list)
    blocked_track_labels: List[str] = Field(default_factory=list)
    qualifying_statuses: List[str] = Field(
        default_factory=list, description="Statuses that unlock the exclusive track"
    )
    why: str = Field(..., description="Audit rationale naming the deciding statuses")

    model_config = ConfigDict(frozen=True)

    @property
    def has_exclusive_qualification(self) -> bool:
        return bool(self.qualifying_statuses)


class FundEntry(BaseModel):
    """Fields shared by every classified entry"""
    fund_id: str
    program_name: str
    agency: str
    track: FundTrack
    track_label: str

    model_config = ConfigDict(frozen=True)


class MatchedFund(FundEntry):
    rank: int = Field(..., ge=1)
    label: ConfidenceLabel
    confidence: Literal["HIGH", "MEDIUM"]
    score: int = Field(..., ge=0, le=100, description="Pipeline score")
    display_score: int = Field(..., ge=0, le=100, description="Score after rank penalty")
    score_level: Literal["high", "medium", "low"]
    score_explanation: str
    size_match_score: int
    why: str
    hard_rules_passed: List[str] = Field(default_factory=list)
    reasons: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)


class ConditionalFund(FundEntry):
    score: int = Field(..., ge=0, le=100)
    what_is_missing: str
    how_to_confirm: str
    warnings: List[str] = Field(default_factory=list)


class ExcludedFund(FundEntry):
    reason_code: ReasonCode
    excluded_reason: str = Field(..., description="Korean reason label")
    rule_triggered: str
    note: str


class ClassifiedMatchResult(BaseModel):
    """Three-way classification of the whole catalog for one company"""
    track_decision: TrackDecision
    matched: List[MatchedFund] = Field(default_factory=list)
    conditional: List[ConditionalFund] = Field(default_factory=list)
    excluded: List[ExcludedFund] = Field(default_factory=list)
    total_funds_checked: int = 0

    model_config = ConfigDict(frozen=True)

    def fund_ids(self) -> List[str]:
        return (
            [f.fund_id for f in self.matched]
            + [f.fund_id for f in self.conditional]
            + [f.fund_id for f in self.excluded]
        )
