"""
Pydantic models for company profiles
"""
from typing import Dict, List, Optional, Literal
from pydantic import BaseModel, Field, field_validator, ConfigDict

from .fund import BusinessAgeException, CompanyScale, IndustryCategory, OwnerCharacteristic


FundingPurposeRequest = Literal["working", "facility", "both"]
GuaranteeOrgUsage = Literal["none", "kodit", "kibo", "both"]
TaxDelinquencyStatus = Literal["none", "resolving", "installment", "active"]
CreditIssueStatus = Literal["none", "past_resolved", "current"]
RestartReason = Literal[
    "covid", "recession", "partner_default", "disaster", "illness", "policy", "unknown"
]
SizeClass = Literal["micro", "small", "medium"]

KNOWN_INSTITUTIONS = ["kosmes", "semas", "kodit", "kibo"]


class CompanyProfile(BaseModel):
    """Application-facing company profile submitted for matching"""
    company_name: Optional[str] = Field(None, description="Company name")
    industry: str = Field(..., description="Industry key or Korean industry name")
    industry_detail: Optional[str] = Field(None, description="Detailed business description")
    industry_code: Optional[str] = Field(None, description="KSIC industry code")
    region: Optional[str] = Field(None, description="Business location")

    business_age: Optional[float] = Field(None, ge=0, description="Years since establishment")
    annual_revenue: Optional[float] = Field(None, ge=0, description="Annual revenue in KRW")
    employee_count: Optional[int] = Field(None, ge=0, description="Full-time employees")
    debt_ratio: Optional[float] = Field(None, ge=0, description="Debt ratio in percent")
    credit_rating: Optional[int] = Field(None, ge=1, le=10, description="Credit grade (1 best)")
    business_age_exceptions: List[BusinessAgeException] = Field(
        default_factory=list, description="Programmes that extend business-age limits"
    )

    # certifications
    is_venture_company: bool = False
    is_innobiz: bool = False
    is_mainbiz: bool = False

    # owner and company status
    is_female: bool = False
    is_disabled: bool = False
    is_disabled_standard: bool = Field(False, description="Certified disabled-standard workplace")
    is_social_enterprise: bool = False
    is_restart: bool = Field(False, description="Restarted after a prior business failure")
    restart_reason: Optional[RestartReason] = None
    is_youth_company: bool = False

    # activity, unknown when None
    has_rnd_activity: Optional[bool] = None
    has_export_revenue: Optional[bool] = None
    has_patent: bool = False
    has_research_institute: bool = False

    # special purposes
    has_smart_factory_plan: bool = False
    has_esg_investment_plan: bool = False
    is_green_energy_business: bool = False
    is_emergency_situation: bool = False
    has_job_creation: bool = False
    has_youth_employment_plan: bool = False
    has_ipo_or_investment_plan: bool = False
    accepts_equity_dilution: bool = False
    has_venture_investment: bool = False
    needs_large_funding: bool = False

    # funding request (amounts in 억원)
    requested_funding_purpose: Optional[FundingPurposeRequest] = None
    required_funding_amount: Optional[float] = Field(None, ge=0)
    existing_loan_balance: Optional[float] = Field(None, ge=0)
    recent_year_subsidy_amount: Optional[float] = Field(None, ge=0)

    # usage history
    prior_usage_counts: Dict[str, int] = Field(
        default_factory=dict, description="Programmes used so far, per institution"
    )
    recently_used_institutions: List[str] = Field(
        default_factory=list, description="Institutions used within the last two years"
    )
    current_guarantee_org: GuaranteeOrgUsage = "none"

    # tax and credit
    tax_delinquency_status: TaxDelinquencyStatus = "none"
    has_tax_installment_approval: bool = False
    credit_issue_status: CreditIssueStatus = "none"
    is_inactive: bool = Field(False, description="Business suspended or closed")
    is_currently_delinquent: bool = Field(False, description="Bank loan currently overdue")
    has_unresolved_guarantee_accident: bool = False
    has_past_default: bool = False
    is_past_default_resolved: bool = False
    is_credit_recovery_in_progress: bool = False

    @field_validator('prior_usage_counts')
    @classmethod
    def validate_usage_counts(cls, v):
        for institution, count in v.items():
            if count < 0:
                raise ValueError(f'Usage count for {institution} must be non-negative')
        return v

    @field_validator('industry_code')
    @classmethod
    def validate_industry_code(cls, v):
        if v:
            return v.strip().upper()
        return v

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "company_name": "(주)한빛포장",
                "industry": "other_service",
                "industry_detail": "임가공 및 포장 서비스",
                "region": "경기",
                "business_age": 9,
                "annual_revenue": 1500000000,
                "employee_count": 12,
                "is_disabled_standard": True,
                "has_rnd_activity": False,
                "requested_funding_purpose": "working",
                "required_funding_amount": 2
            }
        }
    )


class NormalizedProfile(BaseModel):
    """Canonical profile consumed by the rule evaluators"""
    profile: CompanyProfile
    industry_category: IndustryCategory
    size_class: SizeClass
    scale: CompanyScale
    eligible_scales: List[CompanyScale]
    owner_characteristic: OwnerCharacteristic
    business_age: float
    annual_revenue: float
    employee_count: int
    has_tech_assets: bool
    is_strategic_industry: bool
    needs_large_funding: bool

    model_config = ConfigDict(frozen=True)

    @property
    def is_micro(self) -> bool:
        return self.size_class == "micro"

    def usage_count(self, institution_id: str) -> int:
        return self.profile.prior_usage_counts.get(institution_id, 0)


class MatchOptions(BaseModel):
    """Options for one matching run"""
    top_n: Optional[int] = Field(None, ge=1, le=50, description="Cap on matched entries")
    min_score: Optional[float] = Field(None, ge=0, le=100, description="Score floor for matched")


class MatchRequest(BaseModel):
    """Request to classify the catalog for a company"""
    profile: CompanyProfile = Field(..., description="Company profile")
    options: MatchOptions = Field(default_factory=MatchOptions)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "profile": {
                    "industry": "manufacturing",
                    "business_age": 5,
                    "annual_revenue": 3000000000,
                    "employee_count": 20,
                    "requested_funding_purpose": "both"
                },
                "options": {"top_n": 5, "min_score": 50}
            }
        }
    )
