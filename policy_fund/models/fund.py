"""
Pydantic models for policy funds and their eligibility rules
"""
from typing import List, Optional, Literal
from pydantic import BaseModel, Field, field_validator, model_validator, ConfigDict


InstitutionId = Literal["kosmes", "semas", "kodit", "kibo"]
FundTrack = Literal["exclusive", "policy_linked", "general", "guarantee"]
FundType = Literal["loan", "guarantee", "grant"]
IndustryCategory = Literal[
    "manufacturing",
    "it_service",
    "wholesale_retail",
    "food_service",
    "construction",
    "logistics",
    "other_service",
    "all",
]
CompanyScale = Literal["micro", "small", "medium", "venture", "innobiz", "mainbiz"]
OwnerCharacteristic = Literal["youth", "female", "disabled", "none"]
BusinessAgeException = Literal[
    "youth_startup_academy",
    "global_startup_academy",
    "kibo_youth_guarantee",
    "startup_success_package",
    "tips_program",
]
EvidenceKind = Literal[
    "technology",
    "export",
    "investment",
    "smart_factory",
    "environment",
    "emergency",
]

TRACK_ORDER: List[str] = ["exclusive", "policy_linked", "general", "guarantee"]


class NumericRange(BaseModel):
    """Inclusive numeric bound; a missing side means no constraint"""
    min: Optional[float] = Field(None, ge=0, description="Lower bound")
    max: Optional[float] = Field(None, ge=0, description="Upper bound")
    description: str = Field(..., description="Human readable bound")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_bounds(self):
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"min ({self.min}) must not exceed max ({self.max})")
        return self


class BusinessAgeRange(NumericRange):
    """Business age bound in years, optionally extended by exception programmes"""
    max_with_exception: Optional[float] = Field(
        None, ge=0, description="Upper bound when an exception programme applies"
    )
    exceptions: List[BusinessAgeException] = Field(
        default_factory=list, description="Programmes that extend the upper bound"
    )


class RequiredConditions(BaseModel):
    """Boolean statuses a company must hold; unset fields impose nothing"""
    is_venture_company: bool = False
    is_innobiz: bool = False
    has_patent: bool = False
    has_research_institute: bool = False
    has_rnd_activity: bool = False
    has_export_revenue: bool = False
    has_technology_certification: bool = False
    is_youth_company: bool = False
    is_female: bool = False
    is_disabled: bool = False
    is_disabled_company: bool = False
    is_disabled_standard: bool = False
    is_social_enterprise: bool = False
    has_smart_factory_plan: bool = False
    has_esg_investment_plan: bool = False
    is_restart: bool = False
    is_emergency_situation: bool = False
    has_youth_employment_plan: bool = False
    is_green_energy_business: bool = False
    has_job_creation: bool = False
    needs_large_funding: bool = False

    model_config = ConfigDict(frozen=True)

    def required_keys(self) -> List[str]:
        """Names of the conditions this fund actually requires"""
        return [name for name, value in self.model_dump().items() if value]


class EligibilityCriteria(BaseModel):
    """Declarative eligibility rules for a fund"""
    business_age: Optional[BusinessAgeRange] = Field(None, description="Business age in years")
    revenue: Optional[NumericRange] = Field(None, description="Annual revenue in KRW")
    employee_count: Optional[NumericRange] = Field(None, description="Full-time employees")
    allowed_industries: Optional[List[IndustryCategory]] = Field(
        None, description="Primary target industries ('all' for every industry)"
    )
    excluded_industries: List[str] = Field(
        default_factory=list, description="Industry name fragments that disqualify"
    )
    required_certifications: List[CompanyScale] = Field(
        default_factory=list, description="At least one certification must be held"
    )
    preferred_owner_types: List[OwnerCharacteristic] = Field(
        default_factory=list, description="Owner types receiving preferential treatment"
    )
    credit_rating: Optional[NumericRange] = Field(
        None, description="Credit grade bound (1 best, 10 worst)"
    )
    requires_export: bool = Field(False, description="Export record or plan expected")
    required_conditions: RequiredConditions = Field(default_factory=RequiredConditions)
    evidence_requirements: List[EvidenceKind] = Field(
        default_factory=list, description="Evidence the company must be able to show"
    )
    restart_only: bool = Field(False, description="Only restarted companies may apply")
    additional_requirements: List[str] = Field(default_factory=list)
    exclusion_conditions: List[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class AmountTerms(BaseModel):
    """Support amount in KRW"""
    min: Optional[float] = Field(None, ge=0)
    max: Optional[float] = Field(None, ge=0)
    unit: str = "원"
    description: str

    model_config = ConfigDict(frozen=True)


class RateTerms(BaseModel):
    """Interest rate band in percent"""
    min: Optional[float] = Field(None, ge=0)
    max: Optional[float] = Field(None, ge=0)
    type: Literal["fixed", "variable"] = "variable"
    description: str

    model_config = ConfigDict(frozen=True)


class LoanPeriod(BaseModel):
    years: float = Field(..., gt=0)
    grace_period: Optional[float] = Field(None, ge=0)
    description: str

    model_config = ConfigDict(frozen=True)


class SupportTerms(BaseModel):
    """Amount, rate and guarantee-ratio bounds offered by a fund"""
    amount: AmountTerms
    interest_rate: Optional[RateTerms] = None
    loan_period: Optional[LoanPeriod] = None
    guarantee_ratio: Optional[NumericRange] = None
    repayment_method: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class FundingPurpose(BaseModel):
    """Which funding purposes a fund supports"""
    working: bool = Field(..., description="Working capital supported")
    facility: bool = Field(..., description="Facility investment supported")

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def validate_any_purpose(self):
        if not self.working and not self.facility:
            raise ValueError("a fund must support at least one funding purpose")
        return self


class PolicyFundKnowledge(BaseModel):
    """One policy fund programme in the knowledge base"""
    id: str = Field(..., min_length=1, description="Stable fund identifier")
    institution_id: InstitutionId = Field(..., description="Issuing institution")
    track: FundTrack = Field(..., description="Gating track of the fund")
    name: str = Field(..., min_length=1, description="Official programme name")
    short_name: str = Field(..., description="Short display name")
    fund_type: FundType = Field(..., description="Loan, guarantee or grant")
    description: str = Field("", description="Programme summary")
    funding_purpose: FundingPurpose
    eligibility: EligibilityCriteria
    target_scale: Optional[List[CompanyScale]] = Field(
        None, description="Company-scale buckets that may apply (hard cut)"
    )
    terms: SupportTerms
    required_documents: List[str] = Field(default_factory=list)
    risk_factors: List[str] = Field(default_factory=list)
    preferential_conditions: List[str] = Field(default_factory=list)
    official_url: Optional[str] = None

    @field_validator('id')
    @classmethod
    def validate_id(cls, v):
        if v != v.strip() or ' ' in v:
            raise ValueError('Fund id must not contain whitespace')
        return v

    @property
    def is_guarantee_product(self) -> bool:
        return self.fund_type == "guarantee" or self.track == "guarantee"

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "semas-disabled",
                "institution_id": "semas",
                "track": "exclusive",
                "name": "장애인기업지원자금",
                "short_name": "장애인기업",
                "fund_type": "loan",
                "funding_purpose": {"working": True, "facility": True},
                "eligibility": {
                    "allowed_industries": ["all"],
                    "preferred_owner_types": ["disabled"],
                    "required_conditions": {"is_disabled_company": True}
                },
                "terms": {
                    "amount": {"max": 200000000, "description": "기업당 2억원 이내"}
                }
            }
        }
    )


class Institution(BaseModel):
    """Issuing institution"""
    id: InstitutionId
    name: str = Field(..., description="Short Korean name")
    full_name: str
    description: str = ""
    website: Optional[str] = None
    contact_number: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class CatalogDefect(BaseModel):
    """A raw fund record rejected while loading the catalog"""
    fund_id: Optional[str] = Field(None, description="Identifier, when one could be read")
    errors: List[str] = Field(default_factory=list, description="Validation messages")
