"""
Profile normalizer: converts an application-facing company profile into the
canonical shape the rule evaluators consume
"""
import logging
from typing import List

from ..models.company import CompanyProfile, NormalizedProfile
from ..rules import thresholds

logger = logging.getLogger(__name__)

REQUIRED_NUMERIC_FIELDS = ["business_age", "annual_revenue", "employee_count"]

INDUSTRY_CATEGORIES = [
    "manufacturing",
    "it_service",
    "wholesale_retail",
    "food_service",
    "construction",
    "logistics",
    "other_service",
]

# Checked in order; first fragment found in the lower-cased industry key wins.
INDUSTRY_KEYWORDS = [
    ("manufacturing", ["manufactur", "제조"]),
    ("it_service", ["it_", "software", "소프트웨어", "정보통신", "ict"]),
    ("wholesale_retail", ["wholesale", "retail", "도소매", "도매", "소매", "유통"]),
    ("food_service", ["food", "restaurant", "음식", "외식", "숙박"]),
    ("construction", ["construction", "건설"]),
    ("logistics", ["logistic", "transport", "물류", "운수", "운송"]),
]

CERTIFICATION_TRACKS = [
    ("is_venture_company", "venture"),
    ("is_innobiz", "innobiz"),
    ("is_mainbiz", "mainbiz"),
]


class ProfileNormalizationError(ValueError):
    """Raised when a profile lacks a numeric field the engine cannot guess"""

    def __init__(self, missing_fields: List[str]):
        self.missing_fields = missing_fields
        super().__init__(f"Missing required profile fields: {', '.join(missing_fields)}")


def map_industry(industry: str) -> str:
    """Map a free-form industry key to an industry category"""
    key = (industry or "").strip()
    if key in INDUSTRY_CATEGORIES:
        return key
    if key.upper() == "IT":
        return "it_service"

    lowered = key.lower()
    for category, fragments in INDUSTRY_KEYWORDS:
        if any(fragment in lowered for fragment in fragments):
            return category
    return "other_service"


def classify_size(industry_category: str, employee_count: int, annual_revenue: float) -> str:
    """Size class from employee count and revenue"""
    if industry_category in thresholds.HEAVY_INDUSTRIES:
        micro_limit = thresholds.MICRO_EMPLOYEE_LIMIT_HEAVY
    else:
        micro_limit = thresholds.MICRO_EMPLOYEE_LIMIT_OTHER

    if employee_count < micro_limit:
        return "micro"
    if employee_count < thresholds.SMALL_EMPLOYEE_LIMIT or annual_revenue <= thresholds.SMALL_REVENUE_LIMIT:
        return "small"
    return "medium"


def resolve_owner_characteristic(profile: CompanyProfile) -> str:
    if profile.is_youth_company:
        return "youth"
    if profile.is_female:
        return "female"
    if profile.is_disabled or profile.is_disabled_standard:
        return "disabled"
    return "none"


def is_strategic_industry(profile: CompanyProfile) -> bool:
    code = (profile.industry_code or "").upper()
    if any(code.startswith(prefix) for prefix in thresholds.STRATEGIC_KSIC_PREFIXES):
        return True
    text = f"{profile.industry} {profile.industry_detail or ''}"
    return any(keyword in text for keyword in thresholds.STRATEGIC_KEYWORDS)


def normalize_profile(profile: CompanyProfile) -> NormalizedProfile:
    """
    Normalize a company profile

    Args:
        profile: Application-facing profile

    Returns:
        NormalizedProfile

    Raises:
        ProfileNormalizationError: if business age, revenue or employee count is absent
    """
    missing = [name for name in REQUIRED_NUMERIC_FIELDS if getattr(profile, name) is None]
    if missing:
        raise ProfileNormalizationError(missing)

    industry_category = map_industry(profile.industry)
    size_class = classify_size(industry_category, profile.employee_count, profile.annual_revenue)

    held_tracks = [track for attr, track in CERTIFICATION_TRACKS if getattr(profile, attr)]
    scale = held_tracks[0] if held_tracks else size_class
    eligible_scales = [size_class] + held_tracks

    needs_large_funding = bool(
        profile.needs_large_funding
        or (profile.required_funding_amount or 0) >= thresholds.LARGE_FUNDING_THRESHOLD
    )

    normalized = NormalizedProfile(
        profile=profile,
        industry_category=industry_category,
        size_class=size_class,
        scale=scale,
        eligible_scales=eligible_scales,
        owner_characteristic=resolve_owner_characteristic(profile),
        business_age=profile.business_age,
        annual_revenue=profile.annual_revenue,
        employee_count=profile.employee_count,
        has_tech_assets=bool(
            profile.has_patent or profile.has_research_institute or profile.has_rnd_activity
        ),
        is_strategic_industry=is_strategic_industry(profile),
        needs_large_funding=needs_large_funding,
    )

    logger.debug(
        f"Normalized profile: industry={industry_category} size={size_class} "
        f"scale={scale} owner={normalized.owner_characteristic}"
    )
    return normalized
