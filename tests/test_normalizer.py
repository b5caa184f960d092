import pytest

from policy_fund.rules.thresholds import EOK
from policy_fund.services.normalizer import (
    ProfileNormalizationError,
    classify_size,
    map_industry,
    normalize_profile,
)

from conftest import make_profile


@pytest.mark.parametrize("industry,expected", [
    ("manufacturing", "manufacturing"),
    ("manufacturing_general", "manufacturing"),
    ("식품 제조", "manufacturing"),
    ("IT", "it_service"),
    ("it_software", "it_service"),
    ("도소매", "wholesale_retail"),
    ("미용실", "other_service"),
])
def test_map_industry(industry, expected):
    assert map_industry(industry) == expected


def test_classify_size_uses_industry_specific_micro_limit():
    assert classify_size("manufacturing", 9, 5 * EOK) == "micro"
    assert classify_size("other_service", 9, 5 * EOK) == "small"
    assert classify_size("other_service", 4, 5 * EOK) == "micro"


def test_classify_size_medium_needs_both_employees_and_revenue():
    assert classify_size("manufacturing", 60, 100 * EOK) == "small"
    assert classify_size("manufacturing", 60, 200 * EOK) == "medium"


def test_normalize_profile_prefers_certification_scale():
    normalized = normalize_profile(make_profile(is_venture_company=True, is_mainbiz=True))

    assert normalized.size_class == "small"
    assert normalized.scale == "venture"
    assert normalized.eligible_scales == ["small", "venture", "mainbiz"]


def test_normalize_profile_owner_characteristic(disabled_standard_profile):
    normalized = normalize_profile(disabled_standard_profile)

    assert normalized.owner_characteristic == "disabled"
    assert normalized.industry_category == "other_service"
    assert normalized.size_class == "small"


def test_normalize_profile_large_funding_from_amount():
    assert normalize_profile(make_profile(required_funding_amount=12)).needs_large_funding
    assert not normalize_profile(make_profile(required_funding_amount=3)).needs_large_funding


def test_normalize_profile_strategic_industry():
    assert normalize_profile(make_profile(industry_code="c26110")).is_strategic_industry
    assert normalize_profile(make_profile(industry_detail="이차전지 소재")).is_strategic_industry
    assert not normalize_profile(make_profile()).is_strategic_industry


def test_normalize_profile_missing_numeric_fields():
    profile = make_profile(business_age=None, employee_count=None)

    with pytest.raises(ProfileNormalizationError) as exc_info:
        normalize_profile(profile)

    assert exc_info.value.missing_fields == ["business_age", "employee_count"]
