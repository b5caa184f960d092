import pytest
from fastapi.testclient import TestClient

from policy_fund.main import app
from policy_fund.models import CompanyProfile
from policy_fund.rules.thresholds import EOK


def make_profile(**overrides) -> CompanyProfile:
    data = {
        "company_name": "테스트정밀",
        "industry": "manufacturing",
        "business_age": 5,
        "annual_revenue": 30 * EOK,
        "employee_count": 20,
        "credit_rating": 3,
        "requested_funding_purpose": "working",
        "has_rnd_activity": False,
        "has_export_revenue": False,
    }
    data.update(overrides)
    return CompanyProfile(**data)


@pytest.fixture
def general_profile() -> CompanyProfile:
    """Small manufacturer with no exclusive-track qualification"""
    return make_profile()


@pytest.fixture
def disabled_standard_profile() -> CompanyProfile:
    return make_profile(
        company_name="함께포장",
        industry="other_service",
        industry_detail="임가공 및 포장 서비스",
        business_age=9,
        annual_revenue=15 * EOK,
        employee_count=12,
        credit_rating=None,
        is_disabled_standard=True,
    )


@pytest.fixture
def micro_profile() -> CompanyProfile:
    return make_profile(employee_count=5, annual_revenue=10 * EOK)


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
