from policy_fund.catalog import default_catalog
from policy_fund.rules.thresholds import EOK
from policy_fund.services.eligibility_service import eligibility_service, resolve_credit_state
from policy_fund.services.normalizer import normalize_profile

from conftest import make_profile


def check(profile, fund_id):
    return eligibility_service.check(normalize_profile(profile), default_catalog.get_fund(fund_id))


def test_general_stability_passes_for_small_manufacturer(general_profile):
    result = check(general_profile, "kosmes-general-stability")

    assert result.is_eligible
    assert result.hard_exclusion is None
    # base 50 + age 10 + industry 'all' 5 + purpose 5
    assert result.eligibility_score == 70
    assert [c.category for c in result.passed] == ["scale", "business_age", "industry", "funding_purpose"]


def test_scale_gate_short_circuits(micro_profile):
    result = check(micro_profile, "kosmes-general-stability")

    assert not result.is_eligible
    assert len(result.checks) == 1
    failed = result.failed[0]
    assert failed.category == "scale"
    assert failed.rule == "대상: small, medium / 귀사: micro"


def test_certification_counts_towards_target_scale():
    profile = make_profile(employee_count=5, annual_revenue=10 * EOK, is_innobiz=True)
    result = check(profile, "kosmes-investment-loan")

    assert result.checks[0].category == "scale"
    assert result.checks[0].status == "pass"


def test_excluded_industry_is_hard_exclusion():
    profile = make_profile(industry="other_service", industry_detail="부동산업 임대")
    result = check(profile, "kosmes-general-stability")

    assert result.hard_exclusion is not None
    assert result.hard_exclusion.rule == "제외업종"
    assert not result.is_eligible


def test_unresolved_default_is_hard_exclusion(general_profile):
    profile = general_profile.model_copy(update={"has_past_default": True})
    result = check(profile, "kodit-general")

    assert result.hard_exclusion.rule == "부실_미정리"


def test_inactive_business_may_still_use_restart_funds():
    profile = make_profile(
        employee_count=5,
        annual_revenue=3 * EOK,
        is_inactive=True,
        is_restart=True,
        restart_reason="covid",
    )

    assert check(profile, "kosmes-general-stability").hard_exclusion.rule == "휴폐업"
    assert check(profile, "kosmes-restart").hard_exclusion is None


def test_required_condition_failure(general_profile):
    result = check(general_profile, "kodit-job-creation")

    assert not result.is_eligible
    assert result.failed[0].category == "condition"
    assert result.failed[0].description == "고용 증가 실적 요건 미충족"


def test_missing_technology_evidence_fails_as_evidence(general_profile):
    result = check(general_profile, "kibo-tech-evaluation")

    assert result.failed[0].category == "evidence"
    assert result.failed[0].rule == "기술근거없음"


def test_unknown_rnd_status_is_unknown_not_failed():
    profile = make_profile(has_rnd_activity=None)
    result = check(profile, "kibo-tech-evaluation")

    assert result.is_eligible
    assert [c.rule for c in result.unknown] == ["rnd"]


def test_credit_rating_bound(general_profile):
    assert check(general_profile, "kodit-general").is_eligible

    weak = general_profile.model_copy(update={"credit_rating": 8})
    assert check(weak, "kodit-general").failed[0].rule == "신용등급미달"

    unrated = general_profile.model_copy(update={"credit_rating": None})
    assert check(unrated, "kodit-general").unknown[0].rule == "credit_rating"


def test_business_age_exception_window():
    profile = make_profile(business_age=9, has_rnd_activity=True)
    result = check(profile, "kosmes-innovation-startup")
    assert result.unknown[0].rule == "business_age_exception"

    with_exception = profile.model_copy(update={"business_age_exceptions": ["tips_program"]})
    result = check(with_exception, "kosmes-innovation-startup")
    age_check = next(c for c in result.checks if c.category == "business_age")
    assert age_check.status == "pass"


def test_restart_only_fund_rejects_non_restart(general_profile):
    result = check(general_profile, "kosmes-restart")

    assert result.failed[-1].category == "restart"


def test_resolve_credit_state(general_profile):
    fund = default_catalog.get_fund("kosmes-general-stability")

    def state(**update):
        return resolve_credit_state(normalize_profile(general_profile.model_copy(update=update)), fund)

    assert state() == (None, None)
    assert state(tax_delinquency_status="active") == ("excluded", "tax_active")
    assert state(tax_delinquency_status="active", has_tax_installment_approval=True) == (
        "conditional", "tax_resolving"
    )
    assert state(tax_delinquency_status="resolving") == ("conditional", "tax_resolving")
    assert state(credit_issue_status="current") == ("excluded", "credit_current")
    assert state(credit_issue_status="past_resolved") == ("conditional", "credit_past_resolved")


def test_investment_evidence_accepts_equity_dilution(general_profile):
    without = check(general_profile, "kosmes-investment-loan")
    assert [c.rule for c in without.failed] == ["투자유치근거없음"]

    with_dilution = check(make_profile(accepts_equity_dilution=True), "kosmes-investment-loan")
    assert with_dilution.is_eligible
    assert with_dilution.failed == []
