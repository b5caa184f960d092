import pytest

from policy_fund.catalog import default_catalog
from policy_fund.rules import thresholds
from policy_fund.rules.thresholds import EOK
from policy_fund.services.eligibility_service import eligibility_service
from policy_fund.services.normalizer import normalize_profile
from policy_fund.services.scoring import (
    Evaluation,
    Evaluator,
    ScoringPipeline,
    ScoringState,
    apply_evaluation,
    scoring_pipeline,
)
from policy_fund.services.scoring.funding import FundingAmountEvaluator
from policy_fund.services.scoring.conflicts import (
    EmergencyInvestmentConflict,
    LargeFundingMicroConflict,
    MicroVentureConflict,
    RestartVentureConflict,
)
from policy_fund.services.scoring.usage import (
    LoanBalanceEvaluator,
    RecentUsageEvaluator,
    SubsidyRatioEvaluator,
)

from conftest import make_profile


def score(profile, fund_id):
    normalized = normalize_profile(profile)
    fund = default_catalog.get_fund(fund_id)
    return scoring_pipeline.score(eligibility_service.check(normalized, fund), normalized, fund)


class FixedEvaluator(Evaluator):
    def __init__(self, id, priority, evaluation):
        self.id = id
        self.name = id
        self.priority = priority
        self.evaluation = evaluation

    def evaluate(self, state, normalized, fund):
        return self.evaluation


def test_bonus_is_capped_below_perfect_match():
    state = ScoringState("fund", 90)
    apply_evaluation(state, FixedEvaluator("a", 1, None), Evaluation(bonus=20, reason="bonus"))

    assert state.score == thresholds.SCORE_CAP
    assert state.adjustments[0].points == 5


def test_perfect_match_raises_cap():
    state = ScoringState("fund", 90)
    apply_evaluation(
        state, FixedEvaluator("a", 1, None), Evaluation(bonus=20, reason="bonus", is_perfect_match=True)
    )

    assert state.score == thresholds.PERFECT_MATCH_CAP


def test_bonus_never_lowers_score_above_cap():
    state = ScoringState("fund", 98)
    apply_evaluation(state, FixedEvaluator("a", 1, None), Evaluation(bonus=5, reason="bonus"))

    assert state.score == 98


def test_penalty_floors_at_zero():
    state = ScoringState("fund", 10)
    apply_evaluation(state, FixedEvaluator("a", 1, None), Evaluation(penalty=30, warning="penalty"))

    assert state.score == 0
    assert state.adjustments[0].kind == "penalty"
    assert state.adjustments[0].points == -10


def test_pipeline_runs_in_priority_order(general_profile):
    pipeline = ScoringPipeline([
        FixedEvaluator("late", 20, Evaluation(warning="late")),
        FixedEvaluator("early", 10, Evaluation(warning="early")),
    ])
    normalized = normalize_profile(general_profile)
    fund = default_catalog.get_fund("kosmes-general-stability")
    scored = pipeline.score(eligibility_service.check(normalized, fund), normalized, fund)

    assert [a.evaluator_id for a in scored.adjustments] == ["early", "late"]
    assert scored.warnings == ["early", "late"]


def test_exclusion_stops_pipeline(general_profile):
    pipeline = ScoringPipeline([
        FixedEvaluator("stop", 1, Evaluation(excluded=True, exclusion_message="stop")),
        FixedEvaluator("never", 2, Evaluation(bonus=10, reason="never")),
    ])
    normalized = normalize_profile(general_profile)
    fund = default_catalog.get_fund("kosmes-general-stability")
    scored = pipeline.score(eligibility_service.check(normalized, fund), normalized, fund)

    assert scored.excluded_by == "stop"
    assert len(scored.adjustments) == 1


def test_graduation_excludes_at_limit():
    scored = score(make_profile(prior_usage_counts={"kosmes": 5}), "kosmes-general-stability")

    assert scored.excluded_by == "graduation"
    assert scored.adjustments[0].message == thresholds.GRADUATION["kosmes"]["exclusion_message"]


def test_graduation_penalizes_one_below_limit():
    scored = score(make_profile(prior_usage_counts={"kosmes": 4}), "kosmes-general-stability")

    assert scored.excluded_by is None
    assert scored.base_score == 70
    assert scored.score == 40
    assert scored.warnings == [thresholds.GRADUATION["kosmes"]["penalty_message"]]


def test_graduation_only_applies_to_its_institution():
    scored = score(make_profile(prior_usage_counts={"kosmes": 5}), "kodit-general")

    assert scored.excluded_by is None


def test_social_value_dedicated_fund_is_perfect_match(disabled_standard_profile):
    scored = score(disabled_standard_profile, "semas-disabled")

    assert scored.is_perfect_match
    assert scored.base_score == 70
    assert scored.score == 75
    assert "사회적가치 기업 전용자금 - 최우선 추천" in scored.reasons


def test_funding_purpose_mismatch_is_penalty():
    profile = make_profile(requested_funding_purpose="working", has_smart_factory_plan=True)
    scored = score(profile, "kosmes-smart-factory")

    penalty = next(a for a in scored.adjustments if a.evaluator_id == "funding-purpose")
    assert penalty.kind == "penalty"
    assert penalty.points == -thresholds.FUNDING_PURPOSE_BONUS["mismatch_penalty"]


def evaluate(evaluator, profile, fund_id):
    normalized = normalize_profile(profile)
    fund = default_catalog.get_fund(fund_id)
    return evaluator.evaluate(ScoringState(fund.id, 70), normalized, fund)


def test_graduation_warns_two_below_limit():
    scored = score(make_profile(prior_usage_counts={"kosmes": 3}), "kosmes-general-stability")

    assert scored.excluded_by is None
    assert scored.score == scored.base_score
    assert scored.warnings == [thresholds.GRADUATION["kosmes"]["warning_message"]]


@pytest.mark.parametrize("balance,fund_id,penalty", [
    (5, "kosmes-general-stability", 10),
    (10, "kosmes-general-stability", 25),
    (15, "kosmes-general-stability", 40),
    (5, "kodit-general", 5),
    (10, "kodit-general", 15),
    (15, "kodit-general", 25),
])
def test_loan_balance_tiers(balance, fund_id, penalty):
    evaluation = evaluate(LoanBalanceEvaluator(), make_profile(existing_loan_balance=balance), fund_id)

    assert evaluation.penalty == penalty


def test_small_loan_balance_is_ignored():
    assert evaluate(LoanBalanceEvaluator(), make_profile(existing_loan_balance=4), "kosmes-general-stability") is None


@pytest.mark.parametrize("subsidy,penalty", [
    (7, 30),
    (5, 20),
    (4, 10),
    (2, None),
])
def test_subsidy_ratio_tiers(subsidy, penalty):
    profile = make_profile(annual_revenue=20 * EOK, recent_year_subsidy_amount=subsidy)
    evaluation = evaluate(SubsidyRatioEvaluator(), profile, "kosmes-general-stability")

    if penalty is None:
        assert evaluation is None
    else:
        assert evaluation.penalty == penalty


@pytest.mark.parametrize("subsidy,penalty", [
    (12, 25),
    (5, 15),
    (3, None),
])
def test_subsidy_without_revenue_uses_absolute_amount(subsidy, penalty):
    profile = make_profile(annual_revenue=0, recent_year_subsidy_amount=subsidy)
    evaluation = evaluate(SubsidyRatioEvaluator(), profile, "kosmes-general-stability")

    if penalty is None:
        assert evaluation is None
    else:
        assert evaluation.penalty == penalty


def test_recent_usage_penalizes_same_institution():
    profile = make_profile(recently_used_institutions=["kosmes"])

    assert evaluate(RecentUsageEvaluator(), profile, "kosmes-general-stability").penalty == 10
    assert evaluate(RecentUsageEvaluator(), profile, "kodit-general") is None


def test_emergency_with_investment_conflict():
    profile = make_profile(is_emergency_situation=True, has_ipo_or_investment_plan=True)

    evaluation = evaluate(EmergencyInvestmentConflict(), profile, "kosmes-investment-loan")
    assert evaluation.penalty == thresholds.CONFLICT_PENALTIES["emergency_with_investment"]
    assert evaluate(EmergencyInvestmentConflict(), make_profile(is_emergency_situation=True),
                    "kosmes-investment-loan") is None


def test_restart_with_venture_investment_conflict():
    profile = make_profile(is_restart=True, has_venture_investment=True)

    evaluation = evaluate(RestartVentureConflict(), profile, "kodit-innovation-growth")
    assert evaluation.penalty == thresholds.CONFLICT_PENALTIES["restart_with_venture"]
    assert evaluate(RestartVentureConflict(), profile, "kodit-general") is None


def test_micro_venture_conflict_penalizes_micro_fund():
    profile = make_profile(employee_count=3, annual_revenue=5 * EOK, is_venture_company=True)

    evaluation = evaluate(MicroVentureConflict(), profile, "semas-micro-enterprise")
    assert evaluation.penalty == thresholds.CONFLICT_PENALTIES["micro_venture"]
    assert evaluation.warning

    kosmes = evaluate(MicroVentureConflict(), profile, "kosmes-general-stability")
    assert kosmes.penalty == 0
    assert kosmes.reason


def test_venture_certification_does_not_raise_micro_fund_score():
    plain = make_profile(employee_count=3, annual_revenue=5 * EOK)
    venture = make_profile(employee_count=3, annual_revenue=5 * EOK, is_venture_company=True)

    assert score(venture, "semas-micro-enterprise").score <= score(plain, "semas-micro-enterprise").score


def test_large_funding_micro_conflict():
    profile = make_profile(employee_count=3, annual_revenue=5 * EOK, required_funding_amount=12)

    evaluation = evaluate(LargeFundingMicroConflict(), profile, "semas-micro-enterprise")
    assert evaluation.penalty == thresholds.CONFLICT_PENALTIES["large_funding_micro"]
    assert evaluate(LargeFundingMicroConflict(), make_profile(required_funding_amount=12),
                    "semas-micro-enterprise") is None


def test_large_funding_fund_gets_extra_bonus():
    rules = thresholds.FUNDING_AMOUNT

    large = evaluate(FundingAmountEvaluator(), make_profile(required_funding_amount=20), "kosmes-investment-loan")
    small = evaluate(FundingAmountEvaluator(), make_profile(required_funding_amount=5), "kosmes-investment-loan")

    assert large.bonus == rules["match_bonus"] + rules["large_bonus"]
    assert small.bonus == rules["match_bonus"]
