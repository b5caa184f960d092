"""
Evaluators for prior usage and existing financial burden
"""
from typing import Optional

from ...rules import categories, thresholds
from ...utils.formatting import format_number
from .base import Evaluation, Evaluator

INSTITUTION_SHORT_NAMES = {"kosmes": "중진공", "semas": "소진공", "kodit": "신보", "kibo": "기보"}


class GraduationEvaluator(Evaluator):
    """Institution graduation cap: exclude at the limit, penalize and warn just below it"""
    id = "graduation"
    name = "졸업제"
    priority = 5

    def evaluate(self, state, normalized, fund) -> Optional[Evaluation]:
        rule = thresholds.GRADUATION.get(fund.institution_id)
        if not rule:
            return None

        count = normalized.usage_count(fund.institution_id)
        if count >= rule["exclude_at"]:
            return Evaluation(excluded=True, exclusion_message=rule["exclusion_message"])
        if count == rule["penalty_at"]:
            return Evaluation(penalty=rule["penalty"], warning=rule["penalty_message"])
        if count == rule["warning_at"]:
            return Evaluation(warning=rule["warning_message"])
        return None


class RecentUsageEvaluator(Evaluator):
    id = "recent-usage"
    name = "최근 이용"
    priority = 20

    def evaluate(self, state, normalized, fund) -> Optional[Evaluation]:
        if fund.institution_id not in normalized.profile.recently_used_institutions:
            return None
        org = INSTITUTION_SHORT_NAMES.get(fund.institution_id, fund.institution_id)
        return Evaluation(
            penalty=thresholds.RECENT_USAGE_PENALTY,
            warning=f"최근 {thresholds.RECENT_USAGE_YEARS}년 내 {org} 자금 이용 (연속 지원 제한)",
        )


class GuaranteeOrgEvaluator(Evaluator):
    id = "guarantee-org"
    name = "보증기관 이용 현황"
    priority = 15

    def evaluate(self, state, normalized, fund) -> Optional[Evaluation]:
        if not categories.is_guarantee_institution(fund.institution_id):
            return None

        current = normalized.profile.current_guarantee_org
        if current == "none":
            return None

        rules = thresholds.GUARANTEE_ORG
        if current == "both":
            return Evaluation(penalty=rules["both_penalty"], warning=rules["both_message"])
        if current != fund.institution_id:
            return Evaluation(penalty=rules["other_penalty"], warning=rules["other_message"])
        return Evaluation(
            warning=rules["same_message"].format(org=INSTITUTION_SHORT_NAMES[fund.institution_id])
        )


class LoanBalanceEvaluator(Evaluator):
    """Tiered penalty on existing policy-loan balance; direct loans are hit hardest"""
    id = "loan-balance"
    name = "기존 대출잔액"
    priority = 20

    def evaluate(self, state, normalized, fund) -> Optional[Evaluation]:
        balance = normalized.profile.existing_loan_balance or 0
        if balance <= 0:
            return None

        if categories.is_direct_loan_institution(fund.institution_id):
            kind = "direct"
        elif categories.is_guarantee_institution(fund.institution_id):
            kind = "guarantee"
        else:
            kind = "default"

        for tier in thresholds.LOAN_BALANCE_TIERS:
            if balance >= tier["threshold"]:
                return Evaluation(
                    penalty=tier[kind],
                    warning=tier["message"].format(balance=format_number(balance)),
                )
        return None


class SubsidyRatioEvaluator(Evaluator):
    """Benefit concentration: recent subsidy against revenue, absolute amount when revenue is zero"""
    id = "subsidy-ratio"
    name = "수혜액/매출 비율"
    priority = 25

    def evaluate(self, state, normalized, fund) -> Optional[Evaluation]:
        subsidy = normalized.profile.recent_year_subsidy_amount or 0
        if subsidy <= 0:
            return None

        revenue = normalized.annual_revenue
        if revenue > 0:
            ratio = subsidy * thresholds.EOK / revenue
            percent = round(ratio * 100)
            for tier in thresholds.SUBSIDY_RATIO_TIERS:
                if ratio > tier["ratio"]:
                    return Evaluation(penalty=tier["penalty"], warning=tier["message"].format(percent=percent))
            return None

        rules = thresholds.SUBSIDY_ABSOLUTE
        amount = format_number(subsidy)
        if subsidy >= rules["high_threshold"]:
            return Evaluation(penalty=rules["high_penalty"], warning=rules["high_message"].format(amount=amount))
        if subsidy >= rules["low_threshold"]:
            return Evaluation(penalty=rules["low_penalty"], warning=rules["low_message"].format(amount=amount))
        return None
