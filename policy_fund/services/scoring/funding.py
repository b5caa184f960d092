"""
Evaluators for the requested funding purpose and amount
"""
from typing import Optional

from ...rules import categories, thresholds
from ...utils.formatting import format_number
from .base import Evaluation, Evaluator


class FundingPurposeEvaluator(Evaluator):
    id = "funding-purpose"
    name = "자금용도 매칭"
    priority = 30

    def evaluate(self, state, normalized, fund) -> Optional[Evaluation]:
        requested = normalized.profile.requested_funding_purpose
        if not requested:
            return None

        bonus = thresholds.FUNDING_PURPOSE_BONUS
        working = fund.funding_purpose.working
        facility = fund.funding_purpose.facility

        if requested == "working":
            if working and not facility:
                return Evaluation(bonus=bonus["working"], reason="운전자금 전용 - 용도 일치")
            if facility and not working:
                return Evaluation(
                    penalty=bonus["mismatch_penalty"],
                    warning="용도 불일치 (운전자금 필요, 시설자금 전용)",
                )
        elif requested == "facility":
            if facility and not working:
                return Evaluation(bonus=bonus["facility"], reason="시설자금 전용 - 용도 일치")
            if working and not facility:
                return Evaluation(
                    penalty=bonus["mismatch_penalty"],
                    warning="용도 불일치 (시설자금 필요, 운전자금 전용)",
                )
        elif requested == "both":
            if working and facility:
                return Evaluation(bonus=bonus["both"], reason="시설자금+운전자금 모두 지원 가능")
            if facility:
                return Evaluation(bonus=bonus["facility_partial"], reason="시설자금 지원 가능")
        return None


class FundingAmountEvaluator(Evaluator):
    id = "funding-amount"
    name = "필요자금 규모"
    priority = 31

    def evaluate(self, state, normalized, fund) -> Optional[Evaluation]:
        required = normalized.profile.required_funding_amount or 0
        fund_max = fund.terms.amount.max
        if required <= 0 or not fund_max:
            return None

        rules = thresholds.FUNDING_AMOUNT
        amount = format_number(required)

        if required * thresholds.EOK > fund_max:
            return Evaluation(warning=f"필요 자금 초과 (한도: {round(fund_max / thresholds.EOK)}억원)")

        if required >= rules["large_threshold"] and categories.is_fund_in_category(fund.id, "large_funding"):
            return Evaluation(
                bonus=rules["match_bonus"] + rules["large_bonus"],
                reason=f"필요 자금 ({amount}억) 한도 충족 - {rules['large_message']}",
            )
        return Evaluation(bonus=rules["match_bonus"], reason=f"필요 자금 ({amount}억) 한도 충족")
