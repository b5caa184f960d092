"""
Named conflict rules for situationally contradictory requests
"""
from typing import Optional

from ...rules import thresholds
from ...utils.formatting import format_eok
from .base import Evaluation, Evaluator

PENALTY = thresholds.CONFLICT_PENALTIES


class EmergencyInvestmentConflict(Evaluator):
    """Emergency stabilisation does not combine with an equity raise"""
    id = "conflict-emergency-investment"
    name = "긴급경영+투자유치 충돌"
    priority = 60

    def evaluate(self, state, normalized, fund) -> Optional[Evaluation]:
        profile = normalized.profile
        if not profile.is_emergency_situation:
            return None
        if not (profile.has_ipo_or_investment_plan or profile.accepts_equity_dilution):
            return None
        if fund.id != "kosmes-investment-loan":
            return None
        return Evaluation(
            penalty=PENALTY["emergency_with_investment"],
            warning="긴급경영 상황에서 투자유치형 자금은 부적합",
        )


class RestartVentureConflict(Evaluator):
    id = "conflict-restart-venture"
    name = "재창업+벤처투자 충돌"
    priority = 61

    FUNDS = ["kosmes-investment-loan", "kodit-innovation-growth"]

    def evaluate(self, state, normalized, fund) -> Optional[Evaluation]:
        profile = normalized.profile
        if not profile.is_restart or not profile.has_venture_investment:
            return None
        if fund.id not in self.FUNDS:
            return None
        return Evaluation(
            penalty=PENALTY["restart_with_venture"],
            warning="재창업 기업은 재도전자금 우선 검토 권장",
        )


class MicroVentureConflict(Evaluator):
    id = "conflict-micro-venture"
    name = "소상공인+벤처 충돌"
    priority = 62

    def evaluate(self, state, normalized, fund) -> Optional[Evaluation]:
        if not normalized.is_micro or not normalized.profile.is_venture_company:
            return None
        if fund.institution_id == "semas":
            return Evaluation(
                penalty=PENALTY["micro_venture"],
                warning="벤처인증 보유 기업은 중진공 혁신자금도 검토 권장",
            )
        if fund.institution_id == "kosmes":
            return Evaluation(reason="벤처인증 소규모 기업 - 중진공 혁신자금 우대 대상")
        return None


class LargeFundingMicroConflict(Evaluator):
    id = "conflict-large-funding-micro"
    name = "대규모자금+소상공인 충돌"
    priority = 63

    def evaluate(self, state, normalized, fund) -> Optional[Evaluation]:
        required = normalized.profile.required_funding_amount or 0
        if required < thresholds.LARGE_FUNDING_THRESHOLD or not normalized.is_micro:
            return None
        if fund.institution_id != "semas":
            return None
        return Evaluation(
            penalty=PENALTY["large_funding_micro"],
            warning=f"필요자금 {format_eok(required)} - 소진공 한도(7천만~1억) 초과 가능성",
        )
