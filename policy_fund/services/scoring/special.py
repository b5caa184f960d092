"""
Evaluators for special situations: investment, restart, special-purpose plans,
social value, credit history and strategic industries
"""
from typing import Optional

from ...rules import categories, thresholds
from .base import Evaluation, Evaluator

BONUS = thresholds.SPECIAL_BONUSES


class VentureInvestmentEvaluator(Evaluator):
    id = "venture-investment"
    name = "벤처투자 유치"
    priority = 40

    def evaluate(self, state, normalized, fund) -> Optional[Evaluation]:
        if not normalized.profile.has_venture_investment:
            return None

        if categories.fund_matches(fund.id, fund.name, "innovation"):
            return Evaluation(
                bonus=BONUS["venture_innovation"],
                reason="벤처투자 유치 실적 보유 - 혁신성장/스케일업 자금 최우선",
            )
        if fund.institution_id == "semas" or categories.matches_keywords(fund.name, "micro"):
            return Evaluation(
                penalty=BONUS["venture_micro_penalty"],
                warning="벤처투자 유치 기업에 소상공인 자금 부적합",
            )
        return None


class RestartEvaluator(Evaluator):
    id = "restart"
    name = "재창업"
    priority = 41

    def evaluate(self, state, normalized, fund) -> Optional[Evaluation]:
        profile = normalized.profile
        if not profile.is_restart:
            return None

        if categories.is_restart_fund(fund.id, fund.name):
            return Evaluation(
                bonus=BONUS["restart_dedicated"],
                reason="재창업 기업 - 재도전 자금 최우선 추천",
                is_perfect_match=True,
            )
        if not profile.has_past_default:
            return Evaluation(warning="재창업기업 - 재도전자금 우선 검토 권장")
        if profile.is_past_default_resolved:
            return Evaluation(
                penalty=BONUS["restart_general_penalty"],
                warning="재창업기업(부실정리) - 일반자금 심사 시 이력 확인됨",
            )
        return None


class SmartFactoryEvaluator(Evaluator):
    id = "smart-factory"
    name = "스마트공장"
    priority = 42

    def evaluate(self, state, normalized, fund) -> Optional[Evaluation]:
        if not normalized.profile.has_smart_factory_plan:
            return None
        if not categories.fund_matches(fund.id, fund.name, "smart_factory"):
            return None

        if normalized.industry_category == "manufacturing":
            return Evaluation(
                bonus=BONUS["smart_factory"],
                reason="스마트공장 구축/고도화 계획 (제조업) - 스마트공장자금 최우선 추천",
                is_perfect_match=True,
            )
        return Evaluation(
            bonus=BONUS["smart_factory"],
            reason="스마트공장 구축 계획 (비제조업 주의)",
            warning="스마트공장자금은 제조업 우선 - 비제조업은 심사 제한 가능",
        )


class EsgGreenEnergyEvaluator(Evaluator):
    """ESG and green-energy bonuses stack up to a shared ceiling"""
    id = "esg-green-energy"
    name = "ESG/신재생에너지"
    priority = 43

    def evaluate(self, state, normalized, fund) -> Optional[Evaluation]:
        profile = normalized.profile
        if not profile.has_esg_investment_plan and not profile.is_green_energy_business:
            return None

        bonus = 0
        reasons = []
        if profile.has_esg_investment_plan and categories.fund_matches(fund.id, fund.name, "green"):
            bonus += BONUS["esg"]
            reasons.append("ESG/탄소중립 시설투자 계획")
        if profile.is_green_energy_business and categories.fund_matches(fund.id, fund.name, "green_energy"):
            bonus += BONUS["green_energy"]
            reasons.append("신재생에너지 사업")

        if bonus <= 0:
            return None

        ceiling = BONUS["esg_green_ceiling"]
        if bonus > ceiling:
            return Evaluation(
                bonus=ceiling,
                reason=f"{' + '.join(reasons)} - 녹색/신재생 자금 최우선 (가점 {ceiling}점, 상한 적용)",
                is_perfect_match=True,
            )
        return Evaluation(
            bonus=bonus,
            reason=f"{' + '.join(reasons)} - 녹색/신재생 자금 최우선 추천",
            is_perfect_match=True,
        )


class EmergencyEvaluator(Evaluator):
    id = "emergency"
    name = "긴급경영안정"
    priority = 44

    def evaluate(self, state, normalized, fund) -> Optional[Evaluation]:
        if not normalized.profile.is_emergency_situation:
            return None
        if categories.fund_matches(fund.id, fund.name, "emergency"):
            return Evaluation(
                bonus=BONUS["emergency"],
                reason="경영위기 상황 - 긴급경영안정자금 최우선 추천",
                is_perfect_match=True,
            )
        return None


class JobCreationEvaluator(Evaluator):
    id = "job-creation"
    name = "일자리 창출"
    priority = 45

    def evaluate(self, state, normalized, fund) -> Optional[Evaluation]:
        if not normalized.profile.has_job_creation:
            return None
        if categories.fund_matches(fund.id, fund.name, "job_creation"):
            return Evaluation(
                bonus=BONUS["job_creation"],
                reason="고용증가 실적 보유 - 일자리창출자금 최우선 추천",
            )
        return None


class SocialValueEvaluator(Evaluator):
    id = "social-value"
    name = "사회적가치 기업"
    priority = 46

    def evaluate(self, state, normalized, fund) -> Optional[Evaluation]:
        profile = normalized.profile
        if not profile.is_disabled_standard and not profile.is_social_enterprise:
            return None

        if categories.fund_matches(fund.id, fund.name, "social_value"):
            return Evaluation(
                bonus=BONUS["social_dedicated"],
                reason="사회적가치 기업 전용자금 - 최우선 추천",
                is_perfect_match=True,
            )
        return Evaluation(bonus=BONUS["social_general"], reason="사회적가치 기업 우대 대상")


class PastDefaultResolvedEvaluator(Evaluator):
    id = "past-default-resolved"
    name = "과거 부실 정리"
    priority = 47

    def evaluate(self, state, normalized, fund) -> Optional[Evaluation]:
        profile = normalized.profile
        if not profile.has_past_default or not profile.is_past_default_resolved:
            return None

        if categories.is_restart_fund(fund.id, fund.name):
            return Evaluation(
                bonus=BONUS["past_default_restart"],
                reason="과거 부실 정리 완료 - 재도전 자금 최우선 추천",
            )
        return Evaluation(
            penalty=BONUS["past_default_general_penalty"],
            warning="과거 부실 이력 (정리 완료 - 심사 시 불이익 가능)",
        )


class CreditRecoveryEvaluator(Evaluator):
    id = "credit-recovery"
    name = "신용회복 진행"
    priority = 48

    WARNING = "신용회복 절차 진행 중 - 재창업/재도전 전용자금만 신청 가능"

    def evaluate(self, state, normalized, fund) -> Optional[Evaluation]:
        if not normalized.profile.is_credit_recovery_in_progress:
            return None

        if categories.is_restart_fund(fund.id, fund.name):
            return Evaluation(
                bonus=BONUS["credit_recovery_restart"],
                reason="신용회복 진행 중 - 재도전자금 우대 대상",
                warning=self.WARNING,
            )
        return Evaluation(warning=self.WARNING)


class TaxInstallmentEvaluator(Evaluator):
    id = "tax-installment"
    name = "세금 체납 분납"
    priority = 49

    def evaluate(self, state, normalized, fund) -> Optional[Evaluation]:
        profile = normalized.profile
        if profile.tax_delinquency_status != "active" or not profile.has_tax_installment_approval:
            return None
        return Evaluation(
            penalty=BONUS["tax_installment_penalty"],
            warning="세금 체납 중 (분납 승인 - 심사 시 불이익 가능)",
        )


class StrategicIndustryEvaluator(Evaluator):
    """Micro companies in strategic industries are steered towards KOSMES funds"""
    id = "strategic-industry"
    name = "전략산업"
    priority = 50

    def evaluate(self, state, normalized, fund) -> Optional[Evaluation]:
        if not normalized.is_strategic_industry or not normalized.is_micro:
            return None
        if fund.institution_id != "kosmes":
            return None
        return Evaluation(
            bonus=BONUS["strategic_micro"],
            reason="전략산업(이차전지/반도체/AI 등) - 중진공 우선 지원",
        )
