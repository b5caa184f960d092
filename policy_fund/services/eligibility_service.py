"""
Eligibility service for checking a company against one fund's criteria
"""
import logging
from typing import Callable, Dict, List, Optional, Tuple

from ..models.company import NormalizedProfile
from ..models.fund import PolicyFundKnowledge
from ..models.result import CheckResult, EligibilityResult
from ..rules import categories, labels, thresholds
from ..utils.formatting import format_currency, format_number

logger = logging.getLogger(__name__)

IMPACT = thresholds.ELIGIBILITY_IMPACT

# condition key -> Korean label
CONDITION_LABELS: Dict[str, str] = {
    "is_venture_company": "벤처기업 인증",
    "is_innobiz": "이노비즈 인증",
    "has_patent": "특허 보유",
    "has_research_institute": "기업부설연구소",
    "has_rnd_activity": "R&D 활동",
    "has_export_revenue": "수출 실적",
    "has_technology_certification": "기술인증",
    "is_youth_company": "청년기업",
    "is_female": "여성기업",
    "is_disabled": "장애인 대표자",
    "is_disabled_company": "장애인기업",
    "is_disabled_standard": "장애인표준사업장",
    "is_social_enterprise": "사회적기업",
    "has_smart_factory_plan": "스마트공장 구축 계획",
    "has_esg_investment_plan": "ESG/탄소중립 투자 계획",
    "is_restart": "재창업기업",
    "is_emergency_situation": "경영위기 상황",
    "has_youth_employment_plan": "청년 고용 계획",
    "is_green_energy_business": "신재생에너지 사업",
    "has_job_creation": "고용 증가 실적",
    "needs_large_funding": "대규모 자금 수요",
}

# Conditions not read directly off the raw profile
DERIVED_CONDITIONS: Dict[str, Callable[[NormalizedProfile], Optional[bool]]] = {
    "has_technology_certification": lambda n: n.profile.is_venture_company or n.profile.is_innobiz,
    "is_disabled_company": lambda n: n.profile.is_disabled or n.profile.is_disabled_standard,
    "needs_large_funding": lambda n: n.needs_large_funding,
}

# Conditions whose failure means missing evidence rather than an unmet requirement
EVIDENCE_CONDITIONS = {
    "has_rnd_activity": "기술근거없음",
    "has_export_revenue": "수출없음",
    "has_patent": "기술근거없음",
    "has_research_institute": "기술근거없음",
    "has_technology_certification": "기술근거없음",
}

# Tri-state conditions: unknown maps to a decision variable
UNKNOWN_CONDITION_VARIABLES = {
    "has_rnd_activity": "rnd",
    "has_export_revenue": "export",
}

EVIDENCE_LABELS = {
    "technology": ("기술 근거", "기술근거없음"),
    "export": ("수출 근거", "수출없음"),
    "investment": ("투자유치 근거", "투자유치근거없음"),
    "smart_factory": ("스마트공장 근거", "스마트공장계획없음"),
    "environment": ("환경투자 근거", "환경투자근거없음"),
    "emergency": ("경영위기 근거", "경영위기근거없음"),
}

HARD_EXCLUSION_TEXT = {
    "inactive": ("휴·폐업", "휴폐업", "휴·폐업 상태 - 재창업/재도전 전용자금만 신청 가능"),
    "credit_recovery": (
        "신용회복",
        "신용회복중",
        "신용회복 절차 진행 중 - 재창업/재도전 전용자금만 신청 가능",
    ),
    "bank_delinquency": ("금융기관 연체", "금융기관_연체", "금융기관 연체 중인 기업은 신청이 제한됩니다"),
    "guarantee_accident": ("보증사고", "보증사고_미정리", "보증사고 미정리 기업은 신청이 제한됩니다"),
    "past_default": ("부실이력", "부실_미정리", "부실 이력이 정리되지 않은 기업은 신청이 제한됩니다"),
}


def resolve_credit_state(normalized: NormalizedProfile, fund: PolicyFundKnowledge) -> Tuple[Optional[str], Optional[str]]:
    """
    Tax and credit state of a company for one fund

    Returns:
        (level, key) where level is 'excluded', 'conditional' or None and key
        indexes labels.CREDIT_STATE_TEXT
    """
    profile = normalized.profile
    tax = profile.tax_delinquency_status

    if tax == "active" and not profile.has_tax_installment_approval:
        return "excluded", "tax_active"
    if profile.credit_issue_status == "current":
        return "excluded", "credit_current"

    # Exclusive funds accept restarted companies with a recognised restart reason
    if profile.is_restart and fund.track == "exclusive" and profile.restart_reason in thresholds.VALID_RESTART_REASONS:
        return None, None

    if tax in ("resolving", "installment", "active"):
        return "conditional", "tax_resolving"
    if profile.credit_issue_status == "past_resolved":
        return "conditional", "credit_past_resolved"
    if profile.is_restart and profile.restart_reason == "unknown":
        return "conditional", "restart_reason_unknown"
    return None, None


def is_restart_only_fund(fund: PolicyFundKnowledge) -> bool:
    return fund.eligibility.restart_only or categories.is_restart_fund(fund.id, fund.name)


class EligibilityService:
    """Walks every criterion of a fund and itemizes the outcome"""

    def check(self, normalized: NormalizedProfile, fund: PolicyFundKnowledge) -> EligibilityResult:
        """
        Evaluate one fund for a normalized profile

        Absolute exclusions and the scale gate short-circuit; every other
        criterion is evaluated so the rationale is complete.

        Args:
            normalized: Normalized company profile
            fund: Fund definition

        Returns:
            EligibilityResult
        """
        hard = self._check_absolute_exclusions(normalized, fund)
        if hard:
            return self._build_result(fund, [hard], hard_exclusion=hard)

        scale_check = self._check_scale(normalized, fund)
        if scale_check and scale_check.status == "fail":
            return self._build_result(fund, [scale_check])

        checks: List[CheckResult] = []
        if scale_check:
            checks.append(scale_check)

        for step in (
            self._check_business_age,
            self._check_revenue,
            self._check_employees,
            self._check_industry,
            self._check_credit_rating,
            self._check_certifications,
            self._check_export,
            self._check_funding_purpose,
        ):
            result = step(normalized, fund)
            if result:
                checks.append(result)

        checks.extend(self._check_required_conditions(normalized, fund))
        checks.extend(self._check_evidence(normalized, fund))

        restart_check = self._check_restart_only(normalized, fund)
        if restart_check:
            checks.append(restart_check)

        checks.extend(self._collect_bonuses(normalized, fund))

        return self._build_result(fund, checks)

    def _build_result(
        self,
        fund: PolicyFundKnowledge,
        checks: List[CheckResult],
        hard_exclusion: Optional[CheckResult] = None
    ) -> EligibilityResult:
        score = thresholds.BASE_ELIGIBILITY_SCORE + sum(c.impact for c in checks)
        score = max(0, min(100, score))
        failed = [c for c in checks if c.status == "fail"]

        return EligibilityResult(
            fund_id=fund.id,
            fund_name=fund.name,
            institution_id=fund.institution_id,
            track=fund.track,
            is_eligible=not failed,
            eligibility_score=score,
            hard_exclusion=hard_exclusion,
            checks=checks,
            passed=[c for c in checks if c.status == "pass"],
            failed=failed,
            warnings=[c for c in checks if c.status == "warning"],
            bonuses=[c for c in checks if c.status == "bonus"],
            unknown=[c for c in checks if c.status == "unknown"],
        )

    @staticmethod
    def _exclusion(key: str) -> CheckResult:
        condition, rule, note = HARD_EXCLUSION_TEXT[key]
        return CheckResult(
            category="exclusion", condition=condition, status="fail", description=note, rule=rule
        )

    def _check_absolute_exclusions(
        self, normalized: NormalizedProfile, fund: PolicyFundKnowledge
    ) -> Optional[CheckResult]:
        profile = normalized.profile

        level, key = resolve_credit_state(normalized, fund)
        if level == "excluded":
            condition, rule, note = labels.CREDIT_STATE_TEXT[key]
            return CheckResult(
                category="exclusion", condition=condition, status="fail", description=note, rule=rule
            )

        restart_fund = is_restart_only_fund(fund)
        if profile.is_inactive and not restart_fund:
            return self._exclusion("inactive")
        if profile.is_credit_recovery_in_progress and not restart_fund:
            return self._exclusion("credit_recovery")
        if profile.is_currently_delinquent:
            return self._exclusion("bank_delinquency")
        if profile.has_unresolved_guarantee_accident:
            return self._exclusion("guarantee_accident")
        if profile.has_past_default and not profile.is_past_default_resolved:
            return self._exclusion("past_default")

        industry_text = f"{profile.industry} {profile.industry_detail or ''}"
        for fragment in fund.eligibility.excluded_industries:
            if fragment and fragment in industry_text:
                return CheckResult(
                    category="exclusion",
                    condition="제외 업종",
                    status="fail",
                    description=f"제외 업종 해당 ({fragment})",
                    rule="제외업종",
                )
        return None

    def _check_scale(self, normalized: NormalizedProfile, fund: PolicyFundKnowledge) -> Optional[CheckResult]:
        if not fund.target_scale:
            return None

        target = ", ".join(labels.SCALE_LABELS[s] for s in fund.target_scale)
        if set(fund.target_scale) & set(normalized.eligible_scales):
            return CheckResult(
                category="scale",
                condition="기업규모",
                status="pass",
                description=f"기업규모 충족 ({target} 대상)",
            )
        return CheckResult(
            category="scale",
            condition="기업규모",
            status="fail",
            description=f"이 자금은 {target} 전용입니다.",
            rule=f"대상: {', '.join(fund.target_scale)} / 귀사: {normalized.scale}",
        )

    def _check_business_age(self, normalized: NormalizedProfile, fund: PolicyFundKnowledge) -> Optional[CheckResult]:
        bound = fund.eligibility.business_age
        if not bound:
            return None

        age = normalized.business_age
        age_text = format_number(age)

        if bound.min is not None and age < bound.min:
            return CheckResult(
                category="business_age",
                condition="업력",
                status="fail",
                description=f"업력 {age_text}년 (최소 {format_number(bound.min)}년 필요)",
                impact=IMPACT["business_age_fail"],
                rule="업력조건불충족",
            )

        if bound.max is not None and age > bound.max:
            if bound.max_with_exception is not None and bound.exceptions and age <= bound.max_with_exception:
                held = [e for e in normalized.profile.business_age_exceptions if e in bound.exceptions]
                if held:
                    return CheckResult(
                        category="business_age",
                        condition="업력",
                        status="pass",
                        description=f"업력 {age_text}년 - 예외 적용 ({', '.join(held)})",
                        impact=IMPACT["business_age_exception_pass"],
                    )
                if not normalized.profile.business_age_exceptions:
                    return CheckResult(
                        category="business_age",
                        condition="업력",
                        status="unknown",
                        description=(
                            f"업력 {age_text}년 - 예외 적용 시 "
                            f"{format_number(bound.max_with_exception)}년까지 가능"
                        ),
                        impact=IMPACT["business_age_exception_possible"],
                        rule="business_age_exception",
                    )
            return CheckResult(
                category="business_age",
                condition="업력",
                status="fail",
                description=f"업력 {age_text}년 (최대 {format_number(bound.max)}년)",
                impact=IMPACT["business_age_fail"],
                rule="업력조건불충족",
            )

        return CheckResult(
            category="business_age",
            condition="업력",
            status="pass",
            description=f"업력 {age_text}년 ({bound.description})",
            impact=IMPACT["business_age_pass"],
        )

    def _check_revenue(self, normalized: NormalizedProfile, fund: PolicyFundKnowledge) -> Optional[CheckResult]:
        bound = fund.eligibility.revenue
        if not bound:
            return None

        revenue = normalized.annual_revenue
        in_range = (bound.min is None or revenue >= bound.min) and (bound.max is None or revenue <= bound.max)
        if in_range:
            return CheckResult(
                category="revenue",
                condition="매출",
                status="pass",
                description=f"연매출 {format_currency(revenue)} ({bound.description})",
                impact=IMPACT["revenue_pass"],
            )
        return CheckResult(
            category="revenue",
            condition="매출",
            status="fail",
            description=f"연매출 {format_currency(revenue)} - {bound.description} 미충족",
            impact=IMPACT["revenue_fail"],
            rule="매출조건불충족",
        )

    def _check_employees(self, normalized: NormalizedProfile, fund: PolicyFundKnowledge) -> Optional[CheckResult]:
        bound = fund.eligibility.employee_count
        if not bound:
            return None

        count = normalized.employee_count
        in_range = (bound.min is None or count >= bound.min) and (bound.max is None or count <= bound.max)
        if in_range:
            return CheckResult(
                category="employee_count",
                condition="직원수",
                status="pass",
                description=f"직원 {count}명 ({bound.description})",
                impact=IMPACT["employee_pass"],
            )
        return CheckResult(
            category="employee_count",
            condition="직원수",
            status="fail",
            description=f"직원 {count}명 - {bound.description} 미충족",
            impact=IMPACT["employee_fail"],
            rule="직원수조건불충족",
        )

    def _check_industry(self, normalized: NormalizedProfile, fund: PolicyFundKnowledge) -> Optional[CheckResult]:
        allowed = fund.eligibility.allowed_industries
        if not allowed:
            return CheckResult(
                category="industry",
                condition="업종",
                status="pass",
                description="업종 제한 없음",
                impact=IMPACT["industry_unrestricted"],
            )
        if "all" in allowed:
            return CheckResult(
                category="industry",
                condition="업종",
                status="pass",
                description="전 업종 지원 대상",
                impact=IMPACT["industry_all"],
            )
        if normalized.industry_category in allowed:
            return CheckResult(
                category="industry",
                condition="업종",
                status="pass",
                description="주요 지원 업종 해당",
                impact=IMPACT["industry_allowed"],
            )
        return CheckResult(
            category="industry",
            condition="업종",
            status="warning",
            description="주요 지원 업종이 아님 (확인 필요)",
            impact=IMPACT["industry_not_primary"],
        )

    def _check_credit_rating(self, normalized: NormalizedProfile, fund: PolicyFundKnowledge) -> Optional[CheckResult]:
        bound = fund.eligibility.credit_rating
        if not bound or bound.max is None:
            return None

        rating = normalized.profile.credit_rating
        if rating is None:
            return CheckResult(
                category="credit",
                condition="신용등급",
                status="unknown",
                description=f"신용등급 정보 없음 ({bound.description})",
                rule="credit_rating",
            )
        if rating > bound.max:
            return CheckResult(
                category="credit",
                condition="신용등급",
                status="fail",
                description=f"신용등급 {rating}등급 ({bound.description} 미충족)",
                impact=IMPACT["credit_fail"],
                rule="신용등급미달",
            )
        return CheckResult(
            category="credit",
            condition="신용등급",
            status="pass",
            description=f"신용등급 {rating}등급 ({bound.description})",
            impact=IMPACT["credit_pass"],
        )

    def _check_certifications(self, normalized: NormalizedProfile, fund: PolicyFundKnowledge) -> Optional[CheckResult]:
        required = fund.eligibility.required_certifications
        if not required:
            return None

        names = ", ".join(labels.SCALE_LABELS[c] for c in required)
        held = [c for c in required if c in normalized.eligible_scales]
        if held:
            return CheckResult(
                category="certification",
                condition="인증",
                status="pass",
                description=f"{', '.join(labels.SCALE_LABELS[c] for c in held)} 인증 보유",
                impact=IMPACT["certification_pass"],
            )
        return CheckResult(
            category="certification",
            condition="인증",
            status="fail",
            description=f"필요 인증 미보유 ({names} 중 1개 이상)",
            impact=IMPACT["certification_fail"],
            rule="인증미보유",
        )

    def _check_export(self, normalized: NormalizedProfile, fund: PolicyFundKnowledge) -> Optional[CheckResult]:
        if not fund.eligibility.requires_export:
            return None

        has_export = normalized.profile.has_export_revenue
        if has_export:
            return CheckResult(
                category="export",
                condition="수출",
                status="pass",
                description="수출 실적/계획 보유",
                impact=IMPACT["export_pass"],
            )
        if has_export is None:
            return CheckResult(
                category="export",
                condition="수출",
                status="unknown",
                description="수출 실적/계획 여부 미확인",
                rule="export",
            )
        return CheckResult(
            category="export",
            condition="수출",
            status="warning",
            description="수출 실적/계획 없음",
            impact=IMPACT["export_missing"],
        )

    def _check_funding_purpose(self, normalized: NormalizedProfile, fund: PolicyFundKnowledge) -> Optional[CheckResult]:
        requested = normalized.profile.requested_funding_purpose
        if not requested:
            return None

        supports = fund.funding_purpose
        if requested == "both":
            if supports.working and supports.facility:
                return CheckResult(
                    category="funding_purpose",
                    condition="자금용도",
                    status="pass",
                    description="운전·시설자금 모두 지원",
                    impact=IMPACT["purpose_pass"],
                )
            only = "운전자금" if supports.working else "시설자금"
            return CheckResult(
                category="funding_purpose",
                condition="자금용도",
                status="warning",
                description=f"{only}만 지원 (일부 용도 충족)",
                impact=IMPACT["purpose_partial"],
            )

        wanted = "운전자금" if requested == "working" else "시설자금"
        if getattr(supports, requested):
            return CheckResult(
                category="funding_purpose",
                condition="자금용도",
                status="pass",
                description=f"{wanted} 지원 가능",
                impact=IMPACT["purpose_pass"],
            )
        return CheckResult(
            category="funding_purpose",
            condition="자금용도",
            status="warning",
            description=f"용도 불일치 ({wanted} 미지원)",
        )

    def _check_required_conditions(self, normalized: NormalizedProfile, fund: PolicyFundKnowledge) -> List[CheckResult]:
        checks = []
        for key in fund.eligibility.required_conditions.required_keys():
            label = CONDITION_LABELS.get(key, key)
            resolver = DERIVED_CONDITIONS.get(key)
            value = resolver(normalized) if resolver else getattr(normalized.profile, key, None)

            if value is None and key in UNKNOWN_CONDITION_VARIABLES:
                checks.append(CheckResult(
                    category="condition",
                    condition=label,
                    status="unknown",
                    description=f"{label} 여부 미확인",
                    rule=UNKNOWN_CONDITION_VARIABLES[key],
                ))
            elif value:
                checks.append(CheckResult(
                    category="condition",
                    condition=label,
                    status="pass",
                    description=f"{label} 요건 충족",
                ))
            else:
                checks.append(CheckResult(
                    category="evidence" if key in EVIDENCE_CONDITIONS else "condition",
                    condition=label,
                    status="fail",
                    description=f"{label} 요건 미충족",
                    rule=EVIDENCE_CONDITIONS.get(key, f"{label.replace(' ', '')}미충족"),
                ))
        return checks

    def _evidence_value(self, normalized: NormalizedProfile, kind: str) -> Tuple[Optional[bool], Optional[str]]:
        """(held, unknown decision variable) for one evidence kind"""
        profile = normalized.profile
        if kind == "technology":
            if normalized.has_tech_assets:
                return True, None
            if profile.has_rnd_activity is None:
                return None, "rnd"
            return False, None
        if kind == "export":
            if profile.has_export_revenue is None:
                return None, "export"
            return profile.has_export_revenue, None
        if kind == "investment":
            return profile.has_ipo_or_investment_plan or profile.accepts_equity_dilution, None
        if kind == "smart_factory":
            return profile.has_smart_factory_plan, None
        if kind == "environment":
            return profile.has_esg_investment_plan or profile.is_green_energy_business, None
        if kind == "emergency":
            return profile.is_emergency_situation, None
        return False, None

    def _check_evidence(self, normalized: NormalizedProfile, fund: PolicyFundKnowledge) -> List[CheckResult]:
        checks = []
        for kind in fund.eligibility.evidence_requirements:
            label, rule = EVIDENCE_LABELS[kind]
            held, variable = self._evidence_value(normalized, kind)
            if variable:
                checks.append(CheckResult(
                    category="evidence",
                    condition=label,
                    status="unknown",
                    description=f"{label} 확인 필요",
                    rule=variable,
                ))
            elif held:
                checks.append(CheckResult(
                    category="evidence",
                    condition=label,
                    status="pass",
                    description=f"{label} 보유",
                ))
            else:
                checks.append(CheckResult(
                    category="evidence",
                    condition=label,
                    status="fail",
                    description=f"{label} 부족",
                    rule=rule,
                ))
        return checks

    def _check_restart_only(self, normalized: NormalizedProfile, fund: PolicyFundKnowledge) -> Optional[CheckResult]:
        if not fund.eligibility.restart_only:
            return None
        if normalized.profile.is_restart:
            return CheckResult(
                category="restart",
                condition="재창업",
                status="pass",
                description="재창업기업 요건 충족",
                impact=IMPACT["restart_only_pass"],
            )
        return CheckResult(
            category="restart",
            condition="재창업",
            status="fail",
            description="재창업기업 전용 자금 (재창업 이력 없음)",
            rule="재창업요건미충족",
        )

    def _collect_bonuses(self, normalized: NormalizedProfile, fund: PolicyFundKnowledge) -> List[CheckResult]:
        profile = normalized.profile
        bonuses = []

        def bonus(category, condition, description, key):
            bonuses.append(CheckResult(
                category=category, condition=condition, status="bonus",
                description=description, impact=IMPACT[key],
            ))

        preferred = fund.eligibility.preferred_owner_types
        if preferred and normalized.owner_characteristic in preferred:
            bonus("owner", "대표자 우대", "우대 대상 대표자 유형", "owner_preference")

        if profile.is_venture_company or profile.is_innobiz:
            bonus("bonus", "기술인증", "벤처/이노비즈 인증 보유", "certification_bonus")

        if fund.id == "kosmes-new-market" and profile.has_export_revenue:
            bonus("bonus", "수출", "수출 실적 보유 - 신시장진출 우대", "export_new_market_bonus")

        if fund.institution_id == "kibo" and normalized.has_tech_assets:
            bonus("bonus", "기술자산", "기술자산 보유 - 기보 우대", "tech_assets_kibo_bonus")

        if profile.is_emergency_situation and categories.is_fund_in_category(fund.id, "emergency"):
            bonus("bonus", "경영위기", "경영위기 상황 - 긴급자금 우대", "emergency_bonus")

        if profile.is_restart and not is_restart_only_fund(fund):
            bonus("bonus", "재창업", "재창업기업 가점", "restart_general_bonus")

        return bonuses


# Global eligibility service instance
eligibility_service = EligibilityService()
