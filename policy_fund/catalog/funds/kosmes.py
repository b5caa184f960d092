"""
중진공 (KOSMES) direct-loan programmes
"""
from ...rules.thresholds import EOK

KOSMES_EXCLUDED_INDUSTRIES = ["부동산업", "유흥업", "금융업"]
KOSMES_EXCLUSION_CONDITIONS = ["휴·폐업 중인 기업", "세금 체납 중인 기업", "금융기관 연체 중인 기업"]

KOSMES_FUNDS = [
    {
        "id": "kosmes-innovation-startup",
        "institution_id": "kosmes",
        "track": "policy_linked",
        "name": "혁신창업사업화자금",
        "short_name": "혁신창업",
        "fund_type": "loan",
        "description": "창업 초기 기업의 사업화를 위한 시설·운전자금 지원",
        "funding_purpose": {"working": True, "facility": True},
        "eligibility": {
            "business_age": {
                "max": 7,
                "max_with_exception": 10,
                "exceptions": ["youth_startup_academy", "global_startup_academy", "tips_program"],
                "description": "창업 7년 이내 중소기업",
            },
            "revenue": {"max": 120 * EOK, "description": "연매출 120억원 이하"},
            "allowed_industries": ["manufacturing", "it_service", "other_service"],
            "excluded_industries": KOSMES_EXCLUDED_INDUSTRIES,
            "evidence_requirements": ["technology"],
            "additional_requirements": ["사업성 및 기술성 보유", "신용관리정보 미등록"],
            "exclusion_conditions": KOSMES_EXCLUSION_CONDITIONS,
        },
        "terms": {
            "amount": {"max": 60 * EOK, "description": "기업당 연간 60억원 이내"},
            "interest_rate": {"min": 2.0, "max": 3.5, "type": "variable", "description": "연 2.0~3.5%"},
            "loan_period": {"years": 5, "grace_period": 2, "description": "5년 이내 (거치 2년 포함)"},
            "repayment_method": "거치 후 원금균등분할상환",
        },
        "required_documents": ["사업계획서", "재무제표 (최근 3개년)", "사업자등록증", "법인등기부등본"],
        "risk_factors": ["최근 매출 감소 시 심사 불리", "창업 후 실적 부족 시 한도 축소 가능"],
        "preferential_conditions": ["청년창업기업 금리 0.3%p 우대", "벤처·이노비즈 인증기업 우대"],
        "official_url": "https://www.kosmes.or.kr",
    },
    {
        "id": "kosmes-new-market",
        "institution_id": "kosmes",
        "track": "policy_linked",
        "name": "신시장진출지원자금",
        "short_name": "신시장진출",
        "fund_type": "loan",
        "description": "수출, 내수 확대, 신사업 진출 기업 지원",
        "funding_purpose": {"working": True, "facility": True},
        "eligibility": {
            "business_age": {"min": 1, "description": "업력 1년 이상"},
            "revenue": {"max": 120 * EOK, "description": "연매출 120억원 이하"},
            "allowed_industries": ["all"],
            "requires_export": True,
            "evidence_requirements": ["export"],
            "additional_requirements": ["수출실적 보유 또는 수출계획 수립 기업"],
            "exclusion_conditions": KOSMES_EXCLUSION_CONDITIONS,
        },
        "terms": {
            "amount": {"max": 60 * EOK, "description": "기업당 연간 60억원 이내"},
            "interest_rate": {"min": 2.0, "max": 3.5, "description": "연 2.0~3.5%"},
            "loan_period": {"years": 5, "grace_period": 2, "description": "5년 (거치 2년)"},
        },
        "risk_factors": ["수출 실적 증빙 필요", "신사업 계획의 구체성 필요"],
    },
    {
        "id": "kosmes-emergency",
        "institution_id": "kosmes",
        "track": "policy_linked",
        "name": "긴급경영안정자금",
        "short_name": "긴급경영",
        "fund_type": "loan",
        "description": "경영 위기 상황의 중소기업 긴급 지원",
        "funding_purpose": {"working": True, "facility": False},
        "eligibility": {
            "required_conditions": {"is_emergency_situation": True},
            "evidence_requirements": ["emergency"],
            "additional_requirements": ["재해·재난 피해 기업", "매출 급감 기업 (전년 대비 20% 이상)"],
            "exclusion_conditions": ["휴·폐업", "세금 체납", "금융기관 연체 90일 초과"],
        },
        "terms": {
            "amount": {"max": 10 * EOK, "description": "기업당 10억원 이내"},
            "interest_rate": {"min": 1.5, "max": 2.5, "type": "fixed", "description": "연 1.5~2.5%"},
            "loan_period": {"years": 5, "grace_period": 2, "description": "5년 (거치 2년)"},
        },
        "risk_factors": ["피해 증빙 서류 필수"],
    },
    {
        "id": "kosmes-investment-loan",
        "institution_id": "kosmes",
        "track": "policy_linked",
        "name": "투융자복합금융",
        "short_name": "투융자복합",
        "fund_type": "loan",
        "description": "기술성과 성장성이 우수한 기업에 투자와 융자를 복합 지원",
        "funding_purpose": {"working": True, "facility": True},
        "target_scale": ["small", "medium", "venture", "innobiz"],
        "eligibility": {
            "business_age": {"min": 3, "description": "업력 3년 이상"},
            "revenue": {"min": 30 * EOK, "description": "연매출 30억원 이상"},
            "allowed_industries": ["manufacturing", "it_service"],
            "evidence_requirements": ["investment"],
            "additional_requirements": ["성장성 및 기술성 평가 통과"],
        },
        "terms": {
            "amount": {"min": 10 * EOK, "max": 100 * EOK, "description": "10억~100억원"},
            "interest_rate": {"min": 2.0, "max": 3.0, "description": "연 2.0~3.0% + 성과연동"},
            "loan_period": {"years": 7, "grace_period": 3, "description": "7년 (거치 3년)"},
        },
        "risk_factors": ["지분 희석 가능성", "성과연동 이자 발생"],
    },
    {
        "id": "kosmes-restart",
        "institution_id": "kosmes",
        "track": "exclusive",
        "name": "재창업자금",
        "short_name": "재도전",
        "fund_type": "loan",
        "description": "실패 경험이 있는 기업인의 재창업 지원",
        "funding_purpose": {"working": True, "facility": True},
        "eligibility": {
            "business_age": {"max": 7, "description": "재창업 7년 이내"},
            "allowed_industries": ["all"],
            "restart_only": True,
            "additional_requirements": ["폐업 후 재창업한 기업", "성실경영 평가 통과"],
        },
        "terms": {
            "amount": {"max": 50 * EOK, "description": "기업당 50억원 이내"},
            "interest_rate": {"min": 2.0, "max": 3.0, "description": "연 2.0~3.0%"},
            "loan_period": {"years": 6, "grace_period": 3, "description": "6년 (거치 3년)"},
        },
        "risk_factors": ["재창업 사유 증빙 필요"],
    },
    {
        "id": "kosmes-smart-factory",
        "institution_id": "kosmes",
        "track": "policy_linked",
        "name": "스마트공장지원자금",
        "short_name": "스마트공장",
        "fund_type": "loan",
        "description": "스마트공장 구축 및 고도화 시설자금 지원",
        "funding_purpose": {"working": False, "facility": True},
        "eligibility": {
            "allowed_industries": ["manufacturing"],
            "required_conditions": {"has_smart_factory_plan": True},
            "evidence_requirements": ["smart_factory"],
            "additional_requirements": ["스마트공장 구축 계획 보유"],
        },
        "terms": {
            "amount": {"max": 100 * EOK, "description": "기업당 100억원 이내"},
            "interest_rate": {"min": 2.0, "max": 3.0, "description": "연 2.0~3.0%"},
            "loan_period": {"years": 10, "grace_period": 4, "description": "10년 (거치 4년)"},
        },
    },
    {
        "id": "kosmes-carbon-neutral",
        "institution_id": "kosmes",
        "track": "policy_linked",
        "name": "탄소중립시설자금",
        "short_name": "탄소중립",
        "fund_type": "loan",
        "description": "탄소 감축 및 친환경 설비 도입 시설자금",
        "funding_purpose": {"working": False, "facility": True},
        "eligibility": {
            "allowed_industries": ["all"],
            "required_conditions": {"has_esg_investment_plan": True},
            "evidence_requirements": ["environment"],
        },
        "terms": {
            "amount": {"max": 60 * EOK, "description": "기업당 60억원 이내"},
            "interest_rate": {"min": 2.0, "max": 2.5, "description": "연 2.0~2.5%"},
            "loan_period": {"years": 10, "grace_period": 4, "description": "10년 (거치 4년)"},
        },
    },
    {
        "id": "kosmes-general-stability",
        "institution_id": "kosmes",
        "track": "general",
        "name": "일반경영안정자금",
        "short_name": "경영안정",
        "fund_type": "loan",
        "description": "일반 중소기업 운전·시설자금 지원",
        "funding_purpose": {"working": True, "facility": True},
        "target_scale": ["small", "medium"],
        "eligibility": {
            "business_age": {"min": 3, "description": "업력 3년 이상"},
            "allowed_industries": ["all"],
            "excluded_industries": KOSMES_EXCLUDED_INDUSTRIES,
            "exclusion_conditions": ["휴·폐업", "세금 체납", "금융기관 연체"],
        },
        "terms": {
            "amount": {"max": 60 * EOK, "description": "기업당 연간 60억원 이내"},
            "interest_rate": {"min": 2.5, "max": 3.5, "description": "연 2.5~3.5%"},
            "loan_period": {"years": 5, "grace_period": 2, "description": "5년 (거치 2년)"},
        },
        "required_documents": ["재무제표", "사업자등록증", "납세증명서"],
        "risk_factors": ["재무상태 심사 중요", "기존 정책자금 이용 실적 확인"],
        "preferential_conditions": ["고용 증가 기업 금리 우대", "수출 기업 우대"],
    },
]
