"""
소진공 (SEMAS) small-business direct loans
"""
from ...rules.thresholds import EOK

SEMAS_EXCLUDED_INDUSTRIES = ["유흥주점", "사행시설", "부동산임대"]

SEMAS_FUNDS = [
    {
        "id": "semas-micro-enterprise",
        "institution_id": "semas",
        "track": "general",
        "name": "소공인특화자금",
        "short_name": "소공인특화",
        "fund_type": "loan",
        "description": "제조업 소공인의 운전·시설자금 지원",
        "funding_purpose": {"working": True, "facility": True},
        "target_scale": ["micro"],
        "eligibility": {
            "employee_count": {"max": 9, "description": "상시근로자 10인 미만"},
            "allowed_industries": ["manufacturing"],
            "excluded_industries": SEMAS_EXCLUDED_INDUSTRIES,
        },
        "terms": {
            "amount": {"max": 1 * EOK, "description": "기업당 1억원 이내"},
            "interest_rate": {"min": 2.0, "max": 3.0, "description": "연 2.0~3.0%"},
            "loan_period": {"years": 5, "grace_period": 2, "description": "5년 (거치 2년)"},
        },
    },
    {
        "id": "semas-growth",
        "institution_id": "semas",
        "track": "general",
        "name": "성장촉진자금",
        "short_name": "성장촉진",
        "fund_type": "loan",
        "description": "업력 3년 이상 소상공인의 성장 지원",
        "funding_purpose": {"working": True, "facility": True},
        "target_scale": ["micro"],
        "eligibility": {
            "business_age": {"min": 3, "description": "업력 3년 이상"},
            "allowed_industries": ["all"],
            "excluded_industries": SEMAS_EXCLUDED_INDUSTRIES,
        },
        "terms": {
            "amount": {"max": 2 * EOK, "description": "기업당 2억원 이내"},
            "interest_rate": {"min": 2.5, "max": 3.5, "description": "연 2.5~3.5%"},
            "loan_period": {"years": 5, "grace_period": 2, "description": "5년 (거치 2년)"},
        },
    },
    {
        "id": "semas-emergency",
        "institution_id": "semas",
        "track": "policy_linked",
        "name": "긴급자금",
        "short_name": "소상공인긴급",
        "fund_type": "loan",
        "description": "재해·경영위기 소상공인 긴급 운전자금",
        "funding_purpose": {"working": True, "facility": False},
        "target_scale": ["micro"],
        "eligibility": {
            "allowed_industries": ["all"],
            "required_conditions": {"is_emergency_situation": True},
            "evidence_requirements": ["emergency"],
        },
        "terms": {
            "amount": {"max": 0.7 * EOK, "description": "기업당 7천만원 이내"},
            "interest_rate": {"min": 2.0, "max": 2.0, "type": "fixed", "description": "연 2.0% 고정"},
            "loan_period": {"years": 5, "grace_period": 2, "description": "5년 (거치 2년)"},
        },
    },
    {
        "id": "semas-restart",
        "institution_id": "semas",
        "track": "exclusive",
        "name": "재도약지원자금",
        "short_name": "재도약",
        "fund_type": "loan",
        "description": "폐업 후 재창업하거나 업종을 전환한 소상공인 지원",
        "funding_purpose": {"working": True, "facility": True},
        "target_scale": ["micro"],
        "eligibility": {
            "allowed_industries": ["all"],
            "restart_only": True,
        },
        "terms": {
            "amount": {"max": 1 * EOK, "description": "기업당 1억원 이내"},
            "interest_rate": {"min": 2.0, "max": 2.5, "description": "연 2.0~2.5%"},
            "loan_period": {"years": 5, "grace_period": 2, "description": "5년 (거치 2년)"},
        },
    },
    {
        "id": "semas-disabled",
        "institution_id": "semas",
        "track": "exclusive",
        "name": "장애인기업지원자금",
        "short_name": "장애인기업",
        "fund_type": "loan",
        "description": "장애인 기업 및 장애인표준사업장 전용 지원",
        "funding_purpose": {"working": True, "facility": True},
        "eligibility": {
            "allowed_industries": ["all"],
            "preferred_owner_types": ["disabled"],
            "required_conditions": {"is_disabled_company": True},
            "additional_requirements": ["장애인 대표자 기업 또는 장애인표준사업장"],
        },
        "terms": {
            "amount": {"max": 2 * EOK, "description": "기업당 2억원 이내"},
            "interest_rate": {"min": 2.0, "max": 2.5, "type": "fixed", "description": "연 2.0~2.5% (우대금리)"},
            "loan_period": {"years": 5, "grace_period": 2, "description": "5년 (거치 2년)"},
        },
        "required_documents": ["장애인등록증 또는 장애인기업확인서", "사업자등록증", "매출 증빙"],
        "risk_factors": ["장애인 기업 요건 확인"],
        "preferential_conditions": ["보증료 감면", "우대금리 적용"],
    },
    {
        "id": "semas-youth",
        "institution_id": "semas",
        "track": "policy_linked",
        "name": "청년고용특별자금",
        "short_name": "청년고용",
        "fund_type": "loan",
        "description": "청년 대표 또는 청년 고용 소상공인 지원",
        "funding_purpose": {"working": True, "facility": False},
        "target_scale": ["micro"],
        "eligibility": {
            "allowed_industries": ["all"],
            "preferred_owner_types": ["youth"],
            "required_conditions": {"is_youth_company": True},
        },
        "terms": {
            "amount": {"max": 1 * EOK, "description": "기업당 1억원 이내"},
            "interest_rate": {"min": 2.0, "max": 2.5, "description": "연 2.0~2.5%"},
            "loan_period": {"years": 5, "grace_period": 2, "description": "5년 (거치 2년)"},
        },
    },
]
