"""
신보 (KODIT) credit guarantees
"""
from ...rules.thresholds import EOK

KODIT_EXCLUDED_INDUSTRIES = ["부동산임대", "유흥주점", "사행시설"]

KODIT_FUNDS = [
    {
        "id": "kodit-general",
        "institution_id": "kodit",
        "track": "guarantee",
        "name": "일반보증",
        "short_name": "신보일반",
        "fund_type": "guarantee",
        "description": "담보력이 부족한 중소기업의 금융기관 대출 보증",
        "funding_purpose": {"working": True, "facility": True},
        "eligibility": {
            "allowed_industries": ["all"],
            "excluded_industries": KODIT_EXCLUDED_INDUSTRIES,
            "credit_rating": {"max": 6, "description": "신용등급 6등급 이내"},
        },
        "terms": {
            "amount": {"max": 30 * EOK, "description": "기업당 30억원 이내"},
            "guarantee_ratio": {"min": 85, "max": 100, "description": "보증비율 85~100%"},
        },
        "risk_factors": ["신용등급 하락 시 한도 축소"],
    },
    {
        "id": "kodit-startup",
        "institution_id": "kodit",
        "track": "guarantee",
        "name": "창업기업보증",
        "short_name": "신보창업",
        "fund_type": "guarantee",
        "description": "창업 5년 이내 기업 우대 보증",
        "funding_purpose": {"working": True, "facility": True},
        "eligibility": {
            "business_age": {"max": 5, "description": "창업 5년 이내"},
            "allowed_industries": ["all"],
            "excluded_industries": KODIT_EXCLUDED_INDUSTRIES,
        },
        "terms": {
            "amount": {"max": 5 * EOK, "description": "기업당 5억원 이내"},
            "guarantee_ratio": {"min": 90, "max": 100, "description": "보증비율 90~100%"},
        },
    },
    {
        "id": "kodit-securitization",
        "institution_id": "kodit",
        "track": "guarantee",
        "name": "유동화회사보증",
        "short_name": "P-CBO",
        "fund_type": "guarantee",
        "description": "회사채 발행을 통한 대규모 자금 조달 지원",
        "funding_purpose": {"working": True, "facility": True},
        "target_scale": ["small", "medium", "venture", "innobiz", "mainbiz"],
        "eligibility": {
            "business_age": {"min": 3, "description": "업력 3년 이상"},
            "credit_rating": {"max": 5, "description": "신용등급 5등급 이내"},
            "required_conditions": {"needs_large_funding": True},
        },
        "terms": {
            "amount": {"min": 10 * EOK, "max": 150 * EOK, "description": "10억~150억원"},
            "guarantee_ratio": {"min": 100, "max": 100, "description": "전액보증"},
        },
        "risk_factors": ["채권시장 상황에 따라 발행 지연 가능"],
    },
    {
        "id": "kodit-innovation-growth",
        "institution_id": "kodit",
        "track": "policy_linked",
        "name": "혁신성장보증",
        "short_name": "혁신성장",
        "fund_type": "guarantee",
        "description": "혁신성장 분야 기업 우대 보증",
        "funding_purpose": {"working": True, "facility": True},
        "eligibility": {
            "allowed_industries": ["manufacturing", "it_service"],
            "evidence_requirements": ["technology"],
        },
        "terms": {
            "amount": {"max": 30 * EOK, "description": "기업당 30억원 이내"},
            "guarantee_ratio": {"min": 95, "max": 100, "description": "보증비율 95~100%"},
        },
    },
    {
        "id": "kodit-job-creation",
        "institution_id": "kodit",
        "track": "policy_linked",
        "name": "일자리창출보증",
        "short_name": "일자리창출",
        "fund_type": "guarantee",
        "description": "고용 증가 기업 우대 보증",
        "funding_purpose": {"working": True, "facility": True},
        "eligibility": {
            "allowed_industries": ["all"],
            "required_conditions": {"has_job_creation": True},
        },
        "terms": {
            "amount": {"max": 30 * EOK, "description": "기업당 30억원 이내"},
            "guarantee_ratio": {"min": 90, "max": 100, "description": "보증비율 90~100%"},
        },
    },
    {
        "id": "kodit-export",
        "institution_id": "kodit",
        "track": "policy_linked",
        "name": "수출기업보증",
        "short_name": "수출보증",
        "fund_type": "guarantee",
        "description": "수출 실적 보유 기업 우대 보증",
        "funding_purpose": {"working": True, "facility": False},
        "eligibility": {
            "allowed_industries": ["all"],
            "required_conditions": {"has_export_revenue": True},
        },
        "terms": {
            "amount": {"max": 30 * EOK, "description": "기업당 30억원 이내"},
            "guarantee_ratio": {"min": 90, "max": 100, "description": "보증비율 90~100%"},
        },
    },
]
