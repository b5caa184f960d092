"""
기보 (KIBO) technology guarantees
"""
from ...rules.thresholds import EOK

KIBO_FUNDS = [
    {
        "id": "kibo-tech-evaluation",
        "institution_id": "kibo",
        "track": "guarantee",
        "name": "기술평가보증",
        "short_name": "기술평가",
        "fund_type": "guarantee",
        "description": "기술력 평가를 바탕으로 한 보증",
        "funding_purpose": {"working": True, "facility": True},
        "eligibility": {
            "allowed_industries": ["manufacturing", "it_service", "other_service"],
            "evidence_requirements": ["technology"],
        },
        "terms": {
            "amount": {"max": 30 * EOK, "description": "기업당 30억원 이내"},
            "guarantee_ratio": {"min": 85, "max": 100, "description": "보증비율 85~100%"},
        },
        "risk_factors": ["기술평가 등급에 따라 한도 차등"],
    },
    {
        "id": "kibo-venture-startup",
        "institution_id": "kibo",
        "track": "policy_linked",
        "name": "혁신스타트업보증",
        "short_name": "혁신스타트업",
        "fund_type": "guarantee",
        "description": "벤처·이노비즈 인증 창업기업 보증",
        "funding_purpose": {"working": True, "facility": True},
        "eligibility": {
            "business_age": {"max": 10, "description": "창업 10년 이내"},
            "required_certifications": ["venture", "innobiz"],
            "allowed_industries": ["manufacturing", "it_service"],
        },
        "terms": {
            "amount": {"max": 30 * EOK, "description": "기업당 30억원 이내"},
            "guarantee_ratio": {"min": 95, "max": 100, "description": "보증비율 95~100%"},
        },
    },
    {
        "id": "kibo-ip-collateral",
        "institution_id": "kibo",
        "track": "policy_linked",
        "name": "IP담보보증",
        "short_name": "IP담보",
        "fund_type": "guarantee",
        "description": "특허 등 지식재산을 담보로 한 보증",
        "funding_purpose": {"working": True, "facility": True},
        "eligibility": {
            "required_conditions": {"has_patent": True},
            "evidence_requirements": ["technology"],
        },
        "terms": {
            "amount": {"max": 10 * EOK, "description": "기업당 10억원 이내"},
            "guarantee_ratio": {"min": 90, "max": 100, "description": "보증비율 90~100%"},
        },
    },
    {
        "id": "kibo-rnd",
        "institution_id": "kibo",
        "track": "policy_linked",
        "name": "R&D보증",
        "short_name": "R&D",
        "fund_type": "guarantee",
        "description": "연구개발 단계 및 사업화 자금 보증",
        "funding_purpose": {"working": True, "facility": True},
        "eligibility": {
            "required_conditions": {"has_rnd_activity": True},
        },
        "terms": {
            "amount": {"max": 10 * EOK, "description": "기업당 10억원 이내"},
            "guarantee_ratio": {"min": 90, "max": 100, "description": "보증비율 90~100%"},
        },
    },
    {
        "id": "kibo-social-venture",
        "institution_id": "kibo",
        "track": "exclusive",
        "name": "소셜벤처보증",
        "short_name": "소셜벤처",
        "fund_type": "guarantee",
        "description": "사회적 가치를 창출하는 기업 전용 보증",
        "funding_purpose": {"working": True, "facility": True},
        "eligibility": {
            "allowed_industries": ["all"],
            "required_conditions": {"is_social_enterprise": True},
        },
        "terms": {
            "amount": {"max": 10 * EOK, "description": "기업당 10억원 이내"},
            "guarantee_ratio": {"min": 95, "max": 100, "description": "보증비율 95~100%"},
        },
    },
    {
        "id": "kibo-green-energy",
        "institution_id": "kibo",
        "track": "policy_linked",
        "name": "신재생에너지보증",
        "short_name": "신재생에너지",
        "fund_type": "guarantee",
        "description": "신재생에너지 사업 기업 보증",
        "funding_purpose": {"working": True, "facility": True},
        "eligibility": {
            "allowed_industries": ["all"],
            "required_conditions": {"is_green_energy_business": True},
            "evidence_requirements": ["environment"],
        },
        "terms": {
            "amount": {"max": 30 * EOK, "description": "기업당 30억원 이내"},
            "guarantee_ratio": {"min": 90, "max": 100, "description": "보증비율 90~100%"},
        },
    },
]
