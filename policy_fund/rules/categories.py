"""
Fund categories and keyword tables used by the scoring evaluators
"""
from typing import Dict, List

FUND_CATEGORIES: Dict[str, List[str]] = {
    # exempt from the per-institution cap
    "special_purpose": [
        "kosmes-smart-factory",
        "kosmes-investment-loan",
        "kosmes-carbon-neutral",
        "kosmes-emergency",
    ],
    "innovation": [
        "kosmes-investment-loan",
        "kodit-innovation-growth",
        "kibo-venture-startup",
    ],
    "green": [
        "kosmes-carbon-neutral",
        "kibo-green-energy",
    ],
    "green_energy": [
        "kibo-green-energy",
    ],
    "restart": [
        "kosmes-restart",
        "semas-restart",
    ],
    "emergency": [
        "kosmes-emergency",
        "semas-emergency",
    ],
    "smart_factory": [
        "kosmes-smart-factory",
    ],
    "job_creation": [
        "kodit-job-creation",
    ],
    "social_value": [
        "semas-disabled",
        "kibo-social-venture",
    ],
    "large_funding": [
        "kodit-securitization",
        "kosmes-investment-loan",
    ],
}

FUND_KEYWORDS: Dict[str, List[str]] = {
    "restart": ["재도전", "재창업", "재기", "재도약"],
    "smart_factory": ["스마트공장", "스마트팩토리"],
    "esg": ["녹색전환", "탄소중립", "ESG", "친환경"],
    "green_energy": ["신재생", "태양광", "풍력", "수소", "에너지"],
    "emergency": ["긴급", "경영안정", "위기"],
    "job_creation": ["일자리", "고용", "굿잡"],
    "social_value": ["사회적", "장애인", "소셜벤처"],
    "innovation": ["혁신", "스케일업", "투자", "유니콘", "아이콘"],
    "micro": ["소공인", "소상공인"],
}

# category -> keyword list consulted alongside the id list
CATEGORY_KEYWORDS = {
    "restart": "restart",
    "innovation": "innovation",
    "green": "esg",
    "green_energy": "green_energy",
    "emergency": "emergency",
    "smart_factory": "smart_factory",
    "job_creation": "job_creation",
    "social_value": "social_value",
}

DIRECT_LOAN_INSTITUTIONS = ["kosmes", "semas"]
GUARANTEE_INSTITUTIONS = ["kodit", "kibo"]


def is_fund_in_category(fund_id: str, category: str) -> bool:
    return fund_id in FUND_CATEGORIES.get(category, [])


def matches_keywords(fund_name: str, keyword_group: str) -> bool:
    return any(keyword in fund_name for keyword in FUND_KEYWORDS.get(keyword_group, []))


def fund_matches(fund_id: str, fund_name: str, category: str) -> bool:
    """True when the fund is listed in the category or its name carries a category keyword"""
    if is_fund_in_category(fund_id, category):
        return True
    keyword_group = CATEGORY_KEYWORDS.get(category)
    return bool(keyword_group) and matches_keywords(fund_name, keyword_group)


def is_restart_fund(fund_id: str, fund_name: str) -> bool:
    return "restart" in fund_id or fund_matches(fund_id, fund_name, "restart")


def is_special_purpose(fund_id: str) -> bool:
    return is_fund_in_category(fund_id, "special_purpose")


def is_direct_loan_institution(institution_id: str) -> bool:
    return institution_id in DIRECT_LOAN_INSTITUTIONS


def is_guarantee_institution(institution_id: str) -> bool:
    return institution_id in GUARANTEE_INSTITUTIONS
