"""
Business thresholds for eligibility, scoring and ranking.

Every numeric literal the engine relies on lives here so that a change of
policy is a data change. Amounts are in 억원 unless stated otherwise.
"""

EOK = 100_000_000

# --- eligibility evaluator -------------------------------------------------

BASE_ELIGIBILITY_SCORE = 50

ELIGIBILITY_IMPACT = {
    "business_age_fail": -30,
    "business_age_pass": 10,
    "business_age_exception_pass": 10,
    "business_age_exception_possible": -15,
    "revenue_fail": -20,
    "revenue_pass": 10,
    "employee_fail": -25,
    "employee_pass": 10,
    "industry_all": 5,
    "industry_allowed": 10,
    "industry_not_primary": -5,
    "industry_unrestricted": 5,
    "credit_fail": -25,
    "credit_pass": 10,
    "certification_pass": 30,
    "certification_fail": -20,
    "export_pass": 10,
    "export_missing": -15,
    "purpose_pass": 5,
    "purpose_partial": -10,
    "restart_only_pass": 30,
    "owner_preference": 10,
    "certification_bonus": 10,
    "export_new_market_bonus": 30,
    "tech_assets_kibo_bonus": 30,
    "emergency_bonus": 20,
    "restart_general_bonus": 5,
}

# --- size classification ---------------------------------------------------

MICRO_EMPLOYEE_LIMIT_HEAVY = 10
MICRO_EMPLOYEE_LIMIT_OTHER = 5
HEAVY_INDUSTRIES = ["manufacturing", "construction", "logistics"]
SMALL_EMPLOYEE_LIMIT = 50
SMALL_REVENUE_LIMIT = 120 * EOK

LARGE_FUNDING_THRESHOLD = 10

STRATEGIC_KSIC_PREFIXES = ["C26", "C21", "C28", "C29", "C30", "J62", "J63", "M70"]
STRATEGIC_KEYWORDS = [
    "반도체", "이차전지", "배터리", "바이오", "인공지능", "AI", "로봇",
    "미래차", "전기차", "수소", "디스플레이", "소프트웨어",
]

# --- track decision --------------------------------------------------------

# Ordered; the rationale string lists statuses in this order.
EXCLUSIVE_QUALIFYING_STATUSES = [
    ("is_disabled_standard", "장애인표준사업장"),
    ("is_disabled", "장애인기업"),
    ("is_social_enterprise", "사회적기업"),
    ("is_restart", "재창업기업"),
    ("is_female", "여성기업"),
]

VALID_RESTART_REASONS = ["covid", "recession", "partner_default", "disaster", "illness", "policy"]

# --- scoring pipeline ------------------------------------------------------

SCORE_CAP = 95
PERFECT_MATCH_CAP = 100

GRADUATION = {
    "kosmes": {
        "exclude_at": 5,
        "penalty_at": 4,
        "penalty": 30,
        "penalty_message": "중진공 정책자금 4회 이용 (졸업제 임박 - 마지막 신청 기회)",
        "warning_at": 3,
        "warning_message": "중진공 정책자금 3회 이용 (졸업제 주의 - 2회 남음)",
        "exclusion_message": "중진공 정책자금 5회 이상 이용 (졸업제 적용 - 신청 불가)",
    },
}

RECENT_USAGE_PENALTY = 10
RECENT_USAGE_YEARS = 2

GUARANTEE_ORG = {
    "both_penalty": 30,
    "both_message": "신보+기보 동시 이용 중 (추가 보증 한도 제한)",
    "other_penalty": 10,
    "other_message": "타 보증기관 이용 중 (전환 시 심사 필요)",
    "same_message": "{org} 이용 중 - 추가 보증 한도 확인 필요",
}

# Ordered from most to least severe.
LOAN_BALANCE_TIERS = [
    {
        "threshold": 15, "direct": 40, "guarantee": 25, "default": 30,
        "message": "기존 정책자금 잔액 과다 ({balance}억, 한도 초과 우려)",
    },
    {
        "threshold": 10, "direct": 25, "guarantee": 15, "default": 20,
        "message": "기존 정책자금 잔액 {balance}억 (한도 근접)",
    },
    {
        "threshold": 5, "direct": 10, "guarantee": 5, "default": 8,
        "message": "기존 정책자금 잔액 {balance}억 (여유 한도 축소)",
    },
]

SUBSIDY_RATIO_TIERS = [
    {"ratio": 0.3, "penalty": 30, "message": "최근 1년 수혜액/매출 비율 과다 ({percent}%, 추가 지원 제한 가능)"},
    {"ratio": 0.2, "penalty": 20, "message": "최근 1년 수혜액/매출 비율 {percent}% (심사 시 고려됨)"},
    {"ratio": 0.1, "penalty": 10, "message": "최근 1년 수혜액/매출 비율 {percent}% (주의)"},
]
SUBSIDY_ABSOLUTE = {
    "high_threshold": 10,
    "high_penalty": 25,
    "high_message": "최근 1년 정책자금 수혜 과다 ({amount}억원)",
    "low_threshold": 5,
    "low_penalty": 15,
    "low_message": "최근 1년 정책자금 수혜 ({amount}억원)",
}

FUNDING_PURPOSE_BONUS = {
    "working": 10,
    "facility": 20,
    "both": 15,
    "facility_partial": 5,
    "mismatch_penalty": 25,
}

FUNDING_AMOUNT = {
    "match_bonus": 5,
    "large_threshold": 10,
    "large_bonus": 5,
    "large_message": "대규모 자금 조달에 적합",
}

SPECIAL_BONUSES = {
    "venture_innovation": 20,
    "venture_micro_penalty": 25,
    "restart_dedicated": 5,
    "restart_general_penalty": 5,
    "smart_factory": 5,
    "esg": 25,
    "green_energy": 25,
    "esg_green_ceiling": 35,
    "emergency": 5,
    "job_creation": 25,
    "social_dedicated": 5,
    "social_general": 10,
    "past_default_restart": 20,
    "past_default_general_penalty": 15,
    "credit_recovery_restart": 15,
    "tax_installment_penalty": 10,
    "strategic_micro": 10,
}

CONFLICT_PENALTIES = {
    "emergency_with_investment": 20,
    "restart_with_venture": 15,
    "large_funding_micro": 15,
    "micro_venture": 10,
}

# --- ranking ---------------------------------------------------------------

DEFAULT_TARGET_SCALE = ["small", "medium"]
SIZE_MATCH_EXACT = 100
SIZE_MATCH_COMPATIBLE = 80
SIZE_MATCH_NONE = 50
SIZE_COMPATIBILITY = {
    "micro": ["micro", "small"],
    "small": ["small", "micro", "medium"],
    "medium": ["medium", "small"],
    "venture": ["venture", "small", "medium"],
    "innobiz": ["innobiz", "small", "medium"],
    "mainbiz": ["mainbiz", "small", "medium"],
}

# Index is rank - 1; ranks past the table use the last entry.
RANK_PENALTIES = [0, 3, 6, 9, 12]

LABEL_BANDS = {
    "strong_max_rank": 2,
    "alternative_rank": 3,
    "general_alternative_score": 60,
    "policy_linked_alternative_score": 50,
}
CONFIDENCE_BANDS = {
    "exclusive_high": 50,
    "policy_linked_high": 70,
}
SCORE_LEVELS = {"high": 70, "medium": 40}
