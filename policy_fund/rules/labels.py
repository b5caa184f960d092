"""
Korean display labels and fixed text templates
"""

TRACK_LABELS = {
    "exclusive": "전용",
    "policy_linked": "정책연계",
    "general": "일반",
    "guarantee": "보증",
}

TRACK_DISPLAY_NAMES = {
    "exclusive": "전용자금",
    "policy_linked": "정책연계",
    "general": "일반",
    "guarantee": "보증",
}

SCALE_LABELS = {
    "micro": "소공인",
    "small": "소기업",
    "medium": "중기업",
    "venture": "벤처기업",
    "innobiz": "이노비즈",
    "mainbiz": "메인비즈",
}

EXCLUDED_REASON_LABELS = {
    "track-blocked": "트랙차단",
    "hard-exclusion": "결격사유",
    "delinquency": "체납",
    "credit-issue": "신용문제",
    "scale-not-met": "기업규모 미충족",
    "requirement-not-met": "요건불충족",
    "policy-purpose-mismatch": "정책목적불일치",
    "insufficient-evidence": "근거부족",
    "graduation-cap": "졸업제",
    "below-threshold": "점수미달",
    "rank-cutoff": "순위제외",
}

TRACK_BLOCK_RULES = {
    True: "전용자격보유→일반트랙제외",
    False: "전용자격미보유→전용트랙제외",
}
TRACK_BLOCK_NOTES = {
    True: "전용자격 보유 기업은 일반자금 대신 전용자금을 우선 이용합니다",
    False: "전용자금은 해당 자격(장애인/여성/재창업 등) 보유 기업만 신청 가능합니다",
}

TRACK_WHY_QUALIFIED = "{qualifications} 자격 보유 → 전용자금 우선 추천"
TRACK_WHY_NOT_QUALIFIED = "전용자격 미보유 → 전용자금 신청 불가"

# Credit and tax states: (what_is_missing / excluded label, rule, note)
CREDIT_STATE_TEXT = {
    "tax_active": (
        "체납",
        "체납_미정리",
        "국세/지방세 체납 중인 기업은 정책자금 신청이 제한됩니다. 체납 해소 후 신청 가능합니다.",
    ),
    "credit_current": (
        "신용문제",
        "현재_연체",
        "현재 연체/부실 상태인 기업은 정책자금 신청이 제한됩니다.",
    ),
    "tax_resolving": (
        "체납정리중",
        "체납_정리중",
        "체납 정리 중/분납 확정 상태 - 완납 후 신청 가능 여부 확인 필요",
    ),
    "credit_past_resolved": (
        "과거신용문제",
        "과거_연체해소",
        "과거 연체 이력 있음 - 현재 정상 상태이나 심사 시 확인 필요",
    ),
    "restart_reason_unknown": (
        "재창업사유확인필요",
        "재창업_사유미확인",
        "재창업 사유가 불명확합니다. 정당한 사유 확인 시 재도전자금 신청 가능",
    ),
}

# Undetermined decision variables: (variable, how to confirm)
DECISION_VARIABLE_TEXT = {
    "export": ("수출실적/계획", "수출 실적 또는 수출 계획 보유 여부를 확인하세요"),
    "rnd": ("R&D/기술자산", "특허, 기업부설연구소, R&D 활동 여부를 확인하세요"),
    "credit_rating": ("신용등급", "기업 신용등급을 확인하세요 (NICE, KED 등)"),
    "business_age_exception": (
        "업력예외조건",
        "청년창업사관학교, TIPS 등 업력 예외 해당 여부를 확인하세요",
    ),
}
DEFAULT_MISSING = "결정 변수 미확정"
DEFAULT_HOW_TO_CONFIRM = "추가 서류 제출 시 확정 가능"

EXCLUSIVE_WHY = "{name}은(는) 귀사의 전용자격에 해당하는 우선 검토 자금입니다."

RANK_REASONS = {
    1: "{name}은(는) 귀사의 정책 자격과 목적이 가장 정확히 일치하는 자금입니다.",
    2: "{name}은(는) 1순위 다음으로 정합성이 높은 자금입니다.",
    3: "{name}은(는) 전용 자금 집행이 어려울 경우의 정책 목적 유사 대안입니다.",
    4: "{name}은(는) 직접대출 외 보증·간접자금으로 활용 가능합니다.",
    5: "{name}은(는) 참고용으로만 제시되는 자금입니다.",
}

RANK_ROLES = {
    "top": "[최우선] ",
    3: "[대안] ",
    4: "[차선] ",
    5: "[참고] ",
}

# (minimum score, template), checked top-down; the last entry has no floor.
SCORE_EXPLANATIONS = {
    "exclusive": [
        (90, "{role}본 자금은 귀사의 인증/자격 조건과 정책 목적이 완벽히 일치하는 {track} 자금입니다."),
        (80, "{role}본 자금은 귀사에 적합한 {track} 자금으로, 우선 검토 대상입니다."),
        (0, "{role}본 자금은 {track} 자금이나, 일부 조건 확인이 필요합니다."),
    ],
    "policy_linked": [
        (80, "{role}본 자금은 귀사의 사업 방향과 정책 목적이 잘 부합하는 {track} 자금입니다."),
        (70, "{role}본 자금은 {track} 자금으로, 현실적 대안이 될 수 있습니다."),
        (0, "{role}본 자금은 {track} 자금이나, 적합도 확인이 필요합니다."),
    ],
    "general": [
        (70, "{role}본 자금은 일반적인 지원 조건을 충족하는 {track} 자금입니다."),
        (60, "{role}본 자금은 기본 조건은 충족하나, 정책 정합성은 보통 수준입니다."),
        (0, "{role}본 자금은 조건은 충족하나, 우선순위가 낮은 {track} 자금입니다."),
    ],
    "guarantee": [
        (70, "{role}본 자금은 담보력 보완에 유용한 {track} 상품입니다."),
        (0, "{role}본 자금은 플랜B로 고려할 수 있는 {track} 상품입니다."),
    ],
}
