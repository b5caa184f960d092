"""
Issuing institutions
"""

INSTITUTION_RECORDS = [
    {
        "id": "kosmes",
        "name": "중진공",
        "full_name": "중소벤처기업진흥공단",
        "description": "중소기업 정책자금 직접대출",
        "website": "https://www.kosmes.or.kr",
        "contact_number": "1811-3655",
    },
    {
        "id": "kodit",
        "name": "신보",
        "full_name": "신용보증기금",
        "description": "중소기업 신용보증",
        "website": "https://www.kodit.co.kr",
        "contact_number": "1588-6565",
    },
    {
        "id": "kibo",
        "name": "기보",
        "full_name": "기술보증기금",
        "description": "기술력 기반 보증",
        "website": "https://www.kibo.or.kr",
        "contact_number": "1544-1120",
    },
    {
        "id": "semas",
        "name": "소진공",
        "full_name": "소상공인시장진흥공단",
        "description": "소상공인 정책자금 직접대출",
        "website": "https://www.semas.or.kr",
        "contact_number": "1357",
    },
]
