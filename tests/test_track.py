from policy_fund.services.normalizer import normalize_profile
from policy_fund.services.track_service import track_service

from conftest import make_profile


def test_no_qualification_blocks_exclusive(general_profile):
    decision = track_service.decide(normalize_profile(general_profile))

    assert decision.blocked_tracks == ["exclusive"]
    assert decision.allowed_tracks == ["policy_linked", "general", "guarantee"]
    assert not decision.has_exclusive_qualification
    assert decision.why == "전용자격 미보유 → 전용자금 신청 불가"


def test_qualification_blocks_general(disabled_standard_profile):
    decision = track_service.decide(normalize_profile(disabled_standard_profile))

    assert decision.blocked_tracks == ["general"]
    assert decision.allowed_tracks == ["exclusive", "policy_linked", "guarantee"]
    assert decision.allowed_track_labels == ["전용", "정책연계", "보증"]
    assert "장애인표준사업장" in decision.why


def test_qualifying_statuses_are_listed_in_fixed_order():
    profile = make_profile(is_female=True, is_social_enterprise=True, is_disabled=True)
    decision = track_service.decide(normalize_profile(profile))

    assert decision.qualifying_statuses == ["장애인기업", "사회적기업", "여성기업"]
    assert decision.why == "장애인기업, 사회적기업, 여성기업 자격 보유 → 전용자금 우선 추천"
