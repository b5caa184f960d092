import pytest

from policy_fund.catalog import default_catalog, load_catalog
from policy_fund.catalog.funds import SEED_FUND_RECORDS
from policy_fund.rules.thresholds import EOK
from policy_fund.services.matching_service import matching_service
from policy_fund.services.normalizer import ProfileNormalizationError

from conftest import make_profile


def by_id(entries):
    return {entry.fund_id: entry for entry in entries}


PROFILES = [
    make_profile(),
    make_profile(employee_count=5, annual_revenue=10 * EOK),
    make_profile(is_disabled_standard=True, industry="other_service", employee_count=12),
    make_profile(is_restart=True, restart_reason="covid", employee_count=4),
    make_profile(tax_delinquency_status="resolving", has_export_revenue=None, has_rnd_activity=None),
    make_profile(credit_issue_status="current"),
    make_profile(prior_usage_counts={"kosmes": 5}, is_venture_company=True, has_venture_investment=True),
]


@pytest.mark.parametrize("profile", PROFILES)
def test_every_fund_is_classified_exactly_once(profile):
    result = matching_service.classify(profile)
    ids = result.fund_ids()

    assert len(ids) == len(set(ids))
    assert sorted(ids) == sorted(f.id for f in default_catalog)
    assert result.total_funds_checked == len(default_catalog)


@pytest.mark.parametrize("profile", PROFILES)
def test_matched_respects_track_gate_and_top_n(profile):
    result = matching_service.classify(profile, top_n=3)
    blocked = set(result.track_decision.blocked_tracks)

    assert len(result.matched) <= 3
    assert [m.rank for m in result.matched] == list(range(1, len(result.matched) + 1))
    assert all(m.track not in blocked for m in result.matched)
    assert all(c.track not in blocked for c in result.conditional)
    assert all(m.display_score <= m.score for m in result.matched)


@pytest.mark.parametrize("profile", PROFILES)
def test_classification_is_deterministic(profile):
    first = matching_service.classify(profile)
    second = matching_service.classify(profile)

    assert first.model_dump_json() == second.model_dump_json()


def test_general_company(general_profile):
    result = matching_service.classify(general_profile)

    assert [m.fund_id for m in result.matched] == [
        "kosmes-general-stability",
        "kodit-general",
        "kodit-startup",
    ]
    top = result.matched[0]
    assert top.agency == "중진공"
    assert top.score == 70
    assert top.display_score == 70
    assert result.matched[1].display_score == 67

    excluded = by_id(result.excluded)
    assert excluded["kosmes-restart"].reason_code == "track-blocked"
    assert excluded["kosmes-restart"].rule_triggered == "전용자격미보유→전용트랙제외"
    assert excluded["kibo-tech-evaluation"].reason_code == "insufficient-evidence"
    assert excluded["kibo-tech-evaluation"].excluded_reason == "근거부족"
    assert excluded["kodit-job-creation"].reason_code == "requirement-not-met"
    assert excluded["kosmes-restart"].track_label == "전용"


def test_disabled_standard_workplace(disabled_standard_profile):
    result = matching_service.classify(disabled_standard_profile)

    assert result.track_decision.blocked_tracks == ["general"]

    top = result.matched[0]
    assert top.fund_id == "semas-disabled"
    assert top.rank == 1
    assert top.label == "전용·우선"
    assert top.confidence == "HIGH"
    assert top.score == 75
    assert "장애인기업 요건 충족" in top.hard_rules_passed

    stability = by_id(result.excluded)["kosmes-general-stability"]
    assert stability.reason_code == "track-blocked"
    assert stability.excluded_reason == "트랙차단"
    assert stability.rule_triggered == "전용자격보유→일반트랙제외"


def test_tax_resolving_makes_funds_conditional(disabled_standard_profile):
    profile = disabled_standard_profile.model_copy(update={"tax_delinquency_status": "resolving"})
    result = matching_service.classify(profile)

    conditional = by_id(result.conditional)["semas-disabled"]
    assert conditional.what_is_missing == "체납정리중"
    assert "완납" in conditional.how_to_confirm
    assert "semas-disabled" not in by_id(result.matched)


@pytest.mark.parametrize("update,reason_code", [
    ({"tax_delinquency_status": "active"}, "delinquency"),
    ({"credit_issue_status": "current"}, "credit-issue"),
])
def test_active_delinquency_excludes_everything(disabled_standard_profile, update, reason_code):
    result = matching_service.classify(disabled_standard_profile.model_copy(update=update))

    assert result.matched == []
    assert result.conditional == []
    assert {e.reason_code for e in result.excluded} == {"track-blocked", reason_code}


def test_micro_company_fails_scale(micro_profile):
    result = matching_service.classify(micro_profile)

    stability = by_id(result.excluded)["kosmes-general-stability"]
    assert stability.reason_code == "scale-not-met"
    assert stability.excluded_reason == "기업규모 미충족"
    assert stability.rule_triggered == "대상: small, medium / 귀사: micro"


def test_graduation_cap_excludes_institution():
    result = matching_service.classify(make_profile(prior_usage_counts={"kosmes": 5}))

    kosmes_excluded = [e for e in result.excluded if e.fund_id.startswith("kosmes-")]
    assert {e.reason_code for e in kosmes_excluded} == {"graduation-cap", "track-blocked"}
    assert by_id(result.excluded)["kosmes-general-stability"].reason_code == "graduation-cap"
    assert not any(m.fund_id.startswith("kosmes-") for m in result.matched)
    assert not any(c.fund_id.startswith("kosmes-") for c in result.conditional)


def test_unknown_export_is_conditional():
    result = matching_service.classify(make_profile(has_export_revenue=None))
    conditional = by_id(result.conditional)

    assert conditional["kodit-export"].what_is_missing == "수출실적/계획"
    assert conditional["kosmes-new-market"].what_is_missing == "수출실적/계획"
    assert "수출" in conditional["kosmes-new-market"].how_to_confirm


def test_min_score_moves_candidates_below_threshold(general_profile):
    result = matching_service.classify(general_profile, min_score=99)

    assert result.matched == []
    assert by_id(result.excluded)["kosmes-general-stability"].reason_code == "below-threshold"


def test_top_n_cuts_remaining_candidates(general_profile):
    result = matching_service.classify(general_profile, top_n=1)

    assert [m.fund_id for m in result.matched] == ["kosmes-general-stability"]
    excluded = by_id(result.excluded)
    assert excluded["kodit-general"].reason_code == "rank-cutoff"
    assert excluded["kodit-startup"].excluded_reason == "순위제외"


def test_classify_against_custom_catalog(general_profile):
    catalog = load_catalog([r for r in SEED_FUND_RECORDS if r["institution_id"] == "kodit"])
    result = matching_service.classify(general_profile, catalog=catalog)

    assert result.total_funds_checked == len(catalog)
    assert all(f.startswith("kodit-") for f in result.fund_ids())


def test_missing_numeric_field_rejects_run():
    with pytest.raises(ProfileNormalizationError):
        matching_service.classify(make_profile(annual_revenue=None))


def test_check_fund(general_profile):
    assert matching_service.check_fund(general_profile, "kodit-general").is_eligible
    assert matching_service.check_fund(general_profile, "no-such-fund") is None
