import pytest

from policy_fund.catalog import default_catalog
from policy_fund.services.eligibility_service import eligibility_service
from policy_fund.services.normalizer import normalize_profile
from policy_fund.services.ranking_service import RankCandidate, ranking_service
from policy_fund.services.scoring import scoring_pipeline

from conftest import make_profile


def candidate(normalized, fund_id, position):
    fund = default_catalog.get_fund(fund_id)
    eligibility = eligibility_service.check(normalized, fund)
    return RankCandidate(
        fund=fund,
        eligibility=eligibility,
        scored=scoring_pipeline.score(eligibility, normalized, fund),
        size_score=ranking_service.size_match_score(fund, normalized),
        position=position,
    )


@pytest.mark.parametrize("rank,penalty", [(1, 0), (2, 3), (3, 6), (4, 9), (5, 12), (8, 12)])
def test_rank_penalty(rank, penalty):
    assert ranking_service.rank_penalty(rank) == penalty


@pytest.mark.parametrize("rank,track,score,label", [
    (4, "exclusive", 40, "전용·우선"),
    (1, "policy_linked", 60, "유력"),
    (3, "general", 40, "대안"),
    (4, "general", 65, "대안"),
    (4, "policy_linked", 55, "대안"),
    (4, "general", 55, "플랜B"),
    (1, "guarantee", 90, "플랜B"),
])
def test_confidence_label(rank, track, score, label):
    assert ranking_service.confidence_label(rank, track, score) == label


def test_score_level():
    assert ranking_service.score_level(70) == "high"
    assert ranking_service.score_level(40) == "medium"
    assert ranking_service.score_level(39) == "low"


def test_size_match_score(general_profile, micro_profile):
    stability = default_catalog.get_fund("kosmes-general-stability")
    semas_growth = default_catalog.get_fund("semas-growth")

    assert ranking_service.size_match_score(stability, normalize_profile(general_profile)) == 100
    assert ranking_service.size_match_score(semas_growth, normalize_profile(general_profile)) == 80
    assert ranking_service.size_match_score(semas_growth, normalize_profile(micro_profile)) == 100


def test_sort_prefers_loans_over_guarantees(general_profile):
    normalized = normalize_profile(general_profile)
    guarantee = candidate(normalized, "kodit-general", 0)
    loan = candidate(normalized, "kosmes-general-stability", 1)

    ordered = ranking_service.sort([guarantee, loan])

    assert [c.fund.id for c in ordered] == ["kosmes-general-stability", "kodit-general"]


def test_sort_ties_keep_catalog_position(general_profile):
    normalized = normalize_profile(general_profile)
    first = candidate(normalized, "kodit-general", 0)
    second = candidate(normalized, "kodit-startup", 1)

    assert ranking_service.sort([second, first]) == [first, second]


def test_diversity_caps_institution_but_exempts_special_purpose():
    normalized = normalize_profile(make_profile())
    ordered = [
        candidate(normalized, "kosmes-general-stability", 0),
        candidate(normalized, "kosmes-new-market", 1),
        candidate(normalized, "kosmes-innovation-startup", 2),
        candidate(normalized, "kosmes-smart-factory", 3),
        candidate(normalized, "kodit-general", 4),
    ]

    kept, cut = ranking_service.apply_diversity(ordered, top_n=5, max_per_institution=2)

    assert [c.fund.id for c in kept] == [
        "kosmes-general-stability",
        "kosmes-new-market",
        "kosmes-smart-factory",
        "kodit-general",
    ]
    assert [c.fund.id for c in cut] == ["kosmes-innovation-startup"]


def test_diversity_respects_top_n():
    normalized = normalize_profile(make_profile())
    ordered = [candidate(normalized, fund_id, i) for i, fund_id in enumerate(
        ["kosmes-general-stability", "kodit-general", "kodit-startup"]
    )]

    kept, cut = ranking_service.apply_diversity(ordered, top_n=1, max_per_institution=2)

    assert len(kept) == 1
    assert len(cut) == 2
