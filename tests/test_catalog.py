import copy

import pytest
from pydantic import ValidationError

from policy_fund.catalog import default_catalog, load_catalog
from policy_fund.catalog.funds import SEED_FUND_RECORDS
from policy_fund.models import PolicyFundKnowledge


def seed(fund_id):
    return copy.deepcopy(next(r for r in SEED_FUND_RECORDS if r["id"] == fund_id))


def test_seed_catalog_loads_without_defects():
    assert len(default_catalog) == len(SEED_FUND_RECORDS)
    assert default_catalog.defects == ()
    assert {i.id for i in default_catalog.institutions} == {"kosmes", "semas", "kodit", "kibo"}


def test_every_track_is_represented():
    assert {f.track for f in default_catalog} == {"exclusive", "policy_linked", "general", "guarantee"}


def test_list_funds_filters():
    kibo = default_catalog.list_funds(institution_id="kibo")
    assert kibo and all(f.institution_id == "kibo" for f in kibo)

    exclusive = default_catalog.list_funds(track="exclusive")
    assert {f.id for f in exclusive} >= {"semas-disabled", "kosmes-restart"}


def test_invalid_record_becomes_defect():
    broken = seed("kodit-general")
    broken["id"] = "kodit-broken"
    broken["track"] = "premium"

    catalog = load_catalog([seed("kodit-general"), broken])

    assert [f.id for f in catalog] == ["kodit-general"]
    assert len(catalog.defects) == 1
    assert catalog.defects[0].fund_id == "kodit-broken"
    assert any(error.startswith("track") for error in catalog.defects[0].errors)


def test_duplicate_record_becomes_defect():
    catalog = load_catalog([seed("kodit-general"), seed("kodit-general")])

    assert len(catalog) == 1
    assert catalog.defects[0].errors == ["duplicate fund id"]


def test_funding_purpose_must_allow_something():
    record = seed("kodit-general")
    record["funding_purpose"] = {"working": False, "facility": False}

    with pytest.raises(ValidationError):
        PolicyFundKnowledge.model_validate(record)


def test_fund_records_are_immutable():
    fund = default_catalog.get_fund("semas-disabled")

    with pytest.raises(ValidationError):
        fund.name = "변경"
