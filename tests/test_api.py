from policy_fund.config import settings
from policy_fund.rules.thresholds import EOK

PREFIX = settings.api_prefix


def profile_payload(**overrides):
    data = {
        "company_name": "테스트정밀",
        "industry": "manufacturing",
        "business_age": 5,
        "annual_revenue": 30 * EOK,
        "employee_count": 20,
        "credit_rating": 3,
        "requested_funding_purpose": "working",
        "has_rnd_activity": False,
        "has_export_revenue": False,
    }
    data.update(overrides)
    return data


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["catalog_defects"] == 0


def test_classify(client):
    response = client.post(f"{PREFIX}/matching/classify", json={"profile": profile_payload()})

    assert response.status_code == 200
    body = response.json()
    assert body["matched"][0]["fund_id"] == "kosmes-general-stability"
    total = len(body["matched"]) + len(body["conditional"]) + len(body["excluded"])
    assert total == body["total_funds_checked"]


def test_classify_with_options(client):
    response = client.post(
        f"{PREFIX}/matching/classify",
        json={"profile": profile_payload(), "options": {"top_n": 1}},
    )

    assert response.status_code == 200
    assert len(response.json()["matched"]) == 1


def test_classify_missing_required_field(client):
    payload = profile_payload()
    del payload["business_age"]

    response = client.post(f"{PREFIX}/matching/classify", json={"profile": payload})

    assert response.status_code == 400
    assert "business_age" in response.json()["detail"]


def test_classify_rejects_unknown_institution(client):
    payload = profile_payload(prior_usage_counts={"nowhere": 1})

    response = client.post(f"{PREFIX}/matching/classify", json={"profile": payload})

    assert response.status_code == 400


def test_classify_rejects_invalid_options(client):
    response = client.post(
        f"{PREFIX}/matching/classify",
        json={"profile": profile_payload(), "options": {"top_n": 0}},
    )

    assert response.status_code == 422


def test_track_decision(client):
    response = client.post(
        f"{PREFIX}/matching/track-decision", json=profile_payload(is_female=True)
    )

    assert response.status_code == 200
    assert response.json()["blocked_tracks"] == ["general"]
    assert response.json()["qualifying_statuses"] == ["여성기업"]


def test_fund_eligibility(client):
    response = client.post(f"{PREFIX}/matching/eligibility/kodit-general", json=profile_payload())

    assert response.status_code == 200
    assert response.json()["is_eligible"] is True


def test_fund_eligibility_unknown_fund(client):
    response = client.post(f"{PREFIX}/matching/eligibility/no-such-fund", json=profile_payload())

    assert response.status_code == 404


def test_list_funds(client):
    response = client.get(f"{PREFIX}/funds/", params={"institution_id": "semas"})

    assert response.status_code == 200
    assert response.json()
    assert all(f["institution_id"] == "semas" for f in response.json())


def test_list_institutions(client):
    response = client.get(f"{PREFIX}/funds/institutions")

    assert response.status_code == 200
    assert len(response.json()) == 4


def test_get_fund(client):
    assert client.get(f"{PREFIX}/funds/semas-disabled").json()["track"] == "exclusive"
    assert client.get(f"{PREFIX}/funds/no-such-fund").status_code == 404
