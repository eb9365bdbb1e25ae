import asyncio
from dataclasses import replace
from datetime import date, timedelta

import numpy as np

import main


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "running"


def _widget_params(config):
    params = {}
    for param in config.get("params", []):
        value = param.get("value")
        if value == "":
            continue
        params[param["paramName"]] = str(value).lower() if isinstance(value, bool) else value
    return params


def test_widgets_registry(client):
    widgets = client.get("/widgets.json").json()
    assert "resilience_factors" in widgets
    assert "resilience_forecast" in widgets
    assert widgets["system_status"]["type"] == "markdown"
    assert all(not config["endpoint"].startswith("/") for config in widgets.values())


def test_every_widget_endpoint_resolves_with_its_defaults(client):
    widgets = client.get("/widgets.json").json()

    for widget_id, config in widgets.items():
        response = client.get("/" + config["endpoint"], params=_widget_params(config))
        assert response.status_code == 200, widget_id
        body = response.json()

        if config["type"] == "markdown":
            assert isinstance(body, str), widget_id
        else:
            assert config["type"] == "table", widget_id
            assert isinstance(body, list) and body, widget_id
            assert all(isinstance(row, dict) for row in body), widget_id
            columns = config.get("data", {}).get("table", {}).get("columnsDefs", [])
            for column in columns:
                assert column["field"] in body[0], (widget_id, column["field"])


def test_system_status(client):
    body = client.get("/system_status").json()
    assert body.startswith("# Resilience Data Service Status")
    assert "PA" in body


def test_resilience_index_for_pennsylvania(client):
    response = client.get("/api/resilience-index", params={"region": "PA", "type": "state"})
    assert response.status_code == 200
    data = response.json()

    assert data["region"] == "PA"
    assert data["regionType"] == "state"
    assert len(data["factors"]) == 5
    scores = [group["score"] for group in data["factors"].values()]
    assert all(0 <= s <= 100 for s in scores)
    assert data["compositeScore"] == round(np.mean(scores))
    assert data["dataQuality"] in ("high", "medium", "low")


def test_resilience_index_defaults_to_state(client):
    data = client.get("/api/resilience-index", params={"region": "Allegheny"}).json()
    assert data["regionType"] == "state"


def test_missing_region_is_rejected(client):
    for path in ("/api/resilience-index", "/api/predictions"):
        response = client.get(path)
        assert response.status_code == 400
        assert response.json() == {"error": "Region parameter is required"}

        response = client.get(path, params={"region": "  "})
        assert response.status_code == 400


def test_invalid_region_type(client):
    response = client.get("/api/resilience-index", params={"region": "PA", "type": "planet"})
    assert response.status_code == 422
    assert response.json()["error"] == "Invalid request parameters"


def test_forecast_without_scenarios(client):
    today = date.today()
    response = client.get("/api/predictions", params={"region": "CA", "days": 10, "scenarios": "false"})
    assert response.status_code == 200
    data = response.json()

    assert len(data["predictions"]) == 10
    assert "scenarios" not in data
    first = date.fromisoformat(data["predictions"][0]["date"])
    assert first in (today + timedelta(days=1), today + timedelta(days=2))


def test_forecast_default_horizon(client):
    data = client.get("/api/predictions", params={"region": "CA"}).json()
    assert len(data["predictions"]) == 30


def test_forecast_with_scenarios(client):
    data = client.get("/api/predictions", params={"region": "PA", "days": 20, "scenarios": "true"}).json()

    scenarios = data["scenarios"]
    assert scenarios["baseline"] == data["predictions"]
    for low, mid, high in zip(scenarios["disaster_impact"], scenarios["baseline"], scenarios["mitigation_applied"]):
        assert low["predicted"] <= mid["predicted"] <= high["predicted"]


def test_forecast_horizon_bounds(client):
    assert client.get("/api/predictions", params={"region": "PA", "days": 0}).status_code == 422
    assert client.get("/api/predictions", params={"region": "PA", "days": 366}).status_code == 422


def test_location_score(client):
    data = client.get("/api/resilience", params={"location": "Philadelphia"}).json()
    assert data["location"] == "Philadelphia"
    assert 50 <= data["score"] < 85


def test_risk_factors(client):
    data = client.get("/api/risk-factors", params={"county": "Allegheny"}).json()
    assert len(data["categories"]) == 5
    assert data["location"]["state"] == "Pennsylvania"
    assert data["location"]["population"] == 1200000


def test_predictive_data(client):
    data = client.get("/api/predictive-data", params={"level": "county"}).json()
    assert len(data["topRiskFactors"]) == 5
    assert data["narrative"]["confidence"] == 88


def test_state_overview(client):
    data = client.get("/api/state/pennsylvania").json()
    assert data["code"] == "PA"
    assert data["name"] == "Pennsylvania"
    assert len(data["counties"]) == 20


def test_county_lookup(client):
    response = client.get("/api/state/PA/county/Philadelphia")
    assert response.status_code == 200
    assert len(response.json()["zipCodes"]) == 12


def test_unknown_county_and_state_are_distinct_404s(client):
    county = client.get("/api/state/pa/county/nonexistent")
    state = client.get("/api/state/zz/county/allegheny")

    assert county.status_code == 404
    assert state.status_code == 404
    assert county.json() == {"error": "County not found"}
    assert state.json() == {"error": "State not found"}


def test_zip_snapshot(client):
    data = client.get("/api/state/pa/zip/19103").json()
    assert data["zipCode"] == "19103"
    assert data["state"] == "PA"
    assert 10000 <= data["population"] < 60000


def test_catalog_endpoints_fall_back(client):
    assert len(client.get("/api/cbos/PA").json()["organizations"]) == 4
    assert client.get("/api/cbos/zz").json()["organizations"][0]["id"] == "local-emergency"
    assert client.get("/api/recommendations/zz").json()["recommendations"][0]["id"] == "general-preparedness"


def test_services(client):
    providers = client.get("/api/services", params={"type": "providers"}).json()
    assert providers["total"] == 3

    camden = client.get("/api/services", params={"type": "providers", "area": "camden"}).json()
    assert [p["id"] for p in camden["providers"]] == ["provider-1"]

    requests = client.get("/api/services").json()
    assert requests["total"] == 3


def test_post_service_request_is_not_persisted(client):
    response = client.post("/api/services", json={"householdId": "household-7", "serviceType": "meal_delivery"})
    assert response.status_code == 200
    body = response.json()

    assert body["success"] is True
    assert body["request"]["id"].startswith("req-")
    assert body["request"]["priority"] == "medium"
    assert body["request"]["status"] == "requested"
    assert body["request"]["requestedDate"]

    assert client.get("/api/services").json()["total"] == 3


def test_households(client):
    profile = client.get("/api/households", params={"id": "household-9"}).json()
    assert profile["id"] == "household-9"
    assert profile["preferredLanguage"] == "Spanish"

    listing = client.get("/api/households").json()
    assert listing["total"] == 50

    high = client.get("/api/households", params={"risk": "high", "area": "19103"}).json()
    assert all(h["riskLevel"] == "high" for h in high["households"])
    assert high["filters"] == {"area": "19103", "riskLevel": "high"}


def test_post_household_service(client):
    body = client.post(
        "/api/households",
        json={"householdId": "household-2", "serviceType": "wellness_check", "scheduledDate": "2026-11-02"},
    ).json()

    assert body["service"]["status"] == "scheduled"
    assert body["service"]["frequency"] == "as_needed"
    assert body["message"] == "wellness_check scheduled successfully for 2026-11-02"


def test_unknown_route_uses_error_body(client):
    response = client.get("/api/nowhere")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_predictive_data_echoes_location(client):
    default = client.get("/api/predictive-data").json()
    assert default["location"] == "United States"

    data = client.get("/api/predictive-data", params={"location": "Allegheny County"}).json()
    assert data["location"] == "Allegheny County"
    assert data["narrative"]["confidence"] == 88


def test_predictive_data_waits_configured_latency(client, monkeypatch):
    waits = []
    real_sleep = asyncio.sleep

    async def recording_sleep(delay, *args, **kwargs):
        waits.append(delay)
        await real_sleep(0)

    monkeypatch.setattr(main, "settings", replace(main.settings, simulated_latency_ms=250))
    monkeypatch.setattr(main.asyncio, "sleep", recording_sleep)

    response = client.get("/api/predictive-data")
    assert response.status_code == 200
    assert 0.25 in waits


def test_resilience_factors_rows(client):
    rows = client.get("/resilience_factors", params={"region": "PA"}).json()

    assert [row["factor"] for row in rows][-1] == "composite"
    assert len(rows) == 6
    group_scores = [row["score"] for row in rows[:-1]]
    assert rows[-1]["score"] == round(np.mean(group_scores))


def test_resilience_factors_requires_region(client):
    response = client.get("/resilience_factors")
    assert response.status_code == 400
    assert response.json() == {"error": "Region parameter is required"}


def test_resilience_forecast_rows(client):
    plain = client.get("/resilience_forecast", params={"region": "PA", "days": 7}).json()
    assert len(plain) == 7
    assert "disaster_impact" not in plain[0]
    for row in plain:
        assert row["confidence_lower"] <= row["predicted"] <= row["confidence_upper"]

    with_scenarios = client.get(
        "/resilience_forecast", params={"region": "PA", "days": 7, "scenarios": "true"}
    ).json()
    for row in with_scenarios:
        assert row["disaster_impact"] <= row["predicted"] <= row["mitigation_applied"]


def test_risk_categories_rows(client):
    rows = client.get("/risk_categories", params={"state": "Pennsylvania", "county": ""}).json()
    assert [row["id"] for row in rows] == ["climate", "infrastructure", "health", "economic", "social"]
    assert all(row["factorCount"] > 0 for row in rows)


def test_predictive_insights_markdown(client):
    body = client.get("/predictive_insights", params={"level": "county"}).json()
    assert body.startswith("# Predictive Insights (county)")
    assert "## Key Findings" in body
    assert "Confidence: 88%" in body


def test_state_counties_rows(client):
    assert len(client.get("/state_counties", params={"code": "pennsylvania"}).json()) == 20
    assert client.get("/state_counties", params={"code": "TX"}).json()[0]["name"] == "Harris County"


def test_catalog_widget_rows_fall_back(client):
    organizations = client.get("/community_organizations", params={"state_code": "PA"}).json()
    assert len(organizations) == 4
    assert organizations[0]["phone"] == "(717) 234-2500"

    fallback = client.get("/state_recommendations", params={"state_code": "zz"}).json()
    assert fallback[0]["id"] == "general-preparedness"
