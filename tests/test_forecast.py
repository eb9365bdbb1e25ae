from datetime import date, datetime, timedelta, timezone

import numpy as np
import pytest

import forecast

TODAY = date(2026, 3, 1)


@pytest.mark.parametrize("days", [1, 10, 30, 90, 365])
def test_series_length_and_dates(rng, days):
    points = forecast.forecast_series(70, days, rng, TODAY)

    assert len(points) == days
    dates = [date.fromisoformat(p["date"]) for p in points]
    assert dates[0] == TODAY + timedelta(days=1)
    assert all(later - earlier == timedelta(days=1) for earlier, later in zip(dates, dates[1:]))


def test_empty_horizon(rng):
    assert forecast.forecast_series(70, 0, rng, TODAY) == []


@pytest.mark.parametrize("days", [7, 30, 365])
def test_confidence_band_contains_prediction_and_widens(days):
    for seed in range(25):
        rng = np.random.default_rng(seed)
        current = int(rng.integers(50, 90))
        points = forecast.forecast_series(current, days, rng, TODAY)

        widths = []
        for point in points:
            assert point["confidence_lower"] <= point["predicted"] <= point["confidence_upper"]
            widths.append(point["confidence_upper"] - point["confidence_lower"])
        assert all(b >= a - 1e-9 for a, b in zip(widths, widths[1:]))


def test_confidence_ranges_grow_from_three_to_eight():
    spread = forecast.confidence_ranges(10)
    assert spread[0] == pytest.approx(3.5)
    assert spread[-1] == pytest.approx(8.0)


def test_predictions_are_clamped(rng):
    for current in (0, 30, 90, 120):
        for point in forecast.forecast_series(current, 60, rng, TODAY):
            assert forecast.SCORE_FLOOR <= point["predicted"] <= forecast.SCORE_CEILING


def test_scripted_events(rng):
    points = forecast.forecast_series(70, 30, rng, TODAY)
    events = {i + 1: p["factors"]["external_events"] for i, p in enumerate(points)}

    assert events[15] == -5.0
    assert events[25] == 3.0
    assert all(v == 0 for day, v in events.items() if day not in (15, 25))


def test_predicted_stays_near_current_score(rng):
    # trend + seasonal + noise never exceed a few points away from the start
    for point in forecast.forecast_series(60, 30, rng, TODAY):
        assert abs(point["predicted"] - 60) <= 9


def test_scenarios_bracket_baseline():
    for seed in range(25):
        rng = np.random.default_rng(seed)
        baseline = forecast.forecast_series(int(rng.integers(50, 90)), 30, rng, TODAY)
        scenarios = forecast.build_scenarios(baseline, rng)

        assert scenarios["baseline"] == baseline
        for low, mid, high in zip(scenarios["disaster_impact"], baseline, scenarios["mitigation_applied"]):
            assert low["predicted"] <= mid["predicted"] <= high["predicted"]
            assert low["date"] == mid["date"] == high["date"]
            assert 20 <= low["predicted"]
            assert high["predicted"] <= 95
            for point in (low, high):
                assert point["confidence_lower"] <= point["predicted"] <= point["confidence_upper"]


def test_scenarios_do_not_touch_baseline(rng):
    baseline = forecast.forecast_series(70, 10, rng, TODAY)
    snapshot = [dict(p) for p in baseline]
    forecast.build_scenarios(baseline, rng)
    assert baseline == snapshot


def test_build_predictions_without_scenarios(rng):
    data = forecast.build_predictions("CA", "state", 10, False, rng, TODAY)

    assert data["region"] == "CA"
    assert 50 <= data["current_score"] < 90
    assert len(data["predictions"]) == 10
    assert "scenarios" not in data


def test_build_predictions_with_scenarios(rng):
    data = forecast.build_predictions("PA", "county", 14, True, rng, TODAY)

    assert set(data["scenarios"]) == {"baseline", "disaster_impact", "mitigation_applied"}
    assert all(len(series) == 14 for series in data["scenarios"].values())


def test_model_info(rng):
    now = datetime(2026, 3, 1, tzinfo=timezone.utc)
    info = forecast.build_model_info(rng, now)

    assert info["model_type"] in forecast.MODEL_TYPES
    assert 85 <= info["accuracy"] <= 95
    trained = datetime.fromisoformat(info["last_trained"])
    assert now - timedelta(days=7) <= trained <= now
    assert info["features_used"] == forecast.FEATURES_USED
