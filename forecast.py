"""
Synthetic resilience forecasts: a daily series layering trend, seasonality,
noise and scripted events on top of a current score, plus optional
disaster / mitigation scenario variants derived from it.
"""

import logging
from datetime import date, datetime, timedelta, timezone
from typing import Dict, List, Optional

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

SCORE_FLOOR = 30
SCORE_CEILING = 90

# day index -> shock added to the prediction on that day
EXTERNAL_EVENTS = {
    15: -5.0,  # simulated disaster
    25: 3.0,  # recovery funding lands
}

MODEL_TYPES = ["Prophet", "XGBoost"]

FEATURES_USED = [
    "Historical resilience scores",
    "Weather patterns",
    "Economic indicators",
    "Infrastructure age",
    "Population density",
    "Emergency response metrics",
]


def _rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def confidence_ranges(days: int) -> np.ndarray:
    """Half-width of the confidence band for days 1..N, widening from 3 towards 8"""
    index = np.arange(1, days + 1)
    return np.round(3 + (index / days) * 5, 1)


def forecast_series(
    current_score: float,
    days: int,
    rng: Optional[np.random.Generator] = None,
    today: Optional[date] = None,
) -> List[Dict]:
    """Generate ``days`` daily prediction points starting tomorrow"""
    if days < 1:
        return []
    rng = _rng(rng)
    today = today or date.today()

    index = np.arange(1, days + 1)
    trend = -0.1 * np.sin(index / 10)
    seasonal = 2 * np.sin((index / 365) * 2 * np.pi)
    noise = rng.uniform(-1.5, 1.5, size=days)
    events = np.array([EXTERNAL_EVENTS.get(int(i), 0.0) for i in index])

    predicted = np.round(np.clip(current_score + trend + seasonal + noise + events, SCORE_FLOOR, SCORE_CEILING), 1)
    spread = confidence_ranges(days)
    dates = pd.date_range(start=today + timedelta(days=1), periods=days, freq="D")

    points = []
    for i, day in enumerate(dates):
        points.append({
            "date": day.strftime("%Y-%m-%d"),
            "predicted": float(predicted[i]),
            "confidence_lower": round(float(predicted[i] - spread[i]), 1),
            "confidence_upper": round(float(predicted[i] + spread[i]), 1),
            "factors": {
                "seasonal": round(float(seasonal[i]), 1),
                "trend": round(float(trend[i]), 1),
                "external_events": float(events[i]),
            },
        })
    return points


def _shift(point: Dict, predicted: float, lower: float, upper: float) -> Dict:
    predicted = round(predicted, 1)
    return {
        **point,
        "predicted": predicted,
        "confidence_lower": round(min(lower, predicted), 1),
        "confidence_upper": round(max(upper, predicted), 1),
    }


def disaster_impact(baseline: List[Dict], rng: Optional[np.random.Generator] = None) -> List[Dict]:
    """Baseline pushed down 15-25 points, floored at 20"""
    rng = _rng(rng)
    return [
        _shift(
            point,
            max(20.0, point["predicted"] - 15 - rng.uniform(0, 10)),
            max(15.0, point["confidence_lower"] - 20),
            max(25.0, point["confidence_upper"] - 10),
        )
        for point in baseline
    ]


def mitigation_applied(baseline: List[Dict], rng: Optional[np.random.Generator] = None) -> List[Dict]:
    """Baseline lifted 8-13 points, capped at 95"""
    rng = _rng(rng)
    return [
        _shift(
            point,
            min(95.0, point["predicted"] + 8 + rng.uniform(0, 5)),
            min(90.0, point["confidence_lower"] + 5),
            min(100.0, point["confidence_upper"] + 12),
        )
        for point in baseline
    ]


def build_scenarios(baseline: List[Dict], rng: Optional[np.random.Generator] = None) -> Dict[str, List[Dict]]:
    rng = _rng(rng)
    return {
        "baseline": [dict(point) for point in baseline],
        "disaster_impact": disaster_impact(baseline, rng),
        "mitigation_applied": mitigation_applied(baseline, rng),
    }


def build_model_info(rng: Optional[np.random.Generator] = None, now: Optional[datetime] = None) -> Dict:
    rng = _rng(rng)
    now = now or datetime.now(timezone.utc)
    trained = now - timedelta(seconds=float(rng.uniform(0, 7 * 24 * 60 * 60)))
    return {
        "model_type": MODEL_TYPES[int(rng.integers(0, len(MODEL_TYPES)))],
        "accuracy": round(float(85 + rng.uniform(0, 10)), 1),
        "last_trained": trained.isoformat(),
        "features_used": list(FEATURES_USED),
    }


def build_predictions(
    region: str,
    region_type: str = "state",
    days: int = 30,
    include_scenarios: bool = False,
    rng: Optional[np.random.Generator] = None,
    today: Optional[date] = None,
    now: Optional[datetime] = None,
) -> Dict:
    rng = _rng(rng)
    current_score = int(rng.integers(50, 90))
    predictions = forecast_series(current_score, days, rng, today)

    result = {
        "region": region,
        "regionType": region_type,
        "current_score": current_score,
        "predictions": predictions,
        "model_info": build_model_info(rng, now),
    }
    if include_scenarios:
        result["scenarios"] = build_scenarios(predictions, rng)

    logger.debug(
        "Forecast for %s (%s): %d days from %d, scenarios=%s",
        region, region_type, days, current_score, include_scenarios,
    )
    return result
