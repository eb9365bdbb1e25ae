"""
Synthetic resilience metrics.

Bounded random sub-metrics are drawn per factor group, scored with fixed
formulas, and reduced into a single composite resilience index.
"""

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Dict, List, Mapping, Optional, Sequence

import numpy as np

import catalogs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MetricSpec:
    """Shape of one generated sub-metric.

    ``base`` is the centre of the noise band, ``scale`` multiplies the shared
    per-request variation, ``amplitude`` is the full width of the uniform
    noise and ``low``/``high`` are the clamp bounds.
    """

    base: float
    scale: float
    amplitude: float
    low: float = -math.inf
    high: float = math.inf
    decimals: int = 1


# =============================================================================
# RANDOMIZED METRIC GENERATOR
# =============================================================================

def _rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def clamp(value: float, low: float, high: float) -> float:
    if low > high:
        raise ValueError(f"invalid bounds: low={low} > high={high}")
    return max(low, min(high, value))


def generate(
    base: float,
    variation: float = 0.0,
    noise_amplitude: float = 0.0,
    low: float = -math.inf,
    high: float = math.inf,
    rng: Optional[np.random.Generator] = None,
) -> float:
    """Draw base + variation + uniform(-amplitude/2, amplitude/2), clamped to [low, high]"""
    noise = _rng(rng).uniform(-noise_amplitude / 2, noise_amplitude / 2) if noise_amplitude else 0.0
    return clamp(base + variation + noise, low, high)


def base_variation(rng: Optional[np.random.Generator] = None) -> float:
    """Per-request offset shared by every sibling metric, in [-10, 10)"""
    return float(_rng(rng).uniform(-10, 10))


def sample_metrics(
    specs: Mapping[str, MetricSpec],
    variation: float,
    rng: Optional[np.random.Generator] = None,
) -> Dict[str, float]:
    rng = _rng(rng)
    values = {}
    for name, spec in specs.items():
        value = generate(spec.base, variation * spec.scale, spec.amplitude, spec.low, spec.high, rng)
        values[name] = int(round(value)) if spec.decimals == 0 else round(value, spec.decimals)
    return values


HEALTH_SYSTEM_STRESS = {
    "hospitalCapacity": MetricSpec(80, 1.0, 10, 0, 100),
    "chronicDiseasePrevalence": MetricSpec(72.5, 1.0, 15, 0, 100),
    "healthcareAccess": MetricSpec(76, 1.0, 12, 0, 100),
}

ECONOMIC_VULNERABILITY = {
    "medianIncome": MetricSpec(65000, 1000, 20000, low=25000, decimals=0),
    "unemploymentRate": MetricSpec(7.5, 0.3, 3, 2, 15),
    "housingInstability": MetricSpec(19, 0.5, 8, 5, 40),
    "povertyRate": MetricSpec(15, 0.4, 6, 5, 30),
}

INFRASTRUCTURE_RISK = {
    "gridReliability": MetricSpec(84, 1.0, 8, 60, 95),
    "transportationCondition": MetricSpec(75, 1.0, 10, 50, 90),
    "waterSystemAge": MetricSpec(71, 1.0, 12, 40, 85),
    "broadbandAccess": MetricSpec(88, 1.0, 6, 70, 98),
}

ENVIRONMENTAL_RISK = {
    "floodRisk": MetricSpec(45, 1.0, 20, 10, 90),
    "droughtRisk": MetricSpec(37.5, 1.0, 15, 10, 80),
    "wildfireRisk": MetricSpec(37.5, 1.0, 25, 5, 85),
    "stormFrequency": MetricSpec(49, 1.0, 18, 15, 75),
}

EMERGENCY_RESPONSE = {
    "emsResponseTime": MetricSpec(9.5, 0.2, 3, 4, 15),
    "cboDensity": MetricSpec(10, 0.3, 4, 2, 20),
    "emergencyPlanningScore": MetricSpec(76, 1.0, 12, 40, 95),
    "communityPreparedness": MetricSpec(70, 1.0, 10, 45, 90),
}


# =============================================================================
# COMPOSITE AGGREGATOR
# =============================================================================

def _score(value: float) -> int:
    return int(clamp(round(value), 0, 100))


def health_system_stress_score(inputs: Mapping[str, float]) -> int:
    return _score(np.mean([
        inputs["hospitalCapacity"],
        inputs["healthcareAccess"],
        100 - inputs["chronicDiseasePrevalence"],
    ]))


def economic_vulnerability_score(inputs: Mapping[str, float]) -> int:
    # Unemployment counts double; median income is reported but not scored
    burden = (2 * inputs["unemploymentRate"] + inputs["housingInstability"] + inputs["povertyRate"]) / 4
    return _score(100 - burden * 2)


def infrastructure_score(inputs: Mapping[str, float]) -> int:
    return _score(np.mean([
        inputs["gridReliability"],
        inputs["transportationCondition"],
        inputs["waterSystemAge"],
        inputs["broadbandAccess"],
    ]))


def environmental_risk_score(inputs: Mapping[str, float]) -> int:
    return _score(100 - np.mean([
        inputs["floodRisk"],
        inputs["droughtRisk"],
        inputs["wildfireRisk"],
        inputs["stormFrequency"],
    ]))


def emergency_response_score(inputs: Mapping[str, float]) -> int:
    return _score((
        100
        - inputs["emsResponseTime"] * 5
        + inputs["cboDensity"] * 3
        + inputs["emergencyPlanningScore"]
        + inputs["communityPreparedness"]
    ) / 4)


# Ordered: this is the order factor groups appear in responses
FACTOR_GROUPS: Dict[str, tuple] = {
    "healthSystemStress": (HEALTH_SYSTEM_STRESS, health_system_stress_score),
    "economicVulnerability": (ECONOMIC_VULNERABILITY, economic_vulnerability_score),
    "infrastructureRisk": (INFRASTRUCTURE_RISK, infrastructure_score),
    "environmentalRisk": (ENVIRONMENTAL_RISK, environmental_risk_score),
    "emergencyResponse": (EMERGENCY_RESPONSE, emergency_response_score),
}


def score_factor_group(name: str, inputs: Mapping[str, float]) -> Dict[str, float]:
    """Attach the group's score to its raw inputs"""
    scorer: Callable[[Mapping[str, float]], int] = FACTOR_GROUPS[name][1]
    group = dict(inputs)
    group["score"] = scorer(inputs)
    return group


def composite_score(scores: Sequence[float]) -> int:
    """Unweighted mean of the factor-group scores, rounded to an integer"""
    if not scores:
        raise ValueError("composite of zero factor groups")
    return int(round(float(np.mean(scores))))


def classify_data_quality(composite: float) -> str:
    if composite > 70:
        return "high"
    if composite > 50:
        return "medium"
    return "low"


def classify_trend(composite: float) -> str:
    if composite > 65:
        return "improving"
    if composite > 45:
        return "stable"
    return "declining"


def build_factor_groups(rng: Optional[np.random.Generator] = None) -> Dict[str, Dict[str, float]]:
    """Draw and score all five factor groups around one shared variation"""
    rng = _rng(rng)
    variation = base_variation(rng)
    return {
        name: score_factor_group(name, sample_metrics(specs, variation, rng))
        for name, (specs, _) in FACTOR_GROUPS.items()
    }


def build_resilience_index(
    region: str,
    region_type: str = "state",
    rng: Optional[np.random.Generator] = None,
    now: Optional[datetime] = None,
) -> Dict:
    factors = build_factor_groups(rng)
    composite = composite_score([group["score"] for group in factors.values()])
    now = now or datetime.now(timezone.utc)

    logger.debug("Resilience index for %s (%s): %d", region, region_type, composite)

    return {
        "region": region,
        "regionType": region_type,
        "compositeScore": composite,
        "factors": factors,
        "lastUpdated": now.isoformat(),
        "dataQuality": classify_data_quality(composite),
        "trend": classify_trend(composite),
    }


# =============================================================================
# REGION SNAPSHOTS
# =============================================================================

LOCATION_RISK_FACTORS = [
    "Climate vulnerability",
    "Infrastructure age",
    "Economic stability",
    "Population density",
]


def build_location_score(
    location: Optional[str],
    rng: Optional[np.random.Generator] = None,
    now: Optional[datetime] = None,
) -> Dict:
    """Single headline score for a free-text location"""
    return {
        "location": location,
        "score": int(_rng(rng).integers(50, 85)),
        "lastUpdated": (now or datetime.now(timezone.utc)).isoformat(),
        "riskFactors": list(LOCATION_RISK_FACTORS),
    }


def build_state_overview(code: str, rng: Optional[np.random.Generator] = None) -> Dict:
    rng = _rng(rng)
    state_code = catalogs.resolve_state_code(code)
    return {
        "name": catalogs.state_name(code),
        "code": state_code,
        "resilienceIndex": int(rng.integers(55, 80)),
        "trend": round(float(rng.uniform(-3, 3)), 2),
        "confidence": int(rng.integers(80, 100)),
        "riskFactors": list(catalogs.STATE_RISK_FACTORS),
        "counties": catalogs.counties_for_state(state_code),
    }


def build_zip_snapshot(code: str, zip_code: str, rng: Optional[np.random.Generator] = None) -> Dict:
    rng = _rng(rng)
    return {
        "zipCode": zip_code,
        "state": code.upper(),
        "resilienceIndex": int(rng.integers(50, 85)),
        "population": int(rng.integers(10000, 60000)),
    }


# =============================================================================
# RISK FACTOR CATEGORIES
# =============================================================================

# (low, high) half-open integer ranges for category averages
CATEGORY_SCORE_RANGES = {
    "climate": (65, 95),
    "infrastructure": (55, 80),
    "health": (45, 65),
    "economic": (35, 50),
    "social": (40, 60),
}

# factor id -> (score range, forecast score range)
FACTOR_SCORE_RANGES = {
    "flood-risk": ((60, 90), (70, 100)),
    "wildfire-risk": ((45, 70), (50, 75)),
}


def _location_profile(state: str, county: Optional[str], zip_code: Optional[str]) -> Dict:
    if zip_code:
        population, area = 25000, "15.2 sq mi"
    elif county:
        population, area = 1200000, "730 sq mi"
    else:
        population, area = 12800000, "46,055 sq mi"
    return {
        "state": state,
        "county": county,
        "zipCode": zip_code,
        "population": population,
        "area": area,
    }


def _risk_factors(rng: np.random.Generator) -> List[Dict]:
    factors = catalogs.risk_factor_templates()
    for factor in factors:
        score_range, forecast_range = FACTOR_SCORE_RANGES[factor["id"]]
        factor["score"] = int(rng.integers(*score_range))
        factor["forecastScore"] = int(rng.integers(*forecast_range))
    return factors


def build_risk_factor_report(
    state: str = "Pennsylvania",
    county: Optional[str] = None,
    zip_code: Optional[str] = None,
    rng: Optional[np.random.Generator] = None,
) -> Dict:
    """Risk categories with randomized averages, for the risk-factors page"""
    rng = _rng(rng)

    categories = []
    for category in catalogs.RISK_CATEGORIES:
        low, high = CATEGORY_SCORE_RANGES[category["id"]]
        categories.append({
            **category,
            "averageScore": int(rng.integers(low, high)),
            "factors": _risk_factors(rng),
        })

    overall = composite_score([category["averageScore"] for category in categories])
    location = _location_profile(state, county, zip_code)

    return {
        "categories": categories,
        "overallScore": overall,
        "location": location,
        "aiInsights": catalogs.risk_ai_insights(location["area"]),
    }
