#!/usr/bin/env python3
"""
Resilience Index Platform Backend
Serves synthetic resilience metrics, forecasts and reference catalogs to the dashboard
"""

import asyncio
import logging
from datetime import datetime
from enum import Enum
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

import catalogs
import community
import forecast
import metrics
from config import configure_logging, get_settings

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

# Initialize FastAPI application
app = FastAPI(
    title="Resilience Index Platform Backend",
    description="Mock analytics data service for the resilience index dashboard",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Dashboard widgets keyed by widgetId
WIDGETS = {}


def register_widget(widget_config):
    """Decorator that registers a widget configuration in the WIDGETS dictionary."""
    def decorator(func):
        endpoint = widget_config.get("endpoint")
        if endpoint:
            # Use id as the key to allow multiple widgets per endpoint
            widget_config.setdefault("widgetId", endpoint)
            WIDGETS[widget_config["widgetId"]] = widget_config
        return func
    return decorator


class RegionType(str, Enum):
    state = "state"
    county = "county"
    zip = "zip"


def require_region(region: Optional[str], endpoint: str) -> str:
    if not region or not region.strip():
        logger.warning("Rejected %s request without region", endpoint)
        raise HTTPException(status_code=400, detail="Region parameter is required")
    return region.strip()


# =============================================================================
# ERROR RENDERING
# =============================================================================

@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request, exc):
    """Render HTTP errors as {"error": message}"""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request, exc):
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid request parameters", "details": jsonable_encoder(exc.errors())},
    )


@app.on_event("startup")
async def startup_event():
    logger.info("Startup complete!")
    logger.info("Total widgets registered: %d", len(WIDGETS))
    logger.info("Catalogued states: %s", catalogs.catalogued_states())


@app.get("/")
def read_root():
    """Root endpoint"""
    return {
        "name": "Resilience Index Platform Backend",
        "status": "running",
        "widgets_count": len(WIDGETS),
        "catalogued_states": catalogs.catalogued_states(),
    }


@app.get("/widgets.json")
def get_widgets():
    """Returns the configuration of all registered widgets"""
    return WIDGETS


# =============================================================================
# GENERATED METRICS
# =============================================================================

@app.get("/api/resilience-index")
def get_resilience_index(
    region: Optional[str] = None,
    region_type: RegionType = Query(RegionType.state, alias="type"),
):
    """Composite resilience index for a region"""
    region = require_region(region, "resilience-index")
    data = metrics.build_resilience_index(region, region_type.value)
    logger.info("Resilience index %s/%s -> %d", region, region_type.value, data["compositeScore"])
    return data


@app.get("/api/predictions")
def get_predictions(
    region: Optional[str] = None,
    region_type: RegionType = Query(RegionType.state, alias="type"),
    days: int = Query(settings.default_forecast_days, ge=1, le=settings.max_forecast_days),
    scenarios: bool = False,
):
    """Forecast series for a region"""
    region = require_region(region, "predictions")
    data = forecast.build_predictions(region, region_type.value, days, scenarios)
    logger.info("Forecast %s/%s for %d days (scenarios=%s)", region, region_type.value, days, scenarios)
    return data


@app.get("/api/resilience")
def get_resilience(location: Optional[str] = None):
    """Headline score for a location"""
    return metrics.build_location_score(location)


@app.get("/api/risk-factors")
def get_risk_factors(
    state: str = "Pennsylvania",
    county: Optional[str] = None,
    zip_code: Optional[str] = Query(None, alias="zip"),
):
    """Risk factor categories for a location"""
    return metrics.build_risk_factor_report(state, county, zip_code)


@app.get("/api/predictive-data")
async def get_predictive_data(level: str = "national", location: str = "United States"):
    """Predictive insights catalog, served with simulated upstream latency.

    The catalog is keyed by level only; location is echoed back so the
    caller can tell which place the insights were requested for.
    """
    await asyncio.sleep(settings.simulated_latency_ms / 1000)
    data = catalogs.predictive_insights(level)
    data["location"] = location
    return data


# =============================================================================
# STATE / COUNTY / ZIP DRILL-DOWN
# =============================================================================

@app.get("/api/state/{code}")
def get_state(code: str):
    """State overview with counties"""
    return metrics.build_state_overview(code)


@app.get("/api/state/{code}/county/{county_name}")
def get_county(code: str, county_name: str):
    """ZIP directory for one county of a state"""
    try:
        return catalogs.county_detail(code, county_name)
    except catalogs.CatalogKeyError as e:
        logger.warning("County lookup %s/%s failed: %s", code, county_name, e.message)
        raise HTTPException(status_code=404, detail=e.message)


@app.get("/api/state/{code}/zip/{zip_code}")
def get_zip(code: str, zip_code: str):
    return metrics.build_zip_snapshot(code, zip_code)


# =============================================================================
# REFERENCE CATALOGS
# =============================================================================

@app.get("/api/cbos/{state_code}")
def get_cbos(state_code: str):
    return catalogs.cbo_directory(state_code)


@app.get("/api/recommendations/{state_code}")
def get_recommendations(state_code: str):
    return catalogs.recommendations(state_code)


# =============================================================================
# DASHBOARD WIDGETS
# Flat rows for table widgets, strings for markdown widgets
# =============================================================================

@register_widget({
    "name": "Resilience Index",
    "description": "Composite resilience score with its five factor groups",
    "category": "Resilience",
    "subcategory": "Composite Index",
    "endpoint": "resilience_factors",
    "type": "table",
    "gridData": {"x": 0, "y": 0, "w": 12, "h": 8},
    "data": {
        "table": {
            "columnsDefs": [
                {"field": "factor", "headerName": "Factor Group", "width": 180},
                {"field": "score", "headerName": "Score", "formatterFn": "int", "width": 100}
            ]
        }
    },
    "params": [
        {"paramName": "region", "type": "text", "label": "Region", "value": "PA"},
        {
            "paramName": "type",
            "type": "text",
            "label": "Region Type",
            "value": "state",
            "options": [
                {"label": "State", "value": "state"},
                {"label": "County", "value": "county"},
                {"label": "ZIP Code", "value": "zip"}
            ]
        }
    ]
})
@app.get("/resilience_factors")
def resilience_factors(
    region: Optional[str] = None,
    region_type: RegionType = Query(RegionType.state, alias="type"),
):
    """One row per factor group, followed by the composite"""
    region = require_region(region, "resilience_factors")
    data = metrics.build_resilience_index(region, region_type.value)

    rows = [
        {"factor": name, "score": group["score"]}
        for name, group in data["factors"].items()
    ]
    rows.append({"factor": "composite", "score": data["compositeScore"]})
    return rows


@register_widget({
    "name": "Resilience Forecast",
    "description": "Daily resilience forecast with confidence bands and optional scenarios",
    "category": "Resilience",
    "subcategory": "Forecasting",
    "endpoint": "resilience_forecast",
    "type": "table",
    "gridData": {"x": 12, "y": 0, "w": 28, "h": 12},
    "data": {
        "table": {
            "enableCharts": True,
            "chartView": {
                "enabled": True,
                "chartType": "line"
            },
            "columnsDefs": [
                {"field": "date", "headerName": "Date", "chartDataType": "time", "width": 120},
                {"field": "predicted", "headerName": "Predicted", "chartDataType": "series", "formatterFn": "none", "width": 110},
                {"field": "confidence_lower", "headerName": "Lower", "chartDataType": "series", "formatterFn": "none", "width": 100},
                {"field": "confidence_upper", "headerName": "Upper", "chartDataType": "series", "formatterFn": "none", "width": 100}
            ]
        }
    },
    "params": [
        {"paramName": "region", "type": "text", "label": "Region", "value": "PA"},
        {
            "paramName": "days",
            "type": "number",
            "label": "Horizon (days)",
            "value": 30,
            "options": [
                {"label": "7 days", "value": 7},
                {"label": "30 days", "value": 30},
                {"label": "90 days", "value": 90}
            ]
        },
        {"paramName": "scenarios", "type": "boolean", "label": "Show Scenarios", "value": False}
    ]
})
@app.get("/resilience_forecast")
def resilience_forecast(
    region: Optional[str] = None,
    days: int = Query(settings.default_forecast_days, ge=1, le=settings.max_forecast_days),
    scenarios: bool = False,
):
    """Forecast points as rows; scenarios add disaster and mitigation columns"""
    region = require_region(region, "resilience_forecast")
    data = forecast.build_predictions(region, "state", days, scenarios)

    rows = [
        {
            "date": point["date"],
            "predicted": point["predicted"],
            "confidence_lower": point["confidence_lower"],
            "confidence_upper": point["confidence_upper"],
        }
        for point in data["predictions"]
    ]
    if scenarios:
        for row, low, high in zip(rows, data["scenarios"]["disaster_impact"], data["scenarios"]["mitigation_applied"]):
            row["disaster_impact"] = low["predicted"]
            row["mitigation_applied"] = high["predicted"]
    return rows


@register_widget({
    "name": "Risk Factors",
    "description": "Risk categories with their average scores",
    "category": "Risk",
    "subcategory": "Risk Factors",
    "endpoint": "risk_categories",
    "type": "table",
    "gridData": {"x": 0, "y": 12, "w": 40, "h": 14},
    "data": {
        "table": {
            "columnsDefs": [
                {"field": "name", "headerName": "Category", "width": 150},
                {"field": "averageScore", "headerName": "Average Score", "formatterFn": "int", "width": 130},
                {"field": "factorCount", "headerName": "Factors", "formatterFn": "int", "width": 100}
            ]
        }
    },
    "params": [
        {"paramName": "state", "type": "text", "label": "State", "value": "Pennsylvania"},
        {"paramName": "county", "type": "text", "label": "County", "value": ""},
        {"paramName": "zip", "type": "text", "label": "ZIP Code", "value": ""}
    ]
})
@app.get("/risk_categories")
def risk_categories(
    state: str = "Pennsylvania",
    county: Optional[str] = None,
    zip_code: Optional[str] = Query(None, alias="zip"),
):
    report = metrics.build_risk_factor_report(state, county or None, zip_code or None)
    return [
        {
            "id": category["id"],
            "name": category["name"],
            "averageScore": category["averageScore"],
            "factorCount": len(category["factors"]),
        }
        for category in report["categories"]
    ]


@register_widget({
    "name": "Predictive Insights",
    "description": "Top risk factors, recommendations and narrative outlook",
    "category": "Insights",
    "endpoint": "predictive_insights",
    "type": "markdown",
    "gridData": {"x": 0, "y": 26, "w": 20, "h": 12},
    "params": [
        {
            "paramName": "level",
            "type": "text",
            "label": "Level",
            "value": "national",
            "options": [{"label": "National", "value": "national"}]
        }
    ]
})
@app.get("/predictive_insights")
def predictive_insights(level: str = "national"):
    """Renders the predictive insights narrative as markdown"""
    data = catalogs.predictive_insights(level)
    narrative = data["narrative"]

    findings = "\n".join(f"- {finding}" for finding in narrative["keyFindings"])
    factors = "\n".join(
        f"- **{factor['name']}**: impact {factor['impact']}, {factor['trend']}"
        for factor in data["topRiskFactors"]
    )

    return f"""# Predictive Insights ({level})

{narrative['summary']}

## Key Findings
{findings}

## Top Risk Factors
{factors}

## Risk Assessment
{narrative['riskAssessment']}

## Recommendations
{narrative['recommendations']}

## Outlook
{narrative['outlook']}

_Confidence: {narrative['confidence']}% | Updated {narrative['lastUpdated']}_
"""


@register_widget({
    "name": "State Overview",
    "description": "County breakdown of a state's resilience index",
    "category": "Drill-down",
    "endpoint": "state_counties",
    "type": "table",
    "gridData": {"x": 20, "y": 26, "w": 20, "h": 12},
    "data": {
        "table": {
            "columnsDefs": [
                {"field": "name", "headerName": "County", "width": 180},
                {"field": "resilienceIndex", "headerName": "Resilience Index", "formatterFn": "int", "width": 140},
                {"field": "highRiskZips", "headerName": "High-Risk ZIPs", "formatterFn": "int", "width": 130}
            ]
        }
    },
    "params": [
        {"paramName": "code", "type": "text", "label": "State", "value": "PA"}
    ]
})
@app.get("/state_counties")
def state_counties(code: str = "PA"):
    return catalogs.counties_for_state(code)


@register_widget({
    "name": "Community Organizations",
    "description": "Community-based organizations active in a state",
    "category": "Community",
    "endpoint": "community_organizations",
    "type": "table",
    "gridData": {"x": 0, "y": 38, "w": 20, "h": 10},
    "data": {
        "table": {
            "columnsDefs": [
                {"field": "name", "headerName": "Organization", "width": 200},
                {"field": "phone", "headerName": "Phone", "width": 130},
                {"field": "website", "headerName": "Website", "width": 180},
                {"field": "volunteers", "headerName": "Volunteers", "formatterFn": "int", "width": 110}
            ]
        }
    },
    "params": [
        {"paramName": "state_code", "type": "text", "label": "State", "value": "PA"}
    ]
})
@app.get("/community_organizations")
def community_organizations(state_code: str = "PA"):
    organizations = catalogs.cbo_directory(state_code)["organizations"]
    return [
        {
            "id": org["id"],
            "name": org["name"],
            "phone": org.get("contact", {}).get("phone"),
            "website": org.get("contact", {}).get("website"),
            "volunteers": org.get("volunteers"),
        }
        for org in organizations
    ]


@register_widget({
    "name": "Recommendations",
    "description": "Resilience-building recommendations for a state",
    "category": "Community",
    "endpoint": "state_recommendations",
    "type": "table",
    "gridData": {"x": 20, "y": 38, "w": 20, "h": 10},
    "data": {
        "table": {
            "columnsDefs": [
                {"field": "title", "headerName": "Recommendation", "width": 220},
                {"field": "priority", "headerName": "Priority", "width": 90},
                {"field": "cost", "headerName": "Cost", "width": 120},
                {"field": "timeline", "headerName": "Timeline", "width": 120},
                {"field": "impact", "headerName": "Impact", "width": 150}
            ]
        }
    },
    "params": [
        {"paramName": "state_code", "type": "text", "label": "State", "value": "PA"}
    ]
})
@app.get("/state_recommendations")
def state_recommendations(state_code: str = "PA"):
    return catalogs.recommendations(state_code)["recommendations"]


# =============================================================================
# COMMUNITY SERVICES
# =============================================================================

@app.get("/api/services")
def get_services(type: Optional[str] = None, area: Optional[str] = None):
    """Service providers (type=providers) or open service requests"""
    if type == "providers":
        return community.list_providers(area)
    return community.list_service_requests()


@app.post("/api/services")
def post_service_request(payload: community.ServiceRequestIn):
    """Echo a new service request; nothing is stored"""
    result = community.submit_service_request(payload)
    logger.info("Service request %s accepted", result["request"]["id"])
    return result


@app.get("/api/households")
def get_households(
    id: Optional[str] = None,
    area: Optional[str] = None,
    risk: Optional[str] = None,
):
    if id:
        return community.household_profile(id)
    return community.list_households(area, risk)


@app.post("/api/households")
def post_household_service(payload: community.HouseholdServiceIn):
    result = community.schedule_household_service(payload)
    logger.info("Household service %s scheduled", result["service"]["id"])
    return result


# Status widget
@register_widget({
    "name": "System Status",
    "description": "Shows the status of the resilience data service",
    "type": "markdown",
    "endpoint": "system_status",
    "gridData": {"w": 12, "h": 6},
})
@app.get("/system_status")
def system_status():
    """Returns status information about the data service"""
    widgets_list = "\n".join(
        f"- **{config['name']}**: /{config['endpoint']}"
        for config in WIDGETS.values()
    )
    states = ", ".join(catalogs.catalogued_states())

    return f"""# Resilience Data Service Status

## Data Summary
- **Registered Widgets:** {len(WIDGETS)}
- **Catalogued States:** {states}
- **Forecast Horizon:** up to {settings.max_forecast_days} days

## Available Widgets
{widgets_list}

## Note
All metrics are synthetic placeholders generated per request.

## Last Updated
{datetime.now().strftime("%Y-%m-%d %H:%M:%S")}
"""


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
