"""
Static reference catalogs: states, counties, ZIP directories, community
organizations, recommendations and predictive insights.

Tables are built once at import and never mutated; lookups hand out deep
copies so callers can decorate a record without touching the catalog.
"""

import copy
import logging
from typing import Any, Dict, List, Mapping

logger = logging.getLogger(__name__)

DEFAULT_KEY = "default"


class CatalogKeyError(LookupError):
    """Raised by two-level lookups when a level has no record"""

    message = "Not found"

    def __init__(self, key: str):
        super().__init__(key)
        self.key = key


class UnknownStateError(CatalogKeyError):
    message = "State not found"


class UnknownCountyError(CatalogKeyError):
    message = "County not found"


def lookup(table: Mapping[str, Any], key: str) -> Any:
    """Case-insensitive lookup falling back to the table's default record"""
    record = table.get(key.lower())
    if record is None:
        logger.debug("No catalog record for %r, using default", key)
        record = table[DEFAULT_KEY]
    return copy.deepcopy(record)


# =============================================================================
# STATES
# =============================================================================

STATE_NAMES = {
    "AL": "Alabama", "AK": "Alaska", "AZ": "Arizona", "AR": "Arkansas",
    "CA": "California", "CO": "Colorado", "CT": "Connecticut", "DE": "Delaware",
    "FL": "Florida", "GA": "Georgia", "HI": "Hawaii", "ID": "Idaho",
    "IL": "Illinois", "IN": "Indiana", "IA": "Iowa", "KS": "Kansas",
    "KY": "Kentucky", "LA": "Louisiana", "ME": "Maine", "MD": "Maryland",
    "MA": "Massachusetts", "MI": "Michigan", "MN": "Minnesota", "MS": "Mississippi",
    "MO": "Missouri", "MT": "Montana", "NE": "Nebraska", "NV": "Nevada",
    "NH": "New Hampshire", "NJ": "New Jersey", "NM": "New Mexico", "NY": "New York",
    "NC": "North Carolina", "ND": "North Dakota", "OH": "Ohio", "OK": "Oklahoma",
    "OR": "Oregon", "PA": "Pennsylvania", "RI": "Rhode Island", "SC": "South Carolina",
    "SD": "South Dakota", "TN": "Tennessee", "TX": "Texas", "UT": "Utah",
    "VT": "Vermont", "VA": "Virginia", "WA": "Washington", "WV": "West Virginia",
    "WI": "Wisconsin", "WY": "Wyoming",
}

# Full names (with and without spaces) accepted in place of a code
STATE_NAME_TO_CODE = {}
for _code, _name in STATE_NAMES.items():
    STATE_NAME_TO_CODE[_name.upper()] = _code
    STATE_NAME_TO_CODE[_name.upper().replace(" ", "")] = _code

UNKNOWN_STATE_NAME = "Unknown State"

STATE_RISK_FACTORS = [
    "Extreme Weather Events",
    "Infrastructure Vulnerability",
    "Economic Instability",
    "Population Density",
    "Climate Change Impact",
]


def resolve_state_code(value: str) -> str:
    """Map a state code or full state name to its upper-case code"""
    key = value.strip().upper()
    return STATE_NAME_TO_CODE.get(key, key)


def state_name(value: str) -> str:
    return STATE_NAMES.get(resolve_state_code(value), UNKNOWN_STATE_NAME)


# =============================================================================
# COUNTIES
# =============================================================================

def _county(name: str, resilience_index: int, high_risk_zips: int) -> Dict[str, Any]:
    return {"name": name, "resilienceIndex": resilience_index, "highRiskZips": high_risk_zips}


STATE_COUNTIES = {
    "pa": [
        _county("Allegheny County", 68, 12),
        _county("Philadelphia County", 62, 18),
        _county("Montgomery County", 72, 8),
        _county("Bucks County", 70, 6),
        _county("Chester County", 74, 4),
        _county("Delaware County", 65, 10),
        _county("Lancaster County", 69, 7),
        _county("York County", 67, 9),
        _county("Dauphin County", 66, 8),
        _county("Lehigh County", 63, 11),
        _county("Northampton County", 64, 9),
        _county("Erie County", 59, 14),
        _county("Luzerne County", 60, 13),
        _county("Lackawanna County", 58, 15),
        _county("Berks County", 65, 10),
        _county("Cumberland County", 71, 5),
        _county("Butler County", 68, 7),
        _county("Westmoreland County", 64, 11),
        _county("Washington County", 62, 12),
        _county("Armstrong County", 61, 8),
    ],
    "ca": [
        _county("Los Angeles County", 58, 45),
        _county("San Diego County", 64, 22),
        _county("Orange County", 66, 18),
        _county("Riverside County", 61, 28),
        _county("San Bernardino County", 59, 32),
        _county("Santa Clara County", 71, 15),
    ],
    "tx": [
        _county("Harris County", 59, 38),
        _county("Dallas County", 62, 25),
        _county("Tarrant County", 64, 20),
        _county("Bexar County", 61, 22),
        _county("Travis County", 67, 16),
        _county("Collin County", 69, 12),
    ],
    DEFAULT_KEY: [
        _county("County A", 65, 8),
        _county("County B", 58, 12),
        _county("County C", 71, 5),
        _county("County D", 63, 9),
    ],
}


def counties_for_state(code: str) -> List[Dict[str, Any]]:
    return lookup(STATE_COUNTIES, resolve_state_code(code))


# =============================================================================
# ZIP DIRECTORIES (state -> county -> ZIP codes)
# =============================================================================

def _zip(code: str, name: str, resilience_index: int, population: int, risk_level: str) -> Dict[str, Any]:
    return {
        "code": code,
        "name": name,
        "resilienceIndex": resilience_index,
        "population": population,
        "riskLevel": risk_level,
    }


def _county_detail(name: str, state: str, resilience_index: int, population: int, zips: List[Dict]) -> Dict[str, Any]:
    return {
        "name": name,
        "state": state,
        "resilienceIndex": resilience_index,
        "population": population,
        "zipCodes": zips,
    }


COUNTY_ZIP_CODES = {
    "pa": {
        "allegheny": _county_detail("Allegheny County", "Pennsylvania", 68, 1250578, [
            _zip("15201", "Lawrenceville", 72, 8420, "Low"),
            _zip("15213", "Oakland", 69, 12350, "Medium"),
            _zip("15232", "Shadyside", 75, 9180, "Low"),
            _zip("15224", "East Liberty", 61, 7890, "High"),
            _zip("15206", "East End", 66, 11200, "Medium"),
            _zip("15222", "Downtown", 58, 3450, "High"),
            _zip("15217", "Squirrel Hill", 73, 14560, "Low"),
            _zip("15208", "Point Breeze", 70, 6780, "Low"),
            _zip("15219", "Hill District", 54, 8920, "High"),
            _zip("15212", "Allegheny", 63, 9340, "Medium"),
        ]),
        "philadelphia": _county_detail("Philadelphia County", "Pennsylvania", 62, 1584064, [
            _zip("19102", "Center City", 65, 12450, "Medium"),
            _zip("19103", "Rittenhouse Square", 78, 8920, "Low"),
            _zip("19104", "University City", 67, 15670, "Medium"),
            _zip("19106", "Old City", 71, 6780, "Low"),
            _zip("19107", "Society Hill", 74, 5430, "Low"),
            _zip("19111", "Fox Chase", 69, 18920, "Medium"),
            _zip("19114", "Pennypack", 66, 22340, "Medium"),
            _zip("19120", "Olney", 58, 28450, "High"),
            _zip("19124", "Frankford", 55, 31200, "High"),
            _zip("19134", "Kensington", 52, 24680, "High"),
            _zip("19140", "Nicetown", 54, 19870, "High"),
            _zip("19145", "South Philadelphia", 61, 26540, "High"),
        ]),
        "montgomery": _county_detail("Montgomery County", "Pennsylvania", 72, 856553, [
            _zip("19401", "Norristown", 68, 34450, "Medium"),
            _zip("19403", "Norristown", 70, 28920, "Low"),
            _zip("19426", "Collegeville", 76, 12340, "Low"),
            _zip("19428", "Conshohocken", 74, 8760, "Low"),
            _zip("19446", "Lansdale", 72, 16890, "Low"),
            _zip("19462", "Plymouth Meeting", 77, 6540, "Low"),
            _zip("19468", "Royersford", 71, 4890, "Low"),
            _zip("19473", "Schwenksville", 73, 3210, "Low"),
        ]),
        "bucks": _county_detail("Bucks County", "Pennsylvania", 70, 646538, [
            _zip("18901", "Doylestown", 75, 8340, "Low"),
            _zip("18902", "Doylestown", 74, 12560, "Low"),
            _zip("18914", "Chalfont", 73, 4120, "Low"),
            _zip("18936", "Furlong", 76, 2890, "Low"),
            _zip("18940", "Newtown", 72, 11450, "Low"),
            _zip("19020", "Bensalem", 67, 60427, "Medium"),
        ]),
        "chester": _county_detail("Chester County", "Pennsylvania", 74, 534413, [
            _zip("19301", "Paoli", 78, 5670, "Low"),
            _zip("19312", "Berwyn", 79, 3450, "Low"),
            _zip("19320", "Coatesville", 65, 13100, "Medium"),
            _zip("19335", "Downingtown", 76, 7891, "Low"),
            _zip("19348", "Kennett Square", 72, 6072, "Low"),
            _zip("19380", "West Chester", 77, 18461, "Low"),
        ]),
        "delaware": _county_detail("Delaware County", "Pennsylvania", 65, 576830, [
            _zip("19008", "Broomall", 71, 10890, "Low"),
            _zip("19010", "Bryn Mawr", 78, 4380, "Low"),
            _zip("19018", "Clifton Heights", 62, 6780, "High"),
            _zip("19023", "Darby", 58, 10687, "High"),
            _zip("19029", "Essington", 60, 4719, "High"),
            _zip("19063", "Media", 74, 5327, "Low"),
            _zip("19064", "Springfield", 73, 23677, "Low"),
            _zip("19081", "Swarthmore", 79, 6194, "Low"),
            _zip("19086", "Upper Darby", 64, 82795, "Medium"),
            _zip("19094", "Swarthmore", 77, 3456, "Low"),
        ]),
        "lancaster": _county_detail("Lancaster County", "Pennsylvania", 69, 552984, [
            _zip("17601", "Lancaster", 66, 59322, "Medium"),
            _zip("17602", "Lancaster", 68, 28450, "Medium"),
            _zip("17603", "Lancaster", 70, 31200, "Low"),
            _zip("17543", "Lititz", 74, 9369, "Low"),
            _zip("17545", "Manheim", 71, 4858, "Low"),
            _zip("17554", "Mount Joy", 72, 8054, "Low"),
            _zip("17566", "Paradise", 69, 1129, "Medium"),
        ]),
        "york": _county_detail("York County", "Pennsylvania", 67, 456438, [
            _zip("17401", "York", 63, 43718, "Medium"),
            _zip("17402", "York", 65, 28920, "Medium"),
            _zip("17403", "York", 68, 22340, "Medium"),
            _zip("17404", "York", 66, 31450, "Medium"),
            _zip("17406", "York", 69, 18760, "Medium"),
            _zip("17408", "York", 64, 24680, "Medium"),
            _zip("17325", "Hanover", 70, 15289, "Low"),
            _zip("17331", "Red Lion", 68, 6373, "Medium"),
        ]),
    },
}


def county_detail(state_code: str, county_name: str) -> Dict[str, Any]:
    """ZIP directory for one county; each missing level raises its own error"""
    counties = COUNTY_ZIP_CODES.get(state_code.lower())
    if counties is None:
        raise UnknownStateError(state_code)
    detail = counties.get(county_name.lower())
    if detail is None:
        raise UnknownCountyError(county_name)
    return copy.deepcopy(detail)


# =============================================================================
# COMMUNITY-BASED ORGANIZATIONS
# =============================================================================

CBO_DIRECTORY = {
    "pa": {
        "organizations": [
            {
                "id": "pa-red-cross",
                "name": "Pennsylvania Red Cross",
                "description": "Provides emergency assistance, disaster relief, and preparedness education throughout Pennsylvania.",
                "services": [
                    "Emergency shelter and food assistance",
                    "Disaster preparedness training",
                    "Blood donation services",
                    "First aid and CPR certification",
                    "Emergency communication services",
                    "Volunteer coordination",
                ],
                "contact": {
                    "phone": "(717) 234-2500",
                    "email": "info@redcross-pa.org",
                    "website": "www.redcross.org/pa",
                    "address": "2151 N Front St, Harrisburg, PA 17110",
                },
                "focus": ["Emergency Response", "Disaster Relief", "Community Preparedness", "Health Services"],
                "established": 1881,
                "volunteers": 2500,
            },
            {
                "id": "pa-emergency-mgmt",
                "name": "PA Emergency Management Agency",
                "description": "State agency coordinating emergency preparedness, response, and recovery efforts across Pennsylvania.",
                "services": [
                    "Emergency planning and coordination",
                    "Hazard mitigation programs",
                    "Public warning systems",
                    "Emergency training and exercises",
                    "Grant administration",
                    "Interagency coordination",
                ],
                "contact": {
                    "phone": "(717) 651-2001",
                    "email": "info@pema.pa.gov",
                    "website": "www.pema.pa.gov",
                    "address": "2605 Interstate Dr, Harrisburg, PA 17110",
                },
                "focus": ["Emergency Management", "Public Safety", "Hazard Mitigation", "Training"],
                "established": 1950,
                "volunteers": 500,
            },
            {
                "id": "salvation-army-pa",
                "name": "Salvation Army Pennsylvania",
                "description": "Faith-based organization providing social services and emergency assistance to communities in need.",
                "services": [
                    "Emergency food and shelter",
                    "Disaster relief services",
                    "Social services programs",
                    "Youth and family programs",
                    "Addiction recovery services",
                    "Community outreach",
                ],
                "contact": {
                    "phone": "(717) 787-2600",
                    "email": "pa.division@use.salvationarmy.org",
                    "website": "www.salvationarmypa.org",
                    "address": "700 N High St, Harrisburg, PA 17102",
                },
                "focus": ["Social Services", "Emergency Relief", "Community Support", "Faith-Based"],
                "established": 1865,
                "volunteers": 1800,
            },
            {
                "id": "pa-community-orgs",
                "name": "PA Association of Community Organizations",
                "description": "Network of community-based organizations working to strengthen neighborhoods and build resilience.",
                "services": [
                    "Community organizing and advocacy",
                    "Neighborhood development programs",
                    "Leadership training",
                    "Policy advocacy",
                    "Resource coordination",
                    "Capacity building",
                ],
                "contact": {
                    "phone": "(215) 423-9711",
                    "email": "info@paco.org",
                    "website": "www.paco.org",
                    "address": "1315 Walnut St, Philadelphia, PA 19107",
                },
                "focus": ["Community Development", "Advocacy", "Leadership", "Neighborhood Building"],
                "established": 1970,
                "volunteers": 3200,
            },
        ],
    },
    DEFAULT_KEY: {
        "organizations": [
            {
                "id": "local-emergency",
                "name": "Local Emergency Services",
                "description": "Community-based emergency response and preparedness organization.",
                "services": ["Emergency response", "Community preparedness", "Volunteer training", "Public education"],
                "contact": {
                    "phone": "(555) 123-4567",
                    "email": "info@localemergency.org",
                    "website": "www.localemergency.org",
                    "address": "123 Main St, Anytown, USA",
                },
                "focus": ["Emergency Response", "Community Preparedness"],
                "established": 2000,
                "volunteers": 100,
            },
        ],
    },
}


def cbo_directory(state_code: str) -> Dict[str, Any]:
    return lookup(CBO_DIRECTORY, state_code)


# =============================================================================
# RECOMMENDATIONS
# =============================================================================

RECOMMENDATIONS = {
    "pa": {
        "recommendations": [
            {
                "id": "infra-hardening",
                "title": "Critical Infrastructure Hardening",
                "description": "Upgrade aging water and power infrastructure to withstand extreme weather events and cyber threats.",
                "priority": "High",
                "cost": "$2.5M - $5M",
                "timeline": "12-18 months",
                "impact": "+15 resilience points",
                "category": "Infrastructure",
                "actionItems": [
                    "Conduct comprehensive infrastructure assessment",
                    "Upgrade water treatment facilities with backup power systems",
                    "Install smart grid technology for power distribution",
                    "Implement cybersecurity measures for critical systems",
                    "Create redundant communication networks",
                    "Establish emergency response protocols",
                ],
            },
            {
                "id": "emergency-preparedness",
                "title": "Community Emergency Preparedness Program",
                "description": "Establish neighborhood-level emergency response teams and communication networks.",
                "priority": "High",
                "cost": "$500K - $1M",
                "timeline": "6-12 months",
                "impact": "+12 resilience points",
                "category": "Community",
                "actionItems": [
                    "Train community emergency response teams",
                    "Install emergency communication systems",
                    "Create neighborhood emergency supply caches",
                    "Develop evacuation and shelter plans",
                    "Conduct regular emergency drills",
                    "Establish partnerships with local organizations",
                ],
            },
            {
                "id": "flood-mitigation",
                "title": "Flood Mitigation and Stormwater Management",
                "description": "Implement green infrastructure and flood control measures to reduce flood risk.",
                "priority": "Medium",
                "cost": "$1M - $3M",
                "timeline": "18-24 months",
                "impact": "+10 resilience points",
                "category": "Environment",
                "actionItems": [
                    "Install permeable pavement and rain gardens",
                    "Upgrade stormwater drainage systems",
                    "Create flood barriers and retention ponds",
                    "Implement early warning systems",
                    "Restore natural floodplains",
                    "Educate residents on flood preparedness",
                ],
            },
            {
                "id": "economic-diversification",
                "title": "Economic Diversification Initiative",
                "description": "Support local businesses and create economic resilience through diversification.",
                "priority": "Medium",
                "cost": "$750K - $2M",
                "timeline": "12-36 months",
                "impact": "+8 resilience points",
                "category": "Economic",
                "actionItems": [
                    "Provide small business development grants",
                    "Create business incubator programs",
                    "Support local supply chain development",
                    "Establish emergency business continuity funds",
                    "Promote remote work capabilities",
                    "Develop skills training programs",
                ],
            },
        ],
    },
    DEFAULT_KEY: {
        "recommendations": [
            {
                "id": "general-preparedness",
                "title": "General Emergency Preparedness",
                "description": "Basic emergency preparedness measures for community resilience.",
                "priority": "High",
                "cost": "$100K - $500K",
                "timeline": "6-12 months",
                "impact": "+5 resilience points",
                "category": "General",
                "actionItems": [
                    "Create emergency response plans",
                    "Establish communication systems",
                    "Train community volunteers",
                    "Build emergency supply reserves",
                ],
            },
        ],
    },
}


def recommendations(state_code: str) -> Dict[str, Any]:
    return lookup(RECOMMENDATIONS, state_code)


# =============================================================================
# PREDICTIVE INSIGHTS
# =============================================================================

_NATIONAL_INSIGHTS = {
    "topRiskFactors": [
        {
            "name": "Climate Change Impact",
            "impact": 85,
            "trend": "increasing",
            "category": "environmental",
            "description": "Rising temperatures and extreme weather events affecting infrastructure and agriculture",
            "confidence": 92,
        },
        {
            "name": "Healthcare System Strain",
            "impact": 78,
            "trend": "increasing",
            "category": "health",
            "description": "Aging population and resource constraints impacting healthcare delivery capacity",
            "confidence": 88,
        },
        {
            "name": "Infrastructure Aging",
            "impact": 72,
            "trend": "stable",
            "category": "infrastructure",
            "description": "Critical infrastructure reaching end-of-life requiring significant investment",
            "confidence": 85,
        },
        {
            "name": "Economic Inequality",
            "impact": 68,
            "trend": "increasing",
            "category": "economic",
            "description": "Growing wealth gap affecting community resilience and social stability",
            "confidence": 82,
        },
        {
            "name": "Social Fragmentation",
            "impact": 64,
            "trend": "stable",
            "category": "social",
            "description": "Declining social cohesion and community engagement levels",
            "confidence": 79,
        },
    ],
    "recommendations": [
        {
            "id": "rec-1",
            "title": "Climate Adaptation Infrastructure",
            "description": "Invest in climate-resilient infrastructure including flood barriers, upgraded drainage systems, and renewable energy grid modernization",
            "priority": "high",
            "timeframe": "12-18 months",
            "costAvoidance": 15200000,
            "confidence": 89,
            "category": "infrastructure",
            "actionItems": [
                "Conduct comprehensive climate vulnerability assessment",
                "Develop climate adaptation master plan",
                "Secure federal and state funding for infrastructure upgrades",
                "Begin implementation of priority flood protection measures",
            ],
            "expectedImpact": 25,
        },
        {
            "id": "rec-2",
            "title": "Healthcare System Capacity Building",
            "description": "Expand healthcare workforce, improve telemedicine capabilities, and strengthen emergency medical response systems",
            "priority": "high",
            "timeframe": "6-12 months",
            "costAvoidance": 8900000,
            "confidence": 85,
            "category": "health",
            "actionItems": [
                "Launch healthcare workforce recruitment and training programs",
                "Implement comprehensive telemedicine platform",
                "Upgrade emergency medical equipment and facilities",
                "Establish regional healthcare coordination protocols",
            ],
            "expectedImpact": 22,
        },
        {
            "id": "rec-3",
            "title": "Economic Diversification Initiative",
            "description": "Support small business development, attract new industries, and create job training programs for emerging sectors",
            "priority": "medium",
            "timeframe": "18-24 months",
            "costAvoidance": 12400000,
            "confidence": 78,
            "category": "economic",
            "actionItems": [
                "Establish small business incubator programs",
                "Create tax incentives for new industry attraction",
                "Develop workforce retraining programs",
                "Build public-private partnerships for economic development",
            ],
            "expectedImpact": 18,
        },
    ],
    "narrative": {
        "summary": (
            "The United States faces a complex resilience landscape characterized by accelerating climate impacts, "
            "healthcare system pressures, and infrastructure challenges. Current resilience index of 74 reflects "
            "moderate preparedness with significant regional variations. AI analysis indicates declining trajectory "
            "without immediate intervention, with potential 6.8% decrease over next 90 days."
        ),
        "keyFindings": [
            "Climate change impacts are accelerating faster than adaptation measures, particularly affecting coastal and wildfire-prone regions",
            "Healthcare system capacity is approaching critical thresholds in 23 states, with rural areas most vulnerable",
            "Infrastructure investment gap of $2.6 trillion creates cascading vulnerabilities across multiple resilience domains",
            "Economic inequality is reducing community-level resilience, with 40% of households lacking emergency savings",
            "Social cohesion metrics show concerning decline in civic engagement and community preparedness",
        ],
        "riskAssessment": (
            "Current risk profile indicates heightened vulnerability to compound disasters. Primary concerns include "
            "simultaneous climate events overwhelming response capacity, healthcare system collapse during peak demand "
            "periods, and economic disruption from infrastructure failures."
        ),
        "recommendations": (
            "Immediate focus required on climate adaptation infrastructure, healthcare capacity building, and economic "
            "diversification. Federal coordination essential for addressing cross-state vulnerabilities."
        ),
        "outlook": (
            "Without intervention, resilience index projected to decline to 67 within 90 days, reaching critical "
            "threshold. Implementation of high-priority recommendations could stabilize index at 72-75 range."
        ),
        "confidence": 88,
        "lastUpdated": "2 hours ago",
    },
}

PREDICTIVE_INSIGHTS = {
    "national": _NATIONAL_INSIGHTS,
    DEFAULT_KEY: _NATIONAL_INSIGHTS,
}


def predictive_insights(level: str) -> Dict[str, Any]:
    return lookup(PREDICTIVE_INSIGHTS, level)


# =============================================================================
# RISK FACTOR CATEGORIES
# =============================================================================

RISK_CATEGORIES = [
    {"id": "climate", "name": "Climate Risk", "icon": "cloud", "color": "bg-red-500"},
    {"id": "infrastructure", "name": "Infrastructure", "icon": "zap", "color": "bg-orange-500"},
    {"id": "health", "name": "Public Health", "icon": "heart", "color": "bg-yellow-500"},
    {"id": "economic", "name": "Economic", "icon": "dollar-sign", "color": "bg-green-500"},
    {"id": "social", "name": "Social", "icon": "users", "color": "bg-blue-500"},
]

_RISK_FACTOR_TEMPLATES = [
    {
        "id": "flood-risk",
        "name": "Flood Risk",
        "trend": "increasing",
        "trendValue": 5.2,
        "confidence": 88,
        "lastUpdated": "2024-01-15T10:30:00Z",
        "sparklineData": [65, 68, 72, 75, 78, 82, 85],
        "subFactors": [
            {"name": "River Overflow", "score": 75, "impact": "high", "description": "Risk of river overflow during heavy rainfall"},
            {"name": "Storm Drainage", "score": 60, "impact": "medium", "description": "Capacity of storm drainage systems"},
        ],
        "recommendations": [
            {
                "title": "Improve Drainage Infrastructure",
                "description": "Upgrade storm drainage systems to handle increased rainfall",
                "costAvoidance": 2500000,
                "priority": "high",
                "timeframe": "6-12 months",
            },
        ],
    },
    {
        "id": "wildfire-risk",
        "name": "Wildfire Risk",
        "trend": "stable",
        "trendValue": 0.8,
        "confidence": 92,
        "lastUpdated": "2024-01-15T10:30:00Z",
        "sparklineData": [45, 47, 46, 48, 47, 49, 48],
        "subFactors": [
            {"name": "Vegetation Density", "score": 55, "impact": "medium", "description": "Density of flammable vegetation"},
        ],
        "recommendations": [
            {
                "title": "Vegetation Management",
                "description": "Implement controlled burns and vegetation clearing",
                "costAvoidance": 1800000,
                "priority": "medium",
                "timeframe": "3-6 months",
            },
        ],
    },
]


def risk_factor_templates() -> List[Dict[str, Any]]:
    return copy.deepcopy(_RISK_FACTOR_TEMPLATES)


_RISK_AI_INSIGHTS = {
    "riskDistribution": [
        {"name": "Climate", "value": 35, "color": "#ef4444"},
        {"name": "Infrastructure", "value": 25, "color": "#f97316"},
        {"name": "Health", "value": 20, "color": "#eab308"},
        {"name": "Economic", "value": 12, "color": "#22c55e"},
        {"name": "Social", "value": 8, "color": "#3b82f6"},
    ],
    "keyInsights": [
        {
            "id": "insight-1",
            "type": "warning",
            "title": "Elevated Flood Risk",
            "description": "Heavy rainfall patterns indicate 65% probability of flooding in low-lying areas within 30 days.",
            "confidence": 88,
            "impact": "high",
            "timeframe": "30 days",
        },
        {
            "id": "insight-2",
            "type": "trend",
            "title": "Infrastructure Aging",
            "description": "Critical infrastructure shows 12% degradation over past year, requiring immediate attention.",
            "confidence": 92,
            "impact": "medium",
            "timeframe": "6 months",
        },
        {
            "id": "insight-3",
            "type": "opportunity",
            "title": "Emergency Response Improvement",
            "description": "Recent upgrades to emergency systems show 25% improvement in response times.",
            "confidence": 85,
            "impact": "medium",
            "timeframe": "Current",
        },
    ],
    "recommendations": [
        {
            "id": "rec-1",
            "type": "recommendation",
            "title": "Implement Early Warning System",
            "description": "Deploy IoT sensors for real-time flood monitoring and automated alerts.",
            "confidence": 90,
            "impact": "high",
            "timeframe": "3-6 months",
            "actionItems": [
                "Install water level sensors at 15 key locations",
                "Integrate with emergency alert system",
                "Train emergency response teams",
                "Conduct community awareness campaign",
            ],
        },
        {
            "id": "rec-2",
            "type": "recommendation",
            "title": "Infrastructure Resilience Program",
            "description": "Systematic upgrade of critical infrastructure to improve disaster resilience.",
            "confidence": 85,
            "impact": "high",
            "timeframe": "12-18 months",
            "actionItems": [
                "Assess current infrastructure vulnerabilities",
                "Prioritize upgrades based on risk assessment",
                "Secure funding for critical improvements",
                "Implement phased upgrade schedule",
            ],
        },
    ],
    "predictions": {
        "shortTerm": "Increased precipitation likely to elevate flood risk by 15-20% in vulnerable areas.",
        "mediumTerm": "Infrastructure stress expected to increase due to aging systems and climate pressures.",
        "longTerm": "Overall resilience improvement anticipated with planned infrastructure investments.",
    },
}

RISK_SUMMARY_TEMPLATE = (
    "Based on current data analysis, {area} shows elevated risk levels in climate-related factors. "
    "The AI model predicts a 15% increase in flood risk over the next 30 days due to forecasted weather "
    "patterns. Infrastructure resilience scores indicate moderate vulnerability, particularly in storm "
    "drainage capacity."
)


def risk_ai_insights(area: str) -> Dict[str, Any]:
    insights = {"summary": RISK_SUMMARY_TEMPLATE.format(area=area)}
    insights.update(copy.deepcopy(_RISK_AI_INSIGHTS))
    return insights


def catalogued_states() -> List[str]:
    """State codes that have hand-curated catalog entries"""
    keys = set(STATE_COUNTIES) | set(COUNTY_ZIP_CODES) | set(CBO_DIRECTORY) | set(RECOMMENDATIONS)
    keys.discard(DEFAULT_KEY)
    return sorted(key.upper() for key in keys)
