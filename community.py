"""
Household and service-provider records for the community engagement views.
Nothing is stored: POST payloads are echoed back as confirmation records.
"""

import copy
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import numpy as np
from pydantic import BaseModel

RISK_LEVELS = ["low", "medium", "high", "critical"]
STREETS = ["Main St", "Oak Ave", "Pine St", "Elm Dr", "Cedar Ln"]

# Philadelphia city hall, (lon, lat)
PHILADELPHIA = (-75.1652, 39.9526)


class ServiceRequestIn(BaseModel):
    householdId: Optional[str] = None
    serviceType: Optional[str] = None
    priority: Optional[str] = None
    notes: Optional[str] = None
    requestedDate: Optional[str] = None


class HouseholdServiceIn(BaseModel):
    householdId: Optional[str] = None
    serviceType: Optional[str] = None
    scheduledDate: Optional[str] = None
    notes: Optional[str] = None


def _now_iso(now: Optional[datetime] = None) -> str:
    return (now or datetime.now(timezone.utc)).isoformat()


def _new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:8]}"


SERVICE_PROVIDERS = [
    {
        "id": "provider-1",
        "name": "Community Kitchen Network",
        "type": "food",
        "services": ["Meal delivery", "Food pantry", "Nutrition counseling"],
        "coverage": ["Philadelphia", "Camden", "Chester"],
        "capacity": 500,
        "currentLoad": 342,
        "contact": {
            "phone": "(555) 123-4567",
            "email": "info@communitykitchen.org",
            "address": "123 Service St, Philadelphia, PA",
        },
        "availability": {
            "days": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"],
            "hours": "8:00 AM - 6:00 PM",
            "emergency": False,
        },
    },
    {
        "id": "provider-2",
        "name": "Mobile Health Services",
        "type": "health",
        "services": ["Home health visits", "Medication management", "Health screenings"],
        "coverage": ["Philadelphia County"],
        "capacity": 200,
        "currentLoad": 156,
        "contact": {
            "phone": "(555) 987-6543",
            "email": "dispatch@mobilehealthservices.org",
            "address": "456 Health Ave, Philadelphia, PA",
        },
        "availability": {
            "days": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"],
            "hours": "7:00 AM - 8:00 PM",
            "emergency": True,
        },
    },
    {
        "id": "provider-3",
        "name": "Community Transport",
        "type": "transportation",
        "services": ["Medical appointments", "Grocery shopping", "Social services"],
        "coverage": ["Greater Philadelphia"],
        "capacity": 100,
        "currentLoad": 78,
        "contact": {
            "phone": "(555) 456-7890",
            "email": "rides@communitytransport.org",
            "address": "789 Transit Blvd, Philadelphia, PA",
        },
        "availability": {
            "days": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"],
            "hours": "6:00 AM - 10:00 PM",
            "emergency": False,
        },
    },
]

SERVICE_REQUESTS = [
    {
        "id": "req-1",
        "householdId": "household-1",
        "serviceType": "meal_delivery",
        "priority": "high",
        "status": "assigned",
        "requestedDate": "2024-01-15T09:00:00Z",
        "scheduledDate": "2024-01-16T12:00:00Z",
        "assignedProvider": "provider-1",
        "notes": "Diabetic-friendly meals required",
        "estimatedDuration": 30,
    },
    {
        "id": "req-2",
        "householdId": "household-2",
        "serviceType": "wellness_check",
        "priority": "medium",
        "status": "in_progress",
        "requestedDate": "2024-01-15T10:30:00Z",
        "scheduledDate": "2024-01-15T14:00:00Z",
        "assignedProvider": "provider-2",
        "estimatedDuration": 45,
    },
    {
        "id": "req-3",
        "householdId": "household-3",
        "serviceType": "transportation",
        "priority": "low",
        "status": "requested",
        "requestedDate": "2024-01-15T11:15:00Z",
        "notes": "Medical appointment transport needed",
    },
]


def list_providers(area: Optional[str] = None) -> Dict[str, Any]:
    providers = copy.deepcopy(SERVICE_PROVIDERS)
    if area:
        needle = area.lower()
        providers = [p for p in providers if any(needle in c.lower() for c in p["coverage"])]
    return {"providers": providers, "total": len(providers)}


def list_service_requests() -> Dict[str, Any]:
    return {"requests": copy.deepcopy(SERVICE_REQUESTS), "total": len(SERVICE_REQUESTS)}


def submit_service_request(payload: ServiceRequestIn, now: Optional[datetime] = None) -> Dict[str, Any]:
    request = {
        "id": _new_id("req"),
        "householdId": payload.householdId,
        "serviceType": payload.serviceType,
        "priority": payload.priority or "medium",
        "status": "requested",
        "requestedDate": payload.requestedDate or _now_iso(now),
        "notes": payload.notes,
        "estimatedDuration": 60,
    }
    return {
        "success": True,
        "request": request,
        "message": "Service request submitted successfully",
    }


# =============================================================================
# HOUSEHOLDS
# =============================================================================

_HOUSEHOLD_PROFILE = {
    "address": "1234 Community St, Philadelphia, PA 19103",
    "coordinates": list(PHILADELPHIA),
    "members": [
        {
            "id": "member-1",
            "name": "Maria Rodriguez",
            "age": 67,
            "relationship": "Head of Household",
            "healthConditions": ["Type 2 Diabetes", "Hypertension", "Arthritis"],
            "medications": ["Metformin 500mg", "Lisinopril 10mg", "Ibuprofen 200mg"],
            "dietaryRestrictions": ["Low sodium", "Diabetic diet", "Lactose intolerant"],
            "mobilityNeeds": ["Walker assistance", "Grab bars needed"],
        },
        {
            "id": "member-2",
            "name": "Carlos Rodriguez",
            "age": 72,
            "relationship": "Spouse",
            "healthConditions": ["COPD", "Heart Disease"],
            "medications": ["Albuterol inhaler", "Metoprolol 25mg"],
            "dietaryRestrictions": ["Heart healthy", "Low fat"],
            "mobilityNeeds": ["Oxygen tank", "Wheelchair accessible"],
        },
    ],
    "vulnerabilityScore": 78,
    "riskFactors": {"health": 85, "food": 72, "water": 45, "housing": 68, "social": 55},
    "services": [
        {
            "id": "service-1",
            "type": "meal_delivery",
            "status": "active",
            "provider": "Community Kitchen Network",
            "nextScheduled": "2024-01-16T12:00:00Z",
            "frequency": "daily",
            "notes": "Diabetic-friendly meals, low sodium",
        },
        {
            "id": "service-2",
            "type": "medication_management",
            "status": "active",
            "provider": "Home Health Services",
            "frequency": "weekly",
            "notes": "Pill organizer setup and monitoring",
        },
        {
            "id": "service-3",
            "type": "wellness_check",
            "status": "scheduled",
            "provider": "Community Health Worker",
            "nextScheduled": "2024-01-18T10:00:00Z",
            "frequency": "weekly",
        },
    ],
    "emergencyContacts": [
        {
            "name": "Ana Rodriguez",
            "relationship": "Daughter",
            "phone": "(555) 123-4567",
            "email": "ana.rodriguez@email.com",
        },
        {
            "name": "Dr. Sarah Johnson",
            "relationship": "Primary Care Physician",
            "phone": "(555) 987-6543",
            "email": "s.johnson@healthcenter.org",
        },
    ],
    "accessibilityNeeds": [
        "Wheelchair accessible entrance",
        "Large print materials",
        "Spanish language interpreter",
        "Hearing assistance",
    ],
    "preferredLanguage": "Spanish",
    "lastAssessment": "2024-01-10T14:30:00Z",
    "nextVisit": "2024-01-20T11:00:00Z",
    "caseWorker": {
        "name": "Jennifer Martinez",
        "phone": "(555) 456-7890",
        "email": "j.martinez@communityservices.org",
    },
}


def household_profile(household_id: str) -> Dict[str, Any]:
    profile = {"id": household_id}
    profile.update(copy.deepcopy(_HOUSEHOLD_PROFILE))
    return profile


def household_summaries(
    count: int = 50,
    rng: Optional[np.random.Generator] = None,
    now: Optional[datetime] = None,
) -> List[Dict[str, Any]]:
    """Randomized households scattered around Philadelphia"""
    rng = rng if rng is not None else np.random.default_rng()
    now = now or datetime.now(timezone.utc)
    lon, lat = PHILADELPHIA

    households = []
    for i in range(count):
        last_contact = now - timedelta(seconds=float(rng.uniform(0, 30 * 24 * 60 * 60)))
        households.append({
            "id": f"household-{i}",
            "address": f"{1000 + i} {STREETS[i % len(STREETS)]}, Philadelphia, PA",
            "coordinates": [
                round(float(lon + rng.uniform(-0.05, 0.05)), 5),
                round(float(lat + rng.uniform(-0.05, 0.05)), 5),
            ],
            "residents": int(rng.integers(1, 6)),
            "vulnerabilityScore": int(rng.integers(50, 90)),
            "riskLevel": RISK_LEVELS[int(rng.integers(0, len(RISK_LEVELS)))],
            "activeServices": int(rng.integers(0, 4)),
            "lastContact": last_contact.isoformat(),
        })
    return households


def list_households(
    area: Optional[str] = None,
    risk_level: Optional[str] = None,
    rng: Optional[np.random.Generator] = None,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    households = household_summaries(rng=rng, now=now)
    if risk_level:
        households = [h for h in households if h["riskLevel"] == risk_level.lower()]
    return {
        "households": households,
        "total": len(households),
        "filters": {"area": area, "riskLevel": risk_level},
    }


def schedule_household_service(payload: HouseholdServiceIn) -> Dict[str, Any]:
    service = {
        "id": _new_id("service"),
        "householdId": payload.householdId,
        "type": payload.serviceType,
        "status": "scheduled",
        "provider": "Community Services",
        "nextScheduled": payload.scheduledDate,
        "frequency": "as_needed",
        "notes": payload.notes,
    }
    return {
        "success": True,
        "service": service,
        "message": f"{payload.serviceType} scheduled successfully for {payload.scheduledDate}",
    }
