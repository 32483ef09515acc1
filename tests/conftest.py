"""Pytest configuration and shared fixtures."""

from datetime import date, datetime, timezone
from typing import Any

import pytest

from tripdash_app.data.models import ActionItem, Trip


def make_trip(trip_id: Any, start: date, end: date, **kwargs: Any) -> Trip:
    """Build a trip snapshot with sensible display defaults."""
    kwargs.setdefault("school_name", f"School {trip_id}")
    kwargs.setdefault("group_name", f"Group {trip_id}")
    kwargs.setdefault("location", "Orlando, FL")
    return Trip(id=trip_id, start_date=start, end_date=end, **kwargs)


@pytest.fixture
def trip_a() -> Trip:
    """Jan 1-5, 10 travelers, contract unsigned."""
    return make_trip("A", date(2024, 1, 1), date(2024, 1, 5), total_travelers=10, contract_signed=False)


@pytest.fixture
def trip_b() -> Trip:
    """Jan 10-12, 5 travelers, contract signed."""
    return make_trip("B", date(2024, 1, 10), date(2024, 1, 12), total_travelers=5, contract_signed=True)


@pytest.fixture
def sample_action_items() -> list[ActionItem]:
    """Mixed priorities with and without due dates."""
    return [
        ActionItem(id=1, title="Collect roster", priority="low"),
        ActionItem(id=2, title="Sign contract", priority="urgent"),
        ActionItem(id=3, title="Pay deposit", priority="urgent", due_date=date(2024, 1, 5)),
        ActionItem(id=4, title="Book hotel", priority="urgent", due_date=date(2024, 1, 2)),
    ]


@pytest.fixture
def sample_trip_record() -> dict[str, Any]:
    """Trip record as returned by the data API."""
    return {
        "id": 17,
        "schoolName": "Lincoln High School",
        "groupName": "Marching Band",
        "location": "Orlando, FL",
        "startDate": "2024-03-04",
        "endDate": "2024-03-08",
        "totalTravelers": 62,
        "contractSigned": False,
        "status": "confirmed",
        "createdAt": "2024-02-10T15:30:00Z",
        "totalBuses": 2,
    }


@pytest.fixture
def sample_action_item_record() -> dict[str, Any]:
    """Action item record as returned by the data API."""
    return {
        "id": 31,
        "groupId": 17,
        "title": "Contract signature",
        "description": "Director signature outstanding",
        "dueDate": "2024-03-01",
        "priority": "urgent",
        "status": "pending",
    }


@pytest.fixture
def now() -> datetime:
    """Mid-afternoon on Jan 3 2024 (UTC)."""
    return datetime(2024, 1, 3, 15, 45, tzinfo=timezone.utc)
