"""
Canonical data models for trip and action item snapshots.

This module defines immutable data structures for records handed to the
engine by the data layer. Raw status and priority values are kept as
received; the enums below only name the values the dashboard recognizes.
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Optional


class TripStatus(str, Enum):
    """Recognized trip lifecycle statuses."""
    ACTIVE = "active"
    CONFIRMED = "confirmed"
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    UNKNOWN = "unknown"

    @classmethod
    def from_raw(cls, value: Any) -> "TripStatus":
        """Map a raw status value to its bucket, UNKNOWN when unrecognized."""
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        return cls.UNKNOWN


class Priority(str, Enum):
    """Action item priority tiers, most pressing first."""
    URGENT = "urgent"
    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"

    @classmethod
    def from_raw(cls, value: Any) -> Optional["Priority"]:
        """Map a raw priority value to a tier, None when unrecognized."""
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return None
        return None


@dataclass(frozen=True)
class Trip:
    """A scheduled multi-day group trip."""
    id: Any
    start_date: date                         # Inclusive
    end_date: date                           # Inclusive, >= start_date
    school_name: str = ""
    group_name: str = ""
    location: str = ""
    total_travelers: Optional[int] = None    # Missing counts as 0
    contract_signed: bool = False
    status: Optional[str] = "pending"
    created_at: Optional[datetime] = None
    total_buses: Optional[int] = None

    @property
    def status_bucket(self) -> TripStatus:
        """Recognized status, or UNKNOWN."""
        return TripStatus.from_raw(self.status)

    @property
    def traveler_count(self) -> int:
        """Traveler count with missing values treated as 0."""
        return self.total_travelers or 0


@dataclass(frozen=True)
class ActionItem:
    """An outstanding task with a priority tier and optional due date."""
    id: Any
    title: str = ""
    priority: Any = "normal"
    due_date: Optional[date] = None
    status: Optional[str] = "pending"
    description: Optional[str] = None
    group_id: Optional[Any] = None

    @property
    def priority_tier(self) -> Optional[Priority]:
        """Recognized priority tier, or None."""
        return Priority.from_raw(self.priority)
