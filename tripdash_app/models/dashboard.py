"""Derived view-models for the dashboard"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from ..data.models import ActionItem, Trip
from ..utils.time import percentage_of


@dataclass(frozen=True)
class CalendarCell:
    """One day's slot in a month grid"""
    date: date
    in_current_month: bool
    trips: tuple[Trip, ...] = ()       # Truncated to the per-cell limit
    overflow_count: int = 0            # Matches beyond the limit
    is_today: bool = False

    @property
    def total_trips(self) -> int:
        """Number of trips on this day before truncation"""
        return len(self.trips) + self.overflow_count


@dataclass(frozen=True)
class CalendarMonth:
    """Month grid together with the month it displays"""
    year: int
    month: int
    weeks: list[list[CalendarCell]]

    @property
    def cells(self) -> list[CalendarCell]:
        return [cell for week in self.weeks for cell in week]


@dataclass(frozen=True)
class AggregateStats:
    """Dashboard summary figures for one trip collection and one instant"""
    active_trips: tuple[Trip, ...]
    total_travelers: int
    upcoming_departures: tuple[Trip, ...]   # Ascending by start date
    pending_contracts: tuple[Trip, ...]
    urgent_pending_contracts: tuple[Trip, ...]
    trip_count: int = 0

    @property
    def active_trip_pct(self) -> int:
        """Share of all trips that are currently running, 0-100"""
        return percentage_of(len(self.active_trips), self.trip_count)

    @property
    def next_departure(self) -> Optional[date]:
        """Start date of the earliest upcoming trip"""
        if not self.upcoming_departures:
            return None
        return self.upcoming_departures[0].start_date


@dataclass(frozen=True)
class DestinationCount:
    location: str
    count: int


@dataclass(frozen=True)
class TripLengthBucket:
    name: str
    count: int
    percentage: int


@dataclass(frozen=True)
class TripStatistics:
    """Breakdown of trips created within a look-back period"""
    period_days: int
    trip_count: int
    popular_destinations: tuple[DestinationCount, ...]
    trip_lengths: tuple[TripLengthBucket, ...]
    status_breakdown: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class DashboardSnapshot:
    """Everything the dashboard page renders, derived from one set of inputs"""
    generated_for: date
    stats: AggregateStats
    calendar: CalendarMonth
    ranked_action_items: tuple[ActionItem, ...]
    top_action_items: tuple[ActionItem, ...]
    pending_action_count: int
    upcoming_trips: tuple[Trip, ...]
    trip_statistics: TripStatistics
    rejected_record_count: int = 0
