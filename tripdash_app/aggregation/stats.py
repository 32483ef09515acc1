"""Dashboard summary statistics"""

from collections.abc import Sequence

from ..config.defaults import URGENT_CONTRACT_WINDOW_DAYS
from ..data.models import Trip
from ..logging.config import get_aggregation_logger
from ..models.dashboard import AggregateStats
from ..utils.time import DateLike, add_days, as_calendar_date, format_calendar_date
from .matcher import trip_occupies_date

logger = get_aggregation_logger(__name__)


def compute_stats(
    trips: Sequence[Trip],
    now: DateLike,
    urgency_window_days: int = URGENT_CONTRACT_WINDOW_DAYS,
) -> AggregateStats:
    """
    Compute the dashboard summary figures

    `now` is reduced to its calendar date, so a trip is active on both its
    first and last day whatever the time of day.

    - active trips: start_date <= today <= end_date
    - total travelers: sum of traveler counts, missing counts as 0
    - upcoming departures: start_date > today, ascending by start date
    - pending contracts: contract not signed
    - urgent pending contracts: pending and start_date <= today + window

    Args:
        trips: Trip snapshots, never modified
        now: Current instant supplied by the caller
        urgency_window_days: Lookahead for urgent pending contracts

    Returns:
        AggregateStats for this collection and instant
    """
    today = as_calendar_date(now)
    urgency_cutoff = add_days(today, urgency_window_days)

    active = []
    upcoming = []
    pending = []
    urgent = []
    total_travelers = 0

    for trip in trips:
        total_travelers += trip.traveler_count

        if trip_occupies_date(trip, today):
            active.append(trip)

        if as_calendar_date(trip.start_date) > today:
            upcoming.append(trip)

        if not trip.contract_signed:
            pending.append(trip)
            if as_calendar_date(trip.start_date) <= urgency_cutoff:
                urgent.append(trip)

    # sorted() is stable, ties keep input order
    upcoming = sorted(upcoming, key=lambda trip: as_calendar_date(trip.start_date))

    stats = AggregateStats(
        active_trips=tuple(active),
        total_travelers=total_travelers,
        upcoming_departures=tuple(upcoming),
        pending_contracts=tuple(pending),
        urgent_pending_contracts=tuple(urgent),
        trip_count=len(trips),
    )

    logger.debug(
        "stats_computed",
        today=format_calendar_date(today),
        trip_count=stats.trip_count,
        active=len(stats.active_trips),
        upcoming=len(stats.upcoming_departures),
        pending_contracts=len(stats.pending_contracts),
        urgent_contracts=len(stats.urgent_pending_contracts),
    )
    return stats
