"""Trip statistics breakdown over a look-back period"""

from collections import Counter
from collections.abc import Sequence
from datetime import datetime, timedelta

from ..data.models import Trip, TripStatus
from ..logging.config import get_aggregation_logger
from ..models.dashboard import DestinationCount, TripLengthBucket, TripStatistics
from ..utils.time import as_calendar_date, inclusive_day_count, percentage_of

logger = get_aggregation_logger(__name__)

TRIP_LENGTH_BUCKETS = ("1 Day", "2-3 Days", "4-5 Days", "6+ Days")


def trip_length_bucket(trip: Trip) -> str:
    """Bucket name for a trip's inclusive length in days"""
    days = inclusive_day_count(as_calendar_date(trip.start_date), as_calendar_date(trip.end_date))
    if days <= 1:
        return "1 Day"
    if days <= 3:
        return "2-3 Days"
    if days <= 5:
        return "4-5 Days"
    return "6+ Days"


def _created_within(trip: Trip, cutoff: datetime) -> bool:
    if trip.created_at is None:
        return False
    created_at = trip.created_at
    # A naive side takes the other side's timezone
    if created_at.tzinfo is None and cutoff.tzinfo is not None:
        created_at = created_at.replace(tzinfo=cutoff.tzinfo)
    elif cutoff.tzinfo is None and created_at.tzinfo is not None:
        cutoff = cutoff.replace(tzinfo=created_at.tzinfo)
    return created_at >= cutoff


def compute_trip_statistics(
    trips: Sequence[Trip],
    now: datetime,
    period_days: int = 30,
    top_destinations: int = 5,
) -> TripStatistics:
    """
    Break down trips created in the last `period_days` days.

    Trips without a creation timestamp are left out of every figure.

    Args:
        trips: Trip snapshots
        now: Current instant supplied by the caller
        period_days: Look-back window on created_at
        top_destinations: Number of destinations to keep

    Returns:
        TripStatistics with destinations, length buckets and status counts
    """
    if not isinstance(now, datetime):
        now = datetime(now.year, now.month, now.day)
    cutoff = now - timedelta(days=period_days)
    recent = [trip for trip in trips if _created_within(trip, cutoff)]

    # most_common sorts stably, so equal counts keep first-seen order
    destinations = Counter(trip.location for trip in recent)
    popular = tuple(
        DestinationCount(location=location, count=count)
        for location, count in destinations.most_common(top_destinations)
    )

    lengths = Counter(trip_length_bucket(trip) for trip in recent)
    buckets = tuple(
        TripLengthBucket(
            name=name,
            count=lengths[name],
            percentage=percentage_of(lengths[name], len(recent)) if recent else 0,
        )
        for name in TRIP_LENGTH_BUCKETS
    )

    statuses = Counter(trip.status_bucket.value for trip in recent)
    status_breakdown = {status.value: statuses[status.value] for status in TripStatus}

    logger.debug(
        "trip_statistics_computed",
        period_days=period_days,
        considered=len(recent),
        excluded=len(trips) - len(recent),
    )
    return TripStatistics(
        period_days=period_days,
        trip_count=len(recent),
        popular_destinations=popular,
        trip_lengths=buckets,
        status_breakdown=status_breakdown,
    )
