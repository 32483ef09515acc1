"""Trip-to-date membership"""

from collections.abc import Iterable

from ..data.models import Trip
from ..utils.time import DateLike, as_calendar_date


def trip_occupies_date(trip: Trip, day: DateLike) -> bool:
    """
    Check whether a trip runs on a calendar date

    start_date <= day <= end_date, inclusive at both ends. Any time of day
    on `day` is dropped first so the last day of a trip still matches.

    Args:
        trip: Trip snapshot
        day: Calendar date or instant

    Returns:
        True if the trip spans the date
    """
    day = as_calendar_date(day)
    return as_calendar_date(trip.start_date) <= day <= as_calendar_date(trip.end_date)


def trips_for_date(trips: Iterable[Trip], day: DateLike) -> list[Trip]:
    """All trips running on a date, in input order"""
    day = as_calendar_date(day)
    return [trip for trip in trips if trip_occupies_date(trip, day)]
