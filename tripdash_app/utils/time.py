"""
Calendar date utilities for trip and action item comparisons.

All trip comparisons are date-only: an instant supplied by the caller is
reduced to its calendar date before it is compared with a trip's start or
end date, so a trip ending today is still running at 23:59.
"""

import calendar
import math
from datetime import date, datetime, timedelta
from typing import Union

from ..errors import MalformedRecordError

DateLike = Union[date, datetime]


def as_calendar_date(value: DateLike) -> date:
    """
    Reduce a date or datetime to its calendar date.

    Args:
        value: Date or datetime (timezone-aware values keep their own offset)

    Returns:
        The calendar date component
    """
    # datetime subclasses date, so it has to be checked first
    if isinstance(value, datetime):
        return value.date()
    return value


def parse_calendar_date(value: object, field_name: str = "date") -> date:
    """
    Parse an inbound record value into a calendar date.

    Args:
        value: ISO 8601 string, date or datetime
        field_name: Field name for error reporting

    Returns:
        Parsed calendar date

    Raises:
        MalformedRecordError: If the value cannot be interpreted as a date
    """
    if isinstance(value, date):
        return as_calendar_date(value)

    if isinstance(value, str):
        text = value.strip()
        try:
            if len(text) == 10:
                return date.fromisoformat(text)
            return as_calendar_date(datetime.fromisoformat(text.replace("Z", "+00:00")))
        except ValueError as e:
            raise MalformedRecordError(
                f"Invalid {field_name}: {e}",
                raw_data=value,
                expected_format="YYYY-MM-DD",
            ) from e

    raise MalformedRecordError(
        f"Invalid {field_name}: expected date string, got {type(value).__name__}",
        raw_data=repr(value),
        expected_format="YYYY-MM-DD",
    )


def parse_timestamp(value: object, field_name: str = "timestamp") -> datetime:
    """
    Parse an inbound record value into a datetime.

    Raises:
        MalformedRecordError: If the value cannot be interpreted as a timestamp
    """
    if isinstance(value, datetime):
        return value

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)

    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError as e:
            raise MalformedRecordError(
                f"Invalid {field_name}: {e}",
                raw_data=value,
                expected_format="ISO 8601",
            ) from e

    raise MalformedRecordError(
        f"Invalid {field_name}: expected timestamp string, got {type(value).__name__}",
        raw_data=repr(value),
        expected_format="ISO 8601",
    )


def month_bounds(reference: DateLike) -> tuple[date, date]:
    """Return the first and last calendar date of the month containing reference."""
    day = as_calendar_date(reference)
    days_in_month = calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=days_in_month)


def shift_month(reference: DateLike, months: int) -> date:
    """
    Move a reference date by whole months, clamping the day of month.

    Used for previous/next month navigation of the calendar view.
    """
    day = as_calendar_date(reference)
    month_index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(month_index, 12)
    month += 1
    return date(year, month, min(day.day, calendar.monthrange(year, month)[1]))


def add_days(reference: DateLike, days: int) -> date:
    """Calendar date `days` after reference."""
    return as_calendar_date(reference) + timedelta(days=days)


def inclusive_day_count(start: date, end: date) -> int:
    """Number of calendar days covered by an inclusive date range."""
    return (end - start).days + 1


def percentage_of(part: int, whole: int) -> int:
    """
    Whole-number percentage of part in whole, rounding halves up.

    The denominator is floored at 1 so an empty collection yields 0.
    """
    return math.floor(part * 100 / max(whole, 1) + 0.5)


def format_calendar_date(day: date) -> str:
    """Format a calendar date for logs and serialized snapshots."""
    return day.isoformat()
