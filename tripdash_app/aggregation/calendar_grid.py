"""Month grid construction for the trip calendar"""

import calendar
from collections.abc import Sequence
from typing import Optional

from ..data.models import Trip
from ..logging.config import get_aggregation_logger
from ..models.dashboard import CalendarCell
from ..utils.time import DateLike, as_calendar_date, format_calendar_date, month_bounds
from .matcher import trips_for_date

logger = get_aggregation_logger(__name__)


def build_month_grid(
    reference_date: DateLike,
    trips: Sequence[Trip],
    max_trips_per_cell: int = 3,
    first_weekday: int = calendar.SUNDAY,
    today: Optional[DateLike] = None,
) -> list[list[CalendarCell]]:
    """
    Build the week rows for the month containing reference_date

    The first row starts on `first_weekday` and is padded with days from the
    preceding month; the last row is padded with days from the following
    month, so the grid always holds
    7 * ceil((days_in_month + leading_pad) / 7) cells.

    Args:
        reference_date: Any date in the month to display
        trips: Trip snapshots to place on the grid
        max_trips_per_cell: Trips kept per cell, the rest are counted
        first_weekday: Week start, 0=Monday ... 6=Sunday
        today: Optional date to flag with is_today

    Returns:
        Weeks in order, each a list of 7 CalendarCells
    """
    first_day, last_day = month_bounds(reference_date)
    today = as_calendar_date(today) if today is not None else None
    limit = max(max_trips_per_cell, 0)

    month_calendar = calendar.Calendar(firstweekday=first_weekday)
    weeks = []
    for week_dates in month_calendar.monthdatescalendar(first_day.year, first_day.month):
        week = []
        for day in week_dates:
            matches = trips_for_date(trips, day)
            week.append(CalendarCell(
                date=day,
                in_current_month=first_day <= day <= last_day,
                trips=tuple(matches[:limit]),
                overflow_count=max(len(matches) - limit, 0),
                is_today=day == today,
            ))
        weeks.append(week)

    logger.debug(
        "month_grid_built",
        month_start=format_calendar_date(first_day),
        weeks=len(weeks),
        trip_count=len(trips),
    )
    return weeks
