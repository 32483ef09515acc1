"""Aggregation engine for dashboard statistics, calendar grids and action items"""

from .action_items import count_pending, is_overdue, rank_action_items, top_action_items
from .calendar_grid import build_month_grid
from .matcher import trip_occupies_date, trips_for_date
from .stats import compute_stats
from .trip_statistics import compute_trip_statistics

__all__ = [
    "build_month_grid",
    "trip_occupies_date",
    "trips_for_date",
    "compute_stats",
    "rank_action_items",
    "top_action_items",
    "count_pending",
    "is_overdue",
    "compute_trip_statistics",
]
