"""
TripDash App - Trip Aggregation & Calendar Scheduling Engine

Derives dashboard statistics, month-grid calendar views and prioritized
action item lists from trip and action item snapshots supplied by the
group travel administration dashboard.
"""

__version__ = "0.1.0"
__author__ = "TripDash Team"
