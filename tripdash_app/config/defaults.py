"""Default configuration parameters for the dashboard engine."""

import calendar
from dataclasses import dataclass

# Lookahead for flagging unsigned contracts as urgent. Fixed at one week in
# the dashboard today; exposed as contracts.urgency_window_days.
URGENT_CONTRACT_WINDOW_DAYS = 7


@dataclass(frozen=True)
class CalendarParams:
    """Month grid parameters."""
    max_trips_per_cell: int = 3                      # Trips shown per day cell
    first_weekday: int = calendar.SUNDAY             # 0=Monday ... 6=Sunday


@dataclass(frozen=True)
class ContractParams:
    """Contract tracking parameters."""
    urgency_window_days: int = URGENT_CONTRACT_WINDOW_DAYS


@dataclass(frozen=True)
class ActionItemParams:
    """Action item panel parameters."""
    display_limit: int = 4


@dataclass(frozen=True)
class UpcomingParams:
    """Upcoming trips panel parameters."""
    display_limit: int = 4


@dataclass(frozen=True)
class StatisticsParams:
    """Trip statistics breakdown parameters."""
    period_days: int = 30                            # Look-back on created_at
    top_destinations: int = 5


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    calendar: CalendarParams
    contracts: ContractParams
    action_items: ActionItemParams
    upcoming: UpcomingParams
    statistics: StatisticsParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        calendar=CalendarParams(),
        contracts=ContractParams(),
        action_items=ActionItemParams(),
        upcoming=UpcomingParams(),
        statistics=StatisticsParams(),
    )
