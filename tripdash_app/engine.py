"""
Main dashboard engine coordinator.

Loads configuration and runs each aggregation component against one set of
trip and action item snapshots, producing the view-models the dashboard
page renders.
"""

from collections.abc import Sequence
from dataclasses import replace
from datetime import date, datetime
from pathlib import Path
from typing import Any, Optional, Union

import structlog

from .aggregation.action_items import count_pending, rank_action_items, top_action_items
from .aggregation.calendar_grid import build_month_grid
from .aggregation.stats import compute_stats
from .aggregation.trip_statistics import compute_trip_statistics
from .config.loader import ConfigLoader, build_config
from .config.validation import ConfigValidator
from .data.models import ActionItem, Trip
from .data.normalizer import RecordNormalizer
from .errors import ConfigurationError
from .logging.config import log_record_rejection
from .models.dashboard import CalendarMonth, DashboardSnapshot
from .utils.time import as_calendar_date, format_calendar_date

logger = structlog.get_logger(__name__)


class DashboardEngine:
    """
    Coordinator for the trip dashboard derivations.

    Manages the pipeline:
    Raw records → Normalization → Stats / Calendar / Action items / Statistics

    The engine holds configuration only; every snapshot is computed from
    the arguments of the call.
    """

    def __init__(
        self,
        config_dir: Optional[Union[str, Path]] = None,
        organization_id: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize the dashboard engine.

        Raises:
            ConfigurationError: If the merged configuration is invalid
        """
        self.logger = logger.bind(organization_id=organization_id)

        self.config_loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
        merged = self.config_loader.merge_config(organization_id, overrides)

        validation_errors = ConfigValidator.validate_config(merged)
        if validation_errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in validation_errors]
            self.logger.error("Configuration validation failed", errors=error_msgs)
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(error_msgs)}",
                errors=validation_errors,
                organization_id=organization_id,
            )

        self.config = build_config(merged)
        self.normalizer = RecordNormalizer()

        self.logger.info("Dashboard engine initialized")

    def build_snapshot(
        self,
        trips: Sequence[Trip],
        action_items: Sequence[ActionItem],
        now: datetime,
        reference_date: Optional[date] = None,
    ) -> DashboardSnapshot:
        """
        Derive every dashboard view-model for one instant.

        Args:
            trips: Trip snapshots
            action_items: Action item snapshots
            now: Current instant supplied by the caller
            reference_date: Any date in the month to show, defaults to now

        Returns:
            DashboardSnapshot
        """
        today = as_calendar_date(now)
        reference = as_calendar_date(reference_date) if reference_date is not None else today

        stats = compute_stats(
            trips, now,
            urgency_window_days=self.config.contracts.urgency_window_days,
        )

        weeks = build_month_grid(
            reference, trips,
            max_trips_per_cell=self.config.calendar.max_trips_per_cell,
            first_weekday=self.config.calendar.first_weekday,
            today=today,
        )

        ranked = rank_action_items(action_items)

        trip_statistics = compute_trip_statistics(
            trips, now,
            period_days=self.config.statistics.period_days,
            top_destinations=self.config.statistics.top_destinations,
        )

        snapshot = DashboardSnapshot(
            generated_for=today,
            stats=stats,
            calendar=CalendarMonth(year=reference.year, month=reference.month, weeks=weeks),
            ranked_action_items=tuple(ranked),
            top_action_items=tuple(top_action_items(ranked, self.config.action_items.display_limit)),
            pending_action_count=count_pending(action_items),
            upcoming_trips=stats.upcoming_departures[:self.config.upcoming.display_limit],
            trip_statistics=trip_statistics,
        )

        self.logger.info(
            "Dashboard snapshot built",
            today=format_calendar_date(today),
            trip_count=stats.trip_count,
            action_item_count=len(action_items),
        )
        return snapshot

    def build_snapshot_from_records(
        self,
        trip_records: list[dict[str, Any]],
        action_item_records: list[dict[str, Any]],
        now: datetime,
        reference_date: Optional[date] = None,
    ) -> DashboardSnapshot:
        """
        Normalize raw API records, then build a snapshot.

        Records that break the inbound contract are logged and skipped; the
        snapshot reports how many were dropped.
        """
        trip_batch = self.normalizer.normalize_trips(trip_records)
        item_batch = self.normalizer.normalize_action_items(action_item_records)

        for record_kind, batch in (("trip", trip_batch), ("action_item", item_batch)):
            for record, error in batch.rejected:
                log_record_rejection(
                    self.logger,
                    record_kind=record_kind,
                    record_id=record.get("id"),
                    reason=str(error),
                    context={"error_type": type(error).__name__},
                )

        snapshot = self.build_snapshot(trip_batch.accepted, item_batch.accepted, now, reference_date)
        rejected = trip_batch.rejected_count + item_batch.rejected_count
        if not rejected:
            return snapshot

        return replace(snapshot, rejected_record_count=rejected)
