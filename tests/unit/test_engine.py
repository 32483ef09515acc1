"""Unit tests for the dashboard engine."""

from datetime import date, datetime, timezone
from pathlib import Path
from unittest.mock import Mock

import pytest

from conftest import make_trip
from tripdash_app.aggregation.action_items import top_action_items
from tripdash_app.data.models import ActionItem
from tripdash_app.engine import DashboardEngine
from tripdash_app.errors import ConfigurationError

NOW = datetime(2024, 3, 6, 14, 0, tzinfo=timezone.utc)


@pytest.fixture
def engine(tmp_path: Path) -> DashboardEngine:
    return DashboardEngine(config_dir=tmp_path)


@pytest.fixture
def trips():
    return [
        make_trip(1, date(2024, 3, 4), date(2024, 3, 8), total_travelers=62, contract_signed=True,
                  created_at=datetime(2024, 2, 10, tzinfo=timezone.utc)),
        make_trip(2, date(2024, 3, 12), date(2024, 3, 14), total_travelers=38,
                  location="Washington, DC", created_at=datetime(2024, 2, 20, tzinfo=timezone.utc)),
        make_trip(3, date(2024, 3, 28), date(2024, 4, 2)),
        make_trip(4, date(2024, 4, 10), date(2024, 4, 12)),
        make_trip(5, date(2024, 5, 1), date(2024, 5, 3)),
        make_trip(6, date(2024, 6, 1), date(2024, 6, 3)),
    ]


class TestEngineInitialization:
    """Test configuration handling at construction."""

    def test_defaults(self, engine: DashboardEngine) -> None:
        assert engine.config.calendar.max_trips_per_cell == 3
        assert engine.normalizer is not None

    def test_overrides(self, tmp_path: Path) -> None:
        engine = DashboardEngine(config_dir=tmp_path, overrides={"upcoming": {"display_limit": 2}})
        assert engine.config.upcoming.display_limit == 2

    def test_invalid_configuration_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            DashboardEngine(config_dir=tmp_path, overrides={"calendar": {"first_weekday": 9}})

        error = exc_info.value
        assert error.recoverable is False
        assert [e.field for e in error.errors] == ["first_weekday"]

    def test_organization_config(self, tmp_path: Path) -> None:
        (tmp_path / "organizations.yaml").write_text(
            "organizations:\n  eastside:\n    action_items:\n      display_limit: 1\n"
        )
        engine = DashboardEngine(config_dir=tmp_path, organization_id="eastside")
        assert engine.config.action_items.display_limit == 1

    @pytest.mark.parametrize("overrides", [
        {"calendar": None},
        {"contracts": 5},
        {"statistics": "x"},
    ])
    def test_non_mapping_section_raises_configuration_error(self, tmp_path: Path, overrides) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            DashboardEngine(config_dir=tmp_path, overrides=overrides)

        assert [e.field for e in exc_info.value.errors] == list(overrides)

    @pytest.mark.parametrize("content", [
        "organizations:\n",
        "organizations:\n  eastside:\n",
    ])
    def test_empty_organization_entries_use_defaults(self, tmp_path: Path, content: str) -> None:
        (tmp_path / "organizations.yaml").write_text(content)
        engine = DashboardEngine(config_dir=tmp_path, organization_id="eastside")
        assert engine.config.action_items.display_limit == 4

    @pytest.mark.parametrize("content", [
        "organizations:\n  - eastside\n",
        "organizations:\n  eastside: 5\n",
        "- organizations\n",
    ])
    def test_malformed_organizations_file_raises_configuration_error(
        self, tmp_path: Path, content: str
    ) -> None:
        (tmp_path / "organizations.yaml").write_text(content)
        with pytest.raises(ConfigurationError):
            DashboardEngine(config_dir=tmp_path, organization_id="eastside")


class TestBuildSnapshot:
    """Test snapshot assembly."""

    def test_snapshot_contents(self, engine: DashboardEngine, trips, sample_action_items) -> None:
        snapshot = engine.build_snapshot(trips, sample_action_items, NOW)

        assert snapshot.generated_for == date(2024, 3, 6)
        assert [t.id for t in snapshot.stats.active_trips] == [1]
        assert snapshot.stats.total_travelers == 100
        assert [t.id for t in snapshot.upcoming_trips] == [2, 3, 4, 5]
        assert [item.id for item in snapshot.ranked_action_items] == [4, 3, 2, 1]
        assert [item.id for item in snapshot.top_action_items] == [4, 3, 2, 1]
        assert snapshot.pending_action_count == 4
        assert snapshot.trip_statistics.trip_count == 2
        assert snapshot.rejected_record_count == 0

    def test_calendar_defaults_to_current_month(self, engine: DashboardEngine, trips) -> None:
        snapshot = engine.build_snapshot(trips, [], NOW)

        assert (snapshot.calendar.year, snapshot.calendar.month) == (2024, 3)
        today_cells = [cell for cell in snapshot.calendar.cells if cell.is_today]
        assert [cell.date for cell in today_cells] == [date(2024, 3, 6)]
        assert [t.id for t in today_cells[0].trips] == [1]

    def test_reference_date(self, engine: DashboardEngine, trips) -> None:
        snapshot = engine.build_snapshot(trips, [], NOW, reference_date=date(2024, 4, 20))

        assert (snapshot.calendar.year, snapshot.calendar.month) == (2024, 4)
        assert not any(cell.is_today for cell in snapshot.calendar.cells)

    def test_display_limits(self, tmp_path: Path, trips, sample_action_items) -> None:
        engine = DashboardEngine(
            config_dir=tmp_path,
            overrides={"action_items": {"display_limit": 2}, "upcoming": {"display_limit": 1}},
        )
        snapshot = engine.build_snapshot(trips, sample_action_items, NOW)

        assert [item.id for item in snapshot.top_action_items] == [4, 3]
        assert len(snapshot.ranked_action_items) == 4
        assert [t.id for t in snapshot.upcoming_trips] == [2]

    def test_top_items_match_ranking_helper(self, tmp_path: Path, sample_action_items) -> None:
        engine = DashboardEngine(config_dir=tmp_path, overrides={"action_items": {"display_limit": 3}})
        snapshot = engine.build_snapshot([], sample_action_items, NOW)

        assert list(snapshot.top_action_items) == top_action_items(sample_action_items, 3)

    def test_urgency_window_from_config(self, tmp_path: Path, trips) -> None:
        default_engine = DashboardEngine(config_dir=tmp_path)
        wide_engine = DashboardEngine(config_dir=tmp_path, overrides={"contracts": {"urgency_window_days": 30}})

        default_urgent = default_engine.build_snapshot(trips, [], NOW).stats.urgent_pending_contracts
        wide_urgent = wide_engine.build_snapshot(trips, [], NOW).stats.urgent_pending_contracts

        assert [t.id for t in default_urgent] == [2]
        assert [t.id for t in wide_urgent] == [2, 3]

    def test_empty_inputs(self, engine: DashboardEngine) -> None:
        snapshot = engine.build_snapshot([], [], NOW)

        assert snapshot.stats.active_trip_pct == 0
        assert snapshot.top_action_items == ()
        assert snapshot.pending_action_count == 0


class TestBuildSnapshotFromRecords:
    """Test the record-based entry point."""

    def test_valid_records(self, engine: DashboardEngine, sample_trip_record, sample_action_item_record) -> None:
        snapshot = engine.build_snapshot_from_records([sample_trip_record], [sample_action_item_record], NOW)

        assert [t.id for t in snapshot.stats.active_trips] == [17]
        assert [item.id for item in snapshot.ranked_action_items] == [31]
        assert snapshot.rejected_record_count == 0

    def test_rejected_records_are_logged_and_skipped(self, engine: DashboardEngine, sample_trip_record) -> None:
        engine.logger = Mock()
        bad_trip = dict(sample_trip_record, id=18, startDate="2024-03-09")
        bad_item = {"title": "No id"}

        snapshot = engine.build_snapshot_from_records([sample_trip_record, bad_trip], [bad_item], NOW)

        assert snapshot.stats.trip_count == 1
        assert snapshot.rejected_record_count == 2

        bind_calls = [call.kwargs for call in engine.logger.bind.call_args_list if "record_kind" in call.kwargs]
        assert [(c["record_kind"], c["record_id"]) for c in bind_calls] == [("trip", 18), ("action_item", None)]

    def test_priority_passthrough(self, engine: DashboardEngine) -> None:
        records = [
            {"id": 1, "title": "a", "priority": "mystery"},
            {"id": 2, "title": "b", "priority": "high"},
        ]
        snapshot = engine.build_snapshot_from_records([], records, NOW)
        assert [item.id for item in snapshot.ranked_action_items] == [2, 1]
        assert snapshot.rejected_record_count == 0

    def test_ranking_ignores_status(self, engine: DashboardEngine) -> None:
        items = [
            ActionItem(id=1, priority="low", status="pending"),
            ActionItem(id=2, priority="urgent", status="done"),
        ]
        snapshot = engine.build_snapshot([], items, NOW)
        assert [item.id for item in snapshot.ranked_action_items] == [2, 1]
        assert snapshot.pending_action_count == 1
