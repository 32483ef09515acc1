"""
Record normalization for converting raw API records to trip snapshots.

This module is the inbound boundary of the engine: it maps the data API's
camelCase JSON records (snake_case keys are accepted too) onto immutable
Trip and ActionItem snapshots and rejects records that break the contract,
such as a trip whose start date falls after its end date.
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

import orjson

from ..errors import (
    DataQualityError,
    InvalidDateRangeError,
    MalformedRecordError,
    MissingFieldError,
)
from ..logging.config import get_logger
from ..utils.time import parse_calendar_date, parse_timestamp
from .models import ActionItem, Trip

logger = get_logger(__name__)

# snake_case field -> camelCase key used by the data API
_TRIP_KEYS = {
    "id": "id",
    "school_name": "schoolName",
    "group_name": "groupName",
    "location": "location",
    "start_date": "startDate",
    "end_date": "endDate",
    "total_travelers": "totalTravelers",
    "contract_signed": "contractSigned",
    "status": "status",
    "created_at": "createdAt",
    "total_buses": "totalBuses",
}

_ACTION_ITEM_KEYS = {
    "id": "id",
    "group_id": "groupId",
    "title": "title",
    "description": "description",
    "due_date": "dueDate",
    "priority": "priority",
    "status": "status",
}


@dataclass
class NormalizationBatch:
    """Result of normalizing a collection of raw records."""
    accepted: list = field(default_factory=list)
    # (raw record, error) pairs in input order
    rejected: list[tuple[dict[str, Any], DataQualityError]] = field(default_factory=list)

    @property
    def rejected_count(self) -> int:
        return len(self.rejected)


def _get(record: dict[str, Any], name: str, keys: dict[str, str]) -> Any:
    if name in record:
        return record[name]
    return record.get(keys[name])


def _optional_count(value: Any, field_name: str) -> Optional[int]:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise MalformedRecordError(
            f"Invalid {field_name}: expected integer, got bool",
            raw_data=repr(value),
            expected_format="non-negative integer",
        )
    if isinstance(value, float) and not value.is_integer():
        raise MalformedRecordError(
            f"Invalid {field_name}: expected whole number, got {value!r}",
            raw_data=repr(value),
            expected_format="non-negative integer",
        )
    try:
        count = int(value)
    except (ValueError, TypeError) as e:
        raise MalformedRecordError(
            f"Invalid {field_name}: {e}",
            raw_data=repr(value),
            expected_format="non-negative integer",
        ) from e
    if count < 0:
        raise MalformedRecordError(
            f"Invalid {field_name}: must not be negative",
            raw_data=repr(value),
            expected_format="non-negative integer",
        )
    return count


def _flag(value: Any, field_name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise MalformedRecordError(
            f"Invalid {field_name}: expected boolean, got {type(value).__name__}",
            raw_data=repr(value),
            expected_format="boolean",
        )
    return value


def load_records(raw_data: Union[str, bytes]) -> list[dict[str, Any]]:
    """
    Decode a JSON array of records as returned by the data API.

    Raises:
        MalformedRecordError: If the payload is not a JSON array of objects
    """
    try:
        payload = orjson.loads(raw_data)
    except orjson.JSONDecodeError as e:
        raise MalformedRecordError(
            f"Invalid JSON: {e}",
            raw_data=str(raw_data)[:100],
            expected_format="JSON array",
        ) from e

    if not isinstance(payload, list) or not all(isinstance(item, dict) for item in payload):
        raise MalformedRecordError(
            "Expected a JSON array of objects",
            raw_data=str(raw_data)[:100],
            expected_format="JSON array",
        )

    return payload


class RecordNormalizer:
    """
    Record normalization pipeline.

    Converts raw dict records into Trip and ActionItem snapshots. Single
    record methods raise DataQualityError subclasses; batch methods collect
    rejections instead so one bad record never blocks the rest.
    """

    def __init__(self) -> None:
        self.logger = logger

    def normalize_trip(self, record: dict[str, Any]) -> Trip:
        """
        Normalize one raw trip record.

        Raises:
            MissingFieldError: If id, startDate or endDate is absent
            MalformedRecordError: If a field has the wrong type
            InvalidDateRangeError: If startDate falls after endDate
        """
        trip_id = _get(record, "id", _TRIP_KEYS)
        if trip_id is None:
            raise MissingFieldError("Missing required field: id", field_name="id")

        for name in ("start_date", "end_date"):
            if _get(record, name, _TRIP_KEYS) in (None, ""):
                raise MissingFieldError(
                    f"Missing required field: {_TRIP_KEYS[name]}",
                    field_name=name,
                    context={"record_id": trip_id},
                )

        start_date = parse_calendar_date(_get(record, "start_date", _TRIP_KEYS), "startDate")
        end_date = parse_calendar_date(_get(record, "end_date", _TRIP_KEYS), "endDate")
        if start_date > end_date:
            raise InvalidDateRangeError(
                f"Trip {trip_id} starts {start_date} after it ends {end_date}",
                start_date=start_date,
                end_date=end_date,
                context={"record_id": trip_id},
            )

        created_at = _get(record, "created_at", _TRIP_KEYS)

        return Trip(
            id=trip_id,
            start_date=start_date,
            end_date=end_date,
            school_name=_get(record, "school_name", _TRIP_KEYS) or "",
            group_name=_get(record, "group_name", _TRIP_KEYS) or "",
            location=_get(record, "location", _TRIP_KEYS) or "",
            total_travelers=_optional_count(_get(record, "total_travelers", _TRIP_KEYS), "totalTravelers"),
            contract_signed=_flag(_get(record, "contract_signed", _TRIP_KEYS), "contractSigned"),
            status=_get(record, "status", _TRIP_KEYS),
            created_at=parse_timestamp(created_at, "createdAt") if created_at else None,
            total_buses=_optional_count(_get(record, "total_buses", _TRIP_KEYS), "totalBuses"),
        )

    def normalize_action_item(self, record: dict[str, Any]) -> ActionItem:
        """
        Normalize one raw action item record.

        Priority and status are passed through untouched; an unrecognized
        priority only affects ranking, never acceptance.

        Raises:
            MissingFieldError: If id is absent
            MalformedRecordError: If dueDate is not a date
        """
        item_id = _get(record, "id", _ACTION_ITEM_KEYS)
        if item_id is None:
            raise MissingFieldError("Missing required field: id", field_name="id")

        due_date = _get(record, "due_date", _ACTION_ITEM_KEYS)

        return ActionItem(
            id=item_id,
            title=_get(record, "title", _ACTION_ITEM_KEYS) or "",
            priority=_get(record, "priority", _ACTION_ITEM_KEYS),
            due_date=parse_calendar_date(due_date, "dueDate") if due_date else None,
            status=_get(record, "status", _ACTION_ITEM_KEYS),
            description=_get(record, "description", _ACTION_ITEM_KEYS),
            group_id=_get(record, "group_id", _ACTION_ITEM_KEYS),
        )

    def normalize_trips(self, records: list[dict[str, Any]]) -> NormalizationBatch:
        """Normalize trip records, collecting rejections."""
        return self._normalize_batch(records, self.normalize_trip)

    def normalize_action_items(self, records: list[dict[str, Any]]) -> NormalizationBatch:
        """Normalize action item records, collecting rejections."""
        return self._normalize_batch(records, self.normalize_action_item)

    def _normalize_batch(self, records: list[dict[str, Any]], normalize) -> NormalizationBatch:
        batch = NormalizationBatch()
        for record in records:
            if not isinstance(record, dict):
                batch.rejected.append((
                    {"raw": repr(record)[:100]},
                    MalformedRecordError("Record is not an object", raw_data=repr(record)[:100]),
                ))
                continue
            try:
                batch.accepted.append(normalize(record))
            except DataQualityError as e:
                batch.rejected.append((record, e))

        self.logger.debug(
            "records_normalized",
            accepted=len(batch.accepted),
            rejected=batch.rejected_count,
        )
        return batch
