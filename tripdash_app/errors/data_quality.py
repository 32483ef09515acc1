"""
Data quality error classifications for trip and action item records.

These exceptions describe records that violate the inbound contract and
are rejected at the normalization boundary before any aggregation runs.
"""

from datetime import date
from typing import Any, Optional


class DataQualityError(Exception):
    """Base class for record issues that can be handled by skipping the record."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MissingFieldError(DataQualityError):
    """A required record field is absent or empty."""

    def __init__(self, message: str, field_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field_name = field_name


class MalformedRecordError(DataQualityError):
    """Field exists but cannot be interpreted as the expected type."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format


class InvalidDateRangeError(DataQualityError):
    """Trip start date falls after its end date."""

    def __init__(self, message: str, start_date: Optional[date] = None,
                 end_date: Optional[date] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.start_date = start_date
        self.end_date = end_date
