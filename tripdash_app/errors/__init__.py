"""
Error classification for trip and action item processing.

This module provides the exception hierarchy used at the record boundary
and by the dashboard engine. Derivation code never raises these for
incomplete records; it degrades to documented defaults instead.
"""

from .data_quality import (
    DataQualityError,
    InvalidDateRangeError,
    MalformedRecordError,
    MissingFieldError,
)
from .system_failures import (
    ConfigurationError,
    SystemFailureError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MissingFieldError",
    "MalformedRecordError",
    "InvalidDateRangeError",
    # System Failures
    "SystemFailureError",
    "ConfigurationError",
]
