"""
System failure error classifications.

These exceptions represent problems that cannot be fixed by skipping a
record, such as an invalid deployment configuration.
"""

from typing import Any, Optional


class SystemFailureError(Exception):
    """Base class for unrecoverable failures."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ConfigurationError(SystemFailureError):
    """Merged configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None,
                 organization_id: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
        self.organization_id = organization_id
