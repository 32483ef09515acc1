"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_int(value: Any) -> bool:
    # bool is an int subclass but never a valid count
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_calendar_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate month grid parameters."""
        errors = []

        if "max_trips_per_cell" in params:
            value = params["max_trips_per_cell"]
            if not _is_int(value) or value < 0:
                errors.append(ValidationError(
                    field="max_trips_per_cell",
                    message="Must be a non-negative integer",
                    value=value
                ))

        if "first_weekday" in params:
            value = params["first_weekday"]
            if not _is_int(value) or not 0 <= value <= 6:
                errors.append(ValidationError(
                    field="first_weekday",
                    message="Must be an integer between 0 (Monday) and 6 (Sunday)",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_contract_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate contract tracking parameters."""
        errors = []

        if "urgency_window_days" in params:
            value = params["urgency_window_days"]
            if not _is_int(value) or value < 0:
                errors.append(ValidationError(
                    field="urgency_window_days",
                    message="Must be a non-negative integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_display_limit(params: dict[str, Any]) -> list[ValidationError]:
        """Validate a panel display limit."""
        errors = []

        if "display_limit" in params:
            value = params["display_limit"]
            if not _is_int(value) or value <= 0:
                errors.append(ValidationError(
                    field="display_limit",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_statistics_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate trip statistics parameters."""
        errors = []

        if "period_days" in params:
            value = params["period_days"]
            if not _is_int(value) or value <= 0:
                errors.append(ValidationError(
                    field="period_days",
                    message="Must be a positive integer",
                    value=value
                ))

        if "top_destinations" in params:
            value = params["top_destinations"]
            if not _is_int(value) or value <= 0:
                errors.append(ValidationError(
                    field="top_destinations",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        section_validators = {
            "calendar": ConfigValidator.validate_calendar_params,
            "contracts": ConfigValidator.validate_contract_params,
            "action_items": ConfigValidator.validate_display_limit,
            "upcoming": ConfigValidator.validate_display_limit,
            "statistics": ConfigValidator.validate_statistics_params,
        }

        for section, validate in section_validators.items():
            if section not in config:
                continue
            params = config[section]
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping of parameters",
                    value=params
                ))
                continue
            errors.extend(validate(params))

        return errors
