"""
Centralized logging configuration for the TripDash engine.

This module provides standardized logging configuration using structlog
for all components. All logging throughout the package should go through
this configuration to keep output structured and consistent.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_aggregation_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for the aggregation components.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger carrying the aggregation subsystem context
    """
    # Stays a lazy proxy until first use
    return structlog.get_logger(name, subsystem="aggregation")


def log_record_rejection(
    logger: FilteringBoundLogger,
    record_kind: str,
    record_id: Any,
    reason: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a rejected inbound record with standardized format.

    Args:
        logger: Structlog logger instance
        record_kind: "trip" or "action_item"
        record_id: Identifier of the rejected record, if it had one
        reason: Why the record was rejected
        context: Additional context data
    """
    bound_logger = logger.bind(
        record_kind=record_kind,
        record_id=record_id,
        reason=reason,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.warning("record_rejected")
