"""
Logging configuration and utilities for the TripDash engine.
"""
from .config import configure_logging, get_aggregation_logger, get_logger

__all__ = ["configure_logging", "get_logger", "get_aggregation_logger"]
