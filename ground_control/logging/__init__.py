"""Structured logging for the rover ground control data model.

Usage:
    from ground_control.logging import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__)
    logger.info("Mission refreshed", extra={"mission_id": 7})
"""

from ground_control.logging.config import LoggingConfig
from ground_control.logging.context import (
    clear_context,
    generate_correlation_id,
    get_correlation_id,
    get_extra_context,
    set_extra_context,
)
from ground_control.logging.formatters import HumanFormatter, JSONFormatter
from ground_control.logging.logger import get_logger, setup_logging

__all__ = [
    "HumanFormatter",
    "JSONFormatter",
    "LoggingConfig",
    "clear_context",
    "generate_correlation_id",
    "get_correlation_id",
    "get_extra_context",
    "get_logger",
    "set_extra_context",
    "setup_logging",
]
