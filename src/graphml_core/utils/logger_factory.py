"""
Logger Factory - Convenience wrapper for LoggingService.

Provides simple get_logger() / configure_logging() functions so callers
do not need to import LoggingService directly.

Copyright (c) 2025 Goncharenko Anton aka alienxs2
License: MIT
"""

from typing import Optional

import structlog

from graphml_core.config import settings
from graphml_core.logging_service import LoggingService


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a module/component-specific logger.

    Args:
        name: Logger name (typically module path or __name__)

    Returns:
        Cached BoundLogger instance

    Raises:
        RuntimeError: If logging not configured yet (call configure_logging() first)
        ValueError: If name is empty or exceeds maximum length (200 chars)

    Example:
        ```python
        from graphml_core.utils import configure_logging, get_logger

        configure_logging()
        logger = get_logger(__name__)
        logger.info("graph_loaded", vertices=12)
        ```
    """
    return LoggingService.get_logger(name)


def configure_logging(level: Optional[str] = None, format: Optional[str] = None) -> None:
    """
    Configure structured logging infrastructure.

    Falls back to ``settings.log_level`` and ``settings.log_format`` when
    no explicit values are given.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Output format ("json" or "console")

    Raises:
        ValueError: If level or format is invalid
        RuntimeError: If called after logging already configured
    """
    if level is None:
        level = settings.log_level
    if format is None:
        format = settings.log_format

    LoggingService.configure_logging(level=level, format=format)
