"""
Logger Factory - Convenience wrapper for LoggingService.

Provides get_logger() and configure_logging() so callers do not need to
import LoggingService directly.

License: MIT
"""

from typing import Optional

import structlog

from tsdocs_core.config import settings
from tsdocs_core.logging_service import LoggingService


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a module/component-specific logger.

    Args:
        name: Logger name (typically module path or __name__)

    Returns:
        BoundLogger instance

    Raises:
        RuntimeError: If logging not configured yet (call configure_logging() first)
        ValueError: If name is empty or exceeds maximum length (200 chars)

    Example:
        ```python
        from tsdocs_core.utils import configure_logging, get_logger

        configure_logging()
        logger = get_logger(__name__)
        logger.info("extraction_started", file_path="index.ts")
        ```
    """
    return LoggingService.get_logger(name)


def configure_logging(level: Optional[str] = None, format: Optional[str] = None) -> None:
    """
    Configure structured logging infrastructure.

    Uses settings.log_level and settings.log_format for anything not
    passed explicitly. Call ONCE at application startup.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        format: Output format ("json" or "console").

    Raises:
        ValueError: If level or format is invalid
        RuntimeError: If called after logging already configured
    """
    if level is None:
        level = settings.log_level
    if format is None:
        format = settings.log_format

    LoggingService.configure_logging(level=level, format=format)
