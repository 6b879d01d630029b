"""
LoggingService - Centralized structured logging for tsdocs.

Provides consistent, context-enriched, machine-readable logging
across all modules using structlog.

License: MIT
"""

import logging
import sys
import traceback
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import structlog
from structlog.types import Processor


@dataclass
class LoggingConfig:
    """
    Configuration for LoggingService.

    Attributes:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format: Output format ("json" or "console" for dev)
        output_stream: Output destination (default: sys.stderr)
        sensitive_keys: Set of keys to sanitize (e.g., "password", "token")
    """

    level: str = "INFO"
    format: str = "json"  # "json" or "console"
    output_stream: Any = sys.stderr
    sensitive_keys: set[str] = field(default_factory=set)

    def __post_init__(self) -> None:
        if not self.sensitive_keys:
            self.sensitive_keys = {
                "password",
                "api_key",
                "token",
                "access_token",
                "secret",
                "authorization",
            }


class LoggingService:
    """
    Centralized structured logging service using structlog.

    Outputs JSON logs to stderr so that stdout stays free for extracted
    entries.

    Example:
        # Setup logging once at startup
        LoggingService.configure_logging(level="INFO", format="json")

        # Get logger for a module
        logger = LoggingService.get_logger("tsdocs.docs")
        logger.info("interface_extracted", name="UserProfile", members=3)
    """

    # Class-level state
    _configured: bool = False
    _log_level: str = "INFO"
    _config: Optional[LoggingConfig] = None
    _loggers: dict[str, structlog.BoundLogger] = {}
    _sensitive_keys: set[str] = set()

    @classmethod
    def configure_logging(
        cls, level: str = "INFO", format: str = "json", config: Optional[LoggingConfig] = None
    ) -> None:
        """
        Configure global structured logging infrastructure.

        This should be called ONCE at application startup before any logging.

        Args:
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            format: Output format ("json" or "console")
            config: Optional LoggingConfig for advanced configuration

        Raises:
            ValueError: If level or format is invalid
            RuntimeError: If called after logging already configured
        """
        if cls._configured:
            raise RuntimeError("Logging already configured")

        if config is not None:
            cfg = config
        else:
            level_upper = level.upper()
            if level_upper not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
                raise ValueError(
                    f"Invalid log level: {level}. "
                    "Must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL"
                )

            format_lower = format.lower()
            if format_lower not in ["json", "console"]:
                raise ValueError(f"Invalid format: {format}. Must be 'json' or 'console'")

            cfg = LoggingConfig(level=level_upper, format=format_lower)

        cls._config = cfg
        cls._log_level = cfg.level
        cls._sensitive_keys = cfg.sensitive_keys

        structlog.configure(
            processors=cls._setup_processors(),
            wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, cfg.level)),
            context_class=dict,
            logger_factory=structlog.PrintLoggerFactory(file=cfg.output_stream),
            cache_logger_on_first_use=True,
        )

        cls._configured = True

    @classmethod
    def get_logger(cls, name: str) -> structlog.BoundLogger:
        """
        Get a module/component-specific logger.

        Args:
            name: Logger name (typically module path)

        Returns:
            BoundLogger instance

        Raises:
            RuntimeError: If logging not configured yet
            ValueError: If name is empty or too long
        """
        if not cls._configured:
            raise RuntimeError("Logging not configured. Call configure_logging() first.")

        if not name:
            raise ValueError("Logger name cannot be empty")

        if len(name) > 200:
            raise ValueError("Logger name exceeds maximum length (200)")

        if name in cls._loggers:
            return cls._loggers[name]

        logger = structlog.get_logger(name)
        cls._loggers[name] = logger

        return logger

    @classmethod
    def log_error(
        cls,
        error: Exception,
        context: Optional[dict[str, Any]] = None,
        logger_name: str = "tsdocs",
        include_stack_trace: bool = True,
    ) -> None:
        """
        Log an error with full context and stack trace.

        Extracts error type, message, error code and correlation id (if
        TsDocsError), and optionally includes the current stack trace.

        Args:
            error: Exception instance
            context: Additional context about where/why error occurred
            logger_name: Which logger to use (default: "tsdocs")
            include_stack_trace: Whether to include full stack trace

        Example:
            try:
                entries = extractor.extract_file(path)
            except ParseError as e:
                LoggingService.log_error(e, context={"file_path": path})
                raise
        """
        logger = cls.get_logger(logger_name)

        log_context: Dict[str, Any] = {
            "error_type": type(error).__name__,
            "error_message": str(error),
        }

        error_code = getattr(error, "error_code", None)
        if error_code:
            log_context["error_code"] = error_code

        correlation_id = getattr(error, "correlation_id", None)
        if correlation_id:
            log_context["correlation_id"] = correlation_id

        if context:
            log_context.update(cls._sanitize_metadata(context))

        if include_stack_trace:
            log_context["stack_trace"] = traceback.format_exc()

        logger.error("error_occurred", **log_context)

    @classmethod
    def _sanitize_metadata(cls, data: dict[str, Any]) -> dict[str, Any]:
        """
        Sanitize sensitive data from metadata before logging.

        Replaces values for sensitive keys with "[REDACTED]".
        Recursively processes nested dictionaries and lists.
        """
        if not isinstance(data, dict):
            return data

        sanitized: Dict[str, Any] = {}

        for key, value in data.items():
            if key.lower() in cls._sensitive_keys:
                sanitized[key] = "[REDACTED]"
            elif isinstance(value, dict):
                sanitized[key] = cls._sanitize_metadata(value)
            elif isinstance(value, list):
                sanitized[key] = [
                    cls._sanitize_metadata(item) if isinstance(item, dict) else item
                    for item in value
                ]
            else:
                sanitized[key] = value

        return sanitized

    @classmethod
    def _setup_processors(cls) -> list[Processor]:
        """
        Setup structlog processors based on configuration.

        Processors (in order):
            1. add_log_level: Add log level to context
            2. TimeStamper: Add ISO timestamp
            3. StackInfoRenderer: Render stack info if requested
            4. format_exc_info: Format exception info
            5. JSONRenderer or ConsoleRenderer: Final output format
        """
        processors: list[Processor] = [
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
        ]

        if cls._config and cls._config.format == "console":
            processors.append(structlog.dev.ConsoleRenderer(colors=False))
        else:
            processors.append(structlog.processors.JSONRenderer())

        return processors

    @classmethod
    def reset(cls) -> None:
        """
        Reset logging state for testing purposes.

        Warning:
            This method should only be used in testing.
        """
        cls._configured = False
        cls._log_level = "INFO"
        cls._config = None
        cls._loggers = {}
        cls._sensitive_keys = set()
        structlog.reset_defaults()
