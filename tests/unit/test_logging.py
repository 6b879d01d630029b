"""
Unit tests for LoggingService.

Tests logging configuration, logger creation, error logging,
rendered output, and sensitive data sanitization.

License: MIT
"""

import json
from io import StringIO

import pytest
import structlog

from tsdocs_core.logging_service import LoggingConfig, LoggingService
from tsdocs_core.treesitter.exceptions import ParseError

# ============================================================
# FIXTURES
# ============================================================


@pytest.fixture(autouse=True)
def reset_logging_service():
    """Reset LoggingService state before each test."""
    LoggingService.reset()
    yield
    LoggingService.reset()


@pytest.fixture
def stream_config():
    """Factory for a LoggingConfig writing to an in-memory stream."""

    def _make(level: str = "INFO", format: str = "json") -> tuple[LoggingConfig, StringIO]:
        stream = StringIO()
        return LoggingConfig(level=level, format=format, output_stream=stream), stream

    return _make


# ============================================================
# CONFIGURATION TESTS
# ============================================================


def test_configure_logging_success():
    """Test normal logging configuration."""
    LoggingService.configure_logging(level="INFO", format="json")

    assert LoggingService._configured is True
    assert LoggingService._log_level == "INFO"
    assert LoggingService._config is not None


def test_configure_logging_normalizes_case():
    """Test level is upper-cased and format lower-cased."""
    LoggingService.configure_logging(level="debug", format="CONSOLE")

    assert LoggingService._log_level == "DEBUG"
    assert LoggingService._config.format == "console"


def test_configure_logging_with_config_object():
    """Test configuration with LoggingConfig object."""
    config = LoggingConfig(level="DEBUG", format="json", sensitive_keys={"password", "api_key"})

    LoggingService.configure_logging(config=config)

    assert LoggingService._configured is True
    assert LoggingService._log_level == "DEBUG"
    assert LoggingService._sensitive_keys == {"password", "api_key"}


def test_logging_config_default_sensitive_keys():
    """Test LoggingConfig fills in default sensitive keys."""
    config = LoggingConfig()

    assert "password" in config.sensitive_keys
    assert "token" in config.sensitive_keys


def test_configure_logging_invalid_level():
    """Test configuration with invalid log level."""
    with pytest.raises(ValueError) as exc_info:
        LoggingService.configure_logging(level="INVALID")

    assert "Invalid log level" in str(exc_info.value)
    assert LoggingService._configured is False


def test_configure_logging_invalid_format():
    """Test configuration with invalid format."""
    with pytest.raises(ValueError) as exc_info:
        LoggingService.configure_logging(level="INFO", format="xml")

    assert "Invalid format" in str(exc_info.value)


def test_configure_logging_already_configured():
    """Test that calling configure_logging twice raises RuntimeError."""
    LoggingService.configure_logging(level="INFO")

    with pytest.raises(RuntimeError) as exc_info:
        LoggingService.configure_logging(level="DEBUG")

    assert "already configured" in str(exc_info.value).lower()


def test_reset_allows_reconfiguration():
    """Test reset() clears state so logging can be configured again."""
    LoggingService.configure_logging(level="INFO")
    LoggingService.reset()

    LoggingService.configure_logging(level="WARNING")

    assert LoggingService._log_level == "WARNING"


# ============================================================
# GET LOGGER TESTS
# ============================================================


def test_get_logger_success():
    """Test getting logger after configuration."""
    LoggingService.configure_logging(level="INFO")

    logger = LoggingService.get_logger("tsdocs.docs")

    assert hasattr(logger, "info")
    assert hasattr(logger, "error")


def test_get_logger_caches_loggers():
    """Test that repeated calls return the same logger instance."""
    LoggingService.configure_logging(level="INFO")

    assert LoggingService.get_logger("tsdocs.docs") is LoggingService.get_logger("tsdocs.docs")


def test_get_logger_different_names():
    """Test that different names create different loggers."""
    LoggingService.configure_logging(level="INFO")

    assert LoggingService.get_logger("module1") is not LoggingService.get_logger("module2")


def test_get_logger_not_configured():
    """Test that get_logger raises RuntimeError if not configured."""
    with pytest.raises(RuntimeError) as exc_info:
        LoggingService.get_logger("tsdocs.docs")

    assert "not configured" in str(exc_info.value).lower()


def test_get_logger_empty_name():
    """Test that empty logger name raises ValueError."""
    LoggingService.configure_logging(level="INFO")

    with pytest.raises(ValueError) as exc_info:
        LoggingService.get_logger("")

    assert "cannot be empty" in str(exc_info.value).lower()


def test_get_logger_very_long_name():
    """Test that very long logger name raises ValueError."""
    LoggingService.configure_logging(level="INFO")

    with pytest.raises(ValueError) as exc_info:
        LoggingService.get_logger("x" * 300)

    assert "maximum length" in str(exc_info.value).lower()


# ============================================================
# OUTPUT TESTS
# ============================================================


def test_json_output_is_one_object_per_line(stream_config):
    """Test JSON renderer writes event, level and timestamp."""
    config, stream = stream_config(level="INFO", format="json")
    LoggingService.configure_logging(config=config)

    LoggingService.get_logger("output.json").info("interface_extracted", interface="User")

    record = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert record["event"] == "interface_extracted"
    assert record["interface"] == "User"
    assert record["level"] == "info"
    assert "timestamp" in record


def test_level_filters_lower_events(stream_config):
    """Test events below the configured level are dropped."""
    config, stream = stream_config(level="WARNING", format="json")
    LoggingService.configure_logging(config=config)

    logger = LoggingService.get_logger("output.filter")
    logger.debug("member_excluded")
    logger.info("source_extracted")

    assert stream.getvalue() == ""


def test_console_output(stream_config):
    """Test console renderer writes the event name."""
    config, stream = stream_config(level="INFO", format="console")
    LoggingService.configure_logging(config=config)

    LoggingService.get_logger("output.console").info("batch_extraction_started", file_count=2)

    output = stream.getvalue()
    assert "batch_extraction_started" in output
    assert "file_count=2" in output


# ============================================================
# LOG ERROR TESTS
# ============================================================


def test_log_error_includes_error_code(stream_config):
    """Test log_error records error code and correlation id of tsdocs errors."""
    config, stream = stream_config()
    LoggingService.configure_logging(config=config)
    error = ParseError(file_path="index.ts", parse_details="File not found")

    LoggingService.log_error(error, context={"file_path": "index.ts"}, include_stack_trace=False)

    record = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert record["event"] == "error_occurred"
    assert record["error_type"] == "ParseError"
    assert record["error_code"] == "TS_003"
    assert record["correlation_id"] == error.correlation_id
    assert record["file_path"] == "index.ts"
    assert "stack_trace" not in record


def test_log_error_with_stack_trace(stream_config):
    """Test log_error attaches the current stack trace."""
    config, stream = stream_config()
    LoggingService.configure_logging(config=config)

    try:
        raise ValueError("Something went wrong")
    except ValueError as e:
        LoggingService.log_error(e)

    record = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert record["error_type"] == "ValueError"
    assert "Something went wrong" in record["stack_trace"]


def test_log_error_sanitizes_context(stream_config):
    """Test sensitive context keys are redacted."""
    config, stream = stream_config()
    LoggingService.configure_logging(config=config)

    LoggingService.log_error(
        ValueError("boom"),
        context={"token": "abc", "file_path": "a.ts"},
        include_stack_trace=False,
    )

    record = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert record["token"] == "[REDACTED]"
    assert record["file_path"] == "a.ts"


# ============================================================
# SANITIZATION TESTS
# ============================================================


def test_sanitize_metadata_sensitive_keys():
    """Test sanitization of sensitive keys in metadata."""
    LoggingService.configure_logging(level="INFO")

    sanitized = LoggingService._sanitize_metadata(
        {"username": "alice", "password": "secret", "API_KEY": "key123", "data": "public"}
    )

    assert sanitized["username"] == "alice"
    assert sanitized["password"] == "[REDACTED]"
    assert sanitized["API_KEY"] == "[REDACTED]"
    assert sanitized["data"] == "public"


def test_sanitize_metadata_nested_dicts_and_lists():
    """Test recursive sanitization of nested dictionaries and lists."""
    LoggingService.configure_logging(level="INFO")

    sanitized = LoggingService._sanitize_metadata(
        {
            "user": {"name": "alice", "credentials": {"secret": "s"}},
            "items": [{"token": "t"}, "plain"],
        }
    )

    assert sanitized["user"]["name"] == "alice"
    assert sanitized["user"]["credentials"]["secret"] == "[REDACTED]"
    assert sanitized["items"] == [{"token": "[REDACTED]"}, "plain"]


def test_reset_restores_structlog_defaults():
    """Test reset() restores structlog defaults."""
    LoggingService.configure_logging(level="INFO")
    LoggingService.reset()

    assert structlog.is_configured() is False
