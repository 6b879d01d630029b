"""
Configuration Management for tsdocs.

Provides centralized, type-safe configuration loading using Pydantic Settings.
Supports environment variables, .env files, and sensible defaults for zero-config operation.

License: MIT
"""

from typing import Any, Dict

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TsDocsSettings(BaseSettings):
    """
    Centralized configuration for documentation extraction.

    Configuration is loaded with the following priority (highest to lowest):
    1. System environment variables (prefixed with ``TSDOCS_``)
    2. .env file in project root
    3. Hardcoded default values

    Example:
        ```python
        from tsdocs_core.config import settings

        print(settings.max_file_size_bytes)  # 10485760
        print(settings.extraction_workers)  # 4
        ```
    """

    # ========================================
    # EXTRACTION CONFIGURATION
    # ========================================

    max_file_size_bytes: int = Field(
        default=10 * 1024 * 1024,
        ge=1024,
        le=512 * 1024 * 1024,
        description="Largest source file the extractor will read, in bytes",
    )

    extraction_workers: int = Field(
        default=4, ge=1, le=32, description="Thread pool workers for multi-file extraction"
    )

    include_jsdoc: bool = Field(
        default=True, description="Attach JSDoc descriptions and block tags to entries"
    )

    # ========================================
    # LOGGING CONFIGURATION
    # ========================================

    log_level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_format: str = Field(default="json", description="Log format (json, console)")

    # ========================================
    # VALIDATORS
    # ========================================

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate log level is one of allowed values.

        Args:
            v: Log level string (case-insensitive)

        Returns:
            Uppercase log level string

        Raises:
            ValueError: If log level not in allowed values
        """
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in allowed:
            raise ValueError(f"log_level must be one of {allowed}, got '{v}'")
        return v_upper

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """
        Validate log format is one of allowed values.

        Args:
            v: Log format string (case-insensitive)

        Returns:
            Lowercase log format string

        Raises:
            ValueError: If log format not in allowed values
        """
        allowed = ["json", "console"]
        v_lower = v.lower()
        if v_lower not in allowed:
            raise ValueError(f"log_format must be one of {allowed}, got '{v}'")
        return v_lower

    @property
    def is_debug(self) -> bool:
        """True if running with DEBUG log level."""
        return self.log_level == "DEBUG"

    # ========================================
    # PYDANTIC CONFIGURATION
    # ========================================

    model_config = SettingsConfigDict(
        env_prefix="TSDOCS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_assignment=True,
        extra="ignore",
    )


def get_config_summary(settings: TsDocsSettings) -> Dict[str, Any]:
    """
    Get configuration summary for logging/debugging.

    Args:
        settings: TsDocsSettings instance to summarize

    Returns:
        Nested dictionary grouped by concern
    """
    return {
        "extraction": {
            "max_file_size_bytes": settings.max_file_size_bytes,
            "workers": settings.extraction_workers,
            "include_jsdoc": settings.include_jsdoc,
        },
        "logging": {
            "level": settings.log_level,
            "format": settings.log_format,
        },
    }


# Singleton instance - instantiated once at module import
settings = TsDocsSettings()
