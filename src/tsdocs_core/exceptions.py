"""
Exception hierarchy for tsdocs.

Defines all exception types with error codes, transient flags, and correlation IDs.
Extraction itself is total over well-formed input; these types cover the
boundaries around it (settings, file reading, grammar loading) and contract
violations that must never be turned into partial output.

License: MIT
"""

import uuid
from typing import Any, Dict, Optional


class TsDocsError(Exception):
    """
    Base exception for all tsdocs errors.

    All tsdocs exceptions inherit from this class. Provides standard
    error attributes: message, error_code, details, correlation_id.

    Attributes:
        message: Human-readable error message
        error_code: Programmatic error code (e.g., "ERR_001")
        details: Additional context (dict)
        correlation_id: UUID for tracing across layers
        original_exception: Wrapped exception (if any)
        is_transient: Whether error is transient (retryable)

    Example:
        raise TsDocsError(
            message="Operation failed",
            error_code="ERR_UNKNOWN",
            details={"file_path": "index.ts"},
        )
    """

    def __init__(
        self,
        message: str,
        error_code: str = "ERR_UNKNOWN",
        details: Optional[Dict[str, Any]] = None,
        correlation_id: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        """
        Initialize TsDocsError.

        Args:
            message: Error message
            error_code: Error code for programmatic handling
            details: Additional context dict
            correlation_id: UUID for request tracing
            original_exception: Original wrapped exception
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.correlation_id = correlation_id or str(uuid.uuid4())
        self.original_exception = original_exception
        self.is_transient = False  # Default: not retryable

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary for logging/serialization.

        Returns:
            Dictionary with all error information
        """
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "details": self.details,
            "correlation_id": self.correlation_id,
            "original_error": str(self.original_exception) if self.original_exception else None,
        }


class ValidationError(TsDocsError):
    """
    Raised when input validation fails.

    Error Codes:
        VAL_001: Missing required field
        VAL_002: Invalid field type
        VAL_003: Field value out of range
        VAL_004: Invalid field format

    Not transient (user input errors should not be retried).
    """

    def __init__(self, message: str, error_code: str = "VAL_001", **kwargs):
        super().__init__(message=message, error_code=error_code, **kwargs)
        self.is_transient = False


class ProcessingError(TsDocsError):
    """
    Raised when source processing fails.

    Error Codes:
        PROC_001: Source processing failed
        PROC_002: Source decoding failed

    Not transient (processing logic errors).
    """

    def __init__(self, message: str, error_code: str = "PROC_001", **kwargs):
        super().__init__(message=message, error_code=error_code, **kwargs)
        self.is_transient = False


class ExtractionError(TsDocsError):
    """
    Raised when documentation extraction hits a contract violation.

    Error Codes:
        EXTR_001: Documentation extraction failed

    Not transient: the same tree always fails the same way.
    """

    def __init__(self, message: str, error_code: str = "EXTR_001", **kwargs):
        super().__init__(message=message, error_code=error_code, **kwargs)
        self.is_transient = False
