"""
Unit tests for the tsdocs exception hierarchy.

License: MIT
"""

import uuid

import pytest

from tsdocs_core.docs.exceptions import (
    DocExtractionError,
    InvalidSignatureError,
    NotAnInterfaceError,
    UnclassifiableMemberError,
)
from tsdocs_core.exceptions import (
    ExtractionError,
    ProcessingError,
    TsDocsError,
    ValidationError,
)


class TestTsDocsError:
    """Tests for the base exception."""

    def test_defaults(self):
        """Test default error code, details and generated correlation id."""
        error = TsDocsError("failed")

        assert error.message == "failed"
        assert error.error_code == "ERR_UNKNOWN"
        assert error.details == {}
        assert error.is_transient is False
        uuid.UUID(error.correlation_id)

    def test_explicit_correlation_id(self):
        """Test a given correlation id is kept."""
        error = TsDocsError("failed", correlation_id="req-1")

        assert error.correlation_id == "req-1"

    def test_to_dict(self):
        """Test serialization for logging."""
        original = OSError("disk")
        error = TsDocsError(
            "failed",
            error_code="ERR_X",
            details={"file_path": "a.ts"},
            original_exception=original,
        )

        data = error.to_dict()

        assert data["error"] == "TsDocsError"
        assert data["message"] == "failed"
        assert data["error_code"] == "ERR_X"
        assert data["details"] == {"file_path": "a.ts"}
        assert data["original_error"] == "disk"

    def test_str_is_message(self):
        """Test str() of the exception is its message."""
        assert str(TsDocsError("failed")) == "failed"


class TestSubclasses:
    """Tests for the layer-level subclasses."""

    @pytest.mark.parametrize(
        "cls, code",
        [
            (ValidationError, "VAL_001"),
            (ProcessingError, "PROC_001"),
            (ExtractionError, "EXTR_001"),
        ],
    )
    def test_default_codes(self, cls, code):
        """Test each subclass carries its default error code."""
        error = cls("failed")

        assert isinstance(error, TsDocsError)
        assert error.error_code == code
        assert error.is_transient is False


class TestDocExtractionErrors:
    """Tests for documentation extraction errors."""

    def test_base(self):
        """Test DocExtractionError defaults."""
        error = DocExtractionError()

        assert isinstance(error, ExtractionError)
        assert error.error_code == "DOC_001"

    def test_unclassifiable_member(self):
        """Test node type and line land in message and details."""
        error = UnclassifiableMemberError(node_type="statement_block", line=7)

        assert error.error_code == "DOC_002"
        assert "statement_block" in error.message
        assert "line 7" in error.message
        assert error.details == {"node_type": "statement_block", "line": 7}

    def test_not_an_interface(self):
        """Test NotAnInterfaceError records the node type."""
        error = NotAnInterfaceError(node_type="class_declaration")

        assert error.error_code == "DOC_003"
        assert error.node_type == "class_declaration"
        assert isinstance(error, DocExtractionError)

    def test_invalid_signature(self):
        """Test InvalidSignatureError keeps extra details."""
        error = InvalidSignatureError(
            member_name="log",
            reason="rest parameter 'args' must be the last parameter",
            details={"interface": "Logger"},
        )

        assert error.error_code == "DOC_004"
        assert error.message.startswith("Invalid signature for 'log'")
        assert error.details == {
            "interface": "Logger",
            "member_name": "log",
            "reason": "rest parameter 'args' must be the last parameter",
        }
