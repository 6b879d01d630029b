"""
Exceptions raised by documentation extraction.

Extraction is total over well-formed declarations. These errors signal a
broken contract between the syntax tree and the extractor, never a
recoverable condition, so callers should let them propagate.

License: MIT
"""

from typing import Optional

from tsdocs_core.exceptions import ExtractionError


class DocExtractionError(ExtractionError):
    """
    Base exception for documentation extraction failures.

    Error Code: DOC_001
    """

    def __init__(
        self,
        message: str = "Documentation extraction failed",
        error_code: str = "DOC_001",
        **kwargs,
    ):
        super().__init__(message=message, error_code=error_code, **kwargs)


class UnclassifiableMemberError(DocExtractionError):
    """
    Raised when an interface body holds a node the classifier cannot place.

    Error Code: DOC_002

    Attributes:
        node_type: tree-sitter type of the offending node
        line: 1-based line of the node
    """

    def __init__(
        self,
        node_type: str,
        line: int,
        message: Optional[str] = None,
        error_code: str = "DOC_002",
        **kwargs,
    ):
        self.node_type = node_type
        self.line = line
        if message is None:
            message = f"Cannot classify interface member of type '{node_type}' at line {line}"

        details = kwargs.pop("details", {})
        details["node_type"] = node_type
        details["line"] = line

        super().__init__(message=message, error_code=error_code, details=details, **kwargs)


class NotAnInterfaceError(DocExtractionError):
    """
    Raised when the interface builder is given some other declaration.

    Error Code: DOC_003
    """

    def __init__(
        self,
        node_type: str,
        message: Optional[str] = None,
        error_code: str = "DOC_003",
        **kwargs,
    ):
        self.node_type = node_type
        if message is None:
            message = f"Expected an interface declaration, got '{node_type}'"

        details = kwargs.pop("details", {})
        details["node_type"] = node_type

        super().__init__(message=message, error_code=error_code, details=details, **kwargs)


class InvalidSignatureError(DocExtractionError):
    """
    Raised for a parameter list the type-checker would reject.

    A rest parameter must be the last parameter and cannot be optional.

    Error Code: DOC_004
    """

    def __init__(
        self,
        member_name: str,
        reason: str,
        message: Optional[str] = None,
        error_code: str = "DOC_004",
        **kwargs,
    ):
        self.member_name = member_name
        self.reason = reason
        if message is None:
            message = f"Invalid signature for '{member_name}': {reason}"

        details = kwargs.pop("details", {})
        details["member_name"] = member_name
        details["reason"] = reason

        super().__init__(message=message, error_code=error_code, details=details, **kwargs)


__all__ = [
    "DocExtractionError",
    "UnclassifiableMemberError",
    "NotAnInterfaceError",
    "InvalidSignatureError",
]
