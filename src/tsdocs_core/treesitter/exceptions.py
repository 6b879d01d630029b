"""
Exception hierarchy for Tree-sitter module.

Defines the exception types raised while loading grammars and reading
source files for parsing.

License: MIT
"""

from typing import Optional

from tsdocs_core.exceptions import ProcessingError


class TreeSitterError(ProcessingError):
    """
    Base exception for all tree-sitter related errors.

    Error Code: TS_001

    Example:
        raise TreeSitterError(
            message="Tree-sitter operation failed",
            details={"operation": "parse"}
        )
    """

    def __init__(
        self,
        message: str = "Tree-sitter operation failed",
        error_code: str = "TS_001",
        **kwargs,
    ):
        """
        Initialize TreeSitterError.

        Args:
            message: Error message describing the tree-sitter error
            error_code: Error code for programmatic handling
            **kwargs: Additional arguments passed to parent
        """
        super().__init__(message=message, error_code=error_code, **kwargs)
        self.is_transient = False


class LanguageNotSupportedError(TreeSitterError):
    """
    Raised when a grammar is not available.

    Either the name is not one of the TypeScript dialects this package
    handles, or tree-sitter-language-pack cannot load it.

    Error Code: TS_002

    Example:
        raise LanguageNotSupportedError(
            language="cobol",
            details={"available_languages": ["typescript", "tsx"]}
        )
    """

    def __init__(
        self,
        language: str,
        message: Optional[str] = None,
        error_code: str = "TS_002",
        **kwargs,
    ):
        """
        Initialize LanguageNotSupportedError.

        Args:
            language: The language identifier that is not supported
            message: Optional custom error message
            error_code: Error code for programmatic handling
            **kwargs: Additional arguments passed to parent
        """
        self.language = language
        if message is None:
            message = f"Language '{language}' is not supported by tree-sitter-language-pack"

        details = kwargs.pop("details", {})
        details["language"] = language

        super().__init__(message=message, error_code=error_code, details=details, **kwargs)


class ParseError(TreeSitterError):
    """
    Raised when a source file cannot be handed to the parser.

    Covers files that are missing, unreadable or over the size limit. Syntax
    errors inside a readable file are not raised: tree-sitter recovers and
    the tree is flagged with has_error instead.

    Error Code: TS_003

    Example:
        raise ParseError(
            file_path="/path/to/index.ts",
            parse_details="File not found"
        )
    """

    def __init__(
        self,
        file_path: str,
        parse_details: Optional[str] = None,
        message: Optional[str] = None,
        error_code: str = "TS_003",
        **kwargs,
    ):
        """
        Initialize ParseError.

        Args:
            file_path: Path to the file that failed to parse
            parse_details: Optional details about the parsing failure
            message: Optional custom error message
            error_code: Error code for programmatic handling
            **kwargs: Additional arguments passed to parent
        """
        self.file_path = file_path
        self.parse_details = parse_details

        if message is None:
            if parse_details:
                message = f"Failed to parse file '{file_path}': {parse_details}"
            else:
                message = f"Failed to parse file '{file_path}'"

        details = kwargs.pop("details", {})
        details["file_path"] = file_path
        if parse_details:
            details["parse_details"] = parse_details

        super().__init__(message=message, error_code=error_code, details=details, **kwargs)
        self.is_transient = False


__all__ = [
    "TreeSitterError",
    "LanguageNotSupportedError",
    "ParseError",
]
