"""
Base classes for Tree-sitter language parsers.

Provides abstract base class for implementing language-specific parsers
using tree-sitter and tree-sitter-language-pack.

License: MIT
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

import structlog
from tree_sitter import Parser, Tree
from tree_sitter_language_pack import get_language, get_parser

from tsdocs_core.config import settings
from tsdocs_core.treesitter.exceptions import (
    LanguageNotSupportedError,
    ParseError,
)

logger = structlog.get_logger(__name__)


class BaseLanguageParser(ABC):
    """
    Abstract base class for language-specific tree-sitter parsers.

    Provides common parsing functionality using tree-sitter-language-pack.
    Subclasses must define the language name and supported file extensions.

    A parser instance wraps one tree-sitter Parser and must not be shared
    between threads.

    Example:
        class TypeScriptParser(BaseLanguageParser):
            @property
            def language_name(self) -> str:
                return "typescript"

            @property
            def file_extensions(self) -> tuple[str, ...]:
                return (".ts", ".mts", ".cts")

        parser = TypeScriptParser()
        tree = parser.parse(b"interface A { a: string; }")
    """

    def __init__(self) -> None:
        """
        Initialize the parser with tree-sitter language support.

        Raises:
            LanguageNotSupportedError: If the language is not supported by
                tree-sitter-language-pack.
        """
        self._parser: Optional[Parser] = None
        self._log = logger.bind(parser=self.__class__.__name__)

        try:
            _ = get_language(self.language_name)  # type: ignore[arg-type]
            self._log.debug("language_validated", language=self.language_name)
        except Exception as e:
            self._log.error(
                "language_not_supported",
                language=self.language_name,
                error=str(e),
            )
            raise LanguageNotSupportedError(
                language=self.language_name,
                details={"error": str(e)},
            ) from e

    @property
    @abstractmethod
    def language_name(self) -> str:
        """
        Get the grammar name for this parser.

        Returns:
            Language name as used by tree-sitter-language-pack
            (e.g., "typescript", "tsx").
        """
        ...

    @property
    @abstractmethod
    def file_extensions(self) -> tuple[str, ...]:
        """
        Get the file extensions supported by this parser.

        Returns:
            Tuple of file extensions including the dot (e.g., (".ts", ".mts")).
        """
        ...

    def get_parser(self) -> Parser:
        """
        Get the configured tree-sitter Parser instance.

        Lazily initializes the parser on first call.

        Returns:
            Configured tree-sitter Parser for this language.
        """
        if self._parser is None:
            self._parser = get_parser(self.language_name)  # type: ignore[arg-type]
            self._log.debug("parser_initialized", language=self.language_name)
        return self._parser

    def parse(self, source_code: bytes) -> Optional[Tree]:
        """
        Parse source code into an AST tree.

        Args:
            source_code: Source code as bytes (UTF-8 encoded).

        Returns:
            Parsed AST Tree if successful, None if parsing fails.
        """
        try:
            parser = self.get_parser()
            tree = parser.parse(source_code)
            self._log.debug(
                "parse_success",
                language=self.language_name,
                source_length=len(source_code),
                has_errors=tree.root_node.has_error if tree else True,
            )
            return tree
        except Exception as e:
            self._log.error(
                "parse_failed",
                language=self.language_name,
                source_length=len(source_code),
                error=str(e),
            )
            return None

    def read_source(self, file_path: str) -> bytes:
        """
        Read a source file, enforcing the configured size limit.

        Args:
            file_path: Absolute or relative path to the source file.

        Returns:
            File content as bytes.

        Raises:
            ParseError: If the file is missing, not a regular file, too large,
                or cannot be read.
        """
        path = Path(file_path)

        if not path.exists():
            self._log.error("file_not_found", file_path=file_path)
            raise ParseError(file_path=file_path, parse_details="File not found")

        if not path.is_file():
            self._log.error("not_a_file", file_path=file_path)
            raise ParseError(file_path=file_path, parse_details="Path is not a file")

        try:
            size = path.stat().st_size
            if size > settings.max_file_size_bytes:
                self._log.error(
                    "file_too_large",
                    file_path=file_path,
                    size_bytes=size,
                    limit_bytes=settings.max_file_size_bytes,
                )
                raise ParseError(
                    file_path=file_path,
                    parse_details=(
                        f"File is {size} bytes, limit is {settings.max_file_size_bytes}"
                    ),
                )

            source_code = path.read_bytes()
            self._log.debug("file_read", file_path=file_path, size_bytes=len(source_code))
        except PermissionError as e:
            self._log.error("permission_denied", file_path=file_path, error=str(e))
            raise ParseError(file_path=file_path, parse_details="Permission denied") from e
        except OSError as e:
            self._log.error("read_error", file_path=file_path, error=str(e))
            raise ParseError(
                file_path=file_path,
                parse_details=f"Failed to read file: {e}",
            ) from e

        return source_code

    def __repr__(self) -> str:
        """Return string representation of the parser."""
        return f"{self.__class__.__name__}(language='{self.language_name}')"


__all__ = ["BaseLanguageParser"]
