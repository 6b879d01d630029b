"""
Parser factory module for tree-sitter integration.

Provides TypeScriptParser for the typescript and tsx grammars, and
ParserFactory for reusing parser instances by grammar or file extension.

License: MIT
"""

import threading
from pathlib import Path
from typing import Dict, Optional

import structlog

from ..config import (
    DEFAULT_LANGUAGE,
    LANGUAGE_EXTENSIONS,
    get_language_by_extension,
    is_supported_language,
)
from ..exceptions import LanguageNotSupportedError
from .base import BaseLanguageParser


class TypeScriptParser(BaseLanguageParser):
    """
    Parser for one of the TypeScript grammars.

    Attributes:
        language_name: "typescript" or "tsx"
        file_extensions: Extensions handled by that grammar

    Example:
        >>> parser = TypeScriptParser("tsx")
        >>> tree = parser.parse(b"export interface Props { id: string; }")
    """

    def __init__(self, language_name: str = DEFAULT_LANGUAGE):
        """
        Initialize the parser for a specific TypeScript grammar.

        Args:
            language_name: "typescript" or "tsx".

        Raises:
            LanguageNotSupportedError: If language_name is not a TypeScript grammar
                or the grammar cannot be loaded.
        """
        if not is_supported_language(language_name):
            raise LanguageNotSupportedError(
                language=language_name,
                details={"available_languages": sorted(LANGUAGE_EXTENSIONS)},
            )

        self._language_name = language_name
        self._file_extensions = LANGUAGE_EXTENSIONS[language_name]
        super().__init__()

    @property
    def language_name(self) -> str:
        """Grammar name ("typescript" or "tsx")."""
        return self._language_name

    @property
    def file_extensions(self) -> tuple[str, ...]:
        """File extensions associated with this grammar."""
        return self._file_extensions


class ParserFactory:
    """
    Factory for creating and reusing TypeScript parsers.

    Parsers are created lazily on first request and cached per grammar
    and thread, since a tree-sitter parser must not be shared between threads.

    Example:
        >>> parser = ParserFactory.get_parser("typescript")
        >>> parser = ParserFactory.get_parser_for_file("/path/to/component.tsx")
    """

    _local = threading.local()
    _logger = structlog.get_logger(__name__)

    @classmethod
    def get_parser(cls, language: str = DEFAULT_LANGUAGE) -> BaseLanguageParser:
        """
        Get a parser for the specified grammar.

        Args:
            language: "typescript" or "tsx".

        Returns:
            Cached parser for the grammar.

        Raises:
            LanguageNotSupportedError: If the grammar is not supported.
        """
        parsers = cls._thread_parsers()
        existing_parser = parsers.get(language)
        if existing_parser is not None:
            return existing_parser

        cls._logger.debug("Creating new parser on demand", language=language)
        parser = TypeScriptParser(language)
        parsers[language] = parser
        return parser

    @classmethod
    def get_parser_for_file(cls, file_path: str) -> Optional[BaseLanguageParser]:
        """
        Get a parser based on the file extension.

        Args:
            file_path: Path to the source file (absolute or relative).

        Returns:
            Parser if the extension is a TypeScript one, None otherwise.
        """
        extension = Path(file_path).suffix
        language = get_language_by_extension(extension) if extension else None

        if language is None:
            cls._logger.debug(
                "No parser found for file extension",
                file_path=file_path,
                extension=extension,
            )
            return None

        return cls.get_parser(language)

    @classmethod
    def reset(cls) -> None:
        """
        Drop the cached parsers of every thread.

        Warning:
            This method should only be used in testing.
        """
        cls._local = threading.local()
        cls._logger.debug("ParserFactory reset")

    @classmethod
    def _thread_parsers(cls) -> Dict[str, BaseLanguageParser]:
        parsers = getattr(cls._local, "parsers", None)
        if parsers is None:
            parsers = cls._local.parsers = {}
        return parsers


__all__ = [
    "TypeScriptParser",
    "ParserFactory",
]
