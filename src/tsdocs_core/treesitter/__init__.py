"""
Tree-sitter parsing layer for tsdocs.

Key components:
- config: Grammar/extension mappings
- exceptions: Tree-sitter specific exceptions
- parser: Parser base class, TypeScript parser and factory
"""

from tsdocs_core.treesitter.config import (
    DEFAULT_LANGUAGE,
    EXTENSION_TO_LANGUAGE,
    LANGUAGE_EXTENSIONS,
    get_extensions_by_language,
    get_language_by_extension,
    is_supported_extension,
    is_supported_language,
)
from tsdocs_core.treesitter.exceptions import (
    LanguageNotSupportedError,
    ParseError,
    TreeSitterError,
)
from tsdocs_core.treesitter.parser import (
    BaseLanguageParser,
    ParserFactory,
    TypeScriptParser,
)

__all__ = [
    # Config
    "DEFAULT_LANGUAGE",
    "LANGUAGE_EXTENSIONS",
    "EXTENSION_TO_LANGUAGE",
    "get_language_by_extension",
    "get_extensions_by_language",
    "is_supported_language",
    "is_supported_extension",
    # Exceptions
    "TreeSitterError",
    "LanguageNotSupportedError",
    "ParseError",
    # Parser
    "BaseLanguageParser",
    "ParserFactory",
    "TypeScriptParser",
]
