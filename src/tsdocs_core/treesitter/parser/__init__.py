"""
Tree-sitter parser module.

Exports:
    BaseLanguageParser: Abstract base class for language parsers.
    TypeScriptParser: Parser for the typescript and tsx grammars.
    ParserFactory: Factory for creating and reusing parsers.
"""

from tsdocs_core.treesitter.parser.base import BaseLanguageParser
from tsdocs_core.treesitter.parser.factory import ParserFactory, TypeScriptParser

__all__ = [
    "BaseLanguageParser",
    "ParserFactory",
    "TypeScriptParser",
]
