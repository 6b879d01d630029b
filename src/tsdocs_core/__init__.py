"""
tsdocs core.

Extracts documentation entries for exported TypeScript interfaces.
Contains:
- Exception hierarchy
- Configuration management
- Logging service
- Tree-sitter parsing layer
- Documentation entry extraction

License: MIT
"""

from .config import TsDocsSettings, get_config_summary, settings
from .docs import (
    DocsExtractor,
    InterfaceEntry,
    MemberTags,
    MemberType,
    MethodEntry,
    ParamEntry,
    PropertyEntry,
    parse_doc_entries,
)
from .exceptions import ExtractionError, ProcessingError, TsDocsError, ValidationError
from .logging_service import LoggingService

__version__ = "0.1.0"

__all__ = [
    # Config
    "TsDocsSettings",
    "settings",
    "get_config_summary",
    # Exceptions
    "TsDocsError",
    "ValidationError",
    "ProcessingError",
    "ExtractionError",
    # Logging
    "LoggingService",
    # Extraction
    "DocsExtractor",
    "InterfaceEntry",
    "PropertyEntry",
    "MethodEntry",
    "ParamEntry",
    "MemberType",
    "MemberTags",
    "parse_doc_entries",
]
