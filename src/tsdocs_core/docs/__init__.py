"""
Documentation entry extraction for TypeScript interfaces.

Key components:
- entities: Entry models (InterfaceEntry, MemberEntry, ParamEntry)
- oracle / ts_oracle: Syntax and type queries over a parsed module
- type_renderer: Canonical type strings
- classifier, tags, parameters: Per-member building blocks
- interface_extractor: InterfaceEntry builder
- extractor: Source/file driver locating exported interfaces
"""

from .classifier import MemberClassifier
from .entities import (
    MEMBER_TAG_ORDER,
    AnyDocEntry,
    DocEntry,
    EntryType,
    InterfaceEntry,
    JsDocTagEntry,
    MemberEntry,
    MemberTags,
    MemberType,
    MethodEntry,
    ParamEntry,
    PropertyEntry,
    dump_doc_entries,
    parse_doc_entries,
)
from .exceptions import (
    DocExtractionError,
    InvalidSignatureError,
    NotAnInterfaceError,
    UnclassifiableMemberError,
)
from .extractor import DocsExtractor, find_exported_interfaces
from .interface_extractor import InterfaceExtractor
from .jsdoc import clean_jsdoc, parse_jsdoc
from .oracle import AccessorKind, BaseTypeOracle, MemberKind, Modifier
from .parameters import ParameterExtractor
from .tags import extract_member_tags
from .ts_oracle import TreeSitterTypeOracle
from .type_renderer import TypeRenderer

__all__ = [
    # Entities
    "EntryType",
    "MemberType",
    "MemberTags",
    "MEMBER_TAG_ORDER",
    "DocEntry",
    "AnyDocEntry",
    "InterfaceEntry",
    "MemberEntry",
    "PropertyEntry",
    "MethodEntry",
    "ParamEntry",
    "JsDocTagEntry",
    "parse_doc_entries",
    "dump_doc_entries",
    # Exceptions
    "DocExtractionError",
    "UnclassifiableMemberError",
    "NotAnInterfaceError",
    "InvalidSignatureError",
    # Oracle
    "BaseTypeOracle",
    "TreeSitterTypeOracle",
    "Modifier",
    "AccessorKind",
    "MemberKind",
    "TypeRenderer",
    # Builders
    "MemberClassifier",
    "ParameterExtractor",
    "extract_member_tags",
    "clean_jsdoc",
    "parse_jsdoc",
    "InterfaceExtractor",
    "DocsExtractor",
    "find_exported_interfaces",
]
