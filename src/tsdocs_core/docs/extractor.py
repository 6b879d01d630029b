"""
Documentation extraction driver.

Parses TypeScript sources, locates the interface declarations the module
exports, and builds one InterfaceEntry for each in source order.

A top-level interface counts as exported when it is declared with
``export`` (``export interface``, ``export default interface``,
``export declare interface``) or named in a local ``export { X }`` clause.
Interfaces nested in namespaces are not exports of the file.

License: MIT
"""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Set, Union

import structlog
from tree_sitter import Node, Tree

from tsdocs_core.config import settings
from tsdocs_core.exceptions import ValidationError
from tsdocs_core.treesitter.config import DEFAULT_LANGUAGE
from tsdocs_core.treesitter.exceptions import LanguageNotSupportedError, ParseError
from tsdocs_core.treesitter.parser.factory import ParserFactory

from .entities import DocEntry
from .interface_extractor import InterfaceExtractor
from .nodes import named_children, node_text
from .ts_oracle import INTERFACE_NODE_TYPE, TreeSitterTypeOracle

logger = structlog.get_logger(__name__)

_EXPORT_STATEMENT = "export_statement"
_AMBIENT_DECLARATION = "ambient_declaration"


class DocsExtractor:
    """
    Extract documentation entries from TypeScript sources.

    Parsers come from ParserFactory, which keeps one per grammar and
    thread, so a single instance can serve ``extract_files`` workers.

    Args:
        include_jsdoc: Attach JSDoc text to entries (defaults to settings).

    Example:
        >>> extractor = DocsExtractor()
        >>> entries = extractor.extract_source("export interface X { a: number; }")
        >>> entries[0].members[0].type
        'number'
    """

    def __init__(self, include_jsdoc: Optional[bool] = None) -> None:
        self._include_jsdoc = settings.include_jsdoc if include_jsdoc is None else include_jsdoc
        self._log = logger.bind(extractor=self.__class__.__name__)

    # =========================================================================
    # Public API
    # =========================================================================

    def extract_source(
        self,
        source: Union[str, bytes],
        file_path: str = "<source>",
        language: str = DEFAULT_LANGUAGE,
    ) -> List[DocEntry]:
        """
        Extract entries for every exported interface in a source text.

        Args:
            source: TypeScript source as text or UTF-8 bytes.
            file_path: Name used in log events and errors.
            language: "typescript" or "tsx".

        Returns:
            Entries in source order.

        Raises:
            LanguageNotSupportedError: If language is not a TypeScript grammar.
            ParseError: If the parser produced no tree.
        """
        source_bytes = source.encode("utf-8") if isinstance(source, str) else source
        tree = ParserFactory.get_parser(language).parse(source_bytes)
        if tree is None:
            raise ParseError(file_path=file_path, parse_details="Parser returned no tree")
        return self.extract_tree(tree, source_bytes, file_path=file_path)

    def extract_file(self, file_path: str) -> List[DocEntry]:
        """
        Extract entries from a file, picking the grammar from its extension.

        Raises:
            LanguageNotSupportedError: If the extension is not a TypeScript one.
            ParseError: If the file cannot be read or exceeds the size limit.
        """
        parser = ParserFactory.get_parser_for_file(file_path)
        if parser is None:
            extension = Path(file_path).suffix
            self._log.warning("unsupported_extension", file_path=file_path, extension=extension)
            raise LanguageNotSupportedError(
                language=extension or "<none>",
                details={"file_path": file_path},
            )

        source = parser.read_source(file_path)
        return self.extract_source(source, file_path=file_path, language=parser.language_name)

    def extract_files(
        self,
        file_paths: Sequence[str],
        max_workers: Optional[int] = None,
    ) -> Dict[str, List[DocEntry]]:
        """
        Extract several files in parallel.

        A path listed more than once is extracted once; the result keeps it
        at its first position.

        Args:
            file_paths: Files to extract.
            max_workers: Thread count (defaults to settings.extraction_workers).

        Returns:
            Mapping of file path to entries, in input order.

        Raises:
            ValidationError: If max_workers is less than 1.
            LanguageNotSupportedError, ParseError: The first failure of any file,
                as raised by extract_file.
        """
        if max_workers is not None and max_workers < 1:
            raise ValidationError(
                message=f"max_workers must be at least 1, got {max_workers}",
                error_code="VAL_003",
                details={"max_workers": max_workers},
            )
        workers = max_workers or settings.extraction_workers
        paths = list(dict.fromkeys(file_paths))
        self._log.info(
            "batch_extraction_started",
            file_count=len(paths),
            duplicate_count=len(file_paths) - len(paths),
            workers=workers,
        )

        with ThreadPoolExecutor(max_workers=workers) as executor:
            results = list(executor.map(self.extract_file, paths))

        entries = dict(zip(paths, results))
        self._log.info(
            "batch_extraction_completed",
            file_count=len(entries),
            entry_count=sum(len(found) for found in entries.values()),
        )
        return entries

    def extract_tree(self, tree: Tree, source: bytes, file_path: str = "<source>") -> List[DocEntry]:
        """
        Extract entries from an already parsed tree of source.

        An interface holding syntax errors is still extracted; members that
        cannot be read are left out by the classifier. Only an interface
        without a name or body is skipped.
        """
        root = tree.root_node
        if root.has_error:
            self._log.warning("source_has_syntax_errors", file_path=file_path, has_errors=True)

        oracle = TreeSitterTypeOracle(source)
        builder = InterfaceExtractor(oracle, include_jsdoc=self._include_jsdoc)

        entries: List[DocEntry] = []
        for node in find_exported_interfaces(root, source):
            line = node.start_point[0] + 1
            name = oracle.get_name(node)
            if not name or node.child_by_field_name("body") is None:
                self._log.warning(
                    "interface_skipped",
                    file_path=file_path,
                    line=line,
                    reason="incomplete_declaration",
                )
                continue
            if node.has_error:
                self._log.warning(
                    "interface_has_syntax_errors",
                    file_path=file_path,
                    interface=name,
                    line=line,
                )
            entries.append(builder.extract(node))

        self._log.info("source_extracted", file_path=file_path, entry_count=len(entries))
        return entries


def find_exported_interfaces(root: Node, source: bytes) -> List[Node]:
    """
    Top-level interface declarations exported by a module, in source order.

    Args:
        root: Program node of a parsed module.
        source: Bytes the tree was parsed from.

    Returns:
        Interface declaration nodes.
    """
    exported_names = _export_clause_names(root, source)
    interfaces: List[Node] = []

    for statement in named_children(root):
        if statement.type == _EXPORT_STATEMENT:
            declaration = _unwrap_ambient(statement.child_by_field_name("declaration"))
            if declaration is not None and declaration.type == INTERFACE_NODE_TYPE:
                interfaces.append(declaration)
            continue

        declaration = _unwrap_ambient(statement)
        if declaration is None or declaration.type != INTERFACE_NODE_TYPE:
            continue
        name_node = declaration.child_by_field_name("name")
        if name_node is not None and node_text(name_node, source) in exported_names:
            interfaces.append(declaration)

    return interfaces


def _unwrap_ambient(node: Optional[Node]) -> Optional[Node]:
    if node is not None and node.type == _AMBIENT_DECLARATION:
        inner = named_children(node)
        return inner[0] if inner else None
    return node


def _export_clause_names(root: Node, source: bytes) -> Set[str]:
    """Local names listed in ``export { ... }`` clauses without a ``from``."""
    names: Set[str] = set()
    for statement in _export_statements(named_children(root)):
        if statement.child_by_field_name("source") is not None:
            continue
        for clause in named_children(statement):
            if clause.type != "export_clause":
                continue
            for specifier in named_children(clause):
                name_node = specifier.child_by_field_name("name")
                if name_node is not None:
                    names.add(node_text(name_node, source))
    return names


def _export_statements(statements: Iterable[Node]) -> Iterable[Node]:
    return (statement for statement in statements if statement.type == _EXPORT_STATEMENT)


__all__ = ["DocsExtractor", "find_exported_interfaces"]
