"""Pytest fixtures for documentation extraction tests."""

from typing import Callable, Tuple

import pytest
from tree_sitter import Node
from tree_sitter_language_pack import get_parser

from tsdocs_core.docs.extractor import DocsExtractor
from tsdocs_core.docs.ts_oracle import TreeSitterTypeOracle
from tsdocs_core.docs.type_renderer import TypeRenderer


def _find(node: Node, node_type: str) -> Node:
    found = _find_or_none(node, node_type)
    if found is not None:
        return found
    raise AssertionError(f"No '{node_type}' node in parsed source")


def _find_or_none(node: Node, node_type: str):
    if node.type == node_type:
        return node
    for child in node.children:
        found = _find_or_none(child, node_type)
        if found is not None:
            return found
    return None


@pytest.fixture
def parse_typescript() -> Callable[[str], Tuple[Node, bytes]]:
    """Factory fixture to parse TypeScript source code into its root node."""
    parser = get_parser("typescript")

    def _parse(source: str) -> Tuple[Node, bytes]:
        source_bytes = source.encode("utf-8")
        tree = parser.parse(source_bytes)
        return tree.root_node, source_bytes

    return _parse


@pytest.fixture
def parse_interface(parse_typescript):
    """Factory fixture returning (interface node, oracle) for a source."""

    def _parse(source: str) -> Tuple[Node, TreeSitterTypeOracle]:
        root, source_bytes = parse_typescript(source)
        return _find(root, "interface_declaration"), TreeSitterTypeOracle(source_bytes)

    return _parse


@pytest.fixture
def render_type(parse_typescript):
    """Factory fixture rendering the type of ``type T = <text>;``."""

    def _render(type_text: str, with_undefined: bool = False) -> str:
        root, source_bytes = parse_typescript(f"type T = {type_text};")
        alias = _find(root, "type_alias_declaration")
        assert not alias.has_error, f"Unparseable type: {type_text}"
        renderer = TypeRenderer(source_bytes)
        value = alias.child_by_field_name("value")
        if with_undefined:
            return renderer.render_with_undefined(value)
        return renderer.render(value)

    return _render


@pytest.fixture
def extractor():
    """Create a DocsExtractor instance with JSDoc enabled."""
    return DocsExtractor(include_jsdoc=True)
