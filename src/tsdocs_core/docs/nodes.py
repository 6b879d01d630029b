"""Small helpers for reading tree-sitter nodes against their source bytes."""

from typing import List, Optional

from tree_sitter import Node

COMMENT_TYPE = "comment"

# Node types that can hold a member or property name.
_PLAIN_NAME_TYPES = (
    "property_identifier",
    "identifier",
    "private_property_identifier",
    "type_identifier",
    "number",
)


def node_text(node: Node, source: bytes) -> str:
    """Exact source text of a node."""
    return source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single space."""
    return " ".join(text.split())


def named_children(node: Node) -> List[Node]:
    """Named children of a node, comments excluded."""
    return [child for child in node.named_children if child.type != COMMENT_TYPE]


def first_named_child(node: Node) -> Optional[Node]:
    children = named_children(node)
    return children[0] if children else None


def unquote(text: str) -> str:
    """Strip the surrounding quote characters of a string literal."""
    if len(text) >= 2 and text[0] == text[-1] and text[0] in ("'", '"', "`"):
        return text[1:-1]
    return text


def property_name_text(name_node: Node, source: bytes) -> str:
    """Declared name of a member from its name node.

    ``'first-name': string`` is named ``first-name``; computed names such as
    ``[Symbol.iterator]`` keep their brackets.
    """
    text = node_text(name_node, source)
    if name_node.type in _PLAIN_NAME_TYPES:
        return text
    if name_node.type == "string":
        return unquote(text)
    return normalize_whitespace(text)


def children_before(node: Node, anchor: Optional[Node]) -> List[Node]:
    """Direct children of node that start before anchor (all children if no anchor)."""
    if anchor is None:
        return list(node.children)
    return [child for child in node.children if child.start_byte < anchor.start_byte]
