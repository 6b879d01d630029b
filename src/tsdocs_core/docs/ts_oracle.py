"""
Type oracle backed by a tree-sitter TypeScript syntax tree.

Modifier and accessor keywords are read only from the tokens that precede
a member's name, so members named ``get``, ``set``, ``static`` or
``readonly`` are not mistaken for modifiers.

Modifiers written in an order the grammar rejects end up in ERROR nodes
ahead of the member. Such members are read back from their source text;
members whose declaration cannot be read that way are reported malformed.

License: MIT
"""

import re
from typing import Dict, FrozenSet, List, NamedTuple, Optional, Tuple

from tree_sitter import Node

from .nodes import (
    COMMENT_TYPE,
    children_before,
    first_named_child,
    named_children,
    node_text,
    normalize_whitespace,
    property_name_text,
    unquote,
)
from .oracle import AccessorKind, BaseTypeOracle, MemberKind, Modifier
from .type_renderer import ANY, VOID, TypeRenderer

INTERFACE_NODE_TYPE = "interface_declaration"

_MEMBER_KINDS: Dict[str, MemberKind] = {
    "property_signature": MemberKind.PROPERTY,
    "method_signature": MemberKind.METHOD,
    "call_signature": MemberKind.CALL_SIGNATURE,
    "construct_signature": MemberKind.CONSTRUCT_SIGNATURE,
    "index_signature": MemberKind.INDEX_SIGNATURE,
}

_PARAMETER_TYPES = ("required_parameter", "optional_parameter")

# Wrappers whose leading doc comment belongs to the declaration they hold.
_DECLARATION_WRAPPERS = ("export_statement", "ambient_declaration")

_ERROR_TYPE = "ERROR"
_NAMED_MEMBER_TYPES = ("property_signature", "method_signature")

_KEYWORD_MODIFIERS: Dict[str, Optional[Modifier]] = {
    "public": None,
    "private": Modifier.PRIVATE,
    "protected": Modifier.PROTECTED,
    "static": Modifier.STATIC,
    "readonly": Modifier.READONLY,
}
_KEYWORD_ACCESSORS: Dict[str, AccessorKind] = {
    "get": AccessorKind.GETTER,
    "set": AccessorKind.SETTER,
}
_HEAD_KEYWORDS = frozenset(_KEYWORD_MODIFIERS) | frozenset(_KEYWORD_ACCESSORS)

_COMMENT_PATTERN = re.compile(r"/\*.*?\*/|//[^\n]*", re.DOTALL)
_NAME_PATTERN = r"'[^'\n]*'|\"[^\"\n]*\"|[A-Za-z_$][\w$]*|\d+(?:\.\d+)?"
_NAME_TOKEN = re.compile(_NAME_PATTERN)
_HEAD_TOKEN = re.compile(rf"{_NAME_PATTERN}|\S")

ANY_ARRAY = f"{ANY}[]"


class _MemberHead(NamedTuple):
    """Name, leading keywords and '?' of a member read from source text."""

    name: str
    keywords: Tuple[str, ...]
    optional: bool


class TreeSitterTypeOracle(BaseTypeOracle[Node]):
    """
    Oracle over one parsed TypeScript source.

    Args:
        source: The exact bytes the tree was parsed from.
        renderer: Type renderer for the same source (created if omitted).

    Example:
        >>> tree = TypeScriptParser().parse(source)
        >>> oracle = TreeSitterTypeOracle(source)
        >>> [oracle.get_name(m) for m in oracle.get_members(interface_node)]
        ['a', 'b']
    """

    def __init__(self, source: bytes, renderer: Optional[TypeRenderer] = None) -> None:
        self._source = source
        self._renderer = renderer or TypeRenderer(source)

    @property
    def source(self) -> bytes:
        return self._source

    # =========================================================================
    # Declarations
    # =========================================================================

    def is_interface(self, node: Node) -> bool:
        return node.type == INTERFACE_NODE_TYPE

    def get_name(self, node: Node) -> str:
        if node.type in _PARAMETER_TYPES:
            return self.get_parameter_name(node)
        head = self._recovered_head(node)
        if head is not None:
            return head.name
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return ""
        return property_name_text(name_node, self._source)

    def get_members(self, interface_node: Node) -> List[Node]:
        body = interface_node.child_by_field_name("body")
        if body is None:
            return []
        members: List[Node] = []
        for child in named_children(body):
            if child.type != _ERROR_TYPE:
                members.append(child)
                continue
            # Error recovery can wrap a member together with the tokens it rejected.
            members.extend(inner for inner in named_children(child) if inner.type in _MEMBER_KINDS)
        return [member for member in members if not self._is_split_keywords(member)]

    def get_member_kind(self, member_node: Node) -> Optional[MemberKind]:
        return _MEMBER_KINDS.get(member_node.type)

    def get_modifiers(self, member_node: Node) -> FrozenSet[Modifier]:
        head = self._recovered_head(member_node)
        if head is not None:
            keywords = head.keywords
        else:
            keywords = tuple(
                node_text(child, self._source).strip()
                for child in self._leading_tokens(member_node)
                if child.type in ("accessibility_modifier", "static", "readonly")
            )
        return frozenset(
            _KEYWORD_MODIFIERS[keyword]
            for keyword in keywords
            if _KEYWORD_MODIFIERS.get(keyword) is not None
        )

    def is_optional(self, node: Node) -> bool:
        if node.type == "optional_parameter":
            return True
        if node.type in _PARAMETER_TYPES:
            return False
        head = self._recovered_head(node)
        if head is not None:
            return head.optional
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return False
        for child in node.children:
            if child.start_byte < name_node.end_byte:
                continue
            if child.type == "?":
                return True
            if child.type != COMMENT_TYPE:
                return False
        return False

    def get_accessor_kind(self, member_node: Node) -> AccessorKind:
        if member_node.type != "method_signature":
            return AccessorKind.NONE
        head = self._recovered_head(member_node)
        if head is not None:
            keywords = head.keywords
        else:
            keywords = tuple(child.type for child in self._leading_tokens(member_node))
        for keyword in keywords:
            if keyword in _KEYWORD_ACCESSORS:
                return _KEYWORD_ACCESSORS[keyword]
        return AccessorKind.NONE

    def is_malformed(self, member_node: Node) -> bool:
        if member_node.type not in _NAMED_MEMBER_TYPES:
            return False
        following = member_node.next_sibling
        if following is not None and following.type == _ERROR_TYPE:
            if not self._is_keyword_error(following):
                return True
        if not self._needs_recovery(member_node):
            return False
        if self._recovered_head(member_node) is None:
            return True
        # The recovered head covers the error; the rest of the member must be clean.
        head_end = self._head_end(member_node)
        return any(
            child.has_error or child.is_missing
            for child in member_node.children
            if child.start_byte >= head_end
        )

    def _leading_tokens(self, member_node: Node) -> List[Node]:
        return children_before(member_node, member_node.child_by_field_name("name"))

    # =========================================================================
    # Recovery of members the grammar rejected
    # =========================================================================

    def _leading_errors(self, member_node: Node) -> List[Node]:
        """Rejected keyword nodes directly before a member, in source order."""
        in_error = self._in_error(member_node)
        errors: List[Node] = []
        prev = member_node.prev_sibling
        while prev is not None:
            if prev.is_missing:
                split = prev.prev_sibling
                if split is None or not self._is_split_keywords(split):
                    break
                errors.insert(0, split)
                prev = split.prev_sibling
            elif (in_error or prev.type == _ERROR_TYPE) and self._is_keyword_error(prev):
                errors.insert(0, prev)
                prev = prev.prev_sibling
            else:
                break
        return errors

    def _is_split_keywords(self, member_node: Node) -> bool:
        """True for a bare keyword run the parser closed off with a missing separator."""
        following = member_node.next_sibling
        return (
            member_node.type == "property_signature"
            and following is not None
            and following.is_missing
            and self._is_keyword_error(member_node)
        )

    def _is_keyword_error(self, error_node: Node) -> bool:
        words = _HEAD_TOKEN.findall(_strip_comments(node_text(error_node, self._source)))
        return bool(words) and all(word in _HEAD_KEYWORDS for word in words)

    def _needs_recovery(self, member_node: Node) -> bool:
        if member_node.type not in _NAMED_MEMBER_TYPES:
            return False
        return (
            member_node.has_error
            or self._in_error(member_node)
            or bool(self._leading_errors(member_node))
        )

    def _in_error(self, member_node: Node) -> bool:
        parent = member_node.parent
        return parent is not None and parent.type == _ERROR_TYPE

    def _head_end(self, member_node: Node) -> int:
        starts = [
            child.start_byte
            for child in (
                member_node.child_by_field_name("type"),
                member_node.child_by_field_name("type_parameters"),
                member_node.child_by_field_name("parameters"),
            )
            if child is not None
        ]
        return min(starts) if starts else member_node.end_byte

    def _recovered_head(self, member_node: Node) -> Optional[_MemberHead]:
        """
        Read a member's keywords, name and '?' from the text before its type.

        Returns None when the member parsed cleanly, or when that text is not
        a run of modifier keywords followed by a plain name.
        """
        if not self._needs_recovery(member_node):
            return None

        errors = self._leading_errors(member_node)
        start = errors[0].start_byte if errors else member_node.start_byte
        text = self._source[start : self._head_end(member_node)].decode("utf-8", errors="replace")
        tokens = _HEAD_TOKEN.findall(_strip_comments(text))

        optional = bool(tokens) and tokens[-1] == "?"
        if optional:
            tokens = tokens[:-1]
        if not tokens:
            return None

        *keywords, name = tokens
        if not _NAME_TOKEN.fullmatch(name):
            return None
        if any(keyword not in _HEAD_KEYWORDS for keyword in keywords):
            return None
        return _MemberHead(name=unquote(name), keywords=tuple(keywords), optional=optional)

    # =========================================================================
    # Signatures
    # =========================================================================

    def get_parameters(self, signature_node: Node) -> List[Node]:
        params_node = signature_node.child_by_field_name("parameters")
        if params_node is None:
            return []
        return [
            param
            for param in named_children(params_node)
            if param.type in _PARAMETER_TYPES and not self._is_this_parameter(param)
        ]

    def get_parameter_name(self, param_node: Node) -> str:
        pattern = self._pattern(param_node)
        if pattern is None:
            return ""
        if pattern.type == "rest_pattern":
            inner = first_named_child(pattern)
            if inner is None:
                return normalize_whitespace(node_text(pattern, self._source))[3:]
            pattern = inner
        return normalize_whitespace(node_text(pattern, self._source))

    def is_rest_parameter(self, param_node: Node) -> bool:
        pattern = self._pattern(param_node)
        return pattern is not None and pattern.type == "rest_pattern"

    def _pattern(self, param_node: Node) -> Optional[Node]:
        return param_node.child_by_field_name("pattern") or first_named_child(param_node)

    def _is_this_parameter(self, param_node: Node) -> bool:
        pattern = self._pattern(param_node)
        return pattern is not None and pattern.type == "this"

    # =========================================================================
    # Types
    # =========================================================================

    def render_type(self, node: Node) -> str:
        annotation = node.child_by_field_name("type")
        # An untyped rest parameter still collects its arguments into an array.
        if annotation is None and node.type in _PARAMETER_TYPES and self.is_rest_parameter(node):
            return ANY_ARRAY
        return self._renderer.render_annotation(annotation)

    def render_optional_type(self, node: Node) -> str:
        annotation = node.child_by_field_name("type")
        if annotation is None:
            return self._renderer.render(None)
        return self._renderer.render_with_undefined(first_named_child(annotation))

    def render_return_type(self, signature_node: Node) -> str:
        if self.get_accessor_kind(signature_node) is AccessorKind.SETTER:
            return VOID
        return self._renderer.render_annotation(signature_node.child_by_field_name("return_type"))

    # =========================================================================
    # Documentation
    # =========================================================================

    def get_doc_comment(self, node: Node) -> Optional[str]:
        anchor = node
        while anchor.parent is not None and anchor.parent.type in _DECLARATION_WRAPPERS:
            anchor = anchor.parent

        prev = anchor.prev_sibling
        while prev is not None and prev.type == _ERROR_TYPE and self._is_keyword_error(prev):
            prev = prev.prev_sibling
        while prev is not None and prev.type == COMMENT_TYPE:
            text = node_text(prev, self._source)
            if text.startswith("/**"):
                return text
            prev = prev.prev_sibling
        return None


def _strip_comments(text: str) -> str:
    return _COMMENT_PATTERN.sub(" ", text)


__all__ = ["TreeSitterTypeOracle", "INTERFACE_NODE_TYPE", "ANY_ARRAY"]
