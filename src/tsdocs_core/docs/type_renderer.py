"""
Canonical rendering of TypeScript type nodes.

Renders a type from its syntax tree rather than echoing the source text,
so equivalent spellings produce the same string:

- whitespace and comments are dropped, tokens re-spaced
- redundant parentheses are dropped and re-added only where precedence needs them
- ``Array<T>`` renders as ``T[]`` and ``ReadonlyArray<T>`` as ``readonly T[]``
- union/intersection arms are flattened and de-duplicated in first-seen order
- a union holding ``any`` or ``unknown`` collapses to it; ``never`` arms drop out
- string literal types use double quotes
- object types render as ``{ a: string; b?: number; }``

This is a syntactic canonicalization. Type aliases are not resolved and
inferred types are not widened.

License: MIT
"""

from typing import List, Optional, Tuple

from tree_sitter import Node

from .nodes import (
    first_named_child,
    named_children,
    node_text,
    normalize_whitespace,
    property_name_text,
    unquote,
)

ANY = "any"
UNDEFINED = "undefined"
VOID = "void"

# Binding strength of rendered types, loosest first.
PREC_FUNCTION = 0  # function, constructor and conditional types
PREC_UNION = 1
PREC_INTERSECTION = 2
PREC_OPERATOR = 3  # keyof, readonly
PREC_POSTFIX = 4  # T[], T[K], typeof x
PREC_PRIMARY = 5

_Rendered = Tuple[str, int]


class TypeRenderer:
    """
    Render type nodes of one parsed source as canonical strings.

    Example:
        >>> renderer = TypeRenderer(source_bytes)
        >>> renderer.render(type_node)           # Array<string | number>
        '(string | number)[]'
        >>> renderer.render_with_undefined(type_node)
        '(string | number)[] | undefined'
    """

    def __init__(self, source: bytes) -> None:
        self._source = source

    # =========================================================================
    # Public API
    # =========================================================================

    def render(self, node: Optional[Node]) -> str:
        """Render a type node; a missing annotation renders as ``any``."""
        if node is None:
            return ANY
        text, _ = self._render(node)
        return text

    def render_annotation(self, annotation: Optional[Node]) -> str:
        """Render the type held by a ``: T`` annotation node."""
        if annotation is None:
            return ANY
        if annotation.type != "type_annotation":
            return self.render(annotation)
        return self.render(first_named_child(annotation))

    def render_with_undefined(self, node: Optional[Node]) -> str:
        """Render ``T | undefined`` for a declared type T.

        The union is built set-style: a type that already includes
        ``undefined`` keeps a single arm, and ``any``/``unknown`` absorb it.
        """
        if node is None:
            return ANY
        arms = self._union_arms(node)
        arms.append((UNDEFINED, UNDEFINED, PREC_PRIMARY))
        text, _ = self._join_union(arms)
        return text

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _render(self, node: Node) -> _Rendered:
        handler = getattr(self, f"_render_{node.type}", None)
        if handler is not None:
            return handler(node)
        return normalize_whitespace(self._text(node)), PREC_PRIMARY

    def _wrap(self, node: Node, min_prec: int) -> str:
        text, prec = self._render(node)
        return f"({text})" if prec < min_prec else text

    def _text(self, node: Node) -> str:
        return node_text(node, self._source)

    # =========================================================================
    # Unions and intersections
    # =========================================================================

    def _flatten(self, node: Node, kind: str) -> List[Node]:
        """Arms of a (possibly nested or parenthesized) union/intersection."""
        inner = self._strip_parens(node)
        if inner.type != kind:
            return [inner]
        arms: List[Node] = []
        for child in named_children(inner):
            arms.extend(self._flatten(child, kind))
        return arms

    def _strip_parens(self, node: Node) -> Node:
        while node.type == "parenthesized_type":
            inner = first_named_child(node)
            if inner is None:
                break
            node = inner
        return node

    def _union_arms(self, node: Node) -> List[Tuple[str, str, int]]:
        """(text in union context, bare text, bare precedence) per arm."""
        arms = []
        for arm in self._flatten(node, "union_type"):
            text, prec = self._render(arm)
            wrapped = f"({text})" if prec < PREC_INTERSECTION else text
            arms.append((wrapped, text, prec))
        return arms

    def _join_union(self, arms: List[Tuple[str, str, int]]) -> _Rendered:
        unique = _dedupe(arms)
        keys = [arm[0] for arm in unique]
        for absorbing in (ANY, "unknown"):
            if absorbing in keys:
                return absorbing, PREC_PRIMARY
        if len(unique) > 1:
            unique = [arm for arm in unique if arm[0] != "never"] or unique[:1]
        if len(unique) == 1:
            _, text, prec = unique[0]
            return text, prec
        return " | ".join(keys), PREC_UNION

    def _render_union_type(self, node: Node) -> _Rendered:
        return self._join_union(self._union_arms(node))

    def _render_intersection_type(self, node: Node) -> _Rendered:
        arms = []
        for arm in self._flatten(node, "intersection_type"):
            text, prec = self._render(arm)
            wrapped = f"({text})" if prec < PREC_OPERATOR else text
            arms.append((wrapped, text, prec))
        unique = _dedupe(arms)
        if len(unique) == 1:
            _, text, prec = unique[0]
            return text, prec
        return " & ".join(arm[0] for arm in unique), PREC_INTERSECTION

    def _render_parenthesized_type(self, node: Node) -> _Rendered:
        inner = first_named_child(node)
        if inner is None:
            return normalize_whitespace(self._text(node)), PREC_PRIMARY
        return self._render(inner)

    # =========================================================================
    # Postfix and operator types
    # =========================================================================

    def _render_array_type(self, node: Node) -> _Rendered:
        element = first_named_child(node)
        if element is None:
            return normalize_whitespace(self._text(node)), PREC_POSTFIX
        return f"{self._wrap(element, PREC_POSTFIX)}[]", PREC_POSTFIX

    def _render_generic_type(self, node: Node) -> _Rendered:
        name_node = node.child_by_field_name("name")
        args_node = node.child_by_field_name("type_arguments")
        if name_node is None or args_node is None:
            return normalize_whitespace(self._text(node)), PREC_PRIMARY

        name = normalize_whitespace(self._text(name_node))
        args = named_children(args_node)
        if len(args) == 1 and name == "Array":
            return f"{self._wrap(args[0], PREC_POSTFIX)}[]", PREC_POSTFIX
        if len(args) == 1 and name == "ReadonlyArray":
            return f"readonly {self._wrap(args[0], PREC_POSTFIX)}[]", PREC_OPERATOR

        rendered_args = ", ".join(self.render(arg) for arg in args)
        return f"{name}<{rendered_args}>", PREC_PRIMARY

    def _render_readonly_type(self, node: Node) -> _Rendered:
        inner = first_named_child(node)
        if inner is None:
            return normalize_whitespace(self._text(node)), PREC_OPERATOR
        return f"readonly {self._wrap(inner, PREC_OPERATOR)}", PREC_OPERATOR

    def _render_index_type_query(self, node: Node) -> _Rendered:
        inner = first_named_child(node)
        if inner is None:
            return normalize_whitespace(self._text(node)), PREC_OPERATOR
        return f"keyof {self._wrap(inner, PREC_OPERATOR)}", PREC_OPERATOR

    def _render_type_query(self, node: Node) -> _Rendered:
        return normalize_whitespace(self._text(node)), PREC_POSTFIX

    def _render_lookup_type(self, node: Node) -> _Rendered:
        parts = named_children(node)
        if len(parts) != 2:
            return normalize_whitespace(self._text(node)), PREC_POSTFIX
        obj, index = parts
        return f"{self._wrap(obj, PREC_POSTFIX)}[{self.render(index)}]", PREC_POSTFIX

    # =========================================================================
    # Literals
    # =========================================================================

    def _render_literal_type(self, node: Node) -> _Rendered:
        inner = first_named_child(node)
        if inner is not None and inner.type == "string":
            return self._render_string(inner)
        return normalize_whitespace(self._text(node)), PREC_PRIMARY

    def _render_string(self, node: Node) -> _Rendered:
        raw = self._text(node)
        body = unquote(raw)
        if raw.startswith("'"):
            body = body.replace("\\'", "'").replace('"', '\\"')
        return f'"{body}"', PREC_PRIMARY

    def _render_template_literal_type(self, node: Node) -> _Rendered:
        return self._text(node), PREC_PRIMARY

    # =========================================================================
    # Structured types
    # =========================================================================

    def _render_tuple_type(self, node: Node) -> _Rendered:
        elements = []
        for element in named_children(node):
            if element.type == "optional_type":
                inner = first_named_child(element)
                text = self._wrap(inner, PREC_POSTFIX) if inner is not None else ANY
                elements.append(f"{text}?")
            elif element.type == "rest_type":
                inner = first_named_child(element)
                elements.append(f"...{self.render(inner)}")
            elif element.type in ("required_parameter", "optional_parameter"):
                elements.append(self._render_parameter(element))
            else:
                elements.append(self.render(element))
        return f"[{', '.join(elements)}]", PREC_PRIMARY

    def _render_function_type(self, node: Node) -> _Rendered:
        return self._render_callable(node, prefix=""), PREC_FUNCTION

    def _render_constructor_type(self, node: Node) -> _Rendered:
        prefix = "abstract new " if self._text(node).lstrip().startswith("abstract") else "new "
        return self._render_callable(node, prefix=prefix), PREC_FUNCTION

    def _render_callable(self, node: Node, prefix: str) -> str:
        type_params = node.child_by_field_name("type_parameters")
        params = self._render_parameter_list(node.child_by_field_name("parameters"))
        return_node = node.child_by_field_name("return_type")
        generics = normalize_whitespace(self._text(type_params)) if type_params else ""
        return f"{prefix}{generics}({params}) => {self.render_annotation(return_node)}"

    def _render_conditional_type(self, node: Node) -> _Rendered:
        left = node.child_by_field_name("left")
        right = node.child_by_field_name("right")
        consequence = node.child_by_field_name("consequence")
        alternative = node.child_by_field_name("alternative")
        if None in (left, right, consequence, alternative):
            return normalize_whitespace(self._text(node)), PREC_FUNCTION
        return (
            f"{self._wrap(left, PREC_UNION)} extends {self._wrap(right, PREC_UNION)}"
            f" ? {self.render(consequence)} : {self.render(alternative)}",
            PREC_FUNCTION,
        )

    def _render_type_predicate(self, node: Node) -> _Rendered:
        name = node.child_by_field_name("name")
        predicate = node.child_by_field_name("type")
        if name is None or predicate is None:
            return normalize_whitespace(self._text(node)), PREC_PRIMARY
        return f"{self._text(name)} is {self.render(predicate)}", PREC_PRIMARY

    def _render_asserts_annotation(self, node: Node) -> _Rendered:
        inner = first_named_child(node)
        target = inner if inner is not None else node
        return normalize_whitespace(self._text(target)), PREC_PRIMARY

    def _render_type_predicate_annotation(self, node: Node) -> _Rendered:
        inner = first_named_child(node)
        if inner is None:
            return normalize_whitespace(self._text(node)), PREC_PRIMARY
        return self._render(inner)

    def _render_object_type(self, node: Node) -> _Rendered:
        members = [self._render_object_member(member) for member in named_children(node)]
        if not members:
            return "{}", PREC_PRIMARY
        return "{ " + "; ".join(members) + "; }", PREC_PRIMARY

    def _render_object_member(self, member: Node) -> str:
        if member.type == "property_signature":
            prefix = "readonly " if any(c.type == "readonly" for c in member.children) else ""
            name = self._member_name(member)
            optional = "?" if any(c.type == "?" for c in member.children) else ""
            type_text = self.render_annotation(member.child_by_field_name("type"))
            return f"{prefix}{name}{optional}: {type_text}"
        if member.type in ("method_signature", "call_signature", "construct_signature"):
            name = self._member_name(member) if member.type == "method_signature" else ""
            if member.type == "construct_signature":
                name = "new "
            optional = "?" if any(c.type == "?" for c in member.children) else ""
            params = self._render_parameter_list(member.child_by_field_name("parameters"))
            returns = self.render_annotation(member.child_by_field_name("return_type"))
            return f"{name}{optional}({params}): {returns}"
        return normalize_whitespace(self._text(member)).rstrip(";,")

    def _member_name(self, member: Node) -> str:
        name_node = member.child_by_field_name("name")
        if name_node is None:
            return ""
        return property_name_text(name_node, self._source)

    # =========================================================================
    # Parameters inside function and object types
    # =========================================================================

    def _render_parameter_list(self, params_node: Optional[Node]) -> str:
        if params_node is None:
            return ""
        return ", ".join(self._render_parameter(param) for param in named_children(params_node))

    def _render_parameter(self, param: Node) -> str:
        pattern = param.child_by_field_name("pattern") or first_named_child(param)
        type_text = self.render_annotation(param.child_by_field_name("type"))
        if pattern is None:
            return type_text
        if pattern.type == "rest_pattern":
            name = normalize_whitespace(self._text(pattern))
            return f"{name}: {type_text}"
        name = normalize_whitespace(self._text(pattern))
        optional = "?" if param.type == "optional_parameter" else ""
        return f"{name}{optional}: {type_text}"


def _dedupe(arms: List[Tuple[str, str, int]]) -> List[Tuple[str, str, int]]:
    seen = set()
    unique = []
    for arm in arms:
        if arm[0] in seen:
            continue
        seen.add(arm[0])
        unique.append(arm)
    return unique


__all__ = ["TypeRenderer", "ANY", "UNDEFINED", "VOID"]
