"""
Read-only syntax and type facility consumed by the entry builders.

The builders never touch tree-sitter nodes directly; they ask an oracle.
BaseTypeOracle fixes that contract so another backing (a real type-checker
bridge, for instance) can be substituted without touching the builders.

License: MIT
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import FrozenSet, Generic, List, Optional, TypeVar

N = TypeVar("N")


class Modifier(str, Enum):
    """Declared member modifiers the builders care about."""

    PRIVATE = "private"
    PROTECTED = "protected"
    STATIC = "static"
    READONLY = "readonly"


class AccessorKind(str, Enum):
    NONE = "none"
    GETTER = "getter"
    SETTER = "setter"


class MemberKind(str, Enum):
    """Syntactic kind of a node found in an interface body."""

    PROPERTY = "property"
    METHOD = "method"
    CALL_SIGNATURE = "call_signature"
    CONSTRUCT_SIGNATURE = "construct_signature"
    INDEX_SIGNATURE = "index_signature"


class BaseTypeOracle(ABC, Generic[N]):
    """
    Abstract AST and type facility over one parsed module.

    N is the backing node type. Every method is a pure query; an oracle
    never mutates the tree it reads.
    """

    # =========================================================================
    # Declarations
    # =========================================================================

    @abstractmethod
    def is_interface(self, node: N) -> bool:
        """True if node is an interface declaration."""
        ...

    @abstractmethod
    def get_name(self, node: N) -> str:
        """Declared name of an interface, member or parameter."""
        ...

    @abstractmethod
    def get_members(self, interface_node: N) -> List[N]:
        """Member declarations of an interface in source order."""
        ...

    @abstractmethod
    def get_member_kind(self, member_node: N) -> Optional[MemberKind]:
        """Syntactic kind of a body node, None if it is not a member at all."""
        ...

    @abstractmethod
    def get_modifiers(self, member_node: N) -> FrozenSet[Modifier]:
        ...

    @abstractmethod
    def is_optional(self, node: N) -> bool:
        """True if a member or parameter is declared with a trailing '?'."""
        ...

    @abstractmethod
    def get_accessor_kind(self, member_node: N) -> AccessorKind:
        ...

    def is_malformed(self, member_node: N) -> bool:
        """True if a member's declaration cannot be read reliably."""
        return False

    # =========================================================================
    # Signatures
    # =========================================================================

    @abstractmethod
    def get_parameters(self, signature_node: N) -> List[N]:
        """Runtime parameters of a signature in declaration order."""
        ...

    @abstractmethod
    def get_parameter_name(self, param_node: N) -> str:
        ...

    @abstractmethod
    def is_rest_parameter(self, param_node: N) -> bool:
        ...

    # =========================================================================
    # Types
    # =========================================================================

    @abstractmethod
    def render_type(self, node: N) -> str:
        """Canonical type of a property or parameter declaration."""
        ...

    @abstractmethod
    def render_optional_type(self, node: N) -> str:
        """Canonical type of a declaration unioned with undefined."""
        ...

    @abstractmethod
    def render_return_type(self, signature_node: N) -> str:
        ...

    # =========================================================================
    # Documentation
    # =========================================================================

    @abstractmethod
    def get_doc_comment(self, node: N) -> Optional[str]:
        """Raw text of the JSDoc comment attached to a declaration, if any."""
        ...


__all__ = [
    "Modifier",
    "AccessorKind",
    "MemberKind",
    "BaseTypeOracle",
]
