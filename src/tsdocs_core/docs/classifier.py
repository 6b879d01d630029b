"""
Member classification for interface bodies.

Decides for each body node whether it becomes a property, method,
getter or setter record, or is left out of the entry.

License: MIT
"""

from typing import AbstractSet, FrozenSet, Generic, Iterable, Optional, TypeVar

import structlog

from .entities import MemberType
from .exceptions import UnclassifiableMemberError
from .oracle import AccessorKind, BaseTypeOracle, MemberKind, Modifier

logger = structlog.get_logger(__name__)

N = TypeVar("N")

# Unnamed signatures of the interface itself have no member record.
_UNNAMED_KINDS = (
    MemberKind.CALL_SIGNATURE,
    MemberKind.CONSTRUCT_SIGNATURE,
    MemberKind.INDEX_SIGNATURE,
)


class MemberClassifier(Generic[N]):
    """
    Classify interface members through an oracle.

    Priority, highest first:
        1. private on the member, or on either half of an accessor pair -> excluded
           (so are members that cannot be read or whose name is empty)
        2. get accessor -> getter
        3. set accessor -> setter
        4. member with a parameter list -> method
        5. anything else named -> property

    Example:
        >>> classifier = MemberClassifier(oracle)
        >>> private = classifier.private_accessor_names(members)
        >>> classifier.classify(member, private)
        <MemberType.GETTER: 'getter'>
    """

    def __init__(self, oracle: BaseTypeOracle[N]) -> None:
        self._oracle = oracle

    def private_accessor_names(self, members: Iterable[N]) -> FrozenSet[str]:
        """Names of accessors where at least one half is declared private."""
        names = set()
        for member in members:
            if self._oracle.get_accessor_kind(member) is AccessorKind.NONE:
                continue
            if Modifier.PRIVATE in self._oracle.get_modifiers(member):
                names.add(self._oracle.get_name(member))
        return frozenset(names)

    def classify(
        self,
        member: N,
        private_accessor_names: AbstractSet[str] = frozenset(),
    ) -> Optional[MemberType]:
        """
        Classify one body node.

        Args:
            member: A node returned by ``oracle.get_members``.
            private_accessor_names: Result of ``private_accessor_names`` over
                the same interface body.

        Returns:
            The member type, or None if the member is excluded.

        Raises:
            UnclassifiableMemberError: If the node is not a member kind at all.
        """
        kind = self._oracle.get_member_kind(member)
        if kind is None:
            raise UnclassifiableMemberError(
                node_type=getattr(member, "type", type(member).__name__),
                line=_line_of(member),
            )

        if kind in _UNNAMED_KINDS:
            logger.debug("member_excluded", reason="unnamed_signature", kind=kind.value)
            return None

        if self._oracle.is_malformed(member):
            logger.warning("member_excluded", reason="syntax_error", line=_line_of(member))
            return None

        accessor = self._oracle.get_accessor_kind(member)
        name = self._oracle.get_name(member)
        if not name:
            logger.debug("member_excluded", reason="empty_name", line=_line_of(member))
            return None

        if Modifier.PRIVATE in self._oracle.get_modifiers(member):
            logger.debug("member_excluded", reason="private", member=name)
            return None
        if accessor is not AccessorKind.NONE and name in private_accessor_names:
            logger.debug("member_excluded", reason="private_accessor_pair", member=name)
            return None

        if accessor is AccessorKind.GETTER:
            return MemberType.GETTER
        if accessor is AccessorKind.SETTER:
            return MemberType.SETTER
        if kind is MemberKind.METHOD:
            return MemberType.METHOD
        return MemberType.PROPERTY


def _line_of(member: object) -> int:
    start_point = getattr(member, "start_point", None)
    if start_point is None:
        return 0
    return start_point[0] + 1


__all__ = ["MemberClassifier"]
