"""
Interface entry builder.

Turns one interface declaration into an InterfaceEntry: members are
visited in source order, classified, and the included ones are assembled
from their tags, parameters and canonical types. Heritage clauses are
ignored; only members declared in the body itself are listed.

License: MIT
"""

from typing import Generic, List, Optional, TypeVar

import structlog

from .classifier import MemberClassifier
from .entities import InterfaceEntry, MemberEntry, MemberType, MethodEntry, PropertyEntry
from .exceptions import NotAnInterfaceError
from .jsdoc import parse_jsdoc
from .oracle import BaseTypeOracle
from .parameters import ParameterExtractor
from .tags import extract_member_tags

logger = structlog.get_logger(__name__)

N = TypeVar("N")


class InterfaceExtractor(Generic[N]):
    """
    Build InterfaceEntry records through an oracle.

    Args:
        oracle: Oracle over the parsed module holding the declarations.
        include_jsdoc: Attach JSDoc description and tags to entries.

    Example:
        >>> extractor = InterfaceExtractor(TreeSitterTypeOracle(source))
        >>> entry = extractor.extract(interface_node)
        >>> [m.name for m in entry.members]
        ['a', 'b']
    """

    def __init__(self, oracle: BaseTypeOracle[N], include_jsdoc: bool = True) -> None:
        self._oracle = oracle
        self._include_jsdoc = include_jsdoc
        self._classifier: MemberClassifier[N] = MemberClassifier(oracle)
        self._parameters: ParameterExtractor[N] = ParameterExtractor(oracle)
        self._log = logger.bind(extractor=self.__class__.__name__)

    def extract(self, node: N) -> InterfaceEntry:
        """
        Build the entry for one interface declaration.

        Args:
            node: An interface declaration node.

        Returns:
            InterfaceEntry with its included members in source order.

        Raises:
            NotAnInterfaceError: If node is not an interface declaration.
            UnclassifiableMemberError: If the body holds a node that is not a member.
            InvalidSignatureError: If a signature has a misplaced or optional rest parameter.
        """
        if not self._oracle.is_interface(node):
            raise NotAnInterfaceError(node_type=getattr(node, "type", type(node).__name__))

        name = self._oracle.get_name(node)
        body = self._oracle.get_members(node)
        private_accessors = self._classifier.private_accessor_names(body)

        members: List[MemberEntry] = []
        for member in body:
            member_type = self._classifier.classify(member, private_accessors)
            if member_type is None:
                continue
            members.append(self._build_member(member, member_type))

        description, jsdoc_tags = self._doc_fields(node)
        self._log.debug(
            "interface_extracted",
            interface=name,
            member_count=len(members),
            excluded_count=len(body) - len(members),
        )
        return InterfaceEntry(
            name=name,
            description=description,
            jsdoc_tags=jsdoc_tags,
            members=tuple(members),
        )

    def _build_member(self, member: N, member_type: MemberType) -> MemberEntry:
        name = self._oracle.get_name(member)
        tags = extract_member_tags(
            self._oracle.get_modifiers(member),
            self._oracle.is_optional(member),
        )
        description, jsdoc_tags = self._doc_fields(member)

        if member_type is MemberType.PROPERTY:
            return PropertyEntry(
                name=name,
                member_tags=tags,
                description=description,
                jsdoc_tags=jsdoc_tags,
                type=self._oracle.render_type(member),
            )

        # Getters take no parameters; their declared type is the return type.
        params = () if member_type is MemberType.GETTER else self._parameters.extract(member, name)
        return MethodEntry(
            name=name,
            member_type=member_type,
            member_tags=tags,
            description=description,
            jsdoc_tags=jsdoc_tags,
            return_type=self._oracle.render_return_type(member),
            params=params,
        )

    def _doc_fields(self, node: N):
        if not self._include_jsdoc:
            return "", ()
        raw: Optional[str] = self._oracle.get_doc_comment(node)
        return parse_jsdoc(raw)


__all__ = ["InterfaceExtractor"]
