"""Derivation of the ordered member tag list."""

from typing import AbstractSet, Tuple

from .entities import MEMBER_TAG_ORDER, MemberTags
from .oracle import Modifier

_MODIFIER_TAGS = {
    Modifier.PROTECTED: MemberTags.PROTECTED,
    Modifier.STATIC: MemberTags.STATIC,
    Modifier.READONLY: MemberTags.READONLY,
}


def extract_member_tags(
    modifiers: AbstractSet[Modifier],
    is_optional: bool,
) -> Tuple[MemberTags, ...]:
    """
    Build the tag list for one member.

    Tags always come out in the order protected, static, readonly,
    optional, whatever order the modifiers were written in. ``private``
    has no tag; private members never reach this point.

    Args:
        modifiers: Declared modifiers of the member.
        is_optional: True if the member was declared with a trailing '?'.

    Returns:
        Duplicate-free tuple of tags in canonical order.
    """
    present = {_MODIFIER_TAGS[m] for m in modifiers if m in _MODIFIER_TAGS}
    if is_optional:
        present.add(MemberTags.OPTIONAL)
    return tuple(tag for tag in MEMBER_TAG_ORDER if tag in present)


__all__ = ["extract_member_tags"]
