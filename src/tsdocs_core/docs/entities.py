"""Pydantic models for extracted documentation entries.

Entries are immutable value records. Python attributes are snake_case;
the wire format handed to documentation renderers is camelCase
(``entryType``, ``memberTags``, ``isRestParam``...), produced with
``model_dump(by_alias=True)`` or ``to_dict()``.
"""

from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel


class EntryType(str, Enum):
    """Kind of top-level declaration a DocEntry describes."""

    INTERFACE = "interface"


class MemberType(str, Enum):
    """Classification of an interface member."""

    PROPERTY = "property"
    METHOD = "method"
    GETTER = "getter"
    SETTER = "setter"


class MemberTags(str, Enum):
    """Modifier flags rendered on a member.

    A member with no tags is public, instance-level, mutable and required.
    """

    PROTECTED = "protected"
    STATIC = "static"
    READONLY = "readonly"
    OPTIONAL = "optional"


# Canonical order of tags on every member, whatever order the source used.
MEMBER_TAG_ORDER: Tuple[MemberTags, ...] = (
    MemberTags.PROTECTED,
    MemberTags.STATIC,
    MemberTags.READONLY,
    MemberTags.OPTIONAL,
)


class _Entry(BaseModel):
    """Shared configuration for all entry records."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to plain JSON-compatible data using wire (camelCase) names."""
        return self.model_dump(mode="json", by_alias=True)


class JsDocTagEntry(_Entry):
    """A JSDoc block tag such as ``@deprecated Use other()``."""

    name: str = Field(..., min_length=1, description="Tag name without '@'")
    comment: str = Field(default="", description="Text following the tag name")


class ParamEntry(_Entry):
    """One parameter of a method or setter signature."""

    name: str = Field(..., min_length=1, description="Declared parameter name")
    type: str = Field(..., min_length=1, description="Canonical type string")
    is_optional: bool = Field(default=False, description="Declared with a trailing '?'")
    is_rest_param: bool = Field(default=False, description="Declared with '...'")


class _MemberEntryBase(_Entry):
    name: str = Field(..., min_length=1, description="Member name")
    member_tags: Tuple[MemberTags, ...] = Field(
        default=(),
        description="Modifier tags in canonical order",
    )
    description: str = Field(default="", description="JSDoc description")
    jsdoc_tags: Tuple[JsDocTagEntry, ...] = Field(default=(), description="JSDoc block tags")


class PropertyEntry(_MemberEntryBase):
    """A data member of an interface."""

    member_type: Literal[MemberType.PROPERTY] = MemberType.PROPERTY
    type: str = Field(..., min_length=1, description="Canonical type string")


class MethodEntry(_MemberEntryBase):
    """A method signature or one half of an accessor pair.

    Getters carry the accessor's type as ``return_type`` and no params;
    setters return ``void`` and carry their single value parameter.
    """

    member_type: Literal[MemberType.METHOD, MemberType.GETTER, MemberType.SETTER] = (
        MemberType.METHOD
    )
    return_type: str = Field(..., min_length=1, description="Canonical return type string")
    params: Tuple[ParamEntry, ...] = Field(default=(), description="Parameters in order")


MemberEntry = Annotated[
    Union[PropertyEntry, MethodEntry],
    Field(discriminator="member_type"),
]


class DocEntry(_Entry):
    """Top-level extracted record for one declaration."""

    name: str = Field(..., min_length=1, description="Declared name")
    entry_type: EntryType
    description: str = Field(default="", description="JSDoc description")
    jsdoc_tags: Tuple[JsDocTagEntry, ...] = Field(default=(), description="JSDoc block tags")


class InterfaceEntry(DocEntry):
    """An exported interface and its public members in declaration order."""

    entry_type: Literal[EntryType.INTERFACE] = EntryType.INTERFACE
    members: Tuple[MemberEntry, ...] = Field(default=())


# Interfaces are the only entry kind extracted today; widen to a
# discriminated union on entry_type when another kind is added.
AnyDocEntry = InterfaceEntry

_DOC_ENTRIES_ADAPTER: TypeAdapter[List[AnyDocEntry]] = TypeAdapter(List[AnyDocEntry])


def parse_doc_entries(data: Any) -> List[AnyDocEntry]:
    """Validate serialized entries (wire names) back into entry models.

    Args:
        data: A list of dicts as produced by ``to_dict()``, or a JSON string
            or bytes holding such a list.

    Returns:
        List of validated entries.

    Raises:
        pydantic.ValidationError: If the data does not match the entry model.
    """
    if isinstance(data, (str, bytes)):
        return _DOC_ENTRIES_ADAPTER.validate_json(data)
    return _DOC_ENTRIES_ADAPTER.validate_python(data)


def dump_doc_entries(entries: List[AnyDocEntry]) -> bytes:
    """Serialize entries to JSON bytes using wire (camelCase) names."""
    return _DOC_ENTRIES_ADAPTER.dump_json(list(entries), by_alias=True)
