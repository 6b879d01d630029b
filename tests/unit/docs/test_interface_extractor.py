"""Tests for the InterfaceEntry builder."""

import pytest

from tsdocs_core.docs.entities import (
    EntryType,
    MemberTags,
    MemberType,
    MethodEntry,
    ParamEntry,
    PropertyEntry,
)
from tsdocs_core.docs.exceptions import InvalidSignatureError, NotAnInterfaceError
from tsdocs_core.docs.interface_extractor import InterfaceExtractor
from tsdocs_core.docs.ts_oracle import TreeSitterTypeOracle


@pytest.fixture
def build(parse_interface):
    """Factory fixture building the entry of the first interface in a source."""

    def _build(source: str, include_jsdoc: bool = True):
        node, oracle = parse_interface(source)
        return InterfaceExtractor(oracle, include_jsdoc=include_jsdoc).extract(node)

    return _build


class TestInterfaceExtractor:
    """Tests for InterfaceExtractor.extract."""

    def test_empty_interface(self, build):
        """Test an interface without members."""
        entry = build("interface UserProfile {}")

        assert entry.name == "UserProfile"
        assert entry.entry_type is EntryType.INTERFACE
        assert entry.members == ()

    def test_members(self, build):
        """Test a property and a method in source order."""
        entry = build("interface X { a: number; b(): string; }")

        assert entry.members == (
            PropertyEntry(name="a", type="number"),
            MethodEntry(name="b", return_type="string"),
        )

    def test_heritage_ignored(self, build):
        """Test inherited members are not listed and extends does not break extraction."""
        entry = build("interface Admin extends User, Auditable<string> { level: number; }")

        assert entry.name == "Admin"
        assert [m.name for m in entry.members] == ["level"]

    def test_generic_interface(self, build):
        """Test type parameters do not affect member extraction."""
        entry = build("interface Box<T> { value: T; map<U>(fn: (v: T) => U): Box<U>; }")
        value, map_method = entry.members

        assert value.type == "T"
        assert map_method.return_type == "Box<U>"
        assert map_method.params == (ParamEntry(name="fn", type="(v: T) => U"),)

    def test_accessor_records(self, build):
        """Test getter and setter shapes."""
        entry = build("interface X { get name(): string; set name(value: string); }")
        getter, setter = entry.members

        assert getter == MethodEntry(
            name="name", member_type=MemberType.GETTER, return_type="string"
        )
        assert setter == MethodEntry(
            name="name",
            member_type=MemberType.SETTER,
            return_type="void",
            params=(ParamEntry(name="value", type="string"),),
        )

    def test_overloads_are_separate_entries(self, build):
        """Test each overload signature is its own method record."""
        entry = build("interface X { f(a: string): void; f(a: number): void; }")

        assert [m.params[0].type for m in entry.members] == ["string", "number"]

    def test_private_members_excluded(self, build):
        """Test only non-private members remain, in order."""
        entry = build(
            """
            interface X {
                a: string;
                private b: string;
                c(): void;
                private d(): void;
            }
            """
        )

        assert [m.name for m in entry.members] == ["a", "c"]

    def test_tags_attached(self, build):
        """Test member tags reach the record."""
        entry = build("interface X { protected static readonly z?: string; }")

        assert entry.members[0].member_tags == (
            MemberTags.PROTECTED,
            MemberTags.STATIC,
            MemberTags.READONLY,
            MemberTags.OPTIONAL,
        )

    def test_jsdoc_attached(self, build):
        """Test descriptions and tags on interface and members."""
        entry = build(
            """
            /** A user profile. */
            interface X {
                /**
                 * Full name.
                 * @deprecated Use displayName.
                 */
                name: string;
            }
            """
        )

        assert entry.description == "A user profile."
        member = entry.members[0]
        assert member.description == "Full name."
        assert [(t.name, t.comment) for t in member.jsdoc_tags] == [
            ("deprecated", "Use displayName.")
        ]

    def test_jsdoc_disabled(self, build):
        """Test JSDoc can be switched off."""
        entry = build("/** A user. */ interface X { /** Id. */ id: number; }", include_jsdoc=False)

        assert entry.description == ""
        assert entry.members[0].description == ""

    def test_not_an_interface(self, parse_typescript):
        """Test other declarations are refused."""
        root, source = parse_typescript("class X {}")
        class_node = root.named_children[0]

        with pytest.raises(NotAnInterfaceError) as exc_info:
            InterfaceExtractor(TreeSitterTypeOracle(source)).extract(class_node)

        assert exc_info.value.node_type == "class_declaration"

    def test_invalid_signature_propagates(self, build):
        """Test a misplaced rest parameter is not turned into partial output."""
        with pytest.raises(InvalidSignatureError):
            build("interface X { f(...a: string[], b: number): void; }")

    def test_deterministic(self, build):
        """Test repeated extraction yields equal entries."""
        source = "interface X { a?: Array<string>; f(x?: number, ...r: number[]): void; }"

        assert build(source) == build(source)
