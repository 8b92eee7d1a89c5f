# topmark:header:start
#
#   project      : ValueText
#   file         : test_members.py
#   file_relpath : tests/core/test_members.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Member descriptors and filter chains."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property

from valuetext.config.options import DEFAULT_OPTIONS, EXCLUDE_METADATA_KEY, render_exclude
from valuetext.core.members import (
    MemberDescriptor,
    MemberKind,
    field_filters,
    getter_filters,
    iter_accessors,
    iter_fields,
    matches_all,
)


@dataclass
class Base:
    a: int
    _hidden: int = 0


@dataclass
class Child(Base):
    b: int = 0
    note: str = field(default="", metadata={EXCLUDE_METADATA_KEY: True})


class Slotted:
    __slots__ = ("x", "__y")

    def __init__(self) -> None:
        self.x = 1
        self.__y = 2


class Accessors:
    def get_name(self) -> str:
        return "n"

    def is_ready(self) -> bool:
        return True

    def get_with_arg(self, x: int) -> int:
        return x

    def get_nothing(self) -> None:
        pass

    def compute(self) -> int:
        return 1

    @property
    def size(self) -> int:
        return 3

    @render_exclude
    def get_secret(self) -> str:
        return "s"

    @cached_property
    @render_exclude
    def cached_secret(self) -> str:
        return "c"

    @staticmethod
    def get_static() -> int:
        return 0


class Override(Accessors):
    def get_name(self) -> str:
        return "m"


def _names(members: list[MemberDescriptor]) -> list[str]:
    return [m.name for m in members]


def test_dataclass_fields_in_declaration_order() -> None:
    members = list(iter_fields(Child(1, b=2)))
    assert _names(members) == ["a", "_hidden", "b", "note"]
    assert [m.owner for m in members] == [Base, Base, Child, Child]
    assert [m.excluded for m in members] == [False, False, False, True]
    assert all(m.kind is MemberKind.FIELD for m in members)


def test_slots_with_name_mangling() -> None:
    assert _names(list(iter_fields(Slotted()))) == ["x", "_Slotted__y"]


def test_instance_dict_fields() -> None:
    class Plain:
        def __init__(self) -> None:
            self.first = 1
            self.second = 2

    assert _names(list(iter_fields(Plain()))) == ["first", "second"]


def test_accessor_descriptions() -> None:
    found = {m.name: m for m in iter_accessors(Accessors)}
    assert found["get_name"].kind is MemberKind.METHOD
    assert found["get_with_arg"].arity == 1
    assert found["get_nothing"].returns_value is False
    assert found["size"].kind is MemberKind.PROPERTY
    assert found["get_secret"].excluded
    assert found["cached_secret"].excluded
    assert "get_static" not in found


def test_override_keeps_position_and_reports_owner() -> None:
    members = list(iter_accessors(Override))
    assert members[0].name == "get_name"
    assert members[0].owner is Override


def test_default_field_chain() -> None:
    chain = field_filters(DEFAULT_OPTIONS, Child)
    selected = [m for m in iter_fields(Child(1)) if matches_all(m, chain)]
    assert _names(selected) == ["a", "b"]


def test_private_field_access() -> None:
    chain = field_filters(DEFAULT_OPTIONS.merged(private_access=True), Child)
    selected = [m for m in iter_fields(Child(1)) if matches_all(m, chain)]
    assert _names(selected) == ["a", "_hidden", "b"]


def test_non_recursive_field_chain() -> None:
    chain = field_filters(DEFAULT_OPTIONS.merged(recursive=False), Child)
    selected = [m for m in iter_fields(Child(1)) if matches_all(m, chain)]
    assert _names(selected) == ["b"]


def test_exclude_by_name() -> None:
    chain = field_filters(DEFAULT_OPTIONS.merged(exclude={"a"}), Child)
    selected = [m for m in iter_fields(Child(1)) if matches_all(m, chain)]
    assert _names(selected) == ["b"]


def test_default_getter_chain() -> None:
    chain = getter_filters(DEFAULT_OPTIONS.merged(getter_access=True), Accessors)
    selected = [m for m in iter_accessors(Accessors) if matches_all(m, chain)]
    assert _names(selected) == ["get_name", "is_ready", "size"]


def test_getter_suffix_pattern() -> None:
    options = DEFAULT_OPTIONS.merged(getter_prefix="^get_", getter_suffix="_name$")
    chain = getter_filters(options, Accessors)
    selected = [m for m in iter_accessors(Accessors) if matches_all(m, chain)]
    # Properties are not subject to the name patterns.
    assert _names(selected) == ["get_name", "size"]


def test_denied_accessors_never_selected() -> None:
    class Legacy:
        def to_string(self) -> str:
            return "legacy"

        def hash_code(self) -> int:
            return 1

        def get_class(self) -> str:
            return "Legacy"

    options = DEFAULT_OPTIONS.merged(getter_prefix="")
    chain = getter_filters(options, Legacy)
    assert [m for m in iter_accessors(Legacy) if matches_all(m, chain)] == []
