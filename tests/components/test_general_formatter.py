# topmark:header:start
#
#   project      : ValueText
#   file         : test_general_formatter.py
#   file_relpath : tests/components/test_general_formatter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic reflective formatter: ``TypeName{field=value, ...}``."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, Flag, IntEnum
from typing import TYPE_CHECKING

import pytest

from valuetext.config.logging import TRACE_LEVEL
from valuetext.config.options import (
    EXCLUDE_METADATA_KEY,
    RenderOptions,
    render_exclude,
    render_options,
)
from valuetext.core.dispatcher import Dispatcher
from valuetext.core.types import qualified_type_name

if TYPE_CHECKING:
    from valuetext.config.options import OptionsTable


@dataclass
class Point:
    x: int
    y: int


@dataclass
class Line:
    start: Point
    end: Point


class Color(Enum):
    RED = 1
    GREEN = 2


class Priority(IntEnum):
    HIGH = 1


class Perm(Flag):
    R = 4
    W = 2


class Greeter:
    def __init__(self) -> None:
        self.greeting = "Hello"

    def get_greeting(self) -> str:
        return self.greeting

    def is_polite(self) -> bool:
        return True

    @property
    def loud(self) -> str:
        return self.greeting.upper()


class Account:
    def __init__(self) -> None:
        self.owner = "alice"
        self._pin = 1234


class Fragile:
    def __init__(self) -> None:
        self.ok = 1

    @property
    def broken(self) -> int:
        raise RuntimeError("boom")

    def get_failure(self) -> int:
        raise LookupError("nope")


class Partial:
    __slots__ = ("a", "b")

    def __init__(self) -> None:
        self.a = 1


class Animal:
    def __init__(self) -> None:
        self.legs = 4

    def get_sound(self) -> str:
        return "..."


class Dog(Animal):
    def get_sound(self) -> str:
        return "woof"


class Vault:
    def __init__(self) -> None:
        self.label = "main"

    @property
    @render_exclude
    def token(self) -> str:
        return "secret"

    @render_exclude
    @property
    def key(self) -> str:
        return "secret"

    @property
    def size(self) -> int:
        return 2


@dataclass
class Credentials:
    user: str
    password: str = field(default="", metadata={EXCLUDE_METADATA_KEY: True})


@render_options(getter_access=True)
class Decorated:
    def get_value(self) -> int:
        return 42


@dataclass
class Palette:
    primary: Color
    tags: list[str]


def test_dataclass(dispatcher: Dispatcher) -> None:
    assert dispatcher.render(Point(1, 2)) == "Point{x=1, y=2}"


def test_verbose_uses_qualified_name(dispatcher: Dispatcher) -> None:
    assert dispatcher.render(Point(1, 2), verbose=True) == f"{__name__}.Point{{x=1, y=2}}"


def test_short_name_option(dispatcher: Dispatcher, options_table: OptionsTable) -> None:
    options_table.set(Point, RenderOptions(short_name=False))
    assert dispatcher.render(Point(1, 2)) == f"{__name__}.Point{{x=1, y=2}}"


def test_nested_structures(dispatcher: Dispatcher) -> None:
    line = Line(Point(0, 0), Point(1, 1))
    assert dispatcher.render(line) == "Line{start=Point{x=0, y=0}, end=Point{x=1, y=1}}"


def test_fields_use_their_own_components(dispatcher: Dispatcher) -> None:
    palette = Palette(Color.GREEN, ["warm", "dark"])
    assert dispatcher.render(palette) == "Palette{primary=GREEN, tags=[warm, dark]}"


@pytest.mark.parametrize("verbose", [False, True])
def test_enum_members_render_their_name(dispatcher: Dispatcher, verbose: bool) -> None:
    assert dispatcher.render(Color.RED, verbose=verbose) == "RED"
    assert dispatcher.render(Priority.HIGH, verbose=verbose) == "HIGH"


def test_enum_ignores_configuration(dispatcher: Dispatcher, options_table: OptionsTable) -> None:
    options_table.set(Color, RenderOptions(short_name=False, getter_access=True))
    assert dispatcher.render(Color.RED) == "RED"


def test_flag_combination(dispatcher: Dispatcher) -> None:
    assert dispatcher.render(Perm.R) == "R"


class Tone(str, Enum):
    SOFT = "soft"


def test_str_enum_member_renders_name(dispatcher: Dispatcher) -> None:
    assert dispatcher.render(Tone.SOFT) == "SOFT"
    assert dispatcher.render([Tone.SOFT]) == "[SOFT]"


def test_getters_disabled_by_default(dispatcher: Dispatcher) -> None:
    assert dispatcher.render(Greeter()) == "Greeter{greeting=Hello}"


def test_getters_and_properties(dispatcher: Dispatcher, options_table: OptionsTable) -> None:
    options_table.set(Greeter, RenderOptions(getter_access=True))
    assert dispatcher.render(Greeter()) == (
        "Greeter{greeting=Hello, get_greeting()=Hello, is_polite()=<true>, loud=HELLO}"
    )


def test_getter_prefix(dispatcher: Dispatcher, options_table: OptionsTable) -> None:
    options_table.set(Greeter, RenderOptions(getter_access=True, getter_prefix="^is_"))
    assert dispatcher.render(Greeter()) == (
        "Greeter{greeting=Hello, is_polite()=<true>, loud=HELLO}"
    )


def test_private_fields(dispatcher: Dispatcher, options_table: OptionsTable) -> None:
    assert dispatcher.render(Account()) == "Account{owner=alice}"
    options_table.set(Account, RenderOptions(private_access=True))
    assert dispatcher.render(Account()) == "Account{owner=alice, _pin=1234}"


def test_options_by_qualified_name(dispatcher: Dispatcher, options_table: OptionsTable) -> None:
    options_table.set(qualified_type_name(Account), RenderOptions(private_access=True))
    assert dispatcher.render(Account()) == "Account{owner=alice, _pin=1234}"


def test_exclude_option(dispatcher: Dispatcher, options_table: OptionsTable) -> None:
    options_table.set(Point, RenderOptions(exclude=frozenset({"y"})))
    assert dispatcher.render(Point(1, 2)) == "Point{x=1}"


def test_failing_members_are_omitted(
    dispatcher: Dispatcher, options_table: OptionsTable, caplog: pytest.LogCaptureFixture
) -> None:
    options_table.set(Fragile, RenderOptions(getter_access=True))
    with caplog.at_level(TRACE_LEVEL, logger="valuetext.components.general"):
        assert dispatcher.render(Fragile()) == "Fragile{ok=1}"
    assert "broken" in caplog.text
    assert "get_failure" in caplog.text


def test_unset_slot_is_omitted(dispatcher: Dispatcher) -> None:
    assert dispatcher.render(Partial()) == "Partial{a=1}"


def test_options_are_inherited(dispatcher: Dispatcher, options_table: OptionsTable) -> None:
    options_table.set(Animal, RenderOptions(getter_access=True))
    assert dispatcher.render(Dog()) == "Dog{legs=4, get_sound()=woof}"


def test_non_recursive_getters(dispatcher: Dispatcher, options_table: OptionsTable) -> None:
    class Puppy(Dog):
        def get_age(self) -> int:
            return 1

    options_table.set(Puppy, RenderOptions(getter_access=True, recursive=False))
    # ``legs`` is set in ``Animal.__init__`` but not annotated; instance fields
    # without a declaring class belong to the concrete type.
    assert dispatcher.render(Puppy()) == "Puppy{legs=4, get_age()=1}"


def test_excluded_properties(dispatcher: Dispatcher, options_table: OptionsTable) -> None:
    options_table.set(Vault, RenderOptions(getter_access=True))
    assert dispatcher.render(Vault()) == "Vault{label=main, size=2}"


def test_excluded_dataclass_field(dispatcher: Dispatcher) -> None:
    assert dispatcher.render(Credentials("bob", "pw")) == "Credentials{user=bob}"


def test_render_options_decorator() -> None:
    assert Dispatcher().render(Decorated()) == "Decorated{get_value()=42}"


def test_empty_object(dispatcher: Dispatcher) -> None:
    class Empty:
        pass

    assert dispatcher.render(Empty()) == "Empty{}"
