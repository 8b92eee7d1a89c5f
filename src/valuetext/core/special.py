# topmark:header:start
#
#   project      : ValueText
#   file         : special.py
#   file_relpath : src/valuetext/core/special.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Special cases evaluated before any registry dispatch.

The table is fixed and ordered; the first matching predicate wins:

1. absent values (``None``, dead weak references) -> ``<null>``
2. booleans (NumPy boolean scalars included) -> ``<true>`` / ``<false>``
3. numbers and strings -> plain text; a one-character string is quoted (``'c'``)
4. other NumPy-style scalars and 0-d arrays -> their ``tolist()`` value, rendered
5. bare ``object()`` instances -> the generic formatter

Enum members are never primitive here, even when they derive from ``int`` or
``str``; they reach the generic formatter, which renders their name.
"""

from __future__ import annotations

import weakref
from enum import Enum
from numbers import Number
from typing import TYPE_CHECKING, Any, Callable, NamedTuple

from valuetext.constants import BOOL_TEMPLATE, NULL_TEXT
from valuetext.core.types import is_zero_dim

if TYPE_CHECKING:
    from valuetext.core.dispatcher import Dispatcher


class SpecialCase(NamedTuple):
    """One entry of the special-case table."""

    name: str
    predicate: Callable[[Any], bool]
    formatter: Callable[[Any, Dispatcher, bool], str]


def is_absent(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, weakref.ReferenceType) and value() is None


def is_boolean(value: Any) -> bool:
    if isinstance(value, bool):
        return True
    return is_zero_dim(value) and getattr(getattr(value, "dtype", None), "kind", None) == "b"


def is_primitive(value: Any) -> bool:
    return isinstance(value, (Number, str)) and not isinstance(value, Enum)


def is_bare_object(value: Any) -> bool:
    return type(value) is object


def format_absent(value: Any, dispatcher: Dispatcher, verbose: bool) -> str:
    return NULL_TEXT


def format_boolean(value: Any, dispatcher: Dispatcher, verbose: bool) -> str:
    return BOOL_TEMPLATE.format(str(bool(value)).lower())


def format_primitive(value: Any, dispatcher: Dispatcher, verbose: bool) -> str:
    if isinstance(value, str):
        return f"'{value}'" if len(value) == 1 else str(value)
    return str(value)


def format_zero_dim(value: Any, dispatcher: Dispatcher, verbose: bool) -> str:
    return dispatcher.render(value.tolist(), verbose)


def format_bare_object(value: Any, dispatcher: Dispatcher, verbose: bool) -> str:
    return dispatcher.fallback.render(value, dispatcher, verbose=verbose)


SPECIAL_CASES: tuple[SpecialCase, ...] = (
    SpecialCase("absent", is_absent, format_absent),
    SpecialCase("boolean", is_boolean, format_boolean),
    SpecialCase("primitive", is_primitive, format_primitive),
    SpecialCase("zero-dim", is_zero_dim, format_zero_dim),
    SpecialCase("bare-object", is_bare_object, format_bare_object),
)


def match_special(value: Any) -> SpecialCase | None:
    """Return the first special case whose predicate accepts ``value``, else None."""
    for case in SPECIAL_CASES:
        if case.predicate(value):
            return case
    return None
