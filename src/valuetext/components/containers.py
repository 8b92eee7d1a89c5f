# topmark:header:start
#
#   project      : ValueText
#   file         : containers.py
#   file_relpath : src/valuetext/components/containers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core components for mapping entries and non-array collections.

Text forms:

| Value                  | Simple           | Verbose                           |
| ---------------------- | ---------------- | --------------------------------- |
| `Entry("a", 1)`        | `a = 1`          | `a = 1`                           |
| `{"a": 1, "b": 2}`     | `{a = 1, b = 2}` | `dict {a = 1, b = 2}`             |
| `[1, 2]`               | `[1, 2]`         | `list [1, 2]`                     |
| `(1,)`                 | `(1,)`           | `tuple (1,)`                      |
| `{2, 1}`               | `{1, 2}`         | `set {1, 2}`                      |
| `deque([1])`           | `[1]`            | `collections.deque [1]`           |

Set members are sorted by their rendered text so output is deterministic.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping, Set
from enum import Enum
from typing import TYPE_CHECKING, Any, NamedTuple

from valuetext.components.base import Component
from valuetext.core.types import qualified_type_name

if TYPE_CHECKING:
    from valuetext.core.dispatcher import Dispatcher


class Entry(NamedTuple):
    """A key/value pair as rendered inside mappings."""

    key: Any
    value: Any


class EntryComponent(Component):
    """Render an [`Entry`][valuetext.components.containers.Entry] as ``key = value``."""

    supported_types = (Entry,)
    description = "Mapping entries (key = value)"

    def render(self, value: Any, dispatcher: Dispatcher, *, verbose: bool = False) -> str:
        key: str = dispatcher.render(value.key, verbose=verbose)
        val: str = dispatcher.render(value.value, verbose=verbose)
        return f"{key} = {val}"


class CollectionComponent(Component):
    """Render mappings, sets, tuples and other sized iterables."""

    supported_types = (Mapping, Collection)
    description = "Mappings, sets, tuples and other collections"

    def accepts(self, value: Any, *, is_array: bool) -> bool:
        # Flag members and str-based enum members are iterable; they render by name.
        if isinstance(value, Enum):
            return False
        return super().accepts(value, is_array=is_array)

    def render(self, value: Any, dispatcher: Dispatcher, *, verbose: bool = False) -> str:
        body: str
        if isinstance(value, Mapping):
            items = [dispatcher.render(Entry(k, v), verbose=verbose) for k, v in value.items()]
            body = "{" + ", ".join(items) + "}"
        elif isinstance(value, Set):
            items = sorted(dispatcher.render(item, verbose=verbose) for item in value)
            body = "{" + ", ".join(items) + "}"
        elif isinstance(value, tuple):
            items = [dispatcher.render(item, verbose=verbose) for item in value]
            body = "(" + ", ".join(items) + ("," if len(items) == 1 else "") + ")"
        else:
            items = [dispatcher.render(item, verbose=verbose) for item in value]
            body = "[" + ", ".join(items) + "]"

        if verbose:
            return f"{qualified_type_name(type(value))} {body}"
        return body
