# topmark:header:start
#
#   project      : ValueText
#   file         : arrays.py
#   file_relpath : src/valuetext/components/arrays.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core component for array-shaped values.

Handles ``bytes``, ``bytearray``, ``memoryview``, ``array.array`` and
NumPy-style arrays (anything exposing ``__array_interface__`` and ``tolist``).
Simple form is ``[a, b, c]``; verbose form prefixes the type and the length,
e.g. ``bytes[3] [104, 105, 33]``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from valuetext.components.base import ANY, Component
from valuetext.core.types import qualified_type_name

if TYPE_CHECKING:
    from valuetext.core.dispatcher import Dispatcher


def array_items(value: Any) -> list[Any]:
    """Return the elements of an array-shaped value as a list.

    Multi-dimensional arrays yield nested lists; a zero-dimensional array yields
    a one-element list.
    """
    if isinstance(value, (bytes, bytearray)):
        return list(value)
    tolist = getattr(value, "tolist", None)
    if callable(tolist):
        result: Any = tolist()
        return result if isinstance(result, list) else [result]
    return list(value)


class ArrayComponent(Component):
    """Render array-shaped values element by element."""

    arrays_only = True
    supported_types = ANY
    description = "Byte strings, buffers and typed arrays"

    def render(self, value: Any, dispatcher: Dispatcher, *, verbose: bool = False) -> str:
        items: list[Any] = array_items(value)
        body: str = "[" + ", ".join(dispatcher.render(i, verbose=verbose) for i in items) + "]"
        if verbose:
            return f"{qualified_type_name(type(value))}[{len(items)}] {body}"
        return body
