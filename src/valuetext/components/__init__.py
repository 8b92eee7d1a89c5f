# topmark:header:start
#
#   project      : ValueText
#   file         : __init__.py
#   file_relpath : src/valuetext/components/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Component base class and the built-in (core) components.

The core chain is fixed. Its order matters: more specific components come first
and [`GeneralComponent`][valuetext.components.general.GeneralComponent] is always
last.
"""

from __future__ import annotations

from .arrays import ArrayComponent
from .base import ANY, Component
from .containers import CollectionComponent, Entry, EntryComponent
from .errors import ExceptionComponent
from .general import GeneralComponent
from .types import PathComponent, TypeComponent


def core_components() -> tuple[Component, ...]:
    """Return fresh instances of the core chain, ending with the generic fallback."""
    return (
        # Entry is a tuple; it must precede CollectionComponent.
        EntryComponent(),
        # Classes may be sized iterables (enum classes); names win.
        TypeComponent(),
        CollectionComponent(),
        ArrayComponent(),
        ExceptionComponent(),
        PathComponent(),
        GeneralComponent(),
    )


CORE_COMPONENT_TYPES: tuple[type[Component], ...] = tuple(type(c) for c in core_components())

__all__ = [
    "ANY",
    "ArrayComponent",
    "CORE_COMPONENT_TYPES",
    "CollectionComponent",
    "Component",
    "Entry",
    "EntryComponent",
    "ExceptionComponent",
    "GeneralComponent",
    "PathComponent",
    "TypeComponent",
    "core_components",
]
