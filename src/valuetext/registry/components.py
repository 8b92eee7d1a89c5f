# topmark:header:start
#
#   project      : ValueText
#   file         : components.py
#   file_relpath : src/valuetext/registry/components.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public component registry (advanced).

Exposes read-only views and mutation helpers over the component registry of a
[`Dispatcher`][valuetext.core.dispatcher.Dispatcher] (the process-wide one by
default). Intended for plugins, tooling (`valuetext components`) and tests.

Notes:
    * Views are snapshots: the dispatcher replaces its registry tuple on every
      mutation, so an iterator never observes a half-applied change.
    * `register()` / `unregister()` delegate to the dispatcher and keep its
      semantics: core classes and duplicates are ignored, not rejected.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterator

from valuetext.components.base import ANY
from valuetext.core.dispatcher import Dispatcher, get_dispatcher
from valuetext.core.types import qualified_type_name

if TYPE_CHECKING:
    from valuetext.components.base import Component


@dataclass(frozen=True)
class ComponentMeta:
    """Stable, serializable metadata about a registered component."""

    name: str
    qualified_name: str
    position: int
    arrays_only: bool = False
    supported_types: tuple[str, ...] = ()
    description: str = ""
    core: bool = False

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping of this metadata."""
        return {
            "name": self.name,
            "qualified_name": self.qualified_name,
            "position": self.position,
            "arrays_only": self.arrays_only,
            "supported_types": list(self.supported_types),
            "description": self.description,
            "core": self.core,
        }


def _supported_names(component: Component) -> tuple[str, ...]:
    supported = component.supported_types
    if not isinstance(supported, tuple):
        return (repr(ANY),)
    return tuple(qualified_type_name(t) for t in supported)


class ComponentRegistry:
    """Read-oriented view of a dispatcher's components with mutation hooks.

    Args:
        dispatcher (Dispatcher | None): The dispatcher to expose; defaults to the
            process-wide dispatcher.
    """

    def __init__(self, dispatcher: Dispatcher | None = None) -> None:
        self._dispatcher: Dispatcher = dispatcher if dispatcher is not None else get_dispatcher()

    @property
    def dispatcher(self) -> Dispatcher:
        return self._dispatcher

    def as_tuple(self) -> tuple[Component, ...]:
        """Return the registered components in dispatch order."""
        return self._dispatcher.components

    def names(self) -> tuple[str, ...]:
        """Return component class names in dispatch order."""
        return tuple(type(c).__name__ for c in self._dispatcher.components)

    def is_registered(self, component_type: type[Component]) -> bool:
        """Return True if a component of exactly ``component_type`` is registered."""
        return self._dispatcher.is_registered(component_type)

    def iter_meta(self) -> Iterator[ComponentMeta]:
        """Iterate over stable metadata for registered components.

        Yields:
            ComponentMeta: Serializable metadata about each component, in dispatch
            order.
        """
        for position, component in enumerate(self._dispatcher.components):
            cls: type[Component] = type(component)
            yield ComponentMeta(
                name=cls.__name__,
                qualified_name=qualified_type_name(cls),
                position=position,
                arrays_only=component.arrays_only,
                supported_types=_supported_names(component),
                description=component.description or (cls.__doc__ or "").strip().split("\n")[0],
                core=self._dispatcher.is_core(cls),
            )

    # Optional: mutation
    def register(self, component: Component) -> bool:
        """Register ``component`` before the terminal fallback.

        Returns:
            bool: True if the registry changed.
        """
        return self._dispatcher.register_component(component)

    def unregister(self, component_type: type[Component]) -> bool:
        """Remove the component of exactly ``component_type``.

        Returns:
            bool: True if removed, else False.
        """
        return self._dispatcher.remove_component(component_type)
