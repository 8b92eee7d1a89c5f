# topmark:header:start
#
#   project      : ValueText
#   file         : dispatcher.py
#   file_relpath : src/valuetext/core/dispatcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ValueText dispatcher: special cases, registry lookup, component invocation.

A [`Dispatcher`][valuetext.core.dispatcher.Dispatcher] owns an ordered registry
of components. The registry always starts out as the core chain (see
`valuetext.components.core_components`) and always ends with the generic
reflective formatter.

Typical usage:
    ```python
    from valuetext import render, register_component, remove_component

    render(None)        # "<null>"
    render([1, "a"])    # "[1, 'a']"

    register_component(MoneyComponent())
    try:
        render(price)   # rendered by MoneyComponent
    finally:
        remove_component(MoneyComponent)
    ```

Notes:
    * Mutations (`register_component` / `remove_component`) are serialized under
      an ``RLock`` and replace the registry tuple in one assignment
      (copy-on-write). `render` reads a snapshot and never locks, so a concurrent
      call sees either the whole old or the whole new registry.
    * Registering a component whose class is a core class or already registered
      is silently ignored. Removing a core class or an unregistered class is
      silently ignored as well.
    * The module-level functions operate on a process-wide default dispatcher,
      built lazily by [`get_dispatcher`][valuetext.core.dispatcher.get_dispatcher].
      Construct independent `Dispatcher` instances for isolated use.

Recursion guard:
    Each dispatcher keeps per-thread render state: the ids of the values
    currently being rendered and the nesting depth. A value that contains itself
    renders as ``<cycle TypeName>`` at the point of re-entry; nesting deeper than
    ``max_depth`` renders as ``<truncated TypeName>``.
"""

from __future__ import annotations

import threading
from threading import RLock
from typing import TYPE_CHECKING, Any

from valuetext.components import core_components
from valuetext.components.base import Component
from valuetext.config.logging import get_logger
from valuetext.config.options import DEFAULT_OPTIONS_TABLE, OptionsTable
from valuetext.constants import CYCLE_TEMPLATE, DEFAULT_MAX_DEPTH, TRUNCATED_TEMPLATE
from valuetext.core.special import match_special
from valuetext.core.types import is_array_like, short_type_name

if TYPE_CHECKING:
    from valuetext.config.logging import ValueTextLogger
    from valuetext.core.special import SpecialCase

logger: ValueTextLogger = get_logger(__name__)


class _RenderState(threading.local):
    """Per-thread recursion bookkeeping."""

    def __init__(self) -> None:
        self.active: set[int] = set()
        self.depth: int = 0


class Dispatcher:
    """Type-directed renderer with a mutable, ordered component registry.

    Attributes:
        options: Render configuration table consulted by the generic formatter.
    """

    def __init__(
        self,
        *,
        options: OptionsTable | None = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        """Create a dispatcher holding only the core components.

        Args:
            options (OptionsTable | None): Render configuration; defaults to the
                process-wide table.
            max_depth (int): Maximum nesting depth before values are truncated.
        """
        self._lock = RLock()
        self._core: tuple[Component, ...] = core_components()
        self._core_types: frozenset[type[Component]] = frozenset(type(c) for c in self._core)
        self._components: tuple[Component, ...] = self._core
        self._state = _RenderState()
        self._max_depth: int = DEFAULT_MAX_DEPTH
        self.max_depth = max_depth
        self.options: OptionsTable = options if options is not None else DEFAULT_OPTIONS_TABLE

    # --- views ----------------------------------------------------------------

    @property
    def components(self) -> tuple[Component, ...]:
        """Snapshot of the registry in dispatch order."""
        return self._components

    @property
    def core_types(self) -> tuple[type[Component], ...]:
        """Classes of the core components, in registry order."""
        return tuple(type(c) for c in self._core)

    @property
    def fallback(self) -> Component:
        """The terminal generic component."""
        return self._components[-1]

    @property
    def max_depth(self) -> int:
        """Maximum nesting depth before values render as ``<truncated ...>``."""
        return self._max_depth

    @max_depth.setter
    def max_depth(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ValueError(f"max_depth must be a positive integer, got {value!r}")
        self._max_depth = value

    def is_core(self, component_type: type[Component]) -> bool:
        """Return True if ``component_type`` is a core component class."""
        return component_type in self._core_types

    def is_registered(self, component_type: type[Component]) -> bool:
        """Return True if a component of exactly ``component_type`` is in the registry."""
        return any(type(c) is component_type for c in self._components)

    # --- rendering --------------------------------------------------------------

    def find_component(self, value: Any) -> Component | None:
        """Return the first component accepting ``value``, else None.

        Special cases are not consulted.
        """
        is_array: bool = is_array_like(value)
        for component in self._components:
            if component.accepts(value, is_array=is_array):
                return component
        return None

    def render(self, value: Any, verbose: bool = False) -> str:
        """Return the text form of ``value``.

        Args:
            value (Any): Any runtime value.
            verbose (bool): Whether components should include type information.

        Returns:
            str: The rendered text.
        """
        case: SpecialCase | None = match_special(value)
        if case is not None:
            return case.formatter(value, self, verbose)

        component: Component | None = self.find_component(value)
        if component is None:
            logger.debug("No component for %s; using str()", type(value).__name__)
            return str(value)
        return self._render_guarded(component, value, verbose)

    def render_instance(self, value: Any, verbose: bool = False) -> str:
        """Render ``value`` with the generic formatter, bypassing dispatch.

        Intended for ``__str__`` implementations of domain objects.
        """
        if value is None:
            raise ValueError("A value is required.")
        return self._render_guarded(self.fallback, value, verbose)

    def _render_guarded(self, component: Component, value: Any, verbose: bool) -> str:
        state = self._state
        key: int = id(value)
        if key in state.active:
            return CYCLE_TEMPLATE.format(short_type_name(type(value)))
        if state.depth >= self._max_depth:
            return TRUNCATED_TEMPLATE.format(short_type_name(type(value)))

        state.active.add(key)
        state.depth += 1
        try:
            return component.render(value, self, verbose=verbose)
        finally:
            state.depth -= 1
            state.active.discard(key)

    # --- mutation ---------------------------------------------------------------

    def register_component(self, component: Component) -> bool:
        """Insert ``component`` immediately before the terminal fallback.

        Args:
            component (Component): The component to register.

        Returns:
            bool: ``True`` if the registry changed, ``False`` if the call was ignored
            (core class or already registered).

        Raises:
            ValueError: If ``component`` is None.
            TypeError: If ``component`` is not a `Component`.
        """
        if component is None:
            raise ValueError("A component is required.")
        if not isinstance(component, Component):
            raise TypeError(f"Expected a Component, got {type(component).__name__}")

        cls: type[Component] = type(component)
        with self._lock:
            if self.is_core(cls) or self.is_registered(cls):
                logger.debug("Ignoring registration of %s (core or duplicate)", cls.__name__)
                return False
            current = self._components
            self._components = (*current[:-1], component, current[-1])
        logger.debug("Registered component %s", cls.__name__)
        return True

    def register_components(self, *components: Component) -> None:
        """Register several components, in order."""
        for component in components:
            self.register_component(component)

    def remove_component(self, component_type: type[Component]) -> bool:
        """Remove the registered component of exactly ``component_type``.

        Args:
            component_type (type[Component]): Class of the component to remove.

        Returns:
            bool: ``True`` if a component was removed, else ``False`` (core class or
            not registered).

        Raises:
            ValueError: If ``component_type`` is None.
            TypeError: If ``component_type`` is not a class.
        """
        if component_type is None:
            raise ValueError("A component type is required.")
        if not isinstance(component_type, type):
            raise TypeError(f"Expected a Component class, got {type(component_type).__name__}")

        with self._lock:
            if self.is_core(component_type) or not self.is_registered(component_type):
                logger.debug("Ignoring removal of %s (core or unknown)", component_type.__name__)
                return False
            self._components = tuple(c for c in self._components if type(c) is not component_type)
        logger.debug("Removed component %s", component_type.__name__)
        return True

    def reset(self) -> None:
        """Drop every non-core component."""
        with self._lock:
            self._components = self._core


# --- process-wide default ---------------------------------------------------------

_default_dispatcher: Dispatcher | None = None
_default_lock = RLock()


def get_dispatcher() -> Dispatcher:
    """Return the process-wide dispatcher, creating it on first use."""
    global _default_dispatcher
    if _default_dispatcher is None:
        with _default_lock:
            if _default_dispatcher is None:
                _default_dispatcher = Dispatcher()
    return _default_dispatcher


def render(value: Any, verbose: bool = False) -> str:
    """Render ``value`` with the process-wide dispatcher."""
    return get_dispatcher().render(value, verbose)


def render_instance(value: Any, verbose: bool = False) -> str:
    """Render ``value`` with the generic formatter of the process-wide dispatcher."""
    return get_dispatcher().render_instance(value, verbose)


def register_component(component: Component) -> bool:
    """Register ``component`` with the process-wide dispatcher."""
    return get_dispatcher().register_component(component)


def register_components(*components: Component) -> None:
    """Register several components with the process-wide dispatcher."""
    get_dispatcher().register_components(*components)


def remove_component(component_type: type[Component]) -> bool:
    """Remove a component class from the process-wide dispatcher."""
    return get_dispatcher().remove_component(component_type)
