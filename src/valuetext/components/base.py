# topmark:header:start
#
#   project      : ValueText
#   file         : base.py
#   file_relpath : src/valuetext/components/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Component base class for the ValueText dispatcher.

A *component* is a pluggable text-formatting strategy for one family of values.
The dispatcher selects the first registered component whose shape flag and
supported types accept a value, then calls its
[`render`][valuetext.components.base.Component.render] method.

Responsibilities of a subclass:
    - Declare ``arrays_only``: ``True`` if the component only handles
      array-shaped values (see `valuetext.core.types.is_array_like`).
    - Declare ``supported_types``: a tuple of types matched with
      ``isinstance``, or [`ANY`][valuetext.components.base.ANY].
    - Implement ``render``; nested values must be rendered through the
      ``dispatcher`` argument (never with ``str()``/``repr()``) so that other
      components and the recursion guard apply.

Identity:
    The dispatcher identifies components by their concrete class. Registering a
    second instance of an already registered class is a no-op.

Example:
    ```python
    from valuetext.components.base import Component

    class MoneyComponent(Component):
        supported_types = (Money,)

        def render(self, value, dispatcher, *, verbose=False):
            return f"{value.amount} {value.currency}"
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, Union

if TYPE_CHECKING:
    from valuetext.core.dispatcher import Dispatcher


class _AnyType:
    """Sentinel type for "supports any type"."""

    _instance: _AnyType | None = None

    def __new__(cls) -> _AnyType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ANY"

    def __reduce__(self) -> str:
        return "ANY"


ANY: Final[_AnyType] = _AnyType()

SupportedTypes = Union[tuple[type, ...], _AnyType]


class Component:
    """Base class for text-formatting components.

    Attributes:
        arrays_only: ``True`` if the component only handles array-shaped values.
        supported_types: Types accepted via ``isinstance``, or ``ANY``.
        description: Short human-readable description (used by registry views).
    """

    __slots__ = ()

    arrays_only: bool = False
    supported_types: SupportedTypes = ANY
    description: str = ""

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        supported: Any = cls.__dict__.get("supported_types")
        if isinstance(supported, type):
            cls.supported_types = (supported,)
        elif supported is not None and supported is not ANY:
            supported = tuple(supported)
            if not supported or not all(isinstance(t, type) for t in supported):
                raise TypeError(
                    f"{cls.__name__}.supported_types must be ANY or a non-empty tuple of types"
                )
            cls.supported_types = supported

    def accepts(self, value: Any, *, is_array: bool) -> bool:
        """Return True if this component can render ``value``.

        Args:
            value (Any): The value to render (never None).
            is_array (bool): Whether ``value`` is array-shaped.

        Returns:
            bool: ``True`` if the shape flag matches and the type is supported.
        """
        if self.arrays_only != is_array:
            return False
        supported = self.supported_types
        if isinstance(supported, _AnyType):
            return True
        return isinstance(value, supported)

    def render(self, value: Any, dispatcher: Dispatcher, *, verbose: bool = False) -> str:
        """Return the text form of ``value``.

        Args:
            value (Any): The value to render; guaranteed to be accepted by
                [`accepts`][valuetext.components.base.Component.accepts].
            dispatcher (Dispatcher): The dispatcher to use for nested values.
            verbose (bool): Whether to include type information.

        Returns:
            str: The rendered text.
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
