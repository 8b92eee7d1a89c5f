# topmark:header:start
#
#   project      : ValueText
#   file         : general.py
#   file_relpath : src/valuetext/components/general.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Generic reflective formatter, the terminal fallback of every registry.

Renders a value of unknown shape as::

    TypeName{field1=v1, field2=v2, getter1()=g1, prop=p}

Behavior:
    * Enumerated kinds render their symbolic member name only (``RED``); no
      configuration applies to them.
    * Configuration is resolved per concrete type through the dispatcher's
      [`OptionsTable`][valuetext.config.options.OptionsTable].
    * Fields and accessors are selected by the filter chains of
      [`valuetext.core.members`][valuetext.core.members].
    * Member values are rendered through the dispatcher, so nested values get
      their own components (and the recursion guard).
    * Reading or rendering a member may fail (unset slot, raising property or
      getter); such members are omitted and the failure is logged at TRACE
      level. The overall render never fails because of a member.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from valuetext.components.base import ANY, Component
from valuetext.config.logging import get_logger
from valuetext.core.members import (
    MemberKind,
    field_filters,
    getter_filters,
    iter_accessors,
    iter_fields,
    matches_all,
)
from valuetext.core.types import describe, type_name

if TYPE_CHECKING:
    from enum import Enum

    from valuetext.config.logging import ValueTextLogger
    from valuetext.config.options import RenderOptions
    from valuetext.core.dispatcher import Dispatcher
    from valuetext.core.members import MemberDescriptor

logger: ValueTextLogger = get_logger(__name__)


def enum_name(member: Enum) -> str:
    """Return the symbolic name of an enum member (flag combinations included)."""
    name: str | None = member.name
    return name if name is not None else str(member)


class GeneralComponent(Component):
    """Reflective ``TypeName{...}`` formatter used when nothing more specific matches."""

    supported_types = ANY
    description = "Generic reflective formatter (terminal fallback)"

    def render(self, value: Any, dispatcher: Dispatcher, *, verbose: bool = False) -> str:
        cls: type = type(value)
        if describe(cls).is_enum:
            return enum_name(value)

        options: RenderOptions = dispatcher.options.resolve(cls)
        parts: list[str] = []

        chain = field_filters(options, cls)
        for member in iter_fields(value):
            if matches_all(member, chain):
                self._append_member(parts, value, member, dispatcher, verbose)

        if options.getter_access:
            chain = getter_filters(options, cls)
            for member in iter_accessors(cls):
                if matches_all(member, chain):
                    self._append_member(parts, value, member, dispatcher, verbose)

        name: str = type_name(cls, qualified=verbose or not options.short_name)
        return f"{name}{{{', '.join(parts)}}}"

    @staticmethod
    def _append_member(
        parts: list[str],
        value: Any,
        member: MemberDescriptor,
        dispatcher: Dispatcher,
        verbose: bool,
    ) -> None:
        try:
            result: Any = getattr(value, member.name)
            label: str = member.name
            if member.kind is MemberKind.METHOD:
                result = result()
                label = f"{member.name}()"
            text: str = dispatcher.render(result, verbose=verbose)
        except Exception as exc:
            logger.trace(
                "Omitting %s.%s (%s): %s: %s",
                type(value).__name__,
                member.name,
                member.kind.value,
                type(exc).__name__,
                exc,
            )
            return
        parts.append(f"{label}={text}")
