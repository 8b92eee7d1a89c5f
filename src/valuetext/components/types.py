# topmark:header:start
#
#   project      : ValueText
#   file         : types.py
#   file_relpath : src/valuetext/components/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core components for type objects and filesystem paths."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Any

from valuetext.components.base import Component
from valuetext.core.types import type_name

if TYPE_CHECKING:
    from valuetext.core.dispatcher import Dispatcher


class TypeComponent(Component):
    """Render classes by name: ``Point`` or, when verbose, ``geometry.Point``."""

    supported_types = (type,)
    description = "Classes (short or qualified name)"

    def render(self, value: Any, dispatcher: Dispatcher, *, verbose: bool = False) -> str:
        return type_name(value, qualified=verbose)


class PathComponent(Component):
    """Render path-like objects as their filesystem path (absolute when verbose)."""

    supported_types = (os.PathLike,)
    description = "Path-like objects"

    def render(self, value: Any, dispatcher: Dispatcher, *, verbose: bool = False) -> str:
        path: str = os.fsdecode(os.fspath(value))
        if verbose:
            return os.path.abspath(path)
        return path
