# topmark:header:start
#
#   project      : ValueText
#   file         : errors.py
#   file_relpath : src/valuetext/components/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core component for exceptions."""

from __future__ import annotations

import traceback
from typing import TYPE_CHECKING, Any

from valuetext.components.base import Component

if TYPE_CHECKING:
    from valuetext.core.dispatcher import Dispatcher


def root_cause(exc: BaseException, depth: int = 0) -> BaseException:
    """Follow the cause chain of ``exc``.

    Args:
        exc (BaseException): The exception to start from.
        depth (int): Maximum number of steps; ``0`` follows the chain to its root.

    Returns:
        BaseException: The root cause, or ``exc`` itself if it has no cause.
    """
    depth = max(0, depth)
    result: BaseException = exc
    seen: set[int] = {id(exc)}
    step = 0
    while depth == 0 or step < depth:
        nxt = result.__cause__
        if nxt is None and not result.__suppress_context__:
            nxt = result.__context__
        if nxt is None or id(nxt) in seen:
            break
        seen.add(id(nxt))
        result = nxt
        step += 1
    return result


class ExceptionComponent(Component):
    """Render exceptions.

    The simple form is the one-line ``Type: message`` summary. The verbose form is
    the full formatted traceback of the root cause.
    """

    supported_types = (BaseException,)
    description = "Exceptions (summary or root-cause traceback)"

    def render(self, value: Any, dispatcher: Dispatcher, *, verbose: bool = False) -> str:
        if verbose:
            root: BaseException = root_cause(value)
            lines = traceback.format_exception(type(root), root, root.__traceback__)
        else:
            lines = traceback.format_exception_only(type(value), value)
        return "".join(lines).rstrip("\n")
