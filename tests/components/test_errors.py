# topmark:header:start
#
#   project      : ValueText
#   file         : test_errors.py
#   file_relpath : tests/components/test_errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions: one-line summary and root-cause traceback."""

from __future__ import annotations

from typing import TYPE_CHECKING

from valuetext.components.errors import root_cause

if TYPE_CHECKING:
    from valuetext.core.dispatcher import Dispatcher


def _chained() -> RuntimeError:
    try:
        try:
            raise KeyError("missing")
        except KeyError as inner:
            raise RuntimeError("lookup failed") from inner
    except RuntimeError as outer:
        return outer


def test_simple_form(dispatcher: Dispatcher) -> None:
    assert dispatcher.render(ValueError("bad value")) == "ValueError: bad value"


def test_simple_form_of_chained_exception(dispatcher: Dispatcher) -> None:
    assert dispatcher.render(_chained()) == "RuntimeError: lookup failed"


def test_verbose_form_is_root_cause_traceback(dispatcher: Dispatcher) -> None:
    text = dispatcher.render(_chained(), verbose=True)
    assert text.startswith("Traceback (most recent call last):")
    assert text.endswith("KeyError: 'missing'")
    assert "lookup failed" not in text


def test_verbose_form_without_traceback(dispatcher: Dispatcher) -> None:
    assert dispatcher.render(ValueError("x"), verbose=True) == "ValueError: x"


def test_root_cause() -> None:
    exc = _chained()
    assert isinstance(root_cause(exc), KeyError)
    assert root_cause(exc, depth=1) is exc.__cause__
    plain = ValueError("plain")
    assert root_cause(plain) is plain


def test_root_cause_survives_cycles() -> None:
    first = ValueError("first")
    second = ValueError("second")
    first.__cause__ = second
    second.__cause__ = first
    assert root_cause(first) is second


def test_implicit_context_is_followed() -> None:
    try:
        try:
            raise OSError("disk")
        except OSError:
            raise LookupError("wrapped")  # noqa: B904
    except LookupError as exc:
        assert isinstance(root_cause(exc), OSError)
