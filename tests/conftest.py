# topmark:header:start
#
#   project      : ValueText
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the ValueText test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, ensuring consistent and verbose logging output during testing.

Notes:
    Tests that need registry or option changes should use the ``dispatcher``
    fixture (an isolated `Dispatcher` with its own `OptionsTable`) rather than
    mutate the process-wide dispatcher. Tests that must touch the process-wide
    dispatcher use ``default_dispatcher``, which drops non-core components
    afterwards.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, TypeVar, cast

import pytest

from valuetext.config import logging
from valuetext.config.options import OptionsTable
from valuetext.constants import LOG_LEVEL_ENV
from valuetext.core.dispatcher import Dispatcher, get_dispatcher

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_valuetext_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure ValueText's log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)


@pytest.fixture
def options_table() -> OptionsTable:
    """Return an empty, test-local options table."""
    return OptionsTable()


@pytest.fixture
def dispatcher(options_table: OptionsTable) -> Dispatcher:
    """Return an isolated dispatcher holding only the core components."""
    return Dispatcher(options=options_table)


@pytest.fixture
def default_dispatcher() -> Iterator[Dispatcher]:
    """Yield the process-wide dispatcher and drop non-core components afterwards."""
    d: Dispatcher = get_dispatcher()
    max_depth: int = d.max_depth
    try:
        yield d
    finally:
        d.reset()
        d.max_depth = max_depth


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Configure logging at TRACE level for the test suite.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)
