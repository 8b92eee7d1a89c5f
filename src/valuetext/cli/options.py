# topmark:header:start
#
#   project      : ValueText
#   file         : options.py
#   file_relpath : src/valuetext/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared CLI options and parameter types."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Generic, TypeVar, cast

import click

from valuetext.config.logging import TRACE_LEVEL, resolve_env_log_level

if TYPE_CHECKING:
    from collections.abc import Iterable

E = TypeVar("E", bound=Enum)
F = TypeVar("F", bound=Callable[..., Any])


class OutputFormat(str, Enum):
    """Output format for listing commands.

    Members:
      TEXT: Human-friendly text output.
      JSON: A single JSON document (machine-readable).
    """

    TEXT = "text"
    JSON = "json"


class EnumChoiceParam(click.ParamType, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls: type[E] = enum_cls
        self.name: str = enum_cls.__name__.lower()
        self.choices: list[str] = [str(e.value) for e in enum_cls]

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E:
        """Convert a string (case-insensitive) to a member of the Enum."""
        if isinstance(value, self.enum_cls):
            return value
        lookup: dict[str, E] = {
            str(choice.value).lower(): choice for choice in cast("Iterable[E]", self.enum_cls)
        }
        key = str(value).lower()
        if key in lookup:
            return lookup[key]
        self.fail(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def __repr__(self) -> str:
        return f"EnumChoiceParam({self.enum_cls.__name__})"


def common_verbose_options(f: F) -> F:
    """Add the counting ``-v/--verbose`` option to a command."""
    return click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase log verbosity (-v info, -vv debug, -vvv trace).",
    )(f)


def format_option(f: F) -> F:
    """Add ``--format text|json`` to a command."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=OutputFormat.TEXT.value,
        show_default=True,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)


def resolve_log_level(verbose: int) -> int | None:
    """Map the ``-v`` count to a log level; ``VALUETEXT_LOG_LEVEL`` wins when set.

    Returns:
        int | None: The log level, or None for the logging default.
    """
    level_env: int | None = resolve_env_log_level()
    if level_env is not None:
        return level_env
    if verbose <= 0:
        return None
    if verbose == 1:
        return logging.INFO
    if verbose == 2:
        return logging.DEBUG
    return TRACE_LEVEL
