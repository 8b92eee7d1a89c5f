# topmark:header:start
#
#   project      : ValueText
#   file         : render.py
#   file_relpath : src/valuetext/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ValueText `render` command.

Parses each argument as a Python literal (``ast.literal_eval``) and prints its
rendered text, one per line. A single ``-`` reads one literal per line from
STDIN.

Examples:
    ```bash
    valuetext render "[1, 'a', None]"        # [1, 'a', <null>]
    valuetext render --verbose "{'key': (1,)}" # dict {key = tuple (1,)}
    printf '1\n"x"\n' | valuetext render -
    ```
"""

from __future__ import annotations

import ast
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from valuetext.cli.errors import (
    ValueTextConfigError,
    ValueTextInputError,
    ValueTextUsageError,
)
from valuetext.config.io import SettingsError, apply_settings, load_settings
from valuetext.config.logging import get_logger
from valuetext.config.options import OptionsTable
from valuetext.core.dispatcher import Dispatcher

if TYPE_CHECKING:
    from collections.abc import Iterator

    from valuetext.config.io import Settings
    from valuetext.config.logging import ValueTextLogger

logger: ValueTextLogger = get_logger(__name__)

STDIN_MARKER = "-"


def parse_literal(expression: str) -> Any:
    """Return the Python value of ``expression``.

    Raises:
        ValueTextInputError: If ``expression`` is not a Python literal.
    """
    try:
        return ast.literal_eval(expression)
    except (ValueError, SyntaxError, TypeError, MemoryError, RecursionError) as exc:
        raise ValueTextInputError(f"Not a Python literal: {expression!r}") from exc


def iter_expressions(expressions: tuple[str, ...]) -> Iterator[str]:
    """Yield the expressions to render, expanding ``-`` into STDIN lines."""
    for expression in expressions:
        if expression == STDIN_MARKER:
            stdin = click.get_text_stream("stdin")
            for line in stdin:
                line = line.strip()
                if line:
                    yield line
        else:
            yield expression


def build_dispatcher(config_path: Path | None) -> Dispatcher:
    """Return a dispatcher isolated from the process-wide one, with settings applied."""
    dispatcher = Dispatcher(options=OptionsTable())
    if config_path is None:
        return dispatcher
    try:
        settings: Settings = load_settings(config_path)
    except SettingsError as exc:
        raise ValueTextConfigError(str(exc)) from exc
    return apply_settings(settings, dispatcher)


@click.command(
    name="render",
    help="Render Python literals as text ('-' reads one literal per line from STDIN).",
)
@click.option(
    "--verbose",
    "verbose_render",
    is_flag=True,
    default=False,
    help="Include type information in the output.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Settings file (standalone TOML or pyproject.toml).",
)
@click.argument("expressions", nargs=-1)
def render_command(
    *,
    expressions: tuple[str, ...],
    verbose_render: bool = False,
    config_path: Path | None = None,
) -> None:
    """Render each literal on its own line.

    Args:
        expressions (tuple[str, ...]): Python literals, or ``-`` for STDIN.
        verbose_render (bool): Render with type information.
        config_path (Path | None): Optional settings file.
    """
    if not expressions:
        raise ValueTextUsageError("Nothing to render: pass literals or '-' to read STDIN.")

    dispatcher: Dispatcher = build_dispatcher(config_path)
    for expression in iter_expressions(expressions):
        value: Any = parse_literal(expression)
        logger.debug("Rendering %s from %r", type(value).__name__, expression)
        click.echo(dispatcher.render(value, verbose=verbose_render))
