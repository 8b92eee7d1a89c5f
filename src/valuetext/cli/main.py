# topmark:header:start
#
#   project      : ValueText
#   file         : main.py
#   file_relpath : src/valuetext/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ValueText CLI entry point.

Group-level options are initialized once and placed into ``ctx.obj``;
subcommands read their shared state from there.
"""

from __future__ import annotations

import click

from valuetext.cli.commands.components import components_command
from valuetext.cli.commands.config_defaults import config_defaults_command
from valuetext.cli.commands.render import render_command
from valuetext.cli.commands.version import version_command
from valuetext.cli.options import common_verbose_options, resolve_log_level
from valuetext.config.logging import get_logger, setup_logging

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, verbose: int) -> None:
    """Initialize shared state (verbosity, logging) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
    """
    ctx.obj = ctx.obj or {}
    ctx.obj["verbosity_level"] = verbose

    level = resolve_log_level(verbose)
    ctx.obj["log_level"] = level
    setup_logging(level=level)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ValueText CLI: render Python values as readable text.",
)
@common_verbose_options
@click.pass_context
def cli(ctx: click.Context, verbose: int) -> None:
    """Entry point for the ValueText CLI."""
    init_common_state(ctx, verbose=verbose)

    if ctx.invoked_subcommand is None:
        click.echo("Hint: use 'valuetext render EXPR...' to render Python literals.")
        click.echo()
        click.echo(ctx.get_help())


cli.add_command(version_command)

cli.add_command(config_defaults_command)

cli.add_command(components_command)

cli.add_command(render_command)

if __name__ == "__main__":
    cli()
