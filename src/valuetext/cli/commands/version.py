# topmark:header:start
#
#   project      : ValueText
#   file         : version.py
#   file_relpath : src/valuetext/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ValueText `version` command.

Prints the ValueText version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from valuetext.cli.options import OutputFormat, format_option
from valuetext.constants import VALUETEXT_VERSION


@click.command(
    name="version",
    help="Show the current version of ValueText.",
)
@format_option
def version_command(*, output_format: OutputFormat) -> None:
    """Show the current version of ValueText.

    Args:
        output_format (OutputFormat): Plain text (default) or JSON.
    """
    if output_format == OutputFormat.JSON:
        click.echo(json.dumps({"version": VALUETEXT_VERSION}))
    else:
        click.echo(VALUETEXT_VERSION)
