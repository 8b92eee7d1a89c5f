# topmark:header:start
#
#   project      : ValueText
#   file         : config_defaults.py
#   file_relpath : src/valuetext/cli/commands/config_defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ValueText `config-defaults` command.

Prints the default settings as a commented TOML document, suitable as a
starting point for a settings file.
"""

from __future__ import annotations

import click

from valuetext.config.io import default_settings_toml


@click.command(
    name="config-defaults",
    help="Print the default ValueText settings (TOML).",
)
def config_defaults_command() -> None:
    """Print the default settings document to STDOUT."""
    click.echo(default_settings_toml(), nl=False)
