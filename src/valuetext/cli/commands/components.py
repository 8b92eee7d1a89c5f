# topmark:header:start
#
#   project      : ValueText
#   file         : components.py
#   file_relpath : src/valuetext/cli/commands/components.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ValueText `components` command.

Lists the registered components in dispatch order, marking the core ones.
"""

from __future__ import annotations

import json

import click

from valuetext.cli.options import OutputFormat, format_option
from valuetext.registry import ComponentMeta, ComponentRegistry


def _format_line(meta: ComponentMeta, width: int) -> str:
    marker = " (core)" if meta.core else ""
    shape = "arrays" if meta.arrays_only else ", ".join(meta.supported_types)
    return f"{meta.position:>2}. {meta.name:<{width}}  {shape}{marker}"


@click.command(
    name="components",
    help="List the registered components in dispatch order.",
)
@format_option
def components_command(*, output_format: OutputFormat) -> None:
    """List registered components.

    Args:
        output_format (OutputFormat): Plain text (default) or JSON.
    """
    metas: list[ComponentMeta] = list(ComponentRegistry().iter_meta())

    if output_format == OutputFormat.JSON:
        click.echo(json.dumps([m.to_dict() for m in metas], indent=2))
        return

    width: int = max((len(m.name) for m in metas), default=0)
    for meta in metas:
        click.echo(_format_line(meta, width))
