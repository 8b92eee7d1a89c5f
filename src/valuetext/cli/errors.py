# topmark:header:start
#
#   project      : ValueText
#   file         : errors.py
#   file_relpath : src/valuetext/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the ValueText CLI.

Raise these from commands to report errors with a plain message and a
[`ExitCode`][valuetext.cli.exit_codes.ExitCode]; Click prints them on STDERR.
"""

from __future__ import annotations

import click

from valuetext.cli.exit_codes import ExitCode


class ValueTextError(click.ClickException):
    """Base class for all ValueText CLI errors."""

    exit_code = ExitCode.FAILURE


class ValueTextConfigError(ValueTextError):
    """Settings file could not be read or failed validation."""

    exit_code = ExitCode.CONFIG_ERROR


class ValueTextInputError(ValueTextError):
    """An input expression is not a Python literal."""

    exit_code = ExitCode.DATA_ERROR


class ValueTextUsageError(ValueTextError):
    """The command was invoked without the input it needs."""

    exit_code = ExitCode.USAGE_ERROR
