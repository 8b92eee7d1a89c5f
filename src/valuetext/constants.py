# topmark:header:start
#
#   project      : ValueText
#   file         : constants.py
#   file_relpath : src/valuetext/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ValueText Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

VALUETEXT_VERSION: str = get_version("valuetext")

# Text emitted for absent values (None, dead weak references).
NULL_TEXT: str = "<null>"

# Boolean literals are wrapped so they cannot be mistaken for words in text.
BOOL_TEMPLATE: str = "<{}>"

# Nesting depth after which the dispatcher stops descending into a value.
DEFAULT_MAX_DEPTH: int = 32

CYCLE_TEMPLATE: str = "<cycle {}>"
TRUNCATED_TEMPLATE: str = "<truncated {}>"

# Environment variable consulted for the internal log level.
LOG_LEVEL_ENV: str = "VALUETEXT_LOG_LEVEL"

# Table used inside pyproject.toml for settings.
PYPROJECT_NAME: str = "pyproject.toml"
PYPROJECT_TABLE: tuple[str, str] = ("tool", "valuetext")
