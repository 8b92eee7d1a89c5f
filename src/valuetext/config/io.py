# topmark:header:start
#
#   project      : ValueText
#   file         : io.py
#   file_relpath : src/valuetext/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML settings for ValueText.

Settings live either in a standalone TOML file (top-level keys) or in the
``[tool.valuetext]`` table of ``pyproject.toml``:

```toml
[tool.valuetext]
max_depth = 16

[tool.valuetext.types."shop.models.Account"]
getter_access = true
exclude = ["password"]
```

Typical flow:
    1. Parse a file with [`load_settings`][valuetext.config.io.load_settings]
       (or a mapping with [`parse_settings`][valuetext.config.io.parse_settings]).
    2. Apply the result to a dispatcher with
       [`apply_settings`][valuetext.config.io.apply_settings].
    3. Serialize back with [`to_toml`][valuetext.config.io.to_toml]
       (``valuetext config-defaults`` prints
       [`default_settings_toml`][valuetext.config.io.default_settings_toml]).

Notes:
    - Parsing and dumping use `tomlkit`; parsed documents are unwrapped to plain
      Python values before validation.
    - Invalid documents raise [`SettingsError`][valuetext.config.io.SettingsError];
      nothing is applied from a document that fails validation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeGuard

import tomlkit
from tomlkit.exceptions import TOMLKitError

from valuetext.config.logging import get_logger
from valuetext.config.options import DEFAULT_OPTIONS, RenderOptions
from valuetext.constants import DEFAULT_MAX_DEPTH, PYPROJECT_NAME, PYPROJECT_TABLE

if TYPE_CHECKING:
    from collections.abc import Mapping

    from tomlkit.items import Table
    from tomlkit.toml_document import TOMLDocument

    from valuetext.config.logging import ValueTextLogger
    from valuetext.core.dispatcher import Dispatcher

logger: ValueTextLogger = get_logger(__name__)

TomlTable = dict[str, Any]

MAX_DEPTH_KEY = "max_depth"
TYPES_KEY = "types"

__all__: list[str] = [
    "Settings",
    "SettingsError",
    "TomlTable",
    "apply_settings",
    "default_settings_toml",
    "load_settings",
    "load_toml_dict",
    "parse_settings",
    "to_toml",
]


class SettingsError(ValueError):
    """Raised when a settings document cannot be read or is invalid."""


@dataclass(frozen=True)
class Settings:
    """Validated ValueText settings.

    Attributes:
        max_depth: Maximum nesting depth before values are truncated.
        types: Render options keyed by qualified type name.
        source: File the settings were read from, if any.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    types: dict[str, RenderOptions] = field(default_factory=dict)
    source: Path | None = field(default=None, compare=False)


def is_toml_table(val: Any) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping."""
    return isinstance(val, dict)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file into plain Python values.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        SettingsError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SettingsError(f"Cannot read settings file {path}: {exc}") from exc
    try:
        doc: TOMLDocument = tomlkit.parse(text)
    except TOMLKitError as exc:
        raise SettingsError(f"Invalid TOML in {path}: {exc}") from exc
    return doc.unwrap()


def _select_table(data: TomlTable, source: Path | None) -> TomlTable:
    """Return the ValueText table of a document.

    ``pyproject.toml`` files (and any document with a ``[tool]`` table) use
    ``[tool.valuetext]``; other documents use their top level.
    """
    is_pyproject: bool = source is not None and source.name == PYPROJECT_NAME
    if not is_pyproject and "tool" not in data:
        return data
    node: Any = data
    for key in PYPROJECT_TABLE:
        node = node.get(key) if is_toml_table(node) else None
    if node is None:
        logger.debug("No [%s] table in %s", ".".join(PYPROJECT_TABLE), source or "<document>")
        return {}
    if not is_toml_table(node):
        raise SettingsError(f"[{'.'.join(PYPROJECT_TABLE)}] must be a table")
    return node


def parse_settings(data: Mapping[str, Any], *, source: Path | None = None) -> Settings:
    """Validate a settings mapping.

    Args:
        data (Mapping[str, Any]): Either a full ``pyproject.toml`` mapping or a
            ValueText table.
        source (Path | None): Origin, used in messages and stored on the result.

    Returns:
        Settings: The validated settings.

    Raises:
        SettingsError: On unknown keys or values of the wrong type.
    """
    table: TomlTable = _select_table(dict(data), source)
    where: str = str(source) if source is not None else "settings"

    unknown: list[str] = sorted(set(table) - {MAX_DEPTH_KEY, TYPES_KEY})
    if unknown:
        raise SettingsError(f"{where}: unknown key(s): {', '.join(unknown)}")

    max_depth: Any = table.get(MAX_DEPTH_KEY, DEFAULT_MAX_DEPTH)
    if isinstance(max_depth, bool) or not isinstance(max_depth, int) or max_depth < 1:
        raise SettingsError(f"{where}: '{MAX_DEPTH_KEY}' must be a positive integer")

    raw_types: Any = table.get(TYPES_KEY, {})
    if not is_toml_table(raw_types):
        raise SettingsError(f"{where}: '{TYPES_KEY}' must be a table")

    types: dict[str, RenderOptions] = {}
    for name, raw in raw_types.items():
        if not name:
            raise SettingsError(f"{where}: empty type name in '{TYPES_KEY}'")
        if not is_toml_table(raw):
            raise SettingsError(f'{where}: {TYPES_KEY}."{name}" must be a table')
        try:
            types[name] = RenderOptions.from_mapping(raw)
        except ValueError as exc:
            raise SettingsError(f'{where}: {TYPES_KEY}."{name}": {exc}') from exc

    logger.debug("Parsed settings from %s: max_depth=%d, %d type(s)", where, max_depth, len(types))
    return Settings(max_depth=max_depth, types=types, source=source)


def load_settings(path: Path | str) -> Settings:
    """Read and validate a settings file.

    Args:
        path (Path | str): A standalone TOML file or a ``pyproject.toml``.

    Returns:
        Settings: The validated settings.

    Raises:
        SettingsError: If the file cannot be read, parsed or validated.
    """
    path = Path(path)
    logger.info("Loading settings from %s", path)
    return parse_settings(load_toml_dict(path), source=path)


def apply_settings(settings: Settings, dispatcher: Dispatcher | None = None) -> Dispatcher:
    """Apply ``settings`` to ``dispatcher`` (default: the process-wide dispatcher).

    Sets the depth limit and registers each type's options in the dispatcher's
    options table under its qualified name.

    Returns:
        Dispatcher: The dispatcher that was configured.
    """
    if dispatcher is None:
        from valuetext.core.dispatcher import get_dispatcher

        dispatcher = get_dispatcher()

    dispatcher.max_depth = settings.max_depth
    for name, options in settings.types.items():
        dispatcher.options.set(name, options)
    return dispatcher


def _options_table(options: RenderOptions) -> Table:
    table: Table = tomlkit.table()
    for key, value in options.to_dict().items():
        table.add(key, value)
    return table


def to_toml(settings: Settings) -> str:
    """Serialize ``settings`` as a standalone TOML document."""
    doc: TOMLDocument = tomlkit.document()
    doc.add(MAX_DEPTH_KEY, settings.max_depth)
    if settings.types:
        types: Table = tomlkit.table(is_super_table=True)
        for name, options in settings.types.items():
            types.add(name, _options_table(options))
        doc.add(TYPES_KEY, types)
    return tomlkit.dumps(doc)


def default_settings_toml() -> str:
    """Return a commented TOML document holding the default settings."""
    doc: TOMLDocument = tomlkit.document()
    doc.add(tomlkit.comment("ValueText settings."))
    doc.add(
        tomlkit.comment(f"Use the [{'.'.join(PYPROJECT_TABLE)}] table inside pyproject.toml.")
    )
    doc.add(tomlkit.nl())
    doc.add(tomlkit.comment("Nesting depth at which values render as <truncated Type>."))
    doc.add(MAX_DEPTH_KEY, DEFAULT_MAX_DEPTH)
    doc.add(tomlkit.nl())
    doc.add(tomlkit.comment("Per-type options, keyed by qualified type name. Defaults:"))
    doc.add(tomlkit.comment(""))
    doc.add(tomlkit.comment(f'[{TYPES_KEY}."package.module.Class"]'))
    for line in tomlkit.dumps(_options_table(DEFAULT_OPTIONS)).splitlines():
        doc.add(tomlkit.comment(line))
    return tomlkit.dumps(doc)
