# topmark:header:start
#
#   project      : ValueText
#   file         : options.py
#   file_relpath : src/valuetext/config/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-type render configuration for the generic reflective formatter.

Configuration is held in an explicit, type-keyed
[`OptionsTable`][valuetext.config.options.OptionsTable] rather than on the
classes themselves. Keys are either types or qualified type names
(``"package.module.Class"``); the latter allows configuration files to refer to
types that have not been imported yet.

Typical usage:
    ```python
    from valuetext.config.options import render_exclude, render_options

    @render_options(getter_access=True, exclude={"secret"})
    class Account:
        def __init__(self) -> None:
            self.owner = "alice"
            self.secret = "hunter2"

        @render_exclude
        def get_token(self) -> str: ...
    ```

Notes:
    * Resolution walks the cached supertype chain of a concrete type (most derived
      first) and stops at the first type with an explicit entry; otherwise
      [`DEFAULT_OPTIONS`][valuetext.config.options.DEFAULT_OPTIONS] applies.
    * Table mutations are copy-on-write under an ``RLock``; lookups never lock.
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field, fields, replace
from functools import cached_property
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, TypeVar, Union

from valuetext.config.logging import get_logger
from valuetext.core.types import describe, qualified_type_name

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Mapping

logger = get_logger(__name__)

_T = TypeVar("_T")
_C = TypeVar("_C", bound=type)

OptionsKey = Union[type, str]

# Attribute set on functions by `render_exclude`.
EXCLUDE_MARKER: str = "__render_exclude__"

# Dataclass field metadata key marking a field as excluded.
EXCLUDE_METADATA_KEY: str = "render_exclude"


@dataclass(frozen=True)
class RenderOptions:
    """Render settings for one type (and, by inheritance, its subtypes).

    Attributes:
        short_name: Render the bare class name instead of ``module.qualname``.
        private_access: Include fields whose names start with an underscore.
        getter_access: Include getter-like accessors (methods and properties).
        getter_prefix: Regular expression searched in accessor method names.
        getter_suffix: Regular expression searched in accessor method names.
        recursive: Include members declared by supertypes, not only by the
            concrete type. A field counts as declared by a supertype only when
            that supertype annotates it or lists it in ``__slots__``; plain
            instance attributes set in a base ``__init__`` belong to the
            concrete type.
        exclude: Member names never rendered.
    """

    short_name: bool = True
    private_access: bool = False
    getter_access: bool = False
    getter_prefix: str = r"^(get_|is_)"
    getter_suffix: str = ""
    recursive: bool = True
    exclude: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if not isinstance(self.exclude, frozenset):
            object.__setattr__(self, "exclude", frozenset(self.exclude))
        for name in ("getter_prefix", "getter_suffix"):
            try:
                re.compile(getattr(self, name))
            except re.error as exc:
                raise ValueError(f"Invalid {name} pattern: {exc}") from exc

    @cached_property
    def prefix_pattern(self) -> re.Pattern[str]:
        """Compiled ``getter_prefix``."""
        return re.compile(self.getter_prefix)

    @cached_property
    def suffix_pattern(self) -> re.Pattern[str]:
        """Compiled ``getter_suffix``."""
        return re.compile(self.getter_suffix)

    def merged(self, **changes: Any) -> RenderOptions:
        """Return a copy with ``changes`` applied."""
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Return a TOML/JSON friendly mapping (``exclude`` as a sorted list)."""
        data: dict[str, Any] = asdict(self)
        data["exclude"] = sorted(self.exclude)
        return data

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> RenderOptions:
        """Build options from a plain mapping, validating keys and value types.

        Args:
            data (Mapping[str, Any]): Option names and values.

        Returns:
            RenderOptions: The validated options.

        Raises:
            ValueError: On unknown keys or values of the wrong type.
        """
        known: dict[str, Any] = {f.name: f.default for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            if key not in known:
                raise ValueError(f"Unknown render option: {key}")
            if key == "exclude":
                if not isinstance(value, (list, tuple, set, frozenset)) or not all(
                    isinstance(v, str) for v in value
                ):
                    raise ValueError("Render option 'exclude' must be a list of strings")
                kwargs[key] = frozenset(value)
                continue
            expected: type = type(known[key])
            if not isinstance(value, expected):
                raise ValueError(
                    f"Render option '{key}' must be of type {expected.__name__}, "
                    f"got {type(value).__name__}"
                )
            kwargs[key] = expected(value)
        return cls(**kwargs)


DEFAULT_OPTIONS: RenderOptions = RenderOptions()


class OptionsTable:
    """Type-keyed render configuration.

    Keys may be types or qualified type names. A type key takes precedence over a
    name key for the same class.
    """

    def __init__(self, entries: Mapping[OptionsKey, RenderOptions] | None = None) -> None:
        """Create a table, optionally pre-populated with ``entries``."""
        self._lock = RLock()
        self._by_type: Mapping[type, RenderOptions] = MappingProxyType({})
        self._by_name: Mapping[str, RenderOptions] = MappingProxyType({})
        for key, options in (entries or {}).items():
            self.set(key, options)

    @staticmethod
    def _check_key(key: OptionsKey | None) -> OptionsKey:
        if key is None or not isinstance(key, (type, str)) or key == "":
            raise ValueError("A type or qualified type name is required.")
        return key

    def set(self, key: OptionsKey, options: RenderOptions) -> None:
        """Register ``options`` for ``key`` (replacing any previous entry).

        Raises:
            ValueError: If ``key`` is not a type or non-empty string, or
                ``options`` is None.
        """
        key = self._check_key(key)
        if options is None:
            raise ValueError("RenderOptions are required.")
        with self._lock:
            if isinstance(key, type):
                by_type = dict(self._by_type)
                by_type[key] = options
                self._by_type = MappingProxyType(by_type)
            else:
                by_name = dict(self._by_name)
                by_name[key] = options
                self._by_name = MappingProxyType(by_name)
        logger.debug("Render options set for %s", key)

    def remove(self, key: OptionsKey) -> bool:
        """Remove the entry for ``key``.

        Returns:
            bool: ``True`` if an entry existed and was removed, else ``False``.
        """
        key = self._check_key(key)
        with self._lock:
            if isinstance(key, type):
                if key not in self._by_type:
                    return False
                by_type = dict(self._by_type)
                del by_type[key]
                self._by_type = MappingProxyType(by_type)
                return True
            if key not in self._by_name:
                return False
            by_name = dict(self._by_name)
            del by_name[key]
            self._by_name = MappingProxyType(by_name)
            return True

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._by_type = MappingProxyType({})
            self._by_name = MappingProxyType({})

    def get(self, key: OptionsKey) -> RenderOptions | None:
        """Return the explicit entry for ``key`` (no inheritance), else None."""
        if isinstance(key, type):
            return self._by_type.get(key) or self._by_name.get(qualified_type_name(key))
        return self._by_name.get(key)

    def resolve(self, cls: type) -> RenderOptions:
        """Return the effective options for ``cls``.

        Walks the supertype chain of ``cls`` (most derived first) and returns the
        first explicit entry, or [`DEFAULT_OPTIONS`][valuetext.config.options.DEFAULT_OPTIONS].
        """
        by_type = self._by_type
        by_name = self._by_name
        if not by_type and not by_name:
            return DEFAULT_OPTIONS
        for base in describe(cls).chain:
            found = by_type.get(base)
            if found is None and by_name:
                found = by_name.get(qualified_type_name(base))
            if found is not None:
                return found
        return DEFAULT_OPTIONS

    def as_mapping(self) -> Mapping[str, RenderOptions]:
        """Return a read-only mapping keyed by qualified type name."""
        merged: dict[str, RenderOptions] = dict(self._by_name)
        merged.update({qualified_type_name(t): o for t, o in self._by_type.items()})
        return MappingProxyType(merged)

    def update(self, entries: Iterable[tuple[OptionsKey, RenderOptions]]) -> None:
        """Register several entries."""
        with self._lock:
            for key, options in entries:
                self.set(key, options)


DEFAULT_OPTIONS_TABLE: OptionsTable = OptionsTable()


def configure_type(
    key: OptionsKey,
    options: RenderOptions | None = None,
    *,
    table: OptionsTable | None = None,
    **changes: Any,
) -> RenderOptions:
    """Register render options for a type in ``table`` (default: process-wide table).

    Args:
        key (OptionsKey): Type or qualified type name.
        options (RenderOptions | None): Base options; defaults to `DEFAULT_OPTIONS`.
        table (OptionsTable | None): Target table; defaults to the process-wide table.
        **changes (Any): Individual option overrides applied on top of ``options``.

    Returns:
        RenderOptions: The registered options.
    """
    effective: RenderOptions = (options or DEFAULT_OPTIONS).merged(**changes)
    (table or DEFAULT_OPTIONS_TABLE).set(key, effective)
    return effective


def render_options(**changes: Any) -> Callable[[_C], _C]:
    """Class decorator registering render options in the process-wide table."""

    def _decorator(cls: _C) -> _C:
        configure_type(cls, **changes)
        return cls

    return _decorator


def render_exclude(member: _T) -> _T:
    """Mark a method or property so the generic formatter never renders it.

    Works above or below ``@property`` and on ``functools.cached_property``.
    """
    if member is None:
        raise ValueError("A method or property is required.")
    target: Any = member.fget if isinstance(member, property) else getattr(member, "func", member)
    setattr(target, EXCLUDE_MARKER, True)
    return member
