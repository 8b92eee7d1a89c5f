# topmark:header:start
#
#   project      : ValueText
#   file         : types.py
#   file_relpath : src/valuetext/core/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type descriptors and type naming helpers.

A [`TypeDescriptor`][valuetext.core.types.TypeDescriptor] captures what the
renderer needs to know about a concrete type: whether it is an enumerated kind
or a plain structure, and the ordered chain of supertypes that configuration
lookups walk. Descriptors are computed once per type and cached.

Notes:
    The chain always starts with the concrete type and never contains
    ``object``. For enumerated kinds the chain stops before ``enum.Enum``
    itself (and its flag/int/str variants), so configuration registered for the
    generic enum bases is never consulted.
"""

from __future__ import annotations

import array
import enum
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

_ENUM_ROOTS: frozenset[type] = frozenset(
    getattr(enum, name)
    for name in ("Enum", "ReprEnum", "IntEnum", "StrEnum", "Flag", "IntFlag")
    if hasattr(enum, name)
)

# Array-shaped builtins; NumPy-style arrays are detected structurally.
ARRAY_TYPES: tuple[type, ...] = (bytes, bytearray, memoryview, array.array)


class TypeKind(enum.Enum):
    """Tagged variant of a concrete type, as seen by the generic formatter."""

    STRUCT = "struct"
    ENUM = "enum"


@dataclass(frozen=True)
class TypeDescriptor:
    """Cached shape information about a concrete type.

    Attributes:
        type: The concrete type described.
        kind: ``TypeKind.ENUM`` for enumerated kinds, else ``TypeKind.STRUCT``.
        chain: The concrete type followed by its supertypes in MRO order,
            excluding ``object`` and the generic enum roots.
    """

    type: type
    kind: TypeKind
    chain: tuple[type, ...]

    @property
    def is_enum(self) -> bool:
        """Return True if the described type is an enumerated kind."""
        return self.kind is TypeKind.ENUM


@lru_cache(maxsize=None)
def describe(cls: type) -> TypeDescriptor:
    """Return the (cached) descriptor for ``cls``.

    Args:
        cls (type): The concrete type to describe.

    Returns:
        TypeDescriptor: Kind and supertype chain of ``cls``.
    """
    is_enum: bool = issubclass(cls, enum.Enum)
    chain: list[type] = []
    for base in cls.__mro__:
        if base is object or base in _ENUM_ROOTS:
            break
        chain.append(base)
    return TypeDescriptor(
        type=cls,
        kind=TypeKind.ENUM if is_enum else TypeKind.STRUCT,
        chain=tuple(chain),
    )


def is_array_like(value: Any) -> bool:
    """Return True if ``value`` is array-shaped.

    Array-shaped values are the builtin buffer types in
    [`ARRAY_TYPES`][valuetext.core.types.ARRAY_TYPES] and objects whose type
    exposes the NumPy ``__array_interface__`` protocol with at least one
    dimension. NumPy scalars and 0-d arrays are not array-shaped.
    """
    if isinstance(value, ARRAY_TYPES):
        return True
    return _has_array_protocol(value) and getattr(value, "ndim", 1) > 0


def _has_array_protocol(value: Any) -> bool:
    return hasattr(type(value), "__array_interface__") and hasattr(value, "tolist")


def is_zero_dim(value: Any) -> bool:
    """Return True for NumPy-style scalars and 0-d arrays (``ndim == 0``)."""
    return _has_array_protocol(value) and getattr(value, "ndim", 1) == 0


def short_type_name(cls: type) -> str:
    """Return the unqualified name of ``cls`` (e.g. ``"Point"``)."""
    return cls.__name__


def qualified_type_name(cls: type) -> str:
    """Return ``module.qualname`` for ``cls``; builtins are left unqualified."""
    module: str | None = getattr(cls, "__module__", None)
    qualname: str = getattr(cls, "__qualname__", cls.__name__)
    if not module or module == "builtins":
        return qualname
    return f"{module}.{qualname}"


def type_name(cls: type, *, qualified: bool) -> str:
    """Return the qualified or short name of ``cls``."""
    return qualified_type_name(cls) if qualified else short_type_name(cls)
