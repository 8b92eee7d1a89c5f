# topmark:header:start
#
#   project      : ValueText
#   file         : members.py
#   file_relpath : src/valuetext/core/members.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Member descriptors and filter chains for the generic reflective formatter.

Members of a value (fields, methods and properties) are first described as
[`MemberDescriptor`][valuetext.core.members.MemberDescriptor] instances, then
filtered by an ordered chain of plain predicates combined with logical AND.

Two chains exist:

* [`field_filters`][valuetext.core.members.field_filters] - data attributes
  (dataclass fields, ``__slots__`` and instance ``__dict__`` entries).
* [`getter_filters`][valuetext.core.members.getter_filters] - zero-argument,
  value-returning methods whose names match the configured prefix/suffix
  patterns, and properties.

Design:
    - Collection (``iter_fields`` / ``iter_accessors``) never touches member
      values; reading them is left to the formatter so that access failures can
      be handled per member.
    - Predicates are pure and can be reused by third-party components.
"""

from __future__ import annotations

import dataclasses
import inspect
from dataclasses import dataclass
from enum import Enum
from functools import cached_property
from typing import TYPE_CHECKING, Any, Callable

from valuetext.config.options import EXCLUDE_MARKER, EXCLUDE_METADATA_KEY

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from valuetext.config.options import RenderOptions


class MemberKind(Enum):
    """Kind of a described member."""

    FIELD = "field"
    METHOD = "method"
    PROPERTY = "property"


@dataclass(frozen=True)
class MemberDescriptor:
    """What the filters know about a member.

    Attributes:
        name: Attribute name as stored on the instance or class.
        kind: Field, method or property.
        owner: The class that declares the member.
        arity: Number of required arguments besides ``self`` (``-1`` if unknown).
        returns_value: ``False`` for methods annotated ``-> None``.
        excluded: ``True`` if the member carries an exclusion marker.
    """

    name: str
    kind: MemberKind
    owner: type
    arity: int = 0
    returns_value: bool = True
    excluded: bool = False

    @property
    def private(self) -> bool:
        """Return True for underscore-prefixed names (including dunders)."""
        return self.name.startswith("_")


MemberPredicate = Callable[[MemberDescriptor], bool]

# Universal methods every object carries; never rendered as getters.
DENIED_ACCESSORS: frozenset[str] = frozenset(
    {
        "__class__",
        "__dir__",
        "__eq__",
        "__format__",
        "__getstate__",
        "__hash__",
        "__init_subclass__",
        "__reduce__",
        "__reduce_ex__",
        "__repr__",
        "__sizeof__",
        "__str__",
        "__subclasshook__",
        "get_class",
        "hash_code",
        "to_string",
    }
)


def matches_all(member: MemberDescriptor, predicates: Iterable[MemberPredicate]) -> bool:
    """Return True if every predicate accepts ``member`` (short-circuits)."""
    return all(predicate(member) for predicate in predicates)


def is_field(member: MemberDescriptor) -> bool:
    return member.kind is MemberKind.FIELD


def is_accessor(member: MemberDescriptor) -> bool:
    return member.kind in (MemberKind.METHOD, MemberKind.PROPERTY)


def is_public(member: MemberDescriptor) -> bool:
    return not member.private


def has_no_arguments(member: MemberDescriptor) -> bool:
    return member.arity == 0


def returns_value(member: MemberDescriptor) -> bool:
    return member.returns_value


def is_not_denied(member: MemberDescriptor) -> bool:
    return member.name not in DENIED_ACCESSORS


def is_not_marked(member: MemberDescriptor) -> bool:
    return not member.excluded


def declared_by(cls: type) -> MemberPredicate:
    """Return a predicate accepting only members declared by ``cls`` itself."""

    def _declared(member: MemberDescriptor) -> bool:
        return member.owner is cls

    return _declared


def not_named(names: frozenset[str]) -> MemberPredicate:
    """Return a predicate rejecting members whose name is in ``names``."""

    def _not_named(member: MemberDescriptor) -> bool:
        return member.name not in names

    return _not_named


def name_matches(options: RenderOptions) -> MemberPredicate:
    """Return a predicate matching method names against the getter patterns.

    Properties are attribute-style accessors and always pass.
    """
    prefix = options.prefix_pattern
    suffix = options.suffix_pattern

    def _matches(member: MemberDescriptor) -> bool:
        if member.kind is MemberKind.PROPERTY:
            return True
        return bool(prefix.search(member.name)) and bool(suffix.search(member.name))

    return _matches


def field_filters(options: RenderOptions, concrete: type) -> tuple[MemberPredicate, ...]:
    """Build the ordered field filter chain for ``options``.

    Args:
        options (RenderOptions): Effective options of the rendered type.
        concrete (type): The concrete type of the rendered value.

    Returns:
        tuple[MemberPredicate, ...]: Predicates to combine with logical AND.
    """
    chain: list[MemberPredicate] = [is_field]
    if not options.private_access:
        chain.append(is_public)
    if not options.recursive:
        chain.append(declared_by(concrete))
    chain.append(is_not_marked)
    if options.exclude:
        chain.append(not_named(options.exclude))
    return tuple(chain)


def getter_filters(options: RenderOptions, concrete: type) -> tuple[MemberPredicate, ...]:
    """Build the ordered getter filter chain for ``options``.

    Args:
        options (RenderOptions): Effective options of the rendered type.
        concrete (type): The concrete type of the rendered value.

    Returns:
        tuple[MemberPredicate, ...]: Predicates to combine with logical AND.
    """
    chain: list[MemberPredicate] = [
        is_accessor,
        is_public,
        has_no_arguments,
        returns_value,
        name_matches(options),
        is_not_denied,
    ]
    if not options.recursive:
        chain.append(declared_by(concrete))
    chain.append(is_not_marked)
    if options.exclude:
        chain.append(not_named(options.exclude))
    return tuple(chain)


# --- collection -------------------------------------------------------------


def _own_annotations(cls: type) -> dict[str, Any]:
    try:
        return inspect.get_annotations(cls)
    except Exception:  # unresolvable lazy annotations
        return {}


def _field_owner(cls: type, name: str) -> type:
    """Return the most derived class in ``cls.__mro__`` that annotates or slots ``name``."""
    for base in cls.__mro__:
        if base is object:
            break
        if name in _own_annotations(base) or name in _own_slots(base):
            return base
    return cls


def _own_slots(cls: type) -> tuple[str, ...]:
    slots: Any = cls.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)
    names: list[str] = []
    for slot in slots:
        if slot in ("__dict__", "__weakref__"):
            continue
        if slot.startswith("__") and not slot.endswith("__"):
            slot = f"_{cls.__name__.lstrip('_')}{slot}"
        names.append(slot)
    return tuple(names)


def iter_fields(value: Any) -> Iterator[MemberDescriptor]:
    """Describe the data attributes of ``value`` in a stable order.

    Dataclasses yield their fields in declaration order. Other objects yield
    ``__slots__`` entries (base classes first) followed by the instance
    ``__dict__`` in insertion order.
    """
    cls: type = type(value)
    if dataclasses.is_dataclass(cls):
        for f in dataclasses.fields(value):
            yield MemberDescriptor(
                name=f.name,
                kind=MemberKind.FIELD,
                owner=_field_owner(cls, f.name),
                excluded=bool(f.metadata.get(EXCLUDE_METADATA_KEY, False)),
            )
        return

    seen: set[str] = set()
    for base in reversed(cls.__mro__):
        for slot in _own_slots(base):
            if slot in seen:
                continue
            seen.add(slot)
            yield MemberDescriptor(name=slot, kind=MemberKind.FIELD, owner=base)

    instance_dict: Any = getattr(value, "__dict__", None)
    if isinstance(instance_dict, dict):
        for name in list(instance_dict):
            if not isinstance(name, str) or name in seen:
                continue
            seen.add(name)
            yield MemberDescriptor(
                name=name, kind=MemberKind.FIELD, owner=_field_owner(cls, name)
            )


def _is_marked(func: Any) -> bool:
    return bool(getattr(func, EXCLUDE_MARKER, False))


def _describe_method(name: str, func: Any, owner: type) -> MemberDescriptor | None:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError, NameError):
        return None

    params = list(signature.parameters.values())
    positional = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    if not params or params[0].kind not in positional:
        # Not callable on an instance without arguments.
        arity = -1
    else:
        arity = sum(
            1
            for p in params[1:]
            if p.default is inspect.Parameter.empty
            and p.kind not in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
        )

    ret: Any = signature.return_annotation
    returns = not (ret is None or ret is type(None) or ret == "None")
    return MemberDescriptor(
        name=name,
        kind=MemberKind.METHOD,
        owner=owner,
        arity=arity,
        returns_value=returns,
        excluded=_is_marked(func),
    )


def _describe_accessor(name: str, attr: Any, owner: type) -> MemberDescriptor | None:
    if isinstance(attr, property):
        return MemberDescriptor(
            name=name, kind=MemberKind.PROPERTY, owner=owner, excluded=_is_marked(attr.fget)
        )
    if isinstance(attr, cached_property):
        return MemberDescriptor(
            name=name,
            kind=MemberKind.PROPERTY,
            owner=owner,
            excluded=_is_marked(attr) or _is_marked(attr.func),
        )
    if inspect.isfunction(attr):
        return _describe_method(name, attr, owner)
    # staticmethod, classmethod, nested classes and plain class attributes
    return None


def iter_accessors(cls: type) -> Iterator[MemberDescriptor]:
    """Describe the methods and properties of ``cls``, base-most classes first.

    An override keeps the position of the member it overrides but reports the
    overriding class as its owner.
    """
    found: dict[str, MemberDescriptor] = {}
    for base in reversed(cls.__mro__):
        if base is object:
            continue
        for name, attr in list(vars(base).items()):
            desc = _describe_accessor(name, attr, base)
            if desc is None:
                found.pop(name, None)
            else:
                found[name] = desc
    yield from found.values()
