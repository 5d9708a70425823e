"""Cycle-safe deep copies of arbitrary values.

Two variants with a documented behavioral difference:

- `deep_copy`: cheap and generic. Sequences become lists, mappings become
  dicts, and anything else carrying state (dates, patterns, objects with
  attributes) is flattened into a plain dict of its own attributes, losing
  its type and behavior. Dates and patterns have no own attributes, so they
  become empty dicts.
- `deep_clone`: thorough. Dates and patterns get fresh equivalent instances,
  tuples and dict subclasses keep their type, and attribute-carrying objects
  (dataclasses, plain classes, pydantic models) are rebuilt with every own
  attribute, hidden ones included.

Both copy sets and bytearrays into new containers (their items are immutable),
and both register each container's copy in a VisitedSet before recursing into
its children, which is what keeps circular structures finite and shared
subtrees shared.

Usage:
    state = {"todos": [], "filter": "all"}
    state["self"] = state

    snapshot = deep_copy(state)
    assert snapshot["self"] is snapshot

Deep acyclic input can exceed the interpreter recursion limit; the
resulting RecursionError propagates.
"""

from __future__ import annotations

import datetime
import os
import re
import warnings
from collections import defaultdict
from typing import Any, TypeVar

from statekit.config import get_settings
from statekit.core.types import Copy
from statekit.core.values.models import ValueKind, VisitedSet
from statekit.core.values.operations import for_each_value, kind_of, slot_names

T = TypeVar("T")

_MISSING = object()

# Warnings point past every frame inside the package, at the caller's code.
_PACKAGE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(__file__))) + os.sep


def deep_copy(value: T, visited: VisitedSet | None = None) -> Copy[T]:
    """Deep copy a value into generic containers, preserving circular and shared structure.

    Args:
        value: Value to copy.
        visited: Visited set to thread through the copy. A fresh one is
            created when omitted; pass one explicitly to share copies
            across several related top-level values.

    Returns:
        The copy: a new list for each sequence, a new dict for each mapping
        and for each date, pattern or attribute-carrying object, a new set or
        bytearray for those, and scalars unchanged.

    Warns:
        UserWarning: When a date, pattern or attribute-carrying object is
            flattened into a dict (see `deep_clone`). Disabled by setting
            `STATEKIT_WARN_ON_LOSSY_COPY=false`.
    """
    if visited is None:
        visited = VisitedSet()

    kind = kind_of(value)
    if kind is ValueKind.SCALAR:
        return value

    if value in visited:
        return visited.get(value)  # type: ignore[no-any-return]

    if kind is ValueKind.FLAT:
        return visited.register(value, _copy_flat(value))  # type: ignore[no-any-return]

    if kind is ValueKind.SEQUENCE:
        items: list[Any] = visited.register(value, [])
        for item in value:  # type: ignore[attr-defined]
            items.append(deep_copy(item, visited))
        return items  # type: ignore[return-value]

    entries: dict[Any, Any] = visited.register(value, {})

    if kind is not ValueKind.MAPPING:
        if get_settings().warn_on_lossy_copy:
            warnings.warn(
                f"deep_copy() flattens {type(value).__name__} instances into dicts. "
                f"Use deep_clone() to keep their type.",
                stacklevel=2,
                skip_file_prefixes=(_PACKAGE_DIR,),
            )
        for name, attribute in _own_attributes(value):
            entries[name] = deep_copy(attribute, visited)
        return entries  # type: ignore[return-value]

    def store(item: Any, key: Any) -> None:
        entries[key] = deep_copy(item, visited)

    for_each_value(value, store)  # type: ignore[arg-type]
    return entries  # type: ignore[return-value]


def deep_clone(value: T, visited: VisitedSet | None = None) -> Copy[T]:
    """Deep copy a value with full fidelity, preserving circular and shared structure.

    Dispatch order: date, pattern, flat, sequence, mapping, record. Scalars
    are returned unchanged.

    Args:
        value: Value to clone.
        visited: Visited set to thread through the clone (see `deep_copy`).

    Returns:
        The clone.
    """
    if visited is None:
        visited = VisitedSet()

    kind = kind_of(value)
    if kind is ValueKind.SCALAR:
        return value
    if kind is ValueKind.DATE:
        return _clone_date(value)  # type: ignore[arg-type]
    if kind is ValueKind.PATTERN:
        # re interns compiled patterns: equivalent, not necessarily distinct.
        return re.compile(value.pattern, value.flags)  # type: ignore[attr-defined,return-value]

    if value in visited:
        return visited.get(value)  # type: ignore[no-any-return]

    if kind is ValueKind.FLAT:
        return visited.register(value, _copy_flat(value))  # type: ignore[no-any-return]
    if kind is ValueKind.SEQUENCE:
        return _clone_sequence(value, visited)
    if kind is ValueKind.MAPPING:
        return _clone_mapping(value, visited)
    return _clone_record(value, visited)


def _clone_date(value: datetime.date) -> datetime.date:
    """Build a new date/datetime of the same type for the same instant."""
    if isinstance(value, datetime.datetime):
        return type(value)(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.microsecond,
            value.tzinfo,
            fold=value.fold,
        )
    return type(value)(value.year, value.month, value.day)


def _clone_sequence(value: Any, visited: VisitedSet) -> Any:
    if not isinstance(value, tuple):
        items: list[Any] = visited.register(value, [])
        items.extend(deep_clone(item, visited) for item in value)
        return items

    # Tuples are immutable, so they can only be built after their items.
    cloned = [deep_clone(item, visited) for item in value]
    if value in visited:
        # One of the items led back here and already built the clone.
        return visited.get(value)
    if hasattr(type(value), "_fields"):
        return visited.register(value, type(value)._make(cloned))
    return visited.register(value, type(value)(cloned))


def _clone_mapping(value: Any, visited: VisitedSet) -> Any:
    entries = visited.register(value, _empty_mapping_like(value))

    def store(item: Any, key: Any) -> None:
        entries[key] = deep_clone(item, visited)

    for_each_value(value, store)
    if type(entries) is type(value) and hasattr(value, "__dict__"):
        _clone_attributes(value, entries, visited)
    return entries


def _empty_mapping_like(value: Any) -> dict[Any, Any]:
    """Create an empty mapping of the same concrete type when it is a dict.

    Dict subclasses whose constructor needs more arguments are built bare
    through `__new__`, like records. Non-dict mappings fall back to a plain dict.
    """
    if not isinstance(value, dict):
        return {}
    cls = type(value)
    is_defaultdict = isinstance(value, defaultdict)
    try:
        return cls(value.default_factory) if is_defaultdict else cls()
    except TypeError:
        empty = cls.__new__(cls)
        if is_defaultdict:
            empty.default_factory = value.default_factory
        return empty


def _copy_flat(value: set[Any] | bytearray) -> set[Any] | bytearray:
    """Copy a set or bytearray into a new plain one; items are shared, being immutable."""
    if isinstance(value, bytearray):
        return bytearray(value)
    return set(value)


def _clone_record(value: Any, visited: VisitedSet) -> Any:
    """Rebuild an attribute-carrying object without calling its __init__."""
    cls = type(value)
    clone = visited.register(value, cls.__new__(cls))
    _clone_attributes(value, clone, visited)
    return clone


def _clone_attributes(value: Any, clone: Any, visited: VisitedSet) -> None:
    # object.__setattr__ bypasses frozen dataclasses and custom __setattr__.
    for name, item in _own_attributes(value):
        object.__setattr__(clone, name, deep_clone(item, visited))


def _own_attributes(value: Any) -> list[tuple[str, Any]]:
    """List every attribute stored on the instance itself.

    Includes underscore-prefixed attributes and every assigned slot declared
    anywhere in the MRO. Unassigned slots are skipped.
    """
    attributes = list(vars(value).items()) if hasattr(value, "__dict__") else []
    for name in slot_names(type(value)):
        item = getattr(value, name, _MISSING)
        if item is not _MISSING:
            attributes.append((name, item))
    return attributes
