"""Pure functions over arbitrary values: search, iteration, predicates, guards.

Usage:
    from statekit import assert_, find, for_each_value, is_object

    first_even = find([1, 3, 4, 6], lambda n: n % 2 == 0)  # 4
    for_each_value({"a": 1}, lambda value, key: print(key, value))
    assert_(is_object(state), "state must be a mapping or a sequence")
"""

from __future__ import annotations

import datetime
import re
from collections.abc import Callable, Mapping, Sequence
from enum import Enum
from types import ModuleType
from typing import Any, TypeVar

from statekit.config import get_settings
from statekit.core.values.models import PreconditionError, Thenable, ValueKind

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")
R = TypeVar("R")

_TEXT_TYPES = (str, bytes)


def find(sequence: Sequence[T], predicate: Callable[[T], Any]) -> T | None:
    """Get the first item of a sequence that passes the predicate.

    Args:
        sequence: Items to scan, in order. Never mutated.
        predicate: Called with each item until it returns something truthy.

    Returns:
        The first matching item, or None if nothing matches or sequence is empty.
    """
    return next((item for item in sequence if predicate(item)), None)


def for_each_value(mapping: Mapping[K, V], fn: Callable[[V, K], Any]) -> None:
    """Call `fn(value, key)` for every key of a mapping, in insertion order.

    Keys are snapshotted before the first call, so `fn` may add or remove keys
    without disturbing the iteration. Keys removed by `fn` before their turn
    raise KeyError, as with any lookup of a missing key.

    Args:
        mapping: Mapping to iterate.
        fn: Callback receiving (value, key). Its return value is ignored.
    """
    for key in list(mapping.keys()):
        fn(mapping[key], key)


def partial(fn: Callable[[T], R], arg: T) -> Callable[[], R]:
    """Bind a single argument, producing a zero-argument callable.

    `arg` is captured by reference: a mutable composite is seen as it is
    when the closure runs, not when it was created.
    """

    def bound() -> R:
        return fn(arg)

    return bound


def kind_of(value: Any) -> ValueKind:
    """Classify a value by runtime capability, in fixed priority order.

    Checks: date, pattern, flat (set, bytearray), sequence, mapping, record,
    then falls back to scalar. Immutable text (str, bytes) is a scalar even
    though it is a Sequence. Classes, modules, callables and enum members are
    scalars even though they carry a `__dict__`.

    Args:
        value: Any value.

    Returns:
        The ValueKind describing how copies should treat the value.
    """
    if value is None:
        return ValueKind.SCALAR
    if isinstance(value, datetime.date):
        return ValueKind.DATE
    if isinstance(value, re.Pattern):
        return ValueKind.PATTERN
    if isinstance(value, (set, bytearray)):
        return ValueKind.FLAT
    if isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES):
        return ValueKind.SEQUENCE
    if isinstance(value, Mapping):
        return ValueKind.MAPPING
    if isinstance(value, (type, ModuleType, Enum)) or callable(value):
        return ValueKind.SCALAR
    if hasattr(value, "__dict__") or slot_names(type(value)):
        return ValueKind.RECORD
    return ValueKind.SCALAR


def slot_names(cls: type) -> list[str]:
    """List the attribute names declared through `__slots__` across the MRO.

    Private names are returned mangled (`__x` on class `Foo` is `_Foo__x`),
    matching how they are stored on instances. `__dict__` and `__weakref__`
    are not attributes and are skipped.
    """
    names: list[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{klass.__name__.lstrip('_')}{name}"
            if name not in names:
                names.append(name)
    return names


def is_object(value: Any) -> bool:
    """Check whether a value is a composite (a mapping or a non-text sequence).

    None, numbers, text, functions, dates, patterns and sets are not objects.
    """
    return kind_of(value).is_composite


def is_promise(value: Any) -> bool:
    """Check whether a value looks like a deferred result (has a callable `then`).

    Best-effort duck typing: the value is inspected, never resolved or awaited.
    Only attributes count: a mapping holding a "then" key is not a promise,
    and neither is an awaitable without a `then` method.
    """
    return value is not None and isinstance(value, Thenable) and callable(value.then)


def assert_(condition: Any, message: str) -> None:
    """Fail fast when a precondition does not hold.

    Args:
        condition: Anything; its truthiness is tested.
        message: Explanation, prefixed with the library namespace marker.

    Raises:
        PreconditionError: If condition is falsy.
    """
    if not condition:
        raise PreconditionError(f"[{get_settings().assert_namespace}] {message}")
