"""Tests for pure value operations.

Why these tests exist:
- find is the library's search primitive and must return the FIRST match
- is_object/is_promise drive sync vs. async and container vs. scalar branching
- assert_ is the only error-signaling primitive and must be distinguishable
"""

import datetime
import re
from enum import Enum
from types import SimpleNamespace

import pytest
from hypothesis import given
from hypothesis import strategies as st

from statekit import (
    PreconditionError,
    ValueKind,
    assert_,
    find,
    for_each_value,
    is_object,
    is_promise,
    kind_of,
    partial,
)
from statekit.core.values import slot_names


class Color(Enum):
    RED = 1


# find


@pytest.mark.parametrize(
    ("items", "expected"),
    [
        ([1, 3, 4, 6], 4),
        ([2], 2),
        ([1, 3, 5], None),
        ([], None),
    ],
    ids=["first-of-many", "single", "no-match", "empty"],
)
def test_find_returns_first_even(items, expected):
    assert find(items, lambda n: n % 2 == 0) == expected


def test_find_returns_first_match_by_position():
    """Equal-looking matches: the earliest one is returned, not a later one."""
    first = {"id": 1}
    second = {"id": 1}

    assert find([first, second], lambda item: item["id"] == 1) is first


def test_find_uses_predicate_truthiness():
    assert find(["", "a", "b"], lambda s: s) == "a"


@given(items=st.lists(st.integers()), threshold=st.integers())
def test_find_matches_linear_scan(items, threshold):
    """PROPERTY: find agrees with a manual scan and never mutates its input."""
    before = list(items)
    expected = None
    for item in items:
        if item > threshold:
            expected = item
            break

    assert find(items, lambda n: n > threshold) == expected
    assert items == before


# for_each_value


def test_for_each_value_visits_every_key_once():
    calls: list[tuple[int, str]] = []

    for_each_value({"a": 1, "b": 2}, lambda value, key: calls.append((value, key)))

    assert calls == [(1, "a"), (2, "b")]


def test_for_each_value_empty_mapping_never_calls():
    calls: list[object] = []

    for_each_value({}, lambda value, key: calls.append(key))

    assert calls == []


def test_for_each_value_tolerates_keys_added_during_iteration():
    """Keys present at the start are all visited; later keys are not."""
    mapping = {"a": 1, "b": 2}
    seen: list[str] = []

    def grow(value, key):
        seen.append(key)
        mapping[f"{key}-copy"] = value

    for_each_value(mapping, grow)

    assert seen == ["a", "b"]
    assert set(mapping) == {"a", "b", "a-copy", "b-copy"}


def test_for_each_value_rejects_non_mapping():
    with pytest.raises(AttributeError):
        for_each_value([1, 2], lambda value, key: None)  # type: ignore[arg-type]


# partial


def test_partial_calls_fn_with_bound_arg():
    def double(n: int) -> int:
        return n * 2

    assert partial(double, 5)() == double(5) == 10


def test_partial_captures_composites_by_reference():
    items: list[int] = []
    count = partial(len, items)

    items.append(1)

    assert count() == 1


# kind_of / is_object


@pytest.mark.parametrize(
    ("value", "kind"),
    [
        (None, ValueKind.SCALAR),
        (True, ValueKind.SCALAR),
        (42, ValueKind.SCALAR),
        (1.5, ValueKind.SCALAR),
        ("text", ValueKind.SCALAR),
        (b"bytes", ValueKind.SCALAR),
        (len, ValueKind.SCALAR),
        (lambda: None, ValueKind.SCALAR),
        (int, ValueKind.SCALAR),
        (re, ValueKind.SCALAR),
        (Color.RED, ValueKind.SCALAR),
        (datetime.date(2024, 1, 1), ValueKind.DATE),
        (datetime.datetime(2024, 1, 1, 12), ValueKind.DATE),
        (re.compile("a+"), ValueKind.PATTERN),
        ({1}, ValueKind.FLAT),
        (bytearray(b"buf"), ValueKind.FLAT),
        (frozenset({1}), ValueKind.SCALAR),
        ([], ValueKind.SEQUENCE),
        ((1, 2), ValueKind.SEQUENCE),
        ({}, ValueKind.MAPPING),
        (SimpleNamespace(x=1), ValueKind.RECORD),
    ],
    ids=lambda v: type(v).__name__,
)
def test_kind_of(value, kind):
    assert kind_of(value) is kind


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, False),
        (42, False),
        ("text", False),
        (lambda: None, False),
        (datetime.datetime(2024, 1, 1), False),
        (SimpleNamespace(x=1), False),
        ([], True),
        ((), True),
        ({1}, False),
        ({}, True),
    ],
)
def test_is_object(value, expected):
    assert is_object(value) is expected


def test_slot_names_walks_mro_and_mangles_private_names():
    class Base:
        __slots__ = ("x", "__weakref__")

    class Child(Base):
        __slots__ = "__secret"

    assert slot_names(Child) == ["_Child__secret", "x"]


# is_promise


class Deferred:
    def then(self, callback):
        return callback(None)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (SimpleNamespace(then=lambda callback: None), True),
        (Deferred(), True),
        (SimpleNamespace(then=5), False),
        # Keys are not attributes: a dict with a "then" entry is plain data.
        ({"then": lambda: None}, False),
        ({}, False),
        (None, False),
        (0, False),
    ],
    ids=["namespace", "class", "non-callable", "mapping-key", "empty", "none", "zero"],
)
def test_is_promise(value, expected):
    assert is_promise(value) is expected


# assert_


def test_assert_passes_silently_on_truthy_condition():
    assert assert_(True, "x") is None
    assert_([0], "non-empty list is truthy")


@pytest.mark.parametrize("condition", [False, None, 0, "", []])
def test_assert_raises_precondition_error_on_falsy_condition(condition):
    with pytest.raises(PreconditionError, match=r"^\[statekit\] x$"):
        assert_(condition, "x")


def test_precondition_error_is_not_an_assertion_error():
    """Callers can catch library failures without catching test assertions."""
    assert not issubclass(PreconditionError, AssertionError)


def test_assert_namespace_comes_from_settings(monkeypatch):
    monkeypatch.setenv("STATEKIT_ASSERT_NAMESPACE", "store")

    with pytest.raises(PreconditionError, match=r"^\[store\] missing module$"):
        assert_(False, "missing module")
