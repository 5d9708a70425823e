"""Tests for value models."""

from statekit import ValueKind, VisitedSet


def test_visited_set_matches_by_identity_not_equality():
    visited = VisitedSet()
    original = [1, 2]
    copy = [1, 2]

    visited.register(original, copy)

    assert original in visited
    assert [1, 2] not in visited
    assert visited.get(original) is copy


def test_visited_set_first_registration_wins():
    visited = VisitedSet()
    original: dict = {}
    first: dict = {}

    assert visited.register(original, first) is first
    assert visited.register(original, {}) is first
    assert len(visited) == 1


def test_visited_set_keeps_originals_alive():
    """ids stay unique only while the original exists."""
    visited = VisitedSet()
    visited.register([1], [1])

    assert visited.register([2], [2]) == [2]
    assert len(visited) == 2


def test_only_containers_are_composite():
    composite = {kind for kind in ValueKind if kind.is_composite}

    assert composite == {ValueKind.SEQUENCE, ValueKind.MAPPING}
