"""Value models: categories, protocols, and the copy visited set.

These are the small building blocks shared by the pure value operations and
the deep copy functions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable


class PreconditionError(Exception):
    """Raised by `assert_` when a caller-relied invariant does not hold."""

    pass


class ValueKind(Enum):
    """Runtime category of a value, in the priority order copies check them."""

    DATE = auto()  # datetime.date / datetime.datetime
    PATTERN = auto()  # compiled re.Pattern
    FLAT = auto()  # set, bytearray: mutable containers of immutable items
    SEQUENCE = auto()  # list, tuple, other non-text sequences
    MAPPING = auto()  # dict and other mappings
    RECORD = auto()  # object carrying instance attributes (__dict__ / __slots__)
    SCALAR = auto()  # everything else, returned as-is

    @property
    def is_composite(self) -> bool:
        """Whether values of this kind are containers that copies recurse into."""
        return self in (ValueKind.SEQUENCE, ValueKind.MAPPING)


@runtime_checkable
class Thenable(Protocol):
    """Objects exposing a `then` member for deferred-result chaining.

    Structural check only: `isinstance(x, Thenable)` tells you `x` has a `then`
    attribute, not that it is callable. Use `is_promise` for the full check.
    """

    def then(self, *args: Any, **kwargs: Any) -> Any:
        """Chain a callback onto the deferred result."""
        ...


@dataclass(slots=True)
class VisitedSet:
    """Identity-keyed map from originals to their copies for one copy operation.

    Lookups match by identity (`id`), never by equality, so two equal but
    distinct lists get two distinct copies while one list reached twice gets
    one. The original is stored next to its copy to keep it alive: an `id`
    is only unique while its object exists.

    Usage:
        visited = VisitedSet()
        first = deep_copy(config_a, visited)
        second = deep_copy(config_b, visited)  # shares copies with `first`
    """

    _entries: dict[int, tuple[Any, Any]] = field(default_factory=dict)

    def __contains__(self, original: object) -> bool:
        return id(original) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, original: object) -> Any:
        """Get the registered copy of `original`.

        Raises:
            KeyError: If `original` has not been registered.
        """
        return self._entries[id(original)][1]

    def register(self, original: object, copy: Any) -> Any:
        """Record `copy` as the copy of `original`.

        The first registration wins; registering the same original again
        returns the existing copy unchanged.

        Returns:
            The copy now associated with `original`.
        """
        return self._entries.setdefault(id(original), (original, copy))[1]
