"""Value functionality: models, pure operations, and deep copies."""

from statekit.core.values.cloning import deep_clone, deep_copy
from statekit.core.values.models import PreconditionError, Thenable, ValueKind, VisitedSet
from statekit.core.values.operations import (
    assert_,
    find,
    for_each_value,
    is_object,
    is_promise,
    kind_of,
    partial,
    slot_names,
)

__all__ = [
    # Models
    "PreconditionError",
    "Thenable",
    "ValueKind",
    "VisitedSet",
    # Operations
    "assert_",
    "find",
    "for_each_value",
    "is_object",
    "is_promise",
    "kind_of",
    "partial",
    "slot_names",
    # Copies
    "deep_copy",
    "deep_clone",
]
