"""Core functionalities: stateless helpers over arbitrary values.

Architecture Note:
    core/ contains pure, stateless functions with no runtime state mutation.
    The only process-wide state they read is configuration (see config/).
"""

from statekit.core.types import Copy, Value
from statekit.core.values import (
    PreconditionError,
    Thenable,
    ValueKind,
    VisitedSet,
    assert_,
    deep_clone,
    deep_copy,
    find,
    for_each_value,
    is_object,
    is_promise,
    kind_of,
    partial,
)

__all__ = [
    # Types
    "Copy",
    "Value",
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
    # Copies
    "deep_copy",
    "deep_clone",
]
