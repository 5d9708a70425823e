"""statekit: generic value helpers for state management.

Usage:
    from statekit import deep_clone, deep_copy, find, for_each_value

    state = {"todos": [{"id": 1, "done": False}], "filter": "all"}
    snapshot = deep_copy(state)
    snapshot["todos"][0]["done"] = True  # state is untouched

    todo = find(state["todos"], lambda t: t["id"] == 1)
    for_each_value(state, lambda value, key: print(key, value))
"""

__version__ = "0.1.0"

# Configuration
from statekit.config import ValueSettings, get_settings

# Core primitives
from statekit.core import (
    Copy,
    PreconditionError,
    Thenable,
    Value,
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
    # Version
    "__version__",
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
    # Configuration
    "ValueSettings",
    "get_settings",
]
