"""Core type definitions for statekit."""

from typing import Any

type Value = Any
"""Any datum: a scalar (None, bool, number, text, opaque reference) or a composite.

Composites are sequences (lists, tuples, ...) and mappings (dicts, ...).
Scalars are compared by value, composites by identity.
"""

type Copy[T] = T
"""Type alias indicating a value is a deep copy of its input.

When you see `Copy[T]` in a return type, mutating the returned value does NOT
affect the value it was copied from, and vice versa.
"""
