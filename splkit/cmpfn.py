"""Three-way comparison functions for use with the ordered collections."""

from __future__ import annotations

from typing import Any, Callable

CompareFn = Callable[[Any, Any], int]


def compare(a: Any, b: Any) -> int:
    """Return -1, 0 or +1 as ``a`` is less than, equal to or greater than ``b``."""
    return (a > b) - (a < b)


def pointer_compare(a: Any, b: Any) -> int:
    """Compare two objects by identity, ordering them by their ``id``."""
    return compare(id(a), id(b))


_VALUE_TYPES = (
    "int",
    "short",
    "long",
    "char",
    "float",
    "double",
    "unsigned",
    "unsignedshort",
    "unsignedlong",
    "unsignedchar",
    "string",
)


def compare_for_type(type_name: str) -> CompareFn:
    """Return the comparison function suited to the named base type."""
    key = "".join(type_name.split())
    if key == "pointer":
        return pointer_compare
    if key in _VALUE_TYPES:
        return compare
    raise ValueError(f"compare_for_type: Unknown type {type_name}")