"""Three-way comparison and equality functions for integers and object identity."""

from __future__ import annotations

from typing import Any


def int_equal(value1: int, value2: int) -> bool:
    """Return True if the two integers are equal."""
    return value1 == value2


def int_compare(value1: int, value2: int) -> int:
    """Compare two integers: -1 if the first is smaller, 1 if larger, 0 if equal."""
    if value1 < value2:
        return -1
    if value1 > value2:
        return 1
    return 0


def pointer_equal(value1: Any, value2: Any) -> bool:
    """Return True if both arguments are the very same object."""
    return value1 is value2


def pointer_compare(value1: Any, value2: Any) -> int:
    """Order two objects by identity: -1, 1, or 0 when they are the same object."""
    id1 = id(value1)
    id2 = id(value2)
    if id1 < id2:
        return -1
    if id1 > id2:
        return 1
    return 0