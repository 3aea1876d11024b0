"""Binary heap: a priority queue ordered by a three-way compare function."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable

CompareFunc = Callable[[Any, Any], int]


class HeapType(Enum):
    """Whether the smallest or the greatest value comes out first."""

    MIN = 0
    MAX = 1


class BinaryHeap:
    """A heap stored as an implicit binary tree in a list.

    ``compare_func`` returns a negative number, zero or a positive number
    as its first argument is less than, equal to or greater than its
    second. A MIN heap yields the smallest value first; a MAX heap the
    greatest.
    """

    def __init__(self, heap_type: HeapType, compare_func: CompareFunc) -> None:
        self.heap_type = HeapType(heap_type)
        self.compare_func = compare_func
        self._values: list[Any] = []

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"BinaryHeap({self.heap_type.name}, {len(self._values)} values)"

    def _cmp(self, value1: Any, value2: Any) -> int:
        result = self.compare_func(value1, value2)
        return result if self.heap_type is HeapType.MIN else -result

    def insert(self, value: Any) -> None:
        """Add ``value`` to the heap."""
        values = self._values
        values.append(value)
        index = len(values) - 1

        while index > 0:
            parent = (index - 1) // 2
            if self._cmp(values[parent], value) < 0:
                break
            values[index] = values[parent]
            index = parent

        values[index] = value

    def pop(self) -> Any:
        """Remove and return the first value; raise IndexError if empty."""
        values = self._values
        if not values:
            raise IndexError("pop from an empty heap")

        result = values[0]
        new_value = values.pop()
        count = len(values)
        if count == 0:
            return result

        index = 0
        while True:
            child1 = index * 2 + 1
            child2 = index * 2 + 2

            if child1 < count and self._cmp(new_value, values[child1]) > 0:
                if child2 < count and self._cmp(values[child1], values[child2]) > 0:
                    next_index = child2
                else:
                    next_index = child1
            elif child2 < count and self._cmp(new_value, values[child2]) > 0:
                next_index = child2
            else:
                values[index] = new_value
                break

            values[index] = values[next_index]
            index = next_index

        return result