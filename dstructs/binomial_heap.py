"""Binomial heap: a priority queue built from a forest of binomial trees."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from dstructs.binary_heap import HeapType

CompareFunc = Callable[[Any, Any], int]


@dataclass(frozen=True)
class _BinomialTree:
    """An immutable binomial tree; subtrees may be shared between trees."""

    value: Any
    subtrees: tuple[_BinomialTree, ...] = ()

    @property
    def order(self) -> int:
        return len(self.subtrees)


class BinomialHeap:
    """A heap kept as binomial trees of distinct orders.

    ``compare_func`` returns a negative number, zero or a positive number
    as its first argument is less than, equal to or greater than its
    second. A MIN heap yields the smallest value first; a MAX heap the
    greatest.
    """

    def __init__(self, heap_type: HeapType, compare_func: CompareFunc) -> None:
        self.heap_type = HeapType(heap_type)
        self.compare_func = compare_func
        self._roots: list[Optional[_BinomialTree]] = []
        self._num_values = 0

    def __len__(self) -> int:
        return self._num_values

    def __repr__(self) -> str:
        return f"BinomialHeap({self.heap_type.name}, {self._num_values} values)"

    def _cmp(self, value1: Any, value2: Any) -> int:
        result = self.compare_func(value1, value2)
        return result if self.heap_type is HeapType.MIN else -result

    def _link(self, tree1: _BinomialTree, tree2: _BinomialTree) -> _BinomialTree:
        """Join two trees of equal order into one of the next order."""
        if self._cmp(tree1.value, tree2.value) > 0:
            tree1, tree2 = tree2, tree1
        return _BinomialTree(tree1.value, tree1.subtrees + (tree2,))

    def _merge(self, other: list[Optional[_BinomialTree]]) -> None:
        """Merge a root list into this heap, like a ripple-carry adder."""
        roots = self._roots
        size = max(len(roots), len(other)) + 1
        new_roots: list[Optional[_BinomialTree]] = []
        carry: Optional[_BinomialTree] = None

        for i in range(size):
            vals = [
                tree
                for tree in (
                    roots[i] if i < len(roots) else None,
                    other[i] if i < len(other) else None,
                    carry,
                )
                if tree is not None
            ]
            new_roots.append(vals[-1] if len(vals) % 2 == 1 else None)
            carry = self._link(vals[0], vals[1]) if len(vals) >= 2 else None

        while new_roots and new_roots[-1] is None:
            new_roots.pop()
        self._roots = new_roots

    def insert(self, value: Any) -> None:
        """Add ``value`` to the heap."""
        self._merge([_BinomialTree(value)])
        self._num_values += 1

    def pop(self) -> Any:
        """Remove and return the first value; raise IndexError if empty."""
        if self._num_values == 0:
            raise IndexError("pop from an empty heap")

        least_index: Optional[int] = None
        least: Optional[_BinomialTree] = None
        for index, tree in enumerate(self._roots):
            if tree is None:
                continue
            if least is None or self._cmp(tree.value, least.value) < 0:
                least_index, least = index, tree

        assert least is not None and least_index is not None
        self._roots[least_index] = None
        self._merge(list(least.subtrees))
        self._num_values -= 1
        return least.value