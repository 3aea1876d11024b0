"""Automatically resizing array of values."""

from __future__ import annotations

from typing import Any, Callable, Iterator

EqualFunc = Callable[[Any, Any], bool]
CompareFunc = Callable[[Any, Any], int]

_DEFAULT_LENGTH = 16


class ArrayList:
    """An ordered, growable sequence of values.

    ``length`` is a hint for the initial capacity; zero or less selects
    a default.
    """

    def __init__(self, length: int = 0) -> None:
        self.capacity_hint = length if length > 0 else _DEFAULT_LENGTH
        self._data: list[Any] = []

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> Any:
        return self._data[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"ArrayList({self._data!r})"

    def insert(self, index: int, value: Any) -> None:
        """Insert ``value`` before position ``index`` (0 to len inclusive).

        Raises IndexError if the index lies outside the list.
        """
        if index < 0 or index > len(self._data):
            raise IndexError(f"insert index {index} out of range")
        self._data.insert(index, value)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end."""
        self.insert(len(self._data), value)

    def prepend(self, value: Any) -> None:
        """Add ``value`` at the start."""
        self.insert(0, value)

    def remove_range(self, index: int, length: int) -> None:
        """Remove ``length`` entries starting at ``index``.

        A range that does not lie wholly within the list is ignored.
        """
        if index < 0 or length < 0 or index + length > len(self._data):
            return
        del self._data[index:index + length]

    def remove(self, index: int) -> None:
        """Remove the entry at ``index``; an invalid index is ignored."""
        self.remove_range(index, 1)

    def index_of(self, equal_func: EqualFunc, value: Any) -> int:
        """Return the index of the first entry equal to ``value``, or -1."""
        for position, item in enumerate(self._data):
            if equal_func(item, value):
                return position
        return -1

    def clear(self) -> None:
        """Remove every entry."""
        self._data.clear()

    def sort(self, compare_func: CompareFunc) -> None:
        """Sort in place with a quicksort driven by a three-way compare function."""
        data = self._data
        pending = [(0, len(data))]
        while pending:
            start, end = pending.pop()
            if end - start <= 1:
                continue
            pivot = data[end - 1]
            boundary = start
            for i in range(start, end - 1):
                if compare_func(data[i], pivot) < 0:
                    data[i], data[boundary] = data[boundary], data[i]
                    boundary += 1
            data[end - 1] = data[boundary]
            data[boundary] = pivot
            pending.append((start, boundary))
            pending.append((boundary + 1, end))