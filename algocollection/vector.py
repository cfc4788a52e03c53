"""A growable array that doubles its capacity when full."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class Vector:
    """Dynamic array with explicit capacity that doubles on overflow."""

    def __init__(self, capacity: int = 1) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[Any] = [None] * capacity
        self._size = 0

    def append(self, value: Any) -> None:
        """Add ``value`` at the end, doubling the capacity if it is full."""
        if self._size == len(self._slots):
            grown: list[Any] = [None] * (2 * len(self._slots))
            grown[: self._size] = self._slots
            self._slots = grown
        self._slots[self._size] = value
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the last value; capacity is kept."""
        if self._size == 0:
            raise IndexError("pop from an empty vector")
        self._size -= 1
        value = self._slots[self._size]
        self._slots[self._size] = None
        return value

    def is_empty(self) -> bool:
        """True if the vector holds no values."""
        return self._size == 0

    def front(self) -> Any:
        """The first value."""
        if self._size == 0:
            raise IndexError("front of an empty vector")
        return self._slots[0]

    def back(self) -> Any:
        """The last value."""
        if self._size == 0:
            raise IndexError("back of an empty vector")
        return self._slots[self._size - 1]

    def capacity(self) -> int:
        """Number of values the vector can hold before growing."""
        return len(self._slots)

    def __getitem__(self, index: int) -> Any:
        if index < 0:
            index += self._size
        if not 0 <= index < self._size:
            raise IndexError("vector index out of range")
        return self._slots[index]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for index in range(self._size):
            yield self._slots[index]

    def __repr__(self) -> str:
        return f"Vector({list(self)!r})"