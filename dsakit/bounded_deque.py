"""A fixed-capacity double-ended queue on a circular array."""

from __future__ import annotations

from typing import Any


class BoundedDeque:
    """Double-ended queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._slots: list[Any] = [None] * capacity
        self._left = 0
        self._size = 0

    @property
    def _right(self) -> int:
        return (self._left + self._size - 1) % len(self._slots)

    def _check_room(self) -> None:
        if self._size == len(self._slots):
            raise OverflowError("deque is full")

    def _check_items(self) -> None:
        if not self._size:
            raise IndexError("deque is empty")

    def push_left(self, value) -> None:
        """Add ``value`` at the left end."""
        self._check_room()
        self._left = (self._left - 1) % len(self._slots)
        self._slots[self._left] = value
        self._size += 1

    def push_right(self, value) -> None:
        """Add ``value`` at the right end."""
        self._check_room()
        self._size += 1
        self._slots[self._right] = value

    def pop_left(self):
        """Remove and return the leftmost value."""
        self._check_items()
        value = self._slots[self._left]
        self._slots[self._left] = None
        self._left = (self._left + 1) % len(self._slots)
        self._size -= 1
        return value

    def pop_right(self):
        """Remove and return the rightmost value."""
        self._check_items()
        index = self._right
        value = self._slots[index]
        self._slots[index] = None
        self._size -= 1
        return value

    def left(self):
        """Leftmost value."""
        self._check_items()
        return self._slots[self._left]

    def right(self):
        """Rightmost value."""
        self._check_items()
        return self._slots[self._right]

    def __len__(self) -> int:
        return self._size