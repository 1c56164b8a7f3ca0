"""Bounded queues: a FIFO circular queue and a queue kept in ascending order."""

from __future__ import annotations

from bisect import insort_right
from collections.abc import Iterator
from typing import Any


class CircularQueue:
    """First-in first-out queue on a fixed circular array."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    def is_full(self) -> bool:
        """True if no more items fit."""
        return self._size == len(self._slots)

    def enqueue(self, value) -> None:
        """Add ``value`` at the rear; raises OverflowError when full."""
        if self.is_full():
            raise OverflowError("queue is full")
        self._slots[(self._front + self._size) % len(self._slots)] = value
        self._size += 1

    def dequeue(self):
        """Remove and return the item at the front."""
        if not self._size:
            raise IndexError("dequeue from an empty queue")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % len(self._slots)
        self._size -= 1
        return value

    def front(self):
        """Item at the front, left in place."""
        if not self._size:
            raise IndexError("front of an empty queue")
        return self._slots[self._front]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator:
        capacity = len(self._slots)
        for offset in range(self._size):
            yield self._slots[(self._front + offset) % capacity]


class SortedQueue:
    """Bounded queue that always hands out its smallest item first.

    Equal items leave in the order they arrived.
    """

    def __init__(self, capacity: int = 3) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._items: list = []
        self._capacity = capacity

    def is_full(self) -> bool:
        """True if no more items fit."""
        return len(self._items) >= self._capacity

    def enqueue(self, value) -> None:
        """Insert ``value`` in order; raises OverflowError when full."""
        if self.is_full():
            raise OverflowError("queue is full")
        insort_right(self._items, value)

    def dequeue(self):
        """Remove and return the smallest item."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        return self._items.pop(0)

    def front(self):
        """Smallest item, left in place."""
        if not self._items:
            raise IndexError("front of an empty queue")
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        return iter(list(self._items))