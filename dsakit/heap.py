"""A bounded binary heap and the airline boarding queue built on it."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from operator import attrgetter
from typing import Any


class BinaryHeap:
    """Array-backed binary heap; a min-heap by default, a max-heap when ``reverse``."""

    def __init__(
        self,
        capacity: int | None = 10,
        key: Callable[[Any], Any] | None = None,
        reverse: bool = False,
    ) -> None:
        self._items: list = []
        self._capacity = capacity
        self._key = key if key is not None else (lambda item: item)
        self._reverse = reverse

    def _before(self, a, b) -> bool:
        ka, kb = self._key(a), self._key(b)
        return ka > kb if self._reverse else ka < kb

    def push(self, item) -> None:
        """Add ``item``; raises OverflowError when the heap is full."""
        if self._capacity is not None and len(self._items) >= self._capacity:
            raise OverflowError("heap is full")
        items = self._items
        items.append(item)
        pos = len(items) - 1
        while pos > 0:
            parent = (pos - 1) // 2
            if not self._before(items[pos], items[parent]):
                break
            items[pos], items[parent] = items[parent], items[pos]
            pos = parent

    def peek(self):
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("peek from an empty heap")
        return self._items[0]

    def pop(self):
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("pop from an empty heap")
        items = self._items
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down()
        return top

    def _sift_down(self) -> None:
        items = self._items
        size = len(items)
        pos = 0
        while True:
            child = 2 * pos + 1
            if child >= size:
                break
            right = child + 1
            if right < size and self._before(items[right], items[child]):
                child = right
            if not self._before(items[child], items[pos]):
                break
            items[pos], items[child] = items[child], items[pos]
            pos = child

    def drain(self) -> Iterator:
        """Pop items in priority order until the heap is empty."""
        while self._items:
            yield self.pop()

    def __len__(self) -> int:
        return len(self._items)


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


@dataclass(frozen=True)
class Passenger:
    """A passenger record; ``a``, ``b`` and ``c`` feed the boarding priority."""

    name: str
    a: int
    b: int
    c: int

    @property
    def priority(self) -> int:
        """Boarding priority: ``a / 1000`` (truncated) ``+ b - c``."""
        return _truncating_div(self.a, 1000) + self.b - self.c


def boarding_order(records: Iterable[tuple[str, int, int, int]]) -> list[Passenger]:
    """Passengers from ``(name, a, b, c)`` records, highest priority first."""
    heap = BinaryHeap(capacity=None, key=attrgetter("priority"), reverse=True)
    for name, a, b, c in records:
        heap.push(Passenger(name, a, b, c))
    return list(heap.drain())