"""Doubly linked node chains and a XOR-linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class DoublyNode:
    """A node with links both ways."""

    value: Any
    prev: DoublyNode | None = field(default=None, repr=False)
    next: DoublyNode | None = field(default=None, repr=False)


def build_doubly(values: Iterable) -> DoublyNode | None:
    """Chain ``values`` into doubly linked nodes and return the head."""
    head: DoublyNode | None = None
    tail: DoublyNode | None = None
    for value in values:
        node = DoublyNode(value, prev=tail)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def doubly_values(head: DoublyNode | None) -> list:
    """Values reached by following ``next`` from ``head``."""
    values = []
    while head is not None:
        values.append(head.value)
        head = head.next
    return values


def sorted_insert(head: DoublyNode | None, value) -> DoublyNode:
    """Insert ``value`` into a sorted chain before the first node not less than it."""
    node = DoublyNode(value)
    if head is None:
        return node
    if not head.value < value:
        node.next = head
        head.prev = node
        return node
    current = head
    while current.next is not None and current.value < value:
        current = current.next
    if not current.value < value:
        node.next = current
        node.prev = current.prev
        current.prev.next = node
        current.prev = node
    else:
        current.next = node
        node.prev = current
    return head


def reverse_doubly(head: DoublyNode | None) -> DoublyNode | None:
    """Reverse a chain in place and return its new head."""
    new_head = head
    node = head
    while node is not None:
        node.prev, node.next = node.next, node.prev
        new_head = node
        node = node.prev
    return new_head


@dataclass
class _XORNode:
    value: Any
    both: int


class XORList:
    """A list whose nodes keep one link: the XOR of the neighbours' addresses.

    Addresses are positive integers handed out by the list; 0 stands for none.
    """

    def __init__(self, values: Iterable = ()) -> None:
        self._nodes: dict[int, _XORNode] = {}
        self._head = 0
        self._next_address = 1
        for value in values:
            self.add(value)

    def _allocate(self, value, both: int) -> int:
        address = self._next_address
        self._next_address += 1
        self._nodes[address] = _XORNode(value, both)
        return address

    def _walk(self) -> Iterator[tuple[int, int, int]]:
        """Yield ``(previous, current, next)`` addresses along the list."""
        prev, curr = 0, self._head
        while curr:
            nxt = self._nodes[curr].both ^ prev
            yield prev, curr, nxt
            prev, curr = curr, nxt

    def add(self, value) -> None:
        """Append ``value`` at the end."""
        if not self._head:
            self._head = self._allocate(value, 0)
            return
        prev = tail = 0
        for prev, tail, _ in self._walk():
            pass
        new = self._allocate(value, tail)
        self._nodes[tail].both = prev ^ new

    def get(self, index: int):
        """Value at ``index``."""
        if index >= 0:
            for i, (_, curr, _) in enumerate(self._walk()):
                if i == index:
                    return self._nodes[curr].value
        raise IndexError("list index out of range")

    def remove(self, index: int) -> None:
        """Remove the node at ``index``; an index out of range changes nothing."""
        if index < 0:
            return
        for i, (prev, curr, nxt) in enumerate(self._walk()):
            if i == index:
                break
        else:
            return
        if prev:
            self._nodes[prev].both ^= curr ^ nxt
        else:
            self._head = nxt
        if nxt:
            self._nodes[nxt].both ^= curr ^ prev
        del self._nodes[curr]

    def __iter__(self) -> Iterator:
        for _, curr, _ in self._walk():
            yield self._nodes[curr].value

    def __len__(self) -> int:
        return len(self._nodes)