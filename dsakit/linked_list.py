"""Singly linked lists: a list class and helpers that work on bare node chains."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    value: Any
    next: ListNode | None = field(default=None, repr=False)


class LinkedList:
    """A singly linked list with positional insertion and deletion (0-based)."""

    def __init__(self, values: Iterable = ()) -> None:
        self._head: ListNode | None = None
        for value in values:
            self.append(value)

    def _node_at(self, position: int) -> ListNode:
        if position < 0:
            raise IndexError("list index out of range")
        node = self._head
        for _ in range(position):
            if node is None:
                break
            node = node.next
        if node is None:
            raise IndexError("list index out of range")
        return node

    def _last(self) -> ListNode:
        if self._head is None:
            raise IndexError("list is empty")
        node = self._head
        while node.next is not None:
            node = node.next
        return node

    def insert_at_head(self, value) -> None:
        """Insert ``value`` at the front."""
        self._head = ListNode(value, self._head)

    def append(self, value) -> None:
        """Insert ``value`` at the back."""
        if self._head is None:
            self._head = ListNode(value)
        else:
            self._last().next = ListNode(value)

    def insert_at(self, position: int, value) -> None:
        """Insert ``value`` so that it ends up at ``position``.

        Raises IndexError if the list is empty or ``position`` is past the end.
        """
        if self._head is None:
            raise IndexError("insert into an empty list")
        if position == 0:
            self.insert_at_head(value)
            return
        before = self._node_at(position - 1)
        before.next = ListNode(value, before.next)

    def delete_head(self) -> None:
        """Remove the first node."""
        if self._head is None:
            raise IndexError("delete from an empty list")
        self._head = self._head.next

    def delete_tail(self) -> None:
        """Remove the last node."""
        if self._head is None:
            raise IndexError("delete from an empty list")
        if self._head.next is None:
            self._head = None
            return
        node = self._head
        while node.next.next is not None:
            node = node.next
        node.next = None

    def delete_at(self, position: int) -> None:
        """Remove the node at ``position``."""
        if self._head is None:
            raise IndexError("delete from an empty list")
        if position == 0:
            self.delete_head()
            return
        before = self._node_at(position - 1)
        if before.next is None:
            raise IndexError("list index out of range")
        before.next = before.next.next

    def head(self):
        """Value of the first node."""
        if self._head is None:
            raise IndexError("list is empty")
        return self._head.value

    def tail(self):
        """Value of the last node."""
        return self._last().value

    def __getitem__(self, position: int):
        return self._node_at(position).value

    def __iter__(self) -> Iterator:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def delete_duplicates(self) -> None:
        """Keep only the first occurrence of every value."""
        seen = set()
        previous: ListNode | None = None
        node = self._head
        while node is not None:
            if node.value in seen:
                previous.next = node.next
            else:
                seen.add(node.value)
                previous = node
            node = node.next


def build_list(values: Iterable) -> ListNode | None:
    """Chain ``values`` into nodes and return the head, or None if empty."""
    head: ListNode | None = None
    tail: ListNode | None = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def list_values(head: ListNode | None) -> list:
    """Values of the chain starting at ``head``."""
    values = []
    while head is not None:
        values.append(head.value)
        head = head.next
    return values


def has_cycle(head: ListNode | None) -> bool:
    """True if following ``next`` from ``head`` loops forever (Floyd's method)."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def _length(head: ListNode | None) -> int:
    count = 0
    while head is not None:
        count += 1
        head = head.next
    return count


def find_merge_node(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    """The first node shared by two chains, or None if they never join."""
    first_len, second_len = _length(first), _length(second)
    if first_len < second_len:
        first, second = second, first
        first_len, second_len = second_len, first_len
    for _ in range(first_len - second_len):
        first = first.next
    while first is not None and first is not second:
        first = first.next
        second = second.next
    return first


def remove_sorted_duplicates(head: ListNode | None) -> ListNode | None:
    """Drop repeated adjacent values from a sorted chain in place; return its head."""
    node = head
    while node is not None and node.next is not None:
        if node.value == node.next.value:
            node.next = node.next.next
        else:
            node = node.next
    return head


def nth_from_last(head: ListNode | None, n: int):
    """Value of the ``n``-th node counted from the end, the last being 1."""
    if n < 1:
        raise IndexError("position from the end must be at least 1")
    lead = head
    for _ in range(n):
        if lead is None:
            raise IndexError("list is shorter than the requested position")
        lead = lead.next
    trail = head
    while lead is not None:
        lead = lead.next
        trail = trail.next
    return trail.value


def merge_sorted(first: ListNode | None, second: ListNode | None) -> ListNode | None:
    """Merge two sorted chains into a new sorted chain.

    On equal values the node from ``second`` comes first. If either chain is
    empty the other is returned as it is.
    """
    if first is None:
        return second
    if second is None:
        return first
    dummy = ListNode(None)
    tail = dummy
    while first is not None and second is not None:
        if first.value < second.value:
            tail.next = ListNode(first.value)
            first = first.next
        else:
            tail.next = ListNode(second.value)
            second = second.next
        tail = tail.next
    rest = first if first is not None else second
    while rest is not None:
        tail.next = ListNode(rest.value)
        tail = tail.next
        rest = rest.next
    return dummy.next