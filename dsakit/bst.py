"""Binary search trees: a set-like tree class and helpers over bare nodes."""

from __future__ import annotations

from collections.abc import Iterable

from dsakit import binary_tree
from dsakit.binary_tree import Node


def _leftmost(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def _rightmost(node: Node) -> Node:
    while node.right is not None:
        node = node.right
    return node


class BinarySearchTree:
    """A binary search tree of distinct values; inserting a present value changes nothing."""

    def __init__(self, values: Iterable = ()) -> None:
        self.root: Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value) -> None:
        """Add ``value`` if it is not present yet."""
        if value in self:
            return
        self.root = insert_iterative(self.root, value)
        self._size += 1

    def remove(self, value) -> None:
        """Remove ``value`` if present."""
        if value not in self:
            return
        self.root = self._remove(self.root, value)
        self._size -= 1

    def _remove(self, node: Node | None, value) -> Node | None:
        if node is None:
            return None
        if value < node.value:
            node.left = self._remove(node.left, value)
        elif value > node.value:
            node.right = self._remove(node.right, value)
        elif node.left is None:
            return node.right
        elif node.right is None:
            return node.left
        else:
            node.value = _leftmost(node.right).value
            node.right = self._remove(node.right, node.value)
        return node

    def __contains__(self, value) -> bool:
        node = self.root
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return True
        return False

    def __len__(self) -> int:
        return self._size

    def min(self):
        """Smallest value; raises ValueError on an empty tree."""
        if self.root is None:
            raise ValueError("min() of an empty tree")
        return _leftmost(self.root).value

    def max(self):
        """Largest value; raises ValueError on an empty tree."""
        if self.root is None:
            raise ValueError("max() of an empty tree")
        return _rightmost(self.root).value

    def inorder(self) -> list:
        """Values in ascending order."""
        return binary_tree.inorder(self.root)

    def preorder(self) -> list:
        """Values in root, left, right order."""
        return binary_tree.preorder(self.root)

    def postorder(self) -> list:
        """Values in left, right, root order."""
        return binary_tree.postorder(self.root)

    def level_order(self) -> list:
        """Values level by level, each level left to right."""
        return binary_tree.level_order(self.root)


def is_bst(root: Node | None) -> bool:
    """True if every node is strictly greater than its left and less than its right subtree."""
    stack: list[tuple[Node | None, Node | None, Node | None]] = [(root, None, None)]
    while stack:
        node, low, high = stack.pop()
        if node is None:
            continue
        if low is not None and not low.value < node.value:
            return False
        if high is not None and not node.value < high.value:
            return False
        stack.append((node.left, low, node))
        stack.append((node.right, node, high))
    return True


def predecessor_successor(root: Node | None, key) -> tuple[Node | None, Node | None]:
    """Nodes holding the largest value below ``key`` and the smallest above it."""
    predecessor: Node | None = None
    successor: Node | None = None
    node = root
    while node is not None:
        if node.value == key:
            if node.left is not None:
                predecessor = _rightmost(node.left)
            if node.right is not None:
                successor = _leftmost(node.right)
            break
        if node.value < key:
            predecessor = node
            node = node.right
        else:
            successor = node
            node = node.left
    return predecessor, successor


def insert_iterative(root: Node | None, key) -> Node:
    """Insert ``key`` as a new leaf unless present; return the root."""
    if root is None:
        return Node(key)
    node = root
    while True:
        if key < node.value:
            if node.left is None:
                node.left = Node(key)
                break
            node = node.left
        elif key > node.value:
            if node.right is None:
                node.right = Node(key)
                break
            node = node.right
        else:
            break
    return root