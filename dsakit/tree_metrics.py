"""Measurements of binary trees: heights, counts, sums, widths and shape checks."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from dsakit.binary_tree import Node


def _unival(node: Node | None, value) -> tuple[bool, int]:
    """Whether the subtree holds only ``value``, and its number of unival subtrees."""
    if node is None:
        return True, 0
    left_same, left_count = _unival(node.left, node.value)
    right_same, right_count = _unival(node.right, node.value)
    whole = left_same and right_same
    return node.value == value and whole, left_count + right_count + int(whole)


def is_unival(root: Node | None) -> bool:
    """True if every node holds the same value; an empty tree is not unival."""
    if root is None:
        return False
    return _unival(root, root.value)[0]


def count_unival_subtrees(root: Node | None) -> int:
    """Number of subtrees whose nodes all hold one value."""
    if root is None:
        return 0
    return _unival(root, root.value)[1]


def is_balanced(root: Node | None) -> bool:
    """True if at every node the heights of the two subtrees differ by at most one."""

    def checked_height(node: Node | None) -> int | None:
        if node is None:
            return 0
        left = checked_height(node.left)
        if left is None:
            return None
        right = checked_height(node.right)
        if right is None or abs(left - right) > 1:
            return None
        return max(left, right) + 1

    return checked_height(root) is not None


def count_internal_nodes(root: Node | None) -> int:
    """Number of nodes with at least one child."""
    if root is None or (root.left is None and root.right is None):
        return 0
    return count_internal_nodes(root.left) + count_internal_nodes(root.right) + 1


def count_leaves(root: Node | None) -> int:
    """Number of nodes without children."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return count_leaves(root.left) + count_leaves(root.right)


def diagonal_sums(root: Node | None) -> list:
    """Sums along each diagonal; right children stay on their parent's diagonal."""
    sums: dict[int, int] = {}

    def walk(node: Node | None, diagonal: int) -> None:
        if node is None:
            return
        sums[diagonal] = sums.get(diagonal, 0) + node.value
        walk(node.right, diagonal)
        walk(node.left, diagonal + 1)

    walk(root, 0)
    return [sums[d] for d in sorted(sums)]


def diameter(root: Node | None) -> int:
    """Number of nodes on the longest path between any two nodes."""
    longest = 0

    def depth(node: Node | None) -> int:
        nonlocal longest
        if node is None:
            return 0
        left = depth(node.left)
        right = depth(node.right)
        longest = max(longest, left + right + 1)
        return max(left, right) + 1

    depth(root)
    return longest


def height(root: Node | None) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1


def _level_sums(root: Node | None) -> Iterator:
    queue = deque([root] if root is not None else [])
    while queue:
        total = 0
        for _ in range(len(queue)):
            node = queue.popleft()
            total += node.value
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
        yield total


def max_level_sum(root: Node | None):
    """Largest sum of the values on one level; 0 for an empty tree."""
    if root is None:
        return 0
    return max(_level_sums(root))


def minimum_depth(root: Node | None) -> int:
    """Number of nodes on the shortest root-to-leaf path."""
    if root is None:
        return 0
    left = minimum_depth(root.left)
    right = minimum_depth(root.right)
    if left == 0:
        return right + 1
    if right == 0:
        return left + 1
    return min(left, right) + 1


def tree_sum(root: Node | None):
    """Sum of all values in the tree."""
    return sum(_level_sums(root))


def width(root: Node | None) -> int:
    """Number of distinct horizontal positions the nodes occupy."""
    if root is None:
        return 0
    leftmost = rightmost = 0
    stack = [(root, 0)]
    while stack:
        node, x = stack.pop()
        leftmost = min(leftmost, x)
        rightmost = max(rightmost, x)
        if node.left is not None:
            stack.append((node.left, x - 1))
        if node.right is not None:
            stack.append((node.right, x + 1))
    return rightmost - leftmost + 1