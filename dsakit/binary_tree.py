"""Binary tree nodes, traversals, views, construction and structural edits."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """A binary tree node."""

    value: Any
    left: Node | None = None
    right: Node | None = None


def _inorder(node: Node | None) -> Iterator:
    if node is not None:
        yield from _inorder(node.left)
        yield node.value
        yield from _inorder(node.right)


def _preorder(node: Node | None) -> Iterator:
    if node is not None:
        yield node.value
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: Node | None) -> Iterator:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.value


def inorder(root: Node | None) -> list:
    """Values in left, root, right order."""
    return list(_inorder(root))


def inorder_iterative(root: Node | None) -> list:
    """Inorder traversal with an explicit stack."""
    values = []
    stack: list[Node] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        values.append(node.value)
        node = node.right
    return values


def preorder(root: Node | None) -> list:
    """Values in root, left, right order."""
    return list(_preorder(root))


def preorder_iterative(root: Node | None) -> list:
    """Preorder traversal with an explicit stack."""
    if root is None:
        return []
    values = []
    stack = [root]
    while stack:
        node = stack.pop()
        values.append(node.value)
        # Right first so that left is handled first.
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return values


def postorder(root: Node | None) -> list:
    """Values in left, right, root order."""
    return list(_postorder(root))


def postorder_iterative(root: Node | None) -> list:
    """Postorder traversal as the reverse of a root, right, left walk."""
    if root is None:
        return []
    reversed_values = []
    stack = [root]
    while stack:
        node = stack.pop()
        reversed_values.append(node.value)
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return reversed_values[::-1]


def _levels(root: Node | None) -> Iterator[list[Node]]:
    current = [root] if root is not None else []
    while current:
        yield current
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]


def level_order(root: Node | None) -> list:
    """Values level by level, each level left to right."""
    return [node.value for nodes in _levels(root) for node in nodes]


def level(root: Node | None, depth: int) -> list:
    """Values at ``depth``, left to right; the root is at depth 1."""
    if root is None or depth < 1:
        return []
    if depth == 1:
        return [root.value]
    return level(root.left, depth - 1) + level(root.right, depth - 1)


def reverse_level_order(root: Node | None) -> list:
    """Values from the deepest level up to the root, each level left to right."""
    return [node.value for nodes in reversed(list(_levels(root))) for node in nodes]


def left_view(root: Node | None) -> list:
    """The leftmost value on every level."""
    return [nodes[0].value for nodes in _levels(root)]


def right_view(root: Node | None) -> list:
    """The rightmost value on every level."""
    return [nodes[-1].value for nodes in _levels(root)]


def _positions(values: Sequence) -> dict:
    positions: dict = {}
    for index, value in enumerate(values):
        positions.setdefault(value, index)
    return positions


def _locate(positions: dict, value, low: int, high: int) -> int:
    index = positions.get(value)
    if index is None or not low <= index <= high:
        raise ValueError(f"sequences do not describe one tree (at {value!r})")
    return index


def build_from_inorder_postorder(
    inorder_values: Iterable, postorder_values: Iterable
) -> Node | None:
    """Rebuild a tree of distinct values from its inorder and postorder traversals."""
    ino, post = list(inorder_values), list(postorder_values)
    if len(ino) != len(post):
        raise ValueError("traversals differ in length")
    positions = _positions(ino)
    remaining = iter(reversed(post))

    def build(low: int, high: int) -> Node | None:
        if low > high:
            return None
        value = next(remaining)
        node = Node(value)
        split = _locate(positions, value, low, high)
        node.right = build(split + 1, high)
        node.left = build(low, split - 1)
        return node

    return build(0, len(ino) - 1)


def build_from_inorder_preorder(
    inorder_values: Iterable, preorder_values: Iterable
) -> Node | None:
    """Rebuild a tree of distinct values from its inorder and preorder traversals."""
    ino, pre = list(inorder_values), list(preorder_values)
    if len(ino) != len(pre):
        raise ValueError("traversals differ in length")
    positions = _positions(ino)
    remaining = iter(pre)

    def build(low: int, high: int) -> Node | None:
        if low > high:
            return None
        value = next(remaining)
        node = Node(value)
        split = _locate(positions, value, low, high)
        node.left = build(low, split - 1)
        node.right = build(split + 1, high)
        return node

    return build(0, len(ino) - 1)


def build_full_from_preorder_postorder(
    preorder_values: Iterable, postorder_values: Iterable
) -> Node | None:
    """Rebuild a full binary tree of distinct values from preorder and postorder.

    Every node of a full binary tree has either no children or two.
    """
    pre, post = list(preorder_values), list(postorder_values)
    if len(pre) != len(post):
        raise ValueError("traversals differ in length")
    if not pre:
        return None
    positions = _positions(post)
    index = 0

    def build(low: int, high: int) -> Node:
        nonlocal index
        value = pre[index]
        index += 1
        if post[high] != value:
            raise ValueError(f"sequences do not describe one tree (at {value!r})")
        node = Node(value)
        if low == high:
            return node
        split = _locate(positions, pre[index], low, high - 1)
        if split + 1 > high - 1:
            raise ValueError("not a full binary tree")
        node.left = build(low, split)
        node.right = build(split + 1, high - 1)
        return node

    return build(0, len(post) - 1)


def insert_level_order(root: Node | None, value) -> Node:
    """Put ``value`` in the first free child slot in level order; return the root."""
    new = Node(value)
    if root is None:
        return new
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node.left is None:
            node.left = new
            return root
        queue.append(node.left)
        if node.right is None:
            node.right = new
            return root
        queue.append(node.right)
    return root


def delete_level_order(root: Node | None, key) -> Node | None:
    """Delete ``key`` by overwriting it with the deepest, rightmost value.

    The last node holding ``key`` in level order is the one overwritten; the
    deepest, rightmost node is then removed. A missing key changes nothing.
    Returns the root, which is None once the last node is gone.
    """
    if root is None:
        return None
    target: Node | None = None
    last, last_parent = root, None
    queue: deque[tuple[Node, Node | None]] = deque([(root, None)])
    while queue:
        node, parent = queue.popleft()
        if node.value == key:
            target = node
        last, last_parent = node, parent
        for child in (node.left, node.right):
            if child is not None:
                queue.append((child, node))
    if target is None:
        return root
    target.value = last.value
    if last_parent is None:
        return None
    if last_parent.right is last:
        last_parent.right = None
    else:
        last_parent.left = None
    return root


def mirror(root: Node | None) -> Node | None:
    """Swap left and right children throughout the tree in place; return the root."""
    if root is not None:
        mirror(root.left)
        mirror(root.right)
        root.left, root.right = root.right, root.left
    return root


def mirror_iterative(root: Node | None) -> Node | None:
    """Mirror the tree in place level by level; return the root."""
    if root is None:
        return None
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
        node.left, node.right = node.right, node.left
    return root


def root_to_leaf_paths(root: Node | None) -> list[list]:
    """Every path of values from the root down to a leaf, left to right."""
    paths: list[list] = []
    path: list = []

    def walk(node: Node | None) -> None:
        if node is None:
            return
        path.append(node.value)
        if node.left is None and node.right is None:
            paths.append(list(path))
        else:
            walk(node.left)
            walk(node.right)
        path.pop()

    walk(root)
    return paths