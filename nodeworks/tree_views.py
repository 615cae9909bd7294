"""Traversals that read a binary tree from particular sides and levels."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

from nodeworks.bst import BinarySearchTree, TreeNode


def _levels(root: TreeNode | None) -> list[list[TreeNode]]:
    levels: list[list[TreeNode]] = []
    level = [root] if root is not None else []
    while level:
        levels.append(level)
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def _bfs(root: TreeNode | None) -> list[TreeNode]:
    return [node for level in _levels(root) for node in level]


def _leaves(node: TreeNode | None) -> Iterator[Any]:
    if node is None:
        return
    yield from _leaves(node.left)
    if node.left is None and node.right is None:
        yield node.value
    yield from _leaves(node.right)


def boundary(tree: BinarySearchTree) -> list[Any]:
    """Return the left edge from the root down, the leaves, then the right edge up."""
    values: list[Any] = []
    node = tree.root
    while node is not None:
        values.append(node.value)
        node = node.right if node.left is None and node.right is not None else node.left
    for leaf in _leaves(tree.root):
        if leaf not in values:
            values.append(leaf)
    right_edge: list[Any] = []
    node = tree.root
    while node is not None:
        if node.value not in values:
            right_edge.append(node.value)
        node = node.left if node.right is None and node.left is not None else node.right
    values.extend(reversed(right_edge))
    return values


def right_side_view(tree: BinarySearchTree) -> list[Any]:
    """Return the rightmost value of every level."""
    return [level[-1].value for level in _levels(tree.root)]


def spiral_order(tree: BinarySearchTree) -> list[Any]:
    """Return values level by level, the level below the root read left to right
    and each following level in the opposite direction to the one above it."""
    result: list[Any] = []
    for depth, level in enumerate(_levels(tree.root)):
        values = [node.value for node in level]
        result.extend(reversed(values) if depth % 2 == 0 else values)
    return result


def largest_per_level(tree: BinarySearchTree) -> list[Any]:
    """Return the largest value of every level."""
    return [max(node.value for node in level) for level in _levels(tree.root)]


def populate_next_complete(tree: BinarySearchTree) -> None:
    """Link nodes to their successor in level order, assuming a perfect tree.

    Nodes at level-order positions 1, 3, 7, 15, ... end a level and get no
    link; every other node is linked to the node after it in level order.
    """
    order = _bfs(tree.root)
    level_end = 1
    for position, node in enumerate(order, start=1):
        if position == level_end:
            node.next = None
            level_end = level_end * 2 + 1
        else:
            node.next = order[position] if position < len(order) else None


def populate_next(tree: BinarySearchTree) -> None:
    """Link every node to the node on its right on the same level."""
    for level in _levels(tree.root):
        for node, following in zip(level, level[1:]):
            node.next = following
        level[-1].next = None


def next_links(tree: BinarySearchTree) -> list[tuple[Any, Any]]:
    """Return ``(value, next value or None)`` for every node in level order."""
    return [
        (node.value, node.next.value if node.next is not None else None)
        for node in _bfs(tree.root)
    ]