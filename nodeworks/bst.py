"""A binary search tree of distinct values."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """One node of a binary tree; ``next`` links it to a neighbour on its level."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None
    next: TreeNode | None = field(default=None, repr=False)


class BinarySearchTree:
    """Binary search tree without duplicates.

    Removing a node with two children alternates between taking its in-order
    predecessor and its in-order successor as the replacement, starting with
    the predecessor.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: TreeNode | None = None
        self._take_predecessor = False
        for value in values:
            self.insert(value)

    def _find(self, x: Any) -> tuple[TreeNode | None, TreeNode | None]:
        parent: TreeNode | None = None
        node = self.root
        while node is not None and node.value != x:
            parent = node
            node = node.right if node.value < x else node.left
        return parent, node

    def _replace_child(
        self, parent: TreeNode | None, old: TreeNode, new: TreeNode | None
    ) -> None:
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def insert(self, x: Any) -> bool:
        """Insert ``x``; return False when it is already present."""
        parent, node = self._find(x)
        if node is not None:
            return False
        new = TreeNode(x)
        if parent is None:
            self.root = new
        elif parent.value < x:
            parent.right = new
        else:
            parent.left = new
        return True

    def remove(self, x: Any) -> bool:
        """Remove ``x``; return False when it is absent."""
        parent, node = self._find(x)
        if node is None:
            return False
        if node.left is not None and node.right is not None:
            self._take_predecessor = not self._take_predecessor
            if self._take_predecessor:
                rep_parent, rep = node, node.left
                while rep.right is not None:
                    rep_parent, rep = rep, rep.right
            else:
                rep_parent, rep = node, node.right
                while rep.left is not None:
                    rep_parent, rep = rep, rep.left
            node.value = rep.value
            parent, node = rep_parent, rep
        child = node.left if node.left is not None else node.right
        self._replace_child(parent, node, child)
        return True

    def __contains__(self, x: Any) -> bool:
        return self._find(x)[1] is not None

    def inorder(self) -> Iterator[Any]:
        """Yield the values in ascending order."""
        stack: list[TreeNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.value
            node = node.right

    def level_order(self) -> Iterator[Any]:
        """Yield the values level by level, each level from left to right."""
        if self.root is None:
            return
        queue = deque([self.root])
        while queue:
            node = queue.popleft()
            yield node.value
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    def __iter__(self) -> Iterator[Any]:
        return self.inorder()

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"BinarySearchTree({list(self)!r})"