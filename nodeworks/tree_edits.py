"""Edits and checks that reshape or inspect whole binary trees."""

from __future__ import annotations

from collections import deque
from typing import Any

from nodeworks.bst import BinarySearchTree, TreeNode


def _copy(node: TreeNode | None) -> TreeNode | None:
    if node is None:
        return None
    return TreeNode(node.value, _copy(node.left), _copy(node.right))


def _merge_nodes(a: TreeNode | None, b: TreeNode | None) -> TreeNode | None:
    if b is None:
        return a
    if a is None:
        return _copy(b)
    a.value += b.value
    a.left = _merge_nodes(a.left, b.left)
    a.right = _merge_nodes(a.right, b.right)
    return a


def _level(root: TreeNode | None, depth: int) -> list[TreeNode]:
    """Return the nodes at 1-based ``depth``, from left to right."""
    level = [root] if root is not None else []
    for _ in range(depth - 1):
        level = [
            child
            for node in level
            for child in (node.left, node.right)
            if child is not None
        ]
    return level


def invert(tree: BinarySearchTree) -> None:
    """Mirror the tree by swapping the children of every node."""
    stack = [tree.root] if tree.root is not None else []
    while stack:
        node = stack.pop()
        node.left, node.right = node.right, node.left
        stack.extend(child for child in (node.left, node.right) if child is not None)


def merge(
    first: BinarySearchTree, second: BinarySearchTree
) -> BinarySearchTree | None:
    """Overlay ``second`` onto ``first`` and return the merged tree.

    Where both trees have a node the values are added; where only ``second``
    has one, a copy of its subtree is grafted in. ``first`` is changed in
    place and returned. When ``first`` is empty ``second`` is returned, and
    when both are empty the result is None.
    """
    if first.root is None and second.root is None:
        return None
    if second.root is None:
        return first
    if first.root is None:
        return second
    first.root = _merge_nodes(first.root, second.root)
    return first


def remove_leaves_with_value(tree: BinarySearchTree, x: Any) -> None:
    """Remove leaves holding ``x`` until no leaf holds it.

    A parent left childless by a removal is removed too when it holds ``x``.
    """

    def prune(node: TreeNode | None) -> TreeNode | None:
        if node is None:
            return None
        node.left = prune(node.left)
        node.right = prune(node.right)
        if node.left is None and node.right is None and node.value == x:
            return None
        return node

    tree.root = prune(tree.root)


def trim(tree: BinarySearchTree, low: Any, high: Any) -> None:
    """Remove every value outside ``low..high`` with ordinary tree removals.

    Nodes are examined in level order; a node whose value is removed is
    examined again in its new form before the walk moves on.
    """
    if tree.root is None:
        return
    queue: deque[TreeNode | None] = deque([tree.root])
    while queue:
        node = queue[0]
        if node is not None and not low <= node.value <= high:
            has_both = node.left is not None and node.right is not None
            child = node.left if node.left is not None else node.right
            tree.remove(node.value)
            queue[0] = node if has_both else child
            continue
        queue.popleft()
        if node is not None:
            queue.extend(c for c in (node.left, node.right) if c is not None)


def add_row(tree: BinarySearchTree, value: Any, depth: int) -> None:
    """Insert a row of ``value`` nodes at 1-based ``depth``.

    Every node found at ``depth`` is moved one level down beneath a new node
    that takes its place, on the same side. Depths of 1 or less and depths
    below the deepest level leave the tree unchanged.
    """
    if tree.root is None or depth <= 1:
        return
    for parent in _level(tree.root, depth - 1):
        if parent.left is not None:
            parent.left = TreeNode(value, left=parent.left)
        if parent.right is not None:
            parent.right = TreeNode(value, right=parent.right)


def to_greater_sum(tree: BinarySearchTree) -> None:
    """Replace every value by the sum of itself and all larger values."""
    total = 0
    stack: list[TreeNode] = []
    node = tree.root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.right
        node = stack.pop()
        total += node.value
        node.value = total
        node = node.left


def is_sum_tree(tree: BinarySearchTree) -> bool:
    """Check that every node with two non-zero children equals their sum.

    Nodes with a missing child, or a child holding zero, are not checked.
    An empty tree passes.
    """
    stack = [tree.root] if tree.root is not None else []
    while stack:
        node = stack.pop()
        left = node.left.value if node.left is not None else 0
        right = node.right.value if node.right is not None else 0
        if left != 0 and right != 0 and left + right != node.value:
            return False
        stack.extend(c for c in (node.left, node.right) if c is not None)
    return True


def are_cousins(tree: BinarySearchTree, x: Any, y: Any) -> bool:
    """Tell whether ``x`` and ``y`` sit on the same level under different parents.

    Equal values, a root holding either value, ``x`` as the root's left child
    or ``y`` as its right child all give False. Values are tracked level by
    level; a level after which only one of them has been seen gives False.
    When neither value is found the answer is True.
    """
    root = tree.root
    if root is None or x == y:
        return False
    if (
        (root.left is not None and root.left.value == x)
        or (root.right is not None and root.right.value == y)
        or root.value == x
        or root.value == y
    ):
        return False
    found_x = found_y = False
    level = [root]
    while level:
        following: list[TreeNode] = []
        for node in level:
            found_x = found_x or node.value == x
            found_y = found_y or node.value == y
            if node.left is not None and node.right is not None:
                pair = (node.left.value, node.right.value)
                if x in pair and y in pair:
                    return False
            following.extend(c for c in (node.left, node.right) if c is not None)
        if found_x != found_y:
            return False
        level = following
    return True