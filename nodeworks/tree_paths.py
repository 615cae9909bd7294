"""Root-to-leaf paths, ancestors, distances and value lookups in binary trees."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any

from nodeworks.bst import BinarySearchTree, TreeNode


def _leaf_paths(root: TreeNode | None) -> Iterator[list[TreeNode]]:
    """Yield every root-to-leaf path of nodes, leaves from left to right."""
    if root is None:
        return
    stack: list[list[TreeNode]] = [[root]]
    while stack:
        path = stack.pop()
        node = path[-1]
        if node.left is None and node.right is None:
            yield path
            continue
        if node.right is not None:
            stack.append(path + [node.right])
        if node.left is not None:
            stack.append(path + [node.left])


def _search_path(root: TreeNode | None, x: Any) -> list[TreeNode]:
    """Return the nodes visited by a search for ``x``, ending at its node."""
    path: list[TreeNode] = []
    node = root
    while node is not None:
        path.append(node)
        if node.value == x:
            return path
        node = node.right if node.value < x else node.left
    raise ValueError(f"{x!r} is not in the tree")


def diameter(tree: BinarySearchTree) -> int:
    """Return the number of edges on the longest leaf-to-leaf path through the root.

    An empty tree and a tree of one node give 0.
    """
    root = tree.root
    if root is None or (root.left is None and root.right is None):
        return 0
    return sum(
        max((len(path) for path in _leaf_paths(child)), default=0)
        for child in (root.left, root.right)
    )


def root_to_leaf_paths(tree: BinarySearchTree) -> list[list[Any]]:
    """Return the values on every root-to-leaf path, leaves from left to right."""
    return [[node.value for node in path] for path in _leaf_paths(tree.root)]


def path_sums(tree: BinarySearchTree) -> list[tuple[list[Any], Any]]:
    """Return every root-to-leaf path together with the sum of its values."""
    return [(path, sum(path)) for path in root_to_leaf_paths(tree)]


def shortest_leaf_path(tree: BinarySearchTree) -> list[Any]:
    """Return the shortest root-to-leaf path; ties go to the leftmost leaf."""
    paths = root_to_leaf_paths(tree)
    if not paths:
        raise ValueError("an empty tree has no leaf")
    return min(paths, key=len)


def lowest_common_ancestor(tree: BinarySearchTree, x: Any, y: Any) -> Any:
    """Return the deepest value shared by the search paths towards ``x`` and ``y``.

    The two searches advance one step at a time until both have arrived, and
    the shared node is noted before each step. When ``x`` equals ``y`` the
    node itself is never compared, so the result is its parent, and None when
    it is the root. A value missing from the tree raises ValueError.
    """
    if tree.root is None:
        raise ValueError("the tree is empty")
    path_x = _search_path(tree.root, x)
    path_y = _search_path(tree.root, y)
    steps = max(len(path_x), len(path_y)) - 1
    lowest: Any = None
    for step in range(steps):
        p = path_x[min(step, len(path_x) - 1)]
        q = path_y[min(step, len(path_y) - 1)]
        if p.value == q.value:
            lowest = p.value
    return lowest


def kth_largest(tree: BinarySearchTree, k: int) -> Any:
    """Return the ``k``-th largest value, counting from 1."""
    values = list(tree.inorder())
    if not 1 <= k <= len(values):
        raise IndexError("k is out of range")
    return values[-k]


def burn_time(tree: BinarySearchTree, start: Any) -> int:
    """Return the steps a fire lit at ``start`` needs to reach every node.

    Each step the fire spreads from every burning node to its parent and
    children. An empty tree gives -1; a start value not in the tree raises
    ValueError.
    """
    root = tree.root
    if root is None:
        return -1
    parents: dict[int, TreeNode | None] = {id(root): None}
    origin: TreeNode | None = None
    queue = deque([root])
    while queue:
        node = queue.popleft()
        if origin is None and node.value == start:
            origin = node
        for child in (node.left, node.right):
            if child is not None:
                parents[id(child)] = node
                queue.append(child)
    if origin is None:
        raise ValueError(f"{start!r} is not in the tree")

    burnt = {id(origin)}
    frontier = [origin]
    time = -1
    while frontier:
        following = []
        for node in frontier:
            for neighbour in (parents[id(node)], node.left, node.right):
                if neighbour is not None and id(neighbour) not in burnt:
                    burnt.add(id(neighbour))
                    following.append(neighbour)
        frontier = following
        time += 1
    return time


def closest_nodes(
    tree: BinarySearchTree, queries: Iterable[Any]
) -> list[tuple[Any, Any]]:
    """For each query return (largest value <= query, smallest value >= query).

    A side with no such value is -1. An empty tree gives an empty list.
    """
    values = list(tree.level_order())
    if not values:
        return []
    result = []
    for query in queries:
        below = max((v for v in values if v <= query), default=-1)
        above = min((v for v in values if v >= query), default=-1)
        result.append((below, above))
    return result