"""In-place edits and queries on singly linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from nodeworks.linked import LinkedList, ListNode


def _nodes(lst: LinkedList) -> list[ListNode]:
    nodes = []
    node = lst.head
    while node is not None:
        nodes.append(node)
        node = node.next
    return nodes


def _relink(lst: LinkedList, nodes: list[ListNode]) -> None:
    for node, following in zip(nodes, nodes[1:]):
        node.next = following
    if nodes:
        nodes[-1].next = None
        lst.head = nodes[0]
    else:
        lst.head = None


def delete_n_after_m(lst: LinkedList, n: int, m: int) -> None:
    """Skip ``m`` nodes, then delete the next ``n`` if that many remain."""
    if lst.head is None or n == 0 or m == 0:
        return
    prev: ListNode | None = None
    node = lst.head
    for _ in range(m):
        if node is None:
            break
        prev, node = node, node.next
    if node is None:
        return
    last = node
    for _ in range(n - 1):
        last = last.next
        if last is None:
            return
    if prev is None:
        lst.head = last.next
    else:
        prev.next = last.next


def delete_values(lst: LinkedList, values: Iterable[Any]) -> None:
    """Remove every node whose value occurs in ``values``."""
    unwanted = list(values)
    _relink(lst, [node for node in _nodes(lst) if node.value not in unwanted])


def josephus_rounds(values: Iterable[Any], k: int) -> Iterator[tuple[list[Any], Any]]:
    """Eliminate every ``k``-th member of a circle.

    Yields, for each round, the circle as it stood (read from its current
    first member) together with the value eliminated in that round.
    """
    ring = list(values)
    if not ring or k == 0:
        return
    step = max(k, 1) - 1
    index = 0
    while ring:
        index = (index + step) % len(ring)
        snapshot = list(ring)
        eliminated = ring.pop(index)
        yield snapshot, eliminated
        if ring:
            index %= len(ring)


def jump_targets(lst: LinkedList, k: int) -> list[tuple[Any, Any]]:
    """Pair each value with the value ``k`` nodes further on, wrapping to the head."""
    values = list(lst)
    count = len(values)
    steps = max(k, 0)
    return [(value, values[(i + steps) % count]) for i, value in enumerate(values)]


def merge_between_zeros(lst: LinkedList) -> None:
    """Replace each zero-delimited run with one node holding its sum.

    Every run starts at the current node and ends just before the next zero,
    which is consumed. A run with no closing zero raises ValueError.
    """
    values = list(lst)
    sums = []
    i = 0
    while i < len(values):
        total = values[i]
        i += 1
        while True:
            if i == len(values):
                raise ValueError("list does not end with a zero")
            if values[i] == 0:
                break
            total += values[i]
            i += 1
        sums.append(total)
        i += 1
    lst.head = LinkedList(sums).head


def is_palindrome(lst: LinkedList) -> bool:
    """Return True when the list reads the same in both directions."""
    values = list(lst)
    return values == values[::-1]


def reorder(lst: LinkedList) -> None:
    """Relink as first, last, second, second to last, and so on."""
    nodes = _nodes(lst)
    if len(nodes) < 3:
        return
    order = []
    lo, hi = 0, len(nodes) - 1
    while lo <= hi:
        order.append(nodes[lo])
        if lo != hi:
            order.append(nodes[hi])
        lo += 1
        hi -= 1
    _relink(lst, order)


def reverse_between(lst: LinkedList, left: int, right: int) -> None:
    """Reverse the nodes at 1-based positions ``left`` through ``right``."""
    nodes = _nodes(lst)
    if len(nodes) < 2 or left == right:
        return
    if left > right:
        raise ValueError("left must not exceed right")
    if left < 1 or right > len(nodes):
        raise IndexError("positions out of range")
    nodes[left - 1 : right] = nodes[left - 1 : right][::-1]
    _relink(lst, nodes)


def reverse_in_groups(lst: LinkedList, k: int) -> None:
    """Reverse every group of ``k`` nodes, the last shorter group included."""
    nodes = _nodes(lst)
    if len(nodes) < 2 or k <= 1:
        return
    order = []
    for start in range(0, len(nodes), k):
        order.extend(reversed(nodes[start : start + k]))
    _relink(lst, order)


def rotate_blockwise(lst: LinkedList, k: int, d: int) -> None:
    """Rotate every block of ``k`` nodes by one place.

    The last node of a block moves to its front when ``d`` is at least 1;
    otherwise the first node moves to its end.
    """
    nodes = _nodes(lst)
    if len(nodes) < 2 or k <= 1:
        return
    order = []
    for start in range(0, len(nodes), k):
        block = nodes[start : start + k]
        if d >= 1:
            order.extend(block[-1:] + block[:-1])
        else:
            order.extend(block[1:] + block[:1])
    _relink(lst, order)