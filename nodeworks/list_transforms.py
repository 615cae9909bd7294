"""Rotations, splits, sums and duplicate removal on singly linked lists."""

from __future__ import annotations

from itertools import chain, groupby, zip_longest
from operator import attrgetter
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


def rotate_right(lst: LinkedList, k: int) -> None:
    """Move the last node to the front ``k`` times; non-positive ``k`` does nothing."""
    nodes = _nodes(lst)
    if len(nodes) < 2 or k <= 0:
        return
    shift = k % len(nodes)
    if shift:
        _relink(lst, nodes[-shift:] + nodes[:-shift])


def segregate_even_odd(lst: LinkedList) -> None:
    """Move every even node after the first one to the front of the list.

    Each even node is moved in turn, so the moved nodes end up in the reverse
    of their original order. The first node and the odd nodes keep their order.
    """
    nodes = _nodes(lst)
    if not nodes:
        return
    first, rest = nodes[0], nodes[1:]
    evens = [node for node in rest if node.value % 2 == 0]
    odds = [node for node in rest if node.value % 2 != 0]
    _relink(lst, evens[::-1] + [first] + odds)


def sort_list(lst: LinkedList) -> None:
    """Relink the nodes into ascending order, keeping equal values in place."""
    _relink(lst, sorted(_nodes(lst), key=attrgetter("value")))


def split_into_parts(lst: LinkedList, k: int) -> list[LinkedList]:
    """Cut the list into ``k`` parts and return them.

    With fewer nodes than parts, every node forms its own part and empty parts
    fill up the rest. Otherwise the first ``k - 1`` parts hold ``len // k``
    nodes each and the last part holds all that remain. Afterwards ``lst``
    holds only the first part.
    """
    if k <= 0:
        raise ValueError("the number of parts must be positive")
    nodes = _nodes(lst)
    count = len(nodes)
    if count < k:
        chunks = [[node] for node in nodes] + [[] for _ in range(k - count)]
    else:
        size = count // k
        chunks = [nodes[i * size : (i + 1) * size] for i in range(k - 1)]
        chunks.append(nodes[(k - 1) * size :])
    parts = []
    for chunk in chunks:
        part = LinkedList()
        _relink(part, chunk)
        parts.append(part)
    lst.head = parts[0].head
    return parts


def add_numbers(first: LinkedList, second: LinkedList) -> LinkedList:
    """Add two numbers stored most significant digit first.

    The result has as many digits as the longer operand; a carry out of its
    most significant digit is discarded.
    """
    a, b = list(first), list(second)
    if not a or not b:
        raise ValueError("both numbers need at least one digit")
    result = LinkedList()
    carry = 0
    for x, y in zip_longest(reversed(a), reversed(b), fillvalue=0):
        total = x + y + carry
        if total >= 10:
            carry, digit = divmod(total, 10)
        else:
            carry, digit = 0, total
        result.push(digit)
    return result


def swap_pairs(lst: LinkedList) -> None:
    """Swap every two neighbouring nodes; a trailing odd node stays put."""
    nodes = _nodes(lst)
    if len(nodes) < 2:
        return
    order = []
    for start in range(0, len(nodes), 2):
        order.extend(reversed(nodes[start : start + 2]))
    _relink(lst, order)


def union_and_intersection(
    first: LinkedList, second: LinkedList
) -> tuple[LinkedList, LinkedList]:
    """Return new lists holding the union and the intersection of two lists.

    Common values are pushed first, once for every matching pair; then each
    value of ``first`` and of ``second`` not yet in the union is pushed.
    Pushing adds at the front, so later values come first.
    """
    union, intersection = LinkedList(), LinkedList()
    others = list(second)
    for value in first:
        for other in others:
            if other == value:
                union.push(value)
                intersection.push(value)
    for value in chain(first, second):
        if value not in union:
            union.push(value)
    return union, intersection


def max_twin_sum(lst: LinkedList) -> int:
    """Return the largest sum of a node and its mirror node from the other end.

    A list with fewer than two nodes gives -1; an odd number of nodes has no
    twins and raises ValueError.
    """
    values = list(lst)
    if len(values) < 2:
        return -1
    if len(values) % 2:
        raise ValueError("twin sums need an even number of nodes")
    half = len(values) // 2
    return max(a + b for a, b in zip(values[:half], reversed(values[half:])))


def remove_nodes_with_greater_right(lst: LinkedList) -> None:
    """Drop nodes that are outweighed by a node to their right.

    The last node always stays. Any other inner node stays only when it is
    strictly greater than every node to its right; the first node stays when
    it is not smaller than every node kept after it. A list whose values are
    all equal is left alone.
    """
    nodes = _nodes(lst)
    if len(nodes) < 2:
        return
    first = nodes[0].value
    if all(node.value == first for node in nodes):
        return
    kept = [nodes[-1]]
    largest = nodes[-1].value
    for node in reversed(nodes[1:-1]):
        if node.value > largest:
            kept.append(node)
            largest = node.value
    if first >= largest:
        kept.append(nodes[0])
    _relink(lst, kept[::-1])


def remove_all_duplicated(lst: LinkedList) -> None:
    """Drop every run of equal neighbouring values that is longer than one node."""
    kept = []
    for _, run in groupby(_nodes(lst), key=attrgetter("value")):
        group = list(run)
        if len(group) == 1:
            kept.extend(group)
    _relink(lst, kept)


def remove_duplicates(lst: LinkedList) -> None:
    """Keep only the first node holding each value."""
    seen: list[Any] = []
    kept = []
    for node in _nodes(lst):
        if node.value not in seen:
            seen.append(node.value)
            kept.append(node)
    _relink(lst, kept)