"""A singly linked list whose push adds values at the front."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class ListNode:
    """One cell of a singly linked list."""

    value: Any
    next: ListNode | None = None


class LinkedList:
    """Singly linked list of values, iterated from ``head`` onwards."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: ListNode | None = None
        for value in reversed(list(values)):
            self.push(value)

    def push(self, x: Any) -> None:
        """Insert ``x`` in front of the current head."""
        self.head = ListNode(x, self.head)

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: ListNode | None = None
        node = self.head
        while node is not None:
            node.next, previous, node = previous, node, node.next
        self.head = previous