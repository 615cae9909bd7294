"""Sorted, duplicate-free linked lists: singly, doubly and circular variants."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any


class Order(Enum):
    """Direction in which a sorted list keeps its values."""

    ASCENDING = "ascending"
    DESCENDING = "descending"

    def precedes(self, a: Any, b: Any) -> bool:
        """Return True when ``a`` belongs strictly before ``b``."""
        return a < b if self is Order.ASCENDING else a > b


@dataclass(eq=False)
class _Node:
    value: Any
    next: _Node | None = None
    prev: _Node | None = None


class _SortedBase:
    def __init__(self, order: Order = Order.ASCENDING) -> None:
        self.order = order
        self._size = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, order={self.order.name})"


class SortedLinkedList(_SortedBase):
    """Singly linked list kept in order; adding a present value does nothing."""

    def __init__(self, order: Order = Order.ASCENDING) -> None:
        super().__init__(order)
        self._head: _Node | None = None

    def _locate(self, x: Any) -> tuple[_Node | None, _Node | None]:
        prev, node = None, self._head
        while node is not None and self.order.precedes(node.value, x):
            prev, node = node, node.next
        return prev, node

    def add(self, x: Any) -> None:
        """Insert ``x`` at its sorted place unless it is already present."""
        prev, node = self._locate(x)
        if node is not None and node.value == x:
            return
        new = _Node(x, node)
        if prev is None:
            self._head = new
        else:
            prev.next = new
        self._size += 1

    def remove(self, x: Any) -> None:
        """Remove ``x``; do nothing if it is absent."""
        prev, node = self._locate(x)
        if node is None or node.value != x:
            return
        if prev is None:
            self._head = node.next
        else:
            prev.next = node.next
        self._size -= 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size


class SortedDoublyLinkedList(_SortedBase):
    """Doubly linked list kept in order; adding a present value does nothing."""

    def __init__(self, order: Order = Order.ASCENDING) -> None:
        super().__init__(order)
        self._head: _Node | None = None
        self._tail: _Node | None = None

    def _locate(self, x: Any) -> tuple[_Node | None, _Node | None]:
        prev, node = None, self._head
        while node is not None and self.order.precedes(node.value, x):
            prev, node = node, node.next
        return prev, node

    def add(self, x: Any) -> None:
        """Insert ``x`` at its sorted place unless it is already present."""
        prev, node = self._locate(x)
        if node is not None and node.value == x:
            return
        new = _Node(x, node, prev)
        if prev is None:
            self._head = new
        else:
            prev.next = new
        if node is None:
            self._tail = new
        else:
            node.prev = new
        self._size += 1

    def remove(self, x: Any) -> None:
        """Remove ``x``; do nothing if it is absent."""
        prev, node = self._locate(x)
        if node is None or node.value != x:
            return
        if prev is None:
            self._head = node.next
        else:
            prev.next = node.next
        if node.next is None:
            self._tail = prev
        else:
            node.next.prev = prev
        self._size -= 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size


class SortedCircularList(_SortedBase):
    """Circular singly linked list kept in order from its head."""

    def __init__(self, order: Order = Order.ASCENDING) -> None:
        super().__init__(order)
        self._head: _Node | None = None
        self._tail: _Node | None = None

    def _locate(self, x: Any) -> tuple[int, _Node | None, _Node | None]:
        prev, node = self._tail, self._head
        for index in range(self._size):
            if not self.order.precedes(node.value, x):
                return index, prev, node
            prev, node = node, node.next
        return self._size, prev, node

    def add(self, x: Any) -> None:
        """Insert ``x`` at its sorted place unless it is already present."""
        if self._head is None:
            new = _Node(x)
            new.next = new
            self._head = self._tail = new
            self._size = 1
            return
        index, prev, node = self._locate(x)
        if index < self._size and node.value == x:
            return
        new = _Node(x, node)
        prev.next = new
        if index == 0:
            self._head = new
        if index == self._size:
            self._tail = new
        self._size += 1

    def remove(self, x: Any) -> None:
        """Remove ``x``; do nothing if it is absent."""
        if self._head is None:
            return
        index, prev, node = self._locate(x)
        if index == self._size or node.value != x:
            return
        if self._size == 1:
            self._head = self._tail = None
        else:
            prev.next = node.next
            if node is self._head:
                self._head = node.next
            if node is self._tail:
                self._tail = prev
        self._size -= 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        for _ in range(self._size):
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size


class SortedCircularDoublyLinkedList(_SortedBase):
    """Circular doubly linked list kept in order from its head."""

    def __init__(self, order: Order = Order.ASCENDING) -> None:
        super().__init__(order)
        self._head: _Node | None = None

    def _locate(self, x: Any) -> tuple[int, _Node | None]:
        node = self._head
        for index in range(self._size):
            if not self.order.precedes(node.value, x):
                return index, node
            node = node.next
        return self._size, node

    def add(self, x: Any) -> None:
        """Insert ``x`` at its sorted place unless it is already present."""
        if self._head is None:
            new = _Node(x)
            new.next = new.prev = new
            self._head = new
            self._size = 1
            return
        index, node = self._locate(x)
        if index < self._size and node.value == x:
            return
        new = _Node(x, node, node.prev)
        node.prev.next = new
        node.prev = new
        if index == 0:
            self._head = new
        self._size += 1

    def remove(self, x: Any) -> None:
        """Remove ``x``; do nothing if it is absent."""
        if self._head is None:
            return
        index, node = self._locate(x)
        if index == self._size or node.value != x:
            return
        if self._size == 1:
            self._head = None
        else:
            node.prev.next = node.next
            node.next.prev = node.prev
            if node is self._head:
                self._head = node.next
        self._size -= 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        for _ in range(self._size):
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        if self._head is None:
            return
        node = self._head.prev
        for _ in range(self._size):
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size