"""Stacks, queues, a growable array and a doubly linked list."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any


@dataclass
class BoundedStack:
    """LIFO stack with a fixed capacity; pushes onto a full stack are dropped."""

    capacity: int = 10
    _items: list[Any] = field(default_factory=list, init=False, repr=False)

    def push(self, x: Any) -> None:
        """Push ``x`` unless the stack is full."""
        if len(self._items) < self.capacity:
            self._items.append(x)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise IndexError("pop from an empty stack")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class RingQueue:
    """FIFO queue with a fixed capacity; pushes onto a full queue are dropped."""

    capacity: int = 10
    _items: deque[Any] = field(default_factory=deque, init=False, repr=False)

    def push(self, x: Any) -> None:
        """Append ``x`` unless the queue is full."""
        if len(self._items) < self.capacity:
            self._items.append(x)

    def pop(self) -> Any:
        """Remove and return the oldest value."""
        if not self._items:
            raise IndexError("pop from an empty queue")
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)


@dataclass
class ChunkedStack:
    """Unbounded LIFO stack stored as a chain of fixed-size chunks."""

    chunk_size: int = 10
    _chunks: list[list[Any]] = field(default_factory=list, init=False, repr=False)

    def push(self, x: Any) -> None:
        """Push ``x``, opening a new chunk when the top one is full."""
        if not self._chunks or len(self._chunks[-1]) == self.chunk_size:
            self._chunks.append([])
        self._chunks[-1].append(x)

    def pop(self) -> Any:
        """Remove and return the top value, releasing an emptied chunk."""
        if not self._chunks:
            raise IndexError("pop from an empty stack")
        top = self._chunks[-1]
        value = top.pop()
        if not top:
            self._chunks.pop()
        return value

    def __len__(self) -> int:
        return sum(len(chunk) for chunk in self._chunks)


@dataclass
class ChunkedQueue:
    """Unbounded FIFO queue stored as a chain of fixed-size chunks."""

    chunk_size: int = 10
    _chunks: deque[list[Any]] = field(default_factory=deque, init=False, repr=False)
    _head: int = field(default=0, init=False, repr=False)
    _size: int = field(default=0, init=False, repr=False)

    def push(self, x: Any) -> None:
        """Append ``x``, opening a new chunk when the last one is full."""
        if not self._chunks or len(self._chunks[-1]) == self.chunk_size:
            self._chunks.append([])
        self._chunks[-1].append(x)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the oldest value, releasing a consumed chunk."""
        if not self._size:
            raise IndexError("pop from an empty queue")
        first = self._chunks[0]
        value = first[self._head]
        self._head += 1
        self._size -= 1
        if self._head == len(first):
            self._chunks.popleft()
            self._head = 0
        return value

    def __len__(self) -> int:
        return self._size


class DynamicArray:
    """Array that doubles its capacity when full and halves it when half empty."""

    def __init__(self, capacity: int = 1) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: list[Any] = []

    def capacity(self) -> int:
        """Return the number of slots currently reserved."""
        return self._capacity

    def _grow_if_full(self) -> None:
        if len(self._items) == self._capacity:
            self._capacity *= 2

    def _shrink_for_pop(self) -> None:
        if not self._items:
            raise IndexError("pop from an empty array")
        if len(self._items) == self._capacity // 2:
            self._capacity //= 2

    def push_back(self, x: Any) -> None:
        self._grow_if_full()
        self._items.append(x)

    def push_front(self, x: Any) -> None:
        self._grow_if_full()
        self._items.insert(0, x)

    def pop_back(self) -> Any:
        self._shrink_for_pop()
        return self._items.pop()

    def pop_front(self) -> Any:
        self._shrink_for_pop()
        return self._items.pop(0)

    def _check(self, pos: int) -> None:
        if not 0 <= pos < len(self._items):
            raise IndexError("array index out of range")

    def __getitem__(self, pos: int) -> Any:
        self._check(pos)
        return self._items[pos]

    def __setitem__(self, pos: int, value: Any) -> None:
        self._check(pos)
        self._items[pos] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"DynamicArray({self._items!r}, capacity={self._capacity})"


@dataclass(eq=False)
class _Node:
    value: Any
    next: _Node | None = None
    prev: _Node | None = None


class DoublyLinkedList:
    """Doubly linked list with access at both ends and by position."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    def push_back(self, x: Any) -> None:
        node = _Node(x, None, self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def push_front(self, x: Any) -> None:
        node = _Node(x, self._head, None)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def pop_back(self) -> Any:
        node = self._tail
        if node is None:
            raise IndexError("pop from an empty list")
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._size -= 1
        return node.value

    def pop_front(self) -> Any:
        node = self._head
        if node is None:
            raise IndexError("pop from an empty list")
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return node.value

    def _node_at(self, pos: int) -> _Node:
        if not 0 <= pos < self._size:
            raise IndexError("list index out of range")
        if pos <= self._size // 2:
            node = self._head
            for _ in range(pos):
                node = node.next
        else:
            node = self._tail
            for _ in range(self._size - 1 - pos):
                node = node.prev
        return node

    def __getitem__(self, pos: int) -> Any:
        return self._node_at(pos).value

    def __setitem__(self, pos: int, value: Any) -> None:
        self._node_at(pos).value = value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"