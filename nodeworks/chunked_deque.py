"""A double-ended queue stored as a map of fixed-size blocks."""

from __future__ import annotations

import operator
from collections import deque
from collections.abc import Iterator
from typing import Any


class ChunkedDeque:
    """Deque whose values live in fixed-size blocks held by a growable map.

    The first value is placed in the middle of its block. Values pushed at the
    back fill the block towards its end and values pushed at the front fill it
    towards its start. A new block is opened when the edge block is full.
    """

    def __init__(self, map_size: int = 8, block_size: int = 8) -> None:
        if map_size < 1:
            raise ValueError("map_size must be at least 1")
        if block_size < 1:
            raise ValueError("block_size must be at least 1")
        self._map_capacity = map_size
        self._block_size = block_size
        self._blocks: deque[list[Any]] = deque()
        self._start = 0
        self._stop = 0
        self._size = 0

    @property
    def block_size(self) -> int:
        """Number of slots in each block."""
        return self._block_size

    @property
    def map_capacity(self) -> int:
        """Number of block slots the map currently reserves."""
        return self._map_capacity

    def _new_block(self) -> list[Any]:
        return [None] * self._block_size

    def _start_first_block(self, x: Any) -> None:
        block = self._new_block()
        middle = self._block_size // 2
        block[middle] = x
        self._blocks.append(block)
        self._start = middle
        self._stop = middle + 1
        self._size = 1

    def _reserve_block(self) -> None:
        if len(self._blocks) >= self._map_capacity:
            self._map_capacity *= 2

    def _release_block(self) -> None:
        if len(self._blocks) == self._map_capacity // 2:
            self._map_capacity //= 2

    def push_back(self, x: Any) -> None:
        """Append ``x`` at the back."""
        if not self._size:
            self._start_first_block(x)
            return
        if self._stop == self._block_size:
            self._reserve_block()
            block = self._new_block()
            block[0] = x
            self._blocks.append(block)
            self._stop = 1
        else:
            self._blocks[-1][self._stop] = x
            self._stop += 1
        self._size += 1

    def push_front(self, x: Any) -> None:
        """Insert ``x`` at the front."""
        if not self._size:
            self._start_first_block(x)
            return
        if self._start == 0:
            self._reserve_block()
            block = self._new_block()
            block[-1] = x
            self._blocks.appendleft(block)
            self._start = self._block_size - 1
        else:
            self._start -= 1
            self._blocks[0][self._start] = x
        self._size += 1

    def _clear(self) -> None:
        self._blocks.clear()
        self._start = self._stop = self._size = 0

    def pop_front(self) -> Any:
        """Remove and return the front value."""
        if not self._size:
            raise IndexError("pop from an empty deque")
        value = self._blocks[0][self._start]
        if self._size == 1:
            self._clear()
            return value
        if self._start == self._block_size - 1:
            self._release_block()
            self._blocks.popleft()
            self._start = 0
        else:
            self._start += 1
        self._size -= 1
        return value

    def pop_back(self) -> Any:
        """Remove and return the back value."""
        if not self._size:
            raise IndexError("pop from an empty deque")
        value = self._blocks[-1][self._stop - 1]
        if self._size == 1:
            self._clear()
            return value
        if self._stop == 1:
            self._release_block()
            self._blocks.pop()
            self._stop = self._block_size
        else:
            self._stop -= 1
        self._size -= 1
        return value

    def __getitem__(self, pos: int) -> Any:
        pos = operator.index(pos)
        if pos < 0:
            pos += self._size
        if not 0 <= pos < self._size:
            raise IndexError("deque index out of range")
        offset = self._start + pos
        return self._blocks[offset // self._block_size][offset % self._block_size]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for block in self.blocks():
            yield from block

    def blocks(self) -> list[list[Any]]:
        """Return the occupied part of every block, front block first."""
        if not self._size:
            return []
        last = len(self._blocks) - 1
        result = []
        for index, block in enumerate(self._blocks):
            begin = self._start if index == 0 else 0
            end = self._stop if index == last else self._block_size
            result.append(block[begin:end])
        return result

    def __repr__(self) -> str:
        return f"ChunkedDeque({self.blocks()!r})"