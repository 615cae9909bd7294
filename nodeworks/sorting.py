"""Bubble sort driven by interchangeable comparison callables, with timings."""

from __future__ import annotations

import argparse
import time
from collections.abc import Callable, Iterable, Sequence
from typing import Any

Comparator = Callable[[Any, Any], bool]


def greater(a: Any, b: Any) -> bool:
    """Return True when ``a`` is greater than ``b``."""
    return a > b


def less(a: Any, b: Any) -> bool:
    """Return True when ``a`` is less than ``b``."""
    return a < b


class _GreaterThan:
    """Comparison object whose call says whether its first argument is larger."""

    def __call__(self, a: Any, b: Any) -> bool:
        return a > b


def bubble_sort(values: Iterable[Any], should_swap: Comparator = greater) -> list[Any]:
    """Return a bubble-sorted copy; neighbours are swapped when ``should_swap`` holds."""
    items = list(values)
    n = len(items)
    for done in range(n):
        for j in range(n - done - 1):
            if should_swap(items[j], items[j + 1]):
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def timed_sort(
    values: Iterable[Any], should_swap: Comparator = greater
) -> tuple[list[Any], float]:
    """Bubble-sort ``values`` and return the result with the elapsed milliseconds."""
    items = list(values)
    start = time.perf_counter()
    result = bubble_sort(items, should_swap)
    elapsed_ms = (time.perf_counter() - start) * 1000.0
    return result, elapsed_ms


def countdown(n: int) -> list[int]:
    """Return ``n, n-1, ..., 1``: the worst case for an ascending bubble sort."""
    return list(range(n, 0, -1))


_DEFAULT_SIZES = (1000, 2000, 3000, 4000, 5000)


def main(argv: Sequence[str] | None = None) -> int:
    """Time bubble sort with several kinds of comparison callable."""
    parser = argparse.ArgumentParser(
        description="Compare bubble-sort timings for different comparison callables."
    )
    parser.add_argument(
        "--sizes",
        nargs="+",
        type=int,
        default=list(_DEFAULT_SIZES),
        help="array sizes to sort",
    )
    args = parser.parse_args(argv)

    strategies: list[tuple[str, Comparator]] = [
        ("plain function", greater),
        ("callable object", _GreaterThan()),
        ("lambda", lambda a, b: a > b),
    ]
    for size in args.sizes:
        print(f"Array size: {size}")
        start = time.perf_counter()
        bubble_sort(countdown(size))
        print(f"Bubble sort (default): {(time.perf_counter() - start) * 1000.0} ms")
        for label, comparator in strategies:
            _, elapsed = timed_sort(countdown(size), comparator)
            print(f"Bubble sort ({label}): {elapsed} ms")
        print("-" * 38)
    return 0