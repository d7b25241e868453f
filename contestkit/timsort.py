"""A simple TimSort: insertion-sorted runs merged pairwise."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Iterable, MutableSequence
from heapq import merge as _heap_merge
from typing import Any

RUN = 32


def insertion_sort(values: MutableSequence[Any], left: int, right: int) -> None:
    """Sort ``values[left..right]`` (inclusive) in place, stably."""
    for i in range(left + 1, right + 1):
        item = values[i]
        pos = bisect_right(values, item, left, i)
        values[pos + 1:i + 1] = values[pos:i]
        values[pos] = item


def merge(values: MutableSequence[Any], left: int, mid: int, right: int) -> None:
    """Merge sorted ``values[left..mid]`` and ``values[mid+1..right]`` in place."""
    values[left:right + 1] = list(
        _heap_merge(values[left:mid + 1], values[mid + 1:right + 1])
    )


def tim_sort(values: Iterable[Any], run: int = RUN) -> list[Any]:
    """A sorted list of the values, built from runs of length ``run``."""
    if run < 1:
        raise ValueError("run must be positive")
    items = list(values)
    n = len(items)
    for start in range(0, n, run):
        insertion_sort(items, start, min(start + run - 1, n - 1))
    size = run
    while size < n:
        for left in range(0, n, 2 * size):
            mid = left + size - 1
            right = min(left + 2 * size - 1, n - 1)
            if mid < right:
                merge(items, left, mid, right)
        size *= 2
    return items