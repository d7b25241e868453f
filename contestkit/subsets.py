"""Enumerating every subset of a sequence."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import compress, product
from typing import TypeVar

T = TypeVar("T")


def subsets(nums: Sequence[T]) -> list[list[T]]:
    """All 2**n subsets, keeping element order.

    Subsets leaving out an element come before those including it, with the
    first element deciding first.
    """
    return [
        list(compress(nums, chosen))
        for chosen in product((False, True), repeat=len(nums))
    ]