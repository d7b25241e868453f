"""Puzzles whose answer is a constructed sequence or a simulated outcome."""

from __future__ import annotations

from bisect import bisect_left, bisect_right, insort
from collections import Counter
from collections.abc import Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_NEGATED = {">=": "<", ">": "<=", "<=": ">", "<": ">="}


def and_matching(n: int, k: int) -> list[tuple[int, int]] | None:
    """Pair up 0..n-1 so that the ANDs of the pairs sum to k, or None if impossible."""
    if n < 4 or n & (n - 1):
        raise ValueError("n must be a power of two, at least 4")
    if not 0 <= k <= n - 1:
        raise ValueError("k must lie in 0..n-1")
    if k == 0:
        return [(i, i ^ (n - 1)) for i in range(n // 2)]
    if k < n - 1:
        pairs = [(k, n - 1)]
        lo, hi = 1, n - 2
        while lo < hi:
            if lo == k:
                pairs.append((0, hi))
            elif hi == k:
                pairs.append((0, lo))
            else:
                pairs.append((hi, lo))
            lo += 1
            hi -= 1
        return pairs
    if n == 4:
        return None
    pairs = [(n - 1, n - 2), (1, n - 3), (0, 2)]
    pairs.extend(zip(range(3, n // 2), range(n - 4, n // 2 - 1, -1)))
    return pairs


def guess_number(hints: Sequence[tuple[str, int, str]]) -> int | None:
    """A number consistent with all (sign, number, 'Y'/'N') hints, or None."""
    low, high = INT_MIN, INT_MAX
    for sign, number, answer in hints:
        if sign not in _NEGATED:
            raise ValueError(f"unknown sign {sign!r}")
        if answer not in ("Y", "N"):
            raise ValueError(f"unknown answer {answer!r}")
        if answer == "N":
            sign = _NEGATED[sign]
        if sign == ">=":
            low = max(low, number)
        elif sign == ">":
            low = max(low, number + 1)
        elif sign == "<=":
            high = min(high, number)
        else:
            high = min(high, number - 1)
    if low > high:
        return None
    return high if low == INT_MIN else low


def knight_tournament(n: int, fights: Sequence[tuple[int, int, int]]) -> list[int]:
    """Who beat each knight 1..n; 0 for the overall winner and untouched knights."""
    beaten_by = [0] * (n + 1)
    alive = list(range(1, n + 1))
    for left, right, winner in fights:
        if not 1 <= left <= winner <= right <= n:
            raise ValueError("each fight needs 1 <= l <= x <= r <= n")
        lo = bisect_left(alive, left)
        hi = bisect_right(alive, right)
        for knight in alive[lo:hi]:
            beaten_by[knight] = winner
        del alive[lo:hi]
        insort(alive, winner)
        beaten_by[winner] = 0
    return beaten_by[1:]


def meximization(values: Sequence[int]) -> list[int]:
    """Order the values to maximise the sum of prefix MEX values."""
    if any(v < 0 for v in values):
        raise ValueError("values must not be negative")
    if 0 not in values:
        return list(values)
    counts = Counter(values)
    ordered: list[int] = []
    while counts:
        present = sorted(counts)
        ordered.extend(present)
        for value in present:
            counts[value] -= 1
            if not counts[value]:
                del counts[value]
    return ordered


def meximum_array(values: Sequence[int]) -> list[int]:
    """Lexicographically largest array of MEX values of consecutive prefixes removed."""
    remaining = Counter(values)
    result: list[int] = []
    seen: set[int] = set()
    mex = 0
    for value in values:
        remaining[value] -= 1
        seen.add(value)
        while mex in seen:
            mex += 1
        if remaining[mex] <= 0:
            seen.clear()
            result.append(mex)
            mex = 0
    return result