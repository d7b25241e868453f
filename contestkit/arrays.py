"""Answers to short array puzzles: greedy scans, prefix sums and small DPs."""

from __future__ import annotations

import math
from collections.abc import Sequence
from functools import reduce
from itertools import accumulate


def _require_same_length(a: Sequence, b: Sequence) -> None:
    if len(a) != len(b):
        raise ValueError("sequences must have the same length")


def _require_non_empty(values: Sequence) -> None:
    if not values:
        raise ValueError("at least one value is needed")


def masked_sum(mask: str, values: Sequence[int]) -> int:
    """Sum over the '1' positions of the mask, carrying a smaller earlier value forward.

    Every marked position adds the larger of its own value and the remembered
    value; the remembered value is replaced at unmarked positions and whenever
    a smaller value is seen.
    """
    _require_same_length(mask, values)
    total = 0
    carried: int | None = None
    for bit, value in zip(mask, values):
        if bit == "1":
            total += value if carried is None else max(value, carried)
        if bit == "0" or (carried is not None and value < carried):
            carried = value
    return total


def array_balancing(a: Sequence[int], b: Sequence[int]) -> int:
    """Smallest sum of neighbour differences after swapping a[i] and b[i] freely."""
    _require_same_length(a, b)
    total = 0
    for (a0, b0), (a1, b1) in zip(zip(a, b), zip(a[1:], b[1:])):
        kept = abs(a1 - a0) + abs(b1 - b0)
        swapped = abs(a1 - b0) + abs(b1 - a0)
        total += min(kept, swapped)
    return total


def array_elimination(values: Sequence[int]) -> list[int]:
    """Every k in 1..n for which the array can be zeroed by AND-eliminations of size k."""
    bit_counts = [sum(1 for v in values if v >> bit & 1) for bit in range(30)]
    g = reduce(math.gcd, bit_counts, 0)
    return [k for k in range(1, len(values) + 1) if g % k == 0]


def beat_the_odds(values: Sequence[int]) -> int:
    """Fewest removals so that every neighbouring sum is even."""
    odd = sum(1 for v in values if v & 1)
    return min(odd, len(values) - odd)


def cut_ribbon(n: int, a: int, b: int, c: int) -> int | None:
    """Most pieces of lengths a, b or c that a ribbon of length n splits into.

    Returns None when no split exists.
    """
    pieces = (a, b, c)
    if any(p <= 0 for p in pieces):
        raise ValueError("piece lengths must be positive")
    best = [0] * (n + 1)
    best[0] = 1
    for piece in pieces:
        for length in range(piece, n + 1):
            if best[length - piece]:
                best[length] = max(best[length], best[length - piece] + 1)
    return best[n] - 1 if best[n] else None


def diamond_miner(points: Sequence[tuple[int, int]]) -> float:
    """Least total energy when miners on the y axis pair with mines on the x axis."""
    miners = sorted(abs(y) for x, y in points if x == 0)
    mines = sorted(abs(x) for x, y in points if x != 0)
    if len(miners) != len(mines):
        raise ValueError("there must be as many miners as mines")
    return sum(math.sqrt(1.0 * x * x + 1.0 * y * y) for x, y in zip(mines, miners))


def dima_line(points: Sequence[int]) -> bool:
    """Whether semicircles joining consecutive points on a line cross each other."""
    arcs = [(min(p, q), max(p, q)) for p, q in zip(points, points[1:])]
    return any(lo < r_lo < hi < r_hi for lo, hi in arcs for r_lo, r_hi in arcs)


def directional_increase(values: Sequence[int]) -> bool:
    """Whether the array can be produced by the pointer walk that starts from zeros."""
    _require_non_empty(values)
    prefix = list(accumulate(values))
    if prefix[-1] != 0 or any(p < 0 for p in prefix):
        return False
    while prefix and prefix[-1] == 0:
        prefix.pop()
    return 0 not in prefix


def dragons(strength: int, dragons: Sequence[tuple[int, int]]) -> bool:
    """Whether every dragon (its strength, its bonus) can be beaten in some order."""
    for needed, bonus in sorted(dragons, key=lambda d: (d[0], -d[1])):
        if strength <= needed:
            return False
        strength += bonus
    return True


def flipping_game(values: Sequence[int]) -> int:
    """Most ones after flipping exactly one non-empty segment of a 0/1 array."""
    _require_non_empty(values)
    gains = [-1 if v == 1 else 1 for v in values]
    best = current = gains[0]
    for gain in gains[1:]:
        current = max(current + gain, gain)
        best = max(best, current)
    return sum(values) + best


def card_game_winners(alice: Sequence[int], bob: Sequence[int]) -> tuple[str, str]:
    """Winner when Alice moves first, then the winner when Bob moves first."""
    top_alice = max([0, *alice])
    top_bob = max([0, *bob])
    alice_first = "Alice" if top_alice >= top_bob else "Bob"
    bob_first = "Bob" if top_bob >= top_alice else "Alice"
    return alice_first, bob_first


def good_pair(values: Sequence[int]) -> tuple[int, int]:
    """1-based positions of the first minimum and the first maximum."""
    _require_non_empty(values)
    low = values.index(min(values))
    high = values.index(max(values))
    return low + 1, high + 1


def great_graph_cost(weights: Sequence[int]) -> int:
    """Smallest total weight of a graph consistent with the shortest distances."""
    _require_non_empty(weights)
    if len(weights) < 3:
        return 0
    return -max(weights)


def great_sequence(values: Sequence[int], x: int) -> int:
    """Fewest numbers to add so the values split into pairs (v, v * x)."""
    if x < 2:
        raise ValueError("x must be at least 2")
    ordered = sorted(values)
    used = [False] * len(ordered)
    paired = 0
    j = len(ordered) - 1
    for i in range(len(ordered) - 1, -1, -1):
        if used[i] or ordered[i] % x:
            continue
        partner = ordered[i] // x
        while j >= 0 and (used[j] or ordered[j] > partner):
            j -= 1
        if j >= 0 and ordered[j] == partner:
            used[i] = used[j] = True
            paired += 2
    return len(ordered) - paired


def mainak(values: Sequence[int]) -> int:
    """Largest a[n-1] - a[0] reachable by rotating one segment once."""
    _require_non_empty(values)
    if len(values) == 1:
        return 0
    first, last = values[0], values[-1]
    candidates = [last - first]
    candidates.extend(p - q for p, q in zip(values, values[1:]))
    candidates.extend(v - first for v in values[1:])
    candidates.extend(last - v for v in values[:-1])
    return max(candidates)


def _moves_to_climb(steps: Sequence[int]) -> int:
    moves = 0
    current = 0
    for step in steps:
        k = current // step + 1
        moves += k
        current = step * k
    return moves


def make_increasing(values: Sequence[int]) -> int:
    """Fewest add/subtract moves making the zero array strictly increasing."""
    _require_non_empty(values)
    return min(
        _moves_to_climb(values[p + 1:]) + _moves_to_climb(values[p - 1::-1] if p else [])
        for p in range(len(values))
    )


def avengers(values: Sequence[int]) -> int:
    """Score difference of two players greedily taking runs from either end."""
    totals = [0, 0]
    lo, hi = 0, len(values) - 1
    turn = 0
    while lo <= hi:
        if values[lo] > values[hi]:
            taken = values[lo]
            lo += 1
            if taken > 0:
                while lo <= hi and values[lo] > 0:
                    taken += values[lo]
                    lo += 1
        else:
            taken = values[hi]
            hi -= 1
            if taken > 0:
                while hi >= lo and values[hi] > 0:
                    taken += values[hi]
                    hi -= 1
        totals[turn % 2] += taken
        turn += 1
    return abs(totals[0] - totals[1])