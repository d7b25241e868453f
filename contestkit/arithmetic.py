"""Closed-form and small-search answers to short arithmetic puzzles."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from functools import reduce
from operator import or_

MOD = 1_000_000_007


def _tdiv(a: int, b: int) -> int:
    """Integer division that truncates toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _tmod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    return a - b * _tdiv(a, b)


def am_deviation(a: int, b: int, c: int) -> int:
    """Smallest reachable |a + c - 2b| after moving units between the numbers."""
    return 1 if abs(a + c - 2 * b) % 3 else 0


def _divide_steps(x: int, y: int) -> int:
    steps = 0
    while x > 0:
        if x == y:
            y += 1
        else:
            x //= y
        steps += 1
    return steps


def add_and_divide(a: int, b: int) -> int:
    """Fewest operations (divide a by b, or increment b) to bring a to zero."""
    extra = 0
    if b == 1:
        b, extra = 2, 1
    best = min(_divide_steps(a, b + i) + i for i in range(1000))
    return best + extra


def avto_bus(n: int) -> tuple[int, int] | None:
    """Fewest and most buses for ``n`` wheels, or None when there is no answer."""
    most = n // 4 if n % 4 == 0 else None
    fewest = n // 6 if n % 6 == 0 else None
    if most is None and fewest is None:
        return None
    if most is None or fewest is None:
        only = most if most is not None else fewest
        return only, only
    return min(most, fewest), max(most, fewest)


def count_permutations(n: int) -> int:
    """Product of 3..2n modulo 1e9+7."""
    result = 1
    for i in range(3, 2 * n + 1):
        result = result * i % MOD
    return result


def cheap_travel(n: int, m: int, a: int, b: int) -> int:
    """Cheapest cost of n rides with single tickets at a and m-ride tickets at b."""
    if a * m <= b:
        return n * a
    return (n // m) * b + min((n % m) * a, b)


def cirno_bitmask(n: int) -> int:
    """Smallest positive y with both ``n & y`` and ``n ^ y`` non-zero."""
    if n < 1:
        raise ValueError("n must be positive")
    lowest = (n & -n).bit_length() - 1
    if lowest == 0:
        return 1 + (0 if n > 1 else 2)
    if bin(n).count("1") > 1:
        return 1 << lowest
    return (1 << lowest) + 1


def contest_dissatisfaction(n: int, x: int, t: int) -> int:
    """Total dissatisfaction of n participants starting every x minutes for t minutes."""
    f = min(n, t // x)
    return f * (f - 1) // 2 + (n - f) * f


def digits_sum_count(n: int) -> int:
    """How many x in 1..n have a digit sum larger than that of x + 1."""
    return (n + 1) // 10


def dungeon(a: int, b: int, c: int) -> bool:
    """Whether all three monsters can die on the same enhanced shot."""
    total = a + b + c
    least = total // 9
    return not (a < least or b < least or c < least or total % 9)


def even_odds(n: int, k: int) -> int:
    """The k-th number when 1..n is written as all odds, then all evens."""
    odds = n // 2 + 1 if n & 1 else n // 2
    if k <= odds:
        return 2 * k - 1
    return 2 * (k - odds)


def bank_account(n: int) -> int:
    """Largest balance after removing at most one of the last two digits."""
    best = max(_tdiv(n, 10), _tdiv(n, 100) * 10 + _tmod(n, 10))
    return max(best, n)


def integer_moves(x: int, y: int) -> int:
    """Moves with integer length needed to go from the origin to (x, y)."""
    square = x * x + y * y
    if square == 0:
        return 0
    root = math.isqrt(square)
    return 1 if root * root == square else 2


def k_divisible_sum(n: int, k: int) -> int:
    """Minimal maximum of n positive integers whose sum divides by k."""
    if n > k:
        k *= -(-n // k)
    return k // n + 1 if k % n else k // n


def nearly_good_numbers(a: int, b: int) -> tuple[int, int, int] | None:
    """Three numbers x + y = z with only z divisible by a*b, or None."""
    if b == 1:
        return None
    if b <= 2:
        b *= 4
    return a, a * (b - 1), a * b


def dreamoon_stairs(n: int, m: int) -> int | None:
    """Least number of moves of 1 or 2 steps up n stairs that is a multiple of m."""
    for twos in range(n // 2, -1, -1):
        if (n - twos) % m == 0:
            return (n - twos) // m * m
    return None


def joysticks(a1: int, a2: int) -> int:
    """Minutes the game lasts when the weaker joystick is always charged."""
    n, m, minutes = a1, a2, 0
    while n > 0 and m > 0:
        if n < m:
            n, m = m, n
        n -= 2
        m += 1
        if n < 0 or m < 0:
            break
        minutes += 1
    return minutes


def devu_jokes(d: int, durations: Sequence[int]) -> int | None:
    """Most jokes fitting into d minutes around the songs, or None if they do not fit."""
    if not durations:
        raise ValueError("at least one song is needed")
    gaps = len(durations) - 1
    needed = sum(durations) + 10 * gaps
    if needed > d:
        return None
    return 2 * gaps + max(0, (d - needed) // 5)


def digit_sum(num: int) -> int:
    """Sum of the decimal digits, negative for negative numbers."""
    if num == 0:
        return 0
    return digit_sum(_tdiv(num, 10)) + _tmod(num, 10)


def password_count(used_digits: Sequence[int]) -> int:
    """Four-digit passwords of exactly two distinct unused digits, each twice."""
    free = 10 - len(used_digits)
    return free * (free - 1) * 3


def last_quotient(n: int) -> int:
    """n divided by the largest i whose square is below n, or 0 if none."""
    if n <= 1:
        return 0
    return n // math.isqrt(n - 1)


def grass_field(grid: Iterable[Iterable[int]]) -> int:
    """Moves needed to cut all grass on a 2x2 field."""
    cells = sum(1 for row in grid for cell in row if cell == 1)
    if cells == 0:
        return 0
    if cells == 4:
        return 2
    return 1


def charmed_breaks(a: int, b: int) -> list[int]:
    """All possible break counts of a match where players won a and b games."""
    total = a + b
    d = abs(a - b) // 2
    step = 1 if total & 1 else 2
    return list(range(d, total - d + 1, step))


def min_or_sum(values: Iterable[int]) -> int:
    """Smallest reachable sum, which is the bitwise OR of all values."""
    return reduce(or_, values, 0)


def nit_orz(values: Sequence[int], z: int) -> int:
    """Largest element reachable by OR-ing elements with z."""
    return max(max(values), max(v | z for v in values))


def minimums_and_maximums(l1: int, r1: int, l2: int, r2: int) -> int:
    """Smallest array size with minimum in [l1, r1] and maximum in [l2, r2] counts."""
    best = l2 if l1 <= l2 <= r1 else l1 + l2
    if l2 <= l1 <= r2:
        best = min(best, l1)
    return best