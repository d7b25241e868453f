"""Fibonacci numbers modulo m via the Pisano period."""

from __future__ import annotations


def fibonacci_mod_small(n: int, m: int) -> int:
    """F(n) with each term from F(2) on reduced modulo m."""
    if n < 0:
        raise ValueError("n must not be negative")
    if m < 1:
        raise ValueError("m must be positive")
    if n == 0:
        return 0
    prev, cur = 0, 1
    for _ in range(n - 1):
        prev, cur = cur, (prev + cur) % m
    return cur


def pisano_period(m: int) -> int:
    """Length of the period of Fibonacci numbers modulo m; 0 for m == 1."""
    if m < 1:
        raise ValueError("m must be positive")
    if m == 1:
        return 0
    previous = -1
    before, current = 1, 1 % m
    i = 2
    while True:
        if current == 1 and previous == 0:
            return i - 1
        previous = current
        before, current = current, (before + current) % m
        i += 1


def fibonacci_huge(n: int, m: int) -> int:
    """F(n) mod m for large n, using the Pisano period."""
    if m < 2:
        raise ValueError("m must be at least 2")
    return fibonacci_mod_small(n % pisano_period(m), m)


def fibonacci_sum_last_digit(n: int) -> int:
    """Last digit of F(0) + F(1) + ... + F(n)."""
    return (fibonacci_huge(n + 2, 10) - 1) % 10