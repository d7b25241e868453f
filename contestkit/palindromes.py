"""Palindrome puzzles: one-change palindromes, centre runs and longest substrings."""

from __future__ import annotations

from itertools import takewhile


def mike_palindrome(s: str) -> bool:
    """Whether changing exactly one character can make s a palindrome."""
    half = (len(s) + 1) // 2
    mismatches = sum(1 for p, q in zip(s[:half], reversed(s)) if p != q)
    return not (mismatches > 1 or (mismatches == 0 and len(s) % 2 == 0))


def palindromic_indices(s: str) -> int:
    """Indices whose removal keeps a palindrome a palindrome."""
    n = len(s)
    m = n // 2
    if n % 2:
        centre = s[m]
        left = sum(1 for _ in takewhile(lambda ch: ch == centre, reversed(s[:m])))
        right = sum(1 for _ in takewhile(lambda ch: ch == centre, s[m + 1:]))
        return 1 + left + right
    if n == 0:
        return 0
    centre = s[m]
    pairs = zip(reversed(s[:m]), s[m:])
    return 2 * sum(
        1 for _ in takewhile(lambda p: p[0] == centre and p[1] == centre, pairs)
    )


def longest_palindromic_substring(s: str) -> str:
    """The longest palindromic substring; the leftmost one on ties."""
    for length in range(len(s), 0, -1):
        for start in range(len(s) - length + 1):
            candidate = s[start:start + length]
            if candidate == candidate[::-1]:
                return candidate
    return ""