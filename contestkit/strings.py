"""Answers to short string puzzles: orderings, constructions and simulations."""

from __future__ import annotations

import string
from collections import Counter
from collections.abc import Iterable, Iterator, Sequence
from functools import cmp_to_key
from itertools import cycle

_KEYPAD_GROUP_STARTS = "adgjmptw"

_UNSEEN, _KEY_HELD, _DOOR_OPENED = -1, 0, 1


def _common_prefix_length(x: str, y: str) -> int:
    return next(
        (i for i, (p, q) in enumerate(zip(x, y)) if p != q),
        min(len(x), len(y)),
    )


def _asc_desc_compare(x: str, y: str) -> int:
    if x == y:
        return 0
    if _common_prefix_length(x, y) & 1:
        return -1 if x > y else 1
    return -1 if x < y else 1


def another_sorting(strings: Sequence[str]) -> list[int]:
    """1-based indices of the strings in the alternating ascending/descending order.

    Strings whose first difference falls on an odd 0-based position are ordered
    descending, otherwise ascending.
    """
    ordered = sorted(
        enumerate(strings, start=1),
        key=cmp_to_key(lambda p, q: _asc_desc_compare(p[1], q[1])),
    )
    return [index for index, _ in ordered]


def balanced_substring(s: str) -> tuple[int, int] | None:
    """1-based bounds of the first substring with as many 'a' as 'b', or None."""
    if s == "a" * len(s) or s == "b" * len(s):
        return None
    for start in range(len(s)):
        balance = 0
        for end, ch in enumerate(s[start:], start=start):
            balance += 1 if ch == "a" else -1
            if balance == 0:
                return start + 1, end + 1
    return None


def casimir(s: str) -> bool:
    """Whether the string can be erased by removing 'AB' and 'BC' pairs."""
    counts = Counter(s)
    return counts["A"] + counts["C"] == counts["B"]


def countdown(s: str) -> int:
    """Operations needed to turn the clock digits into all zeros."""
    if not s:
        raise ValueError("the clock needs at least one digit")
    total = sum(int(ch) + 1 for ch in s if int(ch) > 0)
    if s[-1] != "0":
        total -= 1
    return total


def creep(a: int, b: int) -> str:
    """Binary string of a zeros and b ones with minimal creepiness."""
    pairs = min(a, b)
    head = ("10" if a >= b else "01") * pairs
    return head + "0" * (a - pairs) + "1" * (b - pairs)


def digit_minimization(s: str) -> str:
    """Smallest digit that can remain after the swap-and-remove game."""
    if not s:
        raise ValueError("the number needs at least one digit")
    if len(s) == 2:
        return s[1]
    return min(s)


def digit_at(n: int) -> int:
    """The n-th digit (1-based) of 123456789101112..."""
    if n < 1:
        raise ValueError("n must be positive")
    seen = 0
    number = 1
    while True:
        text = str(number)
        if seen + len(text) >= n:
            return int(text[n - seen - 1])
        seen += len(text)
        number += 1


def domino_disaster(s: str) -> str:
    """The other row of a 2-row domino tiling given one row."""
    out: list[str] = []
    cells: Iterator[str] = iter(s)
    for cell in cells:
        if cell == "U":
            out.append("D")
        elif cell == "D":
            out.append("U")
        elif cell == "L":
            out.append("LR")
            next(cells, None)
    return "".join(out)


def doors_and_keys(s: str) -> bool:
    """Whether every door (upper case) is reached after its key (lower case)."""
    state = {"r": _UNSEEN, "g": _UNSEEN, "b": _UNSEEN}
    for ch in s:
        if ch in state:
            state[ch] = _KEY_HELD
        elif ch.lower() in state and ch.isupper():
            if state[ch.lower()] != _KEY_HELD:
                return False
            state[ch.lower()] = _DOOR_OPENED
        else:
            return False
    return all(value == _DOOR_OPENED for value in state.values())


def forbidden_subsequence(s: str, t: str) -> str:
    """Smallest permutation of s that does not contain t as a subsequence."""
    ordered = "".join(sorted(s))
    if t != "abc" or not ordered or ordered[0] != "a":
        return ordered
    counts = Counter(ordered)
    rest = "".join(ch for ch in ordered if ch not in "abc")
    return "a" * counts["a"] + "c" * counts["c"] + "b" * counts["b"] + rest


def fox_and_snake(n: int, m: int) -> list[str]:
    """Rows of an n-by-m grid with a snake drawn in '#'."""
    rows = []
    for i in range(n):
        if i % 2 == 0:
            rows.append("#" * m)
        elif (i + 1) % 4 == 0:
            rows.append("#" + "." * (m - 1))
        else:
            rows.append("." * (m - 1) + "#")
    return rows


def image_moves(top: str, bottom: str) -> int:
    """Moves needed to make all pixels of a 2x2 image one colour."""
    return len(set(top) | set(bottom)) - 1


def lex_string(a: str, b: str, k: int) -> str:
    """Lexicographically smallest string built from a and b, at most k in a row from one."""
    a_chars, b_chars = sorted(a), sorted(b)
    i = j = 0
    run_a = run_b = 0
    out: list[str] = []
    while i < len(a_chars) and j < len(b_chars):
        if a_chars[i] <= b_chars[j]:
            take_a = run_a < k
        else:
            take_a = run_b >= k
        if take_a:
            out.append(a_chars[i])
            i += 1
            run_a, run_b = run_a + 1, 0
        else:
            out.append(b_chars[j])
            j += 1
            run_a, run_b = 0, run_b + 1
    return "".join(out)


def linear_keyboard(keyboard: str, s: str) -> int:
    """Total hand movement to type s on a one-row keyboard."""
    position = {ch: i for i, ch in enumerate(keyboard)}
    places = [position.get(ch, 0) for ch in s]
    return sum(abs(q - p) for p, q in zip(places, places[1:]))


def is_lucky(ticket: str) -> bool:
    """Whether the first three digits sum to the last three."""
    if len(ticket) != 6:
        raise ValueError("a ticket has exactly six digits")
    return sum(map(ord, ticket[:3])) == sum(map(ord, ticket[3:]))


def _alternating(n: int, first: int, second: int) -> str:
    digits: list[str] = []
    remaining = n
    for digit in cycle((first, second)):
        if remaining <= 0:
            break
        digits.append(str(digit))
        remaining -= digit
    return "".join(digits) if remaining == 0 else ""


def madoka_number(n: int) -> str:
    """Largest number without zeros or equal neighbours whose digits sum to n."""
    return max(_alternating(n, 1, 2), _alternating(n, 2, 1))


def uncommon_subsequence(a: str, b: str) -> int | None:
    """Length of the longest uncommon subsequence, or None if there is none."""
    if a == b:
        return None
    return max(len(a), len(b))


def photoshoot(s: str) -> int:
    """Men to add so that every two-or-three long segment has more women."""
    zeros = [i for i, ch in enumerate(s) if ch == "0"]
    extra = {1: 2, 2: 1}
    return sum(extra.get(q - p, 0) for p, q in zip(zeros, zeros[1:]))


def _keypad_digits() -> dict[str, int]:
    mapping: dict[str, int] = {}
    digit = 1
    for ch in string.ascii_lowercase:
        if ch in _KEYPAD_GROUP_STARTS:
            digit += 1
        mapping[ch] = digit
    return mapping


_KEYPAD = _keypad_digits()


def _keypad_code(word: str) -> str:
    return "".join(str(_KEYPAD.get(ch, 0)) for ch in word)


def most_common_keypad_code(words: Iterable[str]) -> str:
    """Most frequent phone-keypad code of the words; the smallest one on ties."""
    counts = Counter(_keypad_code(word) for word in words)
    best, best_count = "", 0
    for code in sorted(counts):
        if counts[code] > best_count:
            best, best_count = code, counts[code]
    return best


def can_build(goal: str, pieces: Iterable[str]) -> bool:
    """Whether goal is a concatenation of some of the pieces, each used once."""
    available = Counter(pieces)
    failed_from: dict[int, bool] = {}
    n = len(goal)

    def search(i: int) -> bool:
        if i >= n:
            return True
        if i in failed_from:
            return failed_from[i]
        for j in range(i + 1, n + 1):
            piece = goal[i:j]
            if available[piece] > 0:
                available[piece] -= 1
                found = search(j)
                available[piece] += 1
                if found:
                    failed_from[i] = True
                    return True
        failed_from[i] = False
        return False

    return search(0)


def generate_parentheses(n: int) -> list[str]:
    """All balanced strings of n pairs of parentheses, in lexicographic order."""

    def build(prefix: str, opening: int, closing: int) -> Iterator[str]:
        if opening == 0 and closing == 0:
            yield prefix
            return
        if opening > 0:
            yield from build(prefix + "(", opening - 1, closing)
        if closing > 0 and opening < closing:
            yield from build(prefix + ")", opening, closing - 1)

    return list(build("", n, n))