"""Random pairs of numbers for test input files."""

from __future__ import annotations

import random
from os import PathLike
from pathlib import Path

RUNS = 16
LIMIT = 9999


def generate_pairs(
    runs: int = RUNS, limit: int = LIMIT, rng: random.Random | None = None
) -> list[tuple[int, int]]:
    """``runs`` pairs of integers drawn from 1..limit."""
    if runs < 0:
        raise ValueError("runs must not be negative")
    if limit < 1:
        raise ValueError("limit must be positive")
    rng = rng or random.Random()
    return [(rng.randint(1, limit), rng.randint(1, limit)) for _ in range(runs)]


def write_pairs(
    path: str | PathLike[str] = "find_the_series.txt",
    runs: int = RUNS,
    limit: int = LIMIT,
    rng: random.Random | None = None,
) -> list[tuple[int, int]]:
    """Write random pairs to ``path``, one ``a b`` line each, and return them."""
    pairs = generate_pairs(runs, limit, rng)
    Path(path).write_text("".join(f"{a} {b}\n" for a, b in pairs))
    return pairs