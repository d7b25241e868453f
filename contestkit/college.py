"""Assigning students to colleges by score and preference."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """A student's name, score and three college preferences in order."""

    name: str
    score: float
    preferences: tuple[str, str, str]


def parse_student(line: str) -> Student:
    """Parse ``name,score,first,second,third`` into a Student."""
    fields = line.strip().split(",")
    if len(fields) < 5:
        raise ValueError(f"expected name, score and three colleges in {line!r}")
    name, score, *choices = fields
    return Student(name, float(score), tuple(choices[:3]))


def allocate(
    capacities: Sequence[int], students: Sequence[Student]
) -> list[tuple[str, str]]:
    """Pairs of (student, college), best score first, earlier input first on ties.

    Colleges are named ``C-1``, ``C-2``, ... after their position in
    ``capacities``. A student gets the first preferred college with a free
    seat; students with no free preferred college are left out.
    """
    seats = {f"C-{i}": capacity for i, capacity in enumerate(capacities, start=1)}
    ordered = sorted(enumerate(students), key=lambda pair: (-pair[1].score, pair[0]))
    placed: list[tuple[str, str]] = []
    for _, student in ordered:
        college = next((c for c in student.preferences if seats.get(c, 0) > 0), None)
        if college is not None:
            seats[college] -= 1
            placed.append((student.name, college))
    return placed