"""Judging a finished or unfinished board of the game of Hex."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Sequence

IMPOSSIBLE = "Impossible"
NOBODY_WINS = "Nobody wins"
RED_WINS = "Red wins"
BLUE_WINS = "Blue wins"

_NEIGHBOURS = ((-1, 0), (-1, 1), (0, 1), (1, 1), (1, 0), (1, -1), (0, -1), (-1, -1))


def _goal_cells_reached(
    board: Sequence[str],
    colour: str,
    starts: list[tuple[int, int]],
    at_goal: Callable[[int, int], bool],
) -> int:
    """Breadth-first search over one colour; counts goal-edge cells reached."""
    n = len(board)
    seen = set(starts)
    queue = deque(starts)
    hits = 0
    while queue:
        x, y = queue.popleft()
        if at_goal(x, y):
            hits += 1
            continue
        for dx, dy in _NEIGHBOURS:
            nx, ny = x + dx, y + dy
            if (
                0 <= nx < n
                and 0 <= ny < n
                and (nx, ny) not in seen
                and board[nx][ny] == colour
            ):
                seen.add((nx, ny))
                queue.append((nx, ny))
    return hits


def hex_verdict(board: Sequence[str]) -> str:
    """Verdict for an n-by-n board of 'R', 'B' and '.' cells.

    Red connects the top row to the bottom row, Blue the left column to the
    right column.
    """
    n = len(board)
    if any(len(row) != n for row in board):
        raise ValueError("the board must be square")
    red = sum(row.count("R") for row in board)
    blue = sum(row.count("B") for row in board)
    if abs(red - blue) > 1:
        return IMPOSSIBLE

    blue_hits = _goal_cells_reached(
        board,
        "B",
        [(i, 0) for i in range(n) if board[i][0] == "B"],
        lambda x, y: y == n - 1,
    )
    red_hits = _goal_cells_reached(
        board,
        "R",
        [(0, j) for j in range(n) if board[0][j] == "R"],
        lambda x, y: x == n - 1,
    )

    if red_hits == 0 and blue_hits == 0:
        return NOBODY_WINS
    if red_hits > 1 or blue_hits > 1:
        return IMPOSSIBLE
    if red_hits == 1 and blue_hits == 0:
        return RED_WINS
    if red_hits == 1 and blue_hits == 1:
        return IMPOSSIBLE
    return BLUE_WINS