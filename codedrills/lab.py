"""Laboratory containment: walls, spreading virus and safe areas on a small grid."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from itertools import combinations

EMPTY, WALL, VIRUS = 0, 1, 2
_STEPS = ((-1, 0), (0, -1), (1, 0), (0, 1))


def _check(lab: Sequence[Sequence[int]]) -> tuple[int, int]:
    rows = len(lab)
    cols = len(lab[0]) if rows else 0
    for row in lab:
        if len(row) != cols:
            raise ValueError("lab rows must all have the same length")
        for cell in row:
            if cell not in (EMPTY, WALL, VIRUS):
                raise ValueError(f"unknown lab cell value {cell!r}")
    return rows, cols


def count_safe_after_spread(lab: Sequence[Sequence[int]]) -> int:
    """Empty cells left once virus (2) has spread through every reachable empty cell."""
    rows, cols = _check(lab)
    infected = {(r, c) for r, row in enumerate(lab) for c, cell in enumerate(row) if cell == VIRUS}
    queue = deque(infected)
    while queue:
        r, c = queue.popleft()
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols and lab[nr][nc] == EMPTY and (nr, nc) not in infected:
                infected.add((nr, nc))
                queue.append((nr, nc))
    empty = sum(row.count(EMPTY) for row in lab)
    return empty - sum(1 for r, c in infected if lab[r][c] == EMPTY)


def max_safe_area(lab: Sequence[Sequence[int]]) -> int:
    """Largest safe area reachable by building exactly three new walls on empty cells.

    Returns 0 when fewer than three empty cells exist. The input is not changed.
    """
    _check(lab)
    empties = [(r, c) for r, row in enumerate(lab) for c, cell in enumerate(row) if cell == EMPTY]
    work = [list(row) for row in lab]
    best = 0
    for walls in combinations(empties, 3):
        for r, c in walls:
            work[r][c] = WALL
        best = max(best, count_safe_after_spread(work))
        for r, c in walls:
            work[r][c] = EMPTY
    return best