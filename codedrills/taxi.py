"""A taxi ferrying passengers one at a time across a walled grid on limited fuel."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

Cell = tuple[int, int]
Grid = Sequence[Sequence[int]]

WALL = 1
_STEPS = ((-1, 0), (0, -1), (1, 0), (0, 1))


@dataclass(frozen=True)
class Passenger:
    """A passenger waiting at ``source`` who wants to reach ``destination``."""

    source: Cell
    destination: Cell


def _check_grid(grid: Grid) -> tuple[int, int]:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows must all have the same length")
    return rows, cols


def _check_cell(rows: int, cols: int, cell: Cell) -> None:
    r, c = cell
    if not (0 <= r < rows and 0 <= c < cols):
        raise ValueError(f"cell {cell} is outside the {rows}x{cols} grid")


def bfs_distances(grid: Grid, start: Cell) -> dict[Cell, int]:
    """Step counts from ``start`` to every reachable open cell; walls (1) block moves."""
    rows, cols = _check_grid(grid)
    start = tuple(start)
    _check_cell(rows, cols, start)
    dist = {start: 0}
    queue = deque([start])
    while queue:
        r, c = queue.popleft()
        for dr, dc in _STEPS:
            nxt = (r + dr, c + dc)
            nr, nc = nxt
            if not (0 <= nr < rows and 0 <= nc < cols):
                continue
            if grid[nr][nc] == WALL or nxt in dist:
                continue
            dist[nxt] = dist[(r, c)] + 1
            queue.append(nxt)
    return dist


def run_taxi(grid: Grid, taxi: Cell, passengers: Iterable[Passenger], fuel: int) -> int | None:
    """Deliver every passenger and return the fuel left, or None if the taxi fails.

    The taxi always picks the nearest passenger, breaking ties by lower row and
    then lower column. Each leg costs one fuel per step; on reaching a
    destination the taxi regains twice the fuel spent on that ride. Running out
    of fuel mid-leg, or an unreachable passenger or destination, fails the run.
    """
    rows, cols = _check_grid(grid)
    taxi = tuple(taxi)
    _check_cell(rows, cols, taxi)

    waiting: list[tuple[Passenger, int | None]] = []
    for passenger in passengers:
        _check_cell(rows, cols, passenger.source)
        _check_cell(rows, cols, passenger.destination)
        trip = bfs_distances(grid, passenger.source).get(tuple(passenger.destination))
        waiting.append((passenger, trip))

    while waiting:
        reach = bfs_distances(grid, taxi)

        def priority(entry: tuple[Passenger, int | None]) -> tuple[float, Cell]:
            source = tuple(entry[0].source)
            return reach.get(source, math.inf), source

        chosen = min(waiting, key=priority)
        waiting.remove(chosen)
        passenger, trip = chosen
        pickup = reach.get(tuple(passenger.source))
        if pickup is None or trip is None:
            return None
        needed = pickup + trip
        if fuel < needed:
            return None
        fuel += trip - pickup
        taxi = tuple(passenger.destination)
    return fuel