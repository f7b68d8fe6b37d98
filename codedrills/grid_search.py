"""Grid problems: prefix sums, knight-jumping monkeys, spreading viruses and Z-order."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

Grid = Sequence[Sequence[int]]

OBSTACLE = 1
_STEPS = ((-1, 0), (0, -1), (1, 0), (0, 1))
_KNIGHT = ((-2, -1), (-2, 1), (-1, -2), (-1, 2), (1, -2), (1, 2), (2, -1), (2, 1))


def _shape(grid: Grid) -> tuple[int, int]:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    if any(len(row) != cols for row in grid):
        raise ValueError("grid rows must all have the same length")
    return rows, cols


class PrefixSum2D:
    """Constant-time sums over rectangles of a fixed integer grid.

    Rows and columns are numbered from 1, as in the usual problem statement.
    """

    def __init__(self, grid: Grid) -> None:
        self.rows, self.cols = _shape(grid)
        acc = [[0] * (self.cols + 1) for _ in range(self.rows + 1)]
        for i, row in enumerate(grid, 1):
            running = 0
            above, here = acc[i - 1], acc[i]
            for j, value in enumerate(row, 1):
                running += value
                here[j] = above[j] + running
        self._acc = acc

    def query(self, r1: int, c1: int, r2: int, c2: int) -> int:
        """Sum of the cells from (r1, c1) to (r2, c2) inclusive, 1-based."""
        if not (1 <= r1 <= r2 <= self.rows and 1 <= c1 <= c2 <= self.cols):
            raise ValueError(
                f"rectangle ({r1}, {c1})-({r2}, {c2}) is not inside the {self.rows}x{self.cols} grid"
            )
        acc = self._acc
        return acc[r2][c2] - acc[r1 - 1][c2] - acc[r2][c1 - 1] + acc[r1 - 1][c1 - 1]


def min_monkey_moves(k: int, board: Grid) -> int | None:
    """Fewest moves from the top-left to the bottom-right cell of ``board``.

    The monkey steps to any of the four neighbours, and up to ``k`` times may
    jump like a chess knight instead. Cells holding 1 are obstacles. Returns
    None when the goal cannot be reached.
    """
    if k < 0:
        raise ValueError("the number of knight jumps cannot be negative")
    rows, cols = _shape(board)
    if rows == 0 or cols == 0:
        raise ValueError("board must not be empty")
    goal = (rows - 1, cols - 1)
    if goal == (0, 0):
        return 0

    seen = {(0, 0, 0)}
    queue = deque([(0, 0, 0, 0)])
    while queue:
        r, c, used, moves = queue.popleft()
        options = [(dr, dc, used) for dr, dc in _STEPS]
        if used < k:
            options.extend((dr, dc, used + 1) for dr, dc in _KNIGHT)
        for dr, dc, next_used in options:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < rows and 0 <= nc < cols):
                continue
            if board[nr][nc] == OBSTACLE or (nr, nc, next_used) in seen:
                continue
            if (nr, nc) == goal:
                return moves + 1
            seen.add((nr, nc, next_used))
            queue.append((nr, nc, next_used, moves + 1))
    return None


def virus_type_at(grid: Grid, seconds: int, row: int, col: int) -> int:
    """Virus number at (row, col), 1-based, after ``seconds`` of spreading.

    Every second each virus spreads to its empty (0) neighbours, viruses with
    lower numbers first, so a contested cell goes to the lowest number.
    Returns 0 when the cell is still empty.
    """
    rows, cols = _shape(grid)
    if seconds < 0:
        raise ValueError("seconds cannot be negative")
    if not (1 <= row <= rows and 1 <= col <= cols):
        raise ValueError(f"cell ({row}, {col}) is outside the {rows}x{cols} grid")
    cells = [list(line) for line in grid]
    if any(value < 0 for line in cells for value in line):
        raise ValueError("virus numbers cannot be negative")

    frontier = sorted(
        (value, r, c) for r, line in enumerate(cells) for c, value in enumerate(line) if value > 0
    )
    for _ in range(seconds):
        if not frontier:
            break
        spread = []
        for value, r, c in frontier:
            for dr, dc in _STEPS:
                nr, nc = r + dr, c + dc
                if 0 <= nr < rows and 0 <= nc < cols and cells[nr][nc] == 0:
                    cells[nr][nc] = value
                    spread.append((value, nr, nc))
        frontier = spread
    return cells[row - 1][col - 1]


def z_order(n: int, r: int, c: int) -> int:
    """Visiting order of cell (r, c), 0-based, in a Z-curve over a 2**n square."""
    if n < 0:
        raise ValueError("n cannot be negative")
    size = 1 << n
    if not (0 <= r < size and 0 <= c < size):
        raise ValueError(f"cell ({r}, {c}) is outside the {size}x{size} square")
    order = 0
    while size > 1:
        half = size // 2
        quadrant = 2 * (r >= half) + (c >= half)
        order += quadrant * half * half
        r %= half
        c %= half
        size = half
    return order