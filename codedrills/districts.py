"""Splitting a map of areas into two connected electoral districts."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from itertools import combinations


def _connected(members: set[int], adjacency: Sequence[Sequence[int]]) -> bool:
    start = next(iter(members))
    seen = {start}
    queue = deque([start])
    while queue:
        for nxt in adjacency[queue.popleft() - 1]:
            if nxt in members and nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return seen == members


def min_population_difference(
    populations: Sequence[int], adjacency: Sequence[Sequence[int]]
) -> int | None:
    """Smallest population gap between two districts that split areas 1..n.

    ``populations[i]`` and ``adjacency[i]`` describe area ``i + 1``; adjacency
    lists hold area numbers. Each district must be non-empty and connected.
    Returns None when no such split exists.
    """
    n = len(populations)
    if len(adjacency) != n:
        raise ValueError("populations and adjacency must describe the same areas")
    for neighbours in adjacency:
        for area in neighbours:
            if not 1 <= area <= n:
                raise ValueError(f"area {area} is outside 1..{n}")

    areas = range(1, n + 1)
    total = sum(populations)
    best: int | None = None
    # Area 1 always lies in the first district; the other choice is its mirror.
    rest = list(areas)[1:]
    for size in range(len(rest)):
        for extra in combinations(rest, size):
            first = {1, *extra}
            second = set(areas) - first
            if not _connected(first, adjacency) or not _connected(second, adjacency):
                continue
            share = sum(populations[area - 1] for area in first)
            gap = abs(total - 2 * share)
            if best is None or gap < best:
                best = gap
    return best