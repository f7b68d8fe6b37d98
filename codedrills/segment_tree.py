"""A point-update, range-sum segment tree and a query runner on top of it."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

UPDATE, SUM = 1, 2


class SegmentTree:
    """Range sums over a fixed-length sequence that supports point updates."""

    def __init__(self, values: Iterable[int]) -> None:
        items = list(values)
        self._n = len(items)
        self._tree = [0] * self._n + items
        for i in range(self._n - 1, 0, -1):
            self._tree[i] = self._tree[2 * i] + self._tree[2 * i + 1]

    def __len__(self) -> int:
        return self._n

    def update(self, index: int, value: int) -> None:
        """Set the element at 0-based ``index`` to ``value``."""
        if not 0 <= index < self._n:
            raise IndexError(f"index {index} is outside 0..{self._n - 1}")
        pos = index + self._n
        self._tree[pos] = value
        pos //= 2
        while pos >= 1:
            self._tree[pos] = self._tree[2 * pos] + self._tree[2 * pos + 1]
            pos //= 2

    def sum(self, start: int, end: int) -> int:
        """Sum of the elements with 0-based indices in ``[start, end)``."""
        if not 0 <= start <= end <= self._n:
            raise IndexError(f"range [{start}, {end}) is not inside 0..{self._n}")
        total = 0
        lo, hi = start + self._n, end + self._n
        while lo < hi:
            if lo & 1:
                total += self._tree[lo]
                lo += 1
            if hi & 1:
                hi -= 1
                total += self._tree[hi]
            lo //= 2
            hi //= 2
        return total


def process_queries(values: Iterable[int], queries: Iterable[Sequence[int]]) -> list[int]:
    """Run 1-based queries and return the answers to the sum queries in order.

    ``(1, b, c)`` sets element ``b`` to ``c``; ``(2, b, c)`` asks for the sum of
    elements ``b`` through ``c`` inclusive.
    """
    tree = SegmentTree(values)
    answers = []
    for kind, b, c in queries:
        if kind == UPDATE:
            tree.update(b - 1, c)
        elif kind == SUM:
            answers.append(tree.sum(b - 1, c))
        else:
            raise ValueError(f"unknown query kind {kind!r}")
    return answers