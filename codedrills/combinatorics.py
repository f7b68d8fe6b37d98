"""Counting and subset problems: binomials, diets, balance weights, divisible subarrays."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate, combinations

NUTRIENTS = 4


def binomial(n: int, k: int) -> int:
    """Number of ways to choose ``k`` items out of ``n``; 0 when ``k`` exceeds ``n``."""
    if n < 0 or k < 0:
        raise ValueError("n and k cannot be negative")
    return math.comb(n, k)


def cheapest_diet(
    minimums: Sequence[int], ingredients: Sequence[Sequence[int]]
) -> tuple[int, list[int]] | None:
    """Cheapest choice of ingredients meeting every nutrient minimum.

    ``minimums`` holds four nutrient floors; each ingredient is a tuple of four
    nutrient amounts followed by its cost. Returns the least cost with the
    1-based ingredient numbers, the lexicographically smallest choice among
    those of equal cost, or None when no choice meets the minimums.
    """
    if len(minimums) != NUTRIENTS:
        raise ValueError(f"exactly {NUTRIENTS} minimums are needed")
    for item in ingredients:
        if len(item) != NUTRIENTS + 1:
            raise ValueError(f"each ingredient needs {NUTRIENTS} nutrients and a cost")

    best: tuple[int, list[int]] | None = None
    numbers = range(1, len(ingredients) + 1)
    for size in range(len(ingredients) + 1):
        for chosen in combinations(numbers, size):
            totals = [sum(ingredients[i - 1][n] for i in chosen) for n in range(NUTRIENTS + 1)]
            if any(have < need for have, need in zip(totals, minimums)):
                continue
            candidate = (totals[NUTRIENTS], list(chosen))
            if best is None or candidate < best:
                best = candidate
    return best


def measurable_weights(weights: Iterable[int], targets: Iterable[int]) -> list[bool]:
    """For each target, whether a two-pan balance can weigh it with the given weights.

    Weights may go on either pan, next to the object or opposite it.
    """
    reachable = {0}
    for weight in weights:
        if weight < 0:
            raise ValueError("weights cannot be negative")
        reachable |= {r + weight for r in reachable} | {abs(r - weight) for r in reachable}
    return [target in reachable for target in targets]


def count_divisible_subarrays(values: Iterable[int], m: int) -> int:
    """Number of contiguous runs of ``values`` whose sum is divisible by ``m``."""
    if m < 1:
        raise ValueError("m must be at least 1")
    remainders = Counter(total % m for total in accumulate(values, initial=0))
    return sum(count * (count - 1) // 2 for count in remainders.values())