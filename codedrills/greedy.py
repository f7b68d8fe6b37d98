"""Greedy problems built around sorting and priority queues."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

MOD = 1_000_000_007


def _pairs(values: Sequence[int]) -> Iterable[tuple[int, ...]]:
    return (tuple(values[i:i + 2]) for i in range(0, len(values), 2))


def max_bound_sum(numbers: Iterable[int]) -> int:
    """Largest sum when any two numbers may be bound together and multiplied.

    Positives are paired from the largest down, multiplied only when that beats
    adding them. Non-positive numbers are paired from the smallest up, so that
    negatives cancel each other or are absorbed by a zero.
    """
    numbers = list(numbers)
    positives = sorted((n for n in numbers if n > 0), reverse=True)
    others = sorted(n for n in numbers if n <= 0)
    total = 0
    for group in _pairs(positives):
        total += max(sum(group), group[0] * group[-1]) if len(group) == 2 else group[0]
    for group in _pairs(others):
        total += group[0] * group[1] if len(group) == 2 else group[0]
    return total


def max_jewel_value(jewels: Iterable[tuple[int, int]], bags: Iterable[int]) -> int:
    """Highest total value of jewels (mass, value) when each bag holds at most one."""
    by_mass = sorted(jewels)
    fitting: list[int] = []
    total = 0
    position = 0
    for capacity in sorted(bags):
        while position < len(by_mass) and by_mass[position][0] <= capacity:
            heapq.heappush(fitting, -by_mass[position][1])
            position += 1
        if fitting:
            total -= heapq.heappop(fitting)
    return total


def min_merge_cost(sizes: Iterable[int]) -> int:
    """Least total cost of merging all files, where a merge costs the sum of both."""
    heap = list(sizes)
    heapq.heapify(heap)
    cost = 0
    while len(heap) > 1:
        merged = heapq.heappop(heap) + heapq.heappop(heap)
        cost += merged
        heapq.heappush(heap, merged)
    return cost


def min_slime_energy(sizes: Iterable[int]) -> int:
    """Least product of merge energies, modulo 1_000_000_007.

    Merging slimes of size a and b yields one of size a*b and costs a*b energy;
    the total energy is the product of every merge's cost.
    """
    heap = list(sizes)
    heapq.heapify(heap)
    energy = 1
    while len(heap) > 1:
        merged = heapq.heappop(heap) * heapq.heappop(heap)
        heapq.heappush(heap, merged)
        energy = energy * (merged % MOD) % MOD
    return energy