"""Problems solved by two pointers or by binary search on the answer."""

from __future__ import annotations

from collections.abc import Callable, Sequence


def _least_true(low: int, high: int, ok: Callable[[int], bool]) -> int:
    """Smallest value in [low, high] for which the monotone ``ok`` holds."""
    while low < high:
        mid = (low + high) // 2
        if ok(mid):
            high = mid
        else:
            low = mid + 1
    return low


def closest_to_zero_pair(values: Sequence[int]) -> tuple[int, int]:
    """Two different entries of ``values`` whose sum is closest to zero, smaller first."""
    ordered = sorted(values)
    if len(ordered) < 2:
        raise ValueError("at least two values are needed")
    left, right = 0, len(ordered) - 1
    best = (ordered[left], ordered[right])
    best_gap = abs(sum(best))
    while left < right:
        total = ordered[left] + ordered[right]
        if abs(total) < best_gap:
            best_gap = abs(total)
            best = (ordered[left], ordered[right])
        if total < 0:
            left += 1
        elif total > 0:
            right -= 1
        else:
            break
    return best


def _discs_needed(lengths: Sequence[int], size: int) -> int:
    discs, filled = 1, 0
    for length in lengths:
        if filled + length > size:
            discs += 1
            filled = 0
        filled += length
    return discs


def min_bluray_size(lengths: Sequence[int], count: int) -> int:
    """Smallest disc size that fits the lessons, kept in order, onto ``count`` discs."""
    if count < 1:
        raise ValueError("count must be at least 1")
    if not lengths:
        raise ValueError("there must be at least one lesson")
    if any(length < 0 for length in lengths):
        raise ValueError("lesson lengths cannot be negative")
    return _least_true(max(lengths), sum(lengths), lambda size: _discs_needed(lengths, size) <= count)


def min_crane_minutes(cranes: Sequence[int], boxes: Sequence[int]) -> int | None:
    """Minutes for the cranes to move every box, one box per crane per minute.

    Returns None when some box is heavier than every crane can lift.
    """
    weights = sorted(boxes, reverse=True)
    if not weights:
        return 0
    limits = sorted(cranes, reverse=True)
    if not limits or weights[0] > limits[0]:
        return None

    def manageable(minutes: int) -> bool:
        # Crane i takes a run of `minutes` boxes whose heaviest is weights[start].
        starts = range(0, len(weights), minutes)
        if len(starts) > len(limits):
            return False
        return all(limit >= weights[start] for limit, start in zip(limits, starts))

    return _least_true(1, len(weights), manageable)


def max_router_distance(houses: Sequence[int], count: int) -> int:
    """Largest possible least gap when ``count`` routers are placed on distinct houses."""
    if count < 2:
        raise ValueError("count must be at least 2")
    if count > len(houses):
        raise ValueError("more routers than houses")
    ordered = sorted(houses)

    def placed(gap: int) -> int:
        routers, last = 1, ordered[0]
        for house in ordered[1:]:
            if house - last >= gap:
                routers += 1
                last = house
        return routers

    low, high, best = 1, ordered[-1] - ordered[0], 0
    while low <= high:
        mid = (low + high) // 2
        if placed(mid) >= count:
            best = mid
            low = mid + 1
        else:
            high = mid - 1
    return best