from itertools import combinations

import pytest

from codedrills.search import (
    closest_to_zero_pair,
    max_router_distance,
    min_bluray_size,
    min_crane_minutes,
)


def test_closest_pair_worked_example():
    assert closest_to_zero_pair([-2, 4, -99, -1, 98]) == (-99, 98)


@pytest.mark.parametrize(
    "values",
    [[1, 2, 3, 4], [-10, -7, -3, -1], [-5, 3, 8, -9, 1, 6], [7, -7, 2], [0, 0]],
)
def test_closest_pair_is_optimal(values):
    a, b = closest_to_zero_pair(values)
    assert a <= b
    remaining = list(values)
    remaining.remove(a)
    assert b in remaining
    assert all(abs(a + b) <= abs(x + y) for x, y in combinations(values, 2))


def test_closest_pair_needs_two_values():
    with pytest.raises(ValueError):
        closest_to_zero_pair([5])


def test_bluray_single_disc_holds_everything():
    lengths = [3, 1, 4, 1, 5, 9, 2, 6]
    assert min_bluray_size(lengths, 1) == sum(lengths)


def test_bluray_one_disc_per_lesson():
    lengths = [3, 1, 4, 1, 5, 9, 2, 6]
    assert min_bluray_size(lengths, len(lengths)) == max(lengths)


@pytest.mark.parametrize("count", [2, 3, 4])
def test_bluray_size_is_within_bounds_and_tight(count):
    lengths = [1, 2, 3, 4, 5, 6, 7, 8, 9]
    size = min_bluray_size(lengths, count)
    assert max(lengths) <= size <= sum(lengths)
    # The next smaller size must not fit into `count` discs.
    discs, filled = 1, 0
    for length in lengths:
        if filled + length > size - 1:
            discs += 1
            filled = 0
        filled += length
    assert size == max(lengths) or discs > count


def test_bluray_rejects_bad_count():
    with pytest.raises(ValueError):
        min_bluray_size([1, 2], 0)


def test_crane_box_too_heavy():
    assert min_crane_minutes([5, 6], [7, 1]) is None


def test_crane_single_crane_moves_one_box_a_minute():
    boxes = [2, 3, 1, 4]
    assert min_crane_minutes([10], boxes) == len(boxes)


def test_crane_one_strong_crane_per_box():
    boxes = [2, 3, 1, 4]
    assert min_crane_minutes([9, 9, 9, 9, 9], boxes) * len(boxes) == len(boxes)


def test_crane_no_boxes():
    assert min_crane_minutes([3], []) == 0


def test_crane_result_bounds():
    cranes = [6, 8, 9]
    boxes = [2, 5, 2, 4, 7]
    minutes = min_crane_minutes(cranes, boxes)
    assert -(-len(boxes) // len(cranes)) <= minutes <= len(boxes)


def test_router_two_routers_span_the_ends():
    houses = [1, 2, 8, 4, 9]
    assert max_router_distance(houses, 2) == max(houses) - min(houses)


def test_router_every_house_evenly_spaced():
    houses = [0, 5, 10, 15, 20]
    assert max_router_distance(houses, len(houses)) == houses[1] - houses[0]


def test_router_gap_is_achievable():
    houses = [1, 2, 8, 4, 9, 13, 14]
    gap = max_router_distance(houses, 3)
    assert any(
        all(b - a >= gap for a, b in zip(choice, choice[1:]))
        for choice in combinations(sorted(houses), 3)
    )
    assert not any(
        all(b - a >= gap + 1 for a, b in zip(choice, choice[1:]))
        for choice in combinations(sorted(houses), 3)
    )


@pytest.mark.parametrize("count", [1, 4])
def test_router_rejects_bad_count(count):
    with pytest.raises(ValueError):
        max_router_distance([1, 2, 3], count)