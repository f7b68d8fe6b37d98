import pytest

from codedrills.combinatorics import (
    binomial,
    cheapest_diet,
    count_divisible_subarrays,
    measurable_weights,
)


def test_binomial_example():
    assert binomial(5, 2) == 10


@pytest.mark.parametrize("n", range(0, 11))
def test_binomial_row_sums_to_power_of_two(n):
    assert sum(binomial(n, k) for k in range(n + 1)) == 2 ** n


@pytest.mark.parametrize("n,k", [(10, 3), (7, 0), (6, 6), (9, 4)])
def test_binomial_symmetry(n, k):
    assert binomial(n, k) == binomial(n, n - k)


def test_binomial_pascal_rule():
    assert binomial(10, 4) == binomial(9, 3) + binomial(9, 4)


def test_binomial_k_above_n_is_zero():
    assert binomial(3, 5) == 0


def test_binomial_negative_raises():
    with pytest.raises(ValueError):
        binomial(-1, 0)


INGREDIENTS = [
    (30, 55, 10, 8, 100),
    (60, 10, 10, 2, 70),
    (10, 80, 50, 0, 50),
    (40, 30, 30, 8, 60),
    (60, 10, 70, 2, 120),
    (20, 70, 50, 4, 4),
]
MINIMUMS = (100, 70, 90, 10)


def test_cheapest_diet_example():
    assert cheapest_diet(MINIMUMS, INGREDIENTS) == (134, [2, 4, 6])


def test_cheapest_diet_choice_meets_minimums():
    cost, chosen = cheapest_diet(MINIMUMS, INGREDIENTS)
    for n, need in enumerate(MINIMUMS):
        assert sum(INGREDIENTS[i - 1][n] for i in chosen) >= need
    assert sum(INGREDIENTS[i - 1][4] for i in chosen) == cost
    assert chosen == sorted(chosen)


def test_cheapest_diet_impossible():
    assert cheapest_diet((1000, 0, 0, 0), INGREDIENTS) is None


def test_cheapest_diet_tie_prefers_lexicographically_smallest():
    items = [(5, 5, 5, 5, 7), (5, 5, 5, 5, 7)]
    assert cheapest_diet((5, 5, 5, 5), items) == (7, [1])


def test_cheapest_diet_bad_shape():
    with pytest.raises(ValueError):
        cheapest_diet((1, 2, 3), INGREDIENTS)
    with pytest.raises(ValueError):
        cheapest_diet(MINIMUMS, [(1, 2, 3)])


def test_measurable_single_weights_and_differences():
    weights = [1, 4]
    result = measurable_weights(weights, [1, 4, 4 - 1, 4 + 1])
    assert result == [True, True, True, True]


def test_measurable_above_total_is_impossible():
    weights = [2, 3, 3, 3]
    assert measurable_weights(weights, [sum(weights) + 1]) == [False]


def test_measurable_keeps_target_order_and_length():
    weights = [2, 3]
    result = measurable_weights(weights, [5, 100, 1])
    assert len(result) == 3
    assert result[0] and result[2]
    assert not result[1]


def test_measurable_negative_weight_raises():
    with pytest.raises(ValueError):
        measurable_weights([-1], [1])


def test_count_divisible_example():
    assert count_divisible_subarrays([1, 2, 3, 1, 2], 3) == 7


def test_count_divisible_with_m_one_counts_every_run():
    values = [4, 7, 1, 9]
    n = len(values)
    assert count_divisible_subarrays(values, 1) == n * (n + 1) // 2


def test_count_divisible_empty():
    assert count_divisible_subarrays([], 5) == 0


def test_count_divisible_bad_m():
    with pytest.raises(ValueError):
        count_divisible_subarrays([1, 2], 0)