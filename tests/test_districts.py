import pytest

from codedrills.districts import min_population_difference


def test_two_isolated_areas_split_apart():
    assert min_population_difference([4, 4], [[], []]) == 0


def test_single_area_cannot_split():
    assert min_population_difference([7], [[]]) is None


def test_three_components_cannot_split():
    assert min_population_difference([1, 2, 3], [[], [], []]) is None


def test_path_forbids_disconnected_middle():
    # areas 1-2-3 in a line: {2} with {1, 3} is not allowed
    assert min_population_difference([1, 1, 1], [[2], [1, 3], [2]]) == 1


def test_relabelling_areas_keeps_answer():
    populations = [5, 2, 3, 4, 1, 2]
    adjacency = [[2, 4], [1, 3, 6], [2, 4, 5], [1, 3], [3, 6], [2, 5]]
    answer = min_population_difference(populations, adjacency)

    # reverse the numbering: area a becomes 7 - a
    rev_populations = populations[::-1]
    rev_adjacency = [[7 - a for a in adjacency[6 - i]] for i in range(1, 7)]
    assert min_population_difference(rev_populations, rev_adjacency) == answer


def test_gap_has_parity_of_total_and_is_bounded():
    populations = [5, 2, 3, 4, 1, 2]
    adjacency = [[2, 4], [1, 3, 6], [2, 4, 5], [1, 3], [3, 6], [2, 5]]
    answer = min_population_difference(populations, adjacency)
    total = sum(populations)
    assert answer is not None
    assert 0 <= answer <= total
    assert (total - answer) % 2 == 0


def test_complete_graph_reaches_best_partition():
    populations = [3, 1, 2]
    adjacency = [[2, 3], [1, 3], [1, 2]]
    # {1} against {2, 3} is balanced
    assert min_population_difference(populations, adjacency) == 0


def test_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        min_population_difference([1, 2], [[2]])


def test_rejects_unknown_neighbour():
    with pytest.raises(ValueError):
        min_population_difference([1, 2], [[3], [1]])