import random
from itertools import combinations

import pytest

from algocollection.arrays import (
    PrefixSum,
    PrefixSum2D,
    all_pairs,
    delete_value,
    frequencies,
    is_strictly_increasing,
    kadane,
    matrix_add,
    matrix_multiply,
    max_subarray_brute_force,
    max_subarray_sum,
    next_smaller_elements,
    next_smaller_elements_brute_force,
    previous_smaller_elements,
    sorted_frequencies,
    spiral_order,
    subarrays,
    subsets,
)

KADANE_SAMPLE = [2, 4, -8, 9, 10, -2, 4, -20, 10]


def _random_lists(seed, count=30):
    rng = random.Random(seed)
    return [[rng.randint(-20, 20) for _ in range(rng.randint(1, 12))] for _ in range(count)]


def test_max_subarray_sum_matches_brute_force_on_sample():
    assert max_subarray_sum(KADANE_SAMPLE) == max_subarray_brute_force(KADANE_SAMPLE)


def test_kadane_matches_brute_force_when_positive_exists():
    for values in _random_lists(1):
        if max(values) > 0:
            assert kadane(values) == max_subarray_brute_force(values)


def test_kadane_never_negative():
    assert kadane([-3, -1, -7]) == 0


def test_max_subarray_sum_all_negative_returns_first():
    values = [-5, -1, -3]
    assert max_subarray_sum(values) == values[0]


def test_brute_force_is_at_least_every_element():
    for values in _random_lists(2):
        assert max_subarray_brute_force(values) >= max(values)


@pytest.mark.parametrize("func", [max_subarray_sum, max_subarray_brute_force])
def test_empty_raises(func):
    with pytest.raises(ValueError):
        func([])


def test_prefix_sum_queries():
    values = [3, -1, 4, 1, 5, 9, 2, 6]
    prefix = PrefixSum(values)
    for left in range(1, len(values) + 1):
        for right in range(left, len(values) + 1):
            assert prefix.query(left, right) == sum(values[left - 1 : right])


@pytest.mark.parametrize("bounds", [(0, 2), (2, 9), (3, 2)])
def test_prefix_sum_bad_range(bounds):
    with pytest.raises(IndexError):
        PrefixSum([1, 2, 3, 4]).query(*bounds)


def test_prefix_sum_2d_queries():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9], [-1, -2, -3]]
    prefix = PrefixSum2D(matrix)
    for top in range(1, 5):
        for bottom in range(top, 5):
            for left in range(1, 4):
                for right in range(left, 4):
                    expected = sum(
                        matrix[r][c]
                        for r in range(top - 1, bottom)
                        for c in range(left - 1, right)
                    )
                    assert prefix.query(top, left, bottom, right) == expected


def test_prefix_sum_2d_bad_rectangle():
    with pytest.raises(IndexError):
        PrefixSum2D([[1, 2], [3, 4]]).query(1, 1, 3, 2)


def test_prefix_sum_2d_ragged_matrix():
    with pytest.raises(ValueError):
        PrefixSum2D([[1, 2], [3]])


def test_spiral_order_source_example():
    matrix = [[1, 2, 3, 4], [12, 13, 14, 5], [11, 16, 15, 6], [10, 9, 8, 7]]
    assert spiral_order(matrix) == list(range(1, 17))


def test_spiral_order_single_row_and_column():
    assert spiral_order([[1, 2, 3]]) == [1, 2, 3]
    assert spiral_order([[1], [2], [3]]) == [1, 2, 3]


def test_spiral_order_visits_every_element_once():
    matrix = [[r * 5 + c for c in range(5)] for r in range(3)]
    result = spiral_order(matrix)
    assert sorted(result) == sorted(v for row in matrix for v in row)


def test_all_pairs():
    values = [4, 7, 1, 9]
    assert all_pairs(values) == list(combinations(values, 2))


def test_subarrays_are_contiguous_and_complete():
    values = [5, 6, 7, 8]
    result = list(subarrays(values))
    assert len(result) == len(values) * (len(values) + 1) // 2
    assert result[0] == values[:1]
    assert values in result
    for sub in result:
        start = values.index(sub[0])
        assert values[start : start + len(sub)] == sub


def test_delete_value_removes_first_occurrence():
    values = [1, 2, 3, 2]
    result = delete_value(values, 2)
    assert result == [1, 3, 2]
    assert values == [1, 2, 3, 2]


def test_delete_value_missing():
    with pytest.raises(ValueError):
        delete_value([1, 2, 3], 9)


def test_matrix_add_zero_and_commutative():
    a = [[1, 2], [3, 4]]
    b = [[5, -6], [7, 8]]
    zero = [[0, 0], [0, 0]]
    assert matrix_add(a, zero) == a
    assert matrix_add(a, b) == matrix_add(b, a)


def test_matrix_add_shape_mismatch():
    with pytest.raises(ValueError):
        matrix_add([[1, 2]], [[1], [2]])


def test_matrix_multiply_identity_and_associative():
    a = [[1, 2], [3, 4]]
    b = [[0, 1], [5, -2]]
    c = [[2, 3], [1, 1]]
    identity = [[1, 0], [0, 1]]
    assert matrix_multiply(a, identity) == a
    assert matrix_multiply(identity, a) == a
    assert matrix_multiply(matrix_multiply(a, b), c) == matrix_multiply(a, matrix_multiply(b, c))


def test_matrix_multiply_rectangular_shape():
    result = matrix_multiply([[1, 2, 3]], [[1], [1], [1]])
    assert len(result) == 1 and len(result[0]) == 1


def test_matrix_multiply_dimension_mismatch():
    with pytest.raises(ValueError):
        matrix_multiply([[1, 2]], [[1, 2]])


def test_next_smaller_matches_brute_force():
    for values in _random_lists(3):
        assert next_smaller_elements(values) == next_smaller_elements_brute_force(values)


def test_previous_smaller_is_mirror_of_next_smaller():
    for values in _random_lists(4):
        mirrored = next_smaller_elements_brute_force(values[::-1])[::-1]
        assert previous_smaller_elements(values) == mirrored


def test_previous_smaller_source_example():
    assert previous_smaller_elements([2, 1, 4, 3]) == [-1, -1, 1, 1]


def test_is_strictly_increasing():
    assert is_strictly_increasing([1, 2, 3, 4, 5]) is True
    assert is_strictly_increasing([1, 2, 3, 4, 5, 3]) is False
    assert is_strictly_increasing([1, 1]) is False
    assert is_strictly_increasing([7]) is True


def test_subsets_cover_power_set_in_order():
    values = [1, 2, 3]
    result = subsets(values)
    assert len(result) == 2 ** len(values)
    assert result[0] == []
    assert result[-1] == values
    expected = {c for r in range(len(values) + 1) for c in combinations(values, r)}
    assert {tuple(s) for s in result} == expected


def test_frequencies():
    values = [3, 1, 3, 2, 3, 1]
    counts = frequencies(values)
    for value in set(values):
        assert counts[value] == values.count(value)
    assert counts[99] == 0


def test_sorted_frequencies():
    words = ["pear", "apple", "pear", "fig"]
    result = sorted_frequencies(words)
    assert [word for word, _ in result] == sorted(set(words))
    assert all(count == words.count(word) for word, count in result)