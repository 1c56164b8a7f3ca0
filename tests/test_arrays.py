import itertools
import math
import random
from itertools import pairwise

import pytest

from dsakit.arrays import (
    first_missing_positive,
    has_pair_with_sum,
    inc_dec_permutation,
    next_permutation,
    previous_permutation,
    product_except_self,
    product_except_self_no_division,
    push_zeroes_to_end,
    rotate_clockwise,
    spiral_order,
)


@pytest.fixture
def rng():
    return random.Random(1234)


def test_has_pair_matches_brute_force(rng):
    for _ in range(200):
        values = [rng.randint(-10, 10) for _ in range(rng.randint(0, 8))]
        target = rng.randint(-15, 15)
        expected = any(a + b == target for a, b in itertools.combinations(values, 2))
        assert has_pair_with_sum(values, target) == expected


def test_has_pair_leaves_input_alone():
    values = [5, 1, 3]
    assert has_pair_with_sum(values, 4) is True
    assert values == [5, 1, 3]


def test_has_pair_needs_two_elements():
    assert has_pair_with_sum([2], 4) is False


@pytest.mark.parametrize("pattern", ["IDIDIDDIDD", "", "IIII", "DDDD", "DIDI"])
def test_inc_dec_permutation_follows_pattern(pattern):
    result = inc_dec_permutation(pattern)
    assert sorted(result) == list(range(1, len(pattern) + 2))
    for (a, b), step in zip(pairwise(result), pattern):
        assert (b > a) == (step == "I")


def _smallest_missing(values):
    present = set(values)
    return next(k for k in itertools.count(1) if k not in present)


def test_first_missing_positive_matches_definition(rng):
    for _ in range(300):
        values = [rng.randint(-5, 12) for _ in range(rng.randint(0, 10))]
        original = list(values)
        assert first_missing_positive(values) == _smallest_missing(original)
        assert values == original


def test_spiral_order_square():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    assert spiral_order(matrix) == [1, 2, 3, 6, 9, 8, 7, 4, 5]


def test_spiral_order_shapes(rng):
    for rows in range(1, 6):
        for cols in range(1, 6):
            matrix = [[rng.randint(0, 99) for _ in range(cols)] for _ in range(rows)]
            result = spiral_order(matrix)
            flat = [v for row in matrix for v in row]
            assert sorted(result) == sorted(flat)
            assert result[:cols] == matrix[0]


def test_spiral_order_single_row_and_column():
    assert spiral_order([[4, 5, 6]]) == [4, 5, 6]
    assert spiral_order([[4], [5], [6]]) == [4, 5, 6]
    assert spiral_order([]) == []


@pytest.mark.parametrize("seq", [[1, 2, 3], [1, 1, 2, 2], [3, 1, 4, 1], [7]])
def test_permutation_successors(seq):
    perms = [list(p) for p in sorted(set(itertools.permutations(seq)))]
    for current, following in zip(perms, perms[1:] + perms[:1]):
        assert next_permutation(current) == following
        assert previous_permutation(following) == current


def test_permutation_does_not_mutate():
    values = [1, 3, 2]
    next_permutation(values)
    previous_permutation(values)
    assert values == [1, 3, 2]


@pytest.mark.parametrize("values", [[2, 3, 5, 7], [-1, 4, -2, 3], [6]])
def test_products_match_definition(values):
    expected = [math.prod(values[:i] + values[i + 1:]) for i in range(len(values))]
    assert product_except_self(values) == expected
    assert product_except_self_no_division(values) == expected


def test_product_division_rejects_zero():
    with pytest.raises(ZeroDivisionError):
        product_except_self([0, 2, 3])


def test_product_without_division_handles_zero():
    values = [0, 2, 3]
    expected = [math.prod(values[:i] + values[i + 1:]) for i in range(len(values))]
    assert product_except_self_no_division(values) == expected
    assert product_except_self_no_division([]) == []


def test_push_zeroes_source_example():
    values = [3, 5, 0, 1, 0, 4]
    original = list(values)
    assert push_zeroes_to_end(values) is None
    assert values == [v for v in original if v] + [v for v in original if v == 0]


def test_push_zeroes_random(rng):
    for _ in range(100):
        values = [rng.choice([0, 0, 1, 2, 3, -4]) for _ in range(rng.randint(0, 10))]
        original = list(values)
        push_zeroes_to_end(values)
        nonzero = [v for v in original if v]
        assert values[:len(nonzero)] == nonzero
        assert all(v == 0 for v in values[len(nonzero):])
        assert len(values) == len(original)


def test_rotate_clockwise_positions():
    matrix = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    rotated = rotate_clockwise(matrix)
    n = len(matrix)
    for i in range(n):
        for j in range(n):
            assert rotated[i][j] == matrix[n - 1 - j][i]
    assert rotated[0] == [row[0] for row in reversed(matrix)]


def test_four_rotations_restore_matrix():
    matrix = [[1, 2], [3, 4]]
    result = matrix
    for _ in range(4):
        result = rotate_clockwise(result)
    assert result == matrix