import pytest

from roundsolver.arithmetic import (
    can_pay_exactly,
    can_split_watermelon,
    count_confident,
    count_extremely_round,
    forbidden_sum,
    grasshopper_jumps,
    max_dominoes,
    two_permutations_exist,
    walking_moves,
)


@pytest.mark.parametrize("n", [2, 4, 10, 1000])
@pytest.mark.parametrize("k", [3, 4, 7])
def test_even_amount_is_always_payable(n, k):
    assert can_pay_exactly(n, k)


def test_odd_amount_needs_odd_coin():
    assert can_pay_exactly(7, 3)
    assert not can_pay_exactly(7, 4)


@pytest.mark.parametrize("m, n", [(1, 1), (2, 4), (3, 3), (5, 7), (16, 16)])
def test_dominoes_cover_all_but_one_cell(m, n):
    count = max_dominoes(m, n)
    assert count == max_dominoes(n, m)
    assert 2 * count <= m * n < 2 * count + 2


def test_extremely_round_small_values():
    assert count_extremely_round(9) == 9
    assert count_extremely_round(0) == 0


def test_extremely_round_steps_only_at_round_numbers():
    assert count_extremely_round(100) - count_extremely_round(99) == 1
    assert count_extremely_round(101) == count_extremely_round(100)
    assert count_extremely_round(5000) - count_extremely_round(4999) == 1


def test_extremely_round_stops_below_ten_million():
    assert count_extremely_round(10**8) == count_extremely_round(10**7 - 1)


@pytest.mark.parametrize("n, k, x", [(5, 3, 2), (4, 2, 1), (7, 3, 1), (10, 5, 1), (9, 9, 3)])
def test_forbidden_sum_is_valid(n, k, x):
    summands = forbidden_sum(n, k, x)
    assert summands is not None
    assert sum(summands) == n
    assert x not in summands
    assert all(1 <= value <= k for value in summands)


@pytest.mark.parametrize("n, k, x", [(3, 1, 1), (5, 2, 1)])
def test_forbidden_sum_impossible(n, k, x):
    assert forbidden_sum(n, k, x) is None


@pytest.mark.parametrize("x, k", [(10, 2), (10, 3), (7, 7), (1, 2), (12, 4)])
def test_grasshopper_reaches_target(x, k):
    jumps = grasshopper_jumps(x, k)
    assert sum(jumps) == x
    assert all(jump % k != 0 for jump in jumps)
    assert len(jumps) == (1 if x % k else 2)


def test_two_permutations():
    assert two_permutations_exist(4, 4, 4)
    assert two_permutations_exist(5, 1, 1)
    assert not two_permutations_exist(3, 1, 1)
    assert not two_permutations_exist(4, 2, 2)


def test_walking_moves_unreachable():
    assert walking_moves(0, 5, 0, 2) is None
    assert walking_moves(0, 0, 5, 1) is None


@pytest.mark.parametrize("a, b", [(0, 0), (3, -2), (-4, 7)])
def test_walking_moves_to_same_point_is_free(a, b):
    assert walking_moves(a, b, a, b) == 0


def test_walking_moves_diagonal():
    assert walking_moves(0, 0, 3, 3) == 3


def test_watermelon():
    assert can_split_watermelon(8)
    assert can_split_watermelon(4)
    assert not can_split_watermelon(2)
    assert not can_split_watermelon(7)


def test_count_confident():
    assert count_confident([]) == 0
    assert count_confident([(1, 1, 1)] * 4) == 4
    assert count_confident([(1, 1, 0), (1, 1, 1), (1, 0, 0)]) == 2