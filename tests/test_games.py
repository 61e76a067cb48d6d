import pytest

from roundsolver.games import (
    buttons_winner,
    integer_game_winner,
    moves_to_center,
    run_bitpp,
    target_score,
)


def _matrix_with_one(row, col):
    return [[1 if (r, c) == (row, col) else 0 for c in range(5)] for r in range(5)]


def _target_with_arrows(*cells):
    return [
        "".join("X" if (r, c) in cells else "." for c in range(10)) for r in range(10)
    ]


def test_buttons_more_buttons_wins():
    assert buttons_winner(5, 3, 1) == "First"
    assert buttons_winner(3, 5, 1) == "Second"


def test_buttons_tie_decided_by_shared():
    assert buttons_winner(2, 2, 3) == "First"
    assert buttons_winner(2, 2, 4) == "Second"


@pytest.mark.parametrize("n", [3, 6, 999])
def test_integer_game_multiple_of_three(n):
    assert integer_game_winner(n) == "Second"


@pytest.mark.parametrize("n", [1, 2, 4, 1000])
def test_integer_game_other(n):
    assert integer_game_winner(n) == "First"


def test_moves_to_center_from_center():
    assert moves_to_center(_matrix_with_one(2, 2)) == 0


def test_moves_to_center_corners_are_symmetric():
    corners = {moves_to_center(_matrix_with_one(r, c)) for r in (0, 4) for c in (0, 4)}
    assert corners == {4}


def test_moves_to_center_requires_single_one():
    with pytest.raises(ValueError):
        moves_to_center([[0] * 5 for _ in range(5)])


def test_moves_to_center_requires_square():
    with pytest.raises(ValueError):
        moves_to_center([[0] * 4 for _ in range(5)])


def test_target_empty():
    assert target_score(["." * 10] * 10) == 0


def test_target_center_and_edge():
    assert target_score(_target_with_arrows((4, 4))) == 5
    assert target_score(_target_with_arrows((0, 0))) == 1
    assert target_score(_target_with_arrows((1, 2))) == 2


def test_target_is_symmetric():
    assert target_score(_target_with_arrows((2, 7))) == target_score(
        _target_with_arrows((7, 2))
    )


def test_target_wrong_shape():
    with pytest.raises(ValueError):
        target_score(["." * 10] * 9)


@pytest.mark.parametrize("plus, minus", [(0, 0), (3, 1), (2, 5)])
def test_bitpp_counts(plus, minus):
    statements = ["X++"] * plus + ["--X"] * minus
    assert run_bitpp(statements) == plus - minus
    assert run_bitpp(["++X"] * plus + ["X--"] * minus) == plus - minus


def test_bitpp_rejects_short_statement():
    with pytest.raises(ValueError):
        run_bitpp(["X"])