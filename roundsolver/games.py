"""Answers to small game and board problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_MATRIX_SIZE = 5
_MATRIX_CENTER = 2
_TARGET_SIZE = 10


def buttons_winner(a: int, b: int, c: int) -> str:
    """Name the winner of the buttons game: ``"First"`` or ``"Second"``."""
    if a == b:
        return "First" if c % 2 == 1 else "Second"
    return "First" if a > b else "Second"


def integer_game_winner(n: int) -> str:
    """Name the winner of the divisible-by-three game: ``"First"`` or ``"Second"``."""
    remainder = n % 3
    if remainder == 0:
        return "Second"
    return "First"


def moves_to_center(matrix: Sequence[Sequence[int]]) -> int:
    """Return the row and column swaps needed to move the single 1 to the centre."""
    if len(matrix) != _MATRIX_SIZE or any(len(row) != _MATRIX_SIZE for row in matrix):
        raise ValueError("the matrix must be 5 by 5")
    ones = [
        (row, col)
        for row, line in enumerate(matrix)
        for col, cell in enumerate(line)
        if cell == 1
    ]
    if len(ones) != 1:
        raise ValueError("the matrix must hold exactly one 1")
    row, col = ones[0]
    return abs(row - _MATRIX_CENTER) + abs(col - _MATRIX_CENTER)


def _ring_value(row: int, col: int) -> int:
    last = _TARGET_SIZE - 1
    return min(row, col, last - row, last - col) + 1


def target_score(grid: Iterable[str]) -> int:
    """Return the points scored by the arrows ``X`` on a 10 by 10 target."""
    rows = list(grid)
    if len(rows) != _TARGET_SIZE or any(len(row) != _TARGET_SIZE for row in rows):
        raise ValueError("the target must be 10 by 10")
    return sum(
        _ring_value(row, col)
        for row, line in enumerate(rows)
        for col, cell in enumerate(line)
        if cell == "X"
    )


def run_bitpp(statements: Iterable[str]) -> int:
    """Run Bit++ statements on a variable that starts at zero and return its value."""
    value = 0
    for statement in statements:
        if len(statement) < 2:
            raise ValueError(f"not a Bit++ statement: {statement!r}")
        value += 1 if statement[1] == "+" else -1
    return value