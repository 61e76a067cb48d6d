"""Answers to problems that come down to a little arithmetic on a few integers."""

from __future__ import annotations

from collections.abc import Iterable

# Round numbers are searched below ten million, one power of ten at a time.
_ROUND_POWERS = tuple(10**exponent for exponent in range(7))


def can_pay_exactly(n: int, k: int) -> bool:
    """Tell whether ``n`` can be paid with coins of value 2 and of value ``k`` (odd k)."""
    if n % 2 == 0:
        return True
    return k % 2 != 0


def max_dominoes(m: int, n: int) -> int:
    """Return how many 2x1 dominoes fit on an ``m`` by ``n`` board."""
    return (m * n) // 2


def count_extremely_round(n: int) -> int:
    """Count the numbers from 1 to ``n`` below ten million with one non-zero digit."""
    return sum(
        1 for power in _ROUND_POWERS for digit in range(1, 10) if digit * power <= n
    )


def forbidden_sum(n: int, k: int, x: int) -> list[int] | None:
    """Return summands from 1..k, none equal to ``x``, adding up to ``n``.

    Returns None when no such summands exist.
    """
    if x != 1:
        return [1] * n
    if k == 1:
        return None
    if n % 2 == 0:
        return [2] * (n // 2)
    if k >= 3:
        return [2] * (n // 2 - 1) + [3]
    return None


def grasshopper_jumps(x: int, k: int) -> list[int]:
    """Return the fewest jumps reaching ``x``, none of a length divisible by ``k``."""
    if x % k != 0:
        return [x]
    return [x - 1, 1]


def two_permutations_exist(n: int, a: int, b: int) -> bool:
    """Tell whether two permutations of length ``n`` share a prefix ``a`` and suffix ``b``."""
    if a + b >= n - 1:
        return n == a and n == b
    return True


def walking_moves(a: int, b: int, c: int, d: int) -> int | None:
    """Return the moves from (a, b) to (c, d) going up-right or left.

    Returns None when the target cannot be reached.
    """
    if d < b:
        return None
    if c > a + d - b:
        return None
    return 2 * (d - b) + a - c


def can_split_watermelon(w: int) -> bool:
    """Tell whether ``w`` splits into two positive even parts."""
    return w % 2 == 0 and w > 2


def count_confident(votes: Iterable[Iterable[int]]) -> int:
    """Count the problems on which at least two of the friends are sure."""
    return sum(1 for vote in votes if sum(vote) >= 2)