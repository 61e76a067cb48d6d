"""Answers to problems that build or rearrange a sequence."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from itertools import combinations_with_replacement, pairwise
from math import gcd


def make_beautiful(values: Sequence[int]) -> list[int] | None:
    """Reorder a sorted array so no element equals the sum of those before it.

    Returns None when no such order exists.
    """
    if not values:
        raise ValueError("at least one value is required")
    if values[0] == values[-1]:
        return None
    return [values[-1], values[0], *values[1:-1]]


def balanced_split_index(values: Sequence[int]) -> int | None:
    """Return the smallest k with equal products of ``values[:k]`` and ``values[k:]``.

    The values are ones and twos. Returns None when no such k exists.
    """
    twos = values.count(2)
    if twos % 2:
        return None
    if twos == 0:
        return 1
    half = twos // 2
    seen = 0
    for index, value in enumerate(values):
        if seen == half:
            return index
        if value == 2:
            seen += 1
    return None


def rebuild_sequence(values: Sequence[int]) -> list[int]:
    """Build a sequence from which keeping each non-decreasing step yields ``values``."""
    if not values:
        raise ValueError("at least one value is required")
    result = [values[0]]
    for previous, current in pairwise(values):
        result.append(current)
        if current < previous:
            result.append(current)
    return result


def has_small_gcd_pair(values: Sequence[int]) -> bool:
    """Tell whether some pair, an element with itself included, has gcd at most 2."""
    return any(gcd(a, b) <= 2 for a, b in combinations_with_replacement(values, 2))


def twin_permutation(values: Sequence[int]) -> list[int]:
    """Return the permutation whose element-wise sums with ``values`` are all n + 1."""
    total = len(values) + 1
    return [total - value for value in values]


def unit_array_ops(values: Sequence[int]) -> int:
    """Return the fewest -1 to 1 flips that give a non-negative sum and product 1."""
    negatives = sum(1 for value in values if value == -1)
    positives = len(values) - negatives
    if negatives > positives:
        half = len(values) // 2
        ops = negatives - half
        if half % 2:
            ops += 1
        return ops
    return 1 if negatives % 2 else 0


def split_by_divisibility(values: Sequence[int]) -> tuple[list[int], list[int]] | None:
    """Split values so that no element of the second part divides one of the first.

    The first part holds every copy of the smallest value. Returns None when all
    values are equal.
    """
    counts = Counter(values)
    if len(counts) <= 1:
        return None
    ordered = sorted(counts.items())
    smallest, frequency = ordered[0]
    rest = [value for value, count in ordered[1:] for _ in range(count)]
    return [smallest] * frequency, rest