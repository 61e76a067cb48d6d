"""Answers to array problems: each function takes a list of numbers and returns the answer."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from functools import reduce
from itertools import groupby, pairwise
from operator import xor


def min_distance_to_zero(values: Sequence[int]) -> int:
    """Return the smallest absolute value among ``values``."""
    if not values:
        raise ValueError("at least one value is required")
    return min(abs(value) for value in values)


def can_color_evenly(values: Sequence[int]) -> bool:
    """Tell whether the values split into two groups whose sums have equal parity."""
    return sum(1 for value in values if value % 2) % 2 == 0


def longest_zero_run(values: Sequence[int]) -> int:
    """Return the length of the longest block of consecutive zeros."""
    return max(
        (sum(1 for _ in run) for value, run in groupby(values) if value == 0),
        default=0,
    )


def min_desorting_ops(values: Sequence[int]) -> int:
    """Return how many operations are needed to make the array unsorted.

    Gives 0 when the array is already out of order.
    """
    if len(values) < 2:
        raise ValueError("at least two values are required")
    gaps = [right - left for left, right in pairwise(values)]
    if any(gap < 0 for gap in gaps):
        return 0
    return min(gaps) // 2 + 1


def can_paint_alternating(values: Sequence[int]) -> bool:
    """Tell whether the values can be ordered so that neighbouring pair sums all match."""
    counts = Counter(values)
    if len(counts) > 2:
        return False
    if len(counts) == 2:
        n = len(values)
        first = next(iter(counts.values()))
        return first in (n // 2, (n + 1) // 2)
    return True


def same_parity_neighbors(values: Sequence[int]) -> int:
    """Count adjacent pairs whose two members have the same parity."""
    return sum(1 for left, right in pairwise(values) if left % 2 == right % 2)


def missing_rating(ratings: Sequence[int]) -> int:
    """Return the rating change that makes all changes sum to zero."""
    return -sum(ratings)


def can_sort_boxes(values: Sequence[int], k: int) -> bool:
    """Tell whether reversing windows of length ``k`` can sort the boxes."""
    already_sorted = all(left <= right for left, right in pairwise(values))
    return not (k == 1 and not already_sorted)


def contains_value(values: Sequence[int], k: int) -> bool:
    """Tell whether ``k`` occurs among ``values``."""
    return k in values


def can_sort_jagged(values: Sequence[int]) -> bool:
    """Tell whether the permutation can be sorted by jagged swaps."""
    if not values:
        raise ValueError("at least one value is required")
    return values[0] == 1


def min_tank_volume(stations: Sequence[int], x: int) -> int:
    """Return the smallest tank that covers the round trip from 0 to ``x``.

    ``stations`` holds the sorted positions of the fuel stations.
    """
    last = 0
    longest = None
    for position in stations:
        gap = position - last
        longest = gap if longest is None else max(longest, gap)
        last = position
    tail = 2 * (x - last)
    return tail if longest is None else max(longest, tail)


def count_advancers(scores: Sequence[int], k: int) -> int:
    """Count participants with a positive score at least that of place ``k``."""
    if not 1 <= k <= len(scores):
        raise ValueError("k must name a place among the scores")
    threshold = scores[k - 1]
    return sum(1 for score in scores if score >= threshold and score > 0)


def zero_xor_value(values: Sequence[int]) -> int | None:
    """Return x such that XOR of every ``value ^ x`` is zero, or None if none exists."""
    total = reduce(xor, values, 0)
    if len(values) % 2:
        return total
    return 0 if total == 0 else None