"""Answers to problems about strings."""

from __future__ import annotations

_MAX_DOUBLINGS = 5
_SHORT_WORD = 10


def min_water_actions(cells: str) -> int:
    """Return the water pours needed to fill every empty ``.`` cell."""
    if "..." in cells:
        return 2
    return cells.count(".")


def min_doublings(x: str, s: str) -> int | None:
    """Return how many times ``x`` must be doubled to contain ``s``, or None."""
    current = x
    for doublings in range(_MAX_DOUBLINGS + 1):
        if s in current:
            return doublings
        current += current
    return None


def rearrange_summands(expr: str) -> str:
    """Reorder a sum of 1s, 2s and 3s into non-decreasing order."""
    return "+".join(sorted(digit for digit in expr[::2] if digit in "123"))


def compare_ignore_case(s1: str, s2: str) -> int:
    """Compare two strings of equal length ignoring case: -1, 0 or 1."""
    if len(s1) != len(s2):
        raise ValueError("the strings must have the same length")
    left, right = s1.lower(), s2.lower()
    return (left > right) - (left < right)


def original_length(s: str) -> int:
    """Return the shortest original binary string after peeling ``0...1`` pairs."""
    i, j = 0, len(s) - 1
    while i < j and s[i] != s[j]:
        i += 1
        j -= 1
    return max(j - i + 1, 0)


def abbreviate(word: str) -> str:
    """Shorten a word longer than ten letters to first letter, count and last letter."""
    if len(word) > _SHORT_WORD:
        return f"{word[0]}{len(word) - 2}{word[-1]}"
    return word