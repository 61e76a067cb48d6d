import pytest

from roundsolver.text import (
    abbreviate,
    compare_ignore_case,
    min_doublings,
    min_water_actions,
    original_length,
    rearrange_summands,
)


def test_water_three_in_a_row():
    assert min_water_actions("#...#") == 2
    assert min_water_actions("......") == 2


@pytest.mark.parametrize("cells", ["###", "#.#", ".##.", "..#..#."])
def test_water_counts_cells_without_triple(cells):
    assert min_water_actions(cells) == cells.count(".")


@pytest.mark.parametrize("x, s", [("ab", "babab"), ("a", "aaaa"), ("abc", "abc"), ("xy", "yx")])
def test_min_doublings_is_minimal(x, s):
    result = min_doublings(x, s)
    assert s in x * 2**result
    if result:
        assert s not in x * 2 ** (result - 1)


def test_min_doublings_missing():
    assert min_doublings("a", "b") is None


def test_rearrange_summands():
    assert rearrange_summands("3+2+1") == "1+2+3"
    assert rearrange_summands("2") == "2"


def test_rearrange_summands_keeps_terms():
    expr = "3+1+3+2+1+1"
    result = rearrange_summands(expr)
    assert sorted(result.split("+")) == sorted(expr.split("+"))
    assert result.split("+") == sorted(result.split("+"))


def test_compare_ignore_case_examples():
    assert compare_ignore_case("aaaa", "aaaA") == 0
    assert compare_ignore_case("abs", "Abz") == -1
    assert compare_ignore_case("abcdefg", "AbCdEfF") == 1


@pytest.mark.parametrize("s1, s2", [("abs", "Abz"), ("QWE", "qwd"), ("same", "SAME")])
def test_compare_ignore_case_antisymmetric(s1, s2):
    assert compare_ignore_case(s1, s2) == -compare_ignore_case(s2, s1)


def test_compare_ignore_case_length_mismatch():
    with pytest.raises(ValueError):
        compare_ignore_case("ab", "abc")


@pytest.mark.parametrize("s", ["0", "0110", "10101", "1001"])
def test_original_length_matching_ends(s):
    assert original_length(s) == len(s)


def test_original_length_peels_pairs():
    assert original_length("01") == 0
    assert original_length("1010") == 0
    assert original_length("110") == 1


def test_abbreviate():
    assert abbreviate("localization") == "l10n"
    assert abbreviate("internationalization") == "i18n"
    assert abbreviate("word") == "word"
    assert abbreviate("abcdefghij") == "abcdefghij"