"""Command line that reads a problem's input and prints the answers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from itertools import groupby
from pathlib import Path

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
from roundsolver.arrays import (
    can_color_evenly,
    can_paint_alternating,
    can_sort_boxes,
    can_sort_jagged,
    contains_value,
    count_advancers,
    longest_zero_run,
    min_desorting_ops,
    min_distance_to_zero,
    min_tank_volume,
    missing_rating,
    same_parity_neighbors,
    zero_xor_value,
)
from roundsolver.games import (
    buttons_winner,
    integer_game_winner,
    moves_to_center,
    run_bitpp,
    target_score,
)
from roundsolver.sequences import (
    balanced_split_index,
    has_small_gcd_pair,
    make_beautiful,
    rebuild_sequence,
    split_by_divisibility,
    twin_permutation,
    unit_array_ops,
)
from roundsolver.text import (
    abbreviate,
    compare_ignore_case,
    min_doublings,
    min_water_actions,
    original_length,
    rearrange_summands,
)


class _Tokens:
    """Whitespace-separated tokens of a problem's input."""

    def __init__(self, text: str) -> None:
        self._tokens = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise ValueError("input ended too early") from None

    def number(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected an integer, got {word!r}") from None

    def numbers(self, count: int) -> list[int]:
        return [self.number() for _ in range(count)]

    def array(self) -> list[int]:
        return self.numbers(self.number())


_Handler = Callable[[_Tokens], Iterator[str]]


def _join(values: Iterable[int]) -> str:
    return " ".join(map(str, values))


def _yes_no(flag: bool, no: str = "NO") -> str:
    return "YES" if flag else no


def _or_minus_one(value: int | None) -> str:
    return "-1" if value is None else str(value)


def _per_case(solve: _Handler) -> _Handler:
    def handler(tokens: _Tokens) -> Iterator[str]:
        for _ in range(tokens.number()):
            yield from solve(tokens)

    return handler


def _ambitious_kid(tokens: _Tokens) -> Iterator[str]:
    yield str(min_distance_to_zero(tokens.array()))


def _beautiful_matrix(tokens: _Tokens) -> Iterator[str]:
    matrix = [tokens.numbers(5) for _ in range(5)]
    yield str(moves_to_center(matrix))


def _bitpp(tokens: _Tokens) -> Iterator[str]:
    count = tokens.number()
    yield str(run_bitpp(tokens.word() for _ in range(count)))


def _domino_piling(tokens: _Tokens) -> Iterator[str]:
    m, n = tokens.numbers(2)
    yield str(max_dominoes(m, n))


def _helpful_maths(tokens: _Tokens) -> Iterator[str]:
    yield rearrange_summands(tokens.word())


def _next_round(tokens: _Tokens) -> Iterator[str]:
    n, k = tokens.numbers(2)
    yield str(count_advancers(tokens.numbers(n), k))


def _petya_and_strings(tokens: _Tokens) -> Iterator[str]:
    first, second = tokens.word(), tokens.word()
    yield str(compare_ignore_case(first, second))


def _team(tokens: _Tokens) -> Iterator[str]:
    count = tokens.number()
    yield str(count_confident(tokens.numbers(3) for _ in range(count)))


def _way_too_long_words(tokens: _Tokens) -> Iterator[str]:
    for _ in range(tokens.number()):
        yield abbreviate(tokens.word())


def _watermelon(tokens: _Tokens) -> Iterator[str]:
    yield _yes_no(can_split_watermelon(tokens.number()))


@_per_case
def _array_coloring(tokens: _Tokens) -> Iterator[str]:
    yield _yes_no(can_color_evenly(tokens.array()), no="No")


@_per_case
def _blank_space(tokens: _Tokens) -> Iterator[str]:
    yield str(longest_zero_run(tokens.array()))


@_per_case
def _buttons(tokens: _Tokens) -> Iterator[str]:
    yield buttons_winner(*tokens.numbers(3))


@_per_case
def _coins(tokens: _Tokens) -> Iterator[str]:
    yield _yes_no(can_pay_exactly(*tokens.numbers(2)))


@_per_case
def _cover_in_water(tokens: _Tokens) -> Iterator[str]:
    tokens.number()
    yield str(min_water_actions(tokens.word()))


@_per_case
def _desorting(tokens: _Tokens) -> Iterator[str]:
    yield str(min_desorting_ops(tokens.array()))


@_per_case
def _dont_try_to_count(tokens: _Tokens) -> Iterator[str]:
    tokens.numbers(2)
    x, s = tokens.word(), tokens.word()
    yield _or_minus_one(min_doublings(x, s))


@_per_case
def _doremy_paint(tokens: _Tokens) -> Iterator[str]:
    yield _yes_no(can_paint_alternating(tokens.array()))


@_per_case
def _good_arrays(tokens: _Tokens) -> Iterator[str]:
    yield str(same_parity_neighbors(tokens.array()))


@_per_case
def _extremely_round(tokens: _Tokens) -> Iterator[str]:
    yield str(count_extremely_round(tokens.number()))


@_per_case
def _forbidden_integer(tokens: _Tokens) -> Iterator[str]:
    summands = forbidden_sum(*tokens.numbers(3))
    if summands is None:
        yield "No"
        return
    yield "YES"
    yield str(len(summands))
    yield _join(summands)


@_per_case
def _game_with_integers(tokens: _Tokens) -> Iterator[str]:
    yield integer_game_winner(tokens.number())


@_per_case
def _goals_of_victory(tokens: _Tokens) -> Iterator[str]:
    n = tokens.number()
    yield str(missing_rating(tokens.numbers(n - 1)))


@_per_case
def _grasshopper(tokens: _Tokens) -> Iterator[str]:
    jumps = grasshopper_jumps(*tokens.numbers(2))
    yield str(len(jumps))
    yield _join(jumps)


@_per_case
def _halloumi_boxes(tokens: _Tokens) -> Iterator[str]:
    n, k = tokens.numbers(2)
    yield _yes_no(can_sort_boxes(tokens.numbers(n), k))


@_per_case
def _daytona(tokens: _Tokens) -> Iterator[str]:
    n, k = tokens.numbers(2)
    yield _yes_no(contains_value(tokens.numbers(n), k))


@_per_case
def _jagged_swaps(tokens: _Tokens) -> Iterator[str]:
    yield _yes_no(can_sort_jagged(tokens.array()))


@_per_case
def _line_trip(tokens: _Tokens) -> Iterator[str]:
    n, x = tokens.numbers(2)
    yield str(min_tank_volume(tokens.numbers(n), x))


@_per_case
def _make_it_beautiful(tokens: _Tokens) -> Iterator[str]:
    order = make_beautiful(tokens.array())
    if order is None:
        yield "NO"
        return
    yield "YES"
    yield _join(order)


@_per_case
def _one_and_two(tokens: _Tokens) -> Iterator[str]:
    yield _or_minus_one(balanced_split_index(tokens.array()))


@_per_case
def _prepend_and_append(tokens: _Tokens) -> Iterator[str]:
    tokens.number()
    yield str(original_length(tokens.word()))


@_per_case
def _sequence_game(tokens: _Tokens) -> Iterator[str]:
    sequence = rebuild_sequence(tokens.array())
    yield str(len(sequence))
    yield _join(sequence)


@_per_case
def _serval(tokens: _Tokens) -> Iterator[str]:
    yield _yes_no(has_small_gcd_pair(tokens.array()))


@_per_case
def _target_practice(tokens: _Tokens) -> Iterator[str]:
    cells = ""
    while len(cells) < 100:
        cells += tokens.word()
    if len(cells) != 100:
        raise ValueError("the target must hold exactly 100 cells")
    yield str(target_score(cells[start : start + 10] for start in range(0, 100, 10)))


@_per_case
def _twin_permutations(tokens: _Tokens) -> Iterator[str]:
    yield _join(twin_permutation(tokens.array()))


@_per_case
def _two_permutations(tokens: _Tokens) -> Iterator[str]:
    yield _yes_no(two_permutations_exist(*tokens.numbers(3)))


@_per_case
def _unit_array(tokens: _Tokens) -> Iterator[str]:
    yield str(unit_array_ops(tokens.array()))


@_per_case
def _united_we_stand(tokens: _Tokens) -> Iterator[str]:
    split = split_by_divisibility(tokens.array())
    if split is None:
        yield "-1"
        return
    first, rest = split
    yield f"{len(first)} {len(rest)}"
    yield _join(first)
    for _, group in groupby(rest):
        yield _join(group)


@_per_case
def _walking_master(tokens: _Tokens) -> Iterator[str]:
    yield _or_minus_one(walking_moves(*tokens.numbers(4)))


@_per_case
def _we_need_the_zero(tokens: _Tokens) -> Iterator[str]:
    yield _or_minus_one(zero_xor_value(tokens.array()))


_PROBLEMS: dict[str, _Handler] = {
    "ambitious-kid": _ambitious_kid,
    "array-coloring": _array_coloring,
    "beautiful-matrix": _beautiful_matrix,
    "bit++": _bitpp,
    "blank-space": _blank_space,
    "buttons": _buttons,
    "coins": _coins,
    "cover-in-water": _cover_in_water,
    "desorting": _desorting,
    "domino-piling": _domino_piling,
    "dont-try-to-count": _dont_try_to_count,
    "doremy-paint-3": _doremy_paint,
    "everybody-likes-good-arrays": _good_arrays,
    "extremely-round": _extremely_round,
    "forbidden-integer": _forbidden_integer,
    "game-with-integers": _game_with_integers,
    "goals-of-victory": _goals_of_victory,
    "grasshopper-on-a-line": _grasshopper,
    "halloumi-boxes": _halloumi_boxes,
    "helpful-maths": _helpful_maths,
    "how-much-daytona-cost": _daytona,
    "jagged-swaps": _jagged_swaps,
    "line-trip": _line_trip,
    "make-it-beautiful": _make_it_beautiful,
    "next-round": _next_round,
    "one-and-two": _one_and_two,
    "petya-and-strings": _petya_and_strings,
    "prepend-and-append": _prepend_and_append,
    "sequence-game": _sequence_game,
    "serval-and-mochas-array": _serval,
    "target-practice": _target_practice,
    "team": _team,
    "twin-permutations": _twin_permutations,
    "two-permutations": _two_permutations,
    "unit-array": _unit_array,
    "united-we-stand": _united_we_stand,
    "walking-master": _walking_master,
    "way-too-long-words": _way_too_long_words,
    "we-need-the-zero": _we_need_the_zero,
    "watermelon": _watermelon,
}


def run(problem: str, text: str) -> str:
    """Solve ``problem`` for the input ``text`` and return the output lines."""
    handler = _PROBLEMS.get(problem)
    if handler is None:
        raise ValueError(f"unknown problem: {problem!r}")
    return "\n".join(handler(_Tokens(text)))


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input from a file or standard input and print the answers."""
    parser = argparse.ArgumentParser(
        prog="roundsolver", description="Answer a contest problem from its input."
    )
    parser.add_argument("problem", choices=sorted(_PROBLEMS))
    parser.add_argument("input", nargs="?", help="input file; standard input if omitted")
    args = parser.parse_args(argv)

    text = Path(args.input).read_text() if args.input else sys.stdin.read()
    try:
        output = run(args.problem, text)
    except ValueError as error:
        print(f"roundsolver: {error}", file=sys.stderr)
        return 1
    print(output)
    return 0