# roundsolver

Solvers for short contest puzzles: checks on integer arrays, small
arithmetic questions, grid games and string puzzles. Each solver is a plain
Python function, and a command-line tool runs them on contest-style input.

## Installation

```
pip install .
```

The package needs nothing beyond the standard library. To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

The solvers are grouped by what they work on:

- `roundsolver.arrays`: questions about lists of integers:
  `min_distance_to_zero`, `can_color_evenly`, `longest_zero_run`,
  `min_desorting_ops`, `can_paint_alternating`, `same_parity_neighbors`,
  `missing_rating`, `can_sort_boxes`, `contains_value`, `can_sort_jagged`,
  `min_tank_volume`, `count_advancers` and `zero_xor_value`.
- `roundsolver.sequences`: building or rearranging sequences:
  `make_beautiful`, `balanced_split_index`, `rebuild_sequence`,
  `has_small_gcd_pair`, `twin_permutation`, `unit_array_ops` and
  `split_by_divisibility`.
- `roundsolver.arithmetic`: questions about a few numbers:
  `can_pay_exactly`, `max_dominoes`, `count_extremely_round`,
  `forbidden_sum`, `grasshopper_jumps`, `two_permutations_exist`,
  `walking_moves`, `can_split_watermelon` and `count_confident`.
- `roundsolver.games`: small games and grids: `buttons_winner`,
  `integer_game_winner`, `moves_to_center`, `target_score` and `run_bitpp`.
- `roundsolver.text`: string puzzles: `min_water_actions`,
  `min_doublings`, `rearrange_summands`, `compare_ignore_case`,
  `original_length` and `abbreviate`.

```python
from roundsolver.text import abbreviate, compare_ignore_case
from roundsolver.arithmetic import max_dominoes, can_split_watermelon
from roundsolver.arrays import zero_xor_value

abbreviate("localization")           # "l10n"
abbreviate("word")                   # "word"
compare_ignore_case("aaaa", "aaaA")  # 0
max_dominoes(2, 4)                   # 4
can_split_watermelon(8)              # True
zero_xor_value([1, 2])               # None: no such x exists
```

Where a puzzle has no answer (`make_beautiful`, `forbidden_sum`,
`walking_moves`, `zero_xor_value`, `min_doublings`, `balanced_split_index`,
`split_by_divisibility`), the solver returns `None`. Input that a solver
cannot work with, such as an empty array where one value is needed or a grid
of the wrong size, raises `ValueError`.

## Command line

The `roundsolver` command takes a puzzle name and reads that puzzle's input,
in the usual contest format, from a file or from standard input. It prints
the answer lines:

```
echo 8 | roundsolver watermelon
roundsolver way-too-long-words words.txt
roundsolver --help
```

`roundsolver --help` lists every puzzle name, among them `watermelon`,
`team`, `bit++`, `next-round`, `buttons`, `coins`, `line-trip`,
`target-practice` and `united-we-stand`. Multi-case puzzles expect the number
of test cases first. If the input is malformed or runs out early, the
command writes the error to standard error and exits with status 1.

The same work is available from Python through `roundsolver.cli.run`, which
takes a puzzle name and the input text and returns the output text:

```python
from roundsolver.cli import run

run("watermelon", "8")                  # "YES"
run("way-too-long-words", "2 word localization")  # "word\nl10n"
```

`run` raises `ValueError` for an unknown puzzle name.

## What it does not do

The package answers a fixed set of puzzles from their input. It does not
fetch puzzles, check answers against expected output, or time solutions.