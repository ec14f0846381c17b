# puzzlebox

Solvers for a set of small daily programming puzzles. Each puzzle lives in its
own module with a `parse` function, a few objects to query, and a command that
prints both answers.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

Every command takes one optional argument: the path of the puzzle input.
Without it, or with `-`, the input is read from standard input.

| Command                | Puzzle                                                         |
|------------------------|----------------------------------------------------------------|
| `puzzlebox-handheld`   | Handheld boot code: accumulator on loop, and after self-heal   |
| `puzzlebox-xmas`       | XMAS cipher: first invalid number and the encryption weakness  |
| `puzzlebox-adapters`   | Joltage adapters: difference product and arrangement count     |
| `puzzlebox-seating`    | Ferry seating: occupied seats once the layout settles          |
| `puzzlebox-navigation` | Ship navigation: Manhattan distance, direct and by waypoint    |
| `puzzlebox-calories`   | Elf calories: the largest total and the top three combined     |
| `puzzlebox-rps`        | Rock paper scissors: score under both readings of the guide    |

`puzzlebox-xmas` also takes `--preamble N` (default 25). It exits with status
1 if every number is valid; `puzzlebox-rps` exits with status 1 on a
malformed line. `puzzlebox-handheld` prints the accumulator together with the
reason when a run does not end cleanly.

For `puzzlebox-calories`, a group of numbers counts once a blank line (or the
final newline of the file) closes it.

## Using the modules

```python
from puzzlebox import handheld, adapters, rps

program = handheld.parse("nop +0\nacc +1\njmp +4\nacc +3\njmp -3\nacc -99\nacc +1\njmp -4\nacc +6")
try:
    program.run()
except handheld.ProgramError as exc:
    print("loops:", exc, exc.accumulator)   # loops: instruction ran twice 5
print(program.run_with_self_heal())   # 8

bag = adapters.parse("16\n10\n15\n5\n1\n11\n7\n19\n6\n12\n4")
print(bag.diff_product(), bag.arrangements())   # 35 8

guide = rps.parse_part1("A Y\nB X\nC Z")
print(rps.guide_score(guide))   # 15
```

The other modules work the same way:

- `xmas.parse(text, preamble)` gives an `Xmas` with `is_valid`,
  `first_invalid` and `weakness`.
- `seating.parse(text)` gives a `Grid` with `simulate`, `simulate_v2`,
  `settle` and `settle_v2`.
- `navigation.parse(text)` gives a list of `Move`s for `Ship.moves` and
  `Waypoint.moves`.
- `calories.parse(text)` gives a list of `Elf`s for `top_calories` and
  `total_calories`.

Malformed input raises `ValueError`; programs that loop, jump out of bounds or
cannot be repaired raise `handheld.ProgramError`.

## What it does not do

The package ships no puzzle inputs: you supply your own, as a file or on
standard input. The luggage-rules and shuttle-bus puzzles are not included.