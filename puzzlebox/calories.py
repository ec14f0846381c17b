"""Elf rations: find the elves carrying the most calories."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Elf:
    calories: list[int] = field(default_factory=list)

    def total(self) -> int:
        """Calories this elf carries."""
        return sum(self.calories)


def top_calories(elves: Sequence[Elf], n: int) -> list[Elf]:
    """The ``n`` elves carrying the most calories, most first."""
    if not 0 <= n <= len(elves):
        raise ValueError(f"cannot take {n} of {len(elves)} elves")
    return sorted(elves, key=Elf.total, reverse=True)[:n]


def total_calories(elves: Iterable[Elf]) -> int:
    """Calories carried by all the given elves together."""
    return sum(elf.total() for elf in elves)


def parse(text: str) -> list[Elf]:
    """Groups of numbers; a group counts once a blank line closes it."""
    elves: list[Elf] = []
    current = Elf()
    for line in text.split("\n"):
        line = line.strip()
        if not line:
            elves.append(current)
            current = Elf()
            continue
        try:
            current.calories.append(int(line))
        except ValueError as exc:
            raise ValueError(f"unable to parse number: {line!r}") from exc
    return elves


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="calories", description="Find the elves carrying the most calories."
    )
    parser.add_argument("input", nargs="?", default="-", help="rations file, '-' for stdin")
    args = parser.parse_args(argv)

    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    elves = parse(text)

    print("most calories", total_calories(top_calories(elves, 1)))
    print("top 3 calories", total_calories(top_calories(elves, 3)))
    return 0


if __name__ == "__main__":
    sys.exit(main())