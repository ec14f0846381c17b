"""Rock, paper, scissors: score a strategy guide under two readings of it."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

DRAW_POINTS = 3
WIN_POINTS = 6


class Symbol(Enum):
    ROCK = 0
    PAPER = 1
    SCISSOR = 2

    def score(self) -> int:
        """Points for playing this symbol."""
        return self.value + 1

    @property
    def beats(self) -> Symbol:
        """The symbol this one wins against."""
        return _BEATS[self]

    @property
    def loses_to(self) -> Symbol:
        """The symbol this one loses against."""
        return _LOSES_TO[self]


_BEATS = {
    Symbol.ROCK: Symbol.SCISSOR,
    Symbol.PAPER: Symbol.ROCK,
    Symbol.SCISSOR: Symbol.PAPER,
}
_LOSES_TO = {loser: winner for winner, loser in _BEATS.items()}

_OPPONENT = {"A": Symbol.ROCK, "B": Symbol.PAPER, "C": Symbol.SCISSOR}
_ME = {"X": Symbol.ROCK, "Y": Symbol.PAPER, "Z": Symbol.SCISSOR}


@dataclass(frozen=True)
class Strategy:
    """One round: what the opponent plays and what I play."""

    opponent: Symbol
    me: Symbol

    def score(self) -> int:
        """My points for this round."""
        if self.opponent == self.me:
            return DRAW_POINTS + self.me.score()
        if self.me.beats == self.opponent:
            return WIN_POINTS + self.me.score()
        return self.me.score()


def guide_score(guide: Iterable[Strategy]) -> int:
    """My total points over every round of the guide."""
    return sum(strategy.score() for strategy in guide)


def _split(line: str) -> tuple[Symbol, str]:
    parts = line.split(" ")
    if len(parts) != 2:
        raise ValueError(f"invalid line: {line}")
    opponent = _OPPONENT.get(parts[0])
    if opponent is None:
        raise ValueError(f"unable to parse opponent for line: {line}")
    return opponent, parts[1]


def _parse(text: str, choose) -> list[Strategy]:
    guide = []
    for line in text.split("\n"):
        line = line.strip()
        opponent, code = _split(line)
        me = choose(opponent, code)
        if me is None:
            raise ValueError(f"unable to parse me for line: {line}")
        guide.append(Strategy(opponent, me))
    return guide


def _my_symbol(opponent: Symbol, code: str) -> Symbol | None:
    return _ME.get(code)


def _my_response(opponent: Symbol, code: str) -> Symbol | None:
    if code == "X":
        return opponent.beats
    if code == "Y":
        return opponent
    if code == "Z":
        return opponent.loses_to
    return None


def parse_part1(text: str) -> list[Strategy]:
    """Read the second column as the symbol I play; raises ValueError on a bad line."""
    return _parse(text, _my_symbol)


def parse_part2(text: str) -> list[Strategy]:
    """Read the second column as lose, draw or win; raises ValueError on a bad line."""
    return _parse(text, _my_response)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rps", description="Score a rock, paper, scissors strategy guide."
    )
    parser.add_argument("input", nargs="?", default="-", help="guide file, '-' for stdin")
    args = parser.parse_args(argv)

    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    text = text.strip()

    try:
        first = parse_part1(text)
        second = parse_part2(text)
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1

    print("my score", guide_score(first))
    print("my actual score", guide_score(second))
    return 0


if __name__ == "__main__":
    sys.exit(main())