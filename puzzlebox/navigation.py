"""Ferry navigation: follow instructions directly or by steering a waypoint."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, replace
from functools import reduce
from pathlib import Path

NORTH = "N"
SOUTH = "S"
EAST = "E"
WEST = "W"
LEFT = "L"
RIGHT = "R"
FORWARD = "F"

_MOVE = re.compile(r"^([NSEWLRF])(\d+)$")
_COMPASS = (NORTH, EAST, SOUTH, WEST)
_OFFSETS = {NORTH: (0, 1), EAST: (1, 0), SOUTH: (0, -1), WEST: (-1, 0)}


@dataclass(frozen=True)
class Move:
    direction: str
    value: int


@dataclass(frozen=True)
class Ship:
    x: int = 0
    y: int = 0
    direction: str = EAST

    def manhattan(self) -> int:
        """Manhattan distance from the origin."""
        return abs(self.x) + abs(self.y)

    def move(self, move: Move) -> Ship:
        """The ship after one instruction."""
        if move.direction in (LEFT, RIGHT):
            if self.direction not in _COMPASS:
                return self
            step = 1 if move.direction == RIGHT else -1
            turns = move.value // 90
            index = _COMPASS.index(self.direction)
            return replace(self, direction=_COMPASS[(index + step * turns) % 4])

        heading = self.direction if move.direction == FORWARD else move.direction
        dx, dy = _OFFSETS.get(heading, (0, 0))
        return replace(self, x=self.x + dx * move.value, y=self.y + dy * move.value)

    def moves(self, moves: Iterable[Move]) -> Ship:
        """The ship after every instruction in turn."""
        return reduce(Ship.move, moves, self)


@dataclass(frozen=True)
class Waypoint:
    """A waypoint relative to the ship, together with the ship it steers."""

    x: int = 10
    y: int = 1
    ship: Ship = field(default_factory=Ship)

    def move(self, move: Move) -> Waypoint:
        """The waypoint and ship after one instruction."""
        if move.direction == FORWARD:
            ship = replace(
                self.ship,
                x=self.ship.x + self.x * move.value,
                y=self.ship.y + self.y * move.value,
            )
            return replace(self, ship=ship)

        if move.direction in (LEFT, RIGHT):
            quarter_turns = (move.value // 90) % 4
            if move.direction == RIGHT:
                quarter_turns = (4 - quarter_turns) % 4
            x, y = self.x, self.y
            for _ in range(quarter_turns):
                x, y = -y, x
            return replace(self, x=x, y=y)

        dx, dy = _OFFSETS.get(move.direction, (0, 0))
        return replace(self, x=self.x + dx * move.value, y=self.y + dy * move.value)

    def moves(self, moves: Iterable[Move]) -> Waypoint:
        """The waypoint and ship after every instruction in turn."""
        return reduce(Waypoint.move, moves, self)


def parse(text: str) -> list[Move]:
    """One instruction per line; lines that are not instructions are skipped."""
    moves = []
    for line in text.split("\n"):
        match = _MOVE.match(line)
        if match is None:
            continue
        moves.append(Move(match[1], int(match[2])))
    return moves


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="navigation", description="Follow navigation instructions."
    )
    parser.add_argument("input", nargs="?", default="-", help="instructions file, '-' for stdin")
    args = parser.parse_args(argv)

    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    moves = parse(text.strip())

    ship = Ship(0, 0, EAST)
    print(ship.moves(moves).manhattan())
    print(Waypoint(10, 1, ship).moves(moves).ship.manhattan())
    return 0


if __name__ == "__main__":
    sys.exit(main())