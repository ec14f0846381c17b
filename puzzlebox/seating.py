"""Ferry seating: people take and leave seats until the layout stops changing."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

FLOOR = "."
EMPTY = "L"
OCCUPIED = "#"

# Neighbour offsets, row by row from the top left, leaving out the seat itself.
DIRECTIONS: tuple[tuple[int, int], ...] = tuple(
    (dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dx, dy) != (0, 0)
)


@dataclass
class Grid:
    """A seat layout, stored row by row."""

    rows: list[list[str]] = field(default_factory=list)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def height(self) -> int:
        return len(self.rows)

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.rows)

    def _cell(self, x: int, y: int) -> str | None:
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.rows[y][x]
        return None

    def occupied(self) -> int:
        """Number of occupied seats."""
        return sum(row.count(OCCUPIED) for row in self.rows)

    def copy(self) -> Grid:
        """An independent copy of the layout."""
        return Grid([list(row) for row in self.rows])

    def get(self, x: int, y: int) -> str:
        """The position at column ``x`` and row ``y``; raises IndexError outside the grid."""
        cell = self._cell(x, y)
        if cell is None:
            raise IndexError(f"position ({x}, {y}) is out of bounds")
        return cell

    def adjacent(self, x: int, y: int) -> list[str]:
        """The positions right next to (x, y) that lie inside the grid."""
        cells = (self._cell(x + dx, y + dy) for dx, dy in DIRECTIONS)
        return [cell for cell in cells if cell is not None]

    def closest(self, x: int, y: int) -> list[str]:
        """The first seat seen in each of the eight directions; floor where none is seen."""
        seen = []
        for dx, dy in DIRECTIONS:
            distance = 1
            while True:
                cell = self._cell(x + dx * distance, y + dy * distance)
                if cell is None:
                    seen.append(FLOOR)
                    break
                if cell != FLOOR:
                    seen.append(cell)
                    break
                distance += 1
        return seen

    def _step(self, neighbours: Callable[[int, int], list[str]], crowd: int) -> Grid:
        nxt = self.copy()
        for y, row in enumerate(self.rows):
            for x, cell in enumerate(row):
                if cell == EMPTY and OCCUPIED not in neighbours(x, y):
                    nxt.rows[y][x] = OCCUPIED
                elif cell == OCCUPIED and neighbours(x, y).count(OCCUPIED) >= crowd:
                    nxt.rows[y][x] = EMPTY
        return nxt

    def simulate(self) -> Grid:
        """One round using the adjacent seats and a tolerance of three neighbours."""
        return self._step(self.adjacent, 4)

    def simulate_v2(self) -> Grid:
        """One round using the visible seats and a tolerance of four neighbours."""
        return self._step(self.closest, 5)

    def _settle(self, step: Callable[[Grid], Grid]) -> int:
        grid = self
        count = grid.occupied()
        while True:
            grid = step(grid)
            new_count = grid.occupied()
            if new_count == count:
                return count
            count = new_count

    def settle(self) -> int:
        """Occupied seats once the count stops changing under ``simulate``."""
        return self._settle(Grid.simulate)

    def settle_v2(self) -> int:
        """Occupied seats once the count stops changing under ``simulate_v2``."""
        return self._settle(Grid.simulate_v2)


def parse(text: str) -> Grid:
    """One row of positions per line."""
    return Grid([list(line) for line in text.split("\n")])


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="seating", description="Simulate seating until nobody moves."
    )
    parser.add_argument("input", nargs="?", default="-", help="layout file, '-' for stdin")
    args = parser.parse_args(argv)

    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    grid = parse(text.strip())

    print(grid.settle())
    print(grid.settle_v2())
    return 0


if __name__ == "__main__":
    sys.exit(main())