"""XMAS cipher: find the number that breaks the rule and the weakness it exposes."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import combinations
from pathlib import Path


@dataclass
class Xmas:
    preamble: int
    numbers: list[int] = field(default_factory=list)

    def is_valid(self, value: int, index: int) -> bool:
        """Whether two different entries among the preceding window sum to ``value``."""
        if index < self.preamble:
            raise ValueError(f"index {index} lies inside the preamble")
        window = self.numbers[index - self.preamble : index]
        return any(a + b == value for a, b in combinations(window, 2))

    def first_invalid(self) -> int | None:
        """The first number after the preamble that is not valid, or None."""
        for index in range(self.preamble, len(self.numbers)):
            value = self.numbers[index]
            if not self.is_valid(value, index):
                return value
        return None

    def weakness(self) -> int:
        """Sum of the smallest and largest number of the run summing to the invalid number."""
        target = self.first_invalid()
        if target is None:
            raise ValueError("every number is valid")

        for start, first in enumerate(self.numbers):
            if first == target:
                continue
            total = first
            last = 0
            for offset, value in enumerate(self.numbers[start + 1 :]):
                last = offset
                if value == target:
                    break
                total += value
                if total >= target:
                    break
            if total == target:
                window = self.numbers[start : start + last + 1]
                return min(window) + max(window)

        raise ValueError(f"no contiguous run sums to {target}")


def parse(text: str, preamble: int) -> Xmas:
    """One number per line."""
    return Xmas(preamble, [int(line) for line in text.split("\n")])


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="xmas", description="Find the invalid number and the weakness of an XMAS stream."
    )
    parser.add_argument("input", nargs="?", default="-", help="numbers file, '-' for stdin")
    parser.add_argument("--preamble", type=int, default=25, help="preamble length")
    args = parser.parse_args(argv)

    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    xmas = parse(text.strip(), args.preamble)

    invalid = xmas.first_invalid()
    if invalid is None:
        print("every number is valid", file=sys.stderr)
        return 1
    print(invalid)
    print(xmas.weakness())
    return 0


if __name__ == "__main__":
    sys.exit(main())