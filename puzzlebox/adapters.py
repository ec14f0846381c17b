"""Joltage adapters: chain them, count the jolt gaps and the possible arrangements."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import pairwise
from pathlib import Path

MAX_STEP = 3


def diff(adapter: int, other: int) -> int:
    """Joltage difference going from ``adapter`` to ``other``."""
    return other - adapter


def connects(adapter: int, other: int) -> bool:
    """Whether ``other`` can follow ``adapter`` in a chain."""
    return 0 <= diff(adapter, other) <= MAX_STEP


@dataclass
class AdapterBag:
    adapters: list[int] = field(default_factory=list)

    def sorted(self) -> AdapterBag:
        """A copy with the adapters in ascending order."""
        return AdapterBag(sorted(self.adapters))

    def chain(self) -> AdapterBag:
        """Outlet, the connectable adapters in order, and the device at the end."""
        links = [0]
        for adapter in self.sorted().adapters:
            if not connects(links[-1], adapter):
                break
            links.append(adapter)
        links.append(links[-1] + MAX_STEP)
        return AdapterBag(links)

    def diff_product(self) -> int:
        """Number of 1-jolt gaps times number of 3-jolt gaps along the chain."""
        gaps = [diff(a, b) for a, b in pairwise(self.chain().adapters)]
        return gaps.count(1) * gaps.count(3)

    def arrangements(self) -> int:
        """Number of distinct ways to connect the outlet to the device."""
        links = self.chain().adapters
        memo: dict[int, int] = {}

        def count(start: int) -> int:
            if len(links) - start < 3:
                return 1
            head = links[start]
            if head in memo:
                return memo[head]
            memo[head] = 0
            for index in range(start + 1, len(links)):
                if not connects(head, links[index]):
                    break
                memo[head] += count(index)
            return memo[head]

        return count(0)


def parse(text: str) -> AdapterBag:
    """One adapter rating per line."""
    return AdapterBag([int(line) for line in text.split("\n")])


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="adapters", description="Chain joltage adapters and count arrangements."
    )
    parser.add_argument("input", nargs="?", default="-", help="ratings file, '-' for stdin")
    args = parser.parse_args(argv)

    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    bag = parse(text.strip())

    print(bag.diff_product())
    print(bag.arrangements())
    return 0


if __name__ == "__main__":
    sys.exit(main())