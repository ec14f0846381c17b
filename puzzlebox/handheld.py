"""A tiny boot-code interpreter that can detect loops and repair itself."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from pathlib import Path

_INSTRUCTION = re.compile(r"^(acc|nop|jmp) ([+-]\d+)$")
_SWAPS = {"jmp": "nop", "nop": "jmp"}


class ProgramError(Exception):
    """A run that did not end cleanly; holds the accumulator at that point."""

    def __init__(self, message: str, accumulator: int) -> None:
        super().__init__(message)
        self.accumulator = accumulator


@dataclass(frozen=True)
class Instruction:
    code: str
    value: int


@dataclass
class Program:
    instructions: list[Instruction] = field(default_factory=list)

    def run(self) -> int:
        """Run to the end and return the accumulator; raises ProgramError on a loop."""
        seen: set[int] = set()
        accumulator = 0
        pointer = 0
        end = len(self.instructions)

        while pointer != end:
            if not 0 <= pointer < end:
                raise ProgramError("pointer was out of bounds", accumulator)
            if pointer in seen:
                raise ProgramError("instruction ran twice", accumulator)
            seen.add(pointer)

            instruction = self.instructions[pointer]
            match instruction.code:
                case "acc":
                    accumulator += instruction.value
                    pointer += 1
                case "jmp":
                    pointer += instruction.value
                case "nop":
                    pointer += 1

        return accumulator

    def run_with_self_heal(self) -> int:
        """Swap one jmp/nop so the program ends, and return its accumulator."""
        for index, instruction in enumerate(self.instructions):
            swapped = _SWAPS.get(instruction.code)
            if swapped is None:
                continue
            patched = list(self.instructions)
            patched[index] = replace(instruction, code=swapped)
            try:
                return Program(patched).run()
            except ProgramError:
                continue
        raise ProgramError("unable to self heal", -1)


def parse(text: str) -> Program:
    """Read instructions, one per line; lines that are not instructions are skipped."""
    instructions = []
    for line in text.split("\n"):
        match = _INSTRUCTION.match(line)
        if match is None:
            continue
        instructions.append(Instruction(match[1], int(match[2])))
    return Program(instructions)


def _describe(run) -> str:
    try:
        return str(run())
    except ProgramError as exc:
        return f"{exc.accumulator} ({exc})"


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="handheld", description="Run boot code and repair its infinite loop."
    )
    parser.add_argument("input", nargs="?", default="-", help="program file, '-' for stdin")
    args = parser.parse_args(argv)

    text = sys.stdin.read() if args.input == "-" else Path(args.input).read_text()
    program = parse(text.strip())

    print(_describe(program.run))
    print(_describe(program.run_with_self_heal))
    return 0


if __name__ == "__main__":
    sys.exit(main())