"""Command line entry point: solve one part of one day's puzzle from an input file."""

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Optional

from adventsolve import day01, day02, day03, day04, day05, day06, day07, day08, day09

_Solver = Callable[[str], str]

_SOLVERS: dict[int, tuple[_Solver, _Solver]] = {
    1: (day01.process_part1, day01.process_part2),
    2: (day02.process_part1, day02.process_part2),
    3: (day03.process_part1, day03.process_part2),
    4: (day04.process_part1, day04.process_part2),
    5: (day05.process_part1, day05.process_part2),
    6: (day06.process_part1, day06.process_part2),
    7: (day07.process_part1, day07.process_part2),
    8: (day08.process_part1, day08.process_part2),
    9: (day09.process_part1, day09.process_part2),
}

DEFAULT_INPUT = "input.txt"


def solve(day: int, part: int, text: str) -> str:
    """Run the solver for ``day`` and ``part`` (1 or 2) on the puzzle text."""
    try:
        parts = _SOLVERS[day]
    except KeyError:
        raise ValueError(f"no solver for day {day}") from None
    if part not in (1, 2):
        raise ValueError(f"part must be 1 or 2, got {part}")
    return parts[part - 1](text)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="adventsolve",
        description="Solve one part of a day's puzzle and print the answer.",
    )
    parser.add_argument("day", type=int, choices=sorted(_SOLVERS), help="puzzle day")
    parser.add_argument("part", type=int, choices=(1, 2), help="puzzle part")
    parser.add_argument(
        "-i",
        "--input",
        default=DEFAULT_INPUT,
        help=f"puzzle input file (default: {DEFAULT_INPUT})",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Read the input file, solve the requested part and print the answer."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    try:
        text = Path(args.input).read_text()
    except OSError as error:
        parser.error(f"cannot read {args.input}: {error.strerror or error}")
    print(solve(args.day, args.part, text))
    return 0


if __name__ == "__main__":
    sys.exit(main())