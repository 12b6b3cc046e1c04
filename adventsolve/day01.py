"""Compare two columns of location IDs."""

from collections import Counter


def _parse_columns(text: str) -> tuple[list[int], list[int]]:
    left: list[int] = []
    right: list[int] = []
    for number, line in enumerate(text.splitlines(), start=1):
        fields = line.split()
        if len(fields) < 2:
            raise ValueError(f"line {number}: expected two numbers, got {line!r}")
        left.append(int(fields[0]))
        right.append(int(fields[1]))
    left.sort()
    right.sort()
    return left, right


def process_part1(text: str) -> str:
    """Sum the distances between the sorted left and right columns."""
    left, right = _parse_columns(text)
    return str(sum(abs(a - b) for a, b in zip(left, right)))


def process_part2(text: str) -> str:
    """Sum each left value times how often it appears in the right column."""
    left, right = _parse_columns(text)
    counts = Counter(right)
    return str(sum(value * counts[value] for value in left))