"""Count safe reactor reports."""

from collections.abc import Sequence
from itertools import pairwise


def _parse_reports(text: str) -> list[list[int]]:
    reports = []
    for number, line in enumerate(text.splitlines(), start=1):
        levels = [int(field) for field in line.split()]
        if not levels:
            raise ValueError(f"line {number}: empty report")
        reports.append(levels)
    return reports


def _steps_within(levels: Sequence[int], sign: int) -> bool:
    return all(1 <= sign * (b - a) <= 3 for a, b in pairwise(levels))


def _is_safe(levels: Sequence[int]) -> bool:
    return _steps_within(levels, 1) or _steps_within(levels, -1)


def _is_safe_dampened(levels: Sequence[int]) -> bool:
    if _is_safe(levels):
        return True
    return any(
        _is_safe([*levels[:skip], *levels[skip + 1:]]) for skip in range(len(levels))
    )


def process_part1(text: str) -> str:
    """Count reports that change strictly in one direction by 1 to 3 per step."""
    reports = _parse_reports(text)
    for number, levels in enumerate(reports, start=1):
        if len(levels) < 2:
            raise ValueError(f"line {number}: a report needs at least two levels")
    return str(sum(_is_safe(levels) for levels in reports))


def process_part2(text: str) -> str:
    """Count reports that are safe after removing at most one level."""
    return str(sum(_is_safe_dampened(levels) for levels in _parse_reports(text)))