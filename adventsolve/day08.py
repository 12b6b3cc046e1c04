"""Locate antinodes produced by pairs of same-frequency antennas."""

from collections import defaultdict
from collections.abc import Iterator
from dataclasses import dataclass
from itertools import count, permutations

_EMPTY = "."

_Point = tuple[int, int]


@dataclass(frozen=True)
class _City:
    height: int
    width: int
    antennas: dict[str, list[_Point]]

    def contains(self, point: _Point) -> bool:
        row, col = point
        return 0 <= row < self.height and 0 <= col < self.width

    def pairs(self) -> Iterator[tuple[_Point, _Point]]:
        """Yield every ordered pair of distinct antennas sharing a frequency."""
        for positions in self.antennas.values():
            yield from permutations(positions, 2)


def _is_frequency(char: str) -> bool:
    return char == " " or (char.isascii() and char.isalnum())


def _parse(text: str) -> _City:
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty map")
    antennas: dict[str, list[_Point]] = defaultdict(list)
    for row, line in enumerate(lines):
        for col, char in enumerate(line):
            if char == _EMPTY:
                continue
            if not _is_frequency(char):
                raise ValueError(f"unexpected character {char!r} at row {row}, column {col}")
            antennas[char].append((row, col))
    return _City(len(lines), len(lines[0]), dict(antennas))


def _antinode(a: _Point, b: _Point) -> _Point:
    return 2 * a[0] - b[0], 2 * a[1] - b[1]


def _antinodes_in_line(city: _City, a: _Point, b: _Point) -> Iterator[_Point]:
    d_row, d_col = a[0] - b[0], a[1] - b[1]
    for step in count():
        point = (a[0] + d_row * step, a[1] + d_col * step)
        if not city.contains(point):
            return
        yield point


def process_part1(text: str) -> str:
    """Count distinct in-bounds antinodes lying twice as far from one antenna as the other."""
    city = _parse(text)
    antinodes = {_antinode(a, b) for a, b in city.pairs()}
    return str(sum(city.contains(point) for point in antinodes))


def process_part2(text: str) -> str:
    """Count distinct in-bounds points in line with any two same-frequency antennas."""
    city = _parse(text)
    antinodes = {
        point for a, b in city.pairs() for point in _antinodes_in_line(city, a, b)
    }
    return str(len(antinodes))