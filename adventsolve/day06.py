"""Trace a patrolling guard around a lab map and find obstacle spots that trap it."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

_OBSTACLE = "#"
_GUARD = "^"
# A guard still on the map after this many moves is taken to be walking in a loop.
_LOOP_LIMIT = 10000

_Cell = tuple[int, int]


class _Heading(Enum):
    UP = (-1, 0)
    RIGHT = (0, 1)
    DOWN = (1, 0)
    LEFT = (0, -1)

    def turned_right(self) -> "_Heading":
        order = list(_Heading)
        return order[(order.index(self) + 1) % len(order)]


@dataclass(frozen=True)
class _Lab:
    height: int
    width: int
    obstacles: frozenset[_Cell]
    start: _Cell
    cells: tuple[_Cell, ...]

    def with_obstacle(self, cell: _Cell) -> "_Lab":
        return _Lab(self.height, self.width, self.obstacles | {cell}, self.start, self.cells)

    def step(self, position: _Cell, heading: _Heading) -> tuple[Optional[_Cell], _Heading]:
        """Advance or turn once; a position of ``None`` means the guard has left."""
        row, col = position
        d_row, d_col = heading.value
        target = (row + d_row, col + d_col)
        if not (0 <= target[0] < self.height and 0 <= target[1] < self.width):
            return None, heading
        if target in self.obstacles:
            return position, heading.turned_right()
        return target, heading


def _parse(text: str) -> _Lab:
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty map")
    start = next(
        ((row, line.index(_GUARD)) for row, line in enumerate(lines) if _GUARD in line),
        None,
    )
    if start is None:
        raise ValueError("no guard '^' on the map")
    cells = tuple((row, col) for row, line in enumerate(lines) for col, _ in enumerate(line))
    obstacles = frozenset(
        (row, col)
        for row, line in enumerate(lines)
        for col, char in enumerate(line)
        if char == _OBSTACLE
    )
    return _Lab(len(lines), len(lines[0]), obstacles, start, cells)


def _gets_stuck(lab: _Lab) -> bool:
    position: Optional[_Cell] = lab.start
    heading = _Heading.UP
    for _ in range(_LOOP_LIMIT):
        if position is None:
            return False
        position, heading = lab.step(position, heading)
    return True


def process_part1(text: str) -> str:
    """Count the distinct cells the guard visits before leaving the map."""
    lab = _parse(text)
    position: Optional[_Cell] = lab.start
    heading = _Heading.UP
    visited: set[_Cell] = set()
    while position is not None:
        visited.add(position)
        position, heading = lab.step(position, heading)
    return str(len(visited))


def process_part2(text: str) -> str:
    """Count cells where one added obstacle keeps the guard on the map."""
    lab = _parse(text)
    return str(sum(_gets_stuck(lab.with_obstacle(cell)) for cell in lab.cells))