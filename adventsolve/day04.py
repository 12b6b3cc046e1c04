"""Find XMAS words and X-shaped MAS crosses in a letter grid."""

from collections.abc import Iterator

_Grid = dict[tuple[int, int], str]

_DIRECTIONS = (
    (1, -1),
    (1, 0),
    (1, 1),
    (0, -1),
    (0, 1),
    (-1, -1),
    (-1, 0),
    (-1, 1),
)
_MAS_PAIR = frozenset("MS")


def _parse_grid(text: str) -> _Grid:
    return {
        (row, col): char
        for row, line in enumerate(text.splitlines())
        for col, char in enumerate(line)
    }


def _cells_with(grid: _Grid, letter: str) -> Iterator[tuple[int, int]]:
    return (cell for cell, char in grid.items() if char == letter)


def _spells_mas(grid: _Grid, row: int, col: int, d_row: int, d_col: int) -> bool:
    letters = "".join(
        grid.get((row + step * d_row, col + step * d_col), "") for step in (1, 2, 3)
    )
    return letters == "MAS"


def _is_cross(grid: _Grid, row: int, col: int) -> bool:
    falling = {grid.get((row - 1, col - 1)), grid.get((row + 1, col + 1))}
    rising = {grid.get((row - 1, col + 1)), grid.get((row + 1, col - 1))}
    return falling == _MAS_PAIR and rising == _MAS_PAIR


def process_part1(text: str) -> str:
    """Count occurrences of XMAS in any of the eight directions."""
    grid = _parse_grid(text)
    return str(
        sum(
            _spells_mas(grid, row, col, d_row, d_col)
            for row, col in _cells_with(grid, "X")
            for d_row, d_col in _DIRECTIONS
        )
    )


def process_part2(text: str) -> str:
    """Count A cells whose two diagonals each read MAS in either direction."""
    grid = _parse_grid(text)
    return str(sum(_is_cross(grid, row, col) for row, col in _cells_with(grid, "A")))