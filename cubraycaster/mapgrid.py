"""Validating the map of a scene and padding it into a rectangular grid."""

from __future__ import annotations

import math

from .errors import CubError, ErrorKind

BORDER = "X"
_START_ANGLES = {
    "E": 0.0,
    "N": math.pi / 2,
    "W": math.pi,
    "S": 3 * math.pi / 2,
}
_IGNORED = " 10\t\n"


def is_valid_char(char: str) -> bool:
    """Return True for floor, wall and starting point cells."""
    return len(char) == 1 and char in "01SWEN"


def is_starting_point(char: str) -> bool:
    """Return True for one of the four starting directions."""
    return len(char) == 1 and char in _START_ANGLES


def start_angle(char: str) -> float:
    """Return the view angle in radians for a starting direction."""
    try:
        return _START_ANGLES[char]
    except KeyError:
        raise ValueError(f"not a starting point: {char!r}") from None


def find_start(map_lines: list[str]) -> tuple[int, int, str]:
    """Return (row, column, direction) of the single starting point."""
    start: tuple[int, int, str] | None = None
    for row, line in enumerate(map_lines):
        for col, char in enumerate(line):
            if char in _IGNORED:
                continue
            if not is_starting_point(char):
                raise CubError(ErrorKind.INVALID_CHAR, repr(char))
            if start is not None:
                raise CubError(ErrorKind.STARTING_POINT, "more than one")
            start = (row, col, char)
    if start is None:
        raise CubError(ErrorKind.STARTING_POINT, "none found")
    return start


def pad_map(map_lines: list[str]) -> list[str]:
    """Surround the map with border cells and make every row the same length.

    Anything that is not a floor, wall or starting point becomes a border
    cell. Rows are one longer than the longest raw line.
    """
    width = max(len(line) for line in map_lines) + 1
    border_row = BORDER * width
    grid = [border_row]
    for line in map_lines:
        cells = "".join(char if is_valid_char(char) else BORDER for char in line)
        grid.append((BORDER + cells).ljust(width, BORDER))
    grid.append(border_row)
    return grid


def _cell(grid: list[str], row: int, col: int) -> str:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return ""


def is_map_closed(grid: list[str]) -> bool:
    """Return True if every floor or start cell has only valid cells around it."""
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if char != "0" and not is_starting_point(char):
                continue
            neighbours = (
                _cell(grid, row - 1, col),
                _cell(grid, row + 1, col),
                _cell(grid, row, col - 1),
                _cell(grid, row, col + 1),
            )
            if not all(is_valid_char(cell) for cell in neighbours):
                return False
    return True