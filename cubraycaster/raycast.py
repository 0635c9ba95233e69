"""Casting rays through a padded map grid to find the nearest wall."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

WALL = "1"


@dataclass(frozen=True)
class RayHit:
    """Where a ray met a wall.

    ``distance`` is measured from the ray origin along the ray. ``texture``
    indexes the wall textures in the order north, east, south, west: vertical
    walls give ``step_x + 1`` (0 or 2) and horizontal walls ``step_y + 2``
    (1 or 3). ``shift`` is the horizontal position within the texture.
    """

    distance: float
    texture: int
    shift: float


def sign(value: float) -> int:
    """Return 1, -1 or 0 according to the sign of ``value``."""
    return (value > 0) - (value < 0)


def _is_wall(grid: Sequence[str], row: int, col: int) -> bool:
    if row < 0 or col < 0 or row >= len(grid) or col >= len(grid[row]):
        raise ValueError(f"ray left the map at row {row}, column {col}")
    return grid[row][col] == WALL


def trace_ray(grid: Sequence[str], x: float, y: float, angle: float) -> RayHit:
    """Follow a ray from (x, y) at ``angle`` until it reaches a wall cell.

    Angle 0 points along increasing x and pi/2 along decreasing y (up the
    map). Raises ValueError if the ray leaves the grid without meeting a wall.
    """
    dir_x = math.cos(angle)
    dir_y = -math.sin(angle)
    step_x = sign(dir_x)
    step_y = sign(dir_y)
    next_vx = float(int(x) + (1 if step_x > 0 else 0))
    next_hy = float(int(y) + (1 if step_y > 0 else 0))

    while True:
        if step_x:
            vert_y = y + dir_y / dir_x * (next_vx - x)
            vert_dist = math.hypot(x - next_vx, y - vert_y)
            vert_shift = vert_y - int(vert_y)
            if step_x > 0:
                vert_shift = 1 - vert_shift
        else:
            vert_y = vert_shift = 0.0
            vert_dist = math.inf

        if step_y:
            horiz_x = x + dir_x / dir_y * (next_hy - y)
            horiz_dist = math.hypot(x - horiz_x, y - next_hy)
            horiz_shift = horiz_x - int(horiz_x)
            if step_y < 0:
                horiz_shift = 1 - horiz_shift
        else:
            horiz_x = horiz_shift = 0.0
            horiz_dist = math.inf

        if vert_dist < horiz_dist:
            check_x = next_vx if step_x == 1 else next_vx - 1
            if _is_wall(grid, int(vert_y), int(check_x)):
                return RayHit(vert_dist, step_x + 1, vert_shift)
            next_vx += step_x
        else:
            check_y = next_hy if step_y == 1 else next_hy - 1
            if _is_wall(grid, int(check_y), int(horiz_x)):
                return RayHit(horiz_dist, step_y + 2, horiz_shift)
            next_hy += step_y