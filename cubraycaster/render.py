"""Drawing the textured first-person view and the overhead minimap."""

from __future__ import annotations

import math
from array import array
from collections.abc import Sequence

from .image import Image
from .raycast import RayHit, trace_ray

FIELD_OF_VIEW = math.pi / 3
WALL_COLOR = 0x000000
PLAYER_COLOR = 0xFF0000
MINIMAP_DIVISOR = 5
_PIXEL_MASK = 0xFFFFFFFF


def draw_background(image: Image, ceiling: int, floor: int) -> None:
    """Paint the upper half of ``image`` with ``ceiling`` and the rest with ``floor``."""
    total = image.width * image.height
    upper = image.width * (image.height // 2)
    image.pixels = array("I", [ceiling & _PIXEL_MASK]) * upper + array(
        "I", [floor & _PIXEL_MASK]
    ) * (total - upper)


def draw_column(
    image: Image, x: int, distance: float, texture: Image, shift: float
) -> None:
    """Draw one vertical wall slice at column ``x`` for a wall ``distance`` away.

    The slice is ``image.height / distance`` pixels tall, centred vertically
    and clipped to the image; ``shift`` picks the texture column.
    """
    height = image.height
    if distance > 0:
        line_height = height / distance
        step = texture.height / line_height
        position = 0.0
        if line_height > height:
            position = 0.5 * (line_height - height) / line_height * texture.height
            line_height = float(height)
    else:
        line_height = float(height)
        step = 0.0
        position = 0.5 * texture.height

    column = min(int(max(shift, 0.0) * texture.width), texture.width - 1)
    count = int(line_height)
    top = max((height - count) // 2, 0)
    for row in range(top, top + count):
        texel_row = min(int(position), texture.height - 1)
        image.put_pixel(x, row, texture.pixels[texel_row * texture.width + column])
        position += step


def render_view(
    image: Image,
    grid: Sequence[str],
    x: float,
    y: float,
    angle: float,
    textures: Sequence[Image],
) -> list[RayHit]:
    """Draw the walls seen from (x, y) looking along ``angle``.

    Columns sweep the field of view from left to right; distances are
    corrected for the fish-eye effect. Returns the hit of every column.
    """
    ray_angle = angle + FIELD_OF_VIEW / 2
    step = FIELD_OF_VIEW / (image.width - 1) if image.width > 1 else 0.0
    hits: list[RayHit] = []
    for column in range(image.width):
        hit = trace_ray(grid, x, y, ray_angle)
        corrected = hit.distance * math.cos(angle - ray_angle)
        draw_column(image, column, corrected, textures[hit.texture], hit.shift)
        hits.append(hit)
        ray_angle -= step
    return hits


def draw_square(image: Image, left: int, top: int, size: int, color: int) -> None:
    """Fill a ``size`` square at (left, top); squares not wholly inside are skipped."""
    if (
        left < 0
        or top < 0
        or left + size > image.width
        or top + size > image.height
    ):
        return
    for dx in range(size):
        for dy in range(size):
            image.put_pixel(left + dx, top + dy, color)


def draw_minimap(image: Image, grid: Sequence[str], x: float, y: float) -> int:
    """Draw the walls of ``grid`` and the player at (x, y) in the top-left corner.

    Returns the number of pixels per map cell.
    """
    map_width = len(grid[0])
    map_height = len(grid)
    scale = min(image.width // map_width, image.height // map_height) // MINIMAP_DIVISOR
    for row, line in enumerate(grid):
        for col, cell in enumerate(line):
            if cell == "1":
                draw_square(image, col * scale, row * scale, scale, WALL_COLOR)
    if x >= 0 and y >= 0:
        draw_square(image, int(x * scale), int(y * scale), scale // 2, PLAYER_COLOR)
    return scale