"""Loading a complete scene: textures, colours, map and starting position."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from . import config, mapgrid
from .errors import CubError, ErrorKind


@dataclass(frozen=True)
class Scene:
    """A validated scene ready for rendering."""

    textures: dict[str, str]
    floor: tuple[int, int, int]
    ceiling: tuple[int, int, int]
    grid: tuple[str, ...]
    player_x: float
    player_y: float
    angle: float

    @property
    def floor_color(self) -> int:
        red, green, blue = self.floor
        return (red << 16) | (green << 8) | blue

    @property
    def ceiling_color(self) -> int:
        red, green, blue = self.ceiling
        return (red << 16) | (green << 8) | blue

    @property
    def texture_paths(self) -> tuple[str, ...]:
        """Texture paths in the order north, east, south, west."""
        return tuple(self.textures[ident] for ident in config.TEXTURE_IDS)

    @property
    def width(self) -> int:
        return len(self.grid[0])

    @property
    def height(self) -> int:
        return len(self.grid)


def parse_scene(lines: list[str]) -> Scene:
    """Build a scene from the lines of a scene file."""
    map_start, map_end = config.locate_map(lines)
    map_lines = lines[map_start:map_end]
    textures = config.extract_textures(lines, map_start)
    colors = config.extract_colors(lines, map_start)
    if not config.settings_before_map(lines, textures, colors):
        raise CubError(ErrorKind.TEXTURES_AFTER_MAP)
    config.check_file_clean(lines, map_start, map_end)
    row, col, direction = mapgrid.find_start(map_lines)
    grid = mapgrid.pad_map(map_lines)
    if not mapgrid.is_map_closed(grid):
        raise CubError(ErrorKind.MAP_OPEN)
    return Scene(
        textures=textures,
        floor=colors["F"],
        ceiling=colors["C"],
        grid=tuple(grid),
        player_x=float(col + 1),
        player_y=float(row + 1),
        angle=mapgrid.start_angle(direction),
    )


def load_scene(path: str | Path) -> Scene:
    """Read and validate the scene file at ``path``."""
    if not config.has_cub_extension(str(path)):
        raise CubError(ErrorKind.EXTENSION, str(path))
    return parse_scene(config.read_lines(path))