"""Reading the settings part of a scene file: textures, colours and layout."""

from __future__ import annotations

import re
from pathlib import Path

from .errors import CubError, ErrorKind

TEXTURE_IDS = ("NO", "EA", "SO", "WE")
COLOR_IDS = ("F", "C")
_BLANK = " \t\n"
_DIGITS = re.compile(r"[0-9]+")


def has_cub_extension(path: str) -> bool:
    """Return True if ``path`` ends in ".cub" with a name before it."""
    return len(path) >= 5 and path.endswith(".cub")


def read_lines(path: str | Path) -> list[str]:
    """Return the lines of a file, each keeping its trailing newline."""
    try:
        text = Path(path).read_bytes().decode("utf-8", errors="surrogateescape")
    except OSError as exc:
        raise CubError(ErrorKind.OPEN_FILE, str(path)) from exc
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def locate_map(lines: list[str]) -> tuple[int, int]:
    """Return (start, end) of the first block of map lines.

    A map line begins, after spaces and tabs, with '1' or '0'. At least three
    such lines are required.
    """
    start = -1
    count = 0
    for index, line in enumerate(lines):
        first = line.lstrip(" \t")[:1]
        if first and first in "10":
            if start == -1:
                start = index
            count += 1
        elif start != -1:
            break
    if start == -1 or count < 3:
        raise CubError(ErrorKind.MAP_INVALID)
    return start, start + count


def find_texture_path(line: str) -> str:
    """Return the path following a two-letter texture identifier."""
    pos = len(line) - len(line.lstrip(" \t")) + 2
    if pos >= len(line) or line[pos] not in " \t":
        raise CubError(ErrorKind.TEXTURE_ID, line.rstrip("\n"))
    while pos < len(line) and line[pos] in " \t":
        pos += 1
    rest = line[pos:]
    if rest == "\n":
        raise CubError(ErrorKind.TEXTURE_ID, line.rstrip("\n"))
    return rest.split("\n", 1)[0]


def extract_textures(lines: list[str], map_start: int) -> dict[str, str]:
    """Collect texture paths by identifier; the first definition of each wins."""
    textures: dict[str, str] = {}
    for line in lines[:map_start]:
        for ident in TEXTURE_IDS:
            if line.startswith(ident) and ident not in textures:
                textures[ident] = find_texture_path(line)
                break
    return textures


def check_color_line(line: str) -> None:
    """Check that a colour line holds only digits, blanks and two commas."""
    commas = 0
    for char in line[1:]:
        if char == ",":
            commas += 1
        elif char == "-":
            raise CubError(ErrorKind.RGB_RANGE, line.rstrip("\n"))
        elif char not in _BLANK and not ("0" <= char <= "9"):
            raise CubError(ErrorKind.RGB_FORMAT, line.rstrip("\n"))
    if commas != 2:
        raise CubError(ErrorKind.RGB_FORMAT, line.rstrip("\n"))


def parse_rgb(line: str) -> tuple[int, int, int]:
    """Read the three numbers of a colour line.

    Each comma separated part contributes its first run of digits; numbers of
    more than three digits are out of range.
    """
    values: list[int] = []
    for part in line.split(","):
        match = _DIGITS.search(part)
        if match is None:
            continue
        if len(match.group()) > 3:
            raise CubError(ErrorKind.RGB_RANGE, line.rstrip("\n"))
        values.append(int(match.group()))
    if len(values) != 3:
        raise CubError(ErrorKind.RGB_FORMAT, line.rstrip("\n"))
    red, green, blue = values
    return red, green, blue


def extract_colors(lines: list[str], map_start: int) -> dict[str, tuple[int, int, int]]:
    """Collect the floor ("F") and ceiling ("C") colours defined before the map."""
    colors: dict[str, tuple[int, int, int]] = {}
    for line in lines[:map_start]:
        for ident in COLOR_IDS:
            if line.startswith(ident):
                check_color_line(line)
                rgb = parse_rgb(line)
                if any(component > 255 for component in rgb):
                    raise CubError(ErrorKind.RGB_RANGE, line.rstrip("\n"))
                colors[ident] = rgb
                break
    return colors


def settings_before_map(
    lines: list[str], textures: dict[str, str], colors: dict[str, tuple[int, int, int]]
) -> bool:
    """Return True if all settings are known by the first line made only of walls."""
    for line in lines:
        stripped = line.lstrip(" \t")
        if stripped.startswith("1") and not stripped.lstrip("1" + _BLANK):
            return all(ident in textures for ident in TEXTURE_IDS) and all(
                ident in colors for ident in COLOR_IDS
            )
    return False


def check_file_clean(lines: list[str], map_start: int, map_end: int) -> None:
    """Check that only settings and blank lines surround the map.

    Exactly six setting lines must come before the map and nothing but blank
    lines may follow it.
    """
    settings = 0
    for line in lines[:map_start]:
        if line.startswith(TEXTURE_IDS) or line.startswith(COLOR_IDS):
            settings += 1
        elif line.strip(_BLANK):
            raise CubError(ErrorKind.NOT_CLEAN, line.rstrip("\n"))
    if settings != 6:
        raise CubError(ErrorKind.NOT_CLEAN, f"{settings} setting lines")
    for line in lines[map_end:]:
        if line.strip(_BLANK):
            raise CubError(ErrorKind.NOT_CLEAN, line.rstrip("\n"))