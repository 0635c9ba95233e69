"""Errors raised while reading a scene description."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """The kinds of problem a scene file can have."""

    EXTENSION = "scene file must have a .cub extension"
    OPEN_FILE = "cannot open scene file"
    MAP_INVALID = "no valid map found (at least three map lines are needed)"
    TEXTURES_AFTER_MAP = "textures and colours must all come before the map"
    NOT_CLEAN = "unexpected content in scene file"
    TEXTURE_ID = "invalid texture line"
    RGB_RANGE = "colour components must be between 0 and 255"
    RGB_FORMAT = "colour must be three comma separated numbers"
    STARTING_POINT = "the map needs exactly one starting point"
    INVALID_CHAR = "invalid character in map"
    MAP_OPEN = "the map is not closed by walls"


class CubError(Exception):
    """A scene file could not be used; ``kind`` tells why."""

    def __init__(self, kind: ErrorKind, detail: str | None = None) -> None:
        self.kind = kind
        self.detail = detail
        message = kind.value if detail is None else f"{kind.value}: {detail}"
        super().__init__(message)