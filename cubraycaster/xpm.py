"""Reading XPM images into :class:`Image` objects."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from .colors import color_by_name
from .image import Image

_TRANSPARENT = 0xFF000000
_NAME_BUFFER = 63
_HEX_PREFIX = re.compile(r"[0-9a-fA-F]*")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or parsed."""


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in re.split(r"[ \t]+", text) if word]


def find_unquoted(text: str, needle: str) -> int:
    """Return the index of ``needle`` outside double quotes, or -1."""
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def strip_comments(text: str) -> str:
    """Blank out C-style comments that are not inside strings, keeping length."""
    for opener, closer in (("/*", "*/"), ("//", "\n")):
        while (begin := find_unquoted(text, opener)) != -1:
            end = text.find(closer, begin + 2)
            stop = len(text) if end == -1 else end + len(closer)
            text = text[:begin] + " " * (stop - begin) + text[stop:]
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1 : end]
        pos = end + 1


def text_to_rgb(name: str, extra: str | None) -> int:
    """Turn an XPM colour value into 0xRRGGBB.

    ``#hex`` values are read as hexadecimal; otherwise ``name`` (joined with
    ``extra`` when given) is looked up among the named colours. "None" gives -1
    and unknown names give 0.
    """
    if name.startswith("#"):
        digits = _HEX_PREFIX.match(name, 1).group()
        return int(digits, 16) if digits else 0
    if extra:
        name = f"{name} {extra}"[:_NAME_BUFFER]
    color = color_by_name(name)
    return 0 if color is None else color


def _atoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM strings: header, colour lines, then pixel rows."""
    rows = iter(lines)
    header = split_words(_next_line(rows, "header"))
    values = [_atoi(word) for word in header[:4]]
    if len(values) < 4 or not all(values):
        raise XpmError("invalid XPM header")
    width, height, ncolors, cpp = values
    if width < 0 or height < 0 or ncolors < 0 or cpp < 0:
        raise XpmError("invalid XPM header")

    colors: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(rows, "colour definition")
        words = split_words(line[cpp:])
        try:
            position = words.index("c") + 1
        except ValueError:
            raise XpmError(f"no colour key in {line!r}") from None
        if position >= len(words):
            raise XpmError(f"no colour value in {line!r}")
        extra = words[position + 1] if position + 1 < len(words) else None
        rgb = text_to_rgb(words[position], extra)
        key = line[:cpp]
        if cpp <= 2:
            colors[key] = rgb
        else:
            colors.setdefault(key, rgb)

    image = Image(width, height)
    for y in range(height):
        line = _next_line(rows, "pixel row")
        for x in range(width):
            color = colors.get(line[cpp * x : cpp * (x + 1)], 0)
            if color == -1:
                color = _TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def load_xpm(path: str | Path) -> Image:
    """Read and parse the XPM file at ``path``."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(quoted_lines(strip_comments(text)))