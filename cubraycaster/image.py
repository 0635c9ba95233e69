"""In-memory 32-bit pixel images and colour conversion for lower depths."""

from __future__ import annotations

from array import array

_PIXEL_MASK = 0xFFFFFFFF


def channel_shifts(mask: int) -> tuple[int, int]:
    """Return (shift, bit count) of the contiguous run of set bits in ``mask``."""
    if mask <= 0:
        raise ValueError("colour mask must have at least one bit set")
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


def convert_color(
    color: int, depth: int, red_mask: int, green_mask: int, blue_mask: int
) -> int:
    """Convert a 0xRRGGBB colour to a pixel value for a visual of ``depth`` bits.

    Depths of 24 and above take the colour unchanged; lower depths pack the
    top bits of each channel into the positions given by the masks.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    pixel = 0
    for value, mask in ((red, red_mask), (green, green_mask), (blue, blue_mask)):
        shift, bits = channel_shifts(mask)
        pixel += (value >> (16 - bits)) << shift
    return pixel


class Image:
    """A width x height image of 32-bit pixels stored row by row.

    ``pixels`` is a flat array indexed by ``y * width + x``; each value is an
    unsigned 32-bit pixel in 0xAARRGGBB form.
    """

    bits_per_pixel = 32
    endian = 0

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("image dimensions must be positive")
        self.width = width
        self.height = height
        self.size_line = width * (self.bits_per_pixel // 8)
        self.pixels = array("I", bytes(4 * width * height))

    def _index(self, x: int, y: int) -> int | None:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        return None

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel at (x, y); raise IndexError outside the image."""
        index = self._index(x, y)
        if index is None:
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[index]

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set the pixel at (x, y); points outside the image are clipped."""
        index = self._index(x, y)
        if index is not None:
            self.pixels[index] = color & _PIXEL_MASK

    def fill(self, color: int) -> None:
        """Set every pixel to ``color``."""
        value = color & _PIXEL_MASK
        self.pixels = array("I", [value]) * (self.width * self.height)

    def to_bytes(self) -> bytes:
        """Return the pixel data as little-endian 32-bit words, row by row."""
        data = array("I", self.pixels)
        if data.itemsize != 4:
            raise RuntimeError("unsupported platform word size")
        import sys

        if sys.byteorder != "little":
            data.byteswap()
        return data.tobytes()