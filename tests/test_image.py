import pytest

from cubraycaster.image import Image, channel_shifts, convert_color

WIN1_SX = 242
WIN1_SY = 242
IM1_SX = 42
IM1_SY = 42
IM3_SX = 242
IM3_SY = 242


def _color_map(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def _fill_color_map(image, kind):
    for y in range(image.height):
        for x in range(image.width):
            color = _color_map(x, y, image.width, image.height, kind)
            image.put_pixel(x, y, convert_color(color, 24, 0xFF0000, 0xFF00, 0xFF))


@pytest.mark.parametrize("size", [(IM1_SX, IM1_SY), (IM3_SX, IM3_SY)])
def test_new_image_layout(size):
    image = Image(*size)
    assert image.width == size[0]
    assert image.height == size[1]
    assert image.bits_per_pixel == 32
    assert image.size_line == size[0] * 4
    assert image.endian == 0
    assert set(image.pixels) == {0}


@pytest.mark.parametrize("size,kind", [((IM1_SX, IM1_SY), 1), ((IM3_SX, IM3_SY), 1), ((IM3_SX, IM3_SY), 2)])
def test_color_map_fill_round_trip(size, kind):
    image = Image(*size)
    _fill_color_map(image, kind)
    w, h = size
    for x, y in [(0, 0), (w - 1, 0), (0, h - 1), (w - 1, h - 1), (w // 2, h // 3)]:
        assert image.get_pixel(x, y) == _color_map(x, y, w, h, kind)


def test_put_pixel_outside_is_clipped():
    image = Image(4, 4)
    image.put_pixel(-1, 0, 0xFF)
    image.put_pixel(4, 0, 0xFF)
    image.put_pixel(0, 4, 0xFF)
    assert set(image.pixels) == {0}


def test_get_pixel_outside_raises():
    image = Image(3, 3)
    with pytest.raises(IndexError):
        image.get_pixel(3, 0)
    with pytest.raises(IndexError):
        image.get_pixel(0, -1)


def test_put_pixel_masks_to_32_bits():
    image = Image(1, 1)
    image.put_pixel(0, 0, -1)
    assert image.get_pixel(0, 0) == 0xFFFFFFFF


def test_fill_sets_every_pixel():
    image = Image(5, 3)
    image.fill(0x00FF99FF)
    assert len(image.pixels) == 15
    assert set(image.pixels) == {0x00FF99FF}


def test_to_bytes_little_endian():
    image = Image(2, 1)
    image.put_pixel(0, 0, 0x11223344)
    data = image.to_bytes()
    assert len(data) == image.size_line * image.height
    assert data[:4] == b"\x44\x33\x22\x11"
    assert data[4:] == b"\x00\x00\x00\x00"


def test_invalid_dimensions():
    with pytest.raises(ValueError):
        Image(0, 10)


@pytest.mark.parametrize(
    "mask,expected",
    [(0xF800, (11, 5)), (0x07E0, (5, 6)), (0x001F, (0, 5)), (0xFF0000, (16, 8))],
)
def test_channel_shifts(mask, expected):
    assert channel_shifts(mask) == expected


def test_channel_shifts_zero_mask():
    with pytest.raises(ValueError):
        channel_shifts(0)


def test_convert_color_true_color_identity():
    assert convert_color(0xFF99FF, 24, 0xFF0000, 0xFF00, 0xFF) == 0xFF99FF
    assert convert_color(0x00FFFF, 32, 0xFF0000, 0xFF00, 0xFF) == 0x00FFFF


def test_convert_color_rgb565():
    masks = (0xF800, 0x07E0, 0x001F)
    assert convert_color(0xFFFFFF, 16, *masks) == 0xFFFF
    assert convert_color(0xFF0000, 16, *masks) == 0xF800
    assert convert_color(0x00FF00, 16, *masks) == 0x07E0
    assert convert_color(0x0000FF, 16, *masks) == 0x001F
    assert convert_color(0, 16, *masks) == 0