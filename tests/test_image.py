import pytest

from raycube.image import BIG_ENDIAN, Image, good_color, rgb_shifts

IM1_SX = 42
IM1_SY = 42
IM3_SX = 242
IM3_SY = 242


def _color_map(x, y, w, h, kind):
    if kind == 2:
        return (y * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


def _fill(image, kind):
    for y in range(image.height):
        for x in range(image.width):
            color = _color_map(x, y, image.width, image.height, kind)
            image.set_pixel(x, y, good_color(color, 24, (0,) * 6))


@pytest.mark.parametrize(
    "width, height, kind",
    [(IM1_SX, IM1_SY, 1), (IM3_SX, IM3_SY, 1), (IM3_SX, IM3_SY, 2)],
)
def test_color_map_round_trip(width, height, kind):
    image = Image(width, height)
    _fill(image, kind)
    for y in range(height):
        for x in range(width):
            expected = _color_map(x, y, width, height, kind)
            assert image.get_pixel(x, y) == expected
            start = y * image.size_line + x * 4
            assert bytes(image.data[start:start + 4]) == expected.to_bytes(4, "little")


def test_default_layout():
    image = Image(IM1_SX, IM1_SY)
    assert image.bits_per_pixel == 32
    assert image.size_line == IM1_SX * 4
    assert len(image.data) == IM1_SX * 4 * IM1_SY
    assert not any(image.data)


def test_big_endian_byte_layout():
    image = Image(2, 1, endian=BIG_ENDIAN)
    image.set_pixel(1, 0, 0x112233)
    assert bytes(image.data[4:8]) == b"\x00\x11\x22\x33"
    assert image.get_pixel(1, 0) == 0x112233


def test_narrow_pixels_keep_low_bytes():
    image = Image(1, 1, bits_per_pixel=24)
    image.set_pixel(0, 0, 0xFF000000)
    assert image.get_pixel(0, 0) == 0
    image.set_pixel(0, 0, 0x112233)
    assert bytes(image.data) == b"\x33\x22\x11"


def test_out_of_range_pixel():
    image = Image(3, 3)
    with pytest.raises(IndexError):
        image.set_pixel(3, 0, 0)
    with pytest.raises(IndexError):
        image.get_pixel(0, -1)


@pytest.mark.parametrize("width, height", [(0, 4), (4, 0), (-1, 2)])
def test_invalid_size(width, height):
    with pytest.raises(ValueError):
        Image(width, height)


def test_rgb_shifts_truecolor():
    assert rgb_shifts(0xFF0000, 0x00FF00, 0x0000FF) == (16, 8, 8, 8, 0, 8)


def test_rgb_shifts_565():
    assert rgb_shifts(0xF800, 0x07E0, 0x001F) == (11, 5, 5, 6, 0, 5)


def test_rgb_shifts_rejects_empty_mask():
    with pytest.raises(ValueError):
        rgb_shifts(0, 0x00FF00, 0x0000FF)


def test_good_color_deep_display_is_identity():
    for color in (0, 0xFF99FF, 0x00FFFF, 0xFFFFFF):
        assert good_color(color, 24, (0,) * 6) == color
        assert good_color(color, 32, (0,) * 6) == color


def test_good_color_565():
    shifts = rgb_shifts(0xF800, 0x07E0, 0x001F)
    assert good_color(0xFFFFFF, 16, shifts) == 0xFFFF
    assert good_color(0xFF0000, 16, shifts) == 0xF800
    assert good_color(0x00FF00, 16, shifts) == 0x07E0
    assert good_color(0x0000FF, 16, shifts) == 0x001F
    assert good_color(0, 16, shifts) == 0