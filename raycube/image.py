"""In-memory pixel images and the colour conversions used to fill them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

LITTLE_ENDIAN = 0
BIG_ENDIAN = 1


@dataclass
class Image:
    """A rectangular block of packed pixels, one row after another.

    ``endian`` follows the X convention: 0 stores the least significant
    byte of a pixel first, 1 stores the most significant byte first.
    """

    width: int
    height: int
    bits_per_pixel: int = 32
    endian: int = LITTLE_ENDIAN
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"invalid image size {self.width}x{self.height}")
        if self.bits_per_pixel <= 0 or self.bits_per_pixel % 8:
            raise ValueError(f"unsupported pixel depth {self.bits_per_pixel}")
        if self.endian not in (LITTLE_ENDIAN, BIG_ENDIAN):
            raise ValueError(f"invalid byte order {self.endian}")
        self.data = bytearray(self.size_line * self.height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def size_line(self) -> int:
        """Number of bytes in one row of pixels."""
        return self.width * self.bytes_per_pixel

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return y * self.size_line + x * self.bytes_per_pixel

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian == BIG_ENDIAN else "little"

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at (x, y), keeping as many low bytes as a pixel holds."""
        start = self._offset(x, y)
        size = self.bytes_per_pixel
        value = color & ((1 << (8 * size)) - 1)
        self.data[start:start + size] = value.to_bytes(size, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the unsigned pixel value stored at (x, y)."""
        start = self._offset(x, y)
        return int.from_bytes(
            self.data[start:start + self.bytes_per_pixel], self._byteorder
        )


def good_color(color: int, depth: int, decrgb: Sequence[int]) -> int:
    """Convert a 0xRRGGBB colour to a pixel value for a display of ``depth`` bits.

    ``decrgb`` holds, for red, green and blue in turn, the shift of the
    channel within a pixel and its width in bits, as given by ``rgb_shifts``.
    Displays of 24 bits or more take the colour unchanged.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = decrgb
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )


def _mask_shift(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"colour mask must be a positive bit field, got {mask:#x}")
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


def rgb_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Return (shift, bits) for red, green and blue, flattened into six values."""
    return (
        *_mask_shift(red_mask),
        *_mask_shift(green_mask),
        *_mask_shift(blue_mask),
    )