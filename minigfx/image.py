"""In-memory pixel images."""

from __future__ import annotations

import enum
from dataclasses import dataclass

Z_PIXMAP = 2
_BITMAP_PAD = 32
_SUPPORTED_BPP = (8, 16, 24, 32)


class ImageType(enum.IntEnum):
    """How an image's pixels are stored."""

    XIMAGE = 1
    SHM = 2
    SHM_PIXMAP = 3


@dataclass(eq=False)
class Image:
    """A width x height pixel buffer with rows of ``size_line`` bytes."""

    width: int
    height: int
    bits_per_pixel: int
    size_line: int
    byte_order: int
    data: bytearray
    type: ImageType = ImageType.XIMAGE
    format: int = Z_PIXMAP

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    def data_address(self) -> tuple[bytearray, int, int, int]:
        """Return (data, bits per pixel, bytes per line, byte order)."""
        return self.data, self.bits_per_pixel, self.size_line, self.byte_order

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    @property
    def _endian(self) -> str:
        return "big" if self.byte_order else "little"

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store the low bytes of ``color`` at (x, y) in the image's byte order."""
        opp = self.bytes_per_pixel
        offset = self._offset(x, y)
        value = color & ((1 << (8 * opp)) - 1)
        self.data[offset:offset + opp] = value.to_bytes(opp, self._endian)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the value stored at (x, y)."""
        opp = self.bytes_per_pixel
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + opp], self._endian)


def new_image(width: int, height: int, bits_per_pixel: int = 32, byte_order: int = 0) -> Image:
    """Create a zero-filled image of the given size."""
    if width <= 0 or height <= 0:
        raise ValueError(f"image size must be positive, got {width}x{height}")
    if bits_per_pixel not in _SUPPORTED_BPP:
        raise ValueError(f"unsupported bits per pixel: {bits_per_pixel}")
    if byte_order not in (0, 1):
        raise ValueError(f"byte order must be 0 or 1, got {byte_order}")
    size_line = (width * bits_per_pixel + _BITMAP_PAD - 1) // _BITMAP_PAD * (_BITMAP_PAD // 8)
    data = bytearray((width + 32) * height * 4)
    return Image(
        width=width,
        height=height,
        bits_per_pixel=bits_per_pixel,
        size_line=size_line,
        byte_order=byte_order,
        data=data,
    )