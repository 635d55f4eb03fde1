"""Off-screen images and a window-like canvas holding 0xRRGGBB pixels."""

from __future__ import annotations

from typing import NamedTuple

WINDOW_WIDTH = 1800
WINDOW_HEIGHT = 1000

_BITS_PER_PIXEL = 32
_BYTES_PER_PIXEL = _BITS_PER_PIXEL // 8
_TRUE_COLOR_DEPTH = 24
_WINDOW_MASK = 0xFFFFFF


class ImageData(NamedTuple):
    """Raw access to an image: its buffer and how the buffer is laid out."""

    data: bytearray
    bits_per_pixel: int
    size_line: int
    endian: int


def _mask_layout(mask: int) -> tuple[int, int]:
    """Return the shift of the lowest set bit of ``mask`` and the run of ones there."""
    if mask <= 0:
        raise ValueError(f"colour mask must be positive, got {mask:#x}")
    shift = (mask & -mask).bit_length() - 1
    rest = mask >> shift
    width = 0
    while rest & 1:
        rest >>= 1
        width += 1
    return shift, width


def _scale(channel: int, width: int) -> int:
    drop = 16 - width
    return channel >> drop if drop >= 0 else channel << -drop


def good_color(
    color: int,
    depth: int = _TRUE_COLOR_DEPTH,
    red_mask: int = 0xFF0000,
    green_mask: int = 0x00FF00,
    blue_mask: int = 0x0000FF,
) -> int:
    """Convert ``0xRRGGBB`` into a pixel value for a display of ``depth`` bits.

    Displays of 24 bits or more take the colour unchanged; shallower ones
    pack each channel into the bits its mask selects.
    """
    if depth >= _TRUE_COLOR_DEPTH:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    pixel = 0
    for channel, mask in ((red, red_mask), (green, green_mask), (blue, blue_mask)):
        shift, width = _mask_layout(mask)
        pixel += _scale(channel, width) << shift
    return pixel


class Image:
    """A 32-bit little-endian pixel buffer."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.bpp = _BITS_PER_PIXEL
        self.size_line = width * _BYTES_PER_PIXEL
        self.endian = 0
        self._data = bytearray(self.size_line * height)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * _BYTES_PER_PIXEL

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` (32 bits) at (``x``, ``y``)."""
        offset = self._offset(x, y)
        self._data[offset:offset + _BYTES_PER_PIXEL] = (color & 0xFFFFFFFF).to_bytes(
            _BYTES_PER_PIXEL, "little"
        )

    def get_pixel(self, x: int, y: int) -> int:
        """The 32-bit value stored at (``x``, ``y``)."""
        offset = self._offset(x, y)
        return int.from_bytes(self._data[offset:offset + _BYTES_PER_PIXEL], "little")

    def data_addr(self) -> ImageData:
        """The pixel buffer together with bits per pixel, line size and byte order."""
        return ImageData(self._data, self.bpp, self.size_line, self.endian)


class Canvas:
    """A window surface of 24-bit pixels; drawing outside it is clipped."""

    def __init__(self, width: int = WINDOW_WIDTH, height: int = WINDOW_HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self._pixels = [[0] * width for _ in range(height)]

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def pixel_put(self, x: int, y: int, color: int) -> None:
        """Set one pixel; points off the canvas are ignored."""
        if self._inside(x, y):
            self._pixels[y][x] = good_color(color) & _WINDOW_MASK

    def get_pixel(self, x: int, y: int) -> int:
        """The colour at (``x``, ``y``)."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        return self._pixels[y][x]

    def put_image(self, image: Image, x: int, y: int) -> None:
        """Copy ``image`` with its top-left corner at (``x``, ``y``)."""
        for iy in range(max(0, -y), min(image.height, self.height - y)):
            row = self._pixels[y + iy]
            for ix in range(max(0, -x), min(image.width, self.width - x)):
                row[x + ix] = image.get_pixel(ix, iy) & _WINDOW_MASK

    def clear(self) -> None:
        """Reset every pixel to black."""
        for row in self._pixels:
            row[:] = [0] * self.width