"""An in-memory 32-bit pixel buffer."""

from __future__ import annotations

import sys
from array import array

WIDTH = 800
HEIGHT = 800


class Canvas:
    """A ``width`` by ``height`` image of 32-bit ``0xAARRGGBB`` pixels."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas dimensions must be positive")
        self.width = width
        self.height = height
        self._pixels = array("I", [0]) * (width * height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the canvas are ignored."""
        if self._inside(x, y):
            self._pixels[y * self.width + x] = color & 0xFFFFFFFF

    def get_pixel(self, x: int, y: int) -> int:
        """Colour of one pixel; raises IndexError outside the canvas."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return self._pixels[y * self.width + x]

    def clear(self) -> None:
        """Set every pixel to zero."""
        self._pixels = array("I", [0]) * (self.width * self.height)

    def to_rgb_bytes(self) -> bytes:
        """Pixels as packed R, G, B bytes, row by row, alpha dropped."""
        raw = self._pixels.tobytes()
        size = self._pixels.itemsize
        if sys.byteorder == "little":
            red, green, blue = 2, 1, 0
        else:
            red, green, blue = size - 3, size - 2, size - 1
        out = bytearray(len(self._pixels) * 3)
        out[0::3] = raw[red::size]
        out[1::3] = raw[green::size]
        out[2::3] = raw[blue::size]
        return bytes(out)