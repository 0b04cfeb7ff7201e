"""In-memory pixel buffer."""

from __future__ import annotations

from typing import Iterator

from .color import Color


class Image:
    """A width x height grid of colours, stored row by row."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("Image dimensions must not be negative.")
        self.width = width
        self.height = height
        self._pixels = [Color() for _ in range(width * height)]

    def _index(self, i: int, j: int) -> int:
        if not (0 <= i < self.width and 0 <= j < self.height):
            raise IndexError(f"Pixel ({i}, {j}) is outside a {self.width}x{self.height} image.")
        return j * self.width + i

    def get_pixel(self, i: int, j: int) -> Color:
        return self._pixels[self._index(i, j)]

    def set_pixel(self, i: int, j: int, color: Color) -> None:
        self._pixels[self._index(i, j)] = color

    def __iter__(self) -> Iterator[Color]:
        """Pixels in row-major order, top row first."""
        return iter(self._pixels)