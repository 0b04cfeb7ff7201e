"""Plain-text PPM (P3) output."""

from __future__ import annotations

import math
import os
from typing import IO

from .arithmetics import scale
from .color import Color
from .image import Image

OUTPUT_IMAGE_NAME = "output.ppm"
MAX_COLOR_VALUE = 255


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


class PPMWriter:
    """Context manager that writes a P3 header, then one pixel per line."""

    def __init__(
        self,
        path: str | os.PathLike[str],
        width: int,
        height: int,
        max_color: int = MAX_COLOR_VALUE,
    ) -> None:
        self.path = path
        self.width = width
        self.height = height
        self.max_color = max_color
        self._file: IO[str] | None = None

    def __enter__(self) -> PPMWriter:
        self._file = open(self.path, "w", encoding="ascii")
        self._file.write(f"P3\n{self.width} {self.height}\n{self.max_color}\n")
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def write_pixel(self, color: Color) -> None:
        if self._file is None:
            raise ValueError("PPM writer is not open.")
        values = (
            _round_half_away(scale(c, 0.0, 1.0, 0, self.max_color))
            for c in (color.r, color.g, color.b)
        )
        self._file.write(" ".join(map(str, values)) + "\n")


def write_image(image: Image, path: str | os.PathLike[str] = OUTPUT_IMAGE_NAME) -> None:
    """Write every pixel of ``image`` to ``path`` as a P3 file."""
    with PPMWriter(path, image.width, image.height) as writer:
        for pixel in image:
            writer.write_pixel(pixel)