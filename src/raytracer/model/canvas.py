"""
Pixel Canvas and PPM Export
===========================
A fixed-size grid of Colors that is written pixel by pixel and exported to
the plain-text PPM ('P3') image format.

Out-of-bounds access is not an error: writes outside the canvas are ignored
and reads outside it return black. Drawing code (e.g. a projectile path that
overshoots the edge) can therefore write without clipping first.

Export does not consume the canvas; it can be written again and exported
any number of times.
"""
from __future__ import annotations

import logging
import math
import os
from typing import Optional, Union, TYPE_CHECKING

import numpy as np

from raytracer.model.color import BLACK, MAX_COLOR_VALUE, Color

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

PPM_MAGIC: str = "P3"


class Canvas:
    """
    A `width` x `height` grid of Colors stored row-major, initially black.
    """

    def __init__(self, width: int, height: int) -> None:
        """
        Allocate a black canvas.

        Args:
            width: Number of columns (pixels along x).
            height: Number of rows (pixels along y).

        Raises:
            ValueError: If either dimension is not a positive integer.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}.")
        self.width = width
        self.height = height
        self.pixels: list[Color] = [BLACK] * (width * height)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(width={self.width}, height={self.height})"

    def _pixel_index(self, x: float, y: float) -> Optional[int]:
        # Fractional coordinates fall in the pixel that contains them
        col = math.floor(x)
        row = math.floor(y)
        if self.in_bounds(col, row):
            return col + row * self.width
        return None

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def write_pixel(self, x: float, y: float, color: Color) -> None:
        """
        Set the pixel at column `x`, row `y`. Ignored if out of bounds.

        Coordinates may be ints or floats; floats are floored, so (2.7, 1.2)
        writes pixel (2, 1) and (-0.5, 0) is out of bounds.
        """
        index = self._pixel_index(x, y)
        if index is not None:
            self.pixels[index] = color

    def pixel_at(self, x: float, y: float) -> Color:
        """The color at column `x`, row `y` (floored), or black if out of bounds."""
        index = self._pixel_index(x, y)
        if index is not None:
            return self.pixels[index]
        return BLACK

    def ppm_header(self) -> str:
        return f"{PPM_MAGIC}\n{self.width} {self.height}\n{MAX_COLOR_VALUE}\n"

    def to_ppm(self) -> str:
        """
        Serialize the canvas as PPM text.

        Returns:
            The header followed by one 'r g b' line per pixel, row 0 first,
            columns ascending within each row.
        """
        return self.ppm_header() + "".join(color.to_ppm() for color in self.pixels)

    def export(self) -> bytes:
        """The PPM text encoded as an ASCII byte stream."""
        return self.to_ppm().encode("ascii")

    def save(self, filepath: Union[str, os.PathLike]) -> None:
        """
        Write the PPM image to `filepath`.

        Raises:
            OSError: If the file cannot be written. Nothing is retried.
        """
        logger.info(f"Saving {self.width}x{self.height} canvas to: {filepath}")
        data = self.export()
        with open(filepath, "wb") as f:
            f.write(data)
        logger.debug(f"Wrote {len(data)} bytes.")

    def to_array(self) -> npt.NDArray[np.float64]:
        """Channels as a (height, width, 3) array, for plotting."""
        return np.array(
            [color.to_array() for color in self.pixels], dtype=np.float64
        ).reshape(self.height, self.width, 3)
