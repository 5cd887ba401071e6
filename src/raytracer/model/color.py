"""
RGB Colors
==========
Colors are unbounded float triples while being combined (light can be
over-exposed or negative in intermediate steps) and are only clamped to
[0, 1] when quantized for the image file.

Exports:
    Color: The color value type.
    BLACK, WHITE, RED, GREEN, BLUE: Predefined immutable colors.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
import numbers
from typing import Union, TYPE_CHECKING

import numpy as np

from raytracer.model.approx import all_approx_eq

if TYPE_CHECKING:
    import numpy.typing as npt

MAX_COLOR_VALUE: int = 255


def clamp(value: float, lower: float = 0.0, upper: float = 1.0) -> float:
    return max(lower, min(upper, value))


def quantize(channel: float) -> int:
    """
    Map a float channel to an integer in [0, 255].

    The channel is clamped to [0, 1], scaled by 255 and rounded to the
    nearest integer (halves round up).
    """
    return int(math.floor(clamp(channel) * MAX_COLOR_VALUE + 0.5))


@dataclass(frozen=True, eq=False)
class Color:
    """
    An RGB color with float channels.
    """
    r: float
    g: float
    b: float

    __hash__ = None

    @staticmethod
    def black() -> Color:
        return BLACK

    @staticmethod
    def white() -> Color:
        return WHITE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return all_approx_eq((self.r, self.g, self.b), (other.r, other.g, other.b))

    def __add__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: Color) -> Color:
        if not isinstance(other, Color):
            return NotImplemented
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other: Union[Color, float]) -> Color:
        # Color * Color is the Hadamard (element-wise) product used for blending
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, numbers.Real):
            return Color(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Color:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return Color(self.r / scalar, self.g / scalar, self.b / scalar)

    def to_rgb255(self) -> tuple[int, int, int]:
        return quantize(self.r), quantize(self.g), quantize(self.b)

    def to_ppm(self) -> str:
        """Serialize as one 'r g b' line of 0..255 integers, newline-terminated."""
        r, g, b = self.to_rgb255()
        return f"{r} {g} {b}\n"

    def __str__(self) -> str:
        return self.to_ppm()

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.r, self.g, self.b])


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
RED = Color(1.0, 0.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)
