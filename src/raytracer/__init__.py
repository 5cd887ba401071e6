"""
Homogeneous 3D math, colors, 4x4 matrices and a PPM canvas.
"""
from importlib.metadata import version, PackageNotFoundError

from raytracer.model.canvas import Canvas
from raytracer.model.color import BLACK, BLUE, GREEN, RED, WHITE, Color
from raytracer.model.errors import BadWError, TupleConversionError, WrongLengthError
from raytracer.model.matrix import Matrix
from raytracer.model.tuples import Point, Tuple, Vector

try:
    __version__ = version("raytracer")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

__all__ = [
    "Tuple",
    "Point",
    "Vector",
    "Color",
    "BLACK",
    "WHITE",
    "RED",
    "GREEN",
    "BLUE",
    "Matrix",
    "Canvas",
    "TupleConversionError",
    "BadWError",
    "WrongLengthError",
]
