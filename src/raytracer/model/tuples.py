"""
Homogeneous Tuples, Points and Vectors
======================================
Value types for 3D geometry in homogeneous coordinates.

A Tuple is the generic four-component carrier (x, y, z, w). Points (w = 1)
and Vectors (w = 0) are separate types, and their operators only return
combinations that make geometric sense:

    Point - Point   -> Vector
    Point + Vector  -> Point
    Point - Vector  -> Point
    Vector + Vector -> Vector
    Point + Point   -> Tuple (w = 2)

All types are immutable; every operation returns a new value. Equality is
approximate (see `raytracer.model.approx`).
"""
from __future__ import annotations

from dataclasses import dataclass
import math
import numbers
from typing import Iterator, Sequence, Union, TYPE_CHECKING

import numpy as np

from raytracer.model.approx import all_approx_eq
from raytracer.model.errors import BadWError, WrongLengthError

if TYPE_CHECKING:
    import numpy.typing as npt

POINT_W: float = 1.0
VECTOR_W: float = 0.0


def _is_scalar(value: object) -> bool:
    return isinstance(value, numbers.Real)


def _components(value: Union[Tuple, Point, Vector]) -> tuple[float, float, float, float]:
    return value.x, value.y, value.z, value.w


@dataclass(frozen=True, eq=False)
class Tuple:
    """
    A generic homogeneous 4-component tuple.

    No invariant is placed on `w`; use `Point.from_tuple` or
    `Vector.from_tuple` to narrow it to a geometric type.
    """
    x: float
    y: float
    z: float
    w: float

    __hash__ = None

    @classmethod
    def zero(cls) -> Tuple:
        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_values(cls, values: Sequence[float]) -> Tuple:
        """
        Build a Tuple from any sequence of four numbers.

        Raises:
            WrongLengthError: If `values` does not have exactly 4 items.
        """
        values = list(values)
        if len(values) != 4:
            raise WrongLengthError(len(values))
        return cls(*(float(v) for v in values))

    def __len__(self) -> int:
        return 4

    def __iter__(self) -> Iterator[float]:
        return iter(_components(self))

    def __getitem__(self, index: int) -> float:
        return _components(self)[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return all_approx_eq(_components(self), _components(other))

    def __add__(self, other: Union[Tuple, Point, Vector]) -> Tuple:
        if not isinstance(other, (Tuple, Point, Vector)):
            return NotImplemented
        return Tuple(*(a + b for a, b in zip(_components(self), _components(other))))

    __radd__ = __add__

    def __sub__(self, other: Union[Tuple, Point, Vector]) -> Tuple:
        if not isinstance(other, (Tuple, Point, Vector)):
            return NotImplemented
        return Tuple(*(a - b for a, b in zip(_components(self), _components(other))))

    def __rsub__(self, other: Union[Point, Vector]) -> Tuple:
        if not isinstance(other, (Point, Vector)):
            return NotImplemented
        return Tuple(*(a - b for a, b in zip(_components(other), _components(self))))

    def __neg__(self) -> Tuple:
        return Tuple.zero() - self

    def __mul__(self, scalar: float) -> Tuple:
        if not _is_scalar(scalar):
            return NotImplemented
        return Tuple(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Tuple:
        if not _is_scalar(scalar):
            return NotImplemented
        return Tuple(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def magnitude(self) -> float:
        """Euclidean norm over all four components."""
        return math.sqrt(self.x**2 + self.y**2 + self.z**2 + self.w**2)

    def normalize(self) -> Tuple:
        """
        Scale the tuple to unit length.

        The magnitude must be non-zero; a zero tuple raises ZeroDivisionError.
        """
        return self / self.magnitude()

    def dot(self, other: Tuple) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array(_components(self), dtype=np.float64)


@dataclass(frozen=True, eq=False)
class Point:
    """A location in 3D space (w = 1)."""
    x: float
    y: float
    z: float

    __hash__ = None

    @property
    def w(self) -> float:
        return POINT_W

    @classmethod
    def origin(cls) -> Point:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_tuple(cls, source: Union[Tuple, Sequence[float]]) -> Point:
        """
        Narrow a generic tuple to a Point.

        Args:
            source: A Tuple or any sequence of four numbers.

        Raises:
            WrongLengthError: If `source` does not have 4 components.
            BadWError: If the fourth component is not exactly 1.

        Returns:
            The Point (x, y, z).
        """
        values = list(source)
        if len(values) != 4:
            raise WrongLengthError(len(values))
        if values[3] != POINT_W:
            raise BadWError("Point", POINT_W, values[3])
        return cls(values[0], values[1], values[2])

    def to_tuple(self) -> Tuple:
        return Tuple(self.x, self.y, self.z, POINT_W)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])

    def __str__(self) -> str:
        return f"({self.x:.2f}, {self.y:.2f}, {self.z:.2f}, 1.00)"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return all_approx_eq((self.x, self.y, self.z), (other.x, other.y, other.z))

    def __add__(self, other: Union[Vector, Point]) -> Union[Point, Tuple]:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        # Point + Point has no geometric meaning, kept as a raw Tuple with w = 2
        if isinstance(other, Point):
            return Tuple(self.x + other.x, self.y + other.y, self.z + other.z, 2 * POINT_W)
        return NotImplemented

    def __sub__(self, other: Union[Point, Vector]) -> Union[Vector, Point]:
        # Point - Point = Vector (Direction)
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __neg__(self) -> Tuple:
        return Tuple(-self.x, -self.y, -self.z, -POINT_W)

    def distance_to(self, other: Point) -> float:
        return (self - other).magnitude()


@dataclass(frozen=True, eq=False)
class Vector:
    """A direction and magnitude in 3D space (w = 0)."""
    x: float
    y: float
    z: float

    __hash__ = None

    @property
    def w(self) -> float:
        return VECTOR_W

    @classmethod
    def zero(cls) -> Vector:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def x_unit(cls) -> Vector:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def y_unit(cls) -> Vector:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def z_unit(cls) -> Vector:
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def from_tuple(cls, source: Union[Tuple, Sequence[float]]) -> Vector:
        """
        Narrow a generic tuple to a Vector.

        Args:
            source: A Tuple or any sequence of four numbers.

        Raises:
            WrongLengthError: If `source` does not have 4 components.
            BadWError: If the fourth component is not exactly 0.

        Returns:
            The Vector (x, y, z).
        """
        values = list(source)
        if len(values) != 4:
            raise WrongLengthError(len(values))
        if values[3] != VECTOR_W:
            raise BadWError("Vector", VECTOR_W, values[3])
        return cls(values[0], values[1], values[2])

    def to_tuple(self) -> Tuple:
        return Tuple(self.x, self.y, self.z, VECTOR_W)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])

    def __str__(self) -> str:
        return f"({self.x:.2f}, {self.y:.2f}, {self.z:.2f}, 0.00)"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return all_approx_eq((self.x, self.y, self.z), (other.x, other.y, other.z))

    def __add__(self, other: Union[Vector, Point]) -> Union[Vector, Point]:
        if isinstance(other, Vector):
            return Vector(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, Point):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other: Union[Vector, Point]) -> Union[Vector, Tuple]:
        if isinstance(other, Vector):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Point):
            return Tuple(self.x - other.x, self.y - other.y, self.z - other.z, VECTOR_W - POINT_W)
        return NotImplemented

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vector:
        if not _is_scalar(scalar):
            return NotImplemented
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        if not _is_scalar(scalar):
            return NotImplemented
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def normalize(self) -> Vector:
        """
        Return the unit vector pointing the same way.

        The zero vector has no direction: its magnitude is 0 and the division
        raises ZeroDivisionError. Callers must not normalize it.
        """
        return self / self.magnitude()

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def angle_to(self, other: Vector) -> float:
        """Returns the angle in radians between this vector and another."""
        return math.atan2(self.cross(other).magnitude(), self.dot(other))
