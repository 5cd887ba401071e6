"""
4x4 Transformation Matrix
=========================
A fixed-size, row-major 4x4 matrix used as a linear/affine operator.

Multiplication depends on the right-hand operand:
    Matrix * Matrix -> Matrix  (composition)
    Matrix * Vector -> Vector  (upper-left 3x3 block only, no translation)
    Matrix * Point  -> Tuple   (full affine transform)
    Matrix * Tuple  -> Tuple   (full affine transform)

Vectors are directions, so translation must never move them. Keeping the
Vector case separate from the Point/Tuple case preserves that.
"""
from __future__ import annotations

from typing import Optional, Sequence, Union, TYPE_CHECKING

import numpy as np

from raytracer.model.approx import all_approx_eq
from raytracer.model.tuples import Point, Tuple, Vector

if TYPE_CHECKING:
    import numpy.typing as npt

SIZE: int = 4

Index = Union[int, tuple[int, int]]


class Matrix:
    """
    A 4x4 grid of floats.
    """

    __hash__ = None

    def __init__(self, rows: Optional[Sequence[Sequence[float]]] = None) -> None:
        """
        Initialize the matrix.

        Args:
            rows: A 4x4 nested sequence (or array) of numbers in row-major
                order. If omitted, the matrix is all zeros.

        Raises:
            ValueError: If `rows` is not 4x4.
        """
        if rows is None:
            self._data: npt.NDArray[np.float64] = np.zeros((SIZE, SIZE), dtype=np.float64)
            return

        data = np.array([list(row) for row in rows], dtype=np.float64)
        if data.shape != (SIZE, SIZE):
            raise ValueError(f"Matrix must be {SIZE}x{SIZE}, got shape {data.shape}.")
        self._data = data

    @classmethod
    def zero(cls) -> Matrix:
        return cls()

    @classmethod
    def identity(cls) -> Matrix:
        return cls(np.identity(SIZE))

    @classmethod
    def from_rows(cls, *rows: Union[Tuple, Sequence[float]]) -> Matrix:
        return cls(rows)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._data.tolist()})"

    @staticmethod
    def _check_index(index: int) -> int:
        # Negative indices count as out of range; no wrap-around from the end
        if not 0 <= index < SIZE:
            raise IndexError(f"Matrix index {index} out of range 0..{SIZE - 1}.")
        return index

    def __getitem__(self, index: Index) -> Union[float, Tuple]:
        """
        Row-then-column access.

        `m[r, c]` returns the float entry and `m[r]` returns row `r` as a Tuple,
        so `m[r][c]` also works. Every index must be in 0..3; negative indices
        are not accepted and raise IndexError like any other out-of-range index.
        """
        if isinstance(index, tuple):
            row, col = index
            return float(self._data[self._check_index(row), self._check_index(col)])
        return Tuple(*(float(v) for v in self._data[self._check_index(index)]))

    def __setitem__(self, index: Index, value: Union[float, Tuple, Sequence[float]]) -> None:
        if isinstance(index, tuple):
            row, col = index
            self._data[self._check_index(row), self._check_index(col)] = value
            return
        row_values = list(value)
        if len(row_values) != SIZE:
            raise ValueError(f"Matrix row must have {SIZE} values, got {len(row_values)}.")
        self._data[self._check_index(index)] = row_values

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return all_approx_eq(self._data, other._data)

    def __mul__(self, other: Union[Matrix, Vector, Point, Tuple]) -> Union[Matrix, Vector, Tuple]:
        if isinstance(other, Matrix):
            return Matrix(self._data @ other._data)
        if isinstance(other, Vector):
            x, y, z = self._data[:3, :3] @ other.to_array()
            return Vector(float(x), float(y), float(z))
        if isinstance(other, (Point, Tuple)):
            x, y, z, w = self._data @ np.array([other.x, other.y, other.z, other.w])
            return Tuple(float(x), float(y), float(z), float(w))
        return NotImplemented

    def transpose(self) -> Matrix:
        return Matrix(self._data.T)

    def to_array(self) -> npt.NDArray[np.float64]:
        """A copy of the underlying 4x4 array."""
        return self._data.copy()
