import math

import numpy as np
import pytest

from raytracer.model.matrix import Matrix
from raytracer.model.transformations import (
    rotation_x, rotation_y, rotation_z, scaling, shearing, translation
)
from raytracer.model.tuples import Point, Tuple, Vector

ROWS = [
    Tuple(1.0, 2.0, 3.0, 4.0),
    Tuple(5.5, 6.5, 7.5, 8.5),
    Tuple(9.0, 10.0, 11.0, 12.0),
    Tuple(13.5, 14.5, 15.5, 16.5),
]

A = Matrix([
    [1, 2, 3, 4],
    [5, 6, 7, 8],
    [9, 8, 7, 6],
    [5, 4, 3, 2],
])

B = Matrix([
    [-2, 1, 2, 3],
    [3, 2, 1, -1],
    [4, 3, 6, 5],
    [1, 2, 7, 8],
])

C = Matrix([
    [1, 2, 3, 4],
    [2, 4, 4, 2],
    [8, 6, 4, 1],
    [0, 0, 0, 1],
])


def build(rows):
    matrix = Matrix()
    for i, row in enumerate(rows):
        matrix[i] = row
    return matrix


def test_new_matrix_is_zero():
    assert Matrix() == Matrix.zero()
    assert np.all(Matrix().to_array() == 0.0)


def test_two_matrices_approx_eq():
    matrix1 = build(ROWS)
    matrix2 = build([ROWS[0] * 1.000000001, ROWS[1] * 0.9999999, ROWS[2], ROWS[3]])
    assert matrix1 == matrix2


def test_two_matrices_approx_ne():
    matrix1 = build(ROWS)
    matrix2 = build([ROWS[0] * 0.5, ROWS[1], ROWS[2], ROWS[3]])
    assert matrix1 != matrix2


def test_access_matrix_by_index():
    matrix = build(ROWS)
    assert matrix[0][1] == 2.0
    assert matrix[1, 0] == 5.5
    assert matrix[2][2] == 11.0
    assert matrix[3, 3] == 16.5
    assert matrix[1] == ROWS[1]


def test_set_single_element():
    matrix = Matrix()
    matrix[1, 2] = 7.0
    assert matrix[1, 2] == 7.0
    assert matrix[2, 1] == 0.0


def test_out_of_range_index_raises():
    with pytest.raises(IndexError):
        Matrix()[4, 0]
    with pytest.raises(IndexError):
        Matrix()[0][4]


@pytest.mark.parametrize("index", [(-1, 0), (0, -1), (4, 0), (0, 4)])
def test_negative_and_large_element_indices_raise(index):
    matrix = build(ROWS)
    with pytest.raises(IndexError):
        matrix[index]
    with pytest.raises(IndexError):
        matrix[index] = 1.0


@pytest.mark.parametrize("row", [-1, -4, 4])
def test_out_of_range_row_raises(row):
    matrix = build(ROWS)
    with pytest.raises(IndexError):
        matrix[row]
    with pytest.raises(IndexError):
        matrix[row] = ROWS[0]


@pytest.mark.parametrize("rows", [
    [[1, 2, 3], [4, 5, 6], [7, 8, 9]],
    [[1, 2, 3, 4]] * 5,
])
def test_wrong_shape_raises(rows):
    with pytest.raises(ValueError):
        Matrix(rows)


def test_wrong_row_length_raises():
    with pytest.raises(ValueError):
        Matrix()[0] = [1.0, 2.0, 3.0]


def test_multiply_matrices():
    assert A * B == Matrix([
        [20, 22, 50, 48],
        [44, 54, 114, 108],
        [40, 58, 110, 102],
        [16, 26, 46, 42],
    ])


def test_multiply_matrix_by_tuple_and_point():
    assert C * Tuple(1.0, 2.0, 3.0, 1.0) == Tuple(18.0, 24.0, 33.0, 1.0)
    result = C * Point(1.0, 2.0, 3.0)
    assert isinstance(result, Tuple)
    assert result == Tuple(18.0, 24.0, 33.0, 1.0)


def test_multiply_matrix_by_vector_uses_linear_block_only():
    result = C * Vector(1.0, 2.0, 3.0)
    assert isinstance(result, Vector)
    assert result == Vector(14.0, 22.0, 32.0)


def test_multiply_by_unsupported_operand_raises():
    with pytest.raises(TypeError):
        A * 2
    with pytest.raises(TypeError):
        A * "matrix"


def test_identity():
    identity = Matrix.identity()
    assert A * identity == A
    assert identity * A == A
    assert identity * Tuple(1.0, 2.0, 3.0, 4.0) == Tuple(1.0, 2.0, 3.0, 4.0)


def test_multiplication_is_associative():
    assert (A * B) * C == A * (B * C)


def test_transpose():
    assert A.transpose() == Matrix([
        [1, 5, 9, 5],
        [2, 6, 8, 4],
        [3, 7, 7, 3],
        [4, 8, 6, 2],
    ])
    assert Matrix.identity().transpose() == Matrix.identity()


def test_from_rows():
    assert Matrix.from_rows(*ROWS) == build(ROWS)


def test_to_array_is_a_copy():
    array = A.to_array()
    array[0, 0] = 100.0
    assert A[0, 0] == 1.0


# Transformations

def test_translation_moves_points_not_vectors():
    transform = translation(5.0, -3.0, 2.0)
    assert Point.from_tuple(transform * Point(-3.0, 4.0, 5.0)) == Point(2.0, 1.0, 7.0)
    assert transform * Vector(-3.0, 4.0, 5.0) == Vector(-3.0, 4.0, 5.0)


def test_scaling():
    transform = scaling(2.0, 3.0, 4.0)
    assert transform * Point(-4.0, 6.0, 8.0) == Tuple(-8.0, 18.0, 32.0, 1.0)
    assert transform * Vector(-4.0, 6.0, 8.0) == Vector(-8.0, 18.0, 32.0)


def test_rotations():
    quarter = math.pi / 2
    assert rotation_x(quarter) * Point(0.0, 1.0, 0.0) == Tuple(0.0, 0.0, 1.0, 1.0)
    assert rotation_y(quarter) * Point(0.0, 0.0, 1.0) == Tuple(1.0, 0.0, 0.0, 1.0)
    assert rotation_z(quarter) * Point(0.0, 1.0, 0.0) == Tuple(-1.0, 0.0, 0.0, 1.0)


def test_shearing():
    assert shearing(1, 0, 0, 0, 0, 0) * Point(2.0, 3.0, 4.0) == Tuple(5.0, 3.0, 4.0, 1.0)
    assert shearing(0, 0, 0, 0, 0, 1) * Point(2.0, 3.0, 4.0) == Tuple(2.0, 3.0, 7.0, 1.0)


def test_chained_transformations_apply_right_to_left():
    transform = translation(10.0, 5.0, 7.0) * scaling(5.0, 5.0, 5.0) * rotation_x(math.pi / 2)
    assert transform * Point(1.0, 0.0, 1.0) == Tuple(15.0, 0.0, 7.0, 1.0)
