import pytest

from raytracer.model.approx import all_approx_eq, approx_eq
from raytracer.model.color import Color
from raytracer.model.tuples import Point


@pytest.mark.parametrize("a, b", [
    (0.0 - 0.5 + 0.3, -0.2),
    (1.0 / 1.5, 0.66666667),
    (8.5 * 0.9999999, 8.5),
    (1e-9, 0.0),
])
def test_approx_eq(a, b):
    assert approx_eq(a, b)


@pytest.mark.parametrize("a, b", [
    (0.000001, 0.0),
    (1.0, 1.0001),
    (-2.0, 2.0),
])
def test_not_approx_eq(a, b):
    assert not approx_eq(a, b)


def test_all_approx_eq_componentwise():
    assert all_approx_eq([0.1 + 0.2, 1.0], [0.3, 1.0])
    assert not all_approx_eq([0.3, 1.0], [0.3, 1.1])


def test_all_approx_eq_different_lengths():
    assert not all_approx_eq([1.0, 2.0], [1.0, 2.0, 3.0])


# 1.0 + 1.1e-6 is just past the relative tolerance measured from 1.0,
# but inside it when measured from the larger value alone
BOUNDARY_PAIRS = [
    (1.0, 1.00000110000005),
    (1.00000110000005, 1.0),
    (-250.0, -250.00026),
    (0.0, 1.5e-7),
]


@pytest.mark.parametrize("a, b", BOUNDARY_PAIRS)
def test_sequence_and_scalar_rules_agree(a, b):
    assert approx_eq(a, b) == all_approx_eq([a], [b])


@pytest.mark.parametrize("a, b", BOUNDARY_PAIRS)
def test_equality_is_symmetric(a, b):
    assert all_approx_eq([a, 0.0], [b, 0.0]) == all_approx_eq([b, 0.0], [a, 0.0])
    assert (Point(a, 0.0, 0.0) == Point(b, 0.0, 0.0)) == (Point(b, 0.0, 0.0) == Point(a, 0.0, 0.0))
    assert (Color(a, 0.0, 0.0) == Color(b, 0.0, 0.0)) == (Color(b, 0.0, 0.0) == Color(a, 0.0, 0.0))


def test_point_at_tolerance_boundary_is_not_equal_either_way():
    a = Point(1.0, 0.0, 0.0)
    b = Point(1.00000110000005, 0.0, 0.0)
    assert a != b
    assert b != a
