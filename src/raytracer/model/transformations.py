"""
Factories for common affine transformation matrices.

Transforms compose by multiplication; the right-most matrix applies first:
`(translation * rotation_z * scaling) * point` scales, rotates, then translates.
"""
from __future__ import annotations

import math

from raytracer.model.matrix import Matrix


def translation(x: float, y: float, z: float) -> Matrix:
    """Move points by (x, y, z). Vectors are unaffected."""
    return Matrix([
        [1.0, 0.0, 0.0, x],
        [0.0, 1.0, 0.0, y],
        [0.0, 0.0, 1.0, z],
        [0.0, 0.0, 0.0, 1.0],
    ])


def scaling(x: float, y: float, z: float) -> Matrix:
    return Matrix([
        [x, 0.0, 0.0, 0.0],
        [0.0, y, 0.0, 0.0],
        [0.0, 0.0, z, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_x(radians: float) -> Matrix:
    """Rotate around the X axis, turning +Y toward +Z."""
    cos_a = math.cos(radians)
    sin_a = math.sin(radians)
    return Matrix([
        [1.0, 0.0, 0.0, 0.0],
        [0.0, cos_a, -sin_a, 0.0],
        [0.0, sin_a, cos_a, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_y(radians: float) -> Matrix:
    cos_a = math.cos(radians)
    sin_a = math.sin(radians)
    return Matrix([
        [cos_a, 0.0, sin_a, 0.0],
        [0.0, 1.0, 0.0, 0.0],
        [-sin_a, 0.0, cos_a, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def rotation_z(radians: float) -> Matrix:
    cos_a = math.cos(radians)
    sin_a = math.sin(radians)
    return Matrix([
        [cos_a, -sin_a, 0.0, 0.0],
        [sin_a, cos_a, 0.0, 0.0],
        [0.0, 0.0, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix:
    """
    Shear each coordinate in proportion to the other two.

    Args:
        xy: Move x in proportion to y.
        xz: Move x in proportion to z.
        yx: Move y in proportion to x.
        yz: Move y in proportion to z.
        zx: Move z in proportion to x.
        zy: Move z in proportion to y.
    """
    return Matrix([
        [1.0, xy, xz, 0.0],
        [yx, 1.0, yz, 0.0],
        [zx, zy, 1.0, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ])
