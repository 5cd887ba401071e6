"""
Approximate floating-point equality shared by every value type.
"""
from __future__ import annotations

import math
from typing import Sequence

import numpy as np

# Absolute floor for values near zero, relative tolerance everywhere else.
EPSILON: float = 1e-7
REL_TOLERANCE: float = 1e-6


def approx_eq(a: float, b: float) -> bool:
    """Return True if two scalars are equal within tolerance."""
    return math.isclose(a, b, rel_tol=REL_TOLERANCE, abs_tol=EPSILON)


def all_approx_eq(lhs: Sequence[float], rhs: Sequence[float]) -> bool:
    """
    Component-wise approximate equality of two sequences.

    Args:
        lhs: First sequence (or array) of floats.
        rhs: Second sequence (or array) of floats.

    Returns:
        True if both have the same shape and every pair of components
        is approximately equal.
    """
    a = np.asarray(lhs, dtype=np.float64)
    b = np.asarray(rhs, dtype=np.float64)
    if a.shape != b.shape:
        return False
    # One scalar rule for every component; symmetric in lhs and rhs
    return all(approx_eq(float(x), float(y)) for x, y in zip(a.ravel(), b.ravel()))
