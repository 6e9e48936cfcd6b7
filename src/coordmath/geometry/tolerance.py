"""
Scalar comparison utilities.

Every geometric predicate in the package goes through these helpers so that
a single tolerance (EPS) decides what counts as zero, equal or positive.
"""

import math

# Default tolerance for unqualified comparisons.
EPS: float = 1e-8


def is_zero(a: float) -> bool:
    return abs(a) <= EPS


def is_positive(a: float) -> bool:
    """True if a is greater than EPS."""
    return a > EPS


def is_negative(a: float) -> bool:
    """True if a is less than -EPS."""
    return a < -EPS


def is_lower(a: float, b: float) -> bool:
    return b - a > EPS


def is_greater(a: float, b: float) -> bool:
    return a - b > EPS


def is_lower_or_equal(a: float, b: float) -> bool:
    return b - a > -EPS


def is_greater_or_equal(a: float, b: float) -> bool:
    return a - b > -EPS


def is_equal(a: float, b: float) -> bool:
    """True if a and b differ by no more than EPS."""
    return abs(a - b) <= EPS


def is_equal_with_eps(a: float, b: float, eps: float) -> bool:
    """True if a and b differ by no more than eps."""
    return abs(a - b) <= eps


def arc_cos(value: float) -> float:
    """
    Inverse cosine clamped to [-1, 1].

    Dot products of unit vectors can drift slightly past +/-1; clamping keeps
    the result finite.
    """
    if value >= 1.0:
        return 0.0
    if value <= -1.0:
        return math.pi
    return math.acos(value)


def arc_sin(value: float) -> float:
    """Inverse sine clamped to [-1, 1]."""
    if value >= 1.0:
        return math.pi / 2.0
    if value <= -1.0:
        return -math.pi / 2.0
    return math.asin(value)
