"""Coordinate/vector primitives and tolerance helpers."""

from .tolerance import (
    EPS,
    is_zero,
    is_positive,
    is_negative,
    is_lower,
    is_greater,
    is_lower_or_equal,
    is_greater_or_equal,
    is_equal,
    is_equal_with_eps,
    arc_cos,
    arc_sin,
)
from .primitives import (
    Coord,
    Vector,
    Coord2D,
    coord_from_array,
    coord_to_array,
    coord_add,
    coord_sub,
    vector_dot,
    vector_cross,
    rotation_matrix_axis_angle,
)

__all__ = [
    "EPS",
    "is_zero",
    "is_positive",
    "is_negative",
    "is_lower",
    "is_greater",
    "is_lower_or_equal",
    "is_greater_or_equal",
    "is_equal",
    "is_equal_with_eps",
    "arc_cos",
    "arc_sin",
    "Coord",
    "Vector",
    "Coord2D",
    "coord_from_array",
    "coord_to_array",
    "coord_add",
    "coord_sub",
    "vector_dot",
    "vector_cross",
    "rotation_matrix_axis_angle",
]
