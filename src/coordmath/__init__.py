"""3D coordinate and vector math with a YAML case runner."""

from .geometry import (
    EPS,
    Coord,
    Vector,
    Coord2D,
    coord_from_array,
    coord_to_array,
    coord_add,
    coord_sub,
    vector_dot,
    vector_cross,
)

__version__ = "0.43.0"

__all__ = [
    "EPS",
    "Coord",
    "Vector",
    "Coord2D",
    "coord_from_array",
    "coord_to_array",
    "coord_add",
    "coord_sub",
    "vector_dot",
    "vector_cross",
    "__version__",
]
