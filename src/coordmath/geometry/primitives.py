"""
Geometric primitives: Coord (alias Vector) and Coord2D.

A single type models both points and free vectors. Mutating methods change
the receiver in place and return it for chaining; the module-level functions
and the arithmetic operators never touch their operands.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Union
import logging
import math
import numpy as np
from numpy.typing import NDArray

from .tolerance import arc_cos, is_equal, is_equal_with_eps, is_negative, is_positive

logger = logging.getLogger(__name__)

ArrayLike3 = Union[Sequence[float], NDArray[np.float64]]


def _as_components(values: ArrayLike3) -> NDArray[np.float64]:
    arr = np.asarray(values, dtype=np.float64)
    if arr.shape != (3,):
        raise ValueError(f"Expected 3 components, got shape {arr.shape}")
    return arr


@dataclass
class Coord:
    """Point or free vector in 3D space."""
    x: float
    y: float
    z: float

    @classmethod
    def from_array(cls, arr: ArrayLike3) -> Coord:
        """Create from a 3-element sequence or NumPy array, order [x, y, z]."""
        arr = _as_components(arr)
        return cls(x=float(arr[0]), y=float(arr[1]), z=float(arr[2]))

    def to_array(self) -> NDArray[np.float64]:
        """Convert to NumPy array (3,)."""
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def set(self, x: float, y: float, z: float) -> Coord:
        self.x = x
        self.y = y
        self.z = z
        return self

    def is_equal(self, other: Coord) -> bool:
        """Component-wise equality within the default tolerance."""
        return (
            is_equal(self.x, other.x)
            and is_equal(self.y, other.y)
            and is_equal(self.z, other.z)
        )

    def is_equal_with_eps(self, other: Coord, eps: float) -> bool:
        """Component-wise equality within eps."""
        return (
            is_equal_with_eps(self.x, other.x, eps)
            and is_equal_with_eps(self.y, other.y, eps)
            and is_equal_with_eps(self.z, other.z, eps)
        )

    def distance_to(self, other: Coord) -> float:
        """Euclidean distance to another coordinate."""
        dx = other.x - self.x
        dy = other.y - self.y
        dz = other.z - self.z
        return math.sqrt(dx * dx + dy * dy + dz * dz)

    def length(self) -> float:
        """Euclidean norm (distance from the origin)."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def angle_to(self, other: Coord) -> float:
        """
        Unsigned angle to another vector in radians [0, π].

        Returns exactly 0.0 when both directions are equal within tolerance.
        """
        a_direction = self.clone().normalize()
        b_direction = other.clone().normalize()
        if a_direction.is_equal(b_direction):
            return 0.0
        return arc_cos(vector_dot(a_direction, b_direction))

    def is_collinear_with(self, other: Coord) -> bool:
        angle = self.angle_to(other)
        return is_equal(angle, 0.0) or is_equal(angle, math.pi)

    def is_perpendicular_with(self, other: Coord) -> bool:
        return is_equal(self.angle_to(other), math.pi / 2.0)

    def add(self, other: Coord) -> Coord:
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def sub(self, other: Coord) -> Coord:
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def multiply_scalar(self, scalar: float) -> Coord:
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self

    def normalize(self) -> Coord:
        """Scale to unit length in place. A zero vector is left unchanged."""
        length = self.length()
        if is_positive(length):
            self.multiply_scalar(1.0 / length)
        else:
            logger.debug("normalize: zero-length vector %s left unchanged", self)
        return self

    def set_length(self, length: float) -> Coord:
        """Rescale to the given length in place. A zero vector is left unchanged."""
        current = self.length()
        if is_positive(current):
            self.multiply_scalar(length / current)
        else:
            logger.debug("set_length: zero-length vector %s left unchanged", self)
        return self

    def offset(self, direction: Coord, distance: float) -> Coord:
        """Move along direction by distance. direction itself is not modified."""
        normal = direction.clone().normalize()
        self.x += normal.x * distance
        self.y += normal.y * distance
        self.z += normal.z * distance
        return self

    def rotate(self, axis: Coord, angle: float, origin: Coord) -> Coord:
        """
        Rotate about the line through origin with direction axis.

        Uses Rodrigues' rotation formula; positive angles turn
        counter-clockwise when looking down the axis towards origin.

        Args:
            axis: Rotation axis direction (need not be unit length)
            angle: Rotation angle in radians
            origin: Any point on the rotation axis

        Returns:
            self
        """
        rotation = rotation_matrix_axis_angle(axis, angle)
        shifted = self.to_array() - origin.to_array()
        rotated = rotation @ shifted + origin.to_array()
        self.x = float(rotated[0])
        self.y = float(rotated[1])
        self.z = float(rotated[2])
        return self

    def to_coord2d(self, normal: Coord) -> Coord2D:
        """
        Project onto the plane with the given normal.

        The point is rotated about the global origin so that normal lines up
        with +Z, then the z component is dropped.
        """
        z_normal = Vector(0.0, 0.0, 1.0)
        direction = normal.clone().normalize()
        axis = vector_cross(direction, z_normal)
        if is_positive(axis.length()):
            angle = direction.angle_to(z_normal)
        elif is_negative(direction.z):
            # Opposite to +Z: any perpendicular axis gives a half turn
            axis = Vector(1.0, 0.0, 0.0)
            angle = math.pi
        else:
            angle = 0.0
        rotated = self.clone().rotate(axis, angle, Coord(0.0, 0.0, 0.0))
        return Coord2D(rotated.x, rotated.y)

    def to_string(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"

    def clone(self) -> Coord:
        return Coord(self.x, self.y, self.z)

    def __add__(self, other: Coord) -> Coord:
        return coord_add(self, other)

    def __sub__(self, other: Coord) -> Coord:
        return coord_sub(self, other)

    def __mul__(self, scalar: float) -> Coord:
        return self.clone().multiply_scalar(scalar)

    def __rmul__(self, scalar: float) -> Coord:
        return self.__mul__(scalar)

    def __neg__(self) -> Coord:
        return self.clone().multiply_scalar(-1.0)

    def __str__(self) -> str:
        return self.to_string()


# Points and free vectors share one type.
Vector = Coord


@dataclass
class Coord2D:
    """Point in a 2D plane, produced by Coord.to_coord2d."""
    x: float
    y: float

    def to_array(self) -> NDArray[np.float64]:
        """Convert to NumPy array (2,)."""
        return np.array([self.x, self.y], dtype=np.float64)

    def is_equal(self, other: Coord2D) -> bool:
        return is_equal(self.x, other.x) and is_equal(self.y, other.y)

    def distance_to(self, other: Coord2D) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)

    def to_string(self) -> str:
        return f"({self.x}, {self.y})"

    def clone(self) -> Coord2D:
        return Coord2D(self.x, self.y)

    def __str__(self) -> str:
        return self.to_string()


def coord_from_array(array: ArrayLike3) -> Coord:
    """Create a coordinate from components ordered [x, y, z]."""
    return Coord.from_array(array)


def coord_to_array(coord: Coord) -> list[float]:
    """Return the components of a coordinate as [x, y, z]."""
    return [coord.x, coord.y, coord.z]


def coord_add(a: Coord, b: Coord) -> Coord:
    return Coord(a.x + b.x, a.y + b.y, a.z + b.z)


def coord_sub(a: Coord, b: Coord) -> Coord:
    return Coord(a.x - b.x, a.y - b.y, a.z - b.z)


def vector_dot(a: Vector, b: Vector) -> float:
    """Dot product."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def vector_cross(a: Vector, b: Vector) -> Vector:
    """Cross product (right-handed)."""
    return Vector(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x
    )


def rotation_matrix_axis_angle(axis: Vector, angle_rad: float) -> NDArray[np.float64]:
    """
    3D rotation matrix about an arbitrary axis (Rodrigues' formula).

    Args:
        axis: Rotation axis; normalized internally, the argument is not modified
        angle_rad: Rotation angle in radians (positive = CCW seen from the axis tip)

    Returns:
        3x3 rotation matrix, identity when axis has zero length
    """
    normal = axis.clone().normalize()
    if not is_positive(normal.length()):
        return np.eye(3, dtype=np.float64)

    u, v, w = normal.x, normal.y, normal.z
    c = np.cos(angle_rad)
    s = np.sin(angle_rad)
    k = np.array([
        [0.0, -w, v],
        [w, 0.0, -u],
        [-v, u, 0.0]
    ], dtype=np.float64)
    kk = np.outer(normal.to_array(), normal.to_array())
    return c * np.eye(3, dtype=np.float64) + s * k + (1.0 - c) * kk
