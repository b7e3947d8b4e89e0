"""Planar vector algebra for yapMath."""

from __future__ import annotations

from dataclasses import dataclass
from math import acos, atan2, hypot

from yapmath.coordinates import Angle, CartesianCoordinate, CartesianOffset
from yapmath.errors import GeometryError
from yapmath.tolerance import ZERO_TOLERANCE, clamp, get_tolerance, is_equal, is_zero


def dot(x1: float, y1: float, x2: float, y2: float) -> float:
    return x1 * x2 + y1 * y2


def cross(x1: float, y1: float, x2: float, y2: float) -> float:
    """Z component of the 3D cross product of two planar vectors."""
    return x1 * y2 - y1 * x2


@dataclass(frozen=True, eq=False)
class Vector:
    """Free planar vector ``(x, y)``."""

    x: float
    y: float
    tolerance: float = ZERO_TOLERANCE

    @classmethod
    def from_points(cls, i: CartesianCoordinate, j: CartesianCoordinate,
                    tolerance: float = ZERO_TOLERANCE) -> "Vector":
        return cls(j.x - i.x, j.y - i.y, get_tolerance(i, j, tolerance=tolerance))

    @classmethod
    def from_offset(cls, offset: CartesianOffset) -> "Vector":
        return cls(offset.x, offset.y, offset.tolerance)

    def magnitude(self) -> float:
        return hypot(self.x, self.y)

    def magnitude_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def dot(self, other: "Vector") -> float:
        return dot(self.x, self.y, other.x, other.y)

    def cross(self, other: "Vector") -> float:
        return cross(self.x, self.y, other.x, other.y)

    def angle(self) -> Angle:
        return Angle(atan2(self.y, self.x), self.tolerance)

    def angle_between(self, other: "Vector") -> float:
        """Unsigned angle between the two vectors, in [0, pi]."""
        denom = self.magnitude() * other.magnitude()
        if is_zero(denom, get_tolerance(self, other)):
            raise GeometryError('zero-length vector passed to angle_between')
        return acos(clamp(self.dot(other) / denom, -1.0, 1.0))

    def area(self, other: "Vector") -> float:
        """Signed area of the triangle spanned by the two vectors."""
        return 0.5 * self.cross(other)

    def unit(self) -> "Vector":
        mag = self.magnitude()
        if is_zero(mag, self.tolerance):
            raise GeometryError('cannot normalize a zero-length vector')
        return Vector(self.x / mag, self.y / mag, self.tolerance)

    def normal(self) -> "Vector":
        """Counter-clockwise perpendicular of the same length."""
        return Vector(-self.y, self.x, self.tolerance)

    def concavity_collinearity(self, other: "Vector") -> float:
        """Cosine of the angle between the vectors: 1 same way, -1 opposite, 0 orthogonal."""
        return self.dot(other) / (self.magnitude() * other.magnitude())

    def is_orthogonal(self, other: "Vector", tolerance: float = ZERO_TOLERANCE) -> bool:
        return is_zero(self.concavity_collinearity(other), get_tolerance(self, other, tolerance=tolerance))

    def is_collinear_same_direction(self, other: "Vector", tolerance: float = ZERO_TOLERANCE) -> bool:
        return is_equal(self.concavity_collinearity(other), 1.0, get_tolerance(self, other, tolerance=tolerance))

    def is_collinear_opposite_direction(self, other: "Vector", tolerance: float = ZERO_TOLERANCE) -> bool:
        return is_equal(self.concavity_collinearity(other), -1.0, get_tolerance(self, other, tolerance=tolerance))

    def is_concave(self, other: "Vector", tolerance: float = ZERO_TOLERANCE) -> bool:
        return self.concavity_collinearity(other) > get_tolerance(self, other, tolerance=tolerance)

    def is_convex(self, other: "Vector", tolerance: float = ZERO_TOLERANCE) -> bool:
        return self.concavity_collinearity(other) < -get_tolerance(self, other, tolerance=tolerance)

    def __add__(self, other):
        return Vector(self.x + other.x, self.y + other.y, max(self.tolerance, other.tolerance))

    def __sub__(self, other):
        return Vector(self.x - other.x, self.y - other.y, max(self.tolerance, other.tolerance))

    def __mul__(self, factor: float):
        return Vector(self.x * factor, self.y * factor, self.tolerance)

    __rmul__ = __mul__

    def __truediv__(self, denominator: float):
        return Vector(self.x / denominator, self.y / denominator, self.tolerance)

    def __neg__(self):
        return Vector(-self.x, -self.y, self.tolerance)

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        tol = max(self.tolerance, other.tolerance)
        return is_equal(self.x, other.x, tol) and is_equal(self.y, other.y, tol)

    def __repr__(self):
        return f"Vector({self.x!r}, {self.y!r})"


def unit_vector(i: CartesianCoordinate, j: CartesianCoordinate,
                tolerance: float = ZERO_TOLERANCE) -> Vector:
    """Unit vector pointing from ``i`` to ``j``."""
    return Vector.from_points(i, j, tolerance).unit()


def unit_tangent_vector(i: CartesianCoordinate, j: CartesianCoordinate,
                        tolerance: float = ZERO_TOLERANCE) -> Vector:
    return unit_vector(i, j, tolerance)


def unit_normal_vector(i: CartesianCoordinate, j: CartesianCoordinate,
                       tolerance: float = ZERO_TOLERANCE) -> Vector:
    """Unit vector perpendicular to ``i -> j``, rotated counter-clockwise."""
    return unit_vector(i, j, tolerance).normal()


def unit_tangent_from_components(x_prime: float, y_prime: float,
                                 tolerance: float = ZERO_TOLERANCE) -> Vector:
    return Vector(x_prime, y_prime, tolerance).unit()


def unit_normal_from_components(x_prime: float, y_prime: float,
                                tolerance: float = ZERO_TOLERANCE) -> Vector:
    return Vector(x_prime, y_prime, tolerance).unit().normal()


__all__ = [
    "dot",
    "cross",
    "Vector",
    "unit_vector",
    "unit_tangent_vector",
    "unit_normal_vector",
    "unit_tangent_from_components",
    "unit_normal_from_components",
]
