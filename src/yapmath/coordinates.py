"""Coordinate value types for yapMath.

All coordinates are immutable.  Arithmetic always returns a new value,
and every value carries a ``tolerance`` that equality comparisons use.
When two values meet, the looser of their tolerances wins (see
:func:`yapmath.tolerance.get_tolerance`).

Types:
- Angle: radians wrapped to (-pi, pi]
- CartesianCoordinate / CartesianOffset: 2D points and displacements
- PolarCoordinate / PolarOffset
- CartesianCoordinate3D, CylindricalCoordinate, SphericalCoordinate
- BarycentricCoordinate, TrilinearCoordinate: positions relative to a
  reference triangle

Copyright (c) 2025 yapCAD contributors
MIT License
"""

from __future__ import annotations

from dataclasses import dataclass, field
from math import atan2, cos, degrees, floor, hypot, pi, radians, sin

from yapmath.tolerance import ZERO_TOLERANCE, is_equal, pi2


def _loosest(a, b) -> float:
    return max(a.tolerance, b.tolerance)


# -----------------------------------------------------------------------------
# Angle
# -----------------------------------------------------------------------------

def wrap_angle(angle_radians: float) -> float:
    """Wrap an angle into (-pi, pi]."""

    revolutions = floor(angle_radians / pi2)
    wrapped = angle_radians - revolutions * pi2
    if abs(wrapped) > pi:
        return wrapped - pi2
    return wrapped


@dataclass(frozen=True, eq=False)
class Angle:
    """Planar angle, stored in radians wrapped to (-pi, pi]."""

    radians: float = 0.0
    tolerance: float = ZERO_TOLERANCE

    def __post_init__(self):
        object.__setattr__(self, 'radians', wrap_angle(float(self.radians)))

    @classmethod
    def from_degrees(cls, value: float, tolerance: float = ZERO_TOLERANCE) -> "Angle":
        return cls(radians(value), tolerance)

    @classmethod
    def from_vector(cls, x: float, y: float, tolerance: float = ZERO_TOLERANCE) -> "Angle":
        """Angle of the direction ``(x, y)`` measured from the +x axis."""
        return cls(atan2(y, x), tolerance)

    @property
    def degrees(self) -> float:
        return degrees(self.radians)

    @property
    def clockwise_radians(self) -> float:
        return -self.radians

    def direction(self) -> tuple:
        """Unit direction ``(cos, sin)`` of this angle."""
        return (cos(self.radians), sin(self.radians))

    def rotate(self, x: float, y: float) -> tuple:
        """Rotate the vector ``(x, y)`` counter-clockwise by this angle."""
        c = cos(self.radians)
        s = sin(self.radians)
        return (x * c - y * s, x * s + y * c)

    def _other(self, other):
        if isinstance(other, Angle):
            return other.radians, max(self.tolerance, other.tolerance)
        return float(other), self.tolerance

    def __add__(self, other):
        value, tol = self._other(other)
        return Angle(self.radians + value, tol)

    __radd__ = __add__

    def __sub__(self, other):
        value, tol = self._other(other)
        return Angle(self.radians - value, tol)

    def __rsub__(self, other):
        value, tol = self._other(other)
        return Angle(value - self.radians, tol)

    def __mul__(self, multiplier: float):
        return Angle(self.radians * multiplier, self.tolerance)

    __rmul__ = __mul__

    def __truediv__(self, denominator: float):
        return Angle(self.radians / denominator, self.tolerance)

    def __neg__(self):
        return Angle(-self.radians, self.tolerance)

    def __float__(self):
        return self.radians

    def __eq__(self, other):
        if isinstance(other, Angle):
            return is_equal(self.radians, other.radians, _loosest(self, other))
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return is_equal(self.radians, wrap_angle(other), self.tolerance)
        return NotImplemented

    def __repr__(self):
        return f"Angle({self.radians!r})"


# -----------------------------------------------------------------------------
# Cartesian 2D
# -----------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class CartesianOffset:
    """Displacement between two planar points."""

    x: float
    y: float
    tolerance: float = ZERO_TOLERANCE

    def length(self) -> float:
        return hypot(self.x, self.y)

    def slope_angle(self) -> Angle:
        return Angle(atan2(self.y, self.x), self.tolerance)

    def to_cartesian_coordinate(self) -> "CartesianCoordinate":
        return CartesianCoordinate(self.x, self.y, self.tolerance)

    def to_polar_offset(self) -> "PolarOffset":
        return PolarOffset(self.length(), self.slope_angle(), self.tolerance)

    def __add__(self, other):
        if isinstance(other, CartesianOffset):
            return CartesianOffset(self.x + other.x, self.y + other.y, _loosest(self, other))
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, CartesianOffset):
            return CartesianOffset(self.x - other.x, self.y - other.y, _loosest(self, other))
        return NotImplemented

    def __mul__(self, factor: float):
        return CartesianOffset(self.x * factor, self.y * factor, self.tolerance)

    __rmul__ = __mul__

    def __truediv__(self, denominator: float):
        return CartesianOffset(self.x / denominator, self.y / denominator, self.tolerance)

    def __neg__(self):
        return CartesianOffset(-self.x, -self.y, self.tolerance)

    def __eq__(self, other):
        if not isinstance(other, CartesianOffset):
            return NotImplemented
        tol = _loosest(self, other)
        return is_equal(self.x, other.x, tol) and is_equal(self.y, other.y, tol)

    def __repr__(self):
        return f"CartesianOffset({self.x!r}, {self.y!r})"


@dataclass(frozen=True, eq=False)
class CartesianCoordinate:
    """Planar point ``(x, y)``."""

    x: float
    y: float
    tolerance: float = ZERO_TOLERANCE

    @classmethod
    def origin(cls, tolerance: float = ZERO_TOLERANCE) -> "CartesianCoordinate":
        return cls(0.0, 0.0, tolerance)

    def with_tolerance(self, tolerance: float) -> "CartesianCoordinate":
        return CartesianCoordinate(self.x, self.y, tolerance)

    def offset_from(self, other: "CartesianCoordinate") -> CartesianOffset:
        """Offset that carries ``other`` onto this point."""
        return CartesianOffset(self.x - other.x, self.y - other.y, _loosest(self, other))

    def distance_to(self, other: "CartesianCoordinate") -> float:
        return hypot(self.x - other.x, self.y - other.y)

    def rotate_about_point(self, center: "CartesianCoordinate", angle_radians: float) -> "CartesianCoordinate":
        c = cos(angle_radians)
        s = sin(angle_radians)
        dx = self.x - center.x
        dy = self.y - center.y
        return CartesianCoordinate(center.x + dx * c - dy * s,
                                   center.y + dx * s + dy * c,
                                   self.tolerance)

    def offset_coordinate(self, distance: float, rotation: Angle) -> "CartesianCoordinate":
        """Point ``distance`` away from this one along ``rotation``."""
        dx, dy = rotation.direction()
        return CartesianCoordinate(self.x + distance * dx, self.y + distance * dy, self.tolerance)

    def to_polar(self) -> "PolarCoordinate":
        from yapmath.converters import cartesian_to_polar
        return cartesian_to_polar(self)

    def __add__(self, other):
        if isinstance(other, (CartesianCoordinate, CartesianOffset)):
            return CartesianCoordinate(self.x + other.x, self.y + other.y, _loosest(self, other))
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, CartesianCoordinate):
            return self.offset_from(other)
        if isinstance(other, CartesianOffset):
            return CartesianCoordinate(self.x - other.x, self.y - other.y, _loosest(self, other))
        return NotImplemented

    def __mul__(self, factor: float):
        return CartesianCoordinate(self.x * factor, self.y * factor, self.tolerance)

    __rmul__ = __mul__

    def __truediv__(self, denominator: float):
        return CartesianCoordinate(self.x / denominator, self.y / denominator, self.tolerance)

    def __neg__(self):
        return CartesianCoordinate(-self.x, -self.y, self.tolerance)

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other):
        if not isinstance(other, CartesianCoordinate):
            return NotImplemented
        tol = _loosest(self, other)
        return is_equal(self.x, other.x, tol) and is_equal(self.y, other.y, tol)

    def __repr__(self):
        return f"CartesianCoordinate({self.x!r}, {self.y!r})"


# -----------------------------------------------------------------------------
# Polar 2D
# -----------------------------------------------------------------------------

def _as_angle(value, tolerance):
    if isinstance(value, Angle):
        return value
    return Angle(value, tolerance)


@dataclass(frozen=True, eq=False)
class PolarCoordinate:
    """Planar point given by radius and azimuth about the origin."""

    radius: float
    azimuth: Angle = field(default_factory=Angle)
    tolerance: float = ZERO_TOLERANCE

    def __post_init__(self):
        object.__setattr__(self, 'azimuth', _as_angle(self.azimuth, self.tolerance))

    def to_cartesian(self) -> CartesianCoordinate:
        from yapmath.converters import polar_to_cartesian
        return polar_to_cartesian(self)

    def __eq__(self, other):
        if not isinstance(other, PolarCoordinate):
            return NotImplemented
        tol = _loosest(self, other)
        return (is_equal(self.radius, other.radius, tol) and
                is_equal(self.azimuth.radians, other.azimuth.radians, tol))

    def __repr__(self):
        return f"PolarCoordinate({self.radius!r}, {self.azimuth.radians!r})"


@dataclass(frozen=True, eq=False)
class PolarOffset:
    """Displacement expressed as a length and a direction."""

    radius: float
    azimuth: Angle = field(default_factory=Angle)
    tolerance: float = ZERO_TOLERANCE

    def __post_init__(self):
        object.__setattr__(self, 'azimuth', _as_angle(self.azimuth, self.tolerance))

    def to_cartesian_offset(self) -> CartesianOffset:
        dx, dy = self.azimuth.direction()
        return CartesianOffset(self.radius * dx, self.radius * dy, self.tolerance)

    def __mul__(self, factor: float):
        return PolarOffset(self.radius * factor, self.azimuth, self.tolerance)

    __rmul__ = __mul__

    def __repr__(self):
        return f"PolarOffset({self.radius!r}, {self.azimuth.radians!r})"


# -----------------------------------------------------------------------------
# 3D coordinates
# -----------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class CartesianCoordinate3D:
    x: float
    y: float
    z: float
    tolerance: float = ZERO_TOLERANCE

    def __eq__(self, other):
        if not isinstance(other, CartesianCoordinate3D):
            return NotImplemented
        tol = _loosest(self, other)
        return (is_equal(self.x, other.x, tol) and is_equal(self.y, other.y, tol)
                and is_equal(self.z, other.z, tol))


@dataclass(frozen=True, eq=False)
class CylindricalCoordinate:
    """Radius and azimuth in the XY plane plus a height along Z."""

    radius: float
    height: float
    azimuth: Angle = field(default_factory=Angle)
    tolerance: float = ZERO_TOLERANCE

    def __post_init__(self):
        object.__setattr__(self, 'azimuth', _as_angle(self.azimuth, self.tolerance))


@dataclass(frozen=True, eq=False)
class SphericalCoordinate:
    """Radius, inclination from +Z, and azimuth in the XY plane."""

    radius: float
    inclination: Angle = field(default_factory=Angle)
    azimuth: Angle = field(default_factory=Angle)
    tolerance: float = ZERO_TOLERANCE

    def __post_init__(self):
        object.__setattr__(self, 'inclination', _as_angle(self.inclination, self.tolerance))
        object.__setattr__(self, 'azimuth', _as_angle(self.azimuth, self.tolerance))


# -----------------------------------------------------------------------------
# Triangle-relative coordinates
# -----------------------------------------------------------------------------

def _side_lengths(vertex_a, vertex_b, vertex_c):
    return (vertex_c.distance_to(vertex_b),
            vertex_a.distance_to(vertex_c),
            vertex_b.distance_to(vertex_a))


@dataclass(frozen=True, eq=False)
class BarycentricCoordinate:
    """Weights of a point relative to the vertices of a triangle."""

    alpha: float
    beta: float
    gamma: float
    tolerance: float = ZERO_TOLERANCE

    def to_cartesian(self, vertex_a, vertex_b, vertex_c) -> CartesianCoordinate:
        x = self.alpha * vertex_a.x + self.beta * vertex_b.x + self.gamma * vertex_c.x
        y = self.alpha * vertex_a.y + self.beta * vertex_b.y + self.gamma * vertex_c.y
        return CartesianCoordinate(x, y, self.tolerance)

    def to_trilinear(self, vertex_a, vertex_b, vertex_c) -> "TrilinearCoordinate":
        side_a, side_b, side_c = _side_lengths(vertex_a, vertex_b, vertex_c)
        return TrilinearCoordinate(self.alpha / side_a,
                                   self.beta / side_b,
                                   self.gamma / side_c,
                                   self.tolerance)

    def __eq__(self, other):
        if not isinstance(other, BarycentricCoordinate):
            return NotImplemented
        tol = _loosest(self, other)
        return (is_equal(self.alpha, other.alpha, tol) and
                is_equal(self.beta, other.beta, tol) and
                is_equal(self.gamma, other.gamma, tol))


@dataclass(frozen=True, eq=False)
class TrilinearCoordinate:
    """Relative distances of a point from the sides of a triangle."""

    x: float
    y: float
    z: float
    tolerance: float = ZERO_TOLERANCE

    def to_barycentric(self, vertex_a, vertex_b, vertex_c) -> BarycentricCoordinate:
        side_a, side_b, side_c = _side_lengths(vertex_a, vertex_b, vertex_c)
        wa = self.x * side_a
        wb = self.y * side_b
        wc = self.z * side_c
        total = wa + wb + wc
        return BarycentricCoordinate(wa / total, wb / total, wc / total, self.tolerance)

    def to_cartesian(self, vertex_a, vertex_b, vertex_c) -> CartesianCoordinate:
        return self.to_barycentric(vertex_a, vertex_b, vertex_c).to_cartesian(
            vertex_a, vertex_b, vertex_c)

    def __eq__(self, other):
        if not isinstance(other, TrilinearCoordinate):
            return NotImplemented
        tol = _loosest(self, other)
        return (is_equal(self.x, other.x, tol) and is_equal(self.y, other.y, tol)
                and is_equal(self.z, other.z, tol))


__all__ = [
    "wrap_angle",
    "Angle",
    "CartesianOffset",
    "CartesianCoordinate",
    "PolarCoordinate",
    "PolarOffset",
    "CartesianCoordinate3D",
    "CylindricalCoordinate",
    "SphericalCoordinate",
    "BarycentricCoordinate",
    "TrilinearCoordinate",
]
