"""Curve limits and ranges.

A :class:`CurveLimit` is a point on a curve, located by X, by Y, by
rotation or directly by coordinate.  A :class:`CurveRange` pairs a
start and an end limit and measures the span between them.

Each ``set_limit_by_*`` method delegates to the matching
``get_limit_by_*`` function, so both call styles share one code path.

Copyright (c) 2025 yapCAD contributors
MIT License
"""

from __future__ import annotations

from math import pi
from typing import Optional

from yapmath.converters import cartesian_to_polar
from yapmath.coordinates import Angle, CartesianCoordinate, CartesianOffset, PolarCoordinate, PolarOffset
from yapmath.errors import OutOfRangeError
from yapmath.tolerance import ZERO_TOLERANCE, is_within_inclusive, pi2


# -----------------------------------------------------------------------------
# Rotation validators
# -----------------------------------------------------------------------------

def validate_rotation_half_circle(angle, tolerance: float = ZERO_TOLERANCE) -> float:
    """Return ``angle`` in radians, which must lie within ``[-pi, pi]``."""
    radians = float(angle)
    if not is_within_inclusive(radians, -pi, pi, tolerance):
        raise OutOfRangeError(f'rotation {radians} must lie within a half circle either way')
    return radians


def validate_rotation_full_circle(angle, tolerance: float = ZERO_TOLERANCE) -> float:
    """Return ``angle`` in radians, which must lie within ``[-2 pi, 2 pi]``."""
    radians = float(angle)
    if not is_within_inclusive(radians, -pi2, pi2, tolerance):
        raise OutOfRangeError(f'rotation {radians} must lie within a full circle either way')
    return radians


# -----------------------------------------------------------------------------
# Limit resolution
# -----------------------------------------------------------------------------

def get_limit_by_x(curve, x: float) -> CartesianCoordinate:
    """Point on ``curve`` at ``x``; the first match when there are several."""
    return CartesianCoordinate(x, curve.y_at_x(x), curve.tolerance)


def get_limit_by_y(curve, y: float) -> CartesianCoordinate:
    return CartesianCoordinate(curve.x_at_y(y), y, curve.tolerance)


def get_limit_by_rotation(curve, rotation) -> CartesianCoordinate:
    """Point on ``curve`` at ``rotation``, as the curve defines rotation."""
    return curve.coordinate_by_angle(rotation).with_tolerance(curve.tolerance)


def get_limit_by_coordinate(curve, coordinate: CartesianCoordinate) -> CartesianCoordinate:
    if not curve.is_intersecting_coordinate(coordinate):
        raise OutOfRangeError(f'{coordinate!r} does not lie on {curve!r}',
                              {'coordinate': coordinate})
    return coordinate.with_tolerance(curve.tolerance)


class CurveLimit:
    """One end of a curve range."""

    def __init__(self, curve, limit: Optional[CartesianCoordinate] = None):
        self._curve = curve
        self._limit = limit

    @property
    def curve(self):
        return self._curve

    @property
    def limit(self) -> Optional[CartesianCoordinate]:
        return self._limit

    def set_limit_by_x(self, x: float) -> None:
        self._limit = get_limit_by_x(self._curve, x)

    def set_limit_by_y(self, y: float) -> None:
        self._limit = get_limit_by_y(self._curve, y)

    def set_limit_by_rotation(self, rotation) -> None:
        self._limit = get_limit_by_rotation(self._curve, rotation)

    def set_limit_by_coordinate(self, coordinate: CartesianCoordinate) -> None:
        self._limit = get_limit_by_coordinate(self._curve, coordinate)

    def limit_polar(self) -> PolarCoordinate:
        return cartesian_to_polar(self._limit)

    def copy(self, curve=None) -> "CurveLimit":
        return CurveLimit(self._curve if curve is None else curve, self._limit)

    def __repr__(self):
        return f"CurveLimit({self._limit!r})"


class CurveRange:
    """Start and end limits on one curve.

    Without explicit limits the curve's own
    :meth:`~yapmath.curves.curve.Curve.default_limits` are used.
    """

    def __init__(self, curve, start: Optional[CartesianCoordinate] = None,
                 end: Optional[CartesianCoordinate] = None):
        if start is None or end is None:
            default_start, default_end = curve.default_limits()
            start = default_start if start is None else start
            end = default_end if end is None else end
        self._curve = curve
        self.start = CurveLimit(curve, start)
        self.end = CurveLimit(curve, end)

    @property
    def curve(self):
        return self._curve

    def to_offset(self) -> CartesianOffset:
        return self.end.limit - self.start.limit

    def to_offset_polar(self) -> PolarOffset:
        return self.to_offset().to_polar_offset()

    def length_linear(self) -> float:
        """Straight distance from start to end."""
        return self.to_offset().length()

    def length_x(self) -> float:
        return self.end.limit.x - self.start.limit.x

    def length_y(self) -> float:
        return self.end.limit.y - self.start.limit.y

    def length_radius(self) -> float:
        """Change in distance from the origin."""
        return self.end.limit_polar().radius - self.start.limit_polar().radius

    def length_rotation(self) -> Angle:
        """Change in azimuth about the origin."""
        return self.end.limit_polar().azimuth - self.start.limit_polar().azimuth

    def copy(self, curve=None) -> "CurveRange":
        return CurveRange(self._curve if curve is None else curve,
                          self.start.limit, self.end.limit)

    def __repr__(self):
        return f"CurveRange({self.start.limit!r}, {self.end.limit!r})"


__all__ = [
    "validate_rotation_half_circle",
    "validate_rotation_full_circle",
    "get_limit_by_x",
    "get_limit_by_y",
    "get_limit_by_rotation",
    "get_limit_by_coordinate",
    "CurveLimit",
    "CurveRange",
]
