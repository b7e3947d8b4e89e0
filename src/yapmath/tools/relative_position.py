"""Relative positions ``s`` in ``[0, 1]`` along a curve or a range."""

from __future__ import annotations

from yapmath.coordinates import CartesianCoordinate, PolarCoordinate
from yapmath.errors import OutOfRangeError
from yapmath.tolerance import DEFAULT_TOLERANCE, clamp, is_within_inclusive


def validate(s: float, tolerance: float = DEFAULT_TOLERANCE) -> float:
    """Return ``s`` clamped into ``[0, 1]``; outside the tolerant bounds raises."""
    if not is_within_inclusive(s, 0.0, 1.0, tolerance):
        raise OutOfRangeError(f'relative position {s} must lie between 0 and 1',
                              {'position': s})
    return clamp(s, 0.0, 1.0)


def parameter(s: float, curve) -> float:
    """Curve parameter at relative position ``s`` over its parameter domain."""
    s = validate(s, curve.tolerance)
    start, end = curve.parameter_domain
    return start + s * (end - start)


def coordinate(s: float, curve) -> CartesianCoordinate:
    """Point of ``curve`` at relative position ``s``."""
    return curve.coordinate_by_parameter(parameter(s, curve))


def coordinate_interpolated(s: float, curve_range) -> CartesianCoordinate:
    """Point a fraction ``s`` of the way along the straight span of a range."""
    s = validate(s, curve_range.curve.tolerance)
    return curve_range.start.limit + curve_range.to_offset() * s


def coordinate_interpolated_polar(s: float, curve_range) -> CartesianCoordinate:
    """Point a fraction ``s`` of the way from start to end in radius and azimuth.

    Both are measured about the origin; the azimuth sweeps the shorter
    way round.
    """
    s = validate(s, curve_range.curve.tolerance)
    start = curve_range.start.limit_polar()
    radius = start.radius + s * curve_range.length_radius()
    azimuth = start.azimuth + curve_range.length_rotation().radians * s
    return PolarCoordinate(radius, azimuth, start.tolerance).to_cartesian()


__all__ = ["validate", "parameter", "coordinate", "coordinate_interpolated",
           "coordinate_interpolated_polar"]
