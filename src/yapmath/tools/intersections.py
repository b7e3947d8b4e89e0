"""Tangency and intersection between pairs of curves.

Every pair type is available two ways: as a class wrapping the two
curves, and as module-level functions taking them directly.  The
methods call the functions, so both give identical results.

No intersection is a normal outcome, not an error: the
``intersection_coordinates_*`` functions return an empty list for lines
that are parallel or collinear, or for curves that never meet.

Tolerances are the looser of the two curves' tolerances.

Copyright (c) 2025 yapCAD contributors
MIT License
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from math import sqrt
from typing import Generic, List, TypeVar

from yapmath.algebra import srss
from yapmath.coordinates import CartesianCoordinate
from yapmath.curves.elliptical import CircularCurve
from yapmath.curves.linear import LinearCurve
from yapmath.geometry import Transformation
from yapmath.tolerance import get_tolerance, is_equal, is_greater, is_negative, is_zero, plus_minus
from yapmath.vector import cross

logger = logging.getLogger(__name__)

C1 = TypeVar("C1")
C2 = TypeVar("C2")


# -----------------------------------------------------------------------------
# Linear - linear
# -----------------------------------------------------------------------------

def _are_parallel(curve_1: LinearCurve, curve_2: LinearCurve) -> bool:
    return curve_1.is_parallel(curve_2, get_tolerance(curve_1, curve_2))


def are_tangent_linear_linear(curve_1: LinearCurve, curve_2: LinearCurve) -> bool:
    """True if both curves are the same line."""
    tolerance = get_tolerance(curve_1, curve_2)
    return (_are_parallel(curve_1, curve_2) and
            curve_1.is_intersecting_coordinate(curve_2.control_point_i, tolerance))


def are_intersecting_linear_linear(curve_1: LinearCurve, curve_2: LinearCurve) -> bool:
    """True if the lines cross at a single point."""
    return not _are_parallel(curve_1, curve_2)


def intersection_coordinates_linear_linear(curve_1: LinearCurve,
                                           curve_2: LinearCurve) -> List[CartesianCoordinate]:
    if _are_parallel(curve_1, curve_2):
        logger.debug('linear-linear: parallel lines, no single intersection')
        return []
    i_1 = curve_1.control_point_i
    i_2 = curve_2.control_point_i
    denominator = cross(curve_1.run, curve_1.rise, curve_2.run, curve_2.rise)
    t = cross(i_2.x - i_1.x, i_2.y - i_1.y, curve_2.run, curve_2.rise) / denominator
    return [CartesianCoordinate(i_1.x + t * curve_1.run,
                                i_1.y + t * curve_1.rise,
                                get_tolerance(curve_1, curve_2))]


# -----------------------------------------------------------------------------
# Linear - circular
# -----------------------------------------------------------------------------

def _linear_circular_terms(linear_curve: LinearCurve, circular_curve: CircularCurve):
    """Line terms in the circle's frame: ``(D, dx, dy, dr, delta)``.

    ``delta`` is ``r^2 dr^2 - D^2``: positive when the line crosses the
    circle, zero when it touches.
    """
    point_1 = circular_curve.to_local(linear_curve.control_point_i)
    point_2 = circular_curve.to_local(linear_curve.control_point_j)
    D = cross(point_1.x, point_1.y, point_2.x, point_2.y)
    dx = point_2.x - point_1.x
    dy = point_2.y - point_1.y
    dr = srss(dx, dy)
    delta = (circular_curve.radius * dr) ** 2 - D ** 2
    return D, dx, dy, dr, delta


def _incidence(linear_curve: LinearCurve, circular_curve: CircularCurve) -> float:
    # delta / dr^2 is r^2 less the squared distance from center to line
    _, _, _, dr, delta = _linear_circular_terms(linear_curve, circular_curve)
    return delta / dr ** 2


def are_tangent_linear_circular(linear_curve: LinearCurve, circular_curve: CircularCurve) -> bool:
    """True if the line touches the circle at exactly one point."""
    return is_zero(_incidence(linear_curve, circular_curve),
                   get_tolerance(linear_curve, circular_curve))


def are_intersecting_linear_circular(linear_curve: LinearCurve, circular_curve: CircularCurve) -> bool:
    """True if the line crosses the circle at two points."""
    return is_greater(_incidence(linear_curve, circular_curve), 0,
                      get_tolerance(linear_curve, circular_curve))


def intersection_coordinates_linear_circular(linear_curve: LinearCurve,
                                             circular_curve: CircularCurve) -> List[CartesianCoordinate]:
    tolerance = get_tolerance(linear_curve, circular_curve)
    D, dx, dy, dr, delta = _linear_circular_terms(linear_curve, circular_curve)
    incidence = delta / dr ** 2
    if is_negative(incidence, tolerance):
        logger.debug('linear-circular: line misses circle by %g', incidence)
        return []

    root = sqrt(max(delta, 0.0))
    sign_dy = -1 if dy < 0 else 1
    dr_2 = dr ** 2
    xs = plus_minus(D * dy / dr_2, sign_dy * dx * root / dr_2)
    ys = plus_minus(-D * dx / dr_2, abs(dy) * root / dr_2)
    points = [circular_curve.to_global(CartesianCoordinate(x, y, tolerance)) for x, y in zip(xs, ys)]
    if is_zero(incidence, tolerance):
        return points[:1]
    return points


# -----------------------------------------------------------------------------
# Circular - circular
# -----------------------------------------------------------------------------

def center_separation(curve_1: CircularCurve, curve_2: CircularCurve) -> float:
    return curve_1.center.distance_to(curve_2.center)


def _radical_factor(separation: float, radius_1: float, radius_2: float) -> float:
    return separation ** 2 - radius_2 ** 2 + radius_1 ** 2


def radical_line_length(separation: float, radius_1: float, radius_2: float) -> float:
    """Length of the chord shared by two intersecting circles."""
    squared = 4 * (separation * radius_1) ** 2 - _radical_factor(separation, radius_1, radius_2) ** 2
    return sqrt(max(squared, 0.0)) / separation


def are_tangent_circular_circular(curve_1: CircularCurve, curve_2: CircularCurve) -> bool:
    """True if the circles touch at one point, from outside or inside."""
    tolerance = get_tolerance(curve_1, curve_2)
    separation = center_separation(curve_1, curve_2)
    if is_zero(separation, tolerance):
        return False
    return (is_equal(curve_1.radius + curve_2.radius, separation, tolerance) or
            is_equal(abs(curve_1.radius - curve_2.radius), separation, tolerance))


def are_intersecting_circular_circular(curve_1: CircularCurve, curve_2: CircularCurve) -> bool:
    """True if the circles cross at two points."""
    tolerance = get_tolerance(curve_1, curve_2)
    separation = center_separation(curve_1, curve_2)
    return (is_greater(curve_1.radius + curve_2.radius, separation, tolerance) and
            is_greater(separation, abs(curve_1.radius - curve_2.radius), tolerance))


def intersection_coordinates_circular_circular(curve_1: CircularCurve,
                                               curve_2: CircularCurve) -> List[CartesianCoordinate]:
    tangent = are_tangent_circular_circular(curve_1, curve_2)
    if not (tangent or are_intersecting_circular_circular(curve_1, curve_2)):
        logger.debug('circular-circular: circles do not meet')
        return []

    tolerance = get_tolerance(curve_1, curve_2)
    separation = center_separation(curve_1, curve_2)
    radius_1 = curve_1.radius
    radius_2 = curve_2.radius
    x = _radical_factor(separation, radius_1, radius_2) / (2 * separation)
    frame = Transformation.from_points(curve_1.center, curve_2.center)
    if tangent:
        return [frame.to_global(CartesianCoordinate(x, 0.0, tolerance))]
    half_chord = radical_line_length(separation, radius_1, radius_2) / 2
    return [frame.to_global(CartesianCoordinate(x, y, tolerance))
            for y in plus_minus(0.0, half_chord)]


# -----------------------------------------------------------------------------
# Object forms
# -----------------------------------------------------------------------------

class CurveIntersection(ABC, Generic[C1, C2]):
    """Two curves whose crossing is being examined."""

    def __init__(self, curve_1: C1, curve_2: C2):
        self.curve_1 = curve_1
        self.curve_2 = curve_2

    @property
    def tolerance(self) -> float:
        return get_tolerance(self.curve_1, self.curve_2)

    @abstractmethod
    def are_tangent(self) -> bool:
        """True if the curves touch without crossing."""

    @abstractmethod
    def are_intersecting(self) -> bool:
        """True if the curves cross."""

    @abstractmethod
    def intersection_coordinates(self) -> List[CartesianCoordinate]:
        """Points shared by both curves."""

    def __repr__(self):
        return f"{type(self).__name__}({self.curve_1!r}, {self.curve_2!r})"


class IntersectionLinearLinear(CurveIntersection[LinearCurve, LinearCurve]):

    def are_tangent(self) -> bool:
        return are_tangent_linear_linear(self.curve_1, self.curve_2)

    def are_intersecting(self) -> bool:
        return are_intersecting_linear_linear(self.curve_1, self.curve_2)

    def intersection_coordinates(self) -> List[CartesianCoordinate]:
        return intersection_coordinates_linear_linear(self.curve_1, self.curve_2)


class IntersectionLinearCircular(CurveIntersection[LinearCurve, CircularCurve]):

    @property
    def linear_curve(self) -> LinearCurve:
        return self.curve_1

    @property
    def circular_curve(self) -> CircularCurve:
        return self.curve_2

    def are_tangent(self) -> bool:
        return are_tangent_linear_circular(self.curve_1, self.curve_2)

    def are_intersecting(self) -> bool:
        return are_intersecting_linear_circular(self.curve_1, self.curve_2)

    def intersection_coordinates(self) -> List[CartesianCoordinate]:
        return intersection_coordinates_linear_circular(self.curve_1, self.curve_2)


class IntersectionCircularCircular(CurveIntersection[CircularCurve, CircularCurve]):

    def center_separation(self) -> float:
        return center_separation(self.curve_1, self.curve_2)

    def radical_line_length(self) -> float:
        return radical_line_length(self.center_separation(),
                                   self.curve_1.radius, self.curve_2.radius)

    def are_tangent(self) -> bool:
        return are_tangent_circular_circular(self.curve_1, self.curve_2)

    def are_intersecting(self) -> bool:
        return are_intersecting_circular_circular(self.curve_1, self.curve_2)

    def intersection_coordinates(self) -> List[CartesianCoordinate]:
        return intersection_coordinates_circular_circular(self.curve_1, self.curve_2)


__all__ = [
    "are_tangent_linear_linear",
    "are_intersecting_linear_linear",
    "intersection_coordinates_linear_linear",
    "are_tangent_linear_circular",
    "are_intersecting_linear_circular",
    "intersection_coordinates_linear_circular",
    "center_separation",
    "radical_line_length",
    "are_tangent_circular_circular",
    "are_intersecting_circular_circular",
    "intersection_coordinates_circular_circular",
    "CurveIntersection",
    "IntersectionLinearLinear",
    "IntersectionLinearCircular",
    "IntersectionCircularCircular",
]
