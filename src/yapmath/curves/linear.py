"""Straight line through two control points.

The line is infinite for intersection and position queries; the two
control points bound its default range and fix its parameterization,
``P(t) = I + (J - I) t`` for ``t`` in ``[0, 1]``.

Copyright (c) 2025 yapCAD contributors
MIT License
"""

from __future__ import annotations

from math import cos, sin
from typing import List, Optional, Tuple

from yapmath.algebra import intersection_x
from yapmath.coordinates import CartesianCoordinate, CartesianOffset
from yapmath.curves.curve import Curve, _as_angle
from yapmath.errors import GeometryError
from yapmath.parametrics.linear import linear_parametric
from yapmath.tolerance import (DEFAULT_TOLERANCE, get_tolerance, infinity_signed,
                               is_equal, is_zero)
from yapmath.vector import Vector, cross, dot, unit_normal_vector, unit_tangent_vector


class LinearCurve(Curve):
    """Line through ``control_point_i`` and ``control_point_j``."""

    def __init__(self, control_point_i: CartesianCoordinate,
                 control_point_j: CartesianCoordinate,
                 tolerance: float = DEFAULT_TOLERANCE):
        super().__init__(tolerance)
        if (is_equal(control_point_i.x, control_point_j.x, tolerance) and
                is_equal(control_point_i.y, control_point_j.y, tolerance)):
            raise GeometryError('identical control points do not define a line',
                                {'i': control_point_i, 'j': control_point_j})
        self.control_point_i = control_point_i
        self.control_point_j = control_point_j

    @classmethod
    def curve_by_y_intercept(cls, slope: float, y_intercept: float,
                             tolerance: float = DEFAULT_TOLERANCE) -> "LinearCurve":
        """Line ``y = slope x + y_intercept``."""
        return cls(CartesianCoordinate(0.0, y_intercept),
                   CartesianCoordinate(1.0, y_intercept + slope), tolerance)

    @classmethod
    def curve_by_x_intercept(cls, slope: float, x_intercept: float,
                             tolerance: float = DEFAULT_TOLERANCE) -> "LinearCurve":
        """Line of the given slope crossing the X axis at ``x_intercept``."""
        return cls(CartesianCoordinate(x_intercept, 0.0),
                   CartesianCoordinate(x_intercept + 1.0, slope), tolerance)

    def _create_parametric_equation(self):
        return linear_parametric(self)

    def default_limits(self) -> Tuple[CartesianCoordinate, CartesianCoordinate]:
        return self.control_point_i, self.control_point_j

    # -- direction -------------------------------------------------------

    @property
    def rise(self) -> float:
        return self.control_point_j.y - self.control_point_i.y

    @property
    def run(self) -> float:
        return self.control_point_j.x - self.control_point_i.x

    def chord(self) -> CartesianOffset:
        """Offset from ``control_point_i`` to ``control_point_j``."""
        return self.control_point_j - self.control_point_i

    def length(self) -> float:
        return self.control_point_i.distance_to(self.control_point_j)

    def slope(self) -> float:
        """Rise over run; signed infinity for a vertical line."""
        if is_zero(self.run, self._tolerance):
            return infinity_signed(self.rise)
        return self.rise / self.run

    def is_horizontal(self) -> bool:
        return is_zero(self.rise, self._tolerance)

    def is_vertical(self) -> bool:
        return is_zero(self.run, self._tolerance)

    def intercept_x(self) -> float:
        """X where the line crosses the X axis, infinite if it never does."""
        if self.is_horizontal():
            return float('inf')
        return intersection_x(0.0, self.control_point_i.x, self.control_point_i.y,
                              self.control_point_j.x, self.control_point_j.y)

    def intercept_y(self) -> float:
        """Y where the line crosses the Y axis, infinite if it never does."""
        if self.is_vertical():
            return float('inf')
        return self.y_at_x(0.0)

    def tangent_vector(self) -> Vector:
        return unit_tangent_vector(self.control_point_i, self.control_point_j, self._tolerance)

    def normal_vector(self) -> Vector:
        return unit_normal_vector(self.control_point_i, self.control_point_j, self._tolerance)

    def is_parallel(self, other: "LinearCurve", tolerance: Optional[float] = None) -> bool:
        """True if the directions agree, independent of segment length."""
        tol = get_tolerance(self, other) if tolerance is None else tolerance
        sine = cross(self.run, self.rise, other.run, other.rise) / (self.length() * other.length())
        return is_zero(sine, tol)

    def is_perpendicular(self, other: "LinearCurve", tolerance: Optional[float] = None) -> bool:
        tol = get_tolerance(self, other) if tolerance is None else tolerance
        cosine = dot(self.run, self.rise, other.run, other.rise) / (self.length() * other.length())
        return is_zero(cosine, tol)

    # -- Cartesian queries -----------------------------------------------

    def x_at_y(self, y: float) -> float:
        if self.is_vertical():
            return self.control_point_i.x
        i, j = self.control_point_i, self.control_point_j
        return intersection_x(y, i.x, i.y, j.x, j.y, self._tolerance)

    def y_at_x(self, x: float) -> float:
        if self.is_horizontal():
            return self.control_point_i.y
        i, j = self.control_point_i, self.control_point_j
        # same solve with the axes swapped
        return intersection_x(x, i.y, i.x, j.y, j.x, self._tolerance)

    def xs_at_y(self, y: float) -> List[float]:
        return [self.x_at_y(y)]

    def ys_at_x(self, x: float) -> List[float]:
        return [self.y_at_x(x)]

    def is_intersecting_coordinate(self, coordinate: CartesianCoordinate,
                                   tolerance: Optional[float] = None) -> bool:
        """True if ``coordinate`` lies on the line."""
        tol = get_tolerance(self, coordinate) if tolerance is None else tolerance
        i = self.control_point_i
        distance = cross(self.run, self.rise, coordinate.x - i.x, coordinate.y - i.y) / self.length()
        return is_zero(distance, tol)

    def coordinate_of_perpendicular_projection(self, coordinate: CartesianCoordinate) -> CartesianCoordinate:
        """Foot of the perpendicular dropped from ``coordinate`` onto the line."""
        tangent = self.tangent_vector()
        i = self.control_point_i
        along = dot(coordinate.x - i.x, coordinate.y - i.y, tangent.x, tangent.y)
        return CartesianCoordinate(i.x + along * tangent.x, i.y + along * tangent.y, self._tolerance)

    def intersection_coordinate(self, other: "LinearCurve") -> CartesianCoordinate:
        """Crossing point with ``other``.

        Raises :class:`~yapmath.errors.GeometryError` for parallel or
        collinear lines, which have no single crossing point.
        """
        from yapmath.tools.intersections import intersection_coordinates_linear_linear
        coordinates = intersection_coordinates_linear_linear(self, other)
        if not coordinates:
            raise GeometryError('parallel lines have no single intersection',
                                {'curve_1': self, 'curve_2': other})
        return coordinates[0]

    def radius_about_origin(self, angle) -> float:
        """Distance from the origin to the line along direction ``angle``."""
        rotation = _as_angle(angle)
        ux, uy = cos(rotation.radians), sin(rotation.radians)
        denominator = cross(ux, uy, self.run, self.rise)
        if is_zero(denominator / self.length(), self._tolerance):
            raise GeometryError(f'ray at {rotation!r} is parallel to the line')
        i = self.control_point_i
        return cross(i.x, i.y, self.run, self.rise) / denominator

    def coordinate_by_position(self, s: float) -> CartesianCoordinate:
        """Point at relative position ``s`` in ``[0, 1]`` from ``I`` to ``J``."""
        from yapmath.tools import relative_position
        return relative_position.coordinate(s, self)

    def __repr__(self):
        return f"LinearCurve({self.control_point_i!r}, {self.control_point_j!r})"


__all__ = ["LinearCurve"]
