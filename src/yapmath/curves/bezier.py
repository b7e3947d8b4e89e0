"""Bezier curves of order 1 (linear), 2 (quadratic) and 3 (cubic).

Control points ``b_0`` and ``b_3`` are the curve end points, taken from
the two handles.  ``b_1`` and ``b_2`` are the handle tips.  A quadratic
uses only the first handle tip; a linear curve ignores both.

Copyright (c) 2025 yapCAD contributors
MIT License
"""

from __future__ import annotations

from math import pi
from typing import Optional, Tuple

from yapmath.coordinates import Angle, CartesianCoordinate
from yapmath.curves.curve import Curve
from yapmath.geometry import curvature_parametric, slope_parametric
from yapmath.parametrics.bezier import bezier_parametric
from yapmath.tolerance import DEFAULT_TOLERANCE
from yapmath.tools.handle import CurveHandle
from yapmath.vector import Vector, unit_normal_from_components, unit_tangent_from_components

#: default handle length as a fraction of the chord
DEFAULT_HANDLE_FRACTION = 0.1


class BezierCurve(Curve):
    """Bezier curve between two handles, parameterized on ``[0, 1]``."""

    def __init__(self, handle_i: CurveHandle, handle_j: CurveHandle,
                 order: int = 3, tolerance: float = DEFAULT_TOLERANCE):
        if order not in (1, 2, 3):
            raise ValueError(f'bezier order must be 1, 2 or 3, got {order}')
        super().__init__(tolerance)
        self.handle_i = handle_i
        self.handle_j = handle_j
        self.order = order

    @classmethod
    def from_points(cls, point_i: CartesianCoordinate, point_j: CartesianCoordinate,
                    order: int = 3, tolerance: float = DEFAULT_TOLERANCE) -> "BezierCurve":
        """Curve whose handles point along the chord, each a tenth of its length."""
        chord = point_j - point_i
        length = DEFAULT_HANDLE_FRACTION * chord.length()
        rotation = chord.slope_angle()
        return cls(CurveHandle(point_i, length, rotation),
                   CurveHandle(point_j, length, rotation + Angle(-pi)),
                   order, tolerance)

    def _create_parametric_equation(self):
        return bezier_parametric(self)

    def default_limits(self) -> Tuple[CartesianCoordinate, CartesianCoordinate]:
        return self.b_0(), self.b_3()

    # -- control points --------------------------------------------------

    def b_0(self) -> CartesianCoordinate:
        return self.handle_i.control_point

    def b_1(self) -> CartesianCoordinate:
        return self.handle_i.handle_tip()

    def b_2(self) -> CartesianCoordinate:
        return self.handle_j.handle_tip()

    def b_3(self) -> CartesianCoordinate:
        return self.handle_j.control_point

    # -- differential geometry -------------------------------------------

    def _prime(self, s: float):
        return self.x_prime_by_parameter(s), self.y_prime_by_parameter(s)

    def slope_by_position(self, s: float) -> float:
        return slope_parametric(*self._prime(s))

    def curvature_by_position(self, s: float) -> float:
        x_prime, y_prime = self._prime(s)
        return curvature_parametric(x_prime, y_prime,
                                    self.x_prime_double_by_parameter(s),
                                    self.y_prime_double_by_parameter(s))

    def tangent_vector_by_position(self, s: float) -> Vector:
        return unit_tangent_from_components(*self._prime(s), tolerance=self._tolerance)

    def normal_vector_by_position(self, s: float) -> Vector:
        return unit_normal_from_components(*self._prime(s), tolerance=self._tolerance)

    # -- chords ----------------------------------------------------------

    def chord_length(self) -> float:
        return self.b_0().distance_to(self.b_3())

    def chord_between(self, s_start: float, s_end: Optional[float] = None) -> float:
        """Straight distance between the points at two parameters."""
        if s_end is None:
            s_start, s_end = 0.0, s_start
        return self.coordinate_by_parameter(s_start).distance_to(self.coordinate_by_parameter(s_end))

    def __repr__(self):
        return f"BezierCurve({self.b_0()!r}, {self.b_3()!r}, order={self.order})"


__all__ = ["DEFAULT_HANDLE_FRACTION", "BezierCurve"]
