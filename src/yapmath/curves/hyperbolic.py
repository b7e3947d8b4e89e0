"""Hyperbolas.

Only the right-hand branch is parameterized, ``(a cosh t, b sinh t)``.
The implicit-form queries (on-curve tests, Cartesian look-ups) see both
branches.

Copyright (c) 2025 yapCAD contributors
MIT License
"""

from __future__ import annotations

from math import atan2, sqrt
from typing import List, Optional, Tuple

from yapmath.coordinates import Angle, CartesianCoordinate
from yapmath.curves.conic import ConicSectionCurve
from yapmath.curves.linear import LinearCurve
from yapmath.errors import GeometryError
from yapmath.parametrics.conic import hyperbolic_parametric
from yapmath.tolerance import DEFAULT_TOLERANCE, is_positive


class HyperbolicCurve(ConicSectionCurve):
    """Hyperbola ``x^2/a^2 - y^2/b^2 = 1`` in its local frame."""

    parameter_domain = (-1.0, 1.0)
    focus_direction = 1

    def __init__(self, a: float, b: float,
                 center: Optional[CartesianCoordinate] = None,
                 rotation=0.0, tolerance: float = DEFAULT_TOLERANCE):
        if not (is_positive(a, tolerance) and is_positive(b, tolerance)):
            raise GeometryError(f'hyperbola distances must be positive, got a={a}, b={b}')
        super().__init__(a, b, center, rotation, tolerance)

    @property
    def center(self) -> CartesianCoordinate:
        return self.local_origin

    @property
    def distance_from_focus_to_origin(self) -> float:
        return sqrt(self._a ** 2 + self._b ** 2)

    def _create_parametric_equation(self):
        return hyperbolic_parametric(self)

    def _implicit_coefficients(self) -> Tuple[float, float, float, float]:
        return 1 / self._a ** 2, -1 / self._b ** 2, 0.0, -1.0

    def _vertices_local(self) -> List[Tuple[float, float]]:
        return [(self._a, 0.0), (-self._a, 0.0)]

    # -- asymptotes ------------------------------------------------------

    @property
    def asymptote_angle(self) -> Angle:
        """Angle of the rising asymptote from the local +X axis."""
        return Angle(atan2(self._b, self._a))

    def asymptotes(self) -> List[LinearCurve]:
        """Rising and falling asymptotes, both through the center."""
        center = self.center
        return [LinearCurve(center, self.to_global(CartesianCoordinate(self._a, self._b)), self._tolerance),
                LinearCurve(center, self.to_global(CartesianCoordinate(self._a, -self._b)), self._tolerance)]

    def __repr__(self):
        return "HyperbolicCurve(a={}, b={}, center={!r}, rotation={!r})".format(
            self._a, self._b, self.center, self.local_rotation)


__all__ = ["HyperbolicCurve"]
