"""Ellipses and circles.

Copyright (c) 2025 yapCAD contributors
MIT License
"""

from __future__ import annotations

from math import pi, sqrt
from typing import List, Optional, Tuple

from yapmath.coordinates import CartesianCoordinate
from yapmath.curves.conic import ConicSectionCurve
from yapmath.errors import GeometryError
from yapmath.parametrics.conic import elliptical_parametric
from yapmath.tolerance import DEFAULT_TOLERANCE, is_positive, pi2


class EllipticalCurve(ConicSectionCurve):
    """Ellipse with semi-major axis ``a`` along its local +X.

    The local origin is the center.  The parameter is the eccentric
    angle: ``(a cos t, b sin t)`` for ``t`` in ``[0, 2 pi)``.
    """

    parameter_domain = (0.0, pi2)
    focus_direction = -1

    def __init__(self, a: float, b: float,
                 center: Optional[CartesianCoordinate] = None,
                 rotation=0.0, tolerance: float = DEFAULT_TOLERANCE):
        if not (is_positive(a, tolerance) and is_positive(b, tolerance)):
            raise GeometryError(f'ellipse radii must be positive, got a={a}, b={b}')
        if b > a:
            raise GeometryError(f'minor radius {b} exceeds major radius {a}; rotate the ellipse instead')
        super().__init__(a, b, center, rotation, tolerance)

    @property
    def center(self) -> CartesianCoordinate:
        return self.local_origin

    @property
    def distance_from_focus_to_origin(self) -> float:
        return sqrt(self._a ** 2 - self._b ** 2)

    def _create_parametric_equation(self):
        return elliptical_parametric(self)

    def _implicit_coefficients(self) -> Tuple[float, float, float, float]:
        return 1 / self._a ** 2, 1 / self._b ** 2, 0.0, -1.0

    def _vertices_local(self) -> List[Tuple[float, float]]:
        return [(self._a, 0.0), (-self._a, 0.0), (0.0, self._b), (0.0, -self._b)]

    def area(self) -> float:
        return pi * self._a * self._b

    def __repr__(self):
        return "EllipticalCurve(a={}, b={}, center={!r}, rotation={!r})".format(
            self._a, self._b, self.center, self.local_rotation)


class CircularCurve(EllipticalCurve):
    """Circle of the given radius, an ellipse with ``a == b``."""

    def __init__(self, radius: float, center: Optional[CartesianCoordinate] = None,
                 tolerance: float = DEFAULT_TOLERANCE):
        super().__init__(radius, radius, center, 0.0, tolerance)

    @property
    def radius(self) -> float:
        return self._a

    @property
    def distance_from_focus_to_origin(self) -> float:
        return 0.0

    def circumference(self) -> float:
        return pi2 * self._a

    def __repr__(self):
        return f"CircularCurve(radius={self._a}, center={self.center!r})"


__all__ = ["EllipticalCurve", "CircularCurve"]
