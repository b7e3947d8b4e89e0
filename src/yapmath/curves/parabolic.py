"""Parabolas.

Copyright (c) 2025 yapCAD contributors
MIT License
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from yapmath.coordinates import CartesianCoordinate
from yapmath.curves.conic import ConicSectionCurve
from yapmath.errors import GeometryError
from yapmath.parametrics.conic import parabolic_parametric
from yapmath.tolerance import DEFAULT_TOLERANCE, is_positive


class ParabolicCurve(ConicSectionCurve):
    """Parabola ``y^2 = 4 f x`` opening along its local +X.

    The local origin is the vertex and the single focus sits at
    ``(f, 0)``.  The vertex form is parameterized as ``(f t^2, 2 f t)``.
    ``distance_from_vertex_minor_to_origin`` is reported as ``2 f``, the
    half-width of the curve level with its focus.
    """

    parameter_domain = (-1.0, 1.0)
    focus_direction = 1

    def __init__(self, focal_distance: float,
                 vertex: Optional[CartesianCoordinate] = None,
                 rotation=0.0, tolerance: float = DEFAULT_TOLERANCE):
        if not is_positive(focal_distance, tolerance):
            raise GeometryError(f'focal distance must be positive, got {focal_distance}')
        self._f = focal_distance
        super().__init__(0.0, 2 * focal_distance, vertex, rotation, tolerance)

    @property
    def vertex(self) -> CartesianCoordinate:
        return self.local_origin

    @property
    def distance_from_focus_to_origin(self) -> float:
        return self._f

    @property
    def eccentricity(self) -> float:
        return 1.0

    @property
    def semilatus_rectum_distance(self) -> float:
        return 2 * self._f

    def _create_parametric_equation(self):
        return parabolic_parametric(self)

    def _implicit_coefficients(self) -> Tuple[float, float, float, float]:
        return 0.0, 1.0, -4 * self._f, 0.0

    def _vertices_local(self) -> List[Tuple[float, float]]:
        return [(0.0, 0.0)]

    def _foci_local(self) -> List[Tuple[float, float]]:
        return [(self._f, 0.0)]

    def radius_about_focus_left(self, angle) -> float:
        raise self._unsupported('radius_about_focus_left, a parabola has one focus')

    def __repr__(self):
        return "ParabolicCurve(focal_distance={}, vertex={!r}, rotation={!r})".format(
            self._f, self.vertex, self.local_rotation)


__all__ = ["ParabolicCurve"]
