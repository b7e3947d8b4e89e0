"""Shared machinery of the conic section curves.

A conic is stored in its own local frame: origin at the center (or the
vertex, for a parabola), major axis along +X, then placed in the plane
by a :class:`~yapmath.geometry.Transformation`.  Two descriptions of
the shape are used side by side:

- the local implicit form ``A x^2 + C y^2 + D x + F = 0``, which answers
  on-curve tests, Cartesian look-ups and ray casts through
  :func:`~yapmath.algebra.quadratic_formula`
- the focus-relative polar form ``r = l / (1 - e cos theta)`` about the
  right focus, which answers the ``*_by_angle`` queries

Copyright (c) 2025 yapCAD contributors
MIT License
"""

from __future__ import annotations

from math import cos, inf, sqrt
from typing import List, Optional, Tuple

from yapmath.algebra import quadratic_formula
from yapmath.coordinates import Angle, CartesianCoordinate, CartesianOffset
from yapmath.curves.curve import Curve, _as_angle
from yapmath.errors import OutOfRangeError
from yapmath.geometry import Transformation, curvature_parametric, slope_parametric
from yapmath.parametrics.conic import (focus_parametric, focus_radius,
                                       radius_focus_parametric)
from yapmath.tolerance import (DEFAULT_TOLERANCE, get_tolerance, is_equal, is_negative,
                               is_positive, is_zero)
from yapmath.tools.limits import validate_rotation_full_circle
from yapmath.vector import Vector, unit_normal_from_components, unit_tangent_from_components


class ConicSectionCurve(Curve):
    """Base class for ellipses, circles, hyperbolas and parabolas.

    Subclasses supply :attr:`distance_from_focus_to_origin`,
    :meth:`_implicit_coefficients` and the local vertex and focus lists.
    """

    #: -1 when the directrix of the right focus lies on its +X side
    focus_direction = -1

    def __init__(self, distance_a: float, distance_b: float,
                 local_origin: Optional[CartesianCoordinate] = None,
                 local_rotation=0.0, tolerance: float = DEFAULT_TOLERANCE):
        super().__init__(tolerance)
        self._a = distance_a
        self._b = distance_b
        if local_origin is None:
            local_origin = CartesianCoordinate.origin()
        self._transformation = Transformation(local_origin, _as_angle(local_rotation))
        self._focus_parametric = None
        self._radius_focus_parametric = None

    # -- shape -----------------------------------------------------------

    @property
    def distance_from_vertex_major_to_origin(self) -> float:
        return self._a

    @property
    def distance_from_vertex_minor_to_origin(self) -> float:
        return self._b

    @property
    def distance_from_focus_to_origin(self) -> float:
        raise NotImplementedError

    @property
    def eccentricity(self) -> float:
        return self.distance_from_focus_to_origin / self._a

    @property
    def semilatus_rectum_distance(self) -> float:
        """Half the chord through a focus, perpendicular to the major axis."""
        return self._b ** 2 / self._a

    @property
    def distance_from_focus_to_directrix(self) -> float:
        e = self.eccentricity
        if is_zero(e):
            return inf
        return self.semilatus_rectum_distance / e

    @property
    def distance_from_directrix_to_origin(self) -> float:
        d = self.distance_from_focus_to_directrix
        if d == inf:
            return inf
        return abs(self.distance_from_focus_to_origin - self.focus_direction * d)

    # -- placement -------------------------------------------------------

    @property
    def local_origin(self) -> CartesianCoordinate:
        return self._transformation.local_origin

    @property
    def local_rotation(self) -> Angle:
        return self._transformation.local_rotation

    @property
    def transformation(self) -> Transformation:
        return self._transformation

    def to_global(self, coordinate: CartesianCoordinate) -> CartesianCoordinate:
        return self._transformation.to_global(coordinate)

    def to_local(self, coordinate: CartesianCoordinate) -> CartesianCoordinate:
        return self._transformation.to_local(coordinate)

    def _global_points(self, points) -> List[CartesianCoordinate]:
        return [self.to_global(CartesianCoordinate(x, y, self._tolerance)) for x, y in points]

    def _vertices_local(self) -> List[Tuple[float, float]]:
        raise NotImplementedError

    def _foci_local(self) -> List[Tuple[float, float]]:
        c = self.distance_from_focus_to_origin
        if is_zero(c, self._tolerance):
            return [(0.0, 0.0)]
        return [(c, 0.0), (-c, 0.0)]

    def vertices(self) -> List[CartesianCoordinate]:
        return self._global_points(self._vertices_local())

    @property
    def vertex_major(self) -> CartesianCoordinate:
        return self.vertices()[0]

    def foci(self) -> List[CartesianCoordinate]:
        return self._global_points(self._foci_local())

    @property
    def focus_right(self) -> CartesianCoordinate:
        return self.to_global(CartesianCoordinate(self.distance_from_focus_to_origin, 0.0, self._tolerance))

    def directrices(self):
        """Directrix lines, one per focus; none for a circle."""
        from yapmath.curves.linear import LinearCurve
        d = self.distance_from_focus_to_directrix
        if d == inf:
            return []
        x_right = self.distance_from_focus_to_origin - self.focus_direction * d
        lines = []
        for x, _ in self._foci_local():
            x_directrix = x_right if x >= 0 else -x_right
            lines.append(LinearCurve(self.to_global(CartesianCoordinate(x_directrix, 0.0)),
                                     self.to_global(CartesianCoordinate(x_directrix, 1.0)),
                                     self._tolerance))
        return lines

    def default_limits(self) -> Tuple[CartesianCoordinate, CartesianCoordinate]:
        vertex = self.vertex_major
        return vertex, vertex

    # -- implicit form ---------------------------------------------------

    def _implicit_coefficients(self) -> Tuple[float, float, float, float]:
        """``(A, C, D, F)`` of ``A x^2 + C y^2 + D x + F = 0`` in the local frame."""
        raise NotImplementedError

    def is_intersecting_coordinate(self, coordinate: CartesianCoordinate,
                                   tolerance: Optional[float] = None) -> bool:
        tol = get_tolerance(self, coordinate) if tolerance is None else tolerance
        local = self.to_local(coordinate)
        A, C, D, F = self._implicit_coefficients()
        return is_zero(A * local.x ** 2 + C * local.y ** 2 + D * local.x + F, tol)

    def _require_axis_aligned(self, operation: str):
        if not is_zero(self.local_rotation.radians, self._tolerance):
            raise self._unsupported(f'{operation} on a rotated conic')

    def ys_at_x(self, x: float) -> List[float]:
        """Global Y values on the curve at global ``x``, upper first."""
        self._require_axis_aligned('ys_at_x')
        origin = self.local_origin
        x_local = x - origin.x
        A, C, D, F = self._implicit_coefficients()
        y_squared = -(A * x_local ** 2 + D * x_local + F) / C
        if is_negative(y_squared, self._tolerance):
            return []
        if is_zero(y_squared, self._tolerance):
            return [origin.y]
        y = sqrt(y_squared)
        return [origin.y + y, origin.y - y]

    def xs_at_y(self, y: float) -> List[float]:
        """Global X values on the curve at global ``y``, rightmost first."""
        self._require_axis_aligned('xs_at_y')
        origin = self.local_origin
        y_local = y - origin.y
        A, C, D, F = self._implicit_coefficients()
        constant = C * y_local ** 2 + F
        if is_zero(A):
            return [origin.x - constant / D]
        discriminant = D * D - 4 * A * constant
        if is_negative(discriminant, self._tolerance):
            return []
        if is_zero(discriminant, self._tolerance):
            return [origin.x - D / (2 * A)]
        minus, plus = quadratic_formula(A, D, constant)
        if is_equal(minus, plus, self._tolerance):
            return [origin.x + plus]
        return [origin.x + max(minus, plus), origin.x + min(minus, plus)]

    def x_at_y(self, y: float) -> float:
        xs = self.xs_at_y(y)
        if not xs:
            raise OutOfRangeError(f'{type(self).__name__} does not reach y={y}')
        return xs[0]

    def y_at_x(self, x: float) -> float:
        ys = self.ys_at_x(x)
        if not ys:
            raise OutOfRangeError(f'{type(self).__name__} does not reach x={x}')
        return ys[0]

    def radius_about_offset(self, offset: CartesianOffset, angle) -> float:
        """Distance along a ray to the curve.

        The ray starts ``offset`` away from the local origin and points
        along ``angle``, both in the local frame.  The nearest crossing
        ahead of the start point is returned.

        Raises
        ------
        GeometryError
            If the line of the ray misses the curve altogether.
        OutOfRangeError
            If the curve is only met behind the start point.
        """
        rotation = _as_angle(angle)
        ux, uy = rotation.direction()
        A, C, D, F = self._implicit_coefficients()
        ox, oy = offset.x, offset.y
        qa = A * ux ** 2 + C * uy ** 2
        qb = 2 * (A * ox * ux + C * oy * uy) + D * ux
        qc = A * ox ** 2 + C * oy ** 2 + D * ox + F
        if is_zero(qa):
            if is_zero(qb):
                raise OutOfRangeError(f'ray at {rotation!r} never meets the curve')
            roots = [-qc / qb]
        else:
            roots = list(quadratic_formula(qa, qb, qc))
        ahead = [t for t in roots if is_positive(t, self._tolerance)]
        if not ahead:
            raise OutOfRangeError(f'ray at {rotation!r} never meets the curve ahead of {offset!r}')
        return min(ahead)

    def radius_about_origin(self, angle) -> float:
        return self.radius_about_offset(CartesianOffset(0.0, 0.0), angle)

    # -- focus-relative form ---------------------------------------------

    @property
    def focus_parametric(self):
        """Local ``(x, y)`` about the right focus, by focus rotation."""
        if self._focus_parametric is None:
            self._focus_parametric = focus_parametric(self)
        return self._focus_parametric

    @property
    def radius_focus_parametric(self):
        """Polar ``(r, theta)`` about the right focus."""
        if self._radius_focus_parametric is None:
            self._radius_focus_parametric = radius_focus_parametric(self)
        return self._radius_focus_parametric

    def _focus_rotation(self, angle) -> float:
        theta = validate_rotation_full_circle(angle, self._tolerance)
        if not is_positive(1 - self.eccentricity * cos(theta), self._tolerance):
            raise OutOfRangeError(f'focus rotation {theta} does not reach the curve',
                                  {'rotation': theta, 'eccentricity': self.eccentricity})
        return theta

    def radius_about_focus_right(self, angle) -> float:
        return focus_radius(self, self._focus_rotation(angle))

    def radius_about_focus_left(self, angle) -> float:
        """Mirror of :meth:`radius_about_focus_right` about the minor axis."""
        theta = validate_rotation_full_circle(angle, self._tolerance)
        u = 1 + self.eccentricity * cos(theta)
        if not is_positive(u, self._tolerance):
            raise OutOfRangeError(f'focus rotation {theta} does not reach the curve')
        return self.semilatus_rectum_distance / u

    def x_by_rotation_about_focus_right(self, angle) -> float:
        return self.focus_parametric.x_component.base_by_parameter(self._focus_rotation(angle))

    def y_by_rotation_about_focus_right(self, angle) -> float:
        return self.focus_parametric.y_component.base_by_parameter(self._focus_rotation(angle))

    def coordinate_by_angle(self, angle) -> CartesianCoordinate:
        """Global point at focus rotation ``angle``."""
        theta = self._focus_rotation(angle)
        return self.to_global(self.focus_parametric.coordinate_at(theta).with_tolerance(self._tolerance))

    def _focus_derivatives(self, angle, order: int):
        theta = self._focus_rotation(angle)
        point = self.focus_parametric.differentiate_by(order).coordinate_at(theta)
        return self.local_rotation.rotate(point.x, point.y)

    def slope_by_angle(self, angle) -> float:
        return slope_parametric(*self._focus_derivatives(angle, 1))

    def curvature_by_angle(self, angle) -> float:
        x_prime, y_prime = self._focus_derivatives(angle, 1)
        x_prime_double, y_prime_double = self._focus_derivatives(angle, 2)
        return curvature_parametric(x_prime, y_prime, x_prime_double, y_prime_double)

    def tangential_angle_by_angle(self, angle) -> Angle:
        return Angle.from_vector(*self._focus_derivatives(angle, 1))

    def tangent_vector_by_angle(self, angle) -> Vector:
        return unit_tangent_from_components(*self._focus_derivatives(angle, 1),
                                            tolerance=self._tolerance)

    def normal_vector_by_angle(self, angle) -> Vector:
        return unit_normal_from_components(*self._focus_derivatives(angle, 1),
                                           tolerance=self._tolerance)

    def copy(self) -> "ConicSectionCurve":
        result = super().copy()
        result._focus_parametric = None
        result._radius_focus_parametric = None
        return result


__all__ = ["ConicSectionCurve"]
