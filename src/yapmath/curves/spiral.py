"""Logarithmic spirals about the origin."""

from __future__ import annotations

from math import exp, hypot, log
from typing import Optional, Tuple

from yapmath.coordinates import CartesianCoordinate
from yapmath.curves.curve import Curve
from yapmath.errors import GeometryError
from yapmath.geometry import curvature_parametric, slope_parametric
from yapmath.parametrics.spiral import logarithmic_spiral_parametric
from yapmath.tolerance import DEFAULT_TOLERANCE, get_tolerance, is_positive, is_zero, pi2


class LogarithmicSpiralCurve(Curve):
    """Spiral ``r = r0 exp(k theta)``.

    Rotation is not wrapped: ``theta`` may run past a full turn, and
    each turn moves the curve outward by a factor ``exp(2 pi k)``.
    """

    parameter_domain = (0.0, pi2)

    def __init__(self, radius_at_origin: float, radius_change_with_rotation: float,
                 tolerance: float = DEFAULT_TOLERANCE):
        if not is_positive(radius_at_origin, tolerance):
            raise GeometryError(f'spiral radius at zero rotation must be positive, got {radius_at_origin}')
        super().__init__(tolerance)
        self.radius_at_origin = radius_at_origin
        self.radius_change_with_rotation = radius_change_with_rotation

    def _create_parametric_equation(self):
        return logarithmic_spiral_parametric(self)

    def default_limits(self) -> Tuple[CartesianCoordinate, CartesianCoordinate]:
        start, end = self.parameter_domain
        return self.coordinate_by_parameter(start), self.coordinate_by_parameter(end)

    def radius_at_rotation(self, angle) -> float:
        return self.radius_at_origin * exp(self.radius_change_with_rotation * float(angle))

    def rotation_at_radius(self, radius: float) -> float:
        """Unwrapped rotation at which the spiral reaches ``radius``."""
        if is_zero(self.radius_change_with_rotation):
            raise GeometryError('a spiral with no growth is a circle; every rotation has the same radius')
        if not is_positive(radius):
            raise GeometryError(f'radius must be positive, got {radius}')
        return log(radius / self.radius_at_origin) / self.radius_change_with_rotation

    def coordinate_by_angle(self, angle) -> CartesianCoordinate:
        return self.coordinate_by_parameter(float(angle))

    def slope_by_angle(self, angle) -> float:
        theta = float(angle)
        return slope_parametric(self.x_prime_by_parameter(theta), self.y_prime_by_parameter(theta))

    def curvature_by_angle(self, angle) -> float:
        theta = float(angle)
        return curvature_parametric(self.x_prime_by_parameter(theta), self.y_prime_by_parameter(theta),
                                    self.x_prime_double_by_parameter(theta),
                                    self.y_prime_double_by_parameter(theta))

    def is_intersecting_coordinate(self, coordinate: CartesianCoordinate,
                                   tolerance: Optional[float] = None) -> bool:
        tol = get_tolerance(self, coordinate) if tolerance is None else tolerance
        radius = hypot(coordinate.x, coordinate.y)
        if not is_positive(radius, tol):
            return False
        if is_zero(self.radius_change_with_rotation):
            return is_zero(radius - self.radius_at_origin, tol)
        # the spiral passes through each radius exactly once
        theta = self.rotation_at_radius(radius)
        return is_zero(self.coordinate_by_parameter(theta).distance_to(coordinate), tol)

    def __repr__(self):
        return "LogarithmicSpiralCurve(radius_at_origin={}, radius_change_with_rotation={})".format(
            self.radius_at_origin, self.radius_change_with_rotation)


__all__ = ["LogarithmicSpiralCurve"]
