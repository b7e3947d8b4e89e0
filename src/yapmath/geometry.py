"""Differential-geometry helpers and local/global frame transforms.

Slopes and curvatures for the four usual curve representations:
parametric ``(x(t), y(t))``, graphs ``y = f(x)``, polar ``r(theta)``
and implicit ``F(x, y) = 0``.
"""

from __future__ import annotations

from math import cos, sin

import numpy as np

from yapmath.coordinates import Angle, CartesianCoordinate


## parametric: the derivative must be defined and nonzero over the domain

def slope_parametric(x_prime: float, y_prime: float) -> float:
    return y_prime / x_prime


def curvature_parametric(x_prime: float, y_prime: float,
                         x_prime_double: float, y_prime_double: float) -> float:
    """Signed curvature of a parametric curve."""
    return ((x_prime * y_prime_double - y_prime * x_prime_double) /
            (x_prime ** 2 + y_prime ** 2) ** 1.5)


## graph of a function, x = t, y = f(t)

def slope_graph(y_prime: float) -> float:
    return y_prime


def curvature_graph(y_prime: float, y_prime_double: float) -> float:
    return y_prime_double / (1 + y_prime ** 2) ** 1.5


## polar, r = r(theta)

def slope_polar(theta: float, radius: float, radius_prime: float) -> float:
    return ((radius_prime * sin(theta) + radius * cos(theta)) /
            (radius_prime * cos(theta) - radius * sin(theta)))


def curvature_polar(radius: float, radius_prime: float, radius_prime_double: float) -> float:
    return (abs(radius ** 2 + 2 * radius_prime ** 2 - radius * radius_prime_double) /
            (radius ** 2 + radius_prime ** 2) ** 1.5)


## implicit, F(x, y) = 0

def slope_implicit(fx: float, fy: float) -> float:
    return -fx / fy


def curvature_implicit(fx: float, fy: float, fxx: float, fxy: float, fyy: float) -> float:
    return (abs(fy ** 2 * fxx - 2 * fx * fy * fxy + fx ** 2 * fyy) /
            (fx ** 2 + fy ** 2) ** 1.5)


class Transformation:
    """Rigid placement of a local frame inside the global frame.

    The local frame has its origin at ``local_origin`` and its +X axis
    rotated counter-clockwise by ``local_rotation``.
    """

    def __init__(self, local_origin: CartesianCoordinate, local_rotation=0.0):
        if not isinstance(local_rotation, Angle):
            local_rotation = Angle(local_rotation)
        self.local_origin = local_origin
        self.local_rotation = local_rotation
        c = cos(local_rotation.radians)
        s = sin(local_rotation.radians)
        self._rotation = np.array([[c, -s], [s, c]])
        self._origin = np.array([local_origin.x, local_origin.y])

    @classmethod
    def from_points(cls, local_origin: CartesianCoordinate,
                    local_axis_x: CartesianCoordinate) -> "Transformation":
        """Frame whose +X axis points from ``local_origin`` toward ``local_axis_x``."""
        return cls(local_origin, Angle.from_vector(local_axis_x.x - local_origin.x,
                                                   local_axis_x.y - local_origin.y))

    def is_identity(self) -> bool:
        return (self.local_origin.x == 0 and self.local_origin.y == 0
                and self.local_rotation.radians == 0)

    def to_global(self, coordinate: CartesianCoordinate) -> CartesianCoordinate:
        x, y = self._rotation @ np.array([coordinate.x, coordinate.y]) + self._origin
        return CartesianCoordinate(float(x), float(y), coordinate.tolerance)

    def to_local(self, coordinate: CartesianCoordinate) -> CartesianCoordinate:
        x, y = self._rotation.T @ (np.array([coordinate.x, coordinate.y]) - self._origin)
        return CartesianCoordinate(float(x), float(y), coordinate.tolerance)

    def __repr__(self):
        return f"Transformation({self.local_origin!r}, {self.local_rotation!r})"


__all__ = [
    "slope_parametric",
    "curvature_parametric",
    "slope_graph",
    "curvature_graph",
    "slope_polar",
    "curvature_polar",
    "slope_implicit",
    "curvature_implicit",
    "Transformation",
]
