"""Paired parametric equations: Cartesian ``(x, y)`` and polar ``(r, theta)``.

Both members of a pair share one differentiation index.
Differentiating the pair differentiates both members in lockstep.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from yapmath.coordinates import Angle, CartesianCoordinate, PolarCoordinate
from yapmath.parametrics.components import ParametricComponents

C = TypeVar("C")


class CartesianParametricEquationXY(Generic[C]):
    """``x(s)`` and ``y(s)`` components of a planar curve."""

    def __init__(self, x: ParametricComponents[C, float], y: ParametricComponents[C, float]):
        if x.differentiation_index != y.differentiation_index:
            raise ValueError('x and y components must share a differentiation index')
        self._x = x
        self._y = y

    @property
    def x_component(self) -> ParametricComponents[C, float]:
        return self._x

    @property
    def y_component(self) -> ParametricComponents[C, float]:
        return self._y

    @property
    def differentiation_index(self) -> int:
        return self._x.differentiation_index

    def differentiate(self) -> "CartesianParametricEquationXY[C]":
        return CartesianParametricEquationXY(self._x.differentiate(), self._y.differentiate())

    def differentiate_by(self, index: int) -> "CartesianParametricEquationXY[C]":
        return CartesianParametricEquationXY(self._x.differentiate_by(index),
                                             self._y.differentiate_by(index))

    def differential_first(self) -> "CartesianParametricEquationXY[C]":
        return self.differentiate_by(1)

    def differential_second(self) -> "CartesianParametricEquationXY[C]":
        return self.differentiate_by(2)

    def has_differential(self) -> bool:
        return self._x.has_differential() or self._y.has_differential()

    def coordinate_at(self, s: float) -> CartesianCoordinate:
        """Point (or derivative vector) at parameter ``s``."""
        return CartesianCoordinate(self._x.value_at(s), self._y.value_at(s))

    def __mul__(self, factor: float) -> "CartesianParametricEquationXY[C]":
        return CartesianParametricEquationXY(self._x * factor, self._y * factor)

    __rmul__ = __mul__

    def __truediv__(self, denominator: float) -> "CartesianParametricEquationXY[C]":
        return CartesianParametricEquationXY(self._x / denominator, self._y / denominator)

    def __repr__(self):
        return f"CartesianParametricEquationXY({self._x!r}, {self._y!r})"


class PolarParametricEquation(Generic[C]):
    """Radius ``r(s)`` and azimuth ``theta(s)`` components of a planar curve.

    Scaling a polar curve scales its radius only; the azimuth is left
    unchanged so the shape is preserved.
    """

    def __init__(self, radius: ParametricComponents[C, float],
                 azimuth: ParametricComponents[C, Angle]):
        if radius.differentiation_index != azimuth.differentiation_index:
            raise ValueError('radius and azimuth components must share a differentiation index')
        self._radius = radius
        self._azimuth = azimuth

    @property
    def radius(self) -> ParametricComponents[C, float]:
        return self._radius

    @property
    def azimuth(self) -> ParametricComponents[C, Angle]:
        return self._azimuth

    @property
    def differentiation_index(self) -> int:
        return self._radius.differentiation_index

    def differentiate(self) -> "PolarParametricEquation[C]":
        return PolarParametricEquation(self._radius.differentiate(), self._azimuth.differentiate())

    def differentiate_by(self, index: int) -> "PolarParametricEquation[C]":
        return PolarParametricEquation(self._radius.differentiate_by(index),
                                       self._azimuth.differentiate_by(index))

    def differential_first(self) -> "PolarParametricEquation[C]":
        return self.differentiate_by(1)

    def differential_second(self) -> "PolarParametricEquation[C]":
        return self.differentiate_by(2)

    def has_differential(self) -> bool:
        return self._radius.has_differential() or self._azimuth.has_differential()

    def coordinate_at(self, s: float) -> PolarCoordinate:
        return PolarCoordinate(self._radius.value_at(s), self._azimuth.value_at(s))

    def __mul__(self, factor: float) -> "PolarParametricEquation[C]":
        return PolarParametricEquation(self._radius * factor, self._azimuth)

    __rmul__ = __mul__

    def __truediv__(self, denominator: float) -> "PolarParametricEquation[C]":
        return PolarParametricEquation(self._radius / denominator, self._azimuth)

    def __repr__(self):
        return f"PolarParametricEquation({self._radius!r}, {self._azimuth!r})"


__all__ = ["CartesianParametricEquationXY", "PolarParametricEquation"]
