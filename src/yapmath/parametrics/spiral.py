"""Logarithmic spiral components, ``r = r0 exp(k theta)``.

With ``E = r0 exp(k theta)``:

    x   = E cos(theta)
    x'  = E (k cos(theta) - sin(theta))
    x'' = E ((k^2 - 1) cos(theta) - 2 k sin(theta))
    y   = E sin(theta)
    y'  = E (k sin(theta) + cos(theta))
    y'' = E ((k^2 - 1) sin(theta) + 2 k cos(theta))
"""

from __future__ import annotations

from math import cos, exp, sin
from typing import TYPE_CHECKING

from yapmath.parametrics.components import ComponentFormulas, ParametricComponents
from yapmath.parametrics.paired import CartesianParametricEquationXY

if TYPE_CHECKING:  # pragma: no cover
    from yapmath.curves.spiral import LogarithmicSpiralCurve


def _radius(curve, theta):
    return curve.radius_at_origin * exp(curve.radius_change_with_rotation * theta)


def _k(curve):
    return curve.radius_change_with_rotation


SPIRAL_X = ComponentFormulas(
    name='logarithmic spiral x',
    base=lambda curve, t: _radius(curve, t) * cos(t),
    prime=lambda curve, t: _radius(curve, t) * (_k(curve) * cos(t) - sin(t)),
    prime_double=lambda curve, t: _radius(curve, t) * ((_k(curve) ** 2 - 1) * cos(t)
                                                       - 2 * _k(curve) * sin(t)),
)

SPIRAL_Y = ComponentFormulas(
    name='logarithmic spiral y',
    base=lambda curve, t: _radius(curve, t) * sin(t),
    prime=lambda curve, t: _radius(curve, t) * (_k(curve) * sin(t) + cos(t)),
    prime_double=lambda curve, t: _radius(curve, t) * ((_k(curve) ** 2 - 1) * sin(t)
                                                       + 2 * _k(curve) * cos(t)),
)


def logarithmic_spiral_parametric(curve: "LogarithmicSpiralCurve") -> CartesianParametricEquationXY["LogarithmicSpiralCurve"]:
    return CartesianParametricEquationXY(ParametricComponents(curve, SPIRAL_X),
                                         ParametricComponents(curve, SPIRAL_Y))


__all__ = ["SPIRAL_X", "SPIRAL_Y", "logarithmic_spiral_parametric"]
