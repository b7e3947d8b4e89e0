"""Parametric form of a straight line: ``P(t) = I + (J - I) t``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from yapmath.parametrics.components import ComponentFormulas, ParametricComponents
from yapmath.parametrics.paired import CartesianParametricEquationXY

if TYPE_CHECKING:  # pragma: no cover
    from yapmath.curves.linear import LinearCurve


LINEAR_X = ComponentFormulas(
    name='linear x',
    base=lambda curve, t: curve.control_point_i.x + (curve.control_point_j.x - curve.control_point_i.x) * t,
    prime=lambda curve, t: curve.control_point_j.x - curve.control_point_i.x,
    prime_double=lambda curve, t: 0.0,
)

LINEAR_Y = ComponentFormulas(
    name='linear y',
    base=lambda curve, t: curve.control_point_i.y + (curve.control_point_j.y - curve.control_point_i.y) * t,
    prime=lambda curve, t: curve.control_point_j.y - curve.control_point_i.y,
    prime_double=lambda curve, t: 0.0,
)


def linear_parametric(curve: "LinearCurve") -> CartesianParametricEquationXY["LinearCurve"]:
    return CartesianParametricEquationXY(ParametricComponents(curve, LINEAR_X),
                                         ParametricComponents(curve, LINEAR_Y))


__all__ = ["LINEAR_X", "LINEAR_Y", "linear_parametric"]
