"""Bezier curve components of order 1, 2 and 3.

Control points come from the parent curve as ``b_0`` .. ``b_3``:
``b_0``/``b_3`` are the end points and ``b_1``/``b_2`` the handle tips.
The quadratic form uses ``b_0``, ``b_1`` and ``b_3``; the linear form
uses only the end points.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from yapmath.parametrics.components import ComponentFormulas, ParametricComponents
from yapmath.parametrics.paired import CartesianParametricEquationXY

if TYPE_CHECKING:  # pragma: no cover
    from yapmath.curves.bezier import BezierCurve


## scalar Bernstein forms; p is (b0, b1, b2, b3) along one axis

def _order1(p, t):
    return p[0] * (1 - t) + p[3] * t

def _order1_prime(p, t):
    return p[3] - p[0]

def _order1_prime_double(p, t):
    return 0.0

def _order2(p, t):
    return p[0] * (1 - t) ** 2 + 2 * p[1] * t * (1 - t) + p[3] * t ** 2

def _order2_prime(p, t):
    return -2 * p[0] * (1 - t) + 2 * p[1] * (1 - 2 * t) + 2 * p[3] * t

def _order2_prime_double(p, t):
    return 2 * p[0] - 4 * p[1] + 2 * p[3]

def _order3(p, t):
    return (p[0] * (1 - t) ** 3 + 3 * p[1] * t * (1 - t) ** 2
            + 3 * p[2] * t ** 2 * (1 - t) + p[3] * t ** 3)

def _order3_prime(p, t):
    return (-3 * p[0] * (1 - t) ** 2 + 3 * p[1] * (1 - 4 * t + 3 * t ** 2)
            + 3 * p[2] * (2 * t - 3 * t ** 2) + 3 * p[3] * t ** 2)

def _order3_prime_double(p, t):
    return (6 * p[0] * (1 - t) + p[1] * (18 * t - 12)
            + p[2] * (6 - 18 * t) + 6 * p[3] * t)


_FORMS = {
    1: (_order1, _order1_prime, _order1_prime_double),
    2: (_order2, _order2_prime, _order2_prime_double),
    3: (_order3, _order3_prime, _order3_prime_double),
}


def _axis(curve, axis):
    return tuple(getattr(point, axis) for point in
                 (curve.b_0(), curve.b_1(), curve.b_2(), curve.b_3()))


def _formulas(order: int, axis: str) -> ComponentFormulas:
    base, prime, prime_double = _FORMS[order]
    return ComponentFormulas(
        name=f'bezier order {order} {axis}',
        base=lambda curve, t: base(_axis(curve, axis), t),
        prime=lambda curve, t: prime(_axis(curve, axis), t),
        prime_double=lambda curve, t: prime_double(_axis(curve, axis), t),
    )


BEZIER_FORMULAS = {(order, axis): _formulas(order, axis)
                   for order in _FORMS for axis in ('x', 'y')}


def bezier_parametric(curve: "BezierCurve") -> CartesianParametricEquationXY["BezierCurve"]:
    """Paired equation for ``curve`` at its order."""
    order = curve.order
    if order not in _FORMS:
        raise ValueError('bad order passed to bezier_parametric: {}'.format(order))
    return CartesianParametricEquationXY(
        ParametricComponents(curve, BEZIER_FORMULAS[(order, 'x')]),
        ParametricComponents(curve, BEZIER_FORMULAS[(order, 'y')]))


__all__ = ["BEZIER_FORMULAS", "bezier_parametric"]
