"""Closed-form algebraic solvers for yapMath.

Real roots only: the solvers never return complex values, and inputs
that have no real solution raise :class:`yapmath.errors.GeometryError`.

The cubic solver follows the MathWorld treatment of the cubic formula.
For the normalized cubic ``x^3 + a2 x^2 + a1 x + a0`` it forms

    Q = (3 a1 - a2^2) / 9
    R = (9 a2 a1 - 27 a0 - 2 a2^3) / 54
    D = Q^3 + R^2

and picks between Cardano's single-root expression and the
trigonometric three-root expression.  The choice is made on ``D``, on
the sign of ``Q`` and on whether ``R / sqrt(|Q^3|)`` is a valid
arccosine argument.  Getting it wrong does not raise, it silently
returns the wrong roots.

Copyright (c) 2025 yapCAD contributors
MIT License
"""

from __future__ import annotations

import logging
from math import acos, cos, hypot, pi, sqrt
from typing import List, Tuple

import numpy as np

from yapmath.errors import GeometryError, OutOfRangeError
from yapmath.tolerance import (ZERO_TOLERANCE, get_tolerance, is_equal, is_greater,
                               is_greater_or_equal, is_less, is_negative,
                               is_within_inclusive, is_zero)

logger = logging.getLogger(__name__)


def cube_root(value: float) -> float:
    """Real cube root that keeps the sign of ``value``."""
    return float(np.cbrt(value))


def srss(*values: float) -> float:
    """Square root of the sum of the squares."""
    return hypot(*values)


# -----------------------------------------------------------------------------
# Quadratic
# -----------------------------------------------------------------------------

def quadratic_formula(a: float, b: float, c: float,
                      tolerance: float = ZERO_TOLERANCE) -> Tuple[float, float]:
    """Return the real roots of ``a x^2 + b x + c`` as ``(minus, plus)``.

    ``minus`` takes the negative square root of the discriminant and
    ``plus`` the positive one.

    Raises
    ------
    GeometryError
        If ``a`` is zero or the discriminant is negative.
    """
    if is_zero(a, tolerance):
        raise GeometryError(f'leading coefficient is zero, not a quadratic: a={a}')
    discriminant = b * b - 4 * a * c
    if is_negative(discriminant, tolerance):
        raise GeometryError('negative discriminant, no real roots',
                            {'a': a, 'b': b, 'c': c, 'discriminant': discriminant})
    root = sqrt(max(discriminant, 0.0))
    center = -b / (2 * a)
    delta = root / (2 * a)
    return (center - delta, center + delta)


# -----------------------------------------------------------------------------
# Cubic
# -----------------------------------------------------------------------------

def _normalize_cubic(a, b, c, d, tolerance):
    if is_zero(a, tolerance):
        raise GeometryError(f'leading coefficient is zero, not a cubic: a={a}')
    return d / a, c / a, b / a


def _cubic_roots_normalized(a0: float, a1: float, a2: float,
                            return_first_root: bool = False) -> List[float]:
    Q = (3 * a1 - a2 * a2) / 9.0
    R = (9 * a2 * a1 - 27 * a0 - 2 * a2 ** 3) / 54.0
    D = Q ** 3 + R * R

    # the trigonometric form only holds for Q < 0
    ratio_denominator = sqrt(abs(Q ** 3))
    if Q >= 0 or ratio_denominator == 0:
        acos_ratio = None
    else:
        acos_ratio = R / ratio_denominator

    if ((return_first_root and is_greater_or_equal(D, 0))
            or acos_ratio is None
            or is_less(acos_ratio, -1) or is_greater(acos_ratio, 1)):
        logger.debug('cubic: Cardano branch, D=%g', D)
        root_d = sqrt(max(D, 0.0))
        S = cube_root(R + root_d)
        T = cube_root(R - root_d)
        return [S + T - a2 / 3.0]

    logger.debug('cubic: trigonometric branch, D=%g', D)
    theta = acos(max(-1.0, min(1.0, acos_ratio)))
    amplitude = 2 * sqrt(abs(Q))
    shift = a2 / 3.0
    return [amplitude * cos(theta / 3.0) - shift,
            amplitude * cos((theta + 2 * pi) / 3.0) - shift,
            amplitude * cos((theta + 4 * pi) / 3.0) - shift]


def cubic_curve_roots(a: float, b: float, c: float, d: float,
                      tolerance: float = ZERO_TOLERANCE) -> List[float]:
    """Real roots of ``a x^3 + b x^2 + c x + d``.

    Returns three roots when the cubic has three real roots, otherwise a
    single root.
    """
    a0, a1, a2 = _normalize_cubic(a, b, c, d, tolerance)
    return _cubic_roots_normalized(a0, a1, a2)


def cubic_curve_lowest_root(a: float, b: float, c: float, d: float,
                            tolerance: float = ZERO_TOLERANCE) -> float:
    """Least real root of ``a x^3 + b x^2 + c x + d``."""
    a0, a1, a2 = _normalize_cubic(a, b, c, d, tolerance)
    B = (9 * a1 * a2 - 27 * a0 - 2 * a2 ** 3) / 27.0
    A = (3 * a1 - a2 * a2) / 3.0
    t_sqrt = B * B + (4 / 27.0) * A ** 3
    if is_negative(B) or is_negative(t_sqrt):
        return min(_cubic_roots_normalized(a0, a1, a2, return_first_root=True))
    t = cube_root(0.5 * (-B + sqrt(t_sqrt)))
    return cube_root(B + t ** 3) - t - a2 / 3.0


# -----------------------------------------------------------------------------
# Interpolation
# -----------------------------------------------------------------------------

def interpolation_linear(value_1, value_2, weight: float,
                         tolerance: float = ZERO_TOLERANCE):
    """Interpolate between two values (numbers or coordinates).

    ``weight`` of 0 returns ``value_1`` and 1 returns ``value_2``.
    """
    if not is_within_inclusive(weight, 0, 1, tolerance):
        raise OutOfRangeError(f'weight must be between 0 and 1, but was {weight}')
    return value_1 + (value_2 - value_1) * weight


def interpolation_linear_2d(point_o, point_ii, point_jj,
                            value_ii: float, value_ij: float,
                            value_ji: float, value_jj: float,
                            tolerance: float = ZERO_TOLERANCE) -> float:
    """Bilinear interpolation over the rectangle spanned by two corners.

    ``value_ii`` and ``value_jj`` belong to ``point_ii`` and
    ``point_jj``.  ``value_ij`` is the value at ``(jj.x, ii.y)`` and
    ``value_ji`` the value at ``(ii.x, jj.y)``.

    Raises
    ------
    GeometryError
        If the rectangle has zero width or height.
    OutOfRangeError
        If ``point_o`` lies outside the rectangle.
    """
    tolerance = get_tolerance(point_o, point_ii, point_jj, tolerance=tolerance)
    if is_equal(point_ii.x, point_jj.x, tolerance) or is_equal(point_ii.y, point_jj.y, tolerance):
        raise GeometryError('interpolation bounds have zero width or height',
                            {'ii': point_ii, 'jj': point_jj})
    x_lo, x_hi = sorted((point_ii.x, point_jj.x))
    y_lo, y_hi = sorted((point_ii.y, point_jj.y))
    if not (is_within_inclusive(point_o.x, x_lo, x_hi, tolerance) and
            is_within_inclusive(point_o.y, y_lo, y_hi, tolerance)):
        raise OutOfRangeError(f'point {point_o} lies outside the interpolation bounds')

    w_ii = (point_o.x - point_ii.x) * (point_o.y - point_ii.y)
    w_ij = (point_jj.x - point_o.x) * (point_o.y - point_ii.y)
    w_ji = (point_o.x - point_ii.x) * (point_jj.y - point_o.y)
    w_jj = (point_jj.x - point_o.x) * (point_jj.y - point_o.y)
    area = (point_jj.x - point_ii.x) * (point_jj.y - point_ii.y)
    return (value_ii * w_jj + value_ij * w_ji + value_ji * w_ij + value_jj * w_ii) / area


# -----------------------------------------------------------------------------
# Lines
# -----------------------------------------------------------------------------

def intersection_x(y: float, x1: float, y1: float, x2: float, y2: float,
                   tolerance: float = ZERO_TOLERANCE) -> float:
    """X coordinate where the line through two points reaches height ``y``."""
    if is_equal(x1, x2, tolerance) and is_equal(y1, y2, tolerance):
        raise GeometryError('identical points do not define a line')
    if is_equal(y1, y2, tolerance):
        if is_equal(y, y1, tolerance):
            raise GeometryError('line is collinear with the horizontal at y={}'.format(y))
        raise GeometryError('line is parallel to the horizontal at y={}'.format(y))
    return ((y - y1) * (x2 - x1)) / (y2 - y1) + x1


__all__ = [
    "cube_root",
    "srss",
    "quadratic_formula",
    "cubic_curve_roots",
    "cubic_curve_lowest_root",
    "interpolation_linear",
    "interpolation_linear_2d",
    "intersection_x",
]
