"""Parametric components of the conic sections.

Local-origin forms, all in the curve's local frame with the major axis
along +X.  ``a`` is the distance from the local origin to the major
vertex and ``b`` the distance to the minor vertex.

- elliptical (and circular): ``x = a cos t``, ``y = b sin t``
- hyperbolic: ``x = a cosh t``, ``y = b sinh t``
- parabolic, vertex at the origin with focal distance ``f``:
  ``x = f t^2``, ``y = 2 f t``

Focus-relative forms, with ``theta`` measured at the right focus
``(c, 0)``:

- radius: ``r = l / (1 - e cos theta)`` where ``l = e d`` is the
  semilatus rectum, ``e`` the eccentricity and ``d`` the distance from
  the focus to its directrix
- azimuth: the rotation ``theta`` itself
- position: ``x = c + sigma r cos theta``, ``y = r sin theta`` where
  ``sigma`` is the curve's ``focus_direction``: -1 when the directrix of
  the right focus lies on the +X side (ellipse), +1 otherwise

Copyright (c) 2025 yapCAD contributors
MIT License
"""

from __future__ import annotations

from math import cos, cosh, sin, sinh
from typing import TYPE_CHECKING

from yapmath.coordinates import Angle
from yapmath.parametrics.components import ComponentFormulas, ParametricComponents
from yapmath.parametrics.paired import CartesianParametricEquationXY, PolarParametricEquation

if TYPE_CHECKING:  # pragma: no cover
    from yapmath.curves.conic import ConicSectionCurve
    from yapmath.curves.elliptical import EllipticalCurve
    from yapmath.curves.hyperbolic import HyperbolicCurve
    from yapmath.curves.parabolic import ParabolicCurve


def _a(curve):
    return curve.distance_from_vertex_major_to_origin


def _b(curve):
    return curve.distance_from_vertex_minor_to_origin


# -----------------------------------------------------------------------------
# Elliptical
# -----------------------------------------------------------------------------

ELLIPTICAL_X = ComponentFormulas(
    name='elliptical x',
    base=lambda curve, t: _a(curve) * cos(t),
    prime=lambda curve, t: -_a(curve) * sin(t),
    prime_double=lambda curve, t: -_a(curve) * cos(t),
)

ELLIPTICAL_Y = ComponentFormulas(
    name='elliptical y',
    base=lambda curve, t: _b(curve) * sin(t),
    prime=lambda curve, t: _b(curve) * cos(t),
    prime_double=lambda curve, t: -_b(curve) * sin(t),
)


def elliptical_parametric(curve: "EllipticalCurve") -> CartesianParametricEquationXY["EllipticalCurve"]:
    return CartesianParametricEquationXY(ParametricComponents(curve, ELLIPTICAL_X),
                                         ParametricComponents(curve, ELLIPTICAL_Y))


# -----------------------------------------------------------------------------
# Hyperbolic
# -----------------------------------------------------------------------------

HYPERBOLIC_X = ComponentFormulas(
    name='hyperbolic x',
    base=lambda curve, t: _a(curve) * cosh(t),
    prime=lambda curve, t: _a(curve) * sinh(t),
    prime_double=lambda curve, t: _a(curve) * cosh(t),
)

HYPERBOLIC_Y = ComponentFormulas(
    name='hyperbolic y',
    base=lambda curve, t: _b(curve) * sinh(t),
    prime=lambda curve, t: _b(curve) * cosh(t),
    prime_double=lambda curve, t: _b(curve) * sinh(t),
)


def hyperbolic_parametric(curve: "HyperbolicCurve") -> CartesianParametricEquationXY["HyperbolicCurve"]:
    return CartesianParametricEquationXY(ParametricComponents(curve, HYPERBOLIC_X),
                                         ParametricComponents(curve, HYPERBOLIC_Y))


# -----------------------------------------------------------------------------
# Parabolic, vertex form
# -----------------------------------------------------------------------------

def _f(curve):
    return curve.distance_from_focus_to_origin


PARABOLIC_X = ComponentFormulas(
    name='parabolic x',
    base=lambda curve, t: _f(curve) * t ** 2,
    prime=lambda curve, t: 2 * _f(curve) * t,
    prime_double=lambda curve, t: 2 * _f(curve),
)

PARABOLIC_Y = ComponentFormulas(
    name='parabolic y',
    base=lambda curve, t: 2 * _f(curve) * t,
    prime=lambda curve, t: 2 * _f(curve),
    prime_double=lambda curve, t: 0.0,
)


def parabolic_parametric(curve: "ParabolicCurve") -> CartesianParametricEquationXY["ParabolicCurve"]:
    return CartesianParametricEquationXY(ParametricComponents(curve, PARABOLIC_X),
                                         ParametricComponents(curve, PARABOLIC_Y))


# -----------------------------------------------------------------------------
# Focus-relative radius and azimuth
# -----------------------------------------------------------------------------

def focus_radius(curve, theta):
    e = curve.eccentricity
    return curve.semilatus_rectum_distance / (1 - e * cos(theta))


def focus_radius_prime(curve, theta):
    e = curve.eccentricity
    u = 1 - e * cos(theta)
    return -curve.semilatus_rectum_distance * e * sin(theta) / u ** 2


def focus_radius_prime_double(curve, theta):
    e = curve.eccentricity
    u = 1 - e * cos(theta)
    return (-curve.semilatus_rectum_distance * e
            * (cos(theta) * u - 2 * e * sin(theta) ** 2) / u ** 3)


RADIUS_FOCUS_LENGTH = ComponentFormulas(
    name='focus radius',
    base=focus_radius,
    prime=focus_radius_prime,
    prime_double=focus_radius_prime_double,
)

# the angular rate is not modeled past the rotation itself
RADIUS_FOCUS_ROTATION = ComponentFormulas(
    name='focus rotation',
    base=lambda curve, theta: Angle(theta),
    prime=lambda curve, theta: Angle(0.0),
    prime_double=None,
)


def radius_focus_parametric(curve: "ConicSectionCurve") -> PolarParametricEquation["ConicSectionCurve"]:
    return PolarParametricEquation(ParametricComponents(curve, RADIUS_FOCUS_LENGTH),
                                   ParametricComponents(curve, RADIUS_FOCUS_ROTATION))


# -----------------------------------------------------------------------------
# Focus-relative position
# -----------------------------------------------------------------------------

def _focus_x(curve, theta):
    r = focus_radius(curve, theta)
    return curve.distance_from_focus_to_origin + curve.focus_direction * r * cos(theta)


def _focus_x_prime(curve, theta):
    r = focus_radius(curve, theta)
    dr = focus_radius_prime(curve, theta)
    return curve.focus_direction * (dr * cos(theta) - r * sin(theta))


def _focus_x_prime_double(curve, theta):
    r = focus_radius(curve, theta)
    dr = focus_radius_prime(curve, theta)
    ddr = focus_radius_prime_double(curve, theta)
    return curve.focus_direction * (ddr * cos(theta) - 2 * dr * sin(theta) - r * cos(theta))


def _focus_y(curve, theta):
    return focus_radius(curve, theta) * sin(theta)


def _focus_y_prime(curve, theta):
    r = focus_radius(curve, theta)
    dr = focus_radius_prime(curve, theta)
    return dr * sin(theta) + r * cos(theta)


def _focus_y_prime_double(curve, theta):
    r = focus_radius(curve, theta)
    dr = focus_radius_prime(curve, theta)
    ddr = focus_radius_prime_double(curve, theta)
    return ddr * sin(theta) + 2 * dr * cos(theta) - r * sin(theta)


FOCUS_X = ComponentFormulas(name='focus x', base=_focus_x,
                            prime=_focus_x_prime, prime_double=_focus_x_prime_double)

FOCUS_Y = ComponentFormulas(name='focus y', base=_focus_y,
                            prime=_focus_y_prime, prime_double=_focus_y_prime_double)


def focus_parametric(curve: "ConicSectionCurve") -> CartesianParametricEquationXY["ConicSectionCurve"]:
    """Position about the right focus, parametrized by the focus rotation."""
    return CartesianParametricEquationXY(ParametricComponents(curve, FOCUS_X),
                                         ParametricComponents(curve, FOCUS_Y))


__all__ = [
    "ELLIPTICAL_X", "ELLIPTICAL_Y", "elliptical_parametric",
    "HYPERBOLIC_X", "HYPERBOLIC_Y", "hyperbolic_parametric",
    "PARABOLIC_X", "PARABOLIC_Y", "parabolic_parametric",
    "focus_radius", "focus_radius_prime", "focus_radius_prime_double",
    "RADIUS_FOCUS_LENGTH", "RADIUS_FOCUS_ROTATION", "radius_focus_parametric",
    "FOCUS_X", "FOCUS_Y", "focus_parametric",
]
