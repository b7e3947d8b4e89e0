"""Common base for the yapMath curve hierarchy.

A curve owns its geometric parameters and builds its parametric
equation on first use.  Parametric components read those parameters
from the curve they were built for.

Curves that are placed in the plane (the conic sections) describe their
shape in a local frame: origin at the center or vertex, major axis
along +X.  :meth:`Curve.to_global` and :meth:`Curve.to_local` move
points between the two frames; they are the identity for curves that
are defined directly in global coordinates.

Copyright (c) 2025 yapCAD contributors
MIT License
"""

from __future__ import annotations

import copy as _copy
from typing import List, Optional, Tuple

from yapmath.coordinates import Angle, CartesianCoordinate
from yapmath.errors import UnsupportedCapabilityError
from yapmath.tolerance import DEFAULT_TOLERANCE


class Curve:
    """Base class for planar curves.

    Subclasses implement :meth:`_create_parametric_equation` and
    :meth:`default_limits`, and override the Cartesian queries they can
    answer.  The defaults raise
    :class:`~yapmath.errors.UnsupportedCapabilityError`.
    """

    #: parameter interval covered by relative positions 0 through 1
    parameter_domain: Tuple[float, float] = (0.0, 1.0)

    def __init__(self, tolerance: float = DEFAULT_TOLERANCE):
        self._tolerance = tolerance
        self._parametric = None
        self._range = None

    @property
    def tolerance(self) -> float:
        return self._tolerance

    # -- parametric form -------------------------------------------------

    def _create_parametric_equation(self):
        raise NotImplementedError

    @property
    def parametric(self):
        """Paired ``(x, y)`` parametric equation in the local frame."""
        if self._parametric is None:
            self._parametric = self._create_parametric_equation()
        return self._parametric

    def x_by_parameter(self, s: float) -> float:
        return self.parametric.x_component.base_by_parameter(s)

    def y_by_parameter(self, s: float) -> float:
        return self.parametric.y_component.base_by_parameter(s)

    def x_prime_by_parameter(self, s: float) -> float:
        return self.parametric.x_component.prime_by_parameter(s)

    def y_prime_by_parameter(self, s: float) -> float:
        return self.parametric.y_component.prime_by_parameter(s)

    def x_prime_double_by_parameter(self, s: float) -> float:
        return self.parametric.x_component.prime_double_by_parameter(s)

    def y_prime_double_by_parameter(self, s: float) -> float:
        return self.parametric.y_component.prime_double_by_parameter(s)

    def coordinate_by_parameter(self, s: float) -> CartesianCoordinate:
        """Global point at curve parameter ``s``."""
        local = CartesianCoordinate(self.x_by_parameter(s), self.y_by_parameter(s), self._tolerance)
        return self.to_global(local)

    # -- frames ----------------------------------------------------------

    def to_global(self, coordinate: CartesianCoordinate) -> CartesianCoordinate:
        return coordinate

    def to_local(self, coordinate: CartesianCoordinate) -> CartesianCoordinate:
        return coordinate

    # -- range -----------------------------------------------------------

    def default_limits(self) -> Tuple[CartesianCoordinate, CartesianCoordinate]:
        """Start and end coordinates of a freshly built range."""
        raise NotImplementedError

    @property
    def range(self):
        if self._range is None:
            from yapmath.tools.limits import CurveRange
            self._range = CurveRange(self)
        return self._range

    # -- Cartesian queries -----------------------------------------------

    def _unsupported(self, operation: str):
        return UnsupportedCapabilityError(
            f'{type(self).__name__} does not support {operation}',
            {'curve': type(self).__name__, 'operation': operation})

    def xs_at_y(self, y: float) -> List[float]:
        raise self._unsupported('xs_at_y')

    def ys_at_x(self, x: float) -> List[float]:
        raise self._unsupported('ys_at_x')

    def x_at_y(self, y: float) -> float:
        raise self._unsupported('x_at_y')

    def y_at_x(self, x: float) -> float:
        raise self._unsupported('y_at_x')

    def coordinate_by_angle(self, angle) -> CartesianCoordinate:
        raise self._unsupported('coordinate_by_angle')

    def is_intersecting_coordinate(self, coordinate: CartesianCoordinate,
                                   tolerance: Optional[float] = None) -> bool:
        raise self._unsupported('is_intersecting_coordinate')

    # -- copies ----------------------------------------------------------

    def copy(self) -> "Curve":
        """Independent copy with its own parametric equation and range."""
        result = _copy.copy(self)
        result._parametric = None
        result._range = None
        if self._range is not None:
            result._range = self._range.copy(result)
        return result


def _as_angle(value) -> Angle:
    return value if isinstance(value, Angle) else Angle(value)
