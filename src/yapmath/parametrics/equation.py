"""Single-valued parametric equations with an optional derivative chain.

A :class:`ParametricEquation` maps a scalar parameter ``s`` to a value
of type ``T`` (a float, an :class:`~yapmath.coordinates.Angle` or a
:class:`~yapmath.coordinates.CartesianCoordinate`).  It may hold a
reference to its own derivative, itself a ``ParametricEquation``.

Derivatives are wired once, at construction.  Chains are therefore
built outward-in: the highest modeled derivative first, then each lower
order wrapping the one above it.  There is no symbolic step that
computes a derivative later.
"""

from __future__ import annotations

from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class ParametricEquation(Generic[T]):
    """A function of one parameter, plus its derivative if one is modeled."""

    __slots__ = ("_value_at_position", "_differential")

    def __init__(self, function: Callable[[float], T],
                 differential: Optional["ParametricEquation[T]"] = None):
        if not callable(function):
            raise ValueError('bad function passed to ParametricEquation: {}'.format(function))
        self._value_at_position = function
        self._differential = differential

    @classmethod
    def constant(cls, value: T,
                 differential: Optional["ParametricEquation[T]"] = None) -> "ParametricEquation[T]":
        """Equation that returns ``value`` for every parameter."""
        return cls(lambda s: value, differential)

    @property
    def differential(self) -> Optional["ParametricEquation[T]"]:
        return self._differential

    def has_differential(self) -> bool:
        return self._differential is not None

    def value_at(self, s: float) -> T:
        return self._value_at_position(s)

    def __call__(self, s: float) -> T:
        return self._value_at_position(s)

    def __repr__(self):
        return "ParametricEquation({}, differential={})".format(
            getattr(self._value_at_position, '__name__', 'function'),
            self.has_differential())


__all__ = ["ParametricEquation"]
