"""Base, first and second derivative triples for one curve component.

A curve family contributes a :class:`ComponentFormulas` strategy: three
plain functions ``(curve, parameter) -> value`` giving the component and
its first two derivatives in closed form.  :class:`ParametricComponents`
binds a strategy to a parent curve and exposes the triple as a chain of
:class:`~yapmath.parametrics.equation.ParametricEquation` objects, with
a scale factor and a current differentiation index.

Instances never change after construction.  Scaling and
differentiation return new instances; the receiver is left unchanged.

Copyright (c) 2025 yapCAD contributors
MIT License
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, Tuple, TypeVar

from yapmath.errors import OutOfRangeError, UnmodeledDerivativeError
from yapmath.parametrics.equation import ParametricEquation

C = TypeVar("C")
T = TypeVar("T")

Formula = Callable[[C, float], T]

#: orders modeled for every component: base, prime and double prime
MODELED_ORDERS = 3


@dataclass(frozen=True)
class ComponentFormulas(Generic[C, T]):
    """Closed-form base/prime/double-prime functions of a curve component.

    A slot left as ``None`` marks a derivative that exists but has no
    formula here; evaluating it raises
    :class:`~yapmath.errors.UnmodeledDerivativeError`.
    """

    name: str
    base: Formula
    prime: Optional[Formula] = None
    prime_double: Optional[Formula] = None


class ParametricComponents(Generic[C, T]):
    """A curve component and its first two derivatives.

    Parameters
    ----------
    parent : curve
        Geometric source of truth.  The component reads from the
        curve; the curve never refers back to its components.
    formulas : ComponentFormulas
        Closed forms for this component.
    scale : float, optional
        Multiplier applied to every order (default 1).
    differentiation_index : int, optional
        Active order: 0 base, 1 prime, 2 double prime (default 0).
    """

    def __init__(self, parent: C, formulas: ComponentFormulas[C, T],
                 scale: float = 1.0, differentiation_index: int = 0):
        if not 0 <= differentiation_index < MODELED_ORDERS:
            raise OutOfRangeError(
                f'differentiation index {differentiation_index} must be between 0 and {MODELED_ORDERS - 1}')
        self._parent = parent
        self._formulas = formulas
        self._scale = scale
        self._differentiation_index = differentiation_index

        double_prime = ParametricEquation(self.prime_double_by_parameter)
        prime = ParametricEquation(self.prime_by_parameter, double_prime)
        base = ParametricEquation(self.base_by_parameter, prime)
        self._components: Tuple[ParametricEquation[T], ...] = (base, prime, double_prime)

    # -- state -----------------------------------------------------------

    @property
    def parent(self) -> C:
        return self._parent

    @property
    def formulas(self) -> ComponentFormulas[C, T]:
        return self._formulas

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def differentiation_index(self) -> int:
        return self._differentiation_index

    @property
    def components(self) -> Tuple[ParametricEquation[T], ...]:
        return self._components

    def __getitem__(self, index: int) -> ParametricEquation[T]:
        return self._components[index]

    def __len__(self) -> int:
        return len(self._components)

    @property
    def current(self) -> ParametricEquation[T]:
        """Equation at the active differentiation index."""
        return self._components[self._differentiation_index]

    @property
    def differential(self) -> Optional[ParametricEquation[T]]:
        return self.current.differential

    # -- evaluation ------------------------------------------------------

    def _evaluate(self, formula: Optional[Formula], order: str, parameter: float) -> T:
        if formula is None:
            raise UnmodeledDerivativeError(
                f'{order} of {self._formulas.name} is not modeled',
                {'component': self._formulas.name, 'order': order})
        value = formula(self.parent, parameter)
        if self._scale == 1:
            return value
        return value * self._scale

    def base_by_parameter(self, parameter: float) -> T:
        return self._evaluate(self._formulas.base, 'base', parameter)

    def prime_by_parameter(self, parameter: float) -> T:
        return self._evaluate(self._formulas.prime, 'first derivative', parameter)

    def prime_double_by_parameter(self, parameter: float) -> T:
        return self._evaluate(self._formulas.prime_double, 'second derivative', parameter)

    def value_at(self, parameter: float) -> T:
        return self.current.value_at(parameter)

    # -- differentiation -------------------------------------------------

    def has_differential(self) -> bool:
        return self._differentiation_index < len(self._components) - 1

    def differentiate(self) -> "ParametricComponents[C, T]":
        """Copy advanced to the next derivative order."""
        index = self._differentiation_index + 1
        if index >= len(self._components):
            raise OutOfRangeError(
                f'index {index} must not be greater than {len(self._components) - 1} in order to differentiate')
        return self._copy(differentiation_index=index)

    def differentiate_by(self, index: int) -> "ParametricComponents[C, T]":
        """Copy set directly to derivative order ``index``."""
        if index < 0:
            raise OutOfRangeError(f'index {index} must not be less than 0')
        if index < self._differentiation_index:
            raise OutOfRangeError(
                f'differentiation index {index} cannot be less than current index {self._differentiation_index}')
        if index >= len(self._components):
            raise OutOfRangeError(
                f'index {index} must not be greater than {len(self._components) - 1} in order to differentiate')
        return self._copy(differentiation_index=index)

    # -- scaling ---------------------------------------------------------

    def _copy(self, scale: Optional[float] = None,
              differentiation_index: Optional[int] = None) -> "ParametricComponents[C, T]":
        return ParametricComponents(
            self.parent, self._formulas,
            self._scale if scale is None else scale,
            self._differentiation_index if differentiation_index is None else differentiation_index)

    def __mul__(self, factor: float) -> "ParametricComponents[C, T]":
        return self._copy(scale=self._scale * factor)

    __rmul__ = __mul__

    def __truediv__(self, denominator: float) -> "ParametricComponents[C, T]":
        return self._copy(scale=self._scale / denominator)

    def __repr__(self):
        return "ParametricComponents({}, scale={}, index={})".format(
            self._formulas.name, self._scale, self._differentiation_index)


__all__ = ["MODELED_ORDERS", "ComponentFormulas", "ParametricComponents"]
