"""Parametric equations and per-family closed-form derivative triples."""

from yapmath.parametrics.components import ComponentFormulas, ParametricComponents
from yapmath.parametrics.equation import ParametricEquation
from yapmath.parametrics.paired import CartesianParametricEquationXY, PolarParametricEquation

__all__ = [
    "ParametricEquation",
    "ComponentFormulas",
    "ParametricComponents",
    "CartesianParametricEquationXY",
    "PolarParametricEquation",
]
