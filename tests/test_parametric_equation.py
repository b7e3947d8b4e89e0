"""Tests for parametric equations, component triples and paired equations."""

import pytest

from yapmath.coordinates import Angle, CartesianCoordinate
from yapmath.curves import CircularCurve, LinearCurve
from yapmath.errors import OutOfRangeError, UnmodeledDerivativeError
from yapmath.parametrics import (
    CartesianParametricEquationXY, ComponentFormulas, ParametricComponents,
    ParametricEquation, PolarParametricEquation,
)


class Quadratic:
    """Parent holding the coefficient of ``k t^2``."""

    def __init__(self, k):
        self.k = k


SQUARE = ComponentFormulas(
    name='square',
    base=lambda curve, t: curve.k * t * t,
    prime=lambda curve, t: 2 * curve.k * t,
    prime_double=lambda curve, t: 2 * curve.k,
)

PARTIAL = ComponentFormulas(name='partial', base=lambda curve, t: t)


class TestParametricEquation:

    def test_value_and_call(self):
        eq = ParametricEquation(lambda s: 3 * s)
        assert eq.value_at(2) == 6
        assert eq(2) == 6
        assert not eq.has_differential()
        assert eq.differential is None

    def test_constant(self):
        eq = ParametricEquation.constant(5.0)
        assert eq(0) == 5.0
        assert eq(100) == 5.0

    def test_differential_chain(self):
        prime = ParametricEquation.constant(2.0)
        eq = ParametricEquation(lambda s: 2 * s, prime)
        assert eq.has_differential()
        assert eq.differential(7) == 2.0

    def test_not_callable(self):
        with pytest.raises(ValueError):
            ParametricEquation(42)


class TestParametricComponents:
    """Test component triples and their differentiation index."""

    def test_orders(self):
        parent = Quadratic(3.0)
        comp = ParametricComponents(parent, SQUARE)
        assert len(comp) == 3
        assert comp.base_by_parameter(2) == 12.0
        assert comp.prime_by_parameter(2) == 12.0
        assert comp.prime_double_by_parameter(2) == 6.0
        assert comp[1](1) == 6.0

    def test_differential_chain_is_wired(self):
        parent = Quadratic(1.0)
        comp = ParametricComponents(parent, SQUARE)
        assert comp[0].differential is comp[1]
        assert comp[1].differential is comp[2]
        assert comp[2].differential is None

    def test_differentiate_advances_index(self):
        parent = Quadratic(1.0)
        comp = ParametricComponents(parent, SQUARE)
        first = comp.differentiate()
        second = first.differentiate()
        assert comp.differentiation_index == 0
        assert first.differentiation_index == 1
        assert second.differentiation_index == 2
        assert first.value_at(3) == 6.0
        assert second.value_at(3) == 2.0
        assert comp.has_differential()
        assert not second.has_differential()
        with pytest.raises(OutOfRangeError):
            second.differentiate()

    def test_differentiate_by(self):
        parent = Quadratic(1.0)
        comp = ParametricComponents(parent, SQUARE)
        assert comp.differentiate_by(2).value_at(9) == 2.0
        assert comp.differentiate_by(0).differentiation_index == 0
        with pytest.raises(OutOfRangeError):
            comp.differentiate_by(-1)
        with pytest.raises(OutOfRangeError):
            comp.differentiate_by(3)
        with pytest.raises(OutOfRangeError):
            comp.differentiate_by(2).differentiate_by(1)

    def test_bad_index(self):
        with pytest.raises(OutOfRangeError):
            ParametricComponents(Quadratic(1.0), SQUARE, differentiation_index=3)

    def test_scaling(self):
        parent = Quadratic(1.0)
        comp = ParametricComponents(parent, SQUARE)
        doubled = comp * 2
        halved = comp / 2
        assert doubled.value_at(3) == pytest.approx(18.0)
        assert halved.value_at(3) == pytest.approx(4.5)
        assert (3 * comp).scale == 3
        # the derivative scales with the component
        assert doubled.differentiate().value_at(3) == pytest.approx(12.0)
        assert doubled.differential(3) == pytest.approx(12.0)
        # originals are untouched
        assert comp.scale == 1.0

    def test_current_and_differential(self):
        parent = Quadratic(2.0)
        first = ParametricComponents(parent, SQUARE).differentiate()
        assert first.current(1) == 4.0
        assert first.differential(1) == 4.0

    def test_unmodeled_derivative(self):
        parent = Quadratic(1.0)
        comp = ParametricComponents(parent, PARTIAL)
        assert comp.value_at(4) == 4
        with pytest.raises(UnmodeledDerivativeError):
            comp.prime_by_parameter(4)

    def test_parent_outlives_temporary(self):
        comp = ParametricComponents(Quadratic(2.0), SQUARE)
        assert comp.value_at(3) == 18.0
        assert comp.parent.k == 2.0


class TestCartesianPair:
    """Test the (x, y) pair with a linear curve."""

    def test_coordinates_and_derivatives(self):
        line = LinearCurve(CartesianCoordinate(1, 1), CartesianCoordinate(3, 5))
        pair = line.parametric
        assert pair.coordinate_at(0.5) == CartesianCoordinate(2, 3)
        assert pair.differential_first().coordinate_at(0.2) == CartesianCoordinate(2, 4)
        assert pair.differential_second().coordinate_at(0.2) == CartesianCoordinate(0, 0)
        assert pair.differentiate().differentiation_index == 1

    def test_scaling_pair(self):
        line = LinearCurve(CartesianCoordinate(0, 0), CartesianCoordinate(1, 2))
        scaled = line.parametric * 3
        assert scaled.coordinate_at(1) == CartesianCoordinate(3, 6)
        assert (line.parametric / 2).coordinate_at(1) == CartesianCoordinate(0.5, 1)

    def test_equation_of_temporary_curve(self):
        pair = LinearCurve(CartesianCoordinate(0, 0), CartesianCoordinate(1, 1)).parametric
        assert pair.coordinate_at(0.5) == CartesianCoordinate(0.5, 0.5)

    def test_mismatched_index(self):
        parent = Quadratic(1.0)
        x = ParametricComponents(parent, SQUARE)
        y = ParametricComponents(parent, SQUARE, differentiation_index=1)
        with pytest.raises(ValueError):
            CartesianParametricEquationXY(x, y)


AZIMUTH = ComponentFormulas(
    name='azimuth',
    base=lambda curve, t: Angle(t),
    prime=lambda curve, t: Angle(0.0),
)


class TestPolarPair:
    """Test the (r, theta) pair."""

    def test_scaling_affects_radius_only(self):
        parent = Quadratic(1.0)
        radius = ParametricComponents(parent, SQUARE)
        azimuth = ParametricComponents(parent, AZIMUTH)
        pair = PolarParametricEquation(radius, azimuth) * 2
        point = pair.coordinate_at(1.0)
        assert point.radius == pytest.approx(2.0)
        assert point.azimuth.radians == pytest.approx(1.0)
        halved = PolarParametricEquation(radius, azimuth) / 2
        assert halved.coordinate_at(1.0).azimuth.radians == pytest.approx(1.0)

    def test_unmodeled_azimuth_second_derivative(self):
        parent = Quadratic(1.0)
        pair = PolarParametricEquation(ParametricComponents(parent, SQUARE),
                                       ParametricComponents(parent, AZIMUTH))
        second = pair.differential_second()
        with pytest.raises(UnmodeledDerivativeError):
            second.coordinate_at(0.5)

    def test_mismatched_index(self):
        parent = Quadratic(1.0)
        with pytest.raises(ValueError):
            PolarParametricEquation(ParametricComponents(parent, SQUARE, differentiation_index=1),
                                    ParametricComponents(parent, AZIMUTH))

    def test_conic_focus_form(self):
        circle = CircularCurve(2.0)
        polar = circle.radius_focus_parametric
        assert polar.coordinate_at(0.3).radius == pytest.approx(2.0)
        assert polar.azimuth.value_at(0.3).radians == pytest.approx(0.3)
        with pytest.raises(UnmodeledDerivativeError):
            polar.azimuth.prime_double_by_parameter(0.3)
