"""Tests for slopes, curvatures and frame transforms."""

import pytest
from math import cos, pi, sin

from yapmath.coordinates import Angle, CartesianCoordinate
from yapmath.geometry import (
    Transformation, curvature_graph, curvature_implicit, curvature_parametric,
    curvature_polar, slope_graph, slope_implicit, slope_parametric, slope_polar,
)


class TestCircleCurvature:
    """Every representation of a circle of radius 2 has curvature 1/2."""

    radius = 2.0

    def test_parametric(self):
        t = 0.7
        r = self.radius
        kappa = curvature_parametric(-r * sin(t), r * cos(t), -r * cos(t), -r * sin(t))
        assert kappa == pytest.approx(0.5)

    def test_polar(self):
        assert curvature_polar(self.radius, 0.0, 0.0) == pytest.approx(0.5)

    def test_implicit(self):
        # F = x^2 + y^2 - r^2 at (r, 0)
        r = self.radius
        assert curvature_implicit(2 * r, 0.0, 2.0, 0.0, 2.0) == pytest.approx(0.5)

    def test_graph(self):
        # y = sqrt(r^2 - x^2) at x = 0: y' = 0, y'' = -1/r
        assert abs(curvature_graph(0.0, -1 / self.radius)) == pytest.approx(0.5)


class TestSlopes:

    def test_parametric(self):
        assert slope_parametric(2.0, 1.0) == pytest.approx(0.5)

    def test_graph(self):
        assert slope_graph(3.0) == 3.0

    def test_polar_circle_at_top(self):
        # a circle's tangent is horizontal at theta = pi / 2
        assert slope_polar(pi / 2, 1.0, 0.0) == pytest.approx(0.0, abs=1e-12)

    def test_implicit(self):
        assert slope_implicit(1.0, 1.0) == pytest.approx(-1.0)


class TestTransformation:
    """Test the local frame placement."""

    def test_identity(self):
        frame = Transformation(CartesianCoordinate(0, 0))
        assert frame.is_identity()
        point = CartesianCoordinate(3, 4)
        assert frame.to_global(point) == point

    def test_translate_and_rotate(self):
        frame = Transformation(CartesianCoordinate(1, 1), Angle(pi / 2))
        assert not frame.is_identity()
        point = frame.to_global(CartesianCoordinate(2, 0))
        assert point.x == pytest.approx(1.0)
        assert point.y == pytest.approx(3.0)

    def test_round_trip(self):
        frame = Transformation(CartesianCoordinate(-2, 5), 0.8)
        point = CartesianCoordinate(3.5, -1.25)
        back = frame.to_local(frame.to_global(point))
        assert back.x == pytest.approx(3.5)
        assert back.y == pytest.approx(-1.25)

    def test_from_points(self):
        frame = Transformation.from_points(CartesianCoordinate(0, 0), CartesianCoordinate(0, 5))
        assert frame.local_rotation.radians == pytest.approx(pi / 2)
        local = frame.to_local(CartesianCoordinate(0, 5))
        assert local.x == pytest.approx(5.0)
        assert local.y == pytest.approx(0.0, abs=1e-12)
