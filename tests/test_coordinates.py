"""Tests for the coordinate value types."""

import pytest
from math import pi, sqrt

from yapmath.coordinates import (
    Angle, BarycentricCoordinate, CartesianCoordinate, CartesianOffset,
    PolarCoordinate, PolarOffset, TrilinearCoordinate, wrap_angle,
)


class TestAngle:
    """Test angle wrapping and arithmetic."""

    def test_wrap(self):
        assert wrap_angle(0.0) == 0.0
        assert wrap_angle(3 * pi / 2) == pytest.approx(-pi / 2)
        assert wrap_angle(-3 * pi / 2) == pytest.approx(pi / 2)
        assert wrap_angle(pi) == pytest.approx(pi)

    def test_wrapped_on_construction(self):
        assert Angle(5 * pi / 2).radians == pytest.approx(pi / 2)

    def test_degrees(self):
        angle = Angle.from_degrees(90)
        assert angle.radians == pytest.approx(pi / 2)
        assert angle.degrees == pytest.approx(90)

    def test_from_vector(self):
        assert Angle.from_vector(0, 1).radians == pytest.approx(pi / 2)
        assert Angle.from_vector(-1, 0).radians == pytest.approx(pi)

    def test_arithmetic(self):
        a = Angle(pi / 4)
        assert (a + a).radians == pytest.approx(pi / 2)
        assert (a - Angle(pi / 2)).radians == pytest.approx(-pi / 4)
        assert (a * 2).radians == pytest.approx(pi / 2)
        assert (a / 2).radians == pytest.approx(pi / 8)
        assert (-a).radians == pytest.approx(-pi / 4)
        assert float(a) == pytest.approx(pi / 4)

    def test_rotate(self):
        x, y = Angle(pi / 2).rotate(1.0, 0.0)
        assert x == pytest.approx(0.0, abs=1e-12)
        assert y == pytest.approx(1.0)

    def test_equality_uses_tolerance(self):
        assert Angle(1.0, 1e-3) == Angle(1.0005)
        assert Angle(1.0) != Angle(1.0005)
        assert Angle(0.5) == 0.5


class TestCartesian:
    """Test planar points and offsets."""

    def test_offset_between_points(self):
        a = CartesianCoordinate(1, 2)
        b = CartesianCoordinate(4, 6)
        offset = b - a
        assert isinstance(offset, CartesianOffset)
        assert offset == CartesianOffset(3, 4)
        assert offset.length() == pytest.approx(5.0)

    def test_point_plus_offset(self):
        point = CartesianCoordinate(1, 2) + CartesianOffset(3, 4)
        assert point == CartesianCoordinate(4, 6)

    def test_scaling(self):
        assert CartesianCoordinate(1, 2) * 3 == CartesianCoordinate(3, 6)
        assert 3 * CartesianCoordinate(1, 2) == CartesianCoordinate(3, 6)
        assert CartesianCoordinate(3, 6) / 3 == CartesianCoordinate(1, 2)
        assert -CartesianCoordinate(1, 2) == CartesianCoordinate(-1, -2)

    def test_immutable(self):
        point = CartesianCoordinate(1, 2)
        with pytest.raises(AttributeError):
            point.x = 5

    def test_equality_tolerance(self):
        assert CartesianCoordinate(1, 1, 1e-3) == CartesianCoordinate(1.0001, 1)
        assert CartesianCoordinate(1, 1) != CartesianCoordinate(1.0001, 1)

    def test_distance_and_rotation(self):
        a = CartesianCoordinate(0, 0)
        b = CartesianCoordinate(3, 4)
        assert a.distance_to(b) == pytest.approx(5.0)
        rotated = CartesianCoordinate(2, 1).rotate_about_point(CartesianCoordinate(1, 1), pi / 2)
        assert rotated.x == pytest.approx(1.0)
        assert rotated.y == pytest.approx(2.0)

    def test_offset_coordinate(self):
        point = CartesianCoordinate(1, 1).offset_coordinate(2.0, Angle(pi / 2))
        assert point.x == pytest.approx(1.0)
        assert point.y == pytest.approx(3.0)

    def test_iteration(self):
        assert list(CartesianCoordinate(1, 2)) == [1, 2]


class TestPolar:
    """Test polar values."""

    def test_round_trip(self):
        point = CartesianCoordinate(-3, 4)
        polar = point.to_polar()
        assert polar.radius == pytest.approx(5.0)
        back = polar.to_cartesian()
        assert back.x == pytest.approx(-3)
        assert back.y == pytest.approx(4)

    def test_azimuth_coerced_to_angle(self):
        polar = PolarCoordinate(2.0, pi / 2)
        assert isinstance(polar.azimuth, Angle)

    def test_polar_offset(self):
        offset = PolarOffset(2.0, Angle(pi)).to_cartesian_offset()
        assert offset.x == pytest.approx(-2.0)
        assert offset.y == pytest.approx(0.0, abs=1e-12)
        assert (PolarOffset(2.0, 0.0) * 2).radius == 4.0


class TestTriangleCoordinates:
    """Test barycentric and trilinear coordinates."""

    a = CartesianCoordinate(0, 0)
    b = CartesianCoordinate(4, 0)
    c = CartesianCoordinate(0, 3)

    def test_barycentric_vertices(self):
        assert BarycentricCoordinate(1, 0, 0).to_cartesian(self.a, self.b, self.c) == self.a
        assert BarycentricCoordinate(0, 1, 0).to_cartesian(self.a, self.b, self.c) == self.b

    def test_trilinear_round_trip(self):
        bary = BarycentricCoordinate(0.2, 0.3, 0.5)
        back = bary.to_trilinear(self.a, self.b, self.c).to_barycentric(self.a, self.b, self.c)
        assert back.alpha == pytest.approx(0.2)
        assert back.beta == pytest.approx(0.3)
        assert back.gamma == pytest.approx(0.5)

    def test_trilinear_to_barycentric_normalized(self):
        tri = TrilinearCoordinate(1, 1, 1)
        bary = tri.to_barycentric(self.a, self.b, self.c)
        assert bary.alpha + bary.beta + bary.gamma == pytest.approx(1.0)
        # incenter weights are proportional to the side lengths 5, 3, 4
        assert bary.alpha == pytest.approx(5 / 12)
        assert bary.beta == pytest.approx(3 / 12)
        assert bary.gamma == pytest.approx(4 / 12)

    def test_incenter(self):
        incenter = TrilinearCoordinate(1, 1, 1).to_cartesian(self.a, self.b, self.c)
        # inradius of a 3-4-5 right triangle is 1
        assert incenter.x == pytest.approx(1.0)
        assert incenter.y == pytest.approx(1.0)
        assert sqrt(2) == pytest.approx(incenter.distance_to(self.a))
