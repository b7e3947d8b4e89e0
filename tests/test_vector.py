"""Tests for planar vector algebra."""

import pytest
from math import pi, sqrt

from yapmath.coordinates import CartesianCoordinate
from yapmath.errors import GeometryError
from yapmath.vector import (
    Vector, cross, dot, unit_normal_from_components, unit_normal_vector,
    unit_tangent_from_components, unit_tangent_vector,
)


class TestScalarProducts:

    def test_dot(self):
        assert dot(1, 2, 3, 4) == 11

    def test_cross(self):
        assert cross(1, 0, 0, 1) == 1
        assert cross(0, 1, 1, 0) == -1


class TestVector:
    """Test the Vector value type."""

    def test_from_points(self):
        v = Vector.from_points(CartesianCoordinate(1, 1), CartesianCoordinate(4, 5))
        assert v == Vector(3, 4)
        assert v.magnitude() == pytest.approx(5.0)
        assert v.magnitude_squared() == 25

    def test_unit(self):
        u = Vector(3, 4).unit()
        assert u.x == pytest.approx(0.6)
        assert u.y == pytest.approx(0.8)

    def test_unit_of_zero_vector(self):
        with pytest.raises(GeometryError):
            Vector(0, 0).unit()

    def test_normal_is_counter_clockwise(self):
        assert Vector(1, 0).normal() == Vector(0, 1)

    def test_angles(self):
        assert Vector(0, 2).angle().radians == pytest.approx(pi / 2)
        assert Vector(1, 0).angle_between(Vector(0, 1)) == pytest.approx(pi / 2)
        assert Vector(1, 0).angle_between(Vector(-1, 0)) == pytest.approx(pi)

    def test_angle_between_zero_vector(self):
        with pytest.raises(GeometryError):
            Vector(0, 0).angle_between(Vector(1, 0))

    def test_area(self):
        assert Vector(2, 0).area(Vector(0, 2)) == pytest.approx(2.0)

    def test_orientation_predicates(self):
        assert Vector(1, 0).is_orthogonal(Vector(0, 3))
        assert Vector(1, 1).is_collinear_same_direction(Vector(2, 2), 1e-9)
        assert Vector(1, 1).is_collinear_opposite_direction(Vector(-2, -2), 1e-9)
        assert Vector(1, 0).is_concave(Vector(1, 1))
        assert Vector(1, 0).is_convex(Vector(-1, 1))

    def test_arithmetic(self):
        assert Vector(1, 2) + Vector(3, 4) == Vector(4, 6)
        assert Vector(1, 2) - Vector(3, 4) == Vector(-2, -2)
        assert Vector(1, 2) * 2 == Vector(2, 4)
        assert Vector(2, 4) / 2 == Vector(1, 2)
        assert -Vector(1, 2) == Vector(-1, -2)


class TestUnitVectors:

    def test_tangent_and_normal_between_points(self):
        i = CartesianCoordinate(0, 0)
        j = CartesianCoordinate(0, 5)
        tangent = unit_tangent_vector(i, j)
        normal = unit_normal_vector(i, j)
        assert tangent == Vector(0, 1)
        assert normal == Vector(-1, 0)

    def test_from_components(self):
        tangent = unit_tangent_from_components(1, 1)
        normal = unit_normal_from_components(1, 1)
        assert tangent.x == pytest.approx(1 / sqrt(2))
        assert normal.x == pytest.approx(-1 / sqrt(2))
        assert normal.y == pytest.approx(1 / sqrt(2))
