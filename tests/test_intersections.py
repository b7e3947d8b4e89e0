"""Tests for tangency and intersection between curve pairs."""

import logging

import pytest
from math import sqrt

from yapmath.coordinates import CartesianCoordinate
from yapmath.curves import CircularCurve, LinearCurve
from yapmath.tools.intersections import (
    CurveIntersection, IntersectionCircularCircular, IntersectionLinearCircular,
    IntersectionLinearLinear,
    are_intersecting_circular_circular, are_intersecting_linear_circular,
    are_intersecting_linear_linear, are_tangent_circular_circular,
    are_tangent_linear_circular, are_tangent_linear_linear, center_separation,
    intersection_coordinates_circular_circular, intersection_coordinates_linear_circular,
    intersection_coordinates_linear_linear, radical_line_length,
)


def point(x, y):
    return CartesianCoordinate(x, y)


def line(x1, y1, x2, y2, **kwargs):
    return LinearCurve(point(x1, y1), point(x2, y2), **kwargs)


def as_tuples(coordinates):
    return sorted((round(c.x, 9), round(c.y, 9)) for c in coordinates)


LINE_PAIRS = [
    # x1, y1, x2, y2, x3, y3, x4, y4, tangent, intersecting
    ((1, 2, 1, 3, 1, 4, 1, 5), True, False),        # vertical, same line
    ((1, 1, 3, 1, 4, 1, 6, 1), True, False),        # horizontal, same line
    ((1, 1, 4, 3, 7, 5, 10, 7), True, False),       # sloped, same line
    ((5, 1, 7, 1, 6, 2, 8, 2), False, False),       # horizontal, parallel
    ((1, 2, 1, 3, 2, 3, 2, 4), False, False),       # vertical, parallel
    ((1, 1, 4, 3, 9, 5, 12, 7), False, False),      # sloped, parallel
    ((1, 1, 4, 3, 9, 6, 12, 9), False, True),       # sloped, crossing
    ((0, 0, 0.001, 0, 0, -0.001, 0, 0.001), False, True),          # short, crossing
    ((0, 0, 0.001, 0.001, 0, 0.001, 0.001, 0.002), False, False), # short, parallel
    ((-1e6, 0, 1e6, 0, 0, -1e6, 0, 1e6), False, True),             # long, crossing
    ((0, 0, 1e6, 0, 0, 1, 1e6, 2), False, False),                  # long, nearly parallel
    ((0, 0, 1e6, 1e6, 2e6, 2e6, 3e6, 3e6), True, False),           # long, same line
]

LINE_CROSSINGS = [
    ((-6, 4, 6, 4, 4, 6, 4, -6), (4, 4)),
    ((-6, 4, 6, 4, -4, 6, -4, -6), (-4, 4)),
    ((-6, -4, 6, -4, -4, 6, -4, -6), (-4, -4)),
    ((-6, -4, 6, -4, 4, 6, 4, -6), (4, -4)),
    ((0, 4, 4, 0, 0, 0, 4, 4), (2, 2)),
    ((0, 0, 4, 4, 2, 0, 2, 4), (2, 2)),
    ((0, 0, 4, 4, 0, 2, 4, 2), (2, 2)),
    ((0, 0, -4, 4, -1, 0, -3, 4), (-2, 2)),
    ((1, 1, 4, 3, 7, 6, 10, 9), (4, 3)),
    ((1, 1, 4, 3, 9, 6, 12, 9), (10, 7)),
    ((0, 0, 0.001, 0, 0, -0.001, 0, 0.001), (0, 0)),
    ((0.001, 0.001, 0.002, 0.002, 0.001, 0.002, 0.002, 0.001), (0.0015, 0.0015)),
    ((-1e6, -1e6, 1e6, 1e6, -1e6, 1e6, 1e6, -1e6), (0, 0)),
    ((0, 0, 1e6, 5e5, 0, 1e6, 1e6, 0), (2e6 / 3, 1e6 / 3)),
]


class TestLinearLinear:
    """Test pairs of straight lines."""

    @pytest.mark.parametrize("coordinates,tangent,intersecting", LINE_PAIRS)
    def test_classification(self, coordinates, tangent, intersecting):
        curve_1 = line(*coordinates[:4])
        curve_2 = line(*coordinates[4:])
        assert are_tangent_linear_linear(curve_1, curve_2) == tangent
        assert are_intersecting_linear_linear(curve_1, curve_2) == intersecting
        if not intersecting:
            assert intersection_coordinates_linear_linear(curve_1, curve_2) == []

    @pytest.mark.parametrize("coordinates,expected", LINE_CROSSINGS)
    def test_crossing_coordinates(self, coordinates, expected):
        intersection = IntersectionLinearLinear(line(*coordinates[:4]), line(*coordinates[4:]))
        crossing, = intersection.intersection_coordinates()
        assert crossing.x == pytest.approx(expected[0], abs=1e-5)
        assert crossing.y == pytest.approx(expected[1], abs=1e-5)

    def test_sloped_crossing(self):
        intersection = IntersectionLinearLinear(line(1, 1, 4, 3), line(9, 6, 12, 9))
        assert intersection.are_intersecting()
        assert not intersection.are_tangent()
        coordinates = intersection.intersection_coordinates()
        assert len(coordinates) == 1
        assert coordinates[0].x == pytest.approx(10.0, abs=1e-5)
        assert coordinates[0].y == pytest.approx(7.0, abs=1e-5)

    def test_axis_crossing(self):
        coordinates = intersection_coordinates_linear_linear(line(0, 0, 1, 0), line(2, -1, 2, 5))
        assert coordinates == [point(2, 0)]

    def test_parallel(self):
        curve_1 = line(0, 0, 1, 1)
        curve_2 = line(0, 1, 1, 2)
        assert not are_intersecting_linear_linear(curve_1, curve_2)
        assert not are_tangent_linear_linear(curve_1, curve_2)
        assert intersection_coordinates_linear_linear(curve_1, curve_2) == []

    def test_collinear(self):
        curve_1 = line(0, 0, 1, 1)
        curve_2 = line(2, 2, 3, 3)
        assert are_tangent_linear_linear(curve_1, curve_2)
        assert not are_intersecting_linear_linear(curve_1, curve_2)
        assert intersection_coordinates_linear_linear(curve_1, curve_2) == []

    def test_looser_tolerance_wins(self):
        curve_1 = line(0, 0, 1, 0)
        nearly = line(0, 1, 1, 1.05)
        assert are_intersecting_linear_linear(curve_1, nearly)
        loose = line(0, 1, 1, 1.05, tolerance=0.1)
        intersection = IntersectionLinearLinear(curve_1, loose)
        assert intersection.tolerance == 0.1
        assert not intersection.are_intersecting()
        assert intersection.intersection_coordinates() == []

    @pytest.mark.parametrize("coordinates", [
        (1, 1, 4, 3, 9, 6, 12, 9),
        (0, 0, 1, 1, 0, 1, 1, 2),
        (0, 0, 1, 1, 2, 2, 3, 3),
        (-2, 5, 3, -1, 0, 0, 4, 4),
    ])
    def test_function_and_method_agree(self, coordinates):
        curve_1 = line(*coordinates[:4])
        curve_2 = line(*coordinates[4:])
        intersection = IntersectionLinearLinear(curve_1, curve_2)
        assert intersection.are_tangent() == are_tangent_linear_linear(curve_1, curve_2)
        assert intersection.are_intersecting() == are_intersecting_linear_linear(curve_1, curve_2)
        assert (as_tuples(intersection.intersection_coordinates()) ==
                as_tuples(intersection_coordinates_linear_linear(curve_1, curve_2)))

    def test_parallel_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger='yapmath.tools.intersections')
        intersection_coordinates_linear_linear(line(0, 0, 1, 1), line(0, 1, 1, 2))
        assert 'parallel' in caplog.text


class TestLinearCircular:
    """Test a line against a circle of radius 2 centered at (1, 1)."""

    def circle(self):
        return CircularCurve(2.0, point(1, 1))

    def test_secant(self):
        circle = self.circle()
        secant = line(-5, 1, 5, 1)
        intersection = IntersectionLinearCircular(secant, circle)
        assert intersection.linear_curve is secant
        assert intersection.circular_curve is circle
        assert intersection.are_intersecting()
        assert not intersection.are_tangent()
        assert as_tuples(intersection.intersection_coordinates()) == [(-1.0, 1.0), (3.0, 1.0)]

    def test_tangent(self):
        circle = self.circle()
        tangent = line(-5, 3, 5, 3)
        assert are_tangent_linear_circular(tangent, circle)
        assert not are_intersecting_linear_circular(tangent, circle)
        coordinates = intersection_coordinates_linear_circular(tangent, circle)
        assert coordinates == [point(1, 3)]

    def test_miss(self):
        circle = self.circle()
        miss = line(-5, 4, 5, 4)
        assert not are_tangent_linear_circular(miss, circle)
        assert not are_intersecting_linear_circular(miss, circle)
        assert intersection_coordinates_linear_circular(miss, circle) == []

    def test_diagonal(self):
        circle = CircularCurve(sqrt(2))
        diagonal = line(0, 0, 1, 1)
        coordinates = intersection_coordinates_linear_circular(diagonal, circle)
        assert as_tuples(coordinates) == [(-1.0, -1.0), (1.0, 1.0)]
        for coordinate in coordinates:
            assert circle.is_intersecting_coordinate(coordinate)
            assert diagonal.is_intersecting_coordinate(coordinate)


class TestCircularCircular:
    """Test pairs of circles."""

    def test_two_crossings(self):
        curve_1 = CircularCurve(2.0)
        curve_2 = CircularCurve(2.0, point(2, 0))
        intersection = IntersectionCircularCircular(curve_1, curve_2)
        assert intersection.center_separation() == pytest.approx(2.0)
        assert intersection.radical_line_length() == pytest.approx(2 * sqrt(3))
        assert intersection.are_intersecting()
        assert not intersection.are_tangent()
        assert as_tuples(intersection.intersection_coordinates()) == [
            (1.0, round(-sqrt(3), 9)), (1.0, round(sqrt(3), 9))]

    def test_crossings_off_axis(self):
        curve_1 = CircularCurve(5.0, point(1, 1))
        curve_2 = CircularCurve(5.0, point(1, 7))
        coordinates = intersection_coordinates_circular_circular(curve_1, curve_2)
        assert as_tuples(coordinates) == [(-3.0, 4.0), (5.0, 4.0)]
        for coordinate in coordinates:
            assert curve_1.is_intersecting_coordinate(coordinate)
            assert curve_2.is_intersecting_coordinate(coordinate)

    def test_external_tangent(self):
        curve_1 = CircularCurve(1.0)
        curve_2 = CircularCurve(2.0, point(3, 0))
        assert are_tangent_circular_circular(curve_1, curve_2)
        assert not are_intersecting_circular_circular(curve_1, curve_2)
        assert intersection_coordinates_circular_circular(curve_1, curve_2) == [point(1, 0)]

    def test_internal_tangent(self):
        curve_1 = CircularCurve(3.0)
        curve_2 = CircularCurve(1.0, point(2, 0))
        assert are_tangent_circular_circular(curve_1, curve_2)
        assert intersection_coordinates_circular_circular(curve_1, curve_2) == [point(3, 0)]

    @pytest.mark.parametrize("radius_1,radius_2,center_2", [
        (1.0, 1.0, (5, 0)),     # apart
        (5.0, 1.0, (1, 0)),     # nested
        (1.0, 2.0, (0, 0)),     # concentric
    ])
    def test_no_crossing(self, radius_1, radius_2, center_2):
        curve_1 = CircularCurve(radius_1)
        curve_2 = CircularCurve(radius_2, point(*center_2))
        assert not are_tangent_circular_circular(curve_1, curve_2)
        assert not are_intersecting_circular_circular(curve_1, curve_2)
        assert intersection_coordinates_circular_circular(curve_1, curve_2) == []

    def test_helpers(self):
        curve_1 = CircularCurve(2.0)
        curve_2 = CircularCurve(2.0, point(0, 2))
        assert center_separation(curve_1, curve_2) == pytest.approx(2.0)
        assert radical_line_length(2.0, 2.0, 2.0) == pytest.approx(2 * sqrt(3))


class TestCurveIntersection:

    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            CurveIntersection(line(0, 0, 1, 1), line(0, 1, 1, 0))

    def test_repr_names_the_pairing(self):
        intersection = IntersectionLinearLinear(line(0, 0, 1, 1), line(0, 1, 1, 0))
        assert repr(intersection).startswith('IntersectionLinearLinear(')
