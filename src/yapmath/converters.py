"""Conversions between yapMath coordinate systems.

Cartesian <-> polar, cylindrical and spherical, cylindrical <->
spherical, and planar Cartesian <-> barycentric/trilinear relative to
a reference triangle.  Angles follow the usual conventions: azimuth is
measured counter-clockwise from +X in the XY plane, and spherical
inclination is measured down from +Z.
"""

from __future__ import annotations

from math import acos, atan2, cos, sin

from yapmath.algebra import srss
from yapmath.coordinates import (Angle, BarycentricCoordinate, CartesianCoordinate,
                                 CartesianCoordinate3D, CylindricalCoordinate,
                                 PolarCoordinate, SphericalCoordinate, TrilinearCoordinate)
from yapmath.errors import GeometryError
from yapmath.tolerance import get_tolerance, is_zero


## planar polar

def cartesian_to_polar(coordinate: CartesianCoordinate) -> PolarCoordinate:
    radius = srss(coordinate.x, coordinate.y)
    azimuth = Angle(atan2(coordinate.y, coordinate.x), coordinate.tolerance)
    return PolarCoordinate(radius, azimuth, coordinate.tolerance)


def polar_to_cartesian(coordinate: PolarCoordinate) -> CartesianCoordinate:
    theta = coordinate.azimuth.radians
    return CartesianCoordinate(coordinate.radius * cos(theta),
                               coordinate.radius * sin(theta),
                               coordinate.tolerance)


## cylindrical

def cartesian_to_cylindrical(coordinate: CartesianCoordinate3D) -> CylindricalCoordinate:
    radius = srss(coordinate.x, coordinate.y)
    azimuth = Angle(atan2(coordinate.y, coordinate.x), coordinate.tolerance)
    return CylindricalCoordinate(radius, coordinate.z, azimuth, coordinate.tolerance)


def cylindrical_to_cartesian(coordinate: CylindricalCoordinate) -> CartesianCoordinate3D:
    theta = coordinate.azimuth.radians
    return CartesianCoordinate3D(coordinate.radius * cos(theta),
                                 coordinate.radius * sin(theta),
                                 coordinate.height,
                                 coordinate.tolerance)


## spherical

def cartesian_to_spherical(coordinate: CartesianCoordinate3D) -> SphericalCoordinate:
    """Convert to spherical; the origin maps to zero radius and zero angles."""
    tol = coordinate.tolerance
    radius = srss(coordinate.x, coordinate.y, coordinate.z)
    if is_zero(radius, tol):
        return SphericalCoordinate(0.0, Angle(0.0, tol), Angle(0.0, tol), tol)
    inclination = acos(max(-1.0, min(1.0, coordinate.z / radius)))
    azimuth = atan2(coordinate.y, coordinate.x)
    return SphericalCoordinate(radius, Angle(inclination, tol), Angle(azimuth, tol), tol)


def spherical_to_cartesian(coordinate: SphericalCoordinate) -> CartesianCoordinate3D:
    r = coordinate.radius
    inclination = coordinate.inclination.radians
    azimuth = coordinate.azimuth.radians
    return CartesianCoordinate3D(r * sin(inclination) * cos(azimuth),
                                 r * sin(inclination) * sin(azimuth),
                                 r * cos(inclination),
                                 coordinate.tolerance)


def cylindrical_to_spherical(coordinate: CylindricalCoordinate) -> SphericalCoordinate:
    tol = coordinate.tolerance
    radius = srss(coordinate.radius, coordinate.height)
    inclination = atan2(coordinate.radius, coordinate.height)
    return SphericalCoordinate(radius, Angle(inclination, tol), coordinate.azimuth, tol)


def spherical_to_cylindrical(coordinate: SphericalCoordinate) -> CylindricalCoordinate:
    inclination = coordinate.inclination.radians
    return CylindricalCoordinate(coordinate.radius * sin(inclination),
                                 coordinate.radius * cos(inclination),
                                 coordinate.azimuth,
                                 coordinate.tolerance)


## triangle-relative

def cartesian_to_barycentric(point: CartesianCoordinate,
                             vertex_a: CartesianCoordinate,
                             vertex_b: CartesianCoordinate,
                             vertex_c: CartesianCoordinate) -> BarycentricCoordinate:
    """Barycentric weights of ``point`` relative to triangle ``abc``.

    Raises ``GeometryError`` if the triangle is degenerate.
    """
    tol = get_tolerance(point, vertex_a, vertex_b, vertex_c)
    determinant = ((vertex_b.y - vertex_c.y) * (vertex_a.x - vertex_c.x) +
                   (vertex_c.x - vertex_b.x) * (vertex_a.y - vertex_c.y))
    if is_zero(determinant, tol):
        raise GeometryError('degenerate triangle passed to cartesian_to_barycentric')
    alpha = ((vertex_b.y - vertex_c.y) * (point.x - vertex_c.x) +
             (vertex_c.x - vertex_b.x) * (point.y - vertex_c.y)) / determinant
    beta = ((vertex_c.y - vertex_a.y) * (point.x - vertex_c.x) +
            (vertex_a.x - vertex_c.x) * (point.y - vertex_c.y)) / determinant
    return BarycentricCoordinate(alpha, beta, 1.0 - alpha - beta, point.tolerance)


def barycentric_to_cartesian(coordinate: BarycentricCoordinate,
                             vertex_a: CartesianCoordinate,
                             vertex_b: CartesianCoordinate,
                             vertex_c: CartesianCoordinate) -> CartesianCoordinate:
    return coordinate.to_cartesian(vertex_a, vertex_b, vertex_c)


def cartesian_to_trilinear(point: CartesianCoordinate,
                           vertex_a: CartesianCoordinate,
                           vertex_b: CartesianCoordinate,
                           vertex_c: CartesianCoordinate) -> TrilinearCoordinate:
    barycentric = cartesian_to_barycentric(point, vertex_a, vertex_b, vertex_c)
    return barycentric.to_trilinear(vertex_a, vertex_b, vertex_c)


def trilinear_to_cartesian(coordinate: TrilinearCoordinate,
                           vertex_a: CartesianCoordinate,
                           vertex_b: CartesianCoordinate,
                           vertex_c: CartesianCoordinate) -> CartesianCoordinate:
    return coordinate.to_cartesian(vertex_a, vertex_b, vertex_c)


__all__ = [
    "cartesian_to_polar",
    "polar_to_cartesian",
    "cartesian_to_cylindrical",
    "cylindrical_to_cartesian",
    "cartesian_to_spherical",
    "spherical_to_cartesian",
    "cylindrical_to_spherical",
    "spherical_to_cylindrical",
    "cartesian_to_barycentric",
    "barycentric_to_cartesian",
    "cartesian_to_trilinear",
    "trilinear_to_cartesian",
]
