"""Planar curve hierarchy."""

from yapmath.curves.curve import Curve
from yapmath.curves.linear import LinearCurve
from yapmath.curves.bezier import BezierCurve
from yapmath.curves.conic import ConicSectionCurve
from yapmath.curves.elliptical import CircularCurve, EllipticalCurve
from yapmath.curves.hyperbolic import HyperbolicCurve
from yapmath.curves.parabolic import ParabolicCurve
from yapmath.curves.spiral import LogarithmicSpiralCurve

__all__ = [
    "Curve",
    "LinearCurve",
    "BezierCurve",
    "ConicSectionCurve",
    "EllipticalCurve",
    "CircularCurve",
    "HyperbolicCurve",
    "ParabolicCurve",
    "LogarithmicSpiralCurve",
]
