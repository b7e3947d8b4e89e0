"""Exceptions raised by yapMath.

Malformed input is a fault and raises one of these.  Geometric
non-existence is not: parallel lines simply have no intersection
coordinates, and callers get an empty list back.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class GeometryError(ValueError):
    """Invalid argument, usually degenerate geometry."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class OutOfRangeError(GeometryError):
    """A position, index or coordinate lies outside the valid range."""


class UnsupportedCapabilityError(NotImplementedError):
    """The curve cannot answer this kind of query."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class UnmodeledDerivativeError(NotImplementedError):
    """The derivative order exists but has no closed form here.

    Raised instead of returning zero, so a missing formula is never
    mistaken for a derivative that is mathematically zero.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


__all__ = [
    "GeometryError",
    "OutOfRangeError",
    "UnsupportedCapabilityError",
    "UnmodeledDerivativeError",
]
