"""Bezier control handles."""

from __future__ import annotations

from dataclasses import dataclass, field

from yapmath.coordinates import Angle, CartesianCoordinate


@dataclass(frozen=True)
class CurveHandle:
    """End point of a curve plus the handle that pulls the curve off it.

    The handle tip sits ``radius`` away from ``control_point`` in the
    direction ``rotation``.
    """

    control_point: CartesianCoordinate
    radius: float = 0.0
    rotation: Angle = field(default_factory=Angle)

    def __post_init__(self):
        if not isinstance(self.rotation, Angle):
            object.__setattr__(self, 'rotation', Angle(self.rotation))

    def handle_tip(self) -> CartesianCoordinate:
        return self.control_point.offset_coordinate(self.radius, self.rotation)

    def with_handle_tip(self, tip: CartesianCoordinate) -> "CurveHandle":
        """Copy whose handle ends at ``tip``."""
        offset = tip - self.control_point
        return CurveHandle(self.control_point, offset.length(), offset.slope_angle())


__all__ = ["CurveHandle"]
