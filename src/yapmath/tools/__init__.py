"""Curve tools: handles, ranges and limits, relative positions, intersections.

Import the submodules directly, e.g. ``from yapmath.tools import
intersections``.
"""

__all__ = ["handle", "limits", "relative_position", "intersections"]
