"""Geometry types for camera navigation.

Coordinates are in the renderer's graph space (the space node ``x``/``y``
positions live in), not screen pixels.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """Immutable 2D point."""

    x: float
    y: float


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned rectangle enclosing a set of nodes.

    Attributes:
        x: (min, max) along the x axis
        y: (min, max) along the y axis

    Example:
        >>> BoundingBox.from_mapping({"x": [0, 10], "y": [-5, 5]}).center
        Point(x=5.0, y=0.0)
    """

    x: tuple[float, float]
    y: tuple[float, float]

    @property
    def center(self) -> Point:
        """Midpoint of the rectangle. For a single node this is its position."""
        return Point((self.x[0] + self.x[1]) / 2, (self.y[0] + self.y[1]) / 2)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Sequence[float]]) -> BoundingBox:
        """Build from the renderer's ``{"x": [min, max], "y": [min, max]}`` form."""
        x_min, x_max = data["x"]
        y_min, y_max = data["y"]
        return cls(x=(float(x_min), float(x_max)), y=(float(y_min), float(y_max)))
