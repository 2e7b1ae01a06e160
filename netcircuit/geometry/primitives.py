"""Geometry value types shared by the circuit model, router and renderer.

Canvas coordinates: origin top-left, X grows right, Y grows down.
"""

from __future__ import annotations

from dataclasses import dataclass

from shapely.geometry import Polygon, box as shapely_box


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle anchored at its top-left corner.

    Negative extents are a caller error; they are clamped to zero rather
    than rejected so a malformed obstacle never aborts routing.
    """

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0:
            object.__setattr__(self, "width", 0.0)
        if self.height < 0:
            object.__setattr__(self, "height", 0.0)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def corners(self) -> list[Point]:
        return [
            Point(self.x, self.y),
            Point(self.right, self.y),
            Point(self.right, self.bottom),
            Point(self.x, self.bottom),
        ]

    def contains(self, point: Point) -> bool:
        """Inclusive point-in-rectangle test (edges count as inside)."""
        return (
            self.x <= point.x <= self.right
            and self.y <= point.y <= self.bottom
        )

    def to_polygon(self) -> Polygon:
        return shapely_box(self.x, self.y, self.right, self.bottom)
