"""Geometric fallback when the grid search finds nothing.

Tries a one-bend L route (horizontal leg first, then vertical leg first)
and settles for the direct line if both are obstructed.  The direct line
may cross a component; that is an accepted degenerate outcome.
"""

from __future__ import annotations

import math
from typing import Sequence

from shapely.geometry import LineString

from netcircuit.geometry import Point, Rect


def is_segment_clear(a: Point, b: Point, obstacles: Sequence[Rect]) -> bool:
    """Sample *a*→*b* once per unit of its longer axis; no sample may touch an obstacle."""
    dx = b.x - a.x
    dy = b.y - a.y
    steps = int(math.ceil(max(abs(dx), abs(dy))))

    for i in range(steps + 1):
        t = 0.0 if steps == 0 else i / steps
        sample = Point(a.x + dx * t, a.y + dy * t)
        if any(rect.contains(sample) for rect in obstacles):
            return False
    return True


def crosses_interior(a: Point, b: Point, obstacles: Sequence[Rect]) -> bool:
    """True when segment *a*→*b* enters the interior of any obstacle.

    Touching an edge or a corner does not count.
    """
    if a == b:
        return False
    line = LineString([a.as_tuple(), b.as_tuple()])
    return any(
        rect.width > 0 and rect.height > 0
        and line.relate_pattern(rect.to_polygon(), "T********")
        for rect in obstacles
    )


def fallback_path(source: Point, target: Point, obstacles: Sequence[Rect]) -> list[Point]:
    """Return an L-shaped or straight path from *source* to *target* (always ≥ 2 points)."""
    for corner in (Point(target.x, source.y), Point(source.x, target.y)):
        if is_segment_clear(source, corner, obstacles) and is_segment_clear(corner, target, obstacles):
            if corner == source or corner == target:
                # Endpoints share an axis: the L collapses to a straight run
                return [source, target]
            return [source, corner, target]

    return [source, target]
