"""Collapse collinear runs of a routed path into its bend points."""

from __future__ import annotations

from typing import Sequence

from netcircuit.config import COLLINEAR_EPSILON
from netcircuit.geometry import Point


def are_collinear(p1: Point, p2: Point, p3: Point, eps: float = COLLINEAR_EPSILON) -> bool:
    """True when the cross product of (p2 - p1) and (p3 - p1) is below *eps*."""
    cross = (p2.x - p1.x) * (p3.y - p1.y) - (p3.x - p1.x) * (p2.y - p1.y)
    return abs(cross) < eps


def simplify(path: Sequence[Point], eps: float = COLLINEAR_EPSILON) -> list[Point]:
    """Remove collinear intermediate points.

    Keeps the start, the end, and every point where the direction changes.
    From each kept anchor the look-ahead advances while
    ``(anchor, path[k], path[k + 1])`` stays collinear; the farthest such
    point becomes the next anchor.

    A path that doubles back on itself can expose new collinear runs after
    one pass, so passes repeat until nothing more is removed.
    """
    waypoints = list(path)
    while True:
        collapsed = _collapse(waypoints, eps)
        if len(collapsed) == len(waypoints):
            return collapsed
        waypoints = collapsed


def _collapse(path: list[Point], eps: float) -> list[Point]:
    if len(path) <= 2:
        return list(path)

    waypoints = [path[0]]
    current = 0
    last = len(path) - 1

    while current < last:
        farthest = current + 1
        while farthest < last and are_collinear(path[current], path[farthest], path[farthest + 1], eps):
            farthest += 1
        waypoints.append(path[farthest])
        current = farthest

    return waypoints
