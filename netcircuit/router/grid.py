"""Discretized routing grid — marks cells as passable or blocked.

The grid covers the bounding window of the two wire endpoints and every
obstacle corner, padded by ``WINDOW_MARGIN`` on every side.  Paths run
through cell corners, so component bodies block every corner within half a
cell of their interior.  Previously routed wires block a band of
``WIRE_TOLERANCE_CELLS`` around their path so later wires are steered away
from them.

A grid is built fresh for each routing call and never reused.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from shapely.geometry import MultiPoint

from netcircuit.config import ROUTE_RULES, RouteRules
from netcircuit.geometry import Point, Rect


# Cell states
FREE = 0
BLOCKED = 1


class PassabilityGrid:
    """A 2-D boolean grid over a bounded window of the canvas.

    Canvas coordinates are mapped to grid cells relative to ``origin``
    (the top-left corner of the padded window).  A cell ``(gx, gy)`` spans
    ``origin + (gx, gy) * cell_size`` to ``origin + (gx + 1, gy + 1) * cell_size``.
    """

    def __init__(self, origin: Point, width: int, height: int, cell_size: float) -> None:
        self.origin = origin
        self.width = max(0, width)
        self.height = max(0, height)
        self.cell_size = cell_size
        self._cells = bytearray(self.width * self.height)

    # ── Coordinate conversion ──────────────────────────────────────

    def world_to_grid(self, point: Point) -> tuple[int, int]:
        """Convert a canvas point to the grid cell containing it (not clamped)."""
        gx = int(math.floor((point.x - self.origin.x) / self.cell_size))
        gy = int(math.floor((point.y - self.origin.y) / self.cell_size))
        return (gx, gy)

    def grid_to_world(self, gx: int, gy: int) -> Point:
        """Convert a grid cell to canvas coordinates (cell top-left corner)."""
        return Point(
            self.origin.x + gx * self.cell_size,
            self.origin.y + gy * self.cell_size,
        )

    # ── Cell queries ───────────────────────────────────────────────

    def in_bounds(self, gx: int, gy: int) -> bool:
        return 0 <= gx < self.width and 0 <= gy < self.height

    def is_passable(self, gx: int, gy: int) -> bool:
        if not self.in_bounds(gx, gy):
            return False
        return self._cells[gy * self.width + gx] == FREE

    def passable_count(self) -> int:
        return self._cells.count(FREE)

    def rows(self) -> list[list[bool]]:
        """Row-major boolean view (``True`` = traversable), for debugging."""
        return [
            [self._cells[gy * self.width + gx] == FREE for gx in range(self.width)]
            for gy in range(self.height)
        ]

    # ── Cell mutation ──────────────────────────────────────────────

    def block_cell(self, gx: int, gy: int) -> None:
        if self.in_bounds(gx, gy):
            self._cells[gy * self.width + gx] = BLOCKED

    def block_rect(self, rect: Rect) -> None:
        """Block every corner within half a cell of the interior of *rect*.

        Paths run along the lines joining cell corners, so a corner is
        blocked when the half-cell square around it overlaps the open
        rectangle.  An edge between two unblocked corners then never
        enters the rectangle.  Rectangles without an interior block
        nothing.
        """
        if rect.width <= 0 or rect.height <= 0:
            return
        size = self.cell_size
        gx_min = max(0, int(math.floor((rect.x - self.origin.x) / size - 0.5)) + 1)
        gx_max = min(self.width - 1, int(math.ceil((rect.right - self.origin.x) / size + 0.5)) - 1)
        gy_min = max(0, int(math.floor((rect.y - self.origin.y) / size - 0.5)) + 1)
        gy_max = min(self.height - 1, int(math.ceil((rect.bottom - self.origin.y) / size + 0.5)) - 1)

        for gy in range(gy_min, gy_max + 1):
            row = gy * self.width
            for gx in range(gx_min, gx_max + 1):
                self._cells[row + gx] = BLOCKED

    def block_polyline(self, path: Sequence[Point], radius: int) -> None:
        """Block a band of *radius* cells around every segment of *path*.

        Each segment is sampled once per grid cell along its longer axis;
        a zero-length segment is sampled once at its start.
        """
        for p1, p2 in zip(path, path[1:]):
            dx = p2.x - p1.x
            dy = p2.y - p1.y
            steps = int(math.ceil(max(abs(dx), abs(dy)) / self.cell_size))
            for step in range(steps + 1):
                t = 0.0 if steps == 0 else step / steps
                gx, gy = self.world_to_grid(Point(p1.x + dx * t, p1.y + dy * t))
                for ny in range(gy - radius, gy + radius + 1):
                    for nx in range(gx - radius, gx + radius + 1):
                        self.block_cell(nx, ny)


# ── Construction ───────────────────────────────────────────────────


def routing_window(
    obstacles: Iterable[Rect],
    source: Point,
    target: Point,
    margin: float,
) -> tuple[float, float, float, float]:
    """Bounds ``(xmin, ymin, xmax, ymax)`` of the endpoints and obstacle corners, padded."""
    coords = [source.as_tuple(), target.as_tuple()]
    for rect in obstacles:
        coords.extend(c.as_tuple() for c in rect.corners())
    xmin, ymin, xmax, ymax = MultiPoint(coords).bounds
    return (xmin - margin, ymin - margin, xmax + margin, ymax + margin)


def rasterize(
    obstacles: Sequence[Rect],
    routed_paths: Iterable[Sequence[Point]],
    cell_size: float,
    source: Point,
    target: Point,
    *,
    rules: RouteRules = ROUTE_RULES,
) -> PassabilityGrid:
    """Build the passability grid for one routing call.

    *routed_paths* are the paths of wires routed earlier; the caller must
    leave out the wire currently being routed.  The grid's ``origin`` maps
    grid cells back to canvas coordinates.
    """
    xmin, ymin, xmax, ymax = routing_window(obstacles, source, target, rules.window_margin)
    grid = PassabilityGrid(
        origin=Point(xmin, ymin),
        width=int(math.ceil((xmax - xmin) / cell_size)),
        height=int(math.ceil((ymax - ymin) / cell_size)),
        cell_size=cell_size,
    )

    for rect in obstacles:
        grid.block_rect(rect)

    for path in routed_paths:
        if len(path) > 1:
            grid.block_polyline(path, rules.wire_tolerance_cells)

    return grid
