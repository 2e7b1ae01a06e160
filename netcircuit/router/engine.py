"""Main routing engine — connects a wire's two pins with an orthogonal path.

Algorithm overview:
  1. Manual bend points, if the wire has any, are used verbatim.
  2. Build the passability grid (blocked: component bodies, plus a band
     around every previously routed wire).
  3. A* search from the source cell to the target cell.
  4. Join the exact source and target positions to the path with short
     L legs that stay clear of components, then drop collinear
     intermediate points.
  5. If the search fails, use the L-shaped / straight fallback.

Wires of a circuit are routed one after another; each wire sees the wires
routed before it as soft obstacles, so routing order changes the result.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable, Sequence

from netcircuit.config import CELL_SIZE, ROUTE_RULES, RouteRules
from netcircuit.geometry import Point, Rect

from .fallback import crosses_interior, fallback_path
from .grid import rasterize
from .pathfinder import find_path
from .simplify import simplify

if TYPE_CHECKING:
    from netcircuit.circuit.models import Wire


log = logging.getLogger(__name__)


# ── Single path ────────────────────────────────────────────────────


def route_path(
    source: Point,
    target: Point,
    obstacles: Sequence[Rect],
    other_paths: Iterable[Sequence[Point]] = (),
    cell_size: float = CELL_SIZE,
    bend_points: Sequence[Point] = (),
    *,
    rules: RouteRules = ROUTE_RULES,
) -> list[Point]:
    """Compute a path from *source* to *target*.

    Parameters
    ----------
    source, target : Point
        Pin positions (finite; validated by the circuit model).
    obstacles : sequence of Rect
        Component bounding boxes, treated as impassable.
    other_paths : iterable of point sequences
        Paths of wires routed earlier, excluding the one being routed.
    cell_size : float
        Grid granularity in canvas units.
    bend_points : sequence of Point
        Manual bend points.  When non-empty they are used as-is and no
        search is performed.

    Returns
    -------
    list[Point]
        At least two points; the first is *source*, the last is *target*.
    """
    if bend_points:
        return [source, *bend_points, target]

    grid = rasterize(obstacles, other_paths, cell_size, source, target, rules=rules)
    log.debug("Grid %dx%d (cell=%.1f, origin=(%.1f, %.1f)), %d passable cells",
              grid.width, grid.height, cell_size, grid.origin.x, grid.origin.y,
              grid.passable_count())

    path = find_path(grid, source, target)
    if path:
        path = _attach_endpoints(path, source, target, obstacles)
        return simplify(path, rules.collinear_epsilon)

    path = fallback_path(source, target, obstacles)
    if len(path) == 2 and source != target:
        log.warning("No grid path from (%.1f, %.1f) to (%.1f, %.1f); using direct line",
                    source.x, source.y, target.x, target.y)
    else:
        log.debug("No grid path from (%.1f, %.1f) to (%.1f, %.1f); using L route",
                  source.x, source.y, target.x, target.y)
    return path


def _attach_endpoints(
    path: list[Point],
    source: Point,
    target: Point,
    obstacles: Sequence[Rect],
) -> list[Point]:
    """Join the exact pin positions to the inner corners of a grid path.

    The first and last corners only locate the pins' cells and may sit
    inside a component, so they are dropped.  Each pin is joined to the
    nearest remaining corner by an L whose legs stay out of every
    obstacle, or by a straight segment when neither L is clear.
    """
    inner = path[1:-1]
    if not inner:
        return [source, target]
    points = [
        source,
        *_elbow(source, inner[0], obstacles),
        *inner,
        *_elbow(target, inner[-1], obstacles),
        target,
    ]
    return [p for i, p in enumerate(points) if i == 0 or p != points[i - 1]]


def _elbow(pin: Point, corner: Point, obstacles: Sequence[Rect]) -> list[Point]:
    for bend in (Point(corner.x, pin.y), Point(pin.x, corner.y)):
        if not (crosses_interior(pin, bend, obstacles) or crosses_interior(bend, corner, obstacles)):
            return [bend]
    return []

# ── Wires ──────────────────────────────────────────────────────────


def route_wire(
    wire: Wire,
    obstacles: Sequence[Rect],
    other_paths: Iterable[Sequence[Point]] = (),
    cell_size: float = CELL_SIZE,
    *,
    rules: RouteRules = ROUTE_RULES,
) -> list[Point]:
    """Route *wire*, store the result as its routed path, and return a copy."""
    path = route_path(
        wire.enter_pin.position,
        wire.exit_pin.position,
        obstacles,
        other_paths,
        cell_size,
        wire.bend_points,
        rules=rules,
    )
    wire.adopt_path(path)
    log.debug("Wire %s: %d points", wire.name, len(path))
    return list(path)


def route_circuit(
    wires: Sequence[Wire],
    obstacles: Sequence[Rect],
    cell_size: float = CELL_SIZE,
    *,
    rules: RouteRules = ROUTE_RULES,
) -> dict[str, list[Point]]:
    """Route *wires* in the given order.

    Each wire is routed against the paths of the wires before it in
    *wires*; later wires never affect earlier ones.

    Returns the routed paths keyed by wire name.
    """
    log.info("Router: starting — %d wires, %d obstacles, cell=%.1f",
             len(wires), len(obstacles), cell_size)

    routed: list[Wire] = []
    paths: dict[str, list[Point]] = {}
    for wire in wires:
        other_paths = [w.routed_path for w in routed if w is not wire]
        paths[wire.name] = route_wire(wire, obstacles, other_paths, cell_size, rules=rules)
        routed.append(wire)

    bends = sum(len(p) - 2 for p in paths.values())
    log.info("Router: done — %d wires, %d bend points", len(routed), bends)
    return paths
