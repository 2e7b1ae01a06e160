"""Shared routing constants.

The grid rasterizer, the pathfinder, the simplifier and the renderer's
default grid size all derive their parameters from this single source of
truth.  Change a value here and every stage stays in sync automatically.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RouteRules:
    """Tuning constants for the wire router.

    All distances are in canvas units.
    """

    cell_size: float = 10.0
    """Routing-grid cell size."""

    window_margin: float = 50.0
    """Padding added on every side of the bounding window so the search
    has room to route around obstacles flush with a pin."""

    wire_tolerance_cells: int = 2
    """Radius (in cells) blocked around previously routed wires."""

    collinear_epsilon: float = 1e-5
    """Cross-product magnitude below which three points count as collinear."""


# Module-level singleton.
ROUTE_RULES = RouteRules()

CELL_SIZE = ROUTE_RULES.cell_size
WINDOW_MARGIN = ROUTE_RULES.window_margin
WIRE_TOLERANCE_CELLS = ROUTE_RULES.wire_tolerance_cells
COLLINEAR_EPSILON = ROUTE_RULES.collinear_epsilon
