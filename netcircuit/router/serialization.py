"""Routing serialization — JSON-safe dict conversion."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from netcircuit.geometry import Point

if TYPE_CHECKING:
    from netcircuit.circuit.models import Wire


def routing_to_dict(wires: Iterable[Wire]) -> dict:
    """Serialize the routed paths (and manual bends) of *wires*."""
    return {
        "wires": [
            {
                "name": w.name,
                "path": [[p.x, p.y] for p in w.routed_path],
                "bend_points": [[p.x, p.y] for p in w.bend_points],
            }
            for w in wires
        ],
    }


def parse_routing(data: dict) -> dict[str, list[Point]]:
    """Parse a ``routing_to_dict`` payload back into paths keyed by wire name."""
    return {
        w["name"]: [Point(float(x), float(y)) for x, y in w.get("path", [])]
        for w in data.get("wires", [])
    }
