"""Render options — canvas size, palette and stroke settings."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from netcircuit.circuit.models import PinType
from netcircuit.config import CELL_SIZE


def _default_pin_colors() -> dict[PinType, str]:
    return {
        PinType.INPUT: "#0066ff",
        PinType.OUTPUT: "#ff3300",
        PinType.POWER: "#ff8800",
        PinType.GROUND: "#00aa00",
        PinType.UNASSIGNED: "#888888",
    }


@dataclass(frozen=True)
class RenderOptions:
    """All tuneable renderer parameters in one place.

    ``grid_size`` is the routing cell size used when ``build_circuit``
    routes the wires; it defaults to the router's ``CELL_SIZE``.
    """

    canvas_width: int = 800
    canvas_height: int = 600
    background_color: str = "#ffffff"
    component_color: str = "#000000"
    wire_color: str = "#0066cc"
    pin_colors: dict[PinType, str] = field(default_factory=_default_pin_colors)
    font_size: int = 12
    line_width: int = 2
    grid_size: float = CELL_SIZE
    pin_radius: float = 4
    junction_radius: float = 2

    def merged(self, **overrides) -> RenderOptions:
        """Return a copy with *overrides* applied (unknown keys raise TypeError)."""
        return replace(self, **overrides)


DEFAULT_RENDER_OPTIONS = RenderOptions()
