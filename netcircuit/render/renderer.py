"""Circuit renderer — route every wire, then draw components and wires.

Wires are routed in circuit order before anything is drawn, each against
the wires routed before it.  Rendering problems never propagate: the
driver logs them and reports failure through its return value.
"""

from __future__ import annotations

import logging
from typing import Sequence

from netcircuit.circuit.models import Circuit, Component, Wire
from netcircuit.geometry import Point
from netcircuit.router.engine import route_circuit

from .options import DEFAULT_RENDER_OPTIONS, RenderOptions
from .surface import RenderSurface


log = logging.getLogger(__name__)


def build_circuit(
    circuit: Circuit | None,
    surface: RenderSurface | None,
    options: RenderOptions | None = None,
    **overrides,
) -> bool:
    """Route and draw *circuit* onto *surface*.

    Parameters
    ----------
    circuit : Circuit
        The circuit to draw.  Connection problems are logged as warnings
        and do not stop rendering.
    surface : RenderSurface
        Drawing target, e.g. a ``RasterSurface``.
    options : RenderOptions | None
        Palette and sizes.  Uses defaults when *None*; keyword
        *overrides* are applied on top.

    Returns
    -------
    bool
        True when the circuit was drawn, False on any failure.
    """
    if circuit is None or surface is None:
        log.error("Circuit and surface are required")
        return False

    opts = options or DEFAULT_RENDER_OPTIONS
    if overrides:
        opts = opts.merged(**overrides)

    try:
        errors = circuit.validate_connections()
        if errors:
            log.warning("Circuit %s validation warnings: %s", circuit.name, errors)

        surface.clear(opts.background_color)

        route_circuit(circuit.wires, circuit.obstacles(), opts.grid_size)

        draw_components(surface, circuit.components, opts)
        draw_wires(surface, circuit.wires, opts)
    except Exception:
        log.exception("Failed to build circuit %s", circuit.name)
        return False

    log.info("Rendered circuit %s: %d components, %d wires",
             circuit.name, len(circuit.components), len(circuit.wires))
    return True


def draw_components(
    surface: RenderSurface,
    components: Sequence[Component],
    options: RenderOptions,
) -> None:
    """Draw each component body, its centred name, and its pins."""
    for component in components:
        bounds = component.bounding_box()
        surface.fill_rect(bounds, options.background_color)
        surface.stroke_rect(bounds, options.component_color, options.line_width)

        text_w = surface.text_width(component.name, options.font_size)
        surface.draw_text(
            Point(bounds.x + (bounds.width - text_w) / 2,
                  bounds.y + bounds.height / 2 + options.font_size / 3),
            component.name,
            options.component_color,
            options.font_size,
        )

        for pin in component.all_pins():
            surface.draw_circle(
                pin.position,
                options.pin_radius,
                fill=options.pin_colors[pin.type],
                outline=options.component_color,
            )


def draw_wires(
    surface: RenderSurface,
    wires: Sequence[Wire],
    options: RenderOptions,
) -> None:
    """Draw each routed wire, its label, and a junction dot at every bend."""
    label_size = max(10, options.font_size - 2)

    for wire in wires:
        path = wire.routed_path
        if len(path) < 2:
            continue

        surface.draw_polyline(path, options.wire_color, options.line_width)

        label_at = path[len(path) // 2]
        surface.draw_text(Point(label_at.x + 5, label_at.y - 5), wire.name, options.wire_color, label_size)

        for bend in path[1:-1]:
            surface.draw_circle(bend, options.junction_radius, fill=options.wire_color)
