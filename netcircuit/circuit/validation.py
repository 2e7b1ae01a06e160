"""Connection validation — check that every wire ends on a pin of the circuit."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Circuit


def validate_connections(circuit: Circuit) -> list[str]:
    """Validate wire endpoints against the circuit's pins. Returns error messages (empty = valid)."""
    errors: list[str] = []
    pin_ids = {id(p) for p in circuit.all_pins()}

    for index, wire in enumerate(circuit.wires):
        if id(wire.enter_pin) not in pin_ids:
            errors.append(f"Wire {index} ({wire.name}): enter pin '{wire.enter_pin.name}' not found in circuit")
        if id(wire.exit_pin) not in pin_ids:
            errors.append(f"Wire {index} ({wire.name}): exit pin '{wire.exit_pin.name}' not found in circuit")

    # ── Component names must be unique (pins refer to owners by name) ──
    seen: set[str] = set()
    for component in circuit.components:
        if component.name in seen:
            errors.append(f"Duplicate component name '{component.name}'")
        seen.add(component.name)

    return errors
