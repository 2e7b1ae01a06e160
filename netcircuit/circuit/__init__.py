"""Circuit model — components, pins, wires, and connection validation."""

from .models import (
    PinType, Pin, Component, Resistor, Wire, Circuit, MIN_COMPONENT_SIZE,
)
from .validation import validate_connections

__all__ = [
    # Models
    "PinType", "Pin", "Component", "Resistor", "Wire", "Circuit",
    "MIN_COMPONENT_SIZE",
    # Validation
    "validate_connections",
]
