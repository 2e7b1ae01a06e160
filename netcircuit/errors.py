"""Exceptions raised at the circuit data-model boundary.

The router itself never raises for an unroutable wire: it degrades to a
fallback path.  Only malformed model input (non-finite coordinates, empty
sizes, nonsensical resistance) is rejected, and it is rejected here, before
routing is invoked.
"""

from __future__ import annotations


class CircuitError(ValueError):
    """Base class for circuit model contract violations."""


class InvalidCoordinateError(CircuitError):
    """A pin or component coordinate is not a finite number."""


class InvalidSizeError(CircuitError):
    """A component width or height is not a positive finite number."""


class InvalidResistanceError(CircuitError):
    """A resistor's resistance is not a positive finite number."""
