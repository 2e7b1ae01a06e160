"""Circuit model — pins, components, wires and the circuit itself.

Pins refer to their owning component by name only; the circuit keeps the
authoritative ownership table (component name → pin names).  Nothing in
the model holds a strong reference back up the tree.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Iterable, Sequence

from netcircuit.config import CELL_SIZE
from netcircuit.errors import InvalidCoordinateError, InvalidResistanceError, InvalidSizeError
from netcircuit.geometry import Point, Rect
from netcircuit.router.engine import route_wire

from .validation import validate_connections


MIN_COMPONENT_SIZE = 20.0


class PinType(str, Enum):
    INPUT = "input"
    OUTPUT = "output"
    POWER = "power"
    GROUND = "ground"
    UNASSIGNED = "null"


def _finite(value: float, what: str) -> float:
    if not math.isfinite(value):
        raise InvalidCoordinateError(f"Invalid {what} coordinate: {value}")
    return float(value)


def _positive(value: float, what: str) -> float:
    if not math.isfinite(value) or value <= 0:
        raise InvalidSizeError(f"Invalid {what}: {value}")
    return float(value)


def _clamped_size(value: float, what: str) -> float:
    """Construction-time size: raised to the minimum, rejected only if non-finite."""
    if not math.isfinite(value):
        raise InvalidSizeError(f"Invalid {what}: {value}")
    return max(float(value), MIN_COMPONENT_SIZE)


# ── Pins ───────────────────────────────────────────────────────────


class Pin:
    """A named connection point.  Its position is set by its component."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._x = 0.0
        self._y = 0.0
        self.type = PinType.UNASSIGNED
        self.component_id: str | None = None     # owning component's name
        self.convergence_count = 0               # wires ending here
        self.divergence_count = 0                # wires starting here

    def __repr__(self) -> str:
        return f"Pin({self._name!r}, component={self.component_id!r}, at=({self._x}, {self._y}))"

    @property
    def name(self) -> str:
        return self._name

    @property
    def x(self) -> float:
        return self._x

    @x.setter
    def x(self, value: float) -> None:
        self._x = _finite(value, "x")

    @property
    def y(self) -> float:
        return self._y

    @y.setter
    def y(self, value: float) -> None:
        self._y = _finite(value, "y")

    @property
    def position(self) -> Point:
        return Point(self._x, self._y)

    def set_position(self, point: Point) -> None:
        self.x = point.x
        self.y = point.y


# ── Components ─────────────────────────────────────────────────────


class Component:
    """A rectangular part with pins laid out along its edges.

    Inputs sit on the left edge, outputs on the right, power on the top
    and ground on the bottom; each group is spaced evenly along its edge.

    Sizes below ``MIN_COMPONENT_SIZE`` are raised to it on construction;
    the size setters reject non-positive values instead.
    """

    def __init__(
        self,
        name: str,
        input_pins: Sequence[Pin] = (),
        output_pins: Sequence[Pin] = (),
        ground_pins: Sequence[Pin] = (),
        power_pins: Sequence[Pin] = (),
        x: float = 0,
        y: float = 0,
        width: float = 60,
        height: float = 40,
    ) -> None:
        self._name = name
        self._input_pins = list(input_pins)
        self._output_pins = list(output_pins)
        self._ground_pins = list(ground_pins)
        self._power_pins = list(power_pins)
        self._x = _finite(x, "x")
        self._y = _finite(y, "y")
        self._width = _clamped_size(width, "width")
        self._height = _clamped_size(height, "height")

        self._adopt_pins()

    def __repr__(self) -> str:
        return (f"{type(self).__name__}({self._name!r}, x={self._x}, y={self._y}, "
                f"w={self._width}, h={self._height})")

    # ── Properties ─────────────────────────────────────────────────

    @property
    def name(self) -> str:
        return self._name

    @property
    def input_pins(self) -> tuple[Pin, ...]:
        return tuple(self._input_pins)

    @property
    def output_pins(self) -> tuple[Pin, ...]:
        return tuple(self._output_pins)

    @property
    def ground_pins(self) -> tuple[Pin, ...]:
        return tuple(self._ground_pins)

    @property
    def power_pins(self) -> tuple[Pin, ...]:
        return tuple(self._power_pins)

    @property
    def x(self) -> float:
        return self._x

    @x.setter
    def x(self, value: float) -> None:
        self._x = _finite(value, "x")
        self._layout_pins()

    @property
    def y(self) -> float:
        return self._y

    @y.setter
    def y(self, value: float) -> None:
        self._y = _finite(value, "y")
        self._layout_pins()

    @property
    def width(self) -> float:
        return self._width

    @width.setter
    def width(self, value: float) -> None:
        self._width = _positive(value, "width")
        self._layout_pins()

    @property
    def height(self) -> float:
        return self._height

    @height.setter
    def height(self, value: float) -> None:
        self._height = _positive(value, "height")
        self._layout_pins()

    # ── Methods ────────────────────────────────────────────────────

    def bounding_box(self) -> Rect:
        return Rect(self._x, self._y, self._width, self._height)

    def all_pins(self) -> list[Pin]:
        return [*self._input_pins, *self._output_pins, *self._ground_pins, *self._power_pins]

    def set_position(self, x: float, y: float) -> None:
        self._x = _finite(x, "x")
        self._y = _finite(y, "y")
        self._layout_pins()

    def set_size(self, width: float, height: float) -> None:
        self._width = _positive(width, "width")
        self._height = _positive(height, "height")
        self._layout_pins()

    def _adopt_pins(self) -> None:
        groups = (
            (self._input_pins, PinType.INPUT),
            (self._output_pins, PinType.OUTPUT),
            (self._power_pins, PinType.POWER),
            (self._ground_pins, PinType.GROUND),
        )
        for pins, pin_type in groups:
            for pin in pins:
                pin.type = pin_type
                pin.component_id = self._name
        self._layout_pins()

    def _layout_pins(self) -> None:
        n = len(self._input_pins)
        for i, pin in enumerate(self._input_pins):
            pin.x = self._x
            pin.y = self._y + self._height * (i + 1) / (n + 1)

        n = len(self._output_pins)
        for i, pin in enumerate(self._output_pins):
            pin.x = self._x + self._width
            pin.y = self._y + self._height * (i + 1) / (n + 1)

        n = len(self._power_pins)
        for i, pin in enumerate(self._power_pins):
            pin.x = self._x + self._width * (i + 1) / (n + 1)
            pin.y = self._y

        n = len(self._ground_pins)
        for i, pin in enumerate(self._ground_pins):
            pin.x = self._x + self._width * (i + 1) / (n + 1)
            pin.y = self._y + self._height


class Resistor(Component):
    """A component with a static resistance in ohms (no simulation)."""

    def __init__(self, name: str, *args, resistance: float, **kwargs) -> None:
        if not math.isfinite(resistance) or resistance <= 0:
            raise InvalidResistanceError(f"Invalid resistance value: {resistance}")
        super().__init__(name, *args, **kwargs)
        self._resistance = float(resistance)

    @property
    def resistance(self) -> float:
        return self._resistance


# ── Wires ──────────────────────────────────────────────────────────


class Wire:
    """A point-to-point connection from *enter_pin* to *exit_pin*.

    Manual bend points, once present, always take precedence over
    automatic routing.
    """

    def __init__(
        self,
        enter_pin: Pin,
        exit_pin: Pin,
        name: str,
        bend_points: Iterable[Point] = (),
    ) -> None:
        if enter_pin is None or exit_pin is None:
            raise ValueError("Both enter and exit pins must be provided")
        self._enter_pin = enter_pin
        self._exit_pin = exit_pin
        self._name = name
        self._bend_points: list[Point] = list(bend_points)
        self._routed_path: list[Point] = []

        enter_pin.divergence_count += 1
        exit_pin.convergence_count += 1

    def __repr__(self) -> str:
        return f"Wire({self._name!r}, {self._enter_pin.name!r} -> {self._exit_pin.name!r})"

    @property
    def enter_pin(self) -> Pin:
        return self._enter_pin

    @property
    def exit_pin(self) -> Pin:
        return self._exit_pin

    @property
    def name(self) -> str:
        return self._name

    @property
    def bend_points(self) -> tuple[Point, ...]:
        return tuple(self._bend_points)

    @property
    def routed_path(self) -> tuple[Point, ...]:
        return tuple(self._routed_path)

    def add_bend_point(self, point: Point) -> None:
        self._bend_points.append(Point(point.x, point.y))

    def clear_bend_points(self) -> None:
        self._bend_points = []

    def adopt_path(self, path: Sequence[Point]) -> None:
        """Store *path* as the current routed path (called by the router)."""
        self._routed_path = list(path)

    def calculate_path(
        self,
        obstacles: Sequence[Rect],
        existing_wires: Iterable[Wire],
        cell_size: float = CELL_SIZE,
    ) -> list[Point]:
        """Route this wire around *obstacles* and the other routed wires."""
        other_paths = [
            w.routed_path for w in existing_wires
            if w is not self and w.routed_path
        ]
        return route_wire(self, obstacles, other_paths, cell_size)


# ── Circuit ────────────────────────────────────────────────────────


class Circuit:
    """Named collection of components and the wires between their pins."""

    def __init__(
        self,
        name: str,
        components: Iterable[Component] = (),
        wires: Iterable[Wire] = (),
    ) -> None:
        if not name or not name.strip():
            raise ValueError("Circuit name cannot be empty")
        self._name = name
        self._components: list[Component] = list(components)
        self._wires: list[Wire] = list(wires)

    @property
    def name(self) -> str:
        return self._name

    @property
    def components(self) -> tuple[Component, ...]:
        return tuple(self._components)

    @property
    def wires(self) -> tuple[Wire, ...]:
        return tuple(self._wires)

    def add_component(self, component: Component) -> None:
        if component is None:
            raise ValueError("Component cannot be None")
        self._components.append(component)

    def remove_component(self, component: Component) -> bool:
        for i, c in enumerate(self._components):
            if c is component:
                del self._components[i]
                return True
        return False

    def add_wire(self, wire: Wire) -> None:
        if wire is None:
            raise ValueError("Wire cannot be None")
        self._wires.append(wire)

    def remove_wire(self, wire: Wire) -> bool:
        for i, w in enumerate(self._wires):
            if w is wire:
                del self._wires[i]
                return True
        return False

    def get_component(self, name: str) -> Component | None:
        for c in self._components:
            if c.name == name:
                return c
        return None

    def ownership(self) -> dict[str, list[str]]:
        """Component name → names of the pins it owns."""
        return {c.name: [p.name for p in c.all_pins()] for c in self._components}

    def all_pins(self) -> list[Pin]:
        return [p for c in self._components for p in c.all_pins()]

    def obstacles(self) -> list[Rect]:
        """Component bounding boxes, in insertion order."""
        return [c.bounding_box() for c in self._components]

    def validate_connections(self) -> list[str]:
        return validate_connections(self)
