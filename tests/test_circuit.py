"""Tests for the circuit model and connection validation."""

from __future__ import annotations

import math
import unittest

from netcircuit.circuit import (
    Circuit, Component, Pin, PinType, Resistor, Wire, validate_connections,
)
from netcircuit.errors import (
    CircuitError, InvalidCoordinateError, InvalidResistanceError, InvalidSizeError,
)
from netcircuit.geometry import Point, Rect
from tests.circuit_fixture import make_divider_circuit


class TestPin(unittest.TestCase):

    def test_defaults(self):
        pin = Pin("a")
        self.assertEqual(pin.type, PinType.UNASSIGNED)
        self.assertIsNone(pin.component_id)
        self.assertEqual(pin.position, Point(0, 0))

    def test_non_finite_coordinates_rejected(self):
        pin = Pin("a")
        with self.assertRaises(InvalidCoordinateError):
            pin.x = math.inf
        with self.assertRaises(InvalidCoordinateError):
            pin.set_position(Point(1, math.nan))
        self.assertIsInstance(InvalidCoordinateError("x"), CircuitError)


class TestComponent(unittest.TestCase):

    def setUp(self):
        self.ins = [Pin("i1"), Pin("i2")]
        self.out = Pin("o")
        self.vcc = Pin("vcc")
        self.gnd = Pin("gnd")
        self.comp = Component(
            "u1", input_pins=self.ins, output_pins=[self.out],
            ground_pins=[self.gnd], power_pins=[self.vcc],
            x=100, y=50, width=60, height=30,
        )

    def test_pins_adopted(self):
        """Pins get their type and a by-name reference to the owner."""
        self.assertEqual(self.ins[0].type, PinType.INPUT)
        self.assertEqual(self.out.type, PinType.OUTPUT)
        self.assertEqual(self.vcc.type, PinType.POWER)
        self.assertEqual(self.gnd.type, PinType.GROUND)
        for pin in self.comp.all_pins():
            self.assertEqual(pin.component_id, "u1")

    def test_pin_layout(self):
        self.assertEqual(self.ins[0].position, Point(100, 60))
        self.assertEqual(self.ins[1].position, Point(100, 70))
        self.assertEqual(self.out.position, Point(160, 65))
        self.assertEqual(self.vcc.position, Point(130, 50))
        self.assertEqual(self.gnd.position, Point(130, 80))

    def test_move_relays_pins(self):
        self.comp.set_position(0, 0)
        self.assertEqual(self.out.position, Point(60, 15))
        self.comp.x = 10
        self.assertEqual(self.ins[0].position, Point(10, 10))
        self.comp.set_size(100, 60)
        self.assertEqual(self.gnd.position, Point(60, 60))

    def test_all_pins_order(self):
        self.assertEqual(self.comp.all_pins(), [*self.ins, self.out, self.gnd, self.vcc])

    def test_bounding_box(self):
        self.assertEqual(self.comp.bounding_box(), Rect(100, 50, 60, 30))

    def test_minimum_size_on_construction(self):
        small = Component("tiny", width=5, height=8)
        self.assertEqual((small.width, small.height), (20, 20))

    def test_non_positive_size_clamped_on_construction(self):
        """Construction raises zero or negative sizes to the minimum."""
        flat = Component("flat", width=0, height=-15)
        self.assertEqual(flat.bounding_box(), Rect(0, 0, 20, 20))
        with self.assertRaises(InvalidSizeError):
            Component("bad", width=math.inf)
        with self.assertRaises(InvalidSizeError):
            flat.width = 0

    def test_invalid_geometry_rejected(self):
        with self.assertRaises(InvalidCoordinateError):
            Component("bad", x=math.nan)
        with self.assertRaises(InvalidSizeError):
            self.comp.set_size(0, 10)
        with self.assertRaises(InvalidSizeError):
            self.comp.height = -1
        with self.assertRaises(InvalidCoordinateError):
            self.comp.y = math.inf


class TestResistor(unittest.TestCase):

    def test_resistance(self):
        r = Resistor("r1", input_pins=[Pin("a")], output_pins=[Pin("b")], resistance=470)
        self.assertEqual(r.resistance, 470)
        self.assertEqual(r.bounding_box(), Rect(0, 0, 60, 40))

    def test_invalid_resistance(self):
        for value in (0, -10, math.inf, math.nan):
            with self.assertRaises(InvalidResistanceError):
                Resistor("r", resistance=value)


class TestWire(unittest.TestCase):

    def test_requires_both_pins(self):
        with self.assertRaises(ValueError):
            Wire(Pin("a"), None, "w")

    def test_counts_connections(self):
        a, b = Pin("a"), Pin("b")
        Wire(a, b, "w1")
        Wire(a, b, "w2")
        self.assertEqual(a.divergence_count, 2)
        self.assertEqual(b.convergence_count, 2)
        self.assertEqual(a.convergence_count, 0)

    def test_bend_points_copied(self):
        bends = [Point(1, 2)]
        wire = Wire(Pin("a"), Pin("b"), "w", bend_points=bends)
        bends.append(Point(3, 4))
        self.assertEqual(wire.bend_points, (Point(1, 2),))
        wire.add_bend_point(Point(5, 6))
        self.assertEqual(len(wire.bend_points), 2)
        wire.clear_bend_points()
        self.assertEqual(wire.bend_points, ())

    def test_unrouted_path_empty(self):
        self.assertEqual(Wire(Pin("a"), Pin("b"), "w").routed_path, ())


class TestCircuit(unittest.TestCase):

    def setUp(self):
        self.circuit = make_divider_circuit()

    def test_blank_name_rejected(self):
        with self.assertRaises(ValueError):
            Circuit("   ")

    def test_ownership_table(self):
        table = self.circuit.ownership()
        self.assertEqual(table["r1"], ["a", "b"])
        self.assertEqual(table["r2"], ["b", "a"])
        self.assertEqual(table["load"], ["in"])

    def test_obstacles_in_order(self):
        names = [c.name for c in self.circuit.components]
        self.assertEqual(names, ["src", "r1", "r2", "load"])
        self.assertEqual(self.circuit.obstacles()[1], Rect(200, 100, 60, 40))

    def test_add_and_remove(self):
        extra = Component("extra")
        self.circuit.add_component(extra)
        self.assertIs(self.circuit.get_component("extra"), extra)
        self.assertTrue(self.circuit.remove_component(extra))
        self.assertFalse(self.circuit.remove_component(extra))

        wire = self.circuit.wires[0]
        self.assertTrue(self.circuit.remove_wire(wire))
        self.assertFalse(self.circuit.remove_wire(wire))
        self.circuit.add_wire(wire)
        self.assertIs(self.circuit.wires[-1], wire)

        with self.assertRaises(ValueError):
            self.circuit.add_component(None)
        with self.assertRaises(ValueError):
            self.circuit.add_wire(None)

    def test_valid_fixture(self):
        self.assertEqual(self.circuit.validate_connections(), [])

    def test_foreign_pin_reported(self):
        stray = Pin("stray")
        load_in = self.circuit.get_component("load").input_pins[0]
        self.circuit.add_wire(Wire(stray, load_in, "BAD"))
        errors = validate_connections(self.circuit)
        self.assertEqual(len(errors), 1)
        self.assertIn("BAD", errors[0])
        self.assertIn("enter pin", errors[0])

    def test_duplicate_component_names_reported(self):
        self.circuit.add_component(Component("r1"))
        errors = self.circuit.validate_connections()
        self.assertIn("Duplicate component name 'r1'", errors)


if __name__ == "__main__":
    unittest.main()
