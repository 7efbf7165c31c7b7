"""
Tests for single-field angle serialization.
"""

import copy
import json
import math
import pickle
import unittest

import numpy as np

from angleunit import Degrees, Radians
from angleunit.serialization import (
    AngleJSONEncoder,
    dumps,
    from_primitive,
    loads,
    to_primitive,
)


class TestPrimitives(unittest.TestCase):
    """Test conversion to and from bare numbers."""

    def test_to_primitive(self):
        """Test that an angle encodes as its number only."""
        self.assertEqual(to_primitive(Degrees(90.0)), 90.0)
        self.assertIsInstance(to_primitive(Radians(1.5)), float)

    def test_from_primitive(self):
        """Test that decoding wraps without reinterpretation."""
        self.assertEqual(from_primitive(Degrees, 90.0), Degrees(90.0))
        self.assertEqual(from_primitive(Radians, 90), Radians(90.0))

    def test_from_primitive_rejects_non_numbers(self):
        """Test decoding errors."""
        for payload in ["90", None, True, [90.0], {"value": 90.0}]:
            with self.assertRaises(TypeError):
                from_primitive(Degrees, payload)

    def test_to_primitive_rejects_non_angles(self):
        """Test encoding errors."""
        with self.assertRaises(TypeError):
            to_primitive(90.0)


class TestJson(unittest.TestCase):
    """Test JSON encoding."""

    def test_dumps_bare_angle(self):
        """Test a top-level angle."""
        self.assertEqual(dumps(Degrees(90.0)), "90.0")
        self.assertEqual(dumps(Radians(-0.5)), "-0.5")

    def test_dumps_nested(self):
        """Test angles nested in containers."""
        text = dumps({"heading": Degrees(90.0), "path": [Radians(1.0), Radians(2.0)]})
        self.assertEqual(json.loads(text), {"heading": 90.0, "path": [1.0, 2.0]})

    def test_encoder_with_stdlib(self):
        """Test the encoder class used directly with json.dumps."""
        self.assertEqual(json.dumps([Degrees(1.0)], cls=AngleJSONEncoder), "[1.0]")

    def test_encoder_rejects_unknown(self):
        """Test that other objects still fail to encode."""
        with self.assertRaises(TypeError):
            dumps(object())

    def test_loads(self):
        """Test decoding into a chosen unit."""
        self.assertEqual(loads("90.0", Degrees), Degrees(90.0))
        self.assertEqual(loads(b"1.5", Radians), Radians(1.5))
        with self.assertRaises(TypeError):
            loads('"90.0"', Degrees)
        with self.assertRaises(json.JSONDecodeError):
            loads("ninety", Degrees)

    def test_round_trip_is_exact_for_float32(self):
        """Test that the float32 value survives JSON text unchanged."""
        for x in [0.1, 1.0 / 3.0, -123.456, 3e38]:
            angle = Degrees(x)
            self.assertEqual(loads(dumps(angle), Degrees).value, angle.value)

    def test_non_finite(self):
        """Test NaN and infinity literals."""
        self.assertEqual(dumps(Degrees(float("inf"))), "Infinity")
        self.assertTrue(np.isnan(loads(dumps(Radians(float("nan"))), Radians).value))

    def test_loads_out_of_range_integer(self):
        """Test that a JSON integer beyond float range decodes to infinity."""
        self.assertTrue(np.isposinf(loads("1" + "0" * 400, Degrees).value))
        self.assertTrue(np.isneginf(loads("-1" + "0" * 400, Radians).value))
        self.assertTrue(np.isposinf(from_primitive(Degrees, 10**400).value))


class TestCopyAndPickle(unittest.TestCase):
    """Test copy and pickle support."""

    def test_pickle(self):
        """Test pickling keeps type and value."""
        for angle in [Degrees(12.5), Radians(-3.0)]:
            restored = pickle.loads(pickle.dumps(angle))
            self.assertIs(type(restored), type(angle))
            self.assertEqual(restored, angle)

    def test_copy(self):
        """Test shallow and deep copies."""
        angle = Degrees(math.pi)
        self.assertEqual(copy.copy(angle), angle)
        self.assertEqual(copy.deepcopy(angle).value, angle.value)


if __name__ == '__main__':
    unittest.main()
