"""
Tests for the unit family machinery.
"""

import unittest

from angleunit import Degrees, Radians, Unit, UnitFloat


class TestUnitFamilies(unittest.TestCase):
    """Test ROOT and DIMENSION handling."""

    def test_each_angle_is_its_own_family(self):
        """Test that Degrees and Radians are separate roots."""
        self.assertIs(Degrees.ROOT, Degrees)
        self.assertIs(Radians.ROOT, Radians)

    def test_subclass_inherits_root(self):
        """Test automatic ROOT assignment through the MRO."""

        class CompassDegrees(Degrees):
            pass

        self.assertIs(CompassDegrees.ROOT, Degrees)
        self.assertEqual(CompassDegrees(10.0) + Degrees(5.0), Degrees(15.0))

    def test_check_same_root(self):
        """Test the family check message."""
        Degrees._check_same_root(Degrees)
        with self.assertRaisesRegex(TypeError, "Degrees with Radians"):
            Degrees._check_same_root(Radians)

    def test_check_same_dimension(self):
        """Test that only units of the same dimension convert."""

        class Meters(UnitFloat):
            IS_FAMILY_ROOT = True
            DIMENSION = "length"
            SYMBOL = "m"

        Degrees._check_same_dimension(Radians)
        with self.assertRaises(TypeError):
            Degrees._check_same_dimension(Meters)
        with self.assertRaises(TypeError):
            Degrees.convert(Meters(1.0))
        with self.assertRaises(TypeError):
            Meters(1.0) + Degrees(1.0)

    def test_undeclared_dimension_never_converts(self):
        """Test that units without a dimension are not convertible."""

        class Plain(Unit):
            pass

        with self.assertRaises(TypeError):
            Plain._check_same_dimension(Plain)

    def test_no_instance_dict(self):
        """Test that angles are slot-only values."""
        with self.assertRaises(AttributeError):
            Degrees(1.0).unit = "rad"


if __name__ == '__main__':
    unittest.main()
