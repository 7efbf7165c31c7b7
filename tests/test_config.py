"""
Tests for numeric configuration constants.
"""

import math
import unittest

import numpy as np

from angleunit.config import DEG_PER_RAD, FLOAT_TYPE, PI, RAD_PER_DEG, TAU


class TestConstants(unittest.TestCase):
    """Test float32 constants."""

    def test_storage_type(self):
        """Test that angles are single precision."""
        self.assertIs(FLOAT_TYPE, np.float32)

    def test_constants_are_float32(self):
        """Test every constant's precision."""
        for constant in [PI, TAU, DEG_PER_RAD, RAD_PER_DEG]:
            self.assertIsInstance(constant, np.float32)

    def test_values(self):
        """Test constant values."""
        self.assertAlmostEqual(float(PI), math.pi, places=6)
        self.assertAlmostEqual(float(TAU), 2 * math.pi, places=5)
        self.assertAlmostEqual(float(DEG_PER_RAD), 180 / math.pi, places=4)
        self.assertAlmostEqual(float(RAD_PER_DEG), math.pi / 180, places=8)


if __name__ == '__main__':
    unittest.main()
