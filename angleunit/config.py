"""Numeric type definitions and constants shared by the angle units.

This module centralizes the precision decisions for the package. Every angle
stores exactly one IEEE-754 single-precision float, and every constant used
by the conversions is computed in that same precision so that results match
what float32 arithmetic would produce anywhere else.

Type Definitions:
    FLOAT_TYPE: The storage type of every angle value (``numpy.float32``).
    Number: Union of the scalar types accepted wherever a raw number is
            expected (construction, scaling, trig helper inputs).

Constants:
    PI: π rounded to float32.
    TAU: One full turn in radians, ``2 * PI`` in float32.
    DEG_PER_RAD: ``180 / PI`` computed in float32.
    RAD_PER_DEG: ``PI / 180`` computed in float32.

Example:
    >>> from angleunit.config import FLOAT_TYPE, RAD_PER_DEG
    >>> FLOAT_TYPE(180.0) * RAD_PER_DEG
    np.float32(3.1415927)
"""

import numpy as np

FLOAT_TYPE = np.float32

Number = int | float | np.integer | np.floating

PI = FLOAT_TYPE(np.pi)
TAU = PI * FLOAT_TYPE(2.0)

DEG_PER_RAD = FLOAT_TYPE(180.0) / PI
RAD_PER_DEG = PI / FLOAT_TYPE(180.0)
