"""Strongly-typed planar angles.

This package provides two single-field angle quantities, Degrees and Radians,
whose unit is part of their type. Values of different units never combine
implicitly: adding degrees to radians raises TypeError, and the only way to
move between the two is an explicit conversion.

Architecture:
    - config: float32 storage type and conversion constants
    - unit_base: Unit, the unit family machinery
    - unit_float: UnitFloat, the float32 newtype and its operators
    - unit_degree: Degrees
    - unit_radian: Radians and the radian-valued trig helpers
    - serialization: optional bare-number encoding (JSON, primitives)

Operator Summary:
    angle + angle, angle - angle, -angle      -> angle
    angle * scalar, angle / scalar, angle % scalar -> angle
    angle / angle, angle % angle              -> float32 ratio / remainder

Numeric anomalies follow IEEE-754: dividing by a zero angle gives inf or NaN
rather than raising, and NaN compares unequal and unordered to everything.

Example:
    >>> from angleunit import Degrees, Radians
    >>> right = Degrees(90.0)
    >>> print(right * 2.0)
    180.0°
    >>> Degrees(180.0) / right
    np.float32(2.0)
    >>> print(Radians.from_degrees(Degrees(180.0)))
    3.1415927 rad
"""

import logging

from .unit_base import Unit
from .unit_degree import Degrees
from .unit_float import UnitFloat
from .unit_radian import Radians

logging.getLogger(__name__).addHandler(logging.NullHandler())

Angle = Degrees | Radians

__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Angular units
    "Degrees",
    "Radians",
    "Angle",
]
