"""Angle unit in radians, with radian-valued trigonometric helpers.

Radians are the unit the standard trigonometric functions work in, so this
module also hosts thin wrappers around NumPy's float32 trig ufuncs. The
wrappers take a raw number as input and label only the *output* as Radians:

    >>> Radians.atan2(1.0, 1.0)
    0.7853982 rad
    >>> Radians.sin_cos(0.0)
    (0.0 rad, 1.0 rad)

Classes:
    Radians: Angle where one full turn equals 2π.
"""

from __future__ import annotations

import numpy as np

from .config import FLOAT_TYPE, TAU, Number
from .unit_degree import Degrees
from .unit_float import UnitFloat, _scalar


class Radians(UnitFloat):
    """An angle, in radians.

    Attributes:
        IS_FAMILY_ROOT (bool): True, radians never mix with other units.
        DIMENSION (str): "angle", convertible to and from Degrees.
        SCALE_TO_SI (np.float32): 1.0, radians are the SI angle unit.
        SCALE_FROM_SI (np.float32): 1.0.
        SYMBOL (str): "rad", separated from the value by a space.
    """

    __slots__ = ()

    IS_FAMILY_ROOT = True
    DIMENSION = "angle"
    SCALE_TO_SI = FLOAT_TYPE(1.0)
    SCALE_FROM_SI = FLOAT_TYPE(1.0)
    SYMBOL = "rad"
    SYMBOL_SEPARATOR = " "

    @classmethod
    def from_degrees(cls, degrees: Degrees) -> Radians:
        """Convert degrees to radians: ``degrees.value * (π / 180)``.

        Raises:
            TypeError: If given anything other than a Degrees value.
        """
        if not isinstance(degrees, Degrees):
            msg = f"Radians.from_degrees() expects Degrees, got {type(degrees).__name__}"
            raise TypeError(msg)
        return cls.convert(degrees)

    @classmethod
    def full_turn(cls) -> Radians:
        """One complete rotation, 2π."""
        return cls._from_raw(TAU)

    @classmethod
    def _apply(cls, ufunc, *args: Number) -> Radians:
        """Apply a float32 NumPy ufunc to raw numbers and wrap the result."""
        with np.errstate(all="ignore"):
            return cls._from_raw(ufunc(*(_scalar(a) for a in args)))

    @classmethod
    def sin(cls, f: Number) -> Radians:
        """Sine of the raw number ``f``, wrapped as Radians."""
        return cls._apply(np.sin, f)

    @classmethod
    def cos(cls, f: Number) -> Radians:
        """Cosine of the raw number ``f``, wrapped as Radians."""
        return cls._apply(np.cos, f)

    @classmethod
    def tan(cls, f: Number) -> Radians:
        """Tangent of the raw number ``f``; large but finite near odd multiples of π/2."""
        return cls._apply(np.tan, f)

    @classmethod
    def sin_cos(cls, f: Number) -> tuple[Radians, Radians]:
        """Sine and cosine of ``f``, each wrapped as Radians."""
        return cls.sin(f), cls.cos(f)

    @classmethod
    def asin(cls, f: Number) -> Radians:
        """Arcsine of ``f``; NaN outside [-1, 1]."""
        return cls._apply(np.arcsin, f)

    @classmethod
    def acos(cls, f: Number) -> Radians:
        """Arccosine of ``f``; NaN outside [-1, 1]."""
        return cls._apply(np.arccos, f)

    @classmethod
    def atan(cls, f: Number) -> Radians:
        """Arctangent of ``f``, in (-π/2, π/2)."""
        return cls._apply(np.arctan, f)

    @classmethod
    def atan2(cls, y: Number, x: Number) -> Radians:
        """Four-quadrant arctangent of ``y / x``."""
        return cls._apply(np.arctan2, y, x)
