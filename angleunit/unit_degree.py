"""Angle unit in degrees.

Classes:
    Degrees: Angle where one full turn equals 360.

Example:
    >>> from angleunit import Degrees, Radians
    >>> heading = Degrees(45)
    >>> print(heading)
    45.0°
    >>> print(Degrees.from_radians(Radians.full_turn()))
    360.0°
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import DEG_PER_RAD, RAD_PER_DEG
from .unit_float import UnitFloat

if TYPE_CHECKING:
    from .unit_radian import Radians


class Degrees(UnitFloat):
    """An angle, in degrees.

    The wrapped float is taken to be degrees as-is; construction never
    converts. Values are unrestricted: negative, beyond 360, NaN and
    infinite angles are all stored verbatim.

    Attributes:
        IS_FAMILY_ROOT (bool): True, degrees never mix with other units.
        DIMENSION (str): "angle", convertible to and from Radians.
        SCALE_TO_SI (np.float32): π/180 in float32.
        SCALE_FROM_SI (np.float32): 180/π in float32.
        SYMBOL (str): "°", rendered directly after the value.
    """

    __slots__ = ()

    IS_FAMILY_ROOT = True
    DIMENSION = "angle"
    SCALE_TO_SI = RAD_PER_DEG
    SCALE_FROM_SI = DEG_PER_RAD
    SYMBOL = "°"
    SYMBOL_SEPARATOR = ""

    @classmethod
    def from_radians(cls, radians: Radians) -> Degrees:
        """Convert radians to degrees: ``radians.value * (180 / π)``.

        Raises:
            TypeError: If given anything other than a Radians value.
        """
        if isinstance(radians, cls):
            msg = "Degrees.from_radians() expects Radians, got Degrees"
            raise TypeError(msg)
        return cls.convert(radians)
