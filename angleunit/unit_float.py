"""Single-precision unit newtype with IEEE-754 operator semantics.

This module provides the UnitFloat class, the foundation of both angle
types. A UnitFloat wraps exactly one ``numpy.float32`` and defines the
arithmetic that is meaningful for a quantity of one unit:

- quantity + quantity, quantity - quantity -> quantity
- quantity * scalar, quantity / scalar, quantity % scalar -> quantity
- quantity / quantity, quantity % quantity -> dimensionless float32
- unary negation, comparisons, rendering

Unlike a ``float`` subclass, a UnitFloat never coerces implicitly to or from
a raw number. The constructor is the only way in and ``value`` is the only
way out, so an angle cannot leak into an expression expecting a different
unit.

Numeric anomalies never raise. Division by zero, overflow and NaN operands
produce the IEEE-754 results (inf, NaN) exactly as float32 arithmetic would;
NumPy's floating point warnings are silenced inside the operators.

Classes:
    UnitFloat: Base class for float32-backed units.

Example:
    >>> class Turns(UnitFloat):
    ...     IS_FAMILY_ROOT = True
    ...     SYMBOL = "tr"
    ...     SYMBOL_SEPARATOR = " "
    >>> Turns(0.5) * 2
    1.0 tr
    >>> Turns(1.0) / Turns(4.0)
    np.float32(0.25)
"""

from __future__ import annotations

import math
from typing import ClassVar

import numpy as np

from .config import FLOAT_TYPE, Number
from .unit_base import Unit


def _scalar(k) -> np.float32:
    """Convert a raw scalar operand to float32, rejecting anything else."""
    if isinstance(k, Unit) or not isinstance(k, Number):
        msg = f"expected a real number, got {type(k).__name__}"
        raise TypeError(msg)
    with np.errstate(over="ignore"):
        try:
            return FLOAT_TYPE(k)
        except OverflowError:
            # Python ints beyond float64 range saturate like any other overflow.
            return FLOAT_TYPE(math.inf if k > 0 else -math.inf)


class UnitFloat(Unit):
    """Base class for immutable, float32-backed unit values.

    Attributes:
        SCALE_TO_SI (ClassVar[np.float32]): Factor turning a value of this
            unit into the SI unit of its dimension.
        SCALE_FROM_SI (ClassVar[np.float32]): Factor turning an SI value into
            this unit. Kept separately so conversions never divide.
        SYMBOL_SEPARATOR (ClassVar[str]): Text placed between value and symbol.
    """

    __slots__ = ("_value",)

    SCALE_TO_SI: ClassVar[np.float32] = FLOAT_TYPE(1.0)
    SCALE_FROM_SI: ClassVar[np.float32] = FLOAT_TYPE(1.0)
    SYMBOL_SEPARATOR: ClassVar[str] = " "
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __init__(self, value: Number = 0.0):
        """Wrap a raw number. No unit conversion is performed.

        Args:
            value: Numeric value, already expressed in this unit.

        Raises:
            TypeError: If value is not a real number (including other units).
        """
        self._value = _scalar(value)

    @classmethod
    def new(cls, value: Number = 0.0) -> UnitFloat:
        """Alias of the constructor."""
        return cls(value)

    @classmethod
    def _from_raw(cls, raw: np.float32) -> UnitFloat:
        obj = cls.__new__(cls)
        obj._value = FLOAT_TYPE(raw)
        return obj

    @property
    def value(self) -> np.float32:
        """The wrapped float32, verbatim."""
        return self._value

    # -------------------------------- Conversion --------------------------------
    @classmethod
    def convert(cls, other: UnitFloat) -> UnitFloat:
        """Build an instance of this unit from a value of a convertible unit.

        The value is scaled by ``other.SCALE_TO_SI * cls.SCALE_FROM_SI`` in
        float32, so the result carries ordinary rounding error and a round
        trip is not guaranteed to be bit exact.

        Args:
            other: Value in any unit of the same dimension.

        Returns:
            UnitFloat: New instance of ``cls``.

        Raises:
            TypeError: If other is not a unit of the same dimension.
        """
        if not isinstance(other, UnitFloat):
            msg = f"cannot convert {type(other).__name__} to {cls.__name__}"
            raise TypeError(msg)
        cls._check_same_dimension(type(other))
        if type(other).ROOT is cls.ROOT:
            return cls._from_raw(other._value)
        with np.errstate(all="ignore"):
            return cls._from_raw(other._value * other.SCALE_TO_SI * cls.SCALE_FROM_SI)

    def as_unit(self, unit_type: type[UnitFloat]) -> UnitFloat:
        """Convert to another unit of the same dimension.

        Args:
            unit_type: Target unit type to convert to.

        Returns:
            UnitFloat: New instance of the target unit type.
        """
        return unit_type.convert(self)

    # -------------------------------- Arithmetic Operations --------------------------------
    def __neg__(self) -> UnitFloat:
        """Negate the value.

        Returns:
            UnitFloat: Same unit with the sign flipped (NaN stays NaN).
        """
        return type(self)._from_raw(-self._value)

    def __add__(self, other: UnitFloat) -> UnitFloat:
        """Add two values of the same unit.

        Args:
            other: Value to add to this one.

        Returns:
            UnitFloat: Sum of the two values.

        Raises:
            TypeError: If other belongs to a different unit family.
        """
        if not isinstance(other, Unit):
            return NotImplemented
        self._check_same_root(type(other))
        with np.errstate(all="ignore"):
            return type(self)._from_raw(self._value + other._value)

    def __sub__(self, other: UnitFloat) -> UnitFloat:
        """Subtract two values of the same unit.

        Args:
            other: Value to subtract from this one.

        Returns:
            UnitFloat: Difference of the two values.

        Raises:
            TypeError: If other belongs to a different unit family.
        """
        if not isinstance(other, Unit):
            return NotImplemented
        self._check_same_root(type(other))
        with np.errstate(all="ignore"):
            return type(self)._from_raw(self._value - other._value)

    def __mul__(self, k: Number) -> UnitFloat:
        """Scale by a raw number.

        There is deliberately no unit * unit product and no reflected
        ``k * unit`` form; both raise TypeError.

        Args:
            k: Numeric scalar to multiply by.

        Returns:
            UnitFloat: Value scaled by the factor.
        """
        if isinstance(k, Unit) or not isinstance(k, Number):
            return NotImplemented
        with np.errstate(all="ignore"):
            return type(self)._from_raw(self._value * _scalar(k))

    def __truediv__(self, other: UnitFloat | Number) -> UnitFloat | np.float32:
        """Divide by another value of the same unit or by a raw number.

        Args:
            other: Divisor. A unit of the same family yields the
                dimensionless ratio; a raw number yields a scaled unit.

        Returns:
            np.float32 for unit / unit, otherwise an instance of this unit.
            A zero divisor yields inf or NaN.

        Raises:
            TypeError: If other belongs to a different unit family.
        """
        with np.errstate(all="ignore"):
            if isinstance(other, Unit):
                self._check_same_root(type(other))
                return self._value / other._value
            if isinstance(other, Number):
                return type(self)._from_raw(self._value / _scalar(other))
        return NotImplemented

    def __mod__(self, other: UnitFloat | Number) -> UnitFloat | np.float32:
        """Truncated remainder against the same unit or a raw number.

        Uses ``fmod`` semantics: the sign of the result follows the dividend,
        so ``-450 % 360`` is ``-90`` and not ``270``.

        Returns:
            np.float32 for unit % unit, otherwise an instance of this unit.

        Raises:
            TypeError: If other belongs to a different unit family.
        """
        with np.errstate(all="ignore"):
            if isinstance(other, Unit):
                self._check_same_root(type(other))
                return np.fmod(self._value, other._value)
            if isinstance(other, Number):
                return type(self)._from_raw(np.fmod(self._value, _scalar(other)))
        return NotImplemented

    # In-place forms rebind the name to a new value. Division and remainder
    # only accept scalars here, otherwise Python would fall back to the
    # unit / unit form and silently turn the variable into a plain float.
    def __iadd__(self, other: UnitFloat) -> UnitFloat:
        """In-place addition with another value of the same unit.

        Args:
            other: Value to add.

        Returns:
            UnitFloat: New value bound to the left-hand name.

        Raises:
            TypeError: If other belongs to a different unit family.
        """
        return self.__add__(other)

    def __isub__(self, other: UnitFloat) -> UnitFloat:
        """In-place subtraction with another value of the same unit.

        Args:
            other: Value to subtract.

        Returns:
            UnitFloat: New value bound to the left-hand name.

        Raises:
            TypeError: If other belongs to a different unit family.
        """
        return self.__sub__(other)

    def __imul__(self, k: Number) -> UnitFloat:
        """In-place multiplication with a scalar value.

        Args:
            k: Numeric scalar to multiply by.

        Returns:
            UnitFloat: New value bound to the left-hand name.
        """
        return self.__mul__(k)

    def __itruediv__(self, k: Number) -> UnitFloat:
        """In-place division by a scalar value.

        Raises:
            TypeError: If k is not a raw number.
        """
        return type(self)._from_raw(self._inplace_scalar_op(np.divide, k))

    def __imod__(self, k: Number) -> UnitFloat:
        """In-place truncated remainder by a scalar value.

        Raises:
            TypeError: If k is not a raw number.
        """
        return type(self)._from_raw(self._inplace_scalar_op(np.fmod, k))

    def _inplace_scalar_op(self, op, k) -> np.float32:
        if isinstance(k, Unit) or not isinstance(k, Number):
            msg = (
                f"unsupported operand type for in-place operation on "
                f"{type(self).__name__}: {type(k).__name__}"
            )
            raise TypeError(msg)
        with np.errstate(all="ignore"):
            return op(self._value, _scalar(k))

    # -------------------------------- Comparisons --------------------------------
    def __eq__(self, other: object) -> bool:
        """Exact float equality. Values of another unit family never compare equal."""
        if not isinstance(other, Unit) or type(other).ROOT is not self.ROOT:
            return NotImplemented
        return bool(self._value == other._value)

    def __ne__(self, other: object) -> bool:
        """Exact float inequality; NaN is unequal to everything, itself included.

        Args:
            other: Object to compare against.

        Returns:
            bool: True if the values differ.
        """
        if not isinstance(other, Unit) or type(other).ROOT is not self.ROOT:
            return NotImplemented
        return bool(self._value != other._value)

    def __lt__(self, other: UnitFloat) -> bool:
        """Less-than comparison between two values of the same unit.

        Raises:
            TypeError: If other belongs to a different unit family.
        """
        if not isinstance(other, Unit):
            return NotImplemented
        self._check_same_root(type(other))
        return bool(self._value < other._value)

    def __le__(self, other: UnitFloat) -> bool:
        """Less-than-or-equal comparison between two values of the same unit.

        Args:
            other: Value to compare against.

        Returns:
            bool: True if this value is less than or equal to the other.

        Raises:
            TypeError: If other belongs to a different unit family.
        """
        if not isinstance(other, Unit):
            return NotImplemented
        self._check_same_root(type(other))
        return bool(self._value <= other._value)

    def __gt__(self, other: UnitFloat) -> bool:
        """Greater-than comparison between two values of the same unit.

        Args:
            other: Value to compare against.

        Returns:
            bool: True if this value is greater than the other.

        Raises:
            TypeError: If other belongs to a different unit family.
        """
        if not isinstance(other, Unit):
            return NotImplemented
        self._check_same_root(type(other))
        return bool(self._value > other._value)

    def __ge__(self, other: UnitFloat) -> bool:
        """Greater-than-or-equal comparison between two values of the same unit.

        Args:
            other: Value to compare against.

        Returns:
            bool: True if this value is greater than or equal to the other.

        Raises:
            TypeError: If other belongs to a different unit family.
        """
        if not isinstance(other, Unit):
            return NotImplemented
        self._check_same_root(type(other))
        return bool(self._value >= other._value)

    def __hash__(self) -> int:
        """Hash by unit family and value, consistent with ``__eq__``.

        Returns:
            int: Hash of the (family, value) pair.
        """
        return hash((self.ROOT, float(self._value)))

    # -------------------------------- Rendering --------------------------------
    def _format_value(self) -> str:
        # str() of a float32 gives its shortest round-trip text; an f-string
        # would go through float.__format__ and print float64 digits.
        if np.isnan(self._value):
            return "NaN"
        return str(self._value)

    def __str__(self) -> str:
        """Return the value followed by the unit symbol (e.g., "90.0°").

        Returns:
            str: Shortest float32 text, then the separator and symbol. NaN
            renders as ``NaN``.
        """
        return f"{self._format_value()}{type(self).SYMBOL_SEPARATOR}{type(self).SYMBOL}"

    __repr__ = __str__

    def __format__(self, format_spec: str) -> str:
        """Apply a float format spec to the value and append the unit symbol."""
        if not format_spec:
            return str(self)
        number = format(float(self._value), format_spec)
        return f"{number}{type(self).SYMBOL_SEPARATOR}{type(self).SYMBOL}"

    def __reduce__(self):
        """Pickle as the unit type and its single numeric field.

        Returns:
            tuple: ``(type(self), (value,))`` with the value as a Python float.
        """
        return (type(self), (float(self._value),))
