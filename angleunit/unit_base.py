"""Base unit system foundation for type-safe angle quantities.

This module provides the fundamental Unit class that serves as the abstract
base for the angle types. It implements the unit family system using
automatic ROOT class assignment, which keeps quantities of different units
from being combined while still letting them be converted into each other
explicitly.

Two orthogonal ideas are tracked per class:

- ROOT: the unit family. Arithmetic and comparisons are only defined between
  members of the same family, so a value in degrees can never be added to a
  value in radians.
- DIMENSION: the physical quantity a unit measures. Units sharing a dimension
  are convertible into each other, but only through an explicit conversion.

Key Concepts:
- IS_FAMILY_ROOT: Boolean flag marking the base class of each family
- Automatic Assignment: ROOT classes are determined automatically via MRO
- Type Safety: Mixing families raises TypeError instead of silently
  producing a number in the wrong unit

Classes:
    Unit: Abstract base class for all unit types with family management.

Example:
    >>> class Degrees(Unit):
    ...     IS_FAMILY_ROOT = True
    ...     DIMENSION = "angle"
    >>> class Radians(Unit):
    ...     IS_FAMILY_ROOT = True
    ...     DIMENSION = "angle"
    >>> Degrees._check_same_root(Radians)
    Traceback (most recent call last):
    ...
    TypeError: cannot combine Degrees with Radians; convert explicitly first
"""

from __future__ import annotations

from typing import ClassVar


class Unit:
    """Base class for all unit types.

    Concrete quantities should inherit from UnitFloat rather than directly
    from this class.

    Attributes:
        ROOT (ClassVar[type[Unit]]): Root class defining the unit family.
        SYMBOL (ClassVar[str]): Unit symbol for display purposes.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
        DIMENSION (ClassVar[str]): Physical quantity measured by the unit.
    """

    __slots__ = ()

    # Keep NumPy from broadcasting over unit instances; binary operations with
    # NumPy scalars on the left then fall through to our reflected methods.
    __array_ufunc__ = None

    ROOT: ClassVar[type[Unit]]
    SYMBOL: ClassVar[str] = ""
    IS_FAMILY_ROOT: ClassVar[bool] = False
    DIMENSION: ClassVar[str] = ""

    def __init_subclass__(cls, **kwargs):
        """Automatically set ROOT class for subclasses.

        The ROOT is the first class in the MRO (including the class itself)
        that declares ``IS_FAMILY_ROOT = True`` in its own namespace, or the
        class itself if none does.

        Args:
            **kwargs: Additional keyword arguments passed to super().__init_subclass__.
        """
        super().__init_subclass__(**kwargs)
        if "ROOT" in cls.__dict__ and cls.ROOT is not None:
            return

        if cls.__dict__.get("IS_FAMILY_ROOT", False):
            cls.ROOT = cls
            return

        for base in cls.mro()[1:]:
            if base.__dict__.get("IS_FAMILY_ROOT", False):
                cls.ROOT = base
                return

        cls.ROOT = cls

    @classmethod
    def _check_same_root(cls, unit_type: type[Unit]):
        """Check that another unit type belongs to the same unit family.

        Args:
            unit_type: The other unit type to check compatibility with.

        Raises:
            TypeError: If the units belong to different families.
        """
        if cls.ROOT is not unit_type.ROOT:
            msg = (
                f"cannot combine {cls.ROOT.__name__} with {unit_type.ROOT.__name__}; "
                "convert explicitly first"
            )
            raise TypeError(msg)

    @classmethod
    def _check_same_dimension(cls, unit_type: type[Unit]):
        """Check that another unit type measures the same physical quantity.

        Args:
            unit_type: The unit type a value would be converted from or to.

        Raises:
            TypeError: If the dimensions differ or either one is undeclared.
        """
        if not cls.DIMENSION or cls.DIMENSION != unit_type.DIMENSION:
            msg = f"cannot convert between {unit_type.__name__} and {cls.__name__}"
            raise TypeError(msg)
