"""Float-based unit system with canonical storage and type safety.

This module provides the UnitFloat class, which serves as the foundation for
all numeric unit types in the library. It combines Python's float type with
unit safety, automatic conversion to the family's canonical unit, and type
checking to prevent mixing incompatible units.

Key Features:
- Values are stored in the canonical unit of their family (metres, m/s)
- Type-safe operations between compatible unit families
- Arithmetic operations with scalar values and other units
- Conversion methods between different units of the same family
- NaN marks an invalid quantity and propagates through every conversion
- Human-readable string representations

Classes:
    UnitFloat: Base class for all float-based units with canonical storage.

Example:
    >>> class Metre(UnitFloat):
    ...     IS_FAMILY_ROOT = True
    ...     SCALE_TO_SI = 1.0
    ...     SYMBOL = "m"
    ...
    >>> class Kilometre(Metre):
    ...     SCALE_TO_SI = 1000.0
    ...     SYMBOL = "km"
    ...
    >>> distance = Kilometre(5.2)  # 5.2 km
    >>> print(distance)  # "5.200000 km"
    >>> print(float(distance))  # 5200.0 (metres)
"""

from __future__ import annotations

from math import isnan
from typing import ClassVar

from .config import VALUE_FORMAT, Number
from .parsing import parse_quantity
from .unit_base import Unit


class UnitFloat(float, Unit):
    """Base class for type-safe unit calculations with canonical storage.

    This class stores values internally in the canonical unit of the family
    while allowing operations only between compatible unit types (same
    'root' family). The concrete class of an instance remembers the unit it
    was last expressed in; it is used for display only and never changes the
    stored value.

    Attributes:
        ROOT (ClassVar[type[UnitFloat]]): Root class defining the unit family.
        SCALE_TO_SI (ClassVar[float]): Size of one unit in the canonical unit.
        SYMBOL (ClassVar[str]): Unit abbreviation for display purposes.
        NAME (ClassVar[str]): Human readable unit name.
        IS_FAMILY_ROOT (ClassVar[bool]): Indicates if this class is a root unit.
    """

    __slots__ = ()

    SCALE_TO_SI: ClassVar[float] = 1.0
    IS_FAMILY_ROOT: ClassVar[bool] = True

    def __new__(cls, value: Number):
        """Create a new UnitFloat instance converted to the canonical unit.

        Args:
            value: Numeric value in the unit's native scale.

        Returns:
            UnitFloat: New instance with value stored in the canonical unit.
        """
        si_val = float(value) * cls.SCALE_TO_SI
        return float.__new__(cls, si_val)

    @classmethod
    def from_si(cls, si_value: float) -> UnitFloat:
        """Create instance directly from a canonical unit value.

        Args:
            si_value: Value already in the canonical unit.

        Returns:
            UnitFloat: New instance with the canonical value.
        """
        return float.__new__(cls, si_value)

    @classmethod
    def parse(cls, text: str) -> UnitFloat:
        """Parse a quantity string into a unit of this class's family.

        Args:
            text: Quantity string, e.g. "120km" or "16 kn".

        Returns:
            UnitFloat: Instance of the unit class named in the string.

        Raises:
            ParseError: If the string is malformed.
            UnknownUnitError: If the unit is not known to this family.
        """
        return parse_quantity(text, cls)

    def to(self, unit_type: type[UnitFloat]) -> float:
        """Convert to another unit of the same family.

        Args:
            unit_type: Target unit type to convert to.

        Returns:
            float: Value in the target unit's scale.
        """
        self._check_same_root(unit_type)
        return float(self) / unit_type.SCALE_TO_SI

    def as_unit(self, unit_type: type[UnitFloat]) -> UnitFloat:
        """Convert to another unit while preserving type information.

        Args:
            unit_type: Target unit type to convert to.

        Returns:
            UnitFloat: New instance of the target unit type.
        """
        self._check_same_root(unit_type)
        return unit_type.from_si(float(self))

    def valid(self) -> bool:
        """Return False if the quantity is NaN, True otherwise."""
        return not isnan(self)

    def name(self) -> str:
        """Return the full name of the unit, e.g. "kilometres"."""
        return type(self).NAME

    def short(self) -> str:
        """Return the abbreviation of the unit, e.g. "km"."""
        return type(self).SYMBOL

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self, other: UnitFloat) -> UnitFloat:
        """Add two units of the same family.

        Args:
            other: Unit value to add to this unit.

        Returns:
            UnitFloat: Sum of the two units.

        Raises:
            TypeError: If units are not from the same family.
        """
        self._check_same_root(type(other))
        return type(self).from_si(float(self) + float(other))

    def __radd__(self, other: UnitFloat) -> UnitFloat:
        """Right-side addition for units.

        A plain zero on the left is the additive identity, so ``sum()``
        works on a sequence of units with its default start value.

        Raises:
            TypeError: If other is a non-zero plain number or a unit of
                another family.
        """
        if not isinstance(other, Unit) and isinstance(other, Number) and other == 0:
            return self
        return self.__add__(other)

    def __sub__(self, other: UnitFloat) -> UnitFloat:
        """Subtract two units of the same family.

        Raises:
            TypeError: If units are not from the same family.
        """
        self._check_same_root(type(other))
        return type(self).from_si(float(self) - float(other))

    def __rsub__(self, other: UnitFloat) -> UnitFloat:
        self._check_same_root(type(other))
        return type(self).from_si(float(other) - float(self))

    def __mul__(self, k: Number) -> UnitFloat:
        """Multiply unit by scalar value.

        Args:
            k: Numeric scalar to multiply by.

        Returns:
            UnitFloat: Unit scaled by the factor.

        Raises:
            TypeError: If k is not a plain numeric scalar.
        """
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_si(float(self) * float(k))
        raise TypeError

    def __rmul__(self, k: Number) -> UnitFloat:
        return self.__mul__(k)

    def __truediv__(self, k: Number) -> UnitFloat:
        """Divide unit by scalar value.

        Raises:
            TypeError: If k is not a plain numeric scalar.
            ZeroDivisionError: If k is zero.
        """
        if isinstance(k, Number) and not isinstance(k, Unit):
            return type(self).from_si(float(self) / float(k))
        raise TypeError

    def __neg__(self) -> UnitFloat:
        return type(self).from_si(-float(self))

    def __pos__(self) -> UnitFloat:
        return self

    def __abs__(self) -> UnitFloat:
        return type(self).from_si(abs(float(self)))

    # -------------------------------- Comparison Operations --------------------------------
    def __lt__(self, other: UnitFloat) -> bool:
        """Less-than comparison between two units of the same family.

        Raises:
            TypeError: If units are not from the same family.
        """
        self._check_same_root(type(other))
        return float(self) < float(other)

    def __le__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) <= float(other)

    def __gt__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) > float(other)

    def __ge__(self, other: UnitFloat) -> bool:
        self._check_same_root(type(other))
        return float(self) >= float(other)

    def __eq__(self, other: object) -> bool:
        """Equality comparison of canonical values.

        Plain numbers compare as floats. Units of another family raise.

        Raises:
            TypeError: If other is a unit from a different family.
        """
        if not isinstance(other, Unit):
            return NotImplemented
        self._check_same_root(type(other))
        return float(self) == float(other)

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Unit):
            return NotImplemented
        self._check_same_root(type(other))
        return float(self) != float(other)

    __hash__ = float.__hash__

    def __reduce__(self):
        return type(self).from_si, (float(self),)

    def __str__(self) -> str:
        """Return human-readable string representation in the unit's native scale.

        Returns:
            str: Value and symbol in the unit's natural scale (e.g., "10.000000 km/h").
        """
        return f"{self.to(type(self)):{VALUE_FORMAT}} {type(self).SYMBOL}".strip()

    def __repr__(self) -> str:
        """Return detailed string representation showing both native and canonical values.

        Returns:
            str: Value in native scale with canonical equivalent (e.g., "2 km (= 2000 m)").
        """
        return f"{self.to(type(self)):g} {type(self).SYMBOL} (= {float(self):g} {self.ROOT.SYMBOL})"
