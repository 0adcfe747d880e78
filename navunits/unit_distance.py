"""Distance and length unit definitions.

This module provides the distance units used by navigation tools. All
distance measurements are internally stored in metres (the SI base unit) for
consistency, while supporting input and display in metric, imperial and
nautical scales.

The conversion factors are the exact defined values of each unit, so a
quantity converted to another unit and back reproduces the original value
within floating-point precision.

Classes:
    Metre: Base distance unit in metres (SI unit).
    Meter: Metres with US spelling.
    Kilometre, Millimetre: Metric multiples.
    Foot, Inch, Yard, Fathom, Mile: Imperial units.
    NauticalMile: International nautical mile (1852 m).

Type Aliases:
    Distance: Union type for all distance units.

Constants:
    *_IN_METRES: Size of each unit in metres, as plain floats.
    METRE, KILOMETRE, ...: One-unit quantities, so that ``120 * KILOMETRE``
        builds a distance.

Example:
    >>> leg = parse_distance("79.3NM")
    >>> print(leg)  # "79.300000 NM"
    >>> print(leg.to_kilometres())  # 146.8636
    >>> depth = 12 * FATHOM
    >>> print(depth.to_feet())  # 72.0
"""

from __future__ import annotations

from .unit_float import UnitFloat

METRE_IN_METRES = 1.0
KILOMETRE_IN_METRES = 1000.0
MILLIMETRE_IN_METRES = 0.001
FOOT_IN_METRES = 0.3048
YARD_IN_METRES = 0.9144
INCH_IN_METRES = 0.0254
NAUTICAL_MILE_IN_METRES = 1852.0
FATHOM_IN_METRES = 1.8288
MILE_IN_METRES = 1609.344


class Metre(UnitFloat):
    """Distance unit: Metre (SI base unit for length).

    The Metre class is the root of the distance family. Every distance unit
    derives from it, and every distance is stored in metres whatever unit
    it was created in. The accessor methods defined here are therefore
    available on all distances.

    Negative distances and infinities are valid values; only NaN marks an
    invalid distance.

    Attributes:
        IS_FAMILY_ROOT (bool): True, indicating this is the root distance unit.
        SCALE_TO_SI (float): 1.0, no conversion needed for SI base unit.
        SYMBOL (str): "m", the standard symbol for metres.
        UNIT_CHARS (str): Foot and inch marks may follow a numeral directly.

    Example:
        >>> offset = Metre(-10.4)
        >>> print(offset)  # "-10.400000 m"
        >>> print(offset.to_feet())  # -34.12...
    """

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = METRE_IN_METRES
    SYMBOL = "m"
    NAME = "metres"
    ALIASES = ("m",)
    UNIT_CHARS = "'\""

    def to_metres(self) -> float:
        """Return the distance in metres."""
        return self.to(Metre)

    def to_meters(self) -> float:
        """Return the distance in meters (US spelling of to_metres)."""
        return self.to(Meter)

    def to_kilometres(self) -> float:
        return self.to(Kilometre)

    def to_millimetres(self) -> float:
        return self.to(Millimetre)

    def to_nautical_miles(self) -> float:
        return self.to(NauticalMile)

    def to_miles(self) -> float:
        """Return the distance in statute miles."""
        return self.to(Mile)

    def to_feet(self) -> float:
        return self.to(Foot)

    def to_inches(self) -> float:
        return self.to(Inch)

    def to_yards(self) -> float:
        return self.to(Yard)

    def to_fathoms(self) -> float:
        return self.to(Fathom)


class Meter(Metre):
    """Distance unit: Meter, the metre with US spelling.

    Identical to Metre in value; only the displayed name differs.
    """

    NAME = "meters"


class Kilometre(Metre):
    """Distance unit: Kilometre (1000 metres).

    Example:
        >>> route = Kilometre(120)
        >>> print(float(route))  # 120000.0 (metres)
    """

    SCALE_TO_SI = KILOMETRE_IN_METRES
    SYMBOL = "km"
    NAME = "kilometres"
    ALIASES = ("km",)


class Millimetre(Metre):
    """Distance unit: Millimetre (0.001 metres)."""

    SCALE_TO_SI = MILLIMETRE_IN_METRES
    SYMBOL = "mm"
    NAME = "millimetres"


class NauticalMile(Metre):
    """Distance unit: international Nautical Mile (1852 metres).

    The standard unit for distances at sea and in the air. Accepted in
    quantity strings as "NM" or "nmi".

    Example:
        >>> leg = NauticalMile(5.4)
        >>> print(leg.to_kilometres())  # 10.0008
    """

    SCALE_TO_SI = NAUTICAL_MILE_IN_METRES
    SYMBOL = "NM"
    NAME = "nautical miles"
    ALIASES = ("NM", "nmi")


class Mile(Metre):
    """Distance unit: statute Mile (1609.344 metres)."""

    SCALE_TO_SI = MILE_IN_METRES
    SYMBOL = "mi"
    NAME = "miles"
    ALIASES = ("mile", "miles")


class Foot(Metre):
    """Distance unit: international Foot (0.3048 metres).

    Accepted in quantity strings as "ft" or as a foot mark, e.g. "6'".
    """

    SCALE_TO_SI = FOOT_IN_METRES
    SYMBOL = "ft"
    NAME = "feet"
    ALIASES = ("ft", "'")


class Inch(Metre):
    """Distance unit: Inch (0.0254 metres).

    Accepted in quantity strings as "in", "inch" or as an inch mark, e.g. '32"'.
    """

    SCALE_TO_SI = INCH_IN_METRES
    SYMBOL = "in"
    NAME = "inches"
    ALIASES = ("in", "inch", '"')


class Yard(Metre):
    """Distance unit: Yard (0.9144 metres)."""

    SCALE_TO_SI = YARD_IN_METRES
    SYMBOL = "yd"
    NAME = "yards"


class Fathom(Metre):
    """Distance unit: Fathom (six feet, 1.8288 metres), used for water depth."""

    SCALE_TO_SI = FATHOM_IN_METRES
    SYMBOL = "ftm"
    NAME = "fathoms"


METRE = Metre(1)
METER = Meter(1)
KILOMETRE = Kilometre(1)
MILLIMETRE = Millimetre(1)
NAUTICAL_MILE = NauticalMile(1)
MILE = Mile(1)
FOOT = Foot(1)
INCH = Inch(1)
YARD = Yard(1)
FATHOM = Fathom(1)


def parse_distance(text: str) -> Metre:
    """Parse a string holding a distance and a common unit abbreviation.

    Recognized units are "m", "km", "NM"/"nmi", "mile"/"miles", "ft"/"'"
    and "in"/"inch"/'"', matched case-sensitively. The numeral and the unit
    may be separated by whitespace or written together.

    Args:
        text: Distance string, e.g. "120km", "-10.4 m" or ".5'".

    Returns:
        Metre: Distance expressed in the unit named in the string.

    Raises:
        ParseError: If the string is malformed.
        UnknownUnitError: If the unit is not a recognized distance unit.
    """
    return Metre.parse(text)


# Type alias for any distance unit
Distance = (
    Metre | Meter | Kilometre | Millimetre | NauticalMile | Mile | Foot | Inch | Yard | Fathom
)
