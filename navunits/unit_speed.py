"""Speed unit definitions.

This module provides speed units for navigation. All speeds are based on
MetrePerSecond as the canonical unit (m/s), with automatic conversion between
the scales commonly used at sea, on land and in the air.

Every factor is derived from the exact distance constants, so a knot is one
nautical mile per hour and a mile per hour is one statute mile per hour.

Classes:
    MetrePerSecond: Canonical speed unit (m/s).
    Knot: Nautical miles per hour (kn).
    KilometresPerHour: Common land speed unit (km/h).
    MilesPerHour: Imperial speed unit (mph).

Type Aliases:
    Speed: Union type for all speed units.

Example:
    >>> cruise = parse_speed("16kn")
    >>> print(float(cruise))  # 8.2311... (m/s)
    >>> print(cruise.to_kph())  # 29.632
    >>>
    >>> limit = 50 * KPH
    >>> print(limit.to_knots())  # 26.99...
"""

from __future__ import annotations

from .unit_distance import KILOMETRE_IN_METRES, MILE_IN_METRES, NAUTICAL_MILE_IN_METRES
from .unit_float import UnitFloat

SECONDS_PER_HOUR = 3600.0

MPS_IN_MPS = 1.0
KNOT_IN_MPS = NAUTICAL_MILE_IN_METRES / SECONDS_PER_HOUR
KPH_IN_MPS = KILOMETRE_IN_METRES / SECONDS_PER_HOUR
MPH_IN_MPS = MILE_IN_METRES / SECONDS_PER_HOUR


class MetrePerSecond(UnitFloat):
    """Speed unit: Metres per Second (SI unit for speed).

    The root of the speed family. All other speed units derive from this
    class and are stored in m/s, so the accessor methods defined here are
    available on every speed.

    Attributes:
        IS_FAMILY_ROOT (bool): True, indicating this is the root speed unit.
        SCALE_TO_SI (float): 1.0, no conversion needed for SI unit.
        SYMBOL (str): "m/s", the standard symbol for metres per second.
        UNIT_CHARS (str): A slash may appear in units written directly after
            a numeral, e.g. "120km/h".

    Example:
        >>> wind = MetrePerSecond(2)
        >>> print(wind.to_kph())  # 7.2
    """

    IS_FAMILY_ROOT = True
    SCALE_TO_SI = MPS_IN_MPS
    SYMBOL = "m/s"
    NAME = "metres per second"
    ALIASES = ("m/s",)
    UNIT_CHARS = "/"

    def to_mps(self) -> float:
        """Return the speed in metres per second."""
        return self.to(MetrePerSecond)

    def to_kph(self) -> float:
        """Return the speed in kilometres per hour."""
        return self.to(KilometresPerHour)

    def to_knots(self) -> float:
        """Return the speed in knots."""
        return self.to(Knot)

    def to_mph(self) -> float:
        """Return the speed in miles per hour."""
        return self.to(MilesPerHour)


class Knot(MetrePerSecond):
    """Speed unit: Knot, one nautical mile per hour.

    Attributes:
        SCALE_TO_SI (float): 1852/3600 ≈ 0.5144, converts knots to m/s.
        SYMBOL (str): "kn", the symbol for knots.

    Example:
        >>> vessel = Knot(16)
        >>> print(float(vessel))  # 8.2311... (m/s)
    """

    SCALE_TO_SI = KNOT_IN_MPS
    SYMBOL = "kn"
    NAME = "knots"
    ALIASES = ("kn",)


class KilometresPerHour(MetrePerSecond):
    """Speed unit: Kilometres per Hour.

    Attributes:
        SCALE_TO_SI (float): 1000/3600 ≈ 0.2778, converts km/h to m/s.
        SYMBOL (str): "km/h", the symbol for kilometres per hour.
    """

    SCALE_TO_SI = KPH_IN_MPS
    SYMBOL = "km/h"
    NAME = "kilometres per hour"
    ALIASES = ("km/h",)


class MilesPerHour(MetrePerSecond):
    """Speed unit: statute Miles per Hour, accepted as "mph" or "mi/h"."""

    SCALE_TO_SI = MPH_IN_MPS
    SYMBOL = "mph"
    NAME = "miles per hour"
    ALIASES = ("mph", "mi/h")


MPS = MetrePerSecond(1)
KNOT = Knot(1)
KPH = KilometresPerHour(1)
MPH = MilesPerHour(1)


def parse_speed(text: str) -> MetrePerSecond:
    """Parse a string holding a speed and a common unit abbreviation.

    Recognized units are "m/s", "kn", "km/h" and "mph"/"mi/h", matched
    case-sensitively. Unknown abbreviations such as "kts" are rejected.

    Args:
        text: Speed string, e.g. "16kn", "32 m/s" or "120km/h".

    Returns:
        MetrePerSecond: Speed expressed in the unit named in the string.

    Raises:
        ParseError: If the string is malformed.
        UnknownUnitError: If the unit is not a recognized speed unit.
    """
    return MetrePerSecond.parse(text)


# Type alias for all speed unit types
Speed = MetrePerSecond | Knot | KilometresPerHour | MilesPerHour
