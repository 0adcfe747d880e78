"""Typed distance and speed quantities for navigation tools.

This package provides a small, type-safe unit system for the two quantities
navigation software deals with most: distance and speed. It stores every
value in one canonical unit per family, converts between the common metric,
imperial and nautical units, and parses the quantity strings operators type
("120km", "16 kn", ".5'").

Architecture:
    The unit system is organized into specialized modules:

    - unit_base: Foundation Unit class with family and alias management
    - unit_float: Float-based units with canonical storage
    - unit_distance: Distance units, stored in metres
    - unit_speed: Speed units, stored in metres per second
    - parsing: Quantity string tokenizer shared by all families
    - errors: Exceptions raised by the parser
    - config: Numeric type definitions and formatting options

Key Features:
    - Type Safety: Prevents mixing incompatible units (e.g., metres + knots)
    - Canonical Storage: float(quantity) is always metres or m/s
    - Exact Constants: Conversions use the defined size of each unit
    - Validity: NaN marks an invalid quantity and propagates through conversions
    - Parsing: One algorithm for every family, with clear error kinds

Example:
    >>> from navunits import KNOT, NAUTICAL_MILE, parse_distance, parse_speed
    >>>
    >>> leg = parse_distance("79.3NM")
    >>> cruise = 16 * KNOT
    >>> print(leg.to_kilometres())  # 146.8636
    >>> print(cruise.to_mps())  # 8.2311...
    >>>
    >>> total = leg + 20 * NAUTICAL_MILE  # OK: both distances
    >>> # total + cruise  # TypeError: incompatible units
    >>>
    >>> parse_speed("16 kts")  # UnknownUnitError
"""

import logging

from .errors import ParseError, UnitError, UnknownUnitError
from .parsing import parse_number, parse_quantity, split_quantity
from .unit_base import Unit
from .unit_distance import (
    FATHOM,
    FATHOM_IN_METRES,
    FOOT,
    FOOT_IN_METRES,
    INCH,
    INCH_IN_METRES,
    KILOMETRE,
    KILOMETRE_IN_METRES,
    METER,
    METRE,
    METRE_IN_METRES,
    MILE,
    MILE_IN_METRES,
    MILLIMETRE,
    MILLIMETRE_IN_METRES,
    NAUTICAL_MILE,
    NAUTICAL_MILE_IN_METRES,
    YARD,
    YARD_IN_METRES,
    Distance,
    Fathom,
    Foot,
    Inch,
    Kilometre,
    Meter,
    Metre,
    Mile,
    Millimetre,
    NauticalMile,
    Yard,
    parse_distance,
)
from .unit_float import UnitFloat
from .unit_speed import (
    KNOT,
    KNOT_IN_MPS,
    KPH,
    KPH_IN_MPS,
    MPH,
    MPH_IN_MPS,
    MPS,
    KilometresPerHour,
    Knot,
    MetrePerSecond,
    MilesPerHour,
    Speed,
    parse_speed,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Define public API
__all__ = [
    # Base classes
    "Unit",
    "UnitFloat",
    # Errors
    "UnitError",
    "ParseError",
    "UnknownUnitError",
    # Parsing
    "split_quantity",
    "parse_number",
    "parse_quantity",
    "parse_distance",
    "parse_speed",
    # Distance units
    "Metre",
    "Meter",
    "Kilometre",
    "Millimetre",
    "NauticalMile",
    "Mile",
    "Foot",
    "Inch",
    "Yard",
    "Fathom",
    "Distance",
    # Distance constants
    "METRE",
    "METER",
    "KILOMETRE",
    "MILLIMETRE",
    "NAUTICAL_MILE",
    "MILE",
    "FOOT",
    "INCH",
    "YARD",
    "FATHOM",
    "METRE_IN_METRES",
    "KILOMETRE_IN_METRES",
    "MILLIMETRE_IN_METRES",
    "NAUTICAL_MILE_IN_METRES",
    "MILE_IN_METRES",
    "FOOT_IN_METRES",
    "INCH_IN_METRES",
    "YARD_IN_METRES",
    "FATHOM_IN_METRES",
    # Speed units
    "MetrePerSecond",
    "Knot",
    "KilometresPerHour",
    "MilesPerHour",
    "Speed",
    # Speed constants
    "MPS",
    "KNOT",
    "KPH",
    "MPH",
    "KNOT_IN_MPS",
    "KPH_IN_MPS",
    "MPH_IN_MPS",
]
