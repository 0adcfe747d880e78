"""Parsing of human-written quantity strings.

A quantity string holds one numeral and one unit abbreviation, separated by
whitespace ("16 kn") or written together ("120km"). The same algorithm serves
every unit family; a family only contributes its alias table and the extra
characters its unit tokens may contain.

Functions:
    split_quantity: Split a quantity string into a (numeral, unit) pair.
    parse_number: Parse a numeral token as a float.
    parse_quantity: Parse a quantity string into a unit of a given family.

Example:
    >>> from navunits import Metre
    >>> split_quantity("120km")
    ('120', 'km')
    >>> parse_quantity("79.3 NM", Metre)
    79.3 NM (= 146864 m)
"""

from __future__ import annotations

import logging
import string
from typing import TYPE_CHECKING

from .errors import ParseError, UnknownUnitError

if TYPE_CHECKING:
    from .unit_float import UnitFloat

logger = logging.getLogger(__name__)

NUMERAL_CHARS = string.digits + "-."


def split_quantity(text: str, unit_chars: str = "") -> tuple[str, str]:
    """Split a quantity string into its numeral and unit tokens.

    The string is split on whitespace first. A single token is then split in
    two: the numeral is what remains after stripping the trailing run of
    letters and ``unit_chars``; the unit is what remains after stripping the
    leading run of digits, '-' and '.'.

    Args:
        text: Quantity string, e.g. "120km" or "32 inch".
        unit_chars: Non-letter characters allowed in a concatenated unit
            token, e.g. "'\\"" for feet and inches or "/" for "km/h".

    Returns:
        tuple[str, str]: The numeral token and the unit token. The unit token
        is empty when a single token carries no unit ("42").

    Raises:
        ParseError: If the string does not hold exactly two tokens.
    """
    tokens = text.split()
    if len(tokens) == 1:
        token = tokens[0]
        tokens = [
            token.rstrip(string.ascii_letters + unit_chars),
            token.lstrip(NUMERAL_CHARS),
        ]

    if len(tokens) != 2:
        msg = f"expected a numeral and a unit, got {len(tokens)} tokens in {text!r}"
        raise ParseError(msg)

    return tokens[0], tokens[1]


def parse_number(token: str) -> float:
    """Parse a numeral token as a float.

    Any literal accepted by ``float()`` is allowed except digit-grouping
    underscores and non-ASCII digits, so "inf" and "nan" parse while
    "1_000" and "١٢" do not.

    Raises:
        ParseError: If the token is not a floating-point literal.
    """
    if "_" in token or not token.isascii():
        msg = f"invalid numeral {token!r}"
        raise ParseError(msg)
    try:
        return float(token)
    except ValueError as err:
        msg = f"invalid numeral {token!r}"
        raise ParseError(msg) from err


def parse_quantity(text: str, family: type[UnitFloat]) -> UnitFloat:
    """Parse a quantity string into a unit of the given family.

    Args:
        text: Quantity string, e.g. "-10.4m" or "16 kn".
        family: Any unit class of the target family; its root's alias table
            and UNIT_CHARS are used.

    Returns:
        UnitFloat: An instance of the matched unit class holding the
        canonical value ``numeral * SCALE_TO_SI``.

    Raises:
        ParseError: If the string is malformed.
        UnknownUnitError: If the unit token is not an alias of the family.
    """
    numeral, unit = split_quantity(text, family.ROOT.UNIT_CHARS)
    value = parse_number(numeral)

    unit_type = family.lookup(unit)
    if unit_type is None:
        msg = (
            f"unknown unit {unit!r} in {text!r}, "
            f"expected one of: {', '.join(family.aliases())}"
        )
        raise UnknownUnitError(msg)

    quantity = unit_type(value)
    logger.debug("parsed %r as %r", text, quantity)
    return quantity
