class UnitError(ValueError):
    """
    Base exception for all unit-related errors.
    """


class ParseError(UnitError):
    """
    Raised when a quantity string is malformed: it does not split into
    exactly one numeral and one unit token, or the numeral is not a valid
    floating-point literal.
    """


class UnknownUnitError(UnitError):
    """
    Raised when the unit token of a quantity string is not a recognized
    abbreviation of the requested unit family.
    """
