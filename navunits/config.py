"""Global configuration and type definitions for the unit library.

This module provides the numeric type definitions and formatting options used
throughout the unit system. It establishes which scalar types may scale a
quantity and how quantities are rendered as text.

Type Definitions:
    Number: Union type of the scalar types a quantity can be multiplied or
            divided by. Supports Python native types (int, float) and NumPy
            scalar types so values pulled out of arrays can be used directly.

Formatting:
    VALUE_FORMAT: Format spec applied to the numeric part of ``str(quantity)``.
                  The default renders six decimals, e.g. "120.000000 km".

Example:
    >>> import numpy as np
    >>> from navunits import KILOMETRE
    >>> leg = KILOMETRE * np.float64(2.5)
    >>> str(leg)
    '2.500000 km'
"""

from numpy import floating, integer

Number = int | float | integer | floating

VALUE_FORMAT = "f"
