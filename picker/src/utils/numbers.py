"""Numeric helpers shared by the color model and the draggable engine.

All functions are total: they never raise for real-number input.
"""

import math
from decimal import Context, Decimal, ROUND_HALF_UP
from numbers import Real

# Wide enough to quantize any finite double to a few decimals
_DECIMAL_CONTEXT = Context(prec=400)


def clamp(number, minimum, maximum):
    """Bound a number to [minimum, maximum]."""
    return min(max(number, minimum), maximum)


def round_to(number, decimals=0):
    """Round a number to a maximum amount of decimals.

    Uses half-up rounding on the exact binary value of the float, which is how
    a formatted decimal string (e.g. ``f"{n:.2f}"``) rounds. Python's built-in
    ``round`` uses banker's rounding and is not suitable here.

    Args:
        number: Value to round
        decimals: Amount of decimal places to keep

    Returns:
        float rounded to ``decimals`` places (an int-valued float for 0)
    """
    if not math.isfinite(number):
        return number
    exponent = Decimal(1).scaleb(-decimals)
    return float(Decimal(number).quantize(exponent, rounding=ROUND_HALF_UP, context=_DECIMAL_CONTEXT))


def round_percentage(number):
    """Clamp to [0, 100] and round to 2 decimals."""
    return round_to(clamp(number, 0, 100), 2)


def is_number(value):
    """Check whether a value is a usable number (rejects bools, NaN and infinities)."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


def safe_to_divide_with(*numbers):
    """Check that every given value is a valid, non-zero number.

    Guards against division by zero when a canvas has no size yet.
    """
    return all(is_number(n) and n != 0 for n in numbers)
