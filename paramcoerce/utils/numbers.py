"""
Number rendering helpers for validation messages.

Messages print numbers the way JSON clients read them back: integral
values without a trailing ``.0`` and very large magnitudes in exponent form.
"""

import math
from decimal import Decimal
from typing import Union

from paramcoerce.utils.constants import MAX_SAFE_INTEGER

Number = Union[int, float]

# Past this magnitude numbers are written in exponent form
_EXPONENT_THRESHOLD = 1e21


def format_number(value: Number) -> str:
    """Render a bound, constraint or parsed value for an error message."""
    if isinstance(value, int):
        try:
            return str(value)
        except ValueError:
            # longer than the int/str digit limit
            return "Infinity" if value > 0 else "-Infinity"

    if value != value:
        return "NaN"

    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    if abs(value) >= _EXPONENT_THRESHOLD:
        return repr(value)

    if value.is_integer():
        return str(int(Decimal(repr(value))))

    return repr(value)


def canonical_integer(value: int) -> str:
    """
    Canonical decimal echo of a parsed integer.

    Values inside the safe range (|v| <= 2**53 - 1) are echoed exactly.
    Larger ones are echoed as their shortest round-trip double, expanded to
    digits, so ``9223372036854779999`` is echoed as ``9223372036854780000``.
    Past the double range the echo is "Infinity" (or "-Infinity"), which
    also keeps huge ints away from str() and its digit limit.
    Only the echo is rounded; range checks always compare the exact int.
    """
    if -MAX_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER:
        return str(value)

    try:
        approximate = float(value)
    except OverflowError:
        return format_number(math.inf if value > 0 else -math.inf)

    return format_number(approximate)
