"""
String-to-number coercion and format range checks.

Integers are parsed straight into exact Python ints. Nothing on the integer
path goes through ``float``, so 64-bit values keep every digit.
"""

import math
import re
from typing import Any, Optional, Type, Union

from paramcoerce.errors import (
    InvalidNumberFormat,
    InvalidWholeNumberFormat,
    OutOfFormatRange,
    ParameterValidationError,
)
from paramcoerce.schemas.parameters import ParameterSchema
from paramcoerce.utils.constants import NUMERIC_FORMAT_RANGES
from paramcoerce.utils.logging import get_logger
from paramcoerce.utils.numbers import canonical_integer, format_number

logger = get_logger(__name__)

# ASCII digits only: int() alone would also take "+1", " 1", "1_000" and "١"
WHOLE_NUMBER_PATTERN = re.compile(r"-?[0-9]+")

NUMBER_PATTERN = re.compile(r"-?[0-9]+(\.[0-9]+)?([eE][+-]?[0-9]+)?")


def whole_literal_to_int(
    raw: str,
    name: Optional[str],
    format_name: Optional[str],
    error: Type[ParameterValidationError]
) -> int:
    """
    Convert an already-matched ``-?[0-9]+`` literal to an int.

    int() refuses literals longer than the interpreter's int/str digit limit
    (sys.get_int_max_str_digits). Such a literal is far outside every
    registered format, so with a known format it fails the range check
    (echoed like an overflowing double, "Infinity"); without one it cannot
    be represented and fails as a malformed value.
    """
    negative = raw.startswith("-")
    digits = raw.lstrip("-").lstrip("0") or "0"

    try:
        value = int(digits)
    except ValueError as e:
        bounds = NUMERIC_FORMAT_RANGES.get(format_name) if format_name else None
        if bounds is None:
            raise error(raw, parameter=name) from e

        minimum, maximum = bounds
        echo = format_number(-math.inf if negative else math.inf)
        raise OutOfFormatRange(echo, format_name, minimum, maximum, parameter=name) from e

    return -value if negative else value


def coerce_integer(raw: Any, name: Optional[str] = None, format_name: Optional[str] = None) -> int:
    """
    Parse a raw value into an exact integer.

    Args:
        raw: Non-blank raw string (or an int already typed by the caller)
        name: Parameter name attached to the error
        format_name: Schema format, used when the literal is too long to convert

    Returns:
        The exact integer value ("007" -> 7)

    Raises:
        InvalidWholeNumberFormat: If raw is not a whole number, e.g. "3.5"
            or "hello world", or if it is too long to convert and no format
            bounds apply
        OutOfFormatRange: If it is too long to convert and a format is set
    """
    if isinstance(raw, bool):
        raise InvalidWholeNumberFormat(raw, parameter=name)

    if isinstance(raw, int):
        return raw

    if not isinstance(raw, str) or not WHOLE_NUMBER_PATTERN.fullmatch(raw):
        raise InvalidWholeNumberFormat(raw, parameter=name)

    return whole_literal_to_int(raw, name, format_name, InvalidWholeNumberFormat)


def coerce_number(raw: Any, name: Optional[str] = None, format_name: Optional[str] = None) -> Union[int, float]:
    """
    Parse a raw value into a number.

    Literals without a fraction or exponent stay exact ints; anything else
    becomes a float.

    Raises:
        InvalidNumberFormat: If raw is not numeric or does not fit a finite float
        OutOfFormatRange: If an integer literal is too long to convert and a
            format is set
    """
    if isinstance(raw, bool):
        raise InvalidNumberFormat(raw, parameter=name)

    if isinstance(raw, (int, float)):
        if isinstance(raw, float) and not math.isfinite(raw):
            raise InvalidNumberFormat(raw, parameter=name)
        return raw

    if not isinstance(raw, str):
        raise InvalidNumberFormat(raw, parameter=name)

    match = NUMBER_PATTERN.fullmatch(raw)
    if match is None:
        raise InvalidNumberFormat(raw, parameter=name)

    if match.group(1) is None and match.group(2) is None:
        return whole_literal_to_int(raw, name, format_name, InvalidNumberFormat)

    value = float(raw)
    if not math.isfinite(value):
        raise InvalidNumberFormat(raw, parameter=name)
    return value


def check_format_range(
    value: Union[int, float],
    schema: ParameterSchema,
    name: Optional[str] = None
) -> Union[int, float]:
    """
    Check a parsed value against the inclusive range of ``schema.format``.

    A missing or unknown format skips the check.

    Raises:
        OutOfFormatRange: If the value lies outside the format's bounds
    """
    if schema.format is None:
        return value

    bounds = NUMERIC_FORMAT_RANGES.get(schema.format)
    if bounds is None:
        logger.debug(f"No numeric range registered for format {schema.format!r}, skipping")
        return value

    minimum, maximum = bounds
    if minimum <= value <= maximum:
        return value

    if isinstance(value, int):
        echo = canonical_integer(value)
    else:
        echo = format_number(value)

    raise OutOfFormatRange(echo, schema.format, minimum, maximum, parameter=name)
