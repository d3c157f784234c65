"""
Service layer for scalar parameter parsing.

Runs one raw value through the full pipeline:

    presence -> coercion -> format range -> constraints -> typed value

The pipeline is pure and synchronous. It keeps no state between calls, so
it is safe to call from any number of requests concurrently, and the same
(schema, raw value) pair always gives the same outcome.
"""

from typing import Any, Optional

from paramcoerce.errors import ParameterValidationError
from paramcoerce.schemas.parameters import ParameterSchema, RawValue
from paramcoerce.services.coercion_service import check_format_range, coerce_integer, coerce_number
from paramcoerce.services.constraint_service import validate_constraints
from paramcoerce.services.presence_service import resolve_presence
from paramcoerce.utils.logging import get_logger

logger = get_logger(__name__)


def parse_parameter(
    schema: ParameterSchema,
    raw: RawValue,
    name: str,
    location: str = "header"
) -> Optional[Any]:
    """
    Coerce and validate one raw parameter value.

    Args:
        schema: Resolved parameter schema
        raw: Raw value (None when not provided, "" when blank)
        name: Parameter name, used in error messages
        location: Where the value came from (header, query, path, ...)

    Returns:
        The typed value: an int for integer parameters, an int or float for
        number parameters, the schema default for blank values, or None for
        optional parameters that were not sent

    Raises:
        ParameterValidationError: One of MissingRequiredParameter,
            InvalidWholeNumberFormat, InvalidNumberFormat, OutOfFormatRange
            or ConstraintViolation. Always status 400.
    """
    presence = resolve_presence(schema, raw, name, location)
    if presence.resolved:
        return presence.value

    try:
        if schema.type == "number":
            value = coerce_number(presence.value, name, schema.format)
        else:
            value = coerce_integer(presence.value, name, schema.format)

        check_format_range(value, schema, name)
        validate_constraints(value, schema, name)

    except ParameterValidationError as e:
        if e.location is None:
            e.location = location
        logger.debug(f"{location} parameter {name!r} rejected ({e.error_code}): {e.message}")
        raise

    logger.debug(f"{location} parameter {name!r} parsed as {type(value).__name__}")
    return value
