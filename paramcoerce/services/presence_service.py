"""
Presence resolution for scalar parameters.

Decides whether a raw value counts as absent, and if so whether the
parameter resolves to its default, to ``None``, or fails as missing.
"""

from dataclasses import dataclass
from typing import Any

from paramcoerce.errors import MissingRequiredParameter
from paramcoerce.schemas.parameters import ParameterSchema, RawValue
from paramcoerce.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Presence:
    """
    Outcome of presence resolution.

    Attributes:
        resolved: True when ``value`` is final and coercion must be skipped
        value: The final value (when resolved) or the raw value to coerce
    """
    resolved: bool
    value: Any


def is_blank(raw: RawValue) -> bool:
    """A value is blank when it was not sent (None) or sent empty."""
    return raw is None or raw == ""


def resolve_presence(
    schema: ParameterSchema,
    raw: RawValue,
    name: str,
    location: str = "header"
) -> Presence:
    """
    Resolve an absent or blank raw value before coercion.

    Args:
        schema: Parameter schema
        raw: Raw value (None when not provided, "" when blank)
        name: Parameter name, used in the missing-parameter message
        location: Where the parameter is read from (header, query, path...)

    Returns:
        Presence with resolved=True when the value is final, otherwise the
        raw value to hand to the coercer

    Raises:
        MissingRequiredParameter: If the value is blank, required, and there
            is no default

    Notes:
        The default is returned untouched. It is never re-checked against
        the format bounds or constraints.
    """
    if not is_blank(raw):
        return Presence(resolved=False, value=raw)

    if schema.has_default:
        logger.debug(f"Parameter {name!r} is blank, using schema default")
        return Presence(resolved=True, value=schema.default)

    if schema.required:
        raise MissingRequiredParameter(name, location)

    return Presence(resolved=True, value=None)
