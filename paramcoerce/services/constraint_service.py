"""
Declarative numeric constraints: multipleOf, minimum and maximum.

Constraints are checked in a fixed order and the first failure wins.
"""

from fractions import Fraction
from typing import Optional

from paramcoerce.errors import ConstraintViolation
from paramcoerce.schemas.parameters import ParameterSchema
from paramcoerce.utils.numbers import Number


def exact_fraction(value: Number) -> Fraction:
    """Ints as-is, floats by their decimal repr (0.1 -> 1/10, not the binary value)."""
    if isinstance(value, int):
        return Fraction(value)
    return Fraction(repr(value))


def is_multiple_of(value: Number, multiple_of: Number) -> bool:
    """
    Exact divisibility test.

    Int/int uses integer modulo. Anything involving a float is compared as
    a ``Fraction`` of its shortest repr, so ``0.3`` is a multiple of ``0.1``
    and the quotient can have any number of digits.
    """
    if isinstance(value, int) and isinstance(multiple_of, int):
        return value % multiple_of == 0

    return exact_fraction(value) % exact_fraction(multiple_of) == 0


def validate_constraints(
    value: Number,
    schema: ParameterSchema,
    name: Optional[str] = None
) -> Number:
    """
    Apply multipleOf, then minimum, then maximum.

    Args:
        value: Coerced value (already inside its format range)
        schema: Parameter schema holding the constraints
        name: Parameter name attached to the error

    Returns:
        The value, unchanged

    Raises:
        ConstraintViolation: For the first constraint the value breaks
    """
    if schema.multiple_of is not None and not is_multiple_of(value, schema.multiple_of):
        raise ConstraintViolation.not_multiple_of(value, schema.multiple_of, parameter=name)

    if schema.minimum is not None:
        if schema.exclusive_minimum:
            valid = value > schema.minimum
        else:
            valid = value >= schema.minimum
        if not valid:
            raise ConstraintViolation.below_minimum(
                value, schema.minimum, schema.exclusive_minimum, parameter=name
            )

    if schema.maximum is not None:
        if schema.exclusive_maximum:
            valid = value < schema.maximum
        else:
            valid = value <= schema.maximum
        if not valid:
            raise ConstraintViolation.above_maximum(
                value, schema.maximum, schema.exclusive_maximum, parameter=name
            )

    return value
