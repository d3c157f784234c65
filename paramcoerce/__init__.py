"""
paramcoerce: schema-driven coercion and validation of scalar request parameters.
"""

from paramcoerce.errors import (
    ConstraintViolation,
    InvalidNumberFormat,
    InvalidWholeNumberFormat,
    MissingRequiredParameter,
    OutOfFormatRange,
    ParameterValidationError,
)
from paramcoerce.schemas.parameters import ParameterSchema
from paramcoerce.services.parameter_service import parse_parameter

__version__ = "0.1.0"

__all__ = [
    "ConstraintViolation",
    "InvalidNumberFormat",
    "InvalidWholeNumberFormat",
    "MissingRequiredParameter",
    "OutOfFormatRange",
    "ParameterValidationError",
    "ParameterSchema",
    "parse_parameter",
]
