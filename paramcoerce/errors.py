"""
Validation errors raised while parsing a scalar parameter.

Every failure is a ``ParameterValidationError`` (a ``ValueError``) with a
fixed HTTP status of 400, a stable ``error_code`` callers can branch on, and
a message built from one template per error kind. The hierarchy is closed:

- MissingRequiredParameter  -> "missing_required_parameter"
- InvalidWholeNumberFormat  -> "invalid_whole_number_format"
- InvalidNumberFormat       -> "invalid_number_format"
- OutOfFormatRange          -> "out_of_format_range"
- ConstraintViolation       -> "constraint_violation"
"""

import json
from typing import Any, Dict, Optional, Union

from paramcoerce.utils.numbers import Number, format_number


def quote_raw(raw: Any) -> str:
    """JSON-quote a raw value exactly as the client sent it."""
    return json.dumps(raw, ensure_ascii=False)


class ParameterValidationError(ValueError):
    """Base class for every parse failure of a single parameter."""

    status_code: int = 400
    error_code: str = "validation_error"

    def __init__(self, message: str, parameter: Optional[str] = None, location: Optional[str] = None):
        self.message = message
        self.parameter = parameter
        self.location = location
        super().__init__(message)

    def to_detail(self) -> Dict[str, Any]:
        """Shape used for the ``detail`` field of a 400 response."""
        return {
            "error": self.error_code,
            "details": self.message,
            "parameter": self.parameter,
        }


class MissingRequiredParameter(ParameterValidationError):
    """A required parameter was absent or blank and has no default."""

    error_code = "missing_required_parameter"

    def __init__(self, parameter: str, location: str):
        super().__init__(
            f'Missing required {location} parameter "{parameter}"',
            parameter=parameter,
            location=location,
        )


class InvalidWholeNumberFormat(ParameterValidationError):
    """The raw value is not a whole number (non-numeric or fractional)."""

    error_code = "invalid_whole_number_format"

    def __init__(self, raw: Any, parameter: Optional[str] = None):
        self.raw = raw
        super().__init__(
            f"{quote_raw(raw)} is not a properly-formatted whole number",
            parameter=parameter,
        )


class InvalidNumberFormat(ParameterValidationError):
    """The raw value of a ``number`` parameter is not numeric."""

    error_code = "invalid_number_format"

    def __init__(self, raw: Any, parameter: Optional[str] = None):
        self.raw = raw
        super().__init__(
            f"{quote_raw(raw)} is not a valid numeric value",
            parameter=parameter,
        )


class OutOfFormatRange(ParameterValidationError):
    """The parsed value falls outside the bounds of its declared format."""

    error_code = "out_of_format_range"

    def __init__(
        self,
        echo: str,
        format_name: str,
        minimum: Number,
        maximum: Number,
        parameter: Optional[str] = None,
    ):
        self.echo = echo
        self.format_name = format_name
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f'"{echo}" is not a valid {format_name}. '
            f"Must be between {format_number(minimum)} and {format_number(maximum)}",
            parameter=parameter,
        )


class ConstraintViolation(ParameterValidationError):
    """The value breaks a ``multipleOf``, ``minimum`` or ``maximum`` constraint."""

    error_code = "constraint_violation"

    def __init__(
        self,
        message: str,
        keyword: str,
        value: Number,
        limit: Union[int, float],
        parameter: Optional[str] = None,
    ):
        self.keyword = keyword
        self.value = value
        self.limit = limit
        super().__init__(message, parameter=parameter)

    @classmethod
    def not_multiple_of(cls, value: Number, multiple_of: Number, parameter: Optional[str] = None) -> "ConstraintViolation":
        return cls(
            f"Value {format_number(value)} is not a multiple of {format_number(multiple_of)}",
            "multipleOf", value, multiple_of, parameter,
        )

    @classmethod
    def below_minimum(cls, value: Number, minimum: Number, exclusive: bool, parameter: Optional[str] = None) -> "ConstraintViolation":
        if exclusive and value == minimum:
            message = f"Value {format_number(value)} is equal to exclusive minimum {format_number(minimum)}"
        else:
            message = f"Value {format_number(value)} is less than minimum {format_number(minimum)}"
        return cls(message, "minimum", value, minimum, parameter)

    @classmethod
    def above_maximum(cls, value: Number, maximum: Number, exclusive: bool, parameter: Optional[str] = None) -> "ConstraintViolation":
        if exclusive and value == maximum:
            message = f"Value {format_number(value)} is equal to exclusive maximum {format_number(maximum)}"
        else:
            message = f"Value {format_number(value)} is greater than maximum {format_number(maximum)}"
        return cls(message, "maximum", value, maximum, parameter)
