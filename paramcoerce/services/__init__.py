"""
Service layer for the paramcoerce service.

Contains the parsing pipeline for scalar parameters:
- Presence resolution (absent/blank values, defaults, required checks)
- Coercion of raw strings into exact numbers
- Format range checks (int32, int64, float, double)
- Declarative constraint checks (multipleOf, minimum, maximum)

Services are pure functions; routes adapt them to HTTP.
"""

from .coercion_service import (
    check_format_range,
    coerce_integer,
    coerce_number,
)
from .constraint_service import (
    is_multiple_of,
    validate_constraints,
)
from .parameter_service import (
    parse_parameter,
)
from .presence_service import (
    Presence,
    is_blank,
    resolve_presence,
)

__all__ = [
    "check_format_range",
    "coerce_integer",
    "coerce_number",
    "is_multiple_of",
    "validate_constraints",
    "parse_parameter",
    "Presence",
    "is_blank",
    "resolve_presence",
]
