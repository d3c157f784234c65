"""
Parameter parsing endpoints and FastAPI dependencies.

Two ways to use the parsing pipeline over HTTP:
- ``scalar_parameter(...)``: a dependency factory that reads a raw value from
  the incoming request (header, query string or path) and injects the typed
  value into a route. Failures propagate as ParameterValidationError and are
  turned into 400 responses by the app exception handler.
- ``POST /parameters/parse``: parses a raw value against a schema sent in
  the request body.
"""

import logging
from typing import Any, Callable, Dict, Optional, Union

from fastapi import APIRouter, HTTPException, Request

from paramcoerce.config import settings
from paramcoerce.errors import ParameterValidationError
from paramcoerce.schemas.parameters import (
    ParameterParseRequest,
    ParameterParseResponse,
    ParameterSchema,
    RawValue,
)
from paramcoerce.services.parameter_service import parse_parameter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/parameters", tags=["parameters"])

# Locations a dependency can read from the request without consuming the body
REQUEST_LOCATIONS = ("header", "query", "path")


def read_raw_value(request: Request, name: str, location: str) -> RawValue:
    """
    Extract the raw value of a parameter from the request.

    Returns None when the parameter is not present. Header lookups are
    case-insensitive.
    """
    if location == "header":
        return request.headers.get(name)
    if location == "query":
        return request.query_params.get(name)
    if location == "path":
        return request.path_params.get(name)
    raise ValueError(f"Cannot read {location} parameters from the request")


def scalar_parameter(
    name: str,
    schema: Union[ParameterSchema, Dict[str, Any]],
    location: Optional[str] = None
) -> Callable[[Request], Any]:
    """
    Build a FastAPI dependency that parses one scalar request parameter.

    Args:
        name: Parameter name (header name, query key or path segment name)
        schema: ParameterSchema or a raw parameter object dict
        location: header, query or path (defaults to
            settings.DEFAULT_PARAMETER_LOCATION)

    Returns:
        Dependency callable returning the typed value

    Raises:
        ValueError: If the location cannot be read from a request

    Usage:
        >>> limit_param = scalar_parameter("limit", {"type": "integer", "maximum": 100}, "query")
        >>> @app.get("/items")
        ... async def list_items(limit: Annotated[int | None, Depends(limit_param)]):
        ...     ...
    """
    if not isinstance(schema, ParameterSchema):
        schema = ParameterSchema.model_validate(schema)

    location = location or settings.DEFAULT_PARAMETER_LOCATION
    if location not in REQUEST_LOCATIONS:
        raise ValueError(
            f"Unsupported location {location!r} for parameter {name!r}. "
            f"Must be one of {', '.join(REQUEST_LOCATIONS)}"
        )

    def dependency(request: Request) -> Any:
        raw = read_raw_value(request, name, location)
        return parse_parameter(schema, raw, name, location)

    return dependency


@router.post(
    "/parse",
    response_model=ParameterParseResponse,
    status_code=200,
    summary="Parse a raw value against a parameter schema"
)
async def parse_parameter_value(request: ParameterParseRequest):
    """
    Coerce and validate one raw parameter value.

    **Behavior:**
    - Blank or missing `value` resolves to the schema default, to `null`
      for optional parameters, or fails for required ones
    - Integers keep full 64-bit precision
    - Constraints are checked in order: multipleOf, minimum, maximum

    **Returns:**
    - 200 OK: Value parsed, typed value in `value`
    - 400 BAD REQUEST: Value failed validation (`detail.error` names the kind)
    - 422 UNPROCESSABLE ENTITY: Malformed request body or schema
    - 500 INTERNAL SERVER ERROR: Unexpected failure
    """
    logger.info(f"POST /parameters/parse: {request.location} parameter {request.name!r}")

    try:
        value = parse_parameter(
            schema=request.definition,
            raw=request.value,
            name=request.name,
            location=request.location
        )

    except ParameterValidationError as e:
        logger.info(f"Parameter {request.name!r} rejected: {e.error_code}")
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())

    except Exception as e:
        logger.error(f"Error parsing parameter {request.name!r}: {e}")
        raise HTTPException(
            status_code=500,
            detail={"error": "internal_error", "details": "Failed to parse parameter"}
        )

    return ParameterParseResponse(status="PARSED", name=request.name, value=value)
