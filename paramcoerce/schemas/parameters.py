"""
Pydantic schemas for scalar parameter definitions and the parse endpoint.

A ``ParameterSchema`` is the already-resolved, flat definition of one
parameter (the numeric subset of an OpenAPI/JSON-Schema parameter object).
Unknown keys are ignored so a full parameter object can be passed as-is.
"""

from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

ParameterType = Literal["integer", "number"]

ParameterLocation = Literal["header", "query", "path", "formData", "body"]

RawValue = Optional[Union[StrictInt, StrictStr]]


class ParameterSchema(BaseModel):
    """
    Declarative definition of a scalar numeric parameter.

    Accepts both JSON-Schema spelling (``exclusiveMinimum``, ``multipleOf``)
    and snake_case field names. Instances are immutable.
    """
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    type: ParameterType = Field("integer", description="Scalar kind being validated")
    format: Optional[str] = Field(
        None,
        description="Numeric bounds profile (int32, int64, float, double)",
        examples=["int32", "int64"]
    )
    required: bool = Field(False, description="Fail when the value is absent or blank")
    default: Optional[Any] = Field(
        None,
        description="Value used as-is when the raw value is absent or blank"
    )
    minimum: Optional[Union[int, float]] = Field(None, description="Lower bound")
    maximum: Optional[Union[int, float]] = Field(None, description="Upper bound")
    exclusive_minimum: bool = Field(
        False,
        alias="exclusiveMinimum",
        description="Treat minimum as exclusive"
    )
    exclusive_maximum: bool = Field(
        False,
        alias="exclusiveMaximum",
        description="Treat maximum as exclusive"
    )
    multiple_of: Optional[Union[int, float]] = Field(
        None,
        alias="multipleOf",
        description="Value must be evenly divisible by this positive number"
    )

    @field_validator("multiple_of")
    @classmethod
    def validate_multiple_of_positive(cls, v: Optional[Union[int, float]]) -> Optional[Union[int, float]]:
        """Reject zero and negative divisors."""
        if v is not None and v <= 0:
            raise ValueError(f"multipleOf must be greater than 0, got {v}")
        return v

    @property
    def has_default(self) -> bool:
        """True when ``default`` was supplied, even if it was an explicit null."""
        return "default" in self.model_fields_set


# --- Parse endpoint models ---

class ParameterParseRequest(BaseModel):
    """
    Request to parse one raw value against a parameter schema.

    ``value`` is the raw text as extracted from the request (null when the
    parameter was not sent, ``""`` when it was sent blank).
    """
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Parameter name used in error messages", min_length=1)
    location: ParameterLocation = Field("header", description="Where the parameter was read from")
    definition: ParameterSchema = Field(..., alias="schema", description="Parameter schema")
    value: RawValue = Field(
        None,
        description="Raw parameter value",
        examples=["42", "", None]
    )


class ParameterParseResponse(BaseModel):
    """Response carrying the coerced value (null when optional and absent)."""
    status: Literal["PARSED"] = "PARSED"
    name: str = Field(..., description="Parameter name")
    value: Optional[Any] = Field(None, description="Coerced value")
