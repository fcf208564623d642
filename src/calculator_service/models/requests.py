"""API request and response models."""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator

VALIDATION_FAILED = "Validation Failed"


class CalculationRequest(BaseModel):
    """Request carrying the two operands of a calculation."""

    operand1: float = Field(..., allow_inf_nan=False, description="First operand")
    operand2: float = Field(..., allow_inf_nan=False, description="Second operand")

    model_config = ConfigDict(
        json_schema_extra={"examples": [{"operand1": 10.0, "operand2": 5.0}]},
    )

    @field_validator("operand1", "operand2", mode="before")
    @classmethod
    def reject_booleans(cls, value):
        """JSON true/false are not numbers."""
        if isinstance(value, bool):
            raise ValueError("must be a number")
        return value


class CalculationResponse(BaseModel):
    """Response echoing the operands with their sum and product."""

    operand1: float
    operand2: float
    sum: float = Field(..., allow_inf_nan=False)
    product: float = Field(..., allow_inf_nan=False)

    model_config = ConfigDict(frozen=True)


class ValidationErrorResponse(BaseModel):
    """Body returned when a request fails validation."""

    error: str = VALIDATION_FAILED
    errors: Dict[str, str] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "UP"
