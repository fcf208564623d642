"""Models package."""

from .requests import (
    VALIDATION_FAILED,
    CalculationRequest,
    CalculationResponse,
    ValidationErrorResponse,
    HealthResponse,
)

__all__ = [
    "VALIDATION_FAILED",
    "CalculationRequest",
    "CalculationResponse",
    "ValidationErrorResponse",
    "HealthResponse",
]
