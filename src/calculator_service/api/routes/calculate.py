"""Calculation API routes."""

import logging

from fastapi import APIRouter, Depends, Request, status

from calculator_service.core import Calculator
from calculator_service.models import (
    CalculationRequest,
    CalculationResponse,
    ValidationErrorResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["calculator"])


def get_calculator(request: Request) -> Calculator:
    """Dependency returning the calculator created at application startup.

    Falls back to a fresh instance when the app runs without its lifespan;
    Calculator holds no state.
    """
    calculator = getattr(request.app.state, "calculator", None)
    if calculator is None:
        calculator = Calculator()
    return calculator


@router.post(
    "/calculate",
    response_model=CalculationResponse,
    status_code=status.HTTP_200_OK,
    summary="Calculate sum and product",
    description="""
Computes the sum and the product of two operands.

**Request Body Example**:
```json
{"operand1": 10.0, "operand2": 5.0}
```

**Response Example**:
```json
{"operand1": 10.0, "operand2": 5.0, "sum": 15.0, "product": 50.0}
```

**Validation**: both operands are required and must be finite numbers.
A failed validation returns 400 with one message per offending field.
A sum or product beyond the range of a double returns 422.
    """,
    responses={
        200: {"description": "Calculation performed successfully"},
        400: {
            "model": ValidationErrorResponse,
            "description": "Missing, non-numeric operand or malformed JSON body",
            "content": {
                "application/json": {
                    "example": {
                        "error": "Validation Failed",
                        "errors": {"operand1": "operand1 is required"},
                    }
                }
            },
        },
        422: {
            "description": "Sum or product overflows the double range",
            "content": {
                "application/json": {
                    "example": {
                        "error": "Calculation Overflow",
                        "message": "sum and product of 1e+308 and 1e+308 exceeds the range of a double",
                    }
                }
            },
        },
        500: {"description": "Internal server error"},
    },
)
async def calculate(
    request: CalculationRequest,
    calculator: Calculator = Depends(get_calculator),
) -> CalculationResponse:
    """Return the operands with their sum and product."""
    return calculator.calculate(request)
