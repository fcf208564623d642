"""Global exception handlers for the calculator API.

- RequestValidationError -> 400 with ``{"error": "Validation Failed", "errors": {...}}``
- InvalidOperandError -> 500, operands bypassed validation
- ResultOverflowError -> 422, finite operands with a non-finite result
- Exception (catch-all) -> 500, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from calculator_service.api.validation import build_validation_error_response
from calculator_service.core import InvalidOperandError, ResultOverflowError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_validation_error_handler(app)
    _register_invalid_operand_handler(app)
    _register_result_overflow_handler(app)
    _register_generic_error_handler(app)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register request validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Map pydantic validation errors to per-field messages."""
        body = build_validation_error_response(exc.errors())
        logger.warning(f"Validation failed on {request.url.path}: {body.errors}")
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=body.model_dump(),
        )


def _register_invalid_operand_handler(app: FastAPI) -> None:
    """Register handler for operands that reached the calculator unvalidated."""

    @app.exception_handler(InvalidOperandError)
    async def invalid_operand_handler(request: Request, exc: InvalidOperandError):
        """Missing operand past the validation boundary."""
        logger.error(f"Invalid operand on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Invalid Operand", "message": str(exc)},
        )


def _register_result_overflow_handler(app: FastAPI) -> None:
    """Register handler for results outside the double range."""

    @app.exception_handler(ResultOverflowError)
    async def result_overflow_handler(request: Request, exc: ResultOverflowError):
        """Valid operands whose sum or product overflowed."""
        logger.warning(f"Calculation overflow on {request.url.path}: {exc}")
        return JSONResponse(
            status_code=422,
            content={"error": "Calculation Overflow", "message": str(exc)},
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all: never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal Server Error",
                "message": "An unexpected error occurred",
            },
        )
