"""Request validation: field-level error mapping for the HTTP boundary.

Pydantic reports failures as a list of error entries; clients receive a flat
``{field: message}`` mapping instead. Failures that concern the body as a
whole (malformed JSON, missing body, non-object body) are reported under the
``"body"`` key.
"""

from typing import Any, Dict, Iterable, Mapping

from calculator_service.models import ValidationErrorResponse

BODY_FIELD = "body"


def _field_name(loc: Iterable[Any]) -> str:
    loc = tuple(loc)
    # ("body", "operand1") for a field, ("body",) or ("body", <pos>) otherwise
    if len(loc) > 1 and isinstance(loc[1], str):
        return loc[1]
    return BODY_FIELD


def _message_for(field: str, error_type: str) -> str:
    if field == BODY_FIELD:
        if error_type == "json_invalid":
            return "Malformed JSON request body"
        if error_type == "missing":
            return "Request body is required"
        return "Request body must be a JSON object"

    if error_type == "missing":
        return f"{field} is required"
    if error_type == "finite_number":
        return f"{field} must be a finite number"
    return f"{field} must be a number"


def collect_field_errors(errors: Iterable[Mapping[str, Any]]) -> Dict[str, str]:
    """Convert pydantic error entries into a field -> message mapping.

    Only the first error reported for a field is kept.

    Args:
        errors: Entries as returned by ``RequestValidationError.errors()``

    Returns:
        Mapping of field name to a human-readable message
    """
    field_errors: Dict[str, str] = {}
    for error in errors:
        field = _field_name(error.get("loc", ()))
        if field not in field_errors:
            field_errors[field] = _message_for(field, error.get("type", ""))
    return field_errors


def build_validation_error_response(
    errors: Iterable[Mapping[str, Any]],
) -> ValidationErrorResponse:
    """Build the 400 response body for a failed validation."""
    return ValidationErrorResponse(errors=collect_field_errors(errors))
