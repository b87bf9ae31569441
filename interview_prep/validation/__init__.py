"""Request validation: primitive checks, composite request validators, result type."""

from interview_prep.validation.primitives import (
    validate_array,
    validate_enum,
    validate_number,
    validate_string,
    validate_uuid,
)
from interview_prep.validation.requests import (
    validate_create_question_request,
    validate_evaluate_request,
    validate_save_response_request,
)
from interview_prep.validation.result import Invalid, Valid, ValidationResult

__all__ = [
    "Invalid",
    "Valid",
    "ValidationResult",
    "validate_array",
    "validate_create_question_request",
    "validate_enum",
    "validate_evaluate_request",
    "validate_number",
    "validate_save_response_request",
    "validate_string",
    "validate_uuid",
]
