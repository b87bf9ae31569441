"""Request-scoped accessors for application services and request bodies.

Services are constructed once in ``create_app`` and stored on ``app.state``;
routes receive them through these dependencies so tests can swap them.
"""

from __future__ import annotations

import json
from typing import Any

from fastapi import Request

from interview_prep.core.errors import ValidationAppError
from interview_prep.services.evaluation_service import EvaluationService
from interview_prep.services.progress_service import ProgressService
from interview_prep.services.question_service import QuestionService
from interview_prep.validation import Invalid, ValidationResult


def get_question_service(request: Request) -> QuestionService:
    return request.app.state.question_service


def get_progress_service(request: Request) -> ProgressService:
    return request.app.state.progress_service


def get_evaluation_service(request: Request) -> EvaluationService:
    return request.app.state.evaluation_service


async def read_json_body(request: Request) -> Any:
    """Decode the raw JSON body without imposing a schema.

    Raises:
        ValidationAppError: If the body is not valid JSON.
    """
    raw = await request.body()
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ValidationAppError(
            code="invalid_json",
            message="Request body must be valid JSON",
        ) from exc


def require_valid(result: ValidationResult[Any]) -> Any:
    """Return validated data or raise the validator's message as a 400 error.

    Raises:
        ValidationAppError: If ``result`` is ``Invalid``.
    """
    if isinstance(result, Invalid):
        raise ValidationAppError(code="invalid_request", message=result.error)
    return result.data
