from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query, status

from interview_prep.api.dependencies import get_progress_service, read_json_body, require_valid
from interview_prep.core.auth import CurrentUserId
from interview_prep.core.rate_limit import rate_limit
from interview_prep.schemas.responses import ResponseEnvelope, ResponseListEnvelope
from interview_prep.services.progress_service import ProgressService
from interview_prep.validation import validate_save_response_request

router = APIRouter(tags=["Responses"])

ProgressServiceDep = Annotated[ProgressService, Depends(get_progress_service)]


@router.get(
    "/responses",
    response_model=ResponseListEnvelope,
    dependencies=[Depends(rate_limit("read"))],
)
def list_responses(
    user_id: CurrentUserId,
    service: ProgressServiceDep,
    question_id: Annotated[str | None, Query(alias="questionId")] = None,
) -> ResponseListEnvelope:
    """List the caller's responses, newest first, optionally for one question."""
    return ResponseListEnvelope(
        responses=service.list_responses(user_id, question_id=question_id or None)
    )


@router.post(
    "/responses",
    response_model=ResponseEnvelope,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(rate_limit("api"))],
)
async def save_response(
    user_id: CurrentUserId,
    service: ProgressServiceDep,
    body: Annotated[Any, Depends(read_json_body)],
) -> ResponseEnvelope:
    """Store a practice response for the caller.

    Raises:
        ValidationAppError: 400 with the first failing field's message.
    """
    data = require_valid(validate_save_response_request(body))
    return ResponseEnvelope(response=service.save_response(user_id, data))
