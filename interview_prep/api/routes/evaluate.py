from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends

from interview_prep.api.dependencies import get_evaluation_service, read_json_body, require_valid
from interview_prep.core.auth import CurrentUserId
from interview_prep.core.rate_limit import rate_limit
from interview_prep.schemas.evaluation import EvaluationEnvelope
from interview_prep.services.evaluation_service import EvaluationService
from interview_prep.validation import validate_evaluate_request

router = APIRouter(tags=["Evaluation"])


@router.post(
    "/evaluate",
    response_model=EvaluationEnvelope,
    dependencies=[Depends(rate_limit("evaluate"))],
)
async def evaluate_response(
    user_id: CurrentUserId,
    service: Annotated[EvaluationService, Depends(get_evaluation_service)],
    body: Annotated[Any, Depends(read_json_body)],
) -> EvaluationEnvelope:
    """Score an answer against the question's rubric with the LLM.

    Raises:
        ValidationAppError: 400 for an invalid body.
        NotFoundAppError: 404 when the question does not exist.
        LLMAppError: 500 when the model call fails or its output is unusable.
    """
    data = require_valid(validate_evaluate_request(body))
    evaluation = await service.evaluate(data)
    return EvaluationEnvelope(evaluation=evaluation)
