from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Query, status

from interview_prep.adapters.storage import QuestionFilters
from interview_prep.api.dependencies import get_question_service, read_json_body, require_valid
from interview_prep.core.auth import CurrentUserId
from interview_prep.core.rate_limit import rate_limit
from interview_prep.schemas.questions import QuestionEnvelope, QuestionListEnvelope
from interview_prep.services.question_service import (
    DEFAULT_RANDOM_LIMIT,
    MAX_RANDOM_LIMIT,
    QuestionService,
    parse_technologies,
)
from interview_prep.validation import validate_create_question_request, validate_number, validate_uuid

router = APIRouter(tags=["Questions"])

QuestionServiceDep = Annotated[QuestionService, Depends(get_question_service)]


@router.get(
    "/questions",
    response_model=QuestionListEnvelope,
    dependencies=[Depends(rate_limit("read"))],
)
def list_questions(
    service: QuestionServiceDep,
    technologies: Annotated[str | None, Query(description="Comma-separated technologies")] = None,
    difficulty: str | None = None,
    type: str | None = None,
    search: str | None = None,
) -> QuestionListEnvelope:
    """List active questions, newest first.

    A question matches ``technologies`` when it shares at least one of them;
    ``search`` matches title or prompt text, or an exact topic tag.
    """
    filters = QuestionFilters(
        technologies=parse_technologies(technologies),
        difficulty=difficulty or None,
        type=type or None,
        search=search or None,
    )
    return QuestionListEnvelope(questions=service.list_questions(filters))


@router.get(
    "/questions/random",
    response_model=QuestionListEnvelope,
    dependencies=[Depends(rate_limit("read"))],
)
def random_questions(
    service: QuestionServiceDep,
    technologies: Annotated[str | None, Query(description="Comma-separated technologies")] = None,
    difficulty: str | None = None,
    limit: Annotated[str | None, Query(description=f"1 to {MAX_RANDOM_LIMIT}")] = None,
) -> QuestionListEnvelope:
    """Draw a shuffled practice set from the active catalog.

    Raises:
        ValidationAppError: 400 when ``limit`` is not a number in range.
    """
    count = DEFAULT_RANDOM_LIMIT
    if limit is not None:
        count = int(
            require_valid(validate_number(limit, "limit", min_value=1, max_value=MAX_RANDOM_LIMIT))
        )
    questions = service.random_questions(
        technologies=parse_technologies(technologies),
        difficulty=difficulty or None,
        limit=count,
    )
    return QuestionListEnvelope(questions=questions)


@router.get(
    "/skills/{skill_id}/questions",
    response_model=QuestionListEnvelope,
    dependencies=[Depends(rate_limit("read"))],
)
def list_skill_questions(skill_id: str, service: QuestionServiceDep) -> QuestionListEnvelope:
    """List the active questions of one skill, easiest first."""
    skill_id = require_valid(validate_uuid(skill_id, "skill_id"))
    return QuestionListEnvelope(questions=service.questions_by_skill(skill_id))


@router.get(
    "/questions/{question_id}",
    response_model=QuestionEnvelope,
    dependencies=[Depends(rate_limit("read"))],
)
def get_question(question_id: str, service: QuestionServiceDep) -> QuestionEnvelope:
    return QuestionEnvelope(question=service.get_question(question_id))


@router.post(
    "/questions",
    response_model=QuestionEnvelope,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(rate_limit("api"))],
)
async def create_question(
    user_id: CurrentUserId,
    service: QuestionServiceDep,
    body: Annotated[Any, Depends(read_json_body)],
) -> QuestionEnvelope:
    """Add a question to the catalog.

    Raises:
        ValidationAppError: 400 with the first failing field's message.
    """
    data = require_valid(validate_create_question_request(body))
    return QuestionEnvelope(question=service.create_question(data))


# Editing and removing catalog entries is reserved for admins, which this
# service does not model yet.
@router.patch("/questions/{question_id}", dependencies=[Depends(rate_limit("api"))])
async def update_question(question_id: str, user_id: CurrentUserId) -> None:
    raise HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="Question modification is not allowed",
    )


@router.delete("/questions/{question_id}", dependencies=[Depends(rate_limit("api"))])
async def delete_question(question_id: str, user_id: CurrentUserId) -> None:
    raise HTTPException(
        status_code=status.HTTP_403_FORBIDDEN,
        detail="Question deletion is not allowed",
    )
