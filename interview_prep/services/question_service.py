"""Question catalog operations: filtering, random draws, lookup and creation."""

from __future__ import annotations

import logging
import random
import uuid
from datetime import datetime, timezone

from interview_prep.adapters.storage import AbstractQuestionRepository, QuestionFilters
from interview_prep.core.config import settings
from interview_prep.core.errors import NotFoundAppError
from interview_prep.schemas.questions import Question
from interview_prep.validation.requests import CreateQuestionRequest

logger = logging.getLogger(__name__)

DEFAULT_RANDOM_LIMIT = 10
MAX_RANDOM_LIMIT = 50


def parse_technologies(raw: str | None) -> list[str]:
    """Split a comma-separated ``technologies`` query parameter.

    Examples:
        >>> parse_technologies("react, ,typescript")
        ['react', 'typescript']
        >>> parse_technologies(None)
        []
    """
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


class QuestionService:
    """Catalog use cases on top of a question repository."""

    def __init__(
        self,
        repository: AbstractQuestionRepository,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self.repository = repository
        self._rng = rng or random.Random()

    def list_questions(self, filters: QuestionFilters) -> list[Question]:
        questions = self.repository.find(filters)
        logger.info(
            "questions.listed",
            extra={
                "count": len(questions),
                "technologies": filters.technologies,
                "difficulty": filters.difficulty,
                "type": filters.type,
                "has_search": bool(filters.search),
            },
        )
        return questions

    def random_questions(
        self,
        *,
        technologies: list[str] | None = None,
        difficulty: str | None = None,
        limit: int = DEFAULT_RANDOM_LIMIT,
    ) -> list[Question]:
        """Draw up to ``limit`` matching questions in random order."""
        candidates = self.repository.find(
            QuestionFilters(technologies=technologies or [], difficulty=difficulty)
        )
        picked = self._rng.sample(candidates, k=min(limit, len(candidates)))
        logger.info(
            "questions.random",
            extra={
                "count": len(picked),
                "candidates": len(candidates),
                "technologies": technologies or [],
                "difficulty": difficulty,
            },
        )
        return picked

    def questions_by_skill(self, skill_id: str) -> list[Question]:
        questions = self.repository.list_by_skill(skill_id)
        logger.info(
            "questions.by_skill",
            extra={"skill_id": skill_id.lower(), "count": len(questions)},
        )
        return questions

    def get_question(self, question_id: str) -> Question:
        """Fetch a question by id.

        Raises:
            NotFoundAppError: If no question has this id.
        """
        question = self.repository.get(question_id)
        if question is None:
            raise NotFoundAppError(
                code="question_not_found",
                message="Question not found",
                details={"resource": "question", "resource_id": question_id},
            )
        return question

    def create_question(self, data: CreateQuestionRequest) -> Question:
        """Store a validated question, filling collection fields with empty defaults."""
        question = Question(
            id=str(uuid.uuid4()),
            skill_id=data["skill_id"].lower(),
            type=data["type"],
            format=data["format"],
            title=data["title"],
            prompt=data["prompt"],
            difficulty=data["difficulty"],
            hints=data.get("hints", []),
            solution=data.get("solution"),
            rubric=data.get("rubric", []),
            technologies=data.get("technologies", []),
            company_tags=data.get("company_tags", []),
            topic_tags=data.get("topic_tags", []),
            time_estimate_minutes=data.get(
                "time_estimate_minutes", settings.app.default_time_estimate_minutes
            ),
            created_at=datetime.now(timezone.utc),
        )
        stored = self.repository.add(question)
        logger.info(
            "question.created",
            extra={
                "question_id": stored.id,
                "skill_id": stored.skill_id,
                "type": stored.type,
                "difficulty": stored.difficulty,
            },
        )
        return stored
