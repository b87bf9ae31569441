"""In-memory repositories.

Notes:
- Per-process only and lost on restart.
- Thread-safe: uses a lock around shared state.
"""

from __future__ import annotations

import threading
from datetime import datetime

from interview_prep.adapters.storage.base import (
    AbstractQuestionRepository,
    AbstractResponseRepository,
    QuestionFilters,
)
from interview_prep.schemas.questions import Question
from interview_prep.schemas.responses import PracticeResponse
from interview_prep.validation.requests import DIFFICULTY_LEVELS


def _matches(question: Question, filters: QuestionFilters) -> bool:
    if not question.is_active:
        return False

    if filters.technologies and not set(filters.technologies) & set(question.technologies):
        return False

    if filters.difficulty and question.difficulty != filters.difficulty:
        return False

    if filters.type and question.type != filters.type:
        return False

    if filters.search:
        needle = filters.search.lower()
        if not (
            needle in question.title.lower()
            or needle in question.prompt.lower()
            or filters.search in question.topic_tags
        ):
            return False

    return True


class InMemoryQuestionRepository(AbstractQuestionRepository):
    """Question catalog held in a dict keyed by question id."""

    def __init__(self, questions: list[Question] | None = None) -> None:
        self._lock = threading.RLock()
        self._questions: dict[str, Question] = {q.id: q for q in questions or []}

    def find(self, filters: QuestionFilters) -> list[Question]:
        with self._lock:
            matched = [q for q in self._questions.values() if _matches(q, filters)]
        return sorted(matched, key=lambda q: q.created_at, reverse=True)

    def get(self, question_id: str) -> Question | None:
        with self._lock:
            return self._questions.get(question_id.lower())

    def list_by_skill(self, skill_id: str) -> list[Question]:
        skill_id = skill_id.lower()
        with self._lock:
            matched = [
                q for q in self._questions.values() if q.is_active and q.skill_id == skill_id
            ]
        return sorted(
            matched, key=lambda q: (DIFFICULTY_LEVELS.index(q.difficulty), q.created_at)
        )

    def add(self, question: Question) -> Question:
        with self._lock:
            self._questions[question.id] = question
        return question


class InMemoryResponseRepository(AbstractResponseRepository):
    """Practice responses held in insertion order."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._responses: list[PracticeResponse] = []

    def add(self, response: PracticeResponse) -> PracticeResponse:
        with self._lock:
            self._responses.append(response)
        return response

    def list_for_user(
        self,
        user_id: str,
        *,
        question_id: str | None = None,
        since: datetime | None = None,
    ) -> list[PracticeResponse]:
        with self._lock:
            selected = [
                r
                for r in self._responses
                if r.user_id == user_id
                and (question_id is None or r.question_id == question_id.lower())
                and (since is None or r.created_at >= since)
            ]
        return sorted(selected, key=lambda r: r.created_at, reverse=True)
