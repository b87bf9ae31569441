"""Storage interfaces for questions and practice responses.

Services depend on these abstractions so the in-memory store used for
development and tests can be replaced by a database-backed one.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime

from interview_prep.schemas.questions import Question
from interview_prep.schemas.responses import PracticeResponse


@dataclass(frozen=True)
class QuestionFilters:
    """Catalog filters; unset fields do not restrict the result."""

    technologies: list[str] = field(default_factory=list)
    difficulty: str | None = None
    type: str | None = None
    search: str | None = None


class AbstractQuestionRepository(ABC):
    """Interface for question storage."""

    @abstractmethod
    def find(self, filters: QuestionFilters) -> list[Question]:
        """Return active questions matching ``filters``, newest first."""
        raise NotImplementedError

    @abstractmethod
    def get(self, question_id: str) -> Question | None:
        """Return the question with ``question_id`` or None."""
        raise NotImplementedError

    @abstractmethod
    def list_by_skill(self, skill_id: str) -> list[Question]:
        """Return active questions of one skill, easiest first."""
        raise NotImplementedError

    @abstractmethod
    def add(self, question: Question) -> Question:
        """Persist a new question and return the stored record."""
        raise NotImplementedError


class AbstractResponseRepository(ABC):
    """Interface for practice response storage."""

    @abstractmethod
    def add(self, response: PracticeResponse) -> PracticeResponse:
        """Persist a new response and return the stored record."""
        raise NotImplementedError

    @abstractmethod
    def list_for_user(
        self,
        user_id: str,
        *,
        question_id: str | None = None,
        since: datetime | None = None,
    ) -> list[PracticeResponse]:
        """Return a user's responses, newest first.

        Args:
            user_id: Owner of the responses.
            question_id: Optional question to restrict to.
            since: Optional lower bound (inclusive) on ``created_at``.
        """
        raise NotImplementedError
