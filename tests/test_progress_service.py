"""Unit tests for progress statistics and catalog services."""

from datetime import datetime, timedelta, timezone

import pytest

from interview_prep.adapters.storage import (
    InMemoryQuestionRepository,
    InMemoryResponseRepository,
    QuestionFilters,
)
from interview_prep.core.errors import NotFoundAppError
from interview_prep.schemas.questions import Question
from interview_prep.schemas.responses import PracticeResponse
from interview_prep.services.progress_service import ProgressService
from interview_prep.services.question_service import QuestionService, parse_technologies

NOW = datetime(2024, 5, 10, 15, 30, tzinfo=timezone.utc)


def _response(user_id: str, question_id: str, created_at: datetime, **fields) -> PracticeResponse:
    return PracticeResponse(
        id=f"r-{created_at.isoformat()}",
        user_id=user_id,
        question_id=question_id,
        created_at=created_at,
        **fields,
    )


@pytest.fixture
def service(
    response_repository: InMemoryResponseRepository,
    question_repository: InMemoryQuestionRepository,
) -> ProgressService:
    return ProgressService(response_repository, question_repository)


class TestTodayStats:
    def test_counts_only_responses_since_utc_midnight(
        self, service: ProgressService, response_repository, user_id: str, question_id: str
    ) -> None:
        response_repository.add(
            _response(user_id, question_id, NOW - timedelta(days=1), time_spent_seconds=600, overall_score=1)
        )
        response_repository.add(
            _response(user_id, question_id, NOW.replace(hour=0), time_spent_seconds=89, overall_score=0.9)
        )
        response_repository.add(_response(user_id, question_id, NOW - timedelta(hours=1)))

        stats = service.today_stats(user_id, now=NOW)

        assert stats.questions_attempted == 2
        assert stats.time_spent_minutes == 1
        # Unscored responses count as zero
        assert stats.average_score == 0.45

    def test_ignores_other_users(
        self, service: ProgressService, response_repository, user_id: str, question_id: str
    ) -> None:
        response_repository.add(_response("someone-else", question_id, NOW, overall_score=1))

        stats = service.today_stats(user_id, now=NOW)

        assert stats.questions_attempted == 0
        assert stats.average_score == 0.0


class TestSkillProgress:
    def test_sorted_by_attempts_then_skill(
        self,
        service: ProgressService,
        response_repository,
        question_repository,
        sample_question: Question,
        user_id: str,
    ) -> None:
        other_skill = sample_question.model_copy(
            update={"id": "9f1c2d3e-4b5a-4c6d-8e7f-0a1b2c3d4e5f", "skill_id": "aaaa0000-0000-4000-8000-000000000000"}
        )
        question_repository.add(other_skill)

        response_repository.add(_response(user_id, sample_question.id, NOW, overall_score=0.4))
        response_repository.add(_response(user_id, other_skill.id, NOW - timedelta(hours=2), overall_score=0.9))
        response_repository.add(_response(user_id, other_skill.id, NOW - timedelta(hours=1), overall_score=0.6))

        progress = service.skill_progress(user_id)

        assert [p.skill_id for p in progress] == [other_skill.skill_id, sample_question.skill_id]
        assert progress[0].attempts == 2
        assert progress[0].average_score == 0.75
        assert progress[0].last_practiced_at == NOW - timedelta(hours=1)

    def test_skill_without_scores_has_no_average(
        self, service: ProgressService, response_repository, user_id: str, question_id: str
    ) -> None:
        response_repository.add(_response(user_id, question_id, NOW))

        [progress] = service.skill_progress(user_id)

        assert progress.scored_attempts == 0
        assert progress.average_score is None


class TestSaveResponse:
    def test_normalizes_ids(self, service: ProgressService, user_id: str, question_id: str) -> None:
        stored = service.save_response(
            user_id,
            {"question_id": question_id.upper(), "session_id": "ABCDEF00-0000-4000-8000-000000000000"},
        )

        assert stored.question_id == question_id
        assert stored.session_id == "abcdef00-0000-4000-8000-000000000000"
        assert service.list_responses(user_id, question_id=question_id) == [stored]


class TestQuestionService:
    def test_parse_technologies(self) -> None:
        assert parse_technologies("react, ,typescript") == ["react", "typescript"]
        assert parse_technologies("") == []

    def test_get_missing_question_raises(self, question_repository) -> None:
        with pytest.raises(NotFoundAppError) as exc_info:
            QuestionService(question_repository).get_question("missing")

        assert exc_info.value.message == "Question not found"

    def test_create_question_assigns_id_and_defaults(self, question_repository, skill_id: str) -> None:
        service = QuestionService(question_repository)

        question = service.create_question(
            {
                "skill_id": skill_id.upper(),
                "type": "behavioral",
                "format": "voice",
                "title": "Tell me about a conflict",
                "prompt": "Describe a disagreement with a teammate and how you resolved it.",
                "difficulty": "intermediate",
            }
        )

        assert question.skill_id == skill_id
        assert question.time_estimate_minutes == 10
        assert question.created_at.tzinfo is not None
        assert question_repository.get(question.id) == question
        assert question in service.list_questions(QuestionFilters(type="behavioral"))
