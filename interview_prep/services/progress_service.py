"""Practice response storage and progress statistics."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from interview_prep.adapters.storage import AbstractQuestionRepository, AbstractResponseRepository
from interview_prep.schemas.responses import PracticeResponse, SkillProgress, TodayStats
from interview_prep.validation.requests import SaveResponseRequest

logger = logging.getLogger(__name__)


def _start_of_day(now: datetime) -> datetime:
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


class ProgressService:
    """Stores practice responses and summarizes a user's activity.

    Attributes:
        responses: Repository holding practice responses.
        questions: Repository used to map responses to skills.
    """

    def __init__(
        self,
        responses: AbstractResponseRepository,
        questions: AbstractQuestionRepository,
    ) -> None:
        self.responses = responses
        self.questions = questions

    def save_response(self, user_id: str, data: SaveResponseRequest) -> PracticeResponse:
        session_id = data.get("session_id")
        response = PracticeResponse(
            id=str(uuid.uuid4()),
            user_id=user_id,
            question_id=data["question_id"].lower(),
            session_id=session_id.lower() if session_id else None,
            response_text=data.get("response_text"),
            response_code=data.get("response_code"),
            time_spent_seconds=data.get("time_spent_seconds"),
            evaluation=data.get("evaluation"),
            overall_score=data.get("overall_score"),
            created_at=datetime.now(timezone.utc),
        )
        stored = self.responses.add(response)
        logger.info(
            "response.saved",
            extra={
                "response_id": stored.id,
                "question_id": stored.question_id,
                "has_evaluation": stored.evaluation is not None,
                "overall_score": stored.overall_score,
            },
        )
        return stored

    def list_responses(self, user_id: str, question_id: str | None = None) -> list[PracticeResponse]:
        return self.responses.list_for_user(user_id, question_id=question_id)

    def today_stats(self, user_id: str, *, now: datetime | None = None) -> TodayStats:
        """Summarize responses created since UTC midnight.

        Responses without a score count as 0 towards the average.
        """
        now = now or datetime.now(timezone.utc)
        todays = self.responses.list_for_user(user_id, since=_start_of_day(now))

        total_seconds = sum(r.time_spent_seconds or 0 for r in todays)
        average = sum(r.overall_score or 0 for r in todays) / len(todays) if todays else 0.0

        return TodayStats(
            questions_attempted=len(todays),
            time_spent_minutes=round(total_seconds / 60),
            average_score=round(average, 2),
        )

    def skill_progress(self, user_id: str) -> list[SkillProgress]:
        """Aggregate a user's responses per skill, most practiced first.

        Responses for questions no longer in the catalog are skipped.
        """
        buckets: dict[str, list[PracticeResponse]] = {}
        for response in self.responses.list_for_user(user_id):
            question = self.questions.get(response.question_id)
            if question is None:
                continue
            buckets.setdefault(question.skill_id, []).append(response)

        progress: list[SkillProgress] = []
        for skill_id, items in buckets.items():
            scores = [r.overall_score for r in items if r.overall_score is not None]
            progress.append(
                SkillProgress(
                    skill_id=skill_id,
                    attempts=len(items),
                    scored_attempts=len(scores),
                    average_score=round(sum(scores) / len(scores), 2) if scores else None,
                    last_practiced_at=max(r.created_at for r in items),
                )
            )

        progress.sort(key=lambda p: (-p.attempts, p.skill_id))
        return progress
