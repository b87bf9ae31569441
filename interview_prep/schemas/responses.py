"""Pydantic schemas for stored practice responses and progress summaries."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field


class PracticeResponse(BaseModel):
    """A candidate's answer to a question, optionally with its evaluation."""

    id: str
    user_id: str
    question_id: str
    session_id: str | None = None
    response_text: str | None = None
    response_code: str | None = None
    time_spent_seconds: float | None = None
    evaluation: dict[str, Any] | None = None
    overall_score: float | None = Field(None, ge=0, le=1)
    created_at: datetime


class ResponseEnvelope(BaseModel):
    response: PracticeResponse


class ResponseListEnvelope(BaseModel):
    responses: list[PracticeResponse]


class TodayStats(BaseModel):
    """Practice activity since UTC midnight."""

    questions_attempted: int
    time_spent_minutes: int
    average_score: float


class SkillProgress(BaseModel):
    """Per-skill practice summary derived from stored responses."""

    skill_id: str
    attempts: int
    scored_attempts: int
    average_score: float | None = Field(
        None,
        description="Mean overall_score of scored attempts, rounded to 2 decimals.",
    )
    last_practiced_at: datetime


class SkillProgressEnvelope(BaseModel):
    skills: list[SkillProgress]
