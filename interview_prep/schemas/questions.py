"""Pydantic schemas for catalog questions."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class QuestionSolution(BaseModel):
    """Reference solution shown after an attempt."""

    explanation: str
    key_points: list[str] = Field(default_factory=list)
    code: str | None = None


class RubricDimension(BaseModel):
    """One scoring dimension with anchors for score levels 1 to 5."""

    name: str
    weight: float = Field(..., ge=0, le=1)
    anchors: dict[str, str] = Field(
        ...,
        description="Anchor text keyed by score level '1' through '5'.",
    )


class Question(BaseModel):
    """A practice question in the catalog."""

    id: str
    skill_id: str
    type: Literal["conceptual", "coding", "system_design", "behavioral", "practical"]
    format: Literal["text", "voice", "code", "whiteboard"]
    title: str
    prompt: str
    difficulty: Literal["beginner", "intermediate", "advanced", "expert"]
    hints: list[str] = Field(default_factory=list)
    solution: QuestionSolution | None = None
    rubric: list[RubricDimension] = Field(default_factory=list)
    technologies: list[str] = Field(default_factory=list)
    company_tags: list[str] = Field(default_factory=list)
    topic_tags: list[str] = Field(default_factory=list)
    time_estimate_minutes: float
    created_at: datetime
    is_active: bool = True


class QuestionEnvelope(BaseModel):
    question: Question


class QuestionListEnvelope(BaseModel):
    questions: list[Question]
