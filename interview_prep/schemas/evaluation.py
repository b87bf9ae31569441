"""Pydantic schemas for AI answer evaluation."""

from pydantic import BaseModel, Field


class AnswerEvaluation(BaseModel):
    """Structured feedback produced by the scoring model."""

    score: float = Field(
        0,
        ge=0,
        le=5,
        description="Overall score on a 0-5 scale.",
    )
    strengths: list[str] = Field(
        default_factory=list,
        description="What the answer did well (2-3 points).",
    )
    improvements: list[str] = Field(
        default_factory=list,
        description="Concrete areas to improve (2-3 points).",
    )
    detailed_feedback: str = Field(
        "",
        description="Narrative feedback, 2-3 paragraphs.",
    )
    rubric_scores: dict[str, float] = Field(
        default_factory=dict,
        description="Score per rubric dimension, keyed by dimension name.",
    )


class EvaluationEnvelope(BaseModel):
    evaluation: AnswerEvaluation
