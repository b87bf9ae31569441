"""AI scoring of candidate answers against a question rubric.

The service turns a validated evaluate request into a scoring prompt, calls
the configured LLM client in JSON mode and validates the model output into
an ``AnswerEvaluation``.
"""

import json
import logging
from typing import Any

from pydantic import ValidationError

from interview_prep.adapters.llm.base import AbstractLLMClient
from interview_prep.core.config import settings
from interview_prep.core.errors import LLMAppError
from interview_prep.schemas.evaluation import AnswerEvaluation
from interview_prep.schemas.questions import Question
from interview_prep.services.question_service import QuestionService
from interview_prep.validation.requests import EvaluateRequest

logger = logging.getLogger(__name__)


def build_evaluation_prompt(question_type: str, question: Question, rubric: Any) -> str:
    """Build the system prompt describing the question and scoring rubric.

    Args:
        question_type: Question type as submitted by the client.
        question: Catalog question being answered.
        rubric: Rubric supplied with the request, rendered as JSON.

    Returns:
        Prompt instructing the model to return a JSON evaluation.
    """
    return f"""
You are an expert technical interviewer evaluating a candidate's response to an interview question.

Question: {question.title}
Prompt: {question.prompt}
Type: {question_type}
Difficulty: {question.difficulty}

Evaluation Criteria:
{json.dumps(rubric, indent=2, ensure_ascii=False)}

Evaluate the candidate's response and provide:
1. An overall score (0-5 scale)
2. Key strengths (2-3 points)
3. Areas for improvement (2-3 points)
4. Detailed feedback (2-3 paragraphs)
5. Individual scores for each rubric criterion

Return your evaluation as a JSON object with this structure:
{{
  "score": 3.5,
  "strengths": ["point 1", "point 2"],
  "improvements": ["point 1", "point 2"],
  "feedback": "detailed feedback...",
  "rubricScores": {{
    "accuracy": 4,
    "clarity": 3,
    "depth": 3
  }}
}}

Be constructive, specific, and encouraging. Focus on helping the candidate improve.
""".strip()


def build_response_prompt(response: str) -> str:
    return f"User's response:\n\n{response}"


def parse_evaluation(raw: dict[str, Any]) -> AnswerEvaluation:
    """Map the model's JSON keys onto ``AnswerEvaluation``.

    Missing keys fall back to empty defaults; out-of-range or mistyped
    values raise ``pydantic.ValidationError``.
    """
    return AnswerEvaluation.model_validate(
        {
            "score": raw.get("score") or 0,
            "strengths": raw.get("strengths") or [],
            "improvements": raw.get("improvements") or [],
            "detailed_feedback": raw.get("feedback") or "",
            "rubric_scores": raw.get("rubricScores") or {},
        }
    )


class EvaluationService:
    """Scores answers with an LLM.

    Attributes:
        llm: LLM client adapter for generating structured JSON.
        questions: Catalog service used to resolve the question being answered.
    """

    def __init__(self, llm: AbstractLLMClient, questions: QuestionService) -> None:
        self.llm = llm
        self.questions = questions

    async def evaluate(self, request: EvaluateRequest) -> AnswerEvaluation:
        """Evaluate one answer.

        Raises:
            NotFoundAppError: If the question does not exist.
            LLMAppError: If the model call fails or returns unusable output.
        """
        question = self.questions.get_question(request["questionId"])

        system_prompt = build_evaluation_prompt(request["type"], question, request["rubric"])

        try:
            raw = await self.llm.generate_json(
                build_response_prompt(request["response"]),
                system=system_prompt,
                schema=AnswerEvaluation.model_json_schema(),
                temperature=settings.llm.temperature,
            )
        except RuntimeError as exc:
            logger.error(
                "evaluation.llm_failed",
                extra={"question_id": question.id, "error": str(exc)},
            )
            raise LLMAppError(
                code="llm_request_failed",
                message="Failed to evaluate response",
                details={"model": settings.llm.model},
            ) from exc

        try:
            evaluation = parse_evaluation(raw)
        except ValidationError as exc:
            logger.error(
                "evaluation.invalid_output",
                extra={"question_id": question.id, "error_count": exc.error_count()},
            )
            raise LLMAppError(
                code="llm_invalid_response",
                message="Failed to evaluate response",
                details={"model": settings.llm.model},
            ) from exc

        logger.info(
            "evaluation.completed",
            extra={
                "question_id": question.id,
                "score": evaluation.score,
                "rubric_dimensions": len(evaluation.rubric_scores),
            },
        )
        return evaluation
