"""Unit tests for the evaluation service and its prompt helpers."""

from unittest.mock import AsyncMock

import pytest
from pydantic import ValidationError

from interview_prep.core.errors import LLMAppError, NotFoundAppError
from interview_prep.schemas.questions import Question
from interview_prep.services.evaluation_service import (
    EvaluationService,
    build_evaluation_prompt,
    build_response_prompt,
    parse_evaluation,
)
from interview_prep.services.question_service import QuestionService


@pytest.fixture
def service(llm_client: AsyncMock, question_repository) -> EvaluationService:
    return EvaluationService(llm=llm_client, questions=QuestionService(question_repository))


@pytest.fixture
def request_data(question_id: str) -> dict:
    return {
        "questionId": question_id,
        "response": "Components, props and state.",
        "rubric": [{"name": "accuracy", "weight": 1}],
        "type": "conceptual",
    }


class TestPrompts:
    def test_evaluation_prompt_describes_question(self, sample_question: Question) -> None:
        prompt = build_evaluation_prompt("coding", sample_question, {"clarity": "Is it clear?"})

        assert prompt.startswith("You are an expert technical interviewer")
        assert "Question: What is React?" in prompt
        assert f"Prompt: {sample_question.prompt}" in prompt
        assert "Type: coding" in prompt
        assert '"clarity": "Is it clear?"' in prompt
        assert '"rubricScores"' in prompt

    def test_response_prompt(self) -> None:
        assert build_response_prompt("My answer") == "User's response:\n\nMy answer"


class TestParseEvaluation:
    def test_maps_model_keys(self, llm_evaluation: dict) -> None:
        evaluation = parse_evaluation(llm_evaluation)

        assert evaluation.score == 4
        assert evaluation.detailed_feedback == "Solid answer overall."
        assert evaluation.rubric_scores == {"accuracy": 4}

    def test_missing_keys_default_to_empty(self) -> None:
        evaluation = parse_evaluation({})

        assert evaluation.score == 0
        assert evaluation.strengths == []
        assert evaluation.detailed_feedback == ""
        assert evaluation.rubric_scores == {}

    @pytest.mark.parametrize(
        "raw",
        [{"score": 6}, {"score": -1}, {"strengths": "good"}, {"rubricScores": {"accuracy": "high"}}],
    )
    def test_rejects_unusable_values(self, raw: dict) -> None:
        with pytest.raises(ValidationError):
            parse_evaluation(raw)


class TestEvaluationService:
    @pytest.mark.asyncio
    async def test_evaluate_calls_model_in_json_mode(
        self, service: EvaluationService, llm_client: AsyncMock, request_data: dict
    ) -> None:
        evaluation = await service.evaluate(request_data)

        assert evaluation.score == 4
        kwargs = llm_client.generate_json.call_args.kwargs
        assert kwargs["schema"]["title"] == "AnswerEvaluation"
        assert kwargs["temperature"] == 0.3
        assert '"name": "accuracy"' in kwargs["system"]

    @pytest.mark.asyncio
    async def test_unknown_question(self, service: EvaluationService, request_data: dict) -> None:
        request_data["questionId"] = "00000000-0000-4000-8000-000000000000"

        with pytest.raises(NotFoundAppError):
            await service.evaluate(request_data)

    @pytest.mark.asyncio
    async def test_model_error_is_wrapped(
        self, service: EvaluationService, llm_client: AsyncMock, request_data: dict
    ) -> None:
        llm_client.generate_json.side_effect = RuntimeError("LLM returned empty response")

        with pytest.raises(LLMAppError) as exc_info:
            await service.evaluate(request_data)

        assert exc_info.value.code == "llm_request_failed"
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    @pytest.mark.asyncio
    async def test_invalid_model_output_is_wrapped(
        self, service: EvaluationService, llm_client: AsyncMock, request_data: dict
    ) -> None:
        llm_client.generate_json.return_value = {"score": "excellent"}

        with pytest.raises(LLMAppError) as exc_info:
            await service.evaluate(request_data)

        assert exc_info.value.code == "llm_invalid_response"
