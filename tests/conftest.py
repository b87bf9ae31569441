"""Pytest configuration and fixtures shared across all test modules.

Environment variables are set before any import that loads settings, so the
global ``settings`` object sees the test configuration.
"""

import os

os.environ["APP_ENV"] = "testing"
os.environ.setdefault("LLM_PROVIDER", "openai")
os.environ.setdefault("LLM_MODEL", "gpt-4o")
os.environ.setdefault("LLM_API_KEY", "test-key-123")
os.environ.setdefault("APP_API_KEY_REQUIRED", "true")
os.environ.setdefault("APP_API_KEYS", "test-api-key-123,test-api-key-456")

from datetime import datetime, timezone
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from interview_prep.adapters.llm.base import AbstractLLMClient
from interview_prep.adapters.rate_limit import InMemoryFixedWindowRateLimiter
from interview_prep.adapters.storage import InMemoryQuestionRepository, InMemoryResponseRepository
from interview_prep.core.app_factory import create_app
from interview_prep.schemas.questions import Question

USER_ID = "7c9e6679-7425-40de-944b-e07fc1f90ae7"
OTHER_USER_ID = "16fd2706-8baf-433b-82eb-8c7fada847da"
QUESTION_ID = "6ba7b810-9dad-11d1-80b4-00c04fd430c8"
SKILL_ID = "550e8400-e29b-41d4-a716-446655440000"
API_KEY = "test-api-key-123"

SAMPLE_RUBRIC = [
    {
        "name": "accuracy",
        "weight": 0.6,
        "anchors": {
            "1": "Mostly incorrect",
            "2": "Several errors",
            "3": "Broadly correct",
            "4": "Correct with minor gaps",
            "5": "Fully correct and precise",
        },
    }
]


@pytest.fixture
def sample_question() -> Question:
    return Question(
        id=QUESTION_ID,
        skill_id=SKILL_ID,
        type="conceptual",
        format="text",
        title="What is React?",
        prompt="Explain the key concepts of React and how it differs from vanilla JavaScript.",
        difficulty="beginner",
        rubric=SAMPLE_RUBRIC,
        technologies=["react", "javascript"],
        topic_tags=["components"],
        time_estimate_minutes=10,
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def llm_evaluation() -> dict:
    """Raw JSON as returned by the scoring model."""
    return {
        "score": 4,
        "strengths": ["Clear explanation of the virtual DOM"],
        "improvements": ["Mention hooks"],
        "feedback": "Solid answer overall.",
        "rubricScores": {"accuracy": 4},
    }


@pytest.fixture
def llm_client(llm_evaluation: dict) -> AsyncMock:
    client = AsyncMock(spec=AbstractLLMClient)
    client.generate_json.return_value = llm_evaluation
    return client


@pytest.fixture
def question_repository(sample_question: Question) -> InMemoryQuestionRepository:
    return InMemoryQuestionRepository([sample_question])


@pytest.fixture
def response_repository() -> InMemoryResponseRepository:
    return InMemoryResponseRepository()


@pytest.fixture
def rate_limiter() -> InMemoryFixedWindowRateLimiter:
    limiter = InMemoryFixedWindowRateLimiter()
    yield limiter
    limiter.reset()


@pytest.fixture
def app(
    llm_client: AsyncMock,
    rate_limiter: InMemoryFixedWindowRateLimiter,
    question_repository: InMemoryQuestionRepository,
    response_repository: InMemoryResponseRepository,
) -> FastAPI:
    return create_app(
        llm_client=llm_client,
        rate_limiter=rate_limiter,
        question_repository=question_repository,
        response_repository=response_repository,
    )


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Headers of an authenticated user."""
    return {"X-API-Key": API_KEY, "X-User-ID": USER_ID}


@pytest.fixture
def user_id() -> str:
    return USER_ID


@pytest.fixture
def question_id() -> str:
    return QUESTION_ID


@pytest.fixture
def skill_id() -> str:
    return SKILL_ID
