"""Application factory.

Builds the FastAPI app together with its process-scoped state: the rate
limiter, repositories, LLM client and services live on ``app.state`` for the
lifetime of the process and are injected into routes via dependencies.
"""

from __future__ import annotations

from fastapi import FastAPI

from interview_prep.adapters.llm import AbstractLLMClient, create_llm_client
from interview_prep.adapters.rate_limit import AbstractRateLimiter, InMemoryFixedWindowRateLimiter
from interview_prep.adapters.storage import (
    AbstractQuestionRepository,
    AbstractResponseRepository,
    InMemoryQuestionRepository,
    InMemoryResponseRepository,
)
from interview_prep.api.routes import (
    evaluate_router,
    health_router,
    progress_router,
    questions_router,
    responses_router,
)
from interview_prep.core.config import settings
from interview_prep.core.exception_handlers import setup_exception_handlers
from interview_prep.core.logging import configure_logging
from interview_prep.core.middleware import request_id_middleware
from interview_prep.core.openapi import TAGS_METADATA, apply_openapi_customizations
from interview_prep.data.seed_questions import load_seed_questions
from interview_prep.services.evaluation_service import EvaluationService
from interview_prep.services.progress_service import ProgressService
from interview_prep.services.question_service import QuestionService


def create_app(
    *,
    llm_client: AbstractLLMClient | None = None,
    rate_limiter: AbstractRateLimiter | None = None,
    question_repository: AbstractQuestionRepository | None = None,
    response_repository: AbstractResponseRepository | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application instance.

    Every collaborator can be supplied explicitly (tests do this); otherwise
    it is built from settings.

    Returns:
        Configured FastAPI app with middleware, handlers, routers and state.
    """
    # Logging first so subsequent init logs are formatted as desired
    configure_logging(settings.log)

    app = FastAPI(
        title="Interview Prep API",
        description=(
            "Practice question catalog, answer storage, AI rubric scoring and "
            "progress tracking for interview preparation."
        ),
        version="0.1.0",
        openapi_tags=TAGS_METADATA,
    )

    questions = question_repository or InMemoryQuestionRepository(
        load_seed_questions() if settings.app.seed_questions else None
    )
    responses = response_repository or InMemoryResponseRepository()
    question_service = QuestionService(questions)

    app.state.rate_limiter = rate_limiter or InMemoryFixedWindowRateLimiter(
        cleanup_interval_seconds=settings.app.rate_limit_cleanup_interval_seconds,
    )
    app.state.question_service = question_service
    app.state.progress_service = ProgressService(responses, questions)
    app.state.evaluation_service = EvaluationService(
        llm=llm_client or create_llm_client(),
        questions=question_service,
    )

    app.middleware("http")(request_id_middleware)
    setup_exception_handlers(app)

    app.include_router(questions_router, prefix="/v1")
    app.include_router(responses_router, prefix="/v1")
    app.include_router(evaluate_router, prefix="/v1")
    app.include_router(progress_router, prefix="/v1")
    app.include_router(health_router)

    apply_openapi_customizations(app)

    return app
