from __future__ import annotations

from interview_prep.api.routes.evaluate import router as evaluate_router
from interview_prep.api.routes.health import router as health_router
from interview_prep.api.routes.progress import router as progress_router
from interview_prep.api.routes.questions import router as questions_router
from interview_prep.api.routes.responses import router as responses_router

__all__ = [
    "evaluate_router",
    "health_router",
    "progress_router",
    "questions_router",
    "responses_router",
]
