from __future__ import annotations

from fastapi import APIRouter

router = APIRouter(tags=["Health"])


@router.get("/health")
def health_check() -> dict[str, str]:
    """Liveness check for load balancers; touches no dependencies."""

    return {"status": "ok"}
