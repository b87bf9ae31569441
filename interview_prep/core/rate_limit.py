"""Rate limiting dependency for FastAPI routes.

This module wires the rate limiting adapter into the HTTP layer.

- One limiter instance is built per application (see ``create_app``) and
  stored on ``app.state.rate_limiter``; dependencies fetch it from there.
- Routes pick an operation class (``evaluate``, ``api``, ``read``); each
  class has its own named config and therefore its own window per caller.
- The caller is identified by user id, then API key, then client IP. The
  first two are only used once the API key is verified.
"""

from __future__ import annotations

import logging
from typing import Annotated, Awaitable, Callable

from fastapi import Header, HTTPException, Request, status

from interview_prep.adapters.rate_limit import AbstractRateLimiter, RateLimitConfig
from interview_prep.core.auth import hash_secret, is_valid_api_key
from interview_prep.core.config import AppSettings, settings
from interview_prep.validation import Valid, validate_uuid

logger = logging.getLogger(__name__)


def build_rate_limit_presets(app_settings: AppSettings) -> dict[str, RateLimitConfig]:
    """Build the named configs for each operation class from settings."""

    window = app_settings.rate_limit_window_seconds
    return {
        # Expensive AI-backed operations
        "evaluate": RateLimitConfig(
            limit=app_settings.rate_limit_evaluate_requests,
            window_seconds=window,
            name="evaluate",
        ),
        # Mutating API calls
        "api": RateLimitConfig(
            limit=app_settings.rate_limit_api_requests,
            window_seconds=window,
            name="api",
        ),
        # Read-only calls
        "read": RateLimitConfig(
            limit=app_settings.rate_limit_read_requests,
            window_seconds=window,
            name="read",
        ),
    }


RATE_LIMITS = build_rate_limit_presets(settings.app)


def get_rate_limiter(request: Request) -> AbstractRateLimiter:
    """Return the limiter owned by the running application."""

    return request.app.state.rate_limiter


def build_rate_limit_identifier(
    request: Request,
    x_user_id: str | None,
    x_api_key: str | None,
) -> tuple[str, str]:
    """Build the limiter identifier for the current request.

    Headers only identify the caller when the API key checks out; a bare
    ``X-User-ID`` must not spend another user's quota. Anything unverified
    is counted against the client IP. API keys are fingerprinted so the
    limiter never holds a raw secret.

    Returns:
        Tuple of (key_type, identifier).
    """

    if is_valid_api_key(x_api_key):
        user = validate_uuid(x_user_id, "X-User-ID")
        if isinstance(user, Valid):
            return "user", f"user:{user.data.lower()}"
        if x_api_key:
            return "api_key", f"api_key:{hash_secret(x_api_key)}"

    client_host = request.client.host if request.client else "unknown"
    return "ip", f"ip:{client_host}"


def rate_limit(operation: str) -> Callable[..., Awaitable[None]]:
    """Create a dependency enforcing the limit of one operation class.

    Usage:
        @router.post("/evaluate", dependencies=[Depends(rate_limit("evaluate"))])

    Args:
        operation: Key into ``RATE_LIMITS``.

    Raises:
        KeyError: If the operation class is unknown.
    """

    config = RATE_LIMITS[operation]

    async def enforce_rate_limit(
        request: Request,
        x_user_id: Annotated[str | None, Header(alias="X-User-ID")] = None,
        x_api_key: Annotated[str | None, Header(alias="X-API-Key")] = None,
    ) -> None:
        if not settings.app.rate_limit_enabled:
            return

        key_type, identifier = build_rate_limit_identifier(request, x_user_id, x_api_key)
        result = get_rate_limiter(request).consume(identifier, config)

        log_extra = {
            "operation": operation,
            "key_type": key_type,
            "key_hash": hash_secret(identifier),
            "limit": result.limit,
            "remaining": result.remaining,
            "window_s": config.window_seconds,
        }

        if result.success:
            logger.debug("rate_limit.allowed", extra=log_extra)
            return

        logger.warning(
            "rate_limit.exceeded",
            extra={**log_extra, "retry_after_s": result.reset_in_seconds},
        )

        headers: dict[str, str] = {}
        if settings.app.rate_limit_include_headers:
            headers["Retry-After"] = str(result.reset_in_seconds)
            headers["X-RateLimit-Limit"] = str(result.limit)
            headers["X-RateLimit-Remaining"] = str(result.remaining)
            headers["X-RateLimit-Reset"] = str(result.reset_in_seconds)

        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=f"Rate limit exceeded. Try again in {result.reset_in_seconds} seconds.",
            headers=headers or None,
        )

    return enforce_rate_limit
