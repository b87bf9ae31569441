"""Caller authentication.

Two layers:
- API key: the ``X-API-Key`` header must match one of the configured keys
  (can be disabled with APP_API_KEY_REQUIRED=false).
- User identity: endpoints acting on behalf of a user read the ``X-User-ID``
  header set by the upstream auth gateway. It must be a UUID.
"""

from __future__ import annotations

import hashlib
import logging
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from interview_prep.core.config import settings
from interview_prep.core.errors import AuthenticationAppError
from interview_prep.validation import Invalid, validate_uuid

logger = logging.getLogger(__name__)


def hash_secret(value: str) -> str:
    """Short, non-reversible fingerprint of a secret for logs."""
    return hashlib.sha256(value.encode()).hexdigest()[:16]


def parse_api_keys(keys_string: str | None) -> set[str]:
    """Parse comma-separated API keys into a set.

    Examples:
        >>> sorted(parse_api_keys("key1, key2 , key3 "))
        ['key1', 'key2', 'key3']
        >>> parse_api_keys(None)
        set()
    """
    if not keys_string:
        return set()

    return {key.strip() for key in keys_string.split(",") if key.strip()}


def validate_api_key(provided_key: str) -> None:
    """Validate that provided API key matches configured keys.

    Args:
        provided_key: API key to validate.

    Raises:
        AuthenticationAppError: If the key is invalid, or authentication is
            required but no keys are configured.
    """
    if not settings.app.api_key_required:
        return

    valid_keys = parse_api_keys(settings.app.api_keys)

    if not valid_keys:
        logger.error(
            "auth.keys_not_configured",
            extra={"auth_required": settings.app.api_key_required},
        )
        raise AuthenticationAppError(
            code="api_keys_not_configured",
            message="API key authentication is enabled but no valid keys are configured",
            details={"hint": "Set APP_API_KEYS or disable auth with APP_API_KEY_REQUIRED=false"},
        )

    if provided_key not in valid_keys:
        logger.warning(
            "auth.invalid_key",
            extra={"api_key_hash": hash_secret(provided_key)},
        )
        raise AuthenticationAppError(
            code="invalid_api_key",
            message="Invalid or missing API key",
        )


def is_valid_api_key(provided_key: str | None) -> bool:
    """Non-raising form of ``validate_api_key``.

    Returns True when authentication is disabled, so callers can treat the
    result as "the credentials on this request can be trusted".
    """
    if not settings.app.api_key_required:
        return True
    if not provided_key:
        return False

    try:
        validate_api_key(provided_key)
    except AuthenticationAppError:
        return False
    return True


async def verify_api_key(
    x_api_key: Annotated[str | None, Header(alias="X-API-Key")] = None,
) -> None:
    """FastAPI dependency for API key authentication.

    Raises:
        HTTPException: 403 Forbidden if authentication fails.
    """
    if not settings.app.api_key_required:
        return

    if not x_api_key:
        logger.warning("auth.missing_key")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Missing API key. Provide X-API-Key header.",
        )

    try:
        validate_api_key(x_api_key)
    except AuthenticationAppError as exc:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=exc.message,
        ) from exc


async def get_current_user_id(
    _: Annotated[None, Depends(verify_api_key)],
    x_user_id: Annotated[str | None, Header(alias="X-User-ID")] = None,
) -> str:
    """FastAPI dependency resolving the authenticated user's id.

    Returns:
        The user id from the ``X-User-ID`` header.

    Raises:
        HTTPException: 401 when the header is missing or not a UUID.
    """
    result = validate_uuid(x_user_id, "X-User-ID")
    if isinstance(result, Invalid):
        logger.warning("auth.invalid_user", extra={"reason": result.error})
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
        )
    return result.data.lower()


CurrentUserId = Annotated[str, Depends(get_current_user_id)]
