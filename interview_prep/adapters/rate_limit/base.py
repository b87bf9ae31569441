"""Rate limiter interfaces.

The API should depend on this abstraction (not the concrete implementation)
so we can swap storage backends later (e.g., Redis) with minimal changes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class RateLimitConfig:
    """Limit applied to one class of operations.

    Attributes:
        limit: Max requests allowed per window.
        window_seconds: Length of the fixed window in seconds.
        name: Optional operation class. Named configs count separately from
            other configs used with the same identifier.
    """

    limit: int
    window_seconds: int
    name: str | None = None

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError("limit must be >= 1")
        if self.window_seconds < 1:
            raise ValueError("window_seconds must be >= 1")


@dataclass(frozen=True)
class RateLimitResult:
    """Result of a rate limit consume operation.

    Attributes:
        success: Whether the request is allowed to proceed.
        limit: Max requests per window.
        remaining: Remaining requests in the current window (0 when blocked).
        reset_in_seconds: Whole seconds until the current window resets.
    """

    success: bool
    limit: int
    remaining: int
    reset_in_seconds: int


class AbstractRateLimiter(ABC):
    """Interface for rate limiters."""

    @abstractmethod
    def consume(self, identifier: str, config: RateLimitConfig) -> RateLimitResult:
        """Count one request for ``identifier`` under ``config``.

        Args:
            identifier: Unique identifier (e.g., user id, IP address).
            config: Limit and window to enforce.

        Returns:
            RateLimitResult describing whether it was allowed.
        """
        raise NotImplementedError

    @abstractmethod
    def reset(self) -> None:
        """Drop all counters. Intended for test harnesses only."""
        raise NotImplementedError
