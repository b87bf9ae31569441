"""In-memory fixed-window rate limiter.

Notes:
- Per-process only: running multiple workers multiplies the effective limit.
- Thread-safe: uses a lock around shared state.
- Windows start at each identifier's first request, so up to ``2 * limit``
  requests can pass across a window boundary.
"""

from __future__ import annotations

import logging
import math
import threading
import time
from dataclasses import dataclass
from typing import Callable

from interview_prep.adapters.rate_limit.base import (
    AbstractRateLimiter,
    RateLimitConfig,
    RateLimitResult,
)

logger = logging.getLogger(__name__)

DEFAULT_CLEANUP_INTERVAL_SECONDS = 5 * 60


@dataclass
class _WindowEntry:
    count: int
    reset_time: float


class InMemoryFixedWindowRateLimiter(AbstractRateLimiter):
    """Rate limiter counting requests per identifier in fixed windows.

    Expired entries are detected on access and additionally swept from the
    store at most once per ``cleanup_interval_seconds``.

    Important:
        This limiter is per-process only. If the API runs with multiple workers
        (e.g., multiple Uvicorn/Gunicorn workers), each worker will enforce its
        own independent limits.
    """

    def __init__(
        self,
        *,
        cleanup_interval_seconds: float = DEFAULT_CLEANUP_INTERVAL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the in-memory rate limiter.

        Args:
            cleanup_interval_seconds: Minimum time between expiry sweeps.
            clock: Time source function returning UNIX time in seconds.

        Raises:
            ValueError: If cleanup_interval_seconds is negative.
        """
        if cleanup_interval_seconds < 0:
            raise ValueError("cleanup_interval_seconds must be >= 0")

        self._cleanup_interval = cleanup_interval_seconds
        self._clock = clock
        self._lock = threading.RLock()
        self._entries: dict[str, _WindowEntry] = {}
        self._last_cleanup = clock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    @staticmethod
    def build_key(identifier: str, config: RateLimitConfig) -> str:
        """Namespace the identifier, including the config name when present."""
        if config.name:
            return f"ratelimit:{config.name}:{identifier}"
        return f"ratelimit:{identifier}"

    def _cleanup_expired_locked(self, now: float) -> None:
        if now - self._last_cleanup < self._cleanup_interval:
            return

        self._last_cleanup = now
        expired = [key for key, entry in self._entries.items() if entry.reset_time <= now]
        for key in expired:
            del self._entries[key]

        if expired:
            logger.debug(
                "rate_limit.cleanup",
                extra={"removed": len(expired), "entries": len(self._entries)},
            )

    def consume(self, identifier: str, config: RateLimitConfig) -> RateLimitResult:
        """Count one request for the identifier and decide whether it may pass.

        Args:
            identifier: Unique identifier for rate limiting (e.g., user id).
            config: Limit and window to enforce.

        Returns:
            RateLimitResult with allowance decision and metadata.

        Raises:
            ValueError: If identifier is empty.
        """
        if not identifier:
            raise ValueError("identifier must be a non-empty string")

        key = self.build_key(identifier, config)

        with self._lock:
            now = self._clock()
            self._cleanup_expired_locked(now)

            entry = self._entries.get(key)

            if entry is None or entry.reset_time <= now:
                self._entries[key] = _WindowEntry(
                    count=1,
                    reset_time=now + config.window_seconds,
                )
                return RateLimitResult(
                    success=True,
                    limit=config.limit,
                    remaining=config.limit - 1,
                    reset_in_seconds=config.window_seconds,
                )

            reset_in_seconds = max(1, math.ceil(entry.reset_time - now))

            if entry.count >= config.limit:
                return RateLimitResult(
                    success=False,
                    limit=config.limit,
                    remaining=0,
                    reset_in_seconds=reset_in_seconds,
                )

            entry.count += 1
            return RateLimitResult(
                success=True,
                limit=config.limit,
                remaining=config.limit - entry.count,
                reset_in_seconds=reset_in_seconds,
            )

    def reset(self) -> None:
        """Remove all counters and restart the cleanup schedule."""
        with self._lock:
            self._entries.clear()
            self._last_cleanup = self._clock()
