"""Unit tests for in-memory rate limiter adapter."""

import threading
from unittest.mock import Mock

import pytest

from interview_prep.adapters.rate_limit import RateLimitConfig
from interview_prep.adapters.rate_limit.in_memory import InMemoryFixedWindowRateLimiter


@pytest.fixture
def clock() -> Mock:
    return Mock(return_value=1000.0)


@pytest.fixture
def limiter(clock: Mock) -> InMemoryFixedWindowRateLimiter:
    return InMemoryFixedWindowRateLimiter(clock=clock)


def test_allows_up_to_limit_in_same_window(limiter: InMemoryFixedWindowRateLimiter) -> None:
    config = RateLimitConfig(limit=3, window_seconds=60)

    remaining = [limiter.consume("user:a", config).remaining for _ in range(3)]

    assert remaining == [2, 1, 0]


def test_first_request_reports_full_window(limiter: InMemoryFixedWindowRateLimiter) -> None:
    result = limiter.consume("user:a", RateLimitConfig(limit=5, window_seconds=60))

    assert result.success is True
    assert result.limit == 5
    assert result.remaining == 4
    assert result.reset_in_seconds == 60


def test_blocks_when_over_limit(limiter: InMemoryFixedWindowRateLimiter, clock: Mock) -> None:
    config = RateLimitConfig(limit=2, window_seconds=60)

    assert limiter.consume("user:a", config).success is True
    assert limiter.consume("user:a", config).success is True

    clock.return_value = 1015.5
    blocked = limiter.consume("user:a", config)

    assert blocked.success is False
    assert blocked.remaining == 0
    assert blocked.reset_in_seconds == 45


def test_rejected_requests_do_not_extend_window(
    limiter: InMemoryFixedWindowRateLimiter, clock: Mock
) -> None:
    config = RateLimitConfig(limit=1, window_seconds=10)

    limiter.consume("user:a", config)
    for _ in range(5):
        assert limiter.consume("user:a", config).success is False

    clock.return_value = 1010.0
    assert limiter.consume("user:a", config).success is True


def test_reset_in_seconds_never_below_one(
    limiter: InMemoryFixedWindowRateLimiter, clock: Mock
) -> None:
    config = RateLimitConfig(limit=1, window_seconds=10)
    limiter.consume("user:a", config)

    clock.return_value = 1009.999
    blocked = limiter.consume("user:a", config)

    assert blocked.success is False
    assert blocked.reset_in_seconds == 1


def test_resets_on_new_window(limiter: InMemoryFixedWindowRateLimiter, clock: Mock) -> None:
    config = RateLimitConfig(limit=1, window_seconds=60)

    assert limiter.consume("user:a", config).success is True
    assert limiter.consume("user:a", config).success is False

    # The window boundary itself belongs to the next window
    clock.return_value = 1060.0
    fresh = limiter.consume("user:a", config)

    assert fresh.success is True
    assert fresh.remaining == 0
    assert fresh.reset_in_seconds == 60


def test_isolated_by_identifier(limiter: InMemoryFixedWindowRateLimiter) -> None:
    config = RateLimitConfig(limit=1, window_seconds=60)

    assert limiter.consume("user:a", config).success is True
    assert limiter.consume("user:a", config).success is False

    assert limiter.consume("user:b", config).success is True


def test_named_configs_have_independent_counters(limiter: InMemoryFixedWindowRateLimiter) -> None:
    evaluate = RateLimitConfig(limit=1, window_seconds=60, name="evaluate")
    read = RateLimitConfig(limit=1, window_seconds=60, name="read")

    assert limiter.consume("user:a", evaluate).success is True
    assert limiter.consume("user:a", evaluate).success is False

    assert limiter.consume("user:a", read).success is True


def test_unnamed_configs_share_one_counter(limiter: InMemoryFixedWindowRateLimiter) -> None:
    limiter.consume("user:a", RateLimitConfig(limit=1, window_seconds=60))

    result = limiter.consume("user:a", RateLimitConfig(limit=5, window_seconds=60))

    assert result.success is True
    assert result.remaining == 3


def test_build_key_namespaces_identifier() -> None:
    unnamed = RateLimitConfig(limit=1, window_seconds=60)
    named = RateLimitConfig(limit=1, window_seconds=60, name="api")

    assert InMemoryFixedWindowRateLimiter.build_key("ip:1.2.3.4", unnamed) == "ratelimit:ip:1.2.3.4"
    assert InMemoryFixedWindowRateLimiter.build_key("ip:1.2.3.4", named) == "ratelimit:api:ip:1.2.3.4"


def test_sweep_removes_expired_entries_after_interval(
    limiter: InMemoryFixedWindowRateLimiter, clock: Mock
) -> None:
    config = RateLimitConfig(limit=5, window_seconds=60)
    limiter.consume("user:old", config)

    clock.return_value = 1100.0
    limiter.consume("user:recent", config)
    # Interval has not elapsed yet, so the expired entry is still stored
    assert len(limiter) == 2

    clock.return_value = 1400.0
    limiter.consume("user:recent", config)

    assert len(limiter) == 1


def test_reset_clears_all_counters(limiter: InMemoryFixedWindowRateLimiter) -> None:
    config = RateLimitConfig(limit=1, window_seconds=60)
    limiter.consume("user:a", config)

    limiter.reset()

    assert len(limiter) == 0
    assert limiter.consume("user:a", config).success is True


def test_concurrent_consumers_never_exceed_limit() -> None:
    limiter = InMemoryFixedWindowRateLimiter()
    config = RateLimitConfig(limit=25, window_seconds=60)
    results: list[bool] = []
    results_lock = threading.Lock()

    def worker() -> None:
        for _ in range(10):
            allowed = limiter.consume("user:shared", config).success
            with results_lock:
                results.append(allowed)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 80
    assert sum(results) == 25


@pytest.mark.parametrize(
    "kwargs",
    [
        {"limit": 0, "window_seconds": 60},
        {"limit": 1, "window_seconds": 0},
    ],
)
def test_invalid_config_args(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        RateLimitConfig(**kwargs)


def test_invalid_constructor_args() -> None:
    with pytest.raises(ValueError):
        InMemoryFixedWindowRateLimiter(cleanup_interval_seconds=-1)


def test_invalid_consume_args(limiter: InMemoryFixedWindowRateLimiter) -> None:
    with pytest.raises(ValueError):
        limiter.consume("", RateLimitConfig(limit=1, window_seconds=60))
