"""Tests for sensitive data filtering in logs."""

from __future__ import annotations

import json
import logging
from io import StringIO

import pytest

from interview_prep.core.logging import (
    JsonFormatter,
    RequestIdFilter,
    SensitiveDataFilter,
    clear_request_id,
    set_request_id,
)


@pytest.fixture
def capture():
    """Return a logger wired like production plus the stream it writes to."""

    logger = logging.getLogger("test_redaction")
    logger.setLevel(logging.INFO)
    logger.handlers.clear()
    logger.propagate = False

    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.addFilter(RequestIdFilter())
    handler.addFilter(SensitiveDataFilter())
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)

    yield logger, stream

    logger.handlers.clear()
    clear_request_id()


def test_sensitive_filter_redacts_api_keys(capture):
    logger, stream = capture

    logger.info(
        "test_event",
        extra={
            "api_key": "sk-secret-123",
            "x-api-key": "another-secret",
            "safe_field": "visible",
        },
    )

    output = stream.getvalue()

    assert "sk-secret-123" not in output
    assert "another-secret" not in output
    assert "[REDACTED]" in output
    assert "visible" in output


def test_sensitive_filter_redacts_candidate_answers(capture):
    """Ensure answer text and code written by candidates never reach logs."""
    logger, stream = capture

    logger.info(
        "response_event",
        extra={
            "response_text": "React uses a virtual DOM to batch updates",
            "response_code": "def solve(): return 42",
            "time_spent_seconds": 120,
        },
    )

    output = stream.getvalue()

    assert "virtual DOM" not in output
    assert "def solve" not in output
    assert "[REDACTED]" in output
    assert "time_spent_seconds" in output


def test_sensitive_filter_allows_safe_fields(capture):
    logger, stream = capture

    logger.info(
        "safe_event",
        extra={
            "request_id": "req-123",
            "route": "/v1/questions",
            "status": 200,
            "duration_ms": 150.5,
        },
    )

    output = stream.getvalue()

    assert "req-123" in output
    assert "/v1/questions" in output
    assert "200" in output
    assert "[REDACTED]" not in output


def test_sensitive_filter_redacts_nested_dicts(capture):
    logger, stream = capture

    logger.info(
        "nested_event",
        extra={
            "headers": {
                "x-api-key": "secret-key",
                "user-agent": "pytest",
            },
            "safe_data": {
                "count": 5,
                "type": "test",
            },
        },
    )

    output = stream.getvalue()

    assert "secret-key" not in output
    assert "[REDACTED]" in output
    assert "pytest" in output


def test_json_formatter_emits_single_json_line(capture):
    logger, stream = capture

    set_request_id("req-abc")
    logger.warning("rate_limit.exceeded", extra={"operation": "evaluate", "remaining": 0})

    payload = json.loads(stream.getvalue().strip())

    assert payload["message"] == "rate_limit.exceeded"
    assert payload["level"] == "warning"
    assert payload["logger"] == "test_redaction"
    assert payload["request_id"] == "req-abc"
    assert payload["operation"] == "evaluate"
    assert payload["remaining"] == 0
