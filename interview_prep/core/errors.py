"""Domain errors raised by services and adapters.

Each error class carries the HTTP status it maps to, so the global handler in
``exception_handlers`` can render any of them without knowing the subclass.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, NotRequired, TypedDict


class ErrorDetails(TypedDict, total=False):
    """Optional structured context returned under ``error.details``."""

    hint: str
    field: str
    resource: str
    resource_id: str
    model: str
    context: NotRequired[dict[str, Any]]


@dataclass
class AppError(Exception):
    """Base error for application failures.

    Attributes:
        code: Stable, machine-readable error code (e.g. ``invalid_request``).
        message: Message shown to the client as-is.
        details: Optional structured details.
    """

    status_code: ClassVar[int] = 400

    code: str
    message: str
    details: ErrorDetails | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message)


class ValidationAppError(AppError):
    """Request payload, query or configuration failed validation."""


class AuthenticationAppError(AppError):
    """Caller presented missing or unknown credentials."""

    status_code = 403


class NotFoundAppError(AppError):
    """A referenced question (or other record) does not exist."""

    status_code = 404


class LLMAppError(AppError):
    """The scoring model failed or returned output that could not be used."""

    status_code = 500
