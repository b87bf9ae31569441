"""Tagged result type returned by every validator.

A validation either succeeds with a narrowed value (``Valid``) or fails with
a single, field-qualified message (``Invalid``). The two variants are
distinct frozen dataclasses so callers can branch with ``isinstance`` or
``match`` and never see a half-populated result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Literal, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Valid(Generic[T]):
    """Successful validation carrying the checked value."""

    data: T

    @property
    def success(self) -> Literal[True]:
        return True


@dataclass(frozen=True)
class Invalid:
    """Failed validation carrying a human-readable error message."""

    error: str

    @property
    def success(self) -> Literal[False]:
        return False


ValidationResult = Union[Valid[T], Invalid]
