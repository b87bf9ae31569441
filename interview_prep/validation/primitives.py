"""Primitive validators for untyped request payload values.

Each function inspects a single value decoded from JSON and returns a
``ValidationResult``. Validators never raise: every failure path returns an
``Invalid`` whose message names the offending field, so route handlers can
surface it to the client verbatim.
"""

from __future__ import annotations

import math
import re
from typing import Any, Callable, Sequence, TypeVar

from interview_prep.validation.result import Invalid, Valid, ValidationResult

T = TypeVar("T")

ItemValidator = Callable[[Any, int], ValidationResult[T]]

_UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

# Plain decimal notation with an optional exponent; rejects "inf", "nan"
# and digit separators that float() would otherwise accept.
_DECIMAL_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")


def _format_bound(bound: float) -> str:
    """Render a numeric bound without a trailing ``.0`` for whole numbers."""
    if isinstance(bound, float) and bound.is_integer():
        return str(int(bound))
    return str(bound)


def validate_string(
    value: Any,
    field_name: str,
    *,
    min_length: int | None = None,
    max_length: int | None = None,
) -> ValidationResult[str]:
    """Validate that a value is a non-empty string within length bounds.

    Whitespace is trimmed before any check, and an empty result is rejected
    regardless of ``min_length``.

    Args:
        value: Raw value from the request payload.
        field_name: Name (or path) used in error messages.
        min_length: Optional minimum length of the trimmed string.
        max_length: Optional maximum length of the trimmed string.

    Returns:
        ``Valid`` with the trimmed string, or ``Invalid`` with the reason.

    Examples:
        >>> validate_string("  hello ", "title")
        Valid(data='hello')
        >>> validate_string("   ", "title")
        Invalid(error='title cannot be empty')
    """
    if not isinstance(value, str):
        return Invalid(f"{field_name} must be a string")

    trimmed = value.strip()

    if not trimmed:
        return Invalid(f"{field_name} cannot be empty")

    if min_length and len(trimmed) < min_length:
        return Invalid(f"{field_name} must be at least {min_length} characters")

    if max_length and len(trimmed) > max_length:
        return Invalid(f"{field_name} must be at most {max_length} characters")

    return Valid(trimmed)


def validate_uuid(value: Any, field_name: str) -> ValidationResult[str]:
    """Validate a canonical 8-4-4-4-12 hexadecimal UUID (any letter case).

    Args:
        value: Raw value from the request payload.
        field_name: Name used in error messages.

    Returns:
        ``Valid`` with the trimmed UUID string, or ``Invalid``.
    """
    result = validate_string(value, field_name)
    if isinstance(result, Invalid):
        return result

    if not _UUID_PATTERN.match(result.data):
        return Invalid(f"{field_name} must be a valid UUID")

    return result


def validate_enum(
    value: Any,
    field_name: str,
    allowed: Sequence[str],
) -> ValidationResult[str]:
    """Validate that a value is exactly one of ``allowed``.

    Args:
        value: Raw value from the request payload.
        field_name: Name used in error messages.
        allowed: Ordered collection of accepted literals.

    Returns:
        ``Valid`` with the matched literal, or ``Invalid`` listing every
        allowed value.
    """
    result = validate_string(value, field_name)
    if isinstance(result, Invalid):
        return result

    if result.data not in allowed:
        return Invalid(f"{field_name} must be one of: {', '.join(allowed)}")

    return result


def validate_number(
    value: Any,
    field_name: str,
    *,
    min_value: float | None = None,
    max_value: float | None = None,
) -> ValidationResult[float]:
    """Validate a number, accepting decimal strings such as ``"42"`` or ``"3.5"``.

    Booleans are rejected even though ``bool`` subclasses ``int`` in Python.
    NaN and infinities are rejected in both numeric and string form.

    Args:
        value: Raw value from the request payload.
        field_name: Name used in error messages.
        min_value: Optional inclusive lower bound.
        max_value: Optional inclusive upper bound.

    Returns:
        ``Valid`` with the numeric value, or ``Invalid``.
    """
    number: float | None = None

    if isinstance(value, str):
        text = value.strip()
        if _DECIMAL_PATTERN.match(text):
            number = float(text)
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        number = value

    if number is None or (isinstance(number, float) and not math.isfinite(number)):
        return Invalid(f"{field_name} must be a number")

    if min_value is not None and number < min_value:
        return Invalid(f"{field_name} must be at least {_format_bound(min_value)}")

    if max_value is not None and number > max_value:
        return Invalid(f"{field_name} must be at most {_format_bound(max_value)}")

    return Valid(number)


def validate_array(
    value: Any,
    field_name: str,
    item_validator: ItemValidator[T],
    *,
    min_length: int | None = None,
    max_length: int | None = None,
) -> ValidationResult[list[T]]:
    """Validate a list and every item in it, stopping at the first bad item.

    Args:
        value: Raw value from the request payload.
        field_name: Name used in error messages.
        item_validator: Called as ``item_validator(item, index)`` for each
            element, in order.
        min_length: Optional minimum number of items.
        max_length: Optional maximum number of items.

    Returns:
        ``Valid`` with the list of validated items, or ``Invalid`` whose
        message is prefixed with ``field_name[index]: `` for item failures.
    """
    if not isinstance(value, (list, tuple)):
        return Invalid(f"{field_name} must be an array")

    if min_length is not None and len(value) < min_length:
        return Invalid(f"{field_name} must have at least {min_length} items")

    if max_length is not None and len(value) > max_length:
        return Invalid(f"{field_name} must have at most {max_length} items")

    items: list[T] = []
    for index, item in enumerate(value):
        result = item_validator(item, index)
        if isinstance(result, Invalid):
            return Invalid(f"{field_name}[{index}]: {result.error}")
        items.append(result.data)

    return Valid(items)


def string_items(field_name: str, *, max_length: int) -> ItemValidator[str]:
    """Build an item validator for arrays of bounded strings.

    The item's own messages use ``field_name[index]`` as the field name.
    """

    def _validate(item: Any, index: int) -> ValidationResult[str]:
        return validate_string(item, f"{field_name}[{index}]", max_length=max_length)

    return _validate
