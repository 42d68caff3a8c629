"""Input validation for users and exercises.

Every validator is a pure function over its input: it returns the normalized
value or raises ``InvalidInputError`` before anything reaches the store.
"""

import math
import re
from datetime import datetime
from typing import Any, Callable

from utils.exceptions import InvalidInputError
from utils.helpers import parse_date, parse_int_prefix, utc_now

Clock = Callable[[], datetime]

_OBJECT_ID = re.compile(r"^[0-9a-fA-F]{24}$")

# Largest integer BSON can store
MAX_DURATION = 2 ** 63 - 1


def _require_text(value: Any, message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidInputError(message)
    return value.strip()


def validate_username(value: Any) -> str:
    """Return the trimmed username."""
    return _require_text(value, "Username is required")


def validate_user_id(value: Any) -> str:
    """Check that a user id is a 24 character hex token."""
    if not isinstance(value, str) or not _OBJECT_ID.match(value):
        raise InvalidInputError("Invalid user ID")
    return value


def validate_description(value: Any) -> str:
    """Return the trimmed description."""
    return _require_text(value, "Description is required")


def validate_duration(value: Any) -> int:
    """Parse a duration in minutes.

    Parsing is lenient: a string counts as its leading integer, so "30min"
    is 30. The result has to be a positive number that fits a 64-bit
    integer.
    """
    duration = parse_int_prefix(value)
    if duration is None or not 0 < duration <= MAX_DURATION:
        raise InvalidInputError("Duration must be a positive number")
    return duration


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, (str, int, float)) and not value


def validate_date(value: Any, clock: Clock = utc_now) -> datetime:
    """Parse an exercise date, falling back to ``clock()`` when absent.

    Args:
        value: date value from the request; None, "", False, 0 and NaN
            mean "now"
        clock: callable returning the current time

    Returns:
        Naive UTC datetime
    """
    if _is_blank(value):
        return clock()

    parsed = parse_date(value)
    if parsed is None:
        raise InvalidInputError("Invalid date format")
    return parsed
