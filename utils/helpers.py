"""Helper utility functions."""

import math
import re
from datetime import date, datetime, timezone
from typing import Any, Dict, Optional

# Leading optional whitespace and sign, then a hex (0x...) or decimal digit run
_INT_PREFIX = re.compile(r"^\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|(\d+))")

# Non-ISO layouts accepted for dates, tried in order
_DATE_FORMATS = (
    "%a %b %d %Y",  # Sun Jan 15 2023
    "%b %d %Y",
    "%B %d %Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%Y/%m/%d",
    "%m/%d/%Y",
)

DATE_STRING_FORMAT = "%a %b %d %Y"


def utc_now() -> datetime:
    """Current UTC time as a naive datetime, the way MongoDB returns dates."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def parse_date(value: Any) -> Optional[datetime]:
    """Parse a date value into a naive UTC datetime.

    Args:
        value: datetime/date object, epoch milliseconds, or a date string in
            ISO format (YYYY-MM-DD, optionally with time and offset) or one of
            the human readable layouts such as "Sun Jan 15 2023"

    Returns:
        The parsed datetime, or None if the value can't be parsed. Bare date
        strings resolve to midnight UTC.
    """
    if isinstance(value, bool) or value is None:
        return None

    if isinstance(value, datetime):
        return _to_naive_utc(value)

    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())

    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            return None
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc).replace(tzinfo=None)
        except (OverflowError, OSError, ValueError):
            return None

    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    try:
        return _to_naive_utc(datetime.fromisoformat(text.replace("Z", "+00:00")))
    except ValueError:
        pass

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue

    return None


def parse_int_prefix(value: Any) -> Optional[int]:
    """Leniently parse an integer.

    Strings are read up to the end of their leading digit run, so "12abc"
    gives 12 and "abc" gives None. A "0x" prefix switches to hexadecimal
    ("0x10" is 16, a bare "0x" is not a number). Floats are truncated
    toward zero. Booleans and None are not numbers.
    """
    if isinstance(value, bool) or value is None:
        return None

    if isinstance(value, int):
        return value

    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)

    if isinstance(value, str):
        match = _INT_PREFIX.match(value)
        if match:
            sign, hex_digits, digits = match.groups()
            if digits is not None:
                return int(sign + digits)
            if hex_digits:
                return int(sign + hex_digits, 16)

    return None


def format_date(value: datetime) -> str:
    """Render a datetime as a calendar-date string, e.g. "Sun Jan 15 2023"."""
    return value.strftime(DATE_STRING_FORMAT)


def serialize_user(user: Dict[str, Any]) -> Dict[str, Any]:
    """Serialize a user document's identity fields."""
    return {
        "_id": str(user["_id"]),
        "username": user["username"],
    }
