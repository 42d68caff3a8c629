"""Filtering and formatting of a user's exercise log."""

from typing import Any, Dict, List, Optional

from utils.helpers import format_date, parse_date, parse_int_prefix, serialize_user


def filter_log(
    log: List[Dict[str, Any]],
    date_from: Optional[Any] = None,
    date_to: Optional[Any] = None,
    limit: Optional[Any] = None,
) -> List[Dict[str, Any]]:
    """Filter a log by date range, then truncate it.

    Steps run in a fixed order on the result of the previous one: lower date
    bound, upper date bound, limit. A value that doesn't parse skips its step.

    Args:
        log: Exercise entries in stored order
        date_from: Inclusive lower date bound
        date_to: Inclusive upper date bound
        limit: Maximum number of entries, counted from the start of the
            filtered log

    Returns:
        New list with the retained entries, stored order preserved
    """
    entries = list(log or [])

    start = parse_date(date_from) if date_from else None
    if start is not None:
        entries = [entry for entry in entries if entry["date"] >= start]

    end = parse_date(date_to) if date_to else None
    if end is not None:
        entries = [entry for entry in entries if entry["date"] <= end]

    count = parse_int_prefix(limit) if limit else None
    if count is not None:
        entries = entries[:count]

    return entries


def format_log_entry(entry: Dict[str, Any]) -> Dict[str, Any]:
    """Keep only the public fields of an entry and render its date."""
    return {
        "description": entry["description"],
        "duration": entry["duration"],
        "date": format_date(entry["date"]),
    }


def build_log(
    user: Dict[str, Any],
    date_from: Optional[Any] = None,
    date_to: Optional[Any] = None,
    limit: Optional[Any] = None,
) -> Dict[str, Any]:
    """Build the log response of a user."""
    entries = [
        format_log_entry(entry)
        for entry in filter_log(user.get("log") or [], date_from, date_to, limit)
    ]
    return {
        **serialize_user(user),
        "count": len(entries),
        "log": entries,
    }
