"""Tests for log filtering and formatting."""

from datetime import datetime

import pytest

from services.log_query import build_log, filter_log, format_log_entry


def entry(day, description="run", duration=30):
    return {"description": description, "duration": duration, "date": day}


@pytest.fixture
def log():
    return [
        entry(datetime(2023, 1, 1), "a"),
        entry(datetime(2023, 1, 15), "b"),
        entry(datetime(2023, 2, 1), "c"),
    ]


def descriptions(entries):
    return [e["description"] for e in entries]


def test_no_filters_returns_full_log_in_stored_order(log):
    assert filter_log(log) == log
    assert filter_log(log) is not log


def test_date_range(log):
    result = filter_log(log, date_from="2023-01-10", date_to="2023-01-31")
    assert descriptions(result) == ["b"]


def test_bounds_are_inclusive(log):
    result = filter_log(log, date_from="2023-01-01", date_to="2023-01-15")
    assert descriptions(result) == ["a", "b"]


def test_limit_applies_after_date_filters(log):
    result = filter_log(log, date_from="2023-01-10", limit="1")
    assert descriptions(result) == ["b"]


def test_limit_keeps_stored_order_not_date_order():
    log = [entry(datetime(2023, 3, 1), "late"), entry(datetime(2023, 1, 1), "early")]
    assert descriptions(filter_log(log, limit="1")) == ["late"]


def test_limit_larger_than_log(log):
    assert len(filter_log(log, limit="10")) == 3


def test_limit_zero_and_negative(log):
    assert filter_log(log, limit="0") == []
    assert descriptions(filter_log(log, limit="-1")) == ["a", "b"]


def test_unparseable_values_are_ignored(log):
    result = filter_log(log, date_from="soon", date_to="later", limit="many")
    assert result == log


def test_format_log_entry_drops_extra_fields():
    stored = {"description": "swim", "duration": 45, "date": datetime(2023, 1, 15, 9), "_id": "x"}
    assert format_log_entry(stored) == {"description": "swim", "duration": 45, "date": "Sun Jan 15 2023"}


def test_build_log(log):
    user = {"_id": "5f8d0d55b54764421b7156c3", "username": "alice", "log": log}
    result = build_log(user, date_from="2023-01-10")
    assert result == {
        "_id": "5f8d0d55b54764421b7156c3",
        "username": "alice",
        "count": 2,
        "log": [
            {"description": "b", "duration": 30, "date": "Sun Jan 15 2023"},
            {"description": "c", "duration": 30, "date": "Wed Feb 01 2023"},
        ],
    }


def test_build_log_without_entries():
    user = {"_id": "5f8d0d55b54764421b7156c3", "username": "bob", "log": []}
    assert build_log(user)["count"] == 0
