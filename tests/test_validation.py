"""Tests for input validation."""

from datetime import datetime

import pytest

from services.validation import (
    validate_date,
    validate_description,
    validate_duration,
    validate_user_id,
    validate_username,
)
from utils.exceptions import InvalidInputError


# --- username / description ---

def test_username_is_trimmed():
    assert validate_username("  alice ") == "alice"


@pytest.mark.parametrize("value", ["", "   ", "\t\n", None, 42, ["alice"]])
def test_username_rejects_blank_or_non_string(value):
    with pytest.raises(InvalidInputError, match="Username is required"):
        validate_username(value)


def test_description_is_trimmed():
    assert validate_description(" run ") == "run"


@pytest.mark.parametrize("value", ["", "  ", None, 3.5])
def test_description_rejects_blank_or_non_string(value):
    with pytest.raises(InvalidInputError, match="Description is required"):
        validate_description(value)


# --- user id ---

def test_user_id_accepts_24_hex_chars():
    assert validate_user_id("5f8D0d55b54764421b7156c3") == "5f8D0d55b54764421b7156c3"


@pytest.mark.parametrize("value", ["bad-id", "", "5f8d0d55b54764421b7156c", "zf8d0d55b54764421b7156c3", None, 123])
def test_user_id_rejects_other_values(value):
    with pytest.raises(InvalidInputError, match="Invalid user ID"):
        validate_user_id(value)


# --- duration ---

@pytest.mark.parametrize("value", [1, 30, 1000])
def test_duration_accepts_positive_integers(value):
    assert validate_duration(value) == value


@pytest.mark.parametrize("value,expected", [("45", 45), (" 20", 20), ("30min", 30), ("12.9", 12), (15.7, 15), ("+5", 5)])
def test_duration_parses_leading_integer(value, expected):
    assert validate_duration(value) == expected


@pytest.mark.parametrize("value,expected", [("0x10", 16), ("0XfF", 255), (" 0x1e min", 30), ("012", 12)])
def test_duration_reads_hex_prefix(value, expected):
    assert validate_duration(value) == expected


def test_duration_accepts_largest_64_bit_integer():
    assert validate_duration(str(2 ** 63 - 1)) == 2 ** 63 - 1


@pytest.mark.parametrize("value", ["99999999999999999999", 2 ** 63, 1e30])
def test_duration_rejects_values_beyond_64_bits(value):
    with pytest.raises(InvalidInputError, match="Duration must be a positive number"):
        validate_duration(value)


@pytest.mark.parametrize("value", [0, -5, "0", "-3", "abc", "", "min30", None, True, [], float("nan"), "0x", "0xg", "-0x10"])
def test_duration_rejects_non_positive_or_non_numeric(value):
    with pytest.raises(InvalidInputError, match="Duration must be a positive number"):
        validate_duration(value)


# --- date ---

def test_missing_date_uses_clock():
    now = datetime(2024, 1, 2, 3, 4, 5)
    assert validate_date(None, clock=lambda: now) == now
    assert validate_date("", clock=lambda: now) == now


@pytest.mark.parametrize("value", [0, 0.0, False, float("nan")])
def test_falsy_date_values_use_clock(value):
    now = datetime(2024, 1, 2, 3, 4, 5)
    assert validate_date(value, clock=lambda: now) == now


def test_bare_date_string_is_midnight():
    assert validate_date("2023-01-15") == datetime(2023, 1, 15)


def test_offset_dates_are_normalized_to_utc():
    assert validate_date("2023-01-15T10:00:00+02:00") == datetime(2023, 1, 15, 8)
    assert validate_date("2023-01-15T10:00:00Z") == datetime(2023, 1, 15, 10)


def test_readable_date_string():
    assert validate_date("Sun Jan 15 2023") == datetime(2023, 1, 15)
    assert validate_date("January 15, 2023") == datetime(2023, 1, 15)


@pytest.mark.parametrize("value", ["not a date", "2023-13-45", "tomorrow"])
def test_unparseable_date_is_rejected(value):
    with pytest.raises(InvalidInputError, match="Invalid date format"):
        validate_date(value)
