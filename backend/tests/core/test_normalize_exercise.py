"""Exercise Normalization: tests for the pure exercise validator.

Tests cover:
    - missing/blank description or duration -> MISSING_FIELDS with the public message
    - duration truncation to its leading integer, rejection of non-integers, < 1 and values past the column range
    - date defaulting to `today`, parsing, and INVALID_DATE on garbage
"""

from datetime import date

import pytest

from exercise_tracker.core.domain_types import (
    ExerciseDraft, ValidationCode, ValidationFailure,
)
from exercise_tracker.core.normalize_exercise import (
    MAX_DURATION, MISSING_FIELDS_MESSAGE, TOO_LARGE_MESSAGE, normalize_exercise,
)

TODAY = date(2024, 1, 2)


# ─── Required fields ─────────────────────────────────────────────

@pytest.mark.parametrize("description, duration", [
    (None, "30"),
    ("", "30"),
    ("   ", "30"),
    ("run", None),
    ("run", ""),
    (None, None),
])
def test_missing_fields(description, duration):
    result = normalize_exercise(description, duration, None, TODAY)
    assert isinstance(result, ValidationFailure)
    assert result.code == ValidationCode.MISSING_FIELDS
    assert result.message == "Description and duration are required"
    assert result.message == MISSING_FIELDS_MESSAGE


def test_missing_fields_checked_before_bad_date():
    result = normalize_exercise("", "30", "garbage", TODAY)
    assert result.code == ValidationCode.MISSING_FIELDS


# ─── Duration ────────────────────────────────────────────────────

@pytest.mark.parametrize("duration, expected", [
    ("30", 30), ("3.9", 3), ("45min", 45), (30, 30), (12.99, 12),
])
def test_duration_is_truncated_to_int(duration, expected):
    result = normalize_exercise("run", duration, None, TODAY)
    assert isinstance(result, ExerciseDraft)
    assert result.duration == expected
    assert isinstance(result.duration, int)


def test_non_integer_duration_rejected():
    result = normalize_exercise("run", "thirty", None, TODAY)
    assert isinstance(result, ValidationFailure)
    assert result.code == ValidationCode.INVALID_DURATION
    assert result.field == "duration"


@pytest.mark.parametrize("duration", ["0", "-10", 0, -1.5])
def test_non_positive_duration_rejected(duration):
    result = normalize_exercise("run", duration, None, TODAY)
    assert isinstance(result, ValidationFailure)
    assert result.code == ValidationCode.INVALID_DURATION


@pytest.mark.parametrize("duration", [
    "99999999999999999999", str(MAX_DURATION + 1), float(MAX_DURATION + 1),
])
def test_duration_above_column_range_rejected(duration):
    result = normalize_exercise("run", duration, None, TODAY)
    assert isinstance(result, ValidationFailure)
    assert result.code == ValidationCode.INVALID_DURATION
    assert result.message == TOO_LARGE_MESSAGE
    assert result.field == "duration"


def test_max_duration_accepted():
    result = normalize_exercise("run", str(MAX_DURATION), None, TODAY)
    assert isinstance(result, ExerciseDraft)
    assert result.duration == MAX_DURATION


# ─── Date ────────────────────────────────────────────────────────

@pytest.mark.parametrize("raw_date", [None, "", "  "])
def test_date_defaults_to_today(raw_date):
    result = normalize_exercise("run", "30", raw_date, TODAY)
    assert result == ExerciseDraft(description="run", duration=30, date=TODAY)


def test_date_is_parsed():
    result = normalize_exercise("run", "30", "1990-01-01", TODAY)
    assert result.date == date(1990, 1, 1)


def test_datetime_keeps_calendar_day():
    result = normalize_exercise("run", "30", "2024-03-05T23:30:00", TODAY)
    assert result.date == date(2024, 3, 5)


def test_unparseable_date_rejected():
    result = normalize_exercise("run", "30", "yesterday", TODAY)
    assert isinstance(result, ValidationFailure)
    assert result.code == ValidationCode.INVALID_DATE
    assert result.field == "date"


def test_description_is_stripped():
    result = normalize_exercise("  pushups ", "10", None, TODAY)
    assert result.description == "pushups"
