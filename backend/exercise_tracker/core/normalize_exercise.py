"""Exercise Normalization: validates a raw exercise payload into an ExerciseDraft.

Invariants:
    - normalize_exercise is PURE: `today` is injected, nothing is persisted
    - Missing/blank description or duration -> MISSING_FIELDS (checked first)
    - duration is truncated to its leading integer and must be in 1..MAX_DURATION
    - MAX_DURATION is the largest value the 32-bit Integer column stores
    - date defaults to `today` only when absent or blank; unparseable -> INVALID_DATE

Design Decisions:
    - Returns ValidationFailure instead of raising: the service maps it to a
      400 response, tests assert on codes without pytest.raises
"""

from datetime import date

from exercise_tracker.core.coerce import is_blank, parse_leading_int
from exercise_tracker.core.dates import parse_calendar_date
from exercise_tracker.core.domain_types import (
    ExerciseDraft, ExerciseResult, ValidationCode, ValidationFailure,
)

MISSING_FIELDS_MESSAGE = "Description and duration are required"
NOT_AN_INTEGER_MESSAGE = "Duration must be an integer"
NOT_POSITIVE_MESSAGE = "Duration must be a positive integer"
INVALID_DATE_MESSAGE = "Invalid date"

MAX_DURATION = 2_147_483_647
TOO_LARGE_MESSAGE = f"Duration must be at most {MAX_DURATION} minutes"


def normalize_exercise(
    description: str | None,
    duration: str | int | float | None,
    raw_date: str | None,
    today: date,
) -> ExerciseResult:
    """Validate and normalize one exercise. Pure: returns draft or failure."""
    if is_blank(description) or is_blank(duration):
        return ValidationFailure(
            ValidationCode.MISSING_FIELDS, MISSING_FIELDS_MESSAGE,
        )

    minutes = parse_leading_int(duration)
    if minutes is None:
        return ValidationFailure(
            ValidationCode.INVALID_DURATION, NOT_AN_INTEGER_MESSAGE, "duration",
        )
    if minutes < 1:
        return ValidationFailure(
            ValidationCode.INVALID_DURATION, NOT_POSITIVE_MESSAGE, "duration",
        )
    if minutes > MAX_DURATION:
        return ValidationFailure(
            ValidationCode.INVALID_DURATION, TOO_LARGE_MESSAGE, "duration",
        )

    if is_blank(raw_date):
        when = today
    else:
        when = parse_calendar_date(raw_date)
        if when is None:
            return ValidationFailure(
                ValidationCode.INVALID_DATE, INVALID_DATE_MESSAGE, "date",
            )

    return ExerciseDraft(
        description=description.strip(), duration=minutes, date=when,
    )
