"""Domain Types: identity, value and result types shared by core and shell.

Invariants:
    - UserId wraps UUID: never use bare UUID in domain logic
    - ValidationCode enumerates every way user input can be rejected
    - ExerciseDraft is always normalized: non-empty description, positive int duration
    - LogQuery bounds are inclusive calendar dates; limit is None or >= 0

Design Decisions:
    - NewType over dataclass wrappers for ids: zero runtime cost, full type-checker support
    - Frozen dataclasses for results: pure functions hand back immutable values
    - Tagged unions (X | ValidationFailure) over raising in core: the shell decides
      how a failure becomes an HTTP response
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import NewType, TypeAlias
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class ValidationCode(str, Enum):
    """Enumerated reasons a request payload is rejected."""
    MISSING_USERNAME = "MISSING_USERNAME"
    MISSING_FIELDS = "MISSING_FIELDS"
    INVALID_DURATION = "INVALID_DURATION"
    INVALID_DATE = "INVALID_DATE"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"
    INVALID_LIMIT = "INVALID_LIMIT"


# ─── Result Types ────────────────────────────────────────────────

@dataclass(frozen=True)
class ValidationFailure:
    """Rejected input: an enumerated code plus the user-facing message."""
    code: ValidationCode
    message: str
    field: str | None = None


@dataclass(frozen=True)
class ExerciseDraft:
    """A validated exercise ready to be appended to a user."""
    description: str
    duration: int
    date: date


@dataclass(frozen=True)
class LogQuery:
    """Parsed log filters. None means the constraint is absent."""
    from_date: date | None = None
    to_date: date | None = None
    limit: int | None = None


ExerciseResult: TypeAlias = ExerciseDraft | ValidationFailure
LogQueryResult: TypeAlias = LogQuery | ValidationFailure
