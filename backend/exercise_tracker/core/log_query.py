"""Log Query Engine: filters, truncates and shapes a user's exercise log.

Invariants:
    - select_entries is PURE and order-preserving (input order = append order)
    - from/to bounds are inclusive and compared at day granularity (logical AND)
    - limit is prefix truncation applied AFTER filtering; limit=0 -> empty
    - count in the shaped log always equals len(log)
    - Unparseable from/to/limit are rejected (INVALID_DATE_RANGE / INVALID_LIMIT),
      never silently treated as absent

Design Decisions:
    - Filtering in memory over the already-loaded exercise collection: a user's
      log is small and the store returns it in one round trip
    - from > to is not an error: the intersection is simply empty
"""

from collections.abc import Sequence
from typing import TypeVar

from exercise_tracker.core.coerce import is_blank, parse_leading_int
from exercise_tracker.core.dates import format_day_string, parse_calendar_date
from exercise_tracker.core.domain_types import (
    LogQuery, LogQueryResult, ValidationCode, ValidationFailure,
)
from exercise_tracker.core.repository_protocols import ExerciseLike, UserLike

E = TypeVar("E", bound=ExerciseLike)

INVALID_LIMIT_MESSAGE = "Limit must be a non-negative integer"


def parse_log_query(
    from_raw: str | None, to_raw: str | None, limit_raw: str | None,
) -> LogQueryResult:
    """Parse raw query-string values into a LogQuery. Blank values are absent."""
    bounds = {}
    for name, raw in (("from", from_raw), ("to", to_raw)):
        if is_blank(raw):
            bounds[name] = None
            continue
        parsed = parse_calendar_date(raw)
        if parsed is None:
            return ValidationFailure(
                ValidationCode.INVALID_DATE_RANGE,
                f"Invalid date in '{name}'", name,
            )
        bounds[name] = parsed

    limit = None
    if not is_blank(limit_raw):
        limit = parse_leading_int(limit_raw)
        if limit is None or limit < 0:
            return ValidationFailure(
                ValidationCode.INVALID_LIMIT, INVALID_LIMIT_MESSAGE, "limit",
            )

    return LogQuery(from_date=bounds["from"], to_date=bounds["to"], limit=limit)


def select_entries(entries: Sequence[E], query: LogQuery) -> list[E]:
    """Apply date bounds then prefix-truncate. Pure, order-preserving."""
    selected = [
        entry for entry in entries
        if (query.from_date is None or entry.date >= query.from_date)
        and (query.to_date is None or entry.date <= query.to_date)
    ]
    if query.limit is not None:
        selected = selected[:query.limit]
    return selected


def shape_entry(entry: ExerciseLike) -> dict:
    return {
        "description": entry.description,
        "duration": entry.duration,
        "date": format_day_string(entry.date),
    }


def build_log(user: UserLike, query: LogQuery) -> dict:
    """Build the full log payload for one user."""
    log = [shape_entry(e) for e in select_entries(user.exercises, query)]
    result = {
        "username": user.username,
        "count": len(log),
        "_id": str(user.id),
        "log": log,
    }
    if query.from_date is not None:
        result["from"] = format_day_string(query.from_date)
    if query.to_date is not None:
        result["to"] = format_day_string(query.to_date)
    return result
