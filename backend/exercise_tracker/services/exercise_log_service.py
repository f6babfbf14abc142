"""Exercise Log Service: user, exercise and log operations over a UserStore.

Invariants:
    - Input is validated BEFORE the store is touched (400 wins over 404)
    - Malformed and unknown user ids are indistinguishable: both -> UserNotFoundError
    - StoreError messages name the endpoint operation ("Failed to fetch logs")
    - `today` is injected so exercise date defaults are testable

Design Decisions:
    - Impureim sandwich: read via store -> pure core (normalize/build_log) -> write via store
    - Store failures re-raised with an endpoint-level message; the original
      operation stays in details for debugging
"""

import logging
from collections.abc import Callable
from contextlib import contextmanager
from datetime import date
from typing import Iterator
from uuid import UUID

from exercise_tracker.core.coerce import is_blank
from exercise_tracker.core.dates import format_day_string
from exercise_tracker.core.domain_types import (
    UserId, ValidationCode, ValidationFailure,
)
from exercise_tracker.core.errors import (
    ExerciseValidationError, StoreError, UserNotFoundError,
)
from exercise_tracker.core.log_query import build_log, parse_log_query
from exercise_tracker.core.normalize_exercise import normalize_exercise
from exercise_tracker.core.repository_protocols import UserLike, UserStore
from exercise_tracker.schemas.exercise import (
    ExerciseCreate, ExerciseLogResponse, ExerciseResponse,
)
from exercise_tracker.schemas.user import UserResponse

logger = logging.getLogger(__name__)

USERNAME_REQUIRED_MESSAGE = "Username is required"


@contextmanager
def _reported_as(message: str) -> Iterator[None]:
    """Re-raise StoreError with an endpoint-level message."""
    try:
        yield
    except StoreError as e:
        raise StoreError(message, e.operation, e.context) from e


def _parse_user_id(raw: str) -> UserId:
    try:
        return UserId(UUID(raw))
    except ValueError:
        raise UserNotFoundError(raw) from None


def _user_response(user: UserLike) -> UserResponse:
    return UserResponse(username=user.username, id=str(user.id))


class ExerciseLogService:
    """Thin orchestration for the users, exercises and logs endpoints."""

    def __init__(
        self, store: UserStore, today: Callable[[], date] = date.today,
    ):
        self._store = store
        self._today = today

    async def create_user(self, username: str | None) -> UserResponse:
        if is_blank(username):
            raise ExerciseValidationError.from_failure(ValidationFailure(
                ValidationCode.MISSING_USERNAME,
                USERNAME_REQUIRED_MESSAGE, "username",
            ))
        with _reported_as("Failed to save user"):
            user = await self._store.create_user(username.strip())
        logger.info(f"User created: {user.username}", extra={"user_id": str(user.id)})
        return _user_response(user)

    async def list_users(self) -> list[UserResponse]:
        with _reported_as("Failed to fetch users"):
            users = await self._store.list_users()
        return [_user_response(u) for u in users]

    async def add_exercise(
        self, raw_user_id: str, body: ExerciseCreate,
    ) -> ExerciseResponse:
        result = normalize_exercise(
            body.description, body.duration, body.date, self._today(),
        )
        if isinstance(result, ValidationFailure):
            raise ExerciseValidationError.from_failure(result)

        user_id = _parse_user_id(raw_user_id)
        with _reported_as("Failed to add exercise"):
            user = await self._store.find_user_by_id(user_id)
            if user is None:
                raise UserNotFoundError(raw_user_id)
            exercise = await self._store.append_exercise(user, result)

        return ExerciseResponse(
            username=user.username,
            description=exercise.description,
            duration=exercise.duration,
            date=format_day_string(exercise.date),
            id=str(user.id),
        )

    async def get_log(
        self,
        raw_user_id: str,
        from_raw: str | None = None,
        to_raw: str | None = None,
        limit_raw: str | None = None,
    ) -> ExerciseLogResponse:
        query = parse_log_query(from_raw, to_raw, limit_raw)
        if isinstance(query, ValidationFailure):
            raise ExerciseValidationError.from_failure(query)

        user_id = _parse_user_id(raw_user_id)
        with _reported_as("Failed to fetch logs"):
            user = await self._store.find_user_by_id(user_id)
        if user is None:
            raise UserNotFoundError(raw_user_id)

        return ExerciseLogResponse.model_validate(build_log(user, query))
