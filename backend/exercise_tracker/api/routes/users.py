"""Users Routes: user registry, exercise logging and exercise log queries.

Invariants:
    - `_id` path segment is passed through as text; the service decides 404
    - `from`/`to`/`limit` reach the service unparsed so invalid values get
      the tracker's own 400 messages
    - Routes never touch the database directly (ExerciseLogService only)

Design Decisions:
    - 200 (not 201) on creation: existing form clients expect 200
"""

import logging

from fastapi import APIRouter, Depends, Query

from exercise_tracker.api.dependencies import (
    exercise_payload, get_service, user_payload,
)
from exercise_tracker.schemas.exercise import (
    ExerciseCreate, ExerciseLogResponse, ExerciseResponse,
)
from exercise_tracker.schemas.user import UserCreate, UserResponse
from exercise_tracker.services.exercise_log_service import ExerciseLogService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserResponse)
async def create_user(
    body: UserCreate = Depends(user_payload),
    service: ExerciseLogService = Depends(get_service),
):
    """Create a user with a unique username."""
    return await service.create_user(body.username)


@router.get("", response_model=list[UserResponse])
async def list_users(service: ExerciseLogService = Depends(get_service)):
    """List all users as {username, _id}."""
    return await service.list_users()


@router.post("/{user_id}/exercises", response_model=ExerciseResponse)
async def add_exercise(
    user_id: str,
    body: ExerciseCreate = Depends(exercise_payload),
    service: ExerciseLogService = Depends(get_service),
):
    """Append an exercise to a user's log."""
    return await service.add_exercise(user_id, body)


@router.get(
    "/{user_id}/logs",
    response_model=ExerciseLogResponse,
    response_model_exclude_none=True,
)
async def get_logs(
    user_id: str,
    from_: str | None = Query(None, alias="from"),
    to: str | None = Query(None),
    limit: str | None = Query(None),
    service: ExerciseLogService = Depends(get_service),
):
    """Get a user's exercise log, optionally bounded by date and limit."""
    return await service.get_log(user_id, from_, to, limit)
