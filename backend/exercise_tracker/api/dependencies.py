"""Request Dependencies: store/service wiring and body parsing.

Invariants:
    - One SqlUserStore and one ExerciseLogService per request
    - Bodies accepted as urlencoded form, multipart form, or JSON object
    - Schema violations surface as RequestValidationError (400), never 500

Design Decisions:
    - Manual content-type dispatch over Form()/Body() parameters: the same
      endpoint serves HTML forms and JSON clients with one input schema
"""

from typing import TypeVar

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.core.errors import ExerciseValidationError
from exercise_tracker.infrastructure.database import get_db
from exercise_tracker.infrastructure.user_repository import SqlUserStore
from exercise_tracker.schemas.exercise import ExerciseCreate
from exercise_tracker.schemas.user import UserCreate
from exercise_tracker.services.exercise_log_service import ExerciseLogService

SchemaT = TypeVar("SchemaT", bound=BaseModel)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_user_store(db: AsyncSession = Depends(get_db)) -> SqlUserStore:
    return SqlUserStore(db)


def get_service(
    store: SqlUserStore = Depends(get_user_store),
) -> ExerciseLogService:
    return ExerciseLogService(store)


async def read_payload(request: Request) -> dict:
    """Read a form or JSON body into a plain dict. Empty body -> {}."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            data = await request.json()
        except ValueError:
            raise ExerciseValidationError(
                "Malformed JSON body", "MALFORMED_BODY",
            ) from None
        if not isinstance(data, dict):
            raise ExerciseValidationError(
                "Request body must be a JSON object", "MALFORMED_BODY",
            )
        return data
    if content_type.startswith(FORM_CONTENT_TYPES):
        form = await request.form()
        return {k: v for k, v in form.items() if isinstance(v, str)}
    return {}


def _validate(schema: type[SchemaT], payload: dict) -> SchemaT:
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        raise RequestValidationError(e.errors()) from e


async def user_payload(payload: dict = Depends(read_payload)) -> UserCreate:
    return _validate(UserCreate, payload)


async def exercise_payload(
    payload: dict = Depends(read_payload),
) -> ExerciseCreate:
    return _validate(ExerciseCreate, payload)
