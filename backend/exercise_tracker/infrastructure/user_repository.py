"""SQL User Store: SQLAlchemy implementation of the UserStore protocol.

Invariants:
    - Unique-constraint violation on create -> DuplicateUsernameError
    - Any other SQLAlchemy failure -> StoreError naming the operation
    - Every failed write rolls the session back before raising
    - Exercises are appended, never reordered

Design Decisions:
    - One repository per request session: FastAPI dependency wires it up
    - list_users does not load exercises (raiseload): listing is {username, _id} only
    - append_exercise inserts through the user_id FK instead of the relationship
      collection, so an unloaded collection is never lazy-loaded under asyncio
"""

import logging
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import raiseload

from exercise_tracker.core.domain_types import ExerciseDraft, UserId
from exercise_tracker.core.errors import DuplicateUsernameError, StoreError
from exercise_tracker.models.exercise import Exercise
from exercise_tracker.models.user import User

logger = logging.getLogger(__name__)


class SqlUserStore:
    """UserStore backed by an AsyncSession."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create_user(self, username: str) -> User:
        user = User(username=username)
        self._session.add(user)
        try:
            await self._session.commit()
        except IntegrityError as e:
            await self._session.rollback()
            logger.warning(f"Duplicate username rejected: {username!r}")
            raise DuplicateUsernameError(username) from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            raise self._store_error("create_user", e)
        return user

    async def list_users(self) -> Sequence[User]:
        try:
            result = await self._session.execute(
                select(User)
                .options(raiseload(User.exercises))
                .order_by(User.created_at, User.username),
            )
        except SQLAlchemyError as e:
            await self._session.rollback()
            raise self._store_error("list_users", e)
        return result.scalars().all()

    async def find_user_by_id(self, user_id: UserId) -> User | None:
        try:
            result = await self._session.execute(
                select(User).where(User.id == user_id),
            )
        except SQLAlchemyError as e:
            await self._session.rollback()
            raise self._store_error("find_user_by_id", e)
        return result.scalar_one_or_none()

    async def append_exercise(self, user: User, draft: ExerciseDraft) -> Exercise:
        exercise = Exercise(
            user_id=user.id,
            description=draft.description,
            duration=draft.duration,
            date=draft.date,
        )
        self._session.add(exercise)
        try:
            await self._session.commit()
        except SQLAlchemyError as e:
            await self._session.rollback()
            raise self._store_error("append_exercise", e)
        return exercise

    @staticmethod
    def _store_error(operation: str, exc: Exception) -> StoreError:
        logger.error(
            f"Store {operation} failed: {exc}",
            extra={"operation": operation}, exc_info=exc,
        )
        return StoreError(f"Database {operation} failed", operation)
