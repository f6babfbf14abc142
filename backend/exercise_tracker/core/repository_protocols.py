"""Boundary Protocols: contracts between core and shell.

Invariants:
    - Core NEVER imports from shell: dependency arrows point inward only
    - All store IO accessed through the UserStore Protocol
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, the ORM models satisfy
      UserLike/ExerciseLike without inheriting from anything here
    - Async in Protocol: boundary methods are async because implementations do IO,
      but core pure functions that USE these shapes are never async themselves
"""

from collections.abc import Sequence
from datetime import date
from typing import Protocol
from uuid import UUID

from exercise_tracker.core.domain_types import ExerciseDraft, UserId


class ExerciseLike(Protocol):
    """Structural contract for a stored exercise entry."""
    description: str
    duration: int
    date: date


class UserLike(Protocol):
    """Structural contract for a stored user with its ordered exercises."""
    id: UUID
    username: str

    @property
    def exercises(self) -> Sequence[ExerciseLike]: ...


class UserStore(Protocol):
    """Contract for user persistence: implemented by shell.

    Raises DuplicateUsernameError on username collision and StoreError on any
    other durable-store failure.
    """
    async def create_user(self, username: str) -> UserLike: ...
    async def list_users(self) -> Sequence[UserLike]: ...
    async def find_user_by_id(self, user_id: UserId) -> UserLike | None: ...
    async def append_exercise(
        self, user: UserLike, draft: ExerciseDraft,
    ) -> ExerciseLike: ...
