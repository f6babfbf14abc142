"""User ORM: persists the aggregate root that owns exercise entries.

Invariants:
    - id is UUID primary key (client-side default)
    - username is unique and non-nullable
    - exercises are loaded in append order (Exercise.id ascending)

Design Decisions:
    - lazy="selectin" on exercises: find-by-id returns the whole log in one
      extra query, which the log engine then filters in memory
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from exercise_tracker.db.base import Base


class User(Base):
    """User aggregate root: owns its exercises."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    username: Mapped[str] = mapped_column(
        String(100), nullable=False, unique=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    exercises: Mapped[list["Exercise"]] = relationship(
        "Exercise", back_populates="user",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="Exercise.id",
    )
