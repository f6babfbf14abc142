"""Exercise ORM: one logged activity owned by a User.

Invariants:
    - Always belongs to a User (user_id FK)
    - id is an autoincrementing integer: its order IS the append order
    - date is a calendar date (no time component)
"""

import uuid
import datetime

from sqlalchemy import Integer, Text, Date, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from exercise_tracker.db.base import Base


class Exercise(Base):
    """Exercise entry: description, duration in minutes, calendar date."""
    __tablename__ = "exercises"

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    duration: Mapped[int] = mapped_column(Integer, nullable=False)  # int4; inputs capped at MAX_DURATION
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)

    user: Mapped["User"] = relationship("User", back_populates="exercises")
