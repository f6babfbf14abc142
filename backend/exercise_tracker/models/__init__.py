"""ORM Models: SQLAlchemy declarative models for users and their exercises.

Invariants:
    - All models inherit from Base (db/base.py)
    - User is the aggregate root; exercises are only reachable through it

Design Decisions:
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from exercise_tracker.models.user import User  # noqa: F401
from exercise_tracker.models.exercise import Exercise  # noqa: F401
