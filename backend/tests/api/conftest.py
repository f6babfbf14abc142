"""API test fixtures: FastAPI test client over the in-memory database.

Invariants:
    - get_db dependency overridden to use the test session factory
    - app.state.db holds a manager bound to the test engine (readiness probe)
    - Overrides and app.state are restored after every test

Design Decisions:
    - Lifespan is not run by ASGITransport: the fixture wires app.state itself
    - seed_user inserts through the ORM so route tests start from known data
"""

from datetime import date

import pytest
from fastapi import Depends
from httpx import ASGITransport, AsyncClient

from exercise_tracker.api.dependencies import get_service, get_user_store
from exercise_tracker.infrastructure.database import (
    DatabaseSessionManager, get_db,
)
from exercise_tracker.main import app
from exercise_tracker.models.exercise import Exercise
from exercise_tracker.models.user import User
from exercise_tracker.services.exercise_log_service import ExerciseLogService

FIXED_TODAY = date(2024, 1, 2)


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    app.state.db = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.db = None


@pytest.fixture
def fixed_today(client):
    """Pin the service's notion of "today" to FIXED_TODAY (a Tuesday)."""
    def override_get_service(store=Depends(get_user_store)):
        return ExerciseLogService(store, today=lambda: FIXED_TODAY)

    app.dependency_overrides[get_service] = override_get_service
    return FIXED_TODAY


@pytest.fixture
async def seed_user(test_db):
    """User with exercises dated 2024-01-01, 2024-01-15, 2024-02-01 (append order)."""
    user = User(username="fcc_test")
    user.exercises = [
        Exercise(description="run", duration=30, date=date(2024, 1, 1)),
        Exercise(description="swim", duration=45, date=date(2024, 1, 15)),
        Exercise(description="bike", duration=60, date=date(2024, 2, 1)),
    ]
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user
