"""API Layer: FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All API endpoints return JSON; errors go through error_handlers only

Design Decisions:
    - Thin routes delegate to ExerciseLogService
"""
