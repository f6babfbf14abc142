"""Exercise Schemas: exercise input, exercise response, and log response.

Invariants:
    - ExerciseCreate accepts duration as text or number; normalization happens in core
    - ExerciseLogResponse.count always equals len(log) (built by core.log_query)
    - from/to only present in a log response when the client supplied them

Design Decisions:
    - alias + populate_by_name: services build models by field name, FastAPI
      serializes by alias (`_id`, `from`)
"""

from pydantic import BaseModel, ConfigDict, Field


class ExerciseCreate(BaseModel):
    """Exercise payload: every field optional so core can report what is missing."""
    description: str | None = None
    duration: str | int | float | None = None
    date: str | None = None


class ExerciseResponse(BaseModel):
    """Exercise appended to a user: {username, description, duration, date, _id}."""
    model_config = ConfigDict(populate_by_name=True)

    username: str
    description: str
    duration: int
    date: str
    id: str = Field(alias="_id")


class LogEntry(BaseModel):
    description: str
    duration: int
    date: str


class ExerciseLogResponse(BaseModel):
    """Filtered log: {username, count, _id, [from], [to], log}."""
    model_config = ConfigDict(populate_by_name=True)

    username: str
    count: int
    id: str = Field(alias="_id")
    from_: str | None = Field(None, alias="from")
    to: str | None = None
    log: list[LogEntry]
