"""User Schemas: username input and the public user shape."""

from pydantic import BaseModel, ConfigDict, Field


class UserCreate(BaseModel):
    """User creation payload (form or JSON)."""
    username: str | None = Field(None, max_length=100)


class UserResponse(BaseModel):
    """Public user shape: {username, _id}."""
    model_config = ConfigDict(populate_by_name=True)

    username: str
    id: str = Field(alias="_id")
