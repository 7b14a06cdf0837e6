"""User data model."""

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """User object with extra ``user.fields`` kept as attributes."""

    id: str = Field(..., min_length=1)
    name: str
    username: str
    verified: bool | None = None

    model_config = ConfigDict(frozen=True, extra="allow")
