"""Filtered stream rule models."""

from pydantic import BaseModel, ConfigDict


class StreamRule(BaseModel):
    """A filtered stream rule as returned by the rules endpoint."""

    id: str | None = None
    value: str
    tag: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")
