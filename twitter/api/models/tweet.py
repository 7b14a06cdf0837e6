"""Tweet data model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Tweet(BaseModel):
    """Tweet object.

    Only the default fields are declared. Fields requested through
    ``tweet.fields`` are kept as extra attributes.
    """

    id: str = Field(..., min_length=1)
    text: str
    author_id: str | None = None
    created_at: datetime | None = None
    conversation_id: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")
