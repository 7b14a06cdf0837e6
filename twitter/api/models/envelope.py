"""Response envelope models.

Every v2 payload is wrapped in ``{"data": ..., "meta": ..., "errors": [...]}``
with each key independently present or absent. Absent keys stay unset on the
model, so ``model_dump(exclude_unset=True)`` gives back the body's key set.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from ..core.exceptions import PartialError

T = TypeVar("T")


class ErrorDetail(BaseModel):
    """One entry of an envelope's ``errors`` array."""

    title: str | None = None
    detail: str | None = None
    type: str | None = None
    status: int | None = None
    resource_type: str | None = None
    parameter: str | None = None
    value: Any = None
    section: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")

    def describe(self) -> str:
        return self.detail or self.title or self.type or "unknown error"


class PageMeta(BaseModel):
    """Envelope ``meta`` object."""

    next_token: str | None = None
    previous_token: str | None = None
    result_count: int | None = None
    newest_id: str | None = None
    oldest_id: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class ResponseEnvelope(BaseModel, Generic[T]):
    """Decoded response body.

    ``data`` and ``errors`` may coexist: a partial success is returned, not
    raised. Use :meth:`raise_for_errors` to opt into raising.
    """

    data: T | None = None
    meta: PageMeta | None = None
    errors: list[ErrorDetail] | None = None
    includes: dict[str, Any] | None = None

    model_config = ConfigDict(frozen=True, extra="allow")

    @property
    def next_token(self) -> str | None:
        """Continuation token for the next page, if any."""
        return self.meta.next_token if self.meta is not None else None

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def is_partial(self) -> bool:
        """True when the envelope carries both data and errors."""
        return self.has_errors and self.data is not None

    def raise_for_errors(self) -> ResponseEnvelope[T]:
        """Raise PartialError if ``errors`` is non-empty, else return self."""
        if self.errors:
            summary = "; ".join(error.describe() for error in self.errors)
            raise PartialError(
                f"{len(self.errors)} error(s) in response: {summary}",
                errors=list(self.errors),
                data=self.data,
            )
        return self
