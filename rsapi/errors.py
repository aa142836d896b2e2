"""Exception types and decode outcomes shared across the client."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RSAPIError(Exception):
    """Base class for every error raised by :mod:`rsapi`."""


class UnknownSchemaError(RSAPIError, LookupError):
    """Raised when a hiscore table identifier matches no registered schema."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"Unknown hiscore table: {identifier!r}")
        self.identifier = identifier


class FetchError(RSAPIError):
    """Raised when a row table cannot be retrieved from the web services."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class SearchStateError(RSAPIError, RuntimeError):
    """Raised when a :class:`~rsapi.services.search.Search` is misused."""


class DecodeFailureKind(str, Enum):
    """Reasons a row table could not be decoded into a player."""

    INSUFFICIENT_ROWS = "insufficient_rows"
    MALFORMED_FIELD = "malformed_field"


class DecodeFailure(BaseModel):
    """Outcome returned (not raised) when a hiscore row table is unusable.

    Callers treat both kinds as "player not found"; keeping the kind explicit
    lets tests and diagnostics tell a short table apart from a corrupt one.
    """

    model_config = ConfigDict(frozen=True)

    kind: DecodeFailureKind = Field(..., description="Category of decode failure")
    detail: str | None = Field(None, description="Which row or cell was rejected")


__all__ = [
    "DecodeFailure",
    "DecodeFailureKind",
    "FetchError",
    "RSAPIError",
    "SearchStateError",
    "UnknownSchemaError",
]
