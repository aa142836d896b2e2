"""Client for the RuneScape bestiary, Grand Exchange and hiscores web services."""

from rsapi.api import RuneScapeAPI
from rsapi.client import HttpResourceFetcher, ResourceFetcher
from rsapi.errors import (
    DecodeFailure,
    DecodeFailureKind,
    FetchError,
    RSAPIError,
    SearchStateError,
    UnknownSchemaError,
)

__version__ = "0.1.0"

__all__ = [
    "DecodeFailure",
    "DecodeFailureKind",
    "FetchError",
    "HttpResourceFetcher",
    "RSAPIError",
    "ResourceFetcher",
    "RuneScapeAPI",
    "SearchStateError",
    "UnknownSchemaError",
]
