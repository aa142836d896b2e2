"""Resource fetchers used by the bestiary, Grand Exchange and hiscores services.

A fetcher knows how to turn a URL into either a validated JSON document or a
table of CSV rows. "Not found" is never an exception here: JSON lookups return
``None`` and row lookups return an empty list.
"""

from __future__ import annotations

import csv
import io
import logging
from functools import lru_cache
from typing import Any, Protocol, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from rsapi.config import ClientSettings, get_settings
from rsapi.errors import FetchError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# The lite endpoints are served as Latin-1 regardless of the declared charset.
CSV_ENCODING = "iso-8859-1"


class ResourceFetcher(Protocol):
    """Anything able to retrieve JSON documents and CSV row tables by URL."""

    def fetch_json(self, url: str, shape: type[T]) -> T | None:
        """Return the document at ``url`` validated as ``shape``, or None."""
        ...

    def fetch_rows(self, url: str) -> list[list[str]]:
        """Return the CSV rows at ``url``; empty when the table does not exist."""
        ...


@lru_cache(maxsize=None)
def _adapter_for(shape: Any) -> TypeAdapter[Any]:
    return TypeAdapter(shape)


class HttpResourceFetcher:
    """:class:`ResourceFetcher` backed by a synchronous ``httpx.Client``."""

    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._owns_client = client is None
        self._client = client or httpx.Client(
            headers={
                "User-Agent": self._settings.user_agent,
                "Accept": "application/json",
            },
            timeout=self._settings.timeout_seconds,
            follow_redirects=True,
        )

    def fetch_json(self, url: str, shape: type[T]) -> T | None:
        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            level = logging.DEBUG if exc.response.status_code == 404 else logging.WARNING
            logger.log(level, "GET %s returned HTTP %s", url, exc.response.status_code)
            return None
        except httpx.HTTPError as exc:
            logger.warning("GET %s failed: %s", url, exc)
            return None

        try:
            payload = response.json()
        except ValueError:
            logger.warning("GET %s did not return valid JSON", url)
            return None

        try:
            return _adapter_for(shape).validate_python(payload)
        except ValidationError as exc:
            logger.warning(
                "GET %s returned an unexpected document (%d validation errors)",
                url,
                exc.error_count(),
            )
            return None

    def fetch_rows(self, url: str) -> list[list[str]]:
        try:
            response = self._client.get(url)
        except httpx.HTTPError as exc:
            raise FetchError(url, str(exc)) from exc

        if response.status_code == 404:
            logger.debug("GET %s returned HTTP 404, treating as empty table", url)
            return []
        if response.is_error:
            raise FetchError(url, f"HTTP {response.status_code}")

        text = response.content.decode(CSV_ENCODING)
        return [row for row in csv.reader(io.StringIO(text)) if row]

    def close(self) -> None:
        """Close the underlying HTTP client if this fetcher created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpResourceFetcher:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


__all__ = ["CSV_ENCODING", "HttpResourceFetcher", "ResourceFetcher"]
