"""Test doubles shared across the rsapi test-suite."""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter, ValidationError

BASE_URL = "http://services.runescape.com"


class FakeFetcher:
    """In-memory resource fetcher keyed by exact URL.

    JSON documents are validated against the requested shape just like the
    HTTP fetcher does, so a payload of the wrong shape comes back as ``None``.
    Every requested URL is recorded in ``requested``.
    """

    def __init__(self) -> None:
        self.documents: dict[str, Any] = {}
        self.tables: dict[str, list[list[str]]] = {}
        self.requested: list[str] = []

    def fetch_json(self, url: str, shape: Any) -> Any:
        self.requested.append(url)
        if url not in self.documents:
            return None
        try:
            return TypeAdapter(shape).validate_python(self.documents[url])
        except ValidationError:
            return None

    def fetch_rows(self, url: str) -> list[list[str]]:
        self.requested.append(url)
        return [list(row) for row in self.tables.get(url, [])]
