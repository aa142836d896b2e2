"""Entry point bundling the bestiary, Grand Exchange and hiscores services."""

from __future__ import annotations

from rsapi.client import HttpResourceFetcher, ResourceFetcher
from rsapi.config import ClientSettings, get_settings
from rsapi.services.bestiary_service import BestiaryService
from rsapi.services.grand_exchange_service import GrandExchangeService
from rsapi.services.hiscores_service import HiscoresService


class RuneScapeAPI:
    """All three sub-APIs sharing a single resource fetcher.

    Use :meth:`create_http` for the live web services, or pass any
    :class:`~rsapi.client.ResourceFetcher` (tests use an in-memory fake).
    """

    def __init__(self, fetcher: ResourceFetcher, settings: ClientSettings | None = None) -> None:
        base_url = (settings or get_settings()).base_url
        self._fetcher = fetcher
        self.bestiary = BestiaryService(fetcher, base_url)
        self.grand_exchange = GrandExchangeService(fetcher, base_url)
        self.hiscores = HiscoresService(fetcher, base_url)

    @classmethod
    def create_http(cls, settings: ClientSettings | None = None) -> RuneScapeAPI:
        settings = settings or get_settings()
        return cls(HttpResourceFetcher(settings), settings)

    def close(self) -> None:
        close = getattr(self._fetcher, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> RuneScapeAPI:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
