"""Service objects for the three web-service APIs."""

from rsapi.services.bestiary_service import BestiaryService
from rsapi.services.grand_exchange_service import CATEGORIES, GrandExchangeService
from rsapi.services.hiscores_service import HiscoresService
from rsapi.services.search import Search, SearchStep

__all__ = [
    "BestiaryService",
    "CATEGORIES",
    "GrandExchangeService",
    "HiscoresService",
    "Search",
    "SearchStep",
]
