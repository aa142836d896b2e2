"""Pydantic models for the bestiary, Grand Exchange and hiscores documents."""

from rsapi.models.bestiary import Beast, BeastSearchResult
from rsapi.models.grand_exchange import (
    Category,
    CategoryPrices,
    GraphingData,
    Item,
    ItemPriceInformation,
    LetterCount,
    PriceChange,
    PriceTrend,
)
from rsapi.models.hiscores import Activity, ClanMate, Player, Skill

__all__ = [
    "Activity",
    "Beast",
    "BeastSearchResult",
    "Category",
    "CategoryPrices",
    "ClanMate",
    "GraphingData",
    "Item",
    "ItemPriceInformation",
    "LetterCount",
    "Player",
    "PriceChange",
    "PriceTrend",
    "Skill",
]
