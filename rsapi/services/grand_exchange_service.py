"""Service wrapping the Grand Exchange catalogue (``/m=itemdb_rs/api``)."""

from __future__ import annotations

from typing import Final
from urllib.parse import urlencode

from rsapi.client import ResourceFetcher
from rsapi.config import DEFAULT_BASE_URL
from rsapi.models.grand_exchange import (
    Category,
    CategoryPrices,
    GraphingData,
    ItemPriceInformation,
)

GRAND_EXCHANGE_PATH = "/m=itemdb_rs/api"

# Index in this tuple is the category id used by the web service.
CATEGORIES: Final[tuple[str, ...]] = (
    "Miscellaneous",
    "Ammo",
    "Arrows",
    "Bolts",
    "Construction materials",
    "Construction projects",
    "Cooking ingredients",
    "Costumes",
    "Crafting materials",
    "Familiars",
    "Farming produce",
    "Fletching materials",
    "Food and drink",
    "Herblore materials",
    "Hunting equipment",
    "Hunting produce",
    "Jewellery",
    "Mage armour",
    "Mage weapons",
    "Melee armour - low level",
    "Melee armour - mid level",
    "Melee armour - high level",
    "Melee weapons - low level",
    "Melee weapons - mid level",
    "Melee weapons - high level",
    "Mining and smithing",
    "Potions",
    "Prayer armour",
    "Prayer materials",
    "Range armour",
    "Range weapons",
    "Runecrafting",
    "Runes, Spells and Teleports",
    "Seeds",
    "Summoning scrolls",
    "Tools and containers",
    "Woodcutting product",
    "Pocket items",
)

# Items whose names start with a digit are listed under this bucket.
NUMERIC_PREFIX = "#"


def category_id(category: int | str) -> int:
    """Resolve a category name or id to a validated id.

    Raises:
        ValueError: If ``category`` is a name not found in ``CATEGORIES``
        IndexError: If ``category`` is an id outside the catalogue
    """
    if isinstance(category, str):
        try:
            return CATEGORIES.index(category)
        except ValueError:
            raise ValueError(f"Unknown Grand Exchange category: {category!r}") from None

    if not 0 <= category < len(CATEGORIES):
        raise IndexError(
            f"Category id must be between 0 and {len(CATEGORIES) - 1} inclusive, got {category}"
        )
    return category


class GrandExchangeService:
    """Category listings, price pages and price history for tradeable items."""

    def __init__(self, fetcher: ResourceFetcher, base_url: str = DEFAULT_BASE_URL) -> None:
        self._fetcher = fetcher
        self._root = f"{base_url.rstrip('/')}{GRAND_EXCHANGE_PATH}"

    def _url(self, resource: str, **params: object) -> str:
        url = f"{self._root}/{resource}"
        if params:
            url = f"{url}?{urlencode(params)}"
        return url

    def category(self, category: int | str) -> Category | None:
        """Per-letter item counts for a category given by id or name."""
        return self._fetcher.fetch_json(
            self._url("catalogue/category.json", category=category_id(category)), Category
        )

    def category_prices(
        self, category: int | str, prefix: str, page: int = 1
    ) -> CategoryPrices | None:
        """One page of items in ``category`` whose names start with ``prefix``.

        A purely numeric prefix selects the bucket of items whose names start
        with a digit.
        """
        if not prefix:
            raise ValueError("Prefix must be at least 1 character long")
        if page < 1:
            raise ValueError(f"Page must be 1 or greater, got {page}")

        alpha = NUMERIC_PREFIX if prefix.isdigit() else prefix.lower()
        return self._fetcher.fetch_json(
            self._url(
                "catalogue/items.json",
                category=category_id(category),
                alpha=alpha,
                page=page,
            ),
            CategoryPrices,
        )

    def graphing_data(self, item_id: int) -> GraphingData | None:
        """Daily and average price history for the last 180 days."""
        return self._fetcher.fetch_json(self._url(f"graph/{item_id}.json"), GraphingData)

    def item_price_information(self, item_id: int) -> ItemPriceInformation | None:
        return self._fetcher.fetch_json(
            self._url("catalogue/detail.json", item=item_id), ItemPriceInformation
        )
