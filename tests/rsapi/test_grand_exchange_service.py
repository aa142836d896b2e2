"""Tests for Grand Exchange catalogue lookups."""

from __future__ import annotations

from datetime import date

import pytest

from rsapi.services.grand_exchange_service import (
    CATEGORIES,
    GRAND_EXCHANGE_PATH,
    GrandExchangeService,
    category_id,
)
from tests.support import BASE_URL, FakeFetcher

ROOT = f"{BASE_URL}{GRAND_EXCHANGE_PATH}"

WHIP = {
    "id": 4151,
    "name": "Abyssal whip",
    "type": "Melee weapons - high level",
    "current": {"trend": "neutral", "price": "95.2k"},
    "today": {"trend": "neutral", "price": 0},
    "members": "true",
}


@pytest.fixture
def grand_exchange(fake_fetcher: FakeFetcher) -> GrandExchangeService:
    return GrandExchangeService(fake_fetcher, BASE_URL)


def test_category_catalogue() -> None:
    assert len(CATEGORIES) == 38
    assert CATEGORIES[0] == "Miscellaneous"
    assert CATEGORIES[-1] == "Pocket items"


def test_category_id_by_name_and_number() -> None:
    assert category_id("Ammo") == 1
    assert category_id(37) == 37
    with pytest.raises(ValueError):
        category_id("Spaceships")
    with pytest.raises(IndexError):
        category_id(38)
    with pytest.raises(IndexError):
        category_id(-1)


def test_category(grand_exchange: GrandExchangeService, fake_fetcher: FakeFetcher) -> None:
    fake_fetcher.documents[f"{ROOT}/catalogue/category.json?category=24"] = {
        "types": [],
        "alpha": [{"letter": "a", "items": 13}],
    }

    category = grand_exchange.category("Melee weapons - high level")

    assert category is not None
    assert category.page_count("a") == 2


def test_category_prices_lowercases_prefix(
    grand_exchange: GrandExchangeService, fake_fetcher: FakeFetcher
) -> None:
    fake_fetcher.documents[f"{ROOT}/catalogue/items.json?category=24&alpha=ab&page=1"] = {
        "total": 1,
        "items": [WHIP],
    }

    prices = grand_exchange.category_prices(24, "Ab")

    assert prices is not None
    assert prices.total == 1
    assert prices.items[0].name == "Abyssal whip"


def test_category_prices_numeric_prefix_uses_hash_bucket(
    grand_exchange: GrandExchangeService, fake_fetcher: FakeFetcher
) -> None:
    grand_exchange.category_prices(0, "3", page=2)

    assert fake_fetcher.requested == [f"{ROOT}/catalogue/items.json?category=0&alpha=%23&page=2"]


@pytest.mark.parametrize(("prefix", "page"), [("", 1), ("a", 0)])
def test_category_prices_rejects_bad_arguments(
    grand_exchange: GrandExchangeService, prefix: str, page: int
) -> None:
    with pytest.raises(ValueError):
        grand_exchange.category_prices(0, prefix, page=page)


def test_graphing_data(grand_exchange: GrandExchangeService, fake_fetcher: FakeFetcher) -> None:
    fake_fetcher.documents[f"{ROOT}/graph/4151.json"] = {
        "daily": {"1420070400000": 1500},
        "average": {"1420070400000": 1490},
    }

    data = grand_exchange.graphing_data(4151)

    assert data is not None
    assert data.daily_price(date(2015, 1, 1)) == 1500


def test_item_price_information(
    grand_exchange: GrandExchangeService, fake_fetcher: FakeFetcher
) -> None:
    fake_fetcher.documents[f"{ROOT}/catalogue/detail.json?item=4151"] = {"item": WHIP}

    info = grand_exchange.item_price_information(4151)

    assert info is not None
    assert info.item.members_only is True


def test_missing_item_is_none(grand_exchange: GrandExchangeService) -> None:
    assert grand_exchange.item_price_information(1) is None
