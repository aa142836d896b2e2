"""Tests for bestiary lookups against an in-memory fetcher."""

from __future__ import annotations

import pytest

from rsapi.services.bestiary_service import BESTIARY_PATH, BestiaryService
from tests.support import BASE_URL, FakeFetcher

ROOT = f"{BASE_URL}{BESTIARY_PATH}"


@pytest.fixture
def bestiary(fake_fetcher: FakeFetcher) -> BestiaryService:
    return BestiaryService(fake_fetcher, BASE_URL)


def test_beast_fetches_beast_data(bestiary: BestiaryService, fake_fetcher: FakeFetcher) -> None:
    fake_fetcher.documents[f"{ROOT}/beastData.json?beastid=49"] = {
        "id": 49,
        "name": "Hellhound",
        "level": 92,
    }

    beast = bestiary.beast(49)

    assert beast is not None
    assert beast.name == "Hellhound"
    assert beast.combat_level == 92


def test_beast_missing_returns_none(bestiary: BestiaryService) -> None:
    assert bestiary.beast(999999) is None


def test_search_by_terms_joins_terms(bestiary: BestiaryService, fake_fetcher: FakeFetcher) -> None:
    fake_fetcher.documents[f"{ROOT}/beastSearch.json?term=black+dragon"] = [
        {"value": 54, "label": "Black dragon"},
        {"value": 4673, "label": "Black dragon"},
    ]

    assert bestiary.search_by_terms("black", "dragon") == {54: "Black dragon", 4673: "Black dragon"}


def test_search_results_without_labels_are_dropped(
    bestiary: BestiaryService, fake_fetcher: FakeFetcher
) -> None:
    fake_fetcher.documents[f"{ROOT}/bestiaryNames.json?letter=Z"] = [
        {"value": 541, "label": "Zeke"},
        {"value": 0},
    ]

    assert bestiary.search_by_first_letter("Z") == {541: "Zeke"}


def test_missing_search_document_is_empty(bestiary: BestiaryService) -> None:
    assert bestiary.beasts_in_area("Nowhere") == {}


def test_area_names(bestiary: BestiaryService, fake_fetcher: FakeFetcher) -> None:
    fake_fetcher.documents[f"{ROOT}/areaNames.json"] = ["Karamja", "Taverley Dungeon"]

    assert bestiary.area_names() == ["Karamja", "Taverley Dungeon"]


def test_beasts_in_area_encodes_spaces(bestiary: BestiaryService, fake_fetcher: FakeFetcher) -> None:
    fake_fetcher.documents[f"{ROOT}/areaBeasts.json?identifier=Taverley+Dungeon"] = [
        {"value": 49, "label": "Hellhound"}
    ]

    assert bestiary.beasts_in_area("Taverley Dungeon") == {49: "Hellhound"}


def test_slayer_category_by_name_resolves_id(
    bestiary: BestiaryService, fake_fetcher: FakeFetcher
) -> None:
    fake_fetcher.documents[f"{ROOT}/slayerCatNames.json"] = {"Hellhounds": 47, "Aviansies": 94}
    fake_fetcher.documents[f"{ROOT}/slayerBeasts.json?identifier=47"] = [
        {"value": 49, "label": "Hellhound"}
    ]

    assert bestiary.slayer_categories() == {"Hellhounds": 47, "Aviansies": 94}
    assert bestiary.beasts_in_slayer_category("Hellhounds") == {49: "Hellhound"}
    assert bestiary.beasts_in_slayer_category(47) == {49: "Hellhound"}


def test_unknown_slayer_category_name_is_empty(
    bestiary: BestiaryService, fake_fetcher: FakeFetcher
) -> None:
    fake_fetcher.documents[f"{ROOT}/slayerCatNames.json"] = {"Hellhounds": 47}

    assert bestiary.beasts_in_slayer_category("Unicorns") == {}
    assert fake_fetcher.requested == [f"{ROOT}/slayerCatNames.json"]


def test_weakness_by_name_resolves_id(bestiary: BestiaryService, fake_fetcher: FakeFetcher) -> None:
    fake_fetcher.documents[f"{ROOT}/weaknessNames.json"] = {"Water": 6}
    fake_fetcher.documents[f"{ROOT}/weaknessBeasts.json?identifier=6"] = [
        {"value": 49, "label": "Hellhound"}
    ]

    assert bestiary.beasts_weak_to("Water") == {49: "Hellhound"}
    assert bestiary.beasts_weak_to("Fire") == {}


def test_level_group_uses_range_identifier(
    bestiary: BestiaryService, fake_fetcher: FakeFetcher
) -> None:
    fake_fetcher.documents[f"{ROOT}/levelGroup.json?identifier=90-95"] = [
        {"value": 49, "label": "Hellhound"}
    ]

    assert bestiary.beasts_in_level_group(90, 95) == {49: "Hellhound"}
    with pytest.raises(ValueError):
        bestiary.beasts_in_level_group(95, 90)
