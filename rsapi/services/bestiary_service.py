"""Service wrapping the bestiary web service (``/m=itemdb_rs/bestiary``)."""

from __future__ import annotations

import logging
from urllib.parse import urlencode

from rsapi.client import ResourceFetcher
from rsapi.config import DEFAULT_BASE_URL
from rsapi.models.bestiary import Beast, BeastSearchResult
from rsapi.services.search import Search

logger = logging.getLogger(__name__)

BESTIARY_PATH = "/m=itemdb_rs/bestiary"


def _results_to_map(results: list[BeastSearchResult] | None) -> dict[int, str]:
    """Collapse search results into ``{beast_id: label}``, dropping unlabelled ones."""
    if not results:
        return {}
    return {result.value: result.label for result in results if result.label is not None}


class BestiaryService:
    """Beast lookups and the building blocks of :class:`Search`."""

    def __init__(self, fetcher: ResourceFetcher, base_url: str = DEFAULT_BASE_URL) -> None:
        self._fetcher = fetcher
        self._root = f"{base_url.rstrip('/')}{BESTIARY_PATH}"

    def _url(self, resource: str, **params: object) -> str:
        url = f"{self._root}/{resource}"
        if params:
            url = f"{url}?{urlencode(params)}"
        return url

    def _search(self, resource: str, **params: object) -> dict[int, str]:
        return _results_to_map(
            self._fetcher.fetch_json(self._url(resource, **params), list[BeastSearchResult])
        )

    def search(self) -> Search:
        """Start a new composable search over this bestiary."""
        return Search(self)

    def beast(self, beast_id: int) -> Beast | None:
        """Return the full data for ``beast_id`` or None if it does not exist."""
        return self._fetcher.fetch_json(self._url("beastData.json", beastid=beast_id), Beast)

    def search_by_terms(self, *terms: str) -> dict[int, str]:
        """Beasts whose names contain all of ``terms``."""
        if not terms:
            raise ValueError("At least one search term is required")
        return self._search("beastSearch.json", term=" ".join(terms))

    def search_by_first_letter(self, letter: str) -> dict[int, str]:
        if len(letter) != 1:
            raise ValueError(f"Expected a single letter, got {letter!r}")
        return self._search("bestiaryNames.json", letter=letter)

    def area_names(self) -> list[str]:
        return self._fetcher.fetch_json(self._url("areaNames.json"), list[str]) or []

    def beasts_in_area(self, area: str) -> dict[int, str]:
        return self._search("areaBeasts.json", identifier=area)

    def slayer_categories(self) -> dict[str, int]:
        """Slayer category names mapped to their ids."""
        return self._fetcher.fetch_json(self._url("slayerCatNames.json"), dict[str, int]) or {}

    def beasts_in_slayer_category(self, category: int | str) -> dict[int, str]:
        """Beasts assigned to a slayer category, given by id or by name.

        An unknown category name yields no beasts.
        """
        if isinstance(category, str):
            category_id = self.slayer_categories().get(category)
            if category_id is None:
                logger.debug("Unknown slayer category %r", category)
                return {}
            category = category_id
        return self._search("slayerBeasts.json", identifier=category)

    def weaknesses(self) -> dict[str, int]:
        """Weakness names mapped to their ids."""
        return self._fetcher.fetch_json(self._url("weaknessNames.json"), dict[str, int]) or {}

    def beasts_weak_to(self, weakness: int | str) -> dict[int, str]:
        if isinstance(weakness, str):
            weakness_id = self.weaknesses().get(weakness)
            if weakness_id is None:
                logger.debug("Unknown weakness %r", weakness)
                return {}
            weakness = weakness_id
        return self._search("weaknessBeasts.json", identifier=weakness)

    def beasts_in_level_group(self, lower: int, upper: int) -> dict[int, str]:
        """Beasts whose combat level lies in ``lower``-``upper``."""
        if upper <= lower:
            raise ValueError(
                "The upper combat level bound must be higher than the lower combat level bound"
            )
        return self._search("levelGroup.json", identifier=f"{lower}-{upper}")
