"""Composable bestiary search built from independent remote lookups."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rsapi.errors import FetchError, SearchStateError

if TYPE_CHECKING:
    from rsapi.services.bestiary_service import BestiaryService

logger = logging.getLogger(__name__)

Lookup = Callable[[], dict[int, str]]


@dataclass(frozen=True)
class SearchStep:
    """A deferred lookup returning beast ids mapped to display labels."""

    description: str
    lookup: Lookup


class Search:
    """Intersect several bestiary filters into one result set.

    Filters are recorded, not executed, until :meth:`results` is called. Every
    step is then evaluated in the order it was added and the keys are
    intersected; labels always come from the earliest step, later steps only
    decide membership.

    Example:
        >>> bestiary.search().filter_by_area("Karamja").filter_by_level(50, 100).results()
    """

    def __init__(self, bestiary: BestiaryService) -> None:
        self._bestiary = bestiary
        self._steps: list[SearchStep] = []
        self._consumed = False

    @property
    def steps(self) -> tuple[SearchStep, ...]:
        return tuple(self._steps)

    def add_step(self, description: str, lookup: Lookup) -> Search:
        """Append a custom lookup to the search and return ``self``."""
        if self._consumed:
            raise SearchStateError("Filters cannot be added after results() has been called")
        self._steps.append(SearchStep(description, lookup))
        return self

    def filter_by_name_terms(self, *terms: str) -> Search:
        """Keep beasts whose names contain all of ``terms``."""
        if not terms:
            raise ValueError("At least one search term is required")
        return self.add_step(
            f"name terms {' '.join(terms)!r}",
            lambda: self._bestiary.search_by_terms(*terms),
        )

    def filter_by_name_first_letter(self, letter: str) -> Search:
        """Keep beasts whose names start with ``letter``."""
        if len(letter) != 1:
            raise ValueError(f"Expected a single letter, got {letter!r}")
        return self.add_step(
            f"first letter {letter!r}",
            lambda: self._bestiary.search_by_first_letter(letter),
        )

    def filter_by_area(self, area: str) -> Search:
        """Keep beasts found in ``area``."""
        return self.add_step(f"area {area!r}", lambda: self._bestiary.beasts_in_area(area))

    def filter_by_slayer_category(self, category: int | str) -> Search:
        """Keep beasts assigned to a slayer category, given by id or name."""
        return self.add_step(
            f"slayer category {category!r}",
            lambda: self._bestiary.beasts_in_slayer_category(category),
        )

    def filter_by_weakness(self, weakness: int | str) -> Search:
        """Keep beasts weak to ``weakness``, given by id or name."""
        return self.add_step(
            f"weakness {weakness!r}",
            lambda: self._bestiary.beasts_weak_to(weakness),
        )

    def filter_by_level(self, lower: int, upper: int) -> Search:
        """Keep beasts whose combat level lies in ``lower``-``upper``."""
        if upper <= lower:
            raise ValueError(
                "The upper combat level bound must be higher than the lower combat level bound"
            )
        return self.add_step(
            f"combat level {lower}-{upper}",
            lambda: self._bestiary.beasts_in_level_group(lower, upper),
        )

    def results(self) -> dict[int, str]:
        """Evaluate every step and return the beasts matched by all of them.

        Raises:
            SearchStateError: If no filter has been added
        """
        if not self._steps:
            raise SearchStateError("At least one filter must be applied to the search")
        self._consumed = True

        first, *remaining = self._steps
        results = self._evaluate(first)
        for step in remaining:
            matches = self._evaluate(step)
            results = {key: label for key, label in results.items() if key in matches}

        return results

    def _evaluate(self, step: SearchStep) -> dict[int, str]:
        try:
            matches = dict(step.lookup())
        except FetchError as exc:
            logger.warning("Search step %s failed, treating as no matches: %s", step.description, exc)
            return {}

        logger.debug("Search step %s matched %d beasts", step.description, len(matches))
        return matches
