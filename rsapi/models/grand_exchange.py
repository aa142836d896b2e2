"""Grand Exchange catalogue models.

These mirror the JSON documents served under ``/m=itemdb_rs/api``. Prices in
trend blocks arrive either as integers or as abbreviated strings (``"5.9m"``),
so they are normalised to strings.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from datetime import date, datetime, timezone
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _date_to_epoch_millis(day: date) -> str:
    moment = datetime(day.year, day.month, day.day, tzinfo=timezone.utc)
    return str(int(moment.timestamp() * 1000))


def _epoch_millis_to_date(key: str) -> date:
    return datetime.fromtimestamp(int(key) / 1000, tz=timezone.utc).date()


class PriceTrend(BaseModel):
    """Current or today's price along with its trend label."""

    model_config = ConfigDict(frozen=True)

    trend: str
    price: str

    @field_validator("price", mode="before")
    @classmethod
    def _stringify_price(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class PriceChange(BaseModel):
    """Percentage change over a 30/90/180 day window."""

    model_config = ConfigDict(frozen=True)

    trend: str
    change: str


class Item(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(ge=0)
    name: str
    description: str = ""
    icon: str = ""
    icon_large: str = ""
    type: str = ""
    type_icon: str = Field("", alias="typeIcon")
    current: PriceTrend
    today: PriceTrend
    members_only: bool = Field(False, alias="members")
    day30: PriceChange | None = None
    day90: PriceChange | None = None
    day180: PriceChange | None = None


class ItemPriceInformation(BaseModel):
    """Wrapper document returned by ``catalogue/detail.json``."""

    model_config = ConfigDict(frozen=True)

    item: Item


class CategoryPrices(BaseModel):
    """One page of items for a category and starting letter."""

    model_config = ConfigDict(frozen=True)

    total: int = Field(ge=0)
    items: list[Item] = Field(default_factory=list)


class LetterCount(BaseModel):
    """Number of items in a category whose name starts with ``letter``."""

    model_config = ConfigDict(frozen=True)

    letter: str
    items: int = Field(ge=0)


class Category(BaseModel):
    """Per-letter item counts for one catalogue category."""

    model_config = ConfigDict(frozen=True)

    ITEMS_PER_PAGE: ClassVar[int] = 12

    types: list[Any] = Field(default_factory=list)
    alpha: list[LetterCount] = Field(default_factory=list)

    def result(self, index: int) -> LetterCount:
        """Return the letter bucket at ``index``, rejecting out-of-range indices."""
        if not 0 <= index < len(self.alpha):
            raise IndexError(
                f"Index must be between 0 and {len(self.alpha) - 1} inclusive, got {index}"
            )
        return self.alpha[index]

    def page_count(self, letter: str) -> int:
        """Number of ``items.json`` pages needed to list every item under ``letter``."""
        for bucket in self.alpha:
            if bucket.letter == letter:
                return math.ceil(bucket.items / self.ITEMS_PER_PAGE)
        return 0


class GraphingData(BaseModel):
    """Daily and 30-day-average price history keyed by epoch milliseconds."""

    model_config = ConfigDict(frozen=True)

    daily: dict[str, int] = Field(default_factory=dict)
    average: dict[str, int] = Field(default_factory=dict)

    @classmethod
    def from_dates(
        cls, daily: Mapping[date, int], average: Mapping[date, int]
    ) -> GraphingData:
        return cls(
            daily={_date_to_epoch_millis(day): price for day, price in daily.items()},
            average={_date_to_epoch_millis(day): price for day, price in average.items()},
        )

    def daily_prices(self) -> dict[date, int]:
        return {_epoch_millis_to_date(key): price for key, price in self.daily.items()}

    def average_prices(self) -> dict[date, int]:
        return {_epoch_millis_to_date(key): price for key, price in self.average.items()}

    def daily_price(self, day: date) -> int | None:
        return self.daily.get(_date_to_epoch_millis(day))

    def average_price(self, day: date) -> int | None:
        return self.average.get(_date_to_epoch_millis(day))
