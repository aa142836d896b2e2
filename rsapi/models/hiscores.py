from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from rsapi.utils.sentinel import MAX_INT, MAX_LONG, UNRANKED, as_optional, check_raw


def _positive_or_unranked(value: Any, field: str) -> int | None:
    if value is None:
        return None
    raw = check_raw(int(value), field)
    if raw == 0:
        raise ValueError(f"{field} must be positive or {UNRANKED} (unranked)")
    return as_optional(raw)


def _non_negative_or_unranked(value: Any, field: str) -> int | None:
    if value is None:
        return None
    return as_optional(check_raw(int(value), field))


class Skill(BaseModel):
    """A player's standing in one skill on a hiscore table.

    Raw wire values are accepted directly: ``-1`` for rank or experience is
    stored as ``None`` (unranked). Level is always concrete.
    """

    model_config = ConfigDict(frozen=True)

    rank: int | None = Field(None, le=MAX_INT, description="Hiscore rank, None when unranked")
    level: int = Field(ge=0, le=MAX_INT, description="Skill level, 0 when never trained")
    experience: int | None = Field(
        None, le=MAX_LONG, description="Experience points, None when unranked"
    )

    @field_validator("rank", mode="before")
    @classmethod
    def _parse_rank(cls, value: Any) -> int | None:
        return _positive_or_unranked(value, "rank")

    @field_validator("experience", mode="before")
    @classmethod
    def _parse_experience(cls, value: Any) -> int | None:
        return _non_negative_or_unranked(value, "experience")


class Activity(BaseModel):
    """A player's standing in a minigame or event (rank and score only)."""

    model_config = ConfigDict(frozen=True)

    rank: int | None = Field(None, le=MAX_INT, description="Activity rank, None when unranked")
    score: int | None = Field(None, le=MAX_INT, description="Activity score, None when unranked")

    @field_validator("rank", mode="before")
    @classmethod
    def _parse_rank(cls, value: Any) -> int | None:
        return _positive_or_unranked(value, "rank")

    @field_validator("score", mode="before")
    @classmethod
    def _parse_score(cls, value: Any) -> int | None:
        return _non_negative_or_unranked(value, "score")


class Player(BaseModel):
    """Decoded hiscore entry; keys follow the order of the table's schema.

    Both mappings are read-only views, so a decoded player keeps exactly the
    names its schema declared.
    """

    model_config = ConfigDict(frozen=True)

    skills: Mapping[str, Skill] = Field(default_factory=dict)
    activities: Mapping[str, Activity] = Field(default_factory=dict)

    @field_validator("skills", "activities", mode="after")
    @classmethod
    def _read_only(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @field_serializer("skills", "activities")
    def _serialize_mapping(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return dict(value)


class ClanMate(BaseModel):
    """One row of the clan hiscores member list."""

    model_config = ConfigDict(frozen=True)

    name: str
    rank: str = Field(description="Clan rank title, e.g. 'Owner'")
    experience: int = Field(ge=0, description="Total experience gained while in the clan")
    kills: int = Field(ge=0)
