from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class BeastSearchResult(BaseModel):
    """A ``{"value": id, "label": name}`` pair returned by bestiary searches."""

    value: int
    label: str | None = None


class Beast(BaseModel):
    """Bestiary entry as served by ``beastData.json``.

    Field aliases follow the web service's JSON keys; the Python names are the
    descriptive ones used throughout the client.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(ge=0)
    name: str
    description: str = ""
    weakness: str = "None"
    members_only: bool = Field(False, alias="members")
    attackable: bool = False
    aggressive: bool = False
    poisonous: bool = False
    experience: float | None = Field(None, alias="xp", ge=0)
    life_points: int = Field(0, alias="lifepoints", ge=0)
    combat_level: int = Field(0, alias="level", ge=0)
    defence_level: int = Field(0, alias="defence", ge=0)
    attack_level: int = Field(0, alias="attack", ge=0)
    magic_level: int = Field(0, alias="magic", ge=0)
    ranged_level: int = Field(0, alias="ranged", ge=0)
    required_slayer_level: int = Field(0, alias="slayerlevel", ge=0)
    slayer_category: str | None = Field(None, alias="slayercat")
    size: int = Field(1, ge=1)
    areas: list[str] = Field(default_factory=list)
    animations: dict[str, int] = Field(default_factory=dict)

    @field_validator("experience", mode="before")
    @classmethod
    def _parse_experience(cls, value: Any) -> Any:
        # The service sends experience as a string and occasionally "N/A".
        if isinstance(value, str):
            try:
                return float(value.strip())
            except ValueError:
                return None
        return value
