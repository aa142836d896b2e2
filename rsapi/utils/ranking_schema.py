"""Column layouts of the hiscore tables served by ``index_lite.ws``.

The lite endpoint returns one CSV row per skill followed by one row per
activity, with no header. The order of the names below *is* the column
contract: never reorder or insert into an existing tuple, since a drifted
order yields wrongly labelled data rather than an error. When the game adds
a skill or activity, append it (the service appends too).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from rsapi.errors import UnknownSchemaError

SKILL_NAMES: Final[tuple[str, ...]] = (
    "Overall",
    "Attack",
    "Defence",
    "Strength",
    "Constitution",
    "Ranged",
    "Prayer",
    "Magic",
    "Cooking",
    "Woodcutting",
    "Fletching",
    "Fishing",
    "Firemaking",
    "Crafting",
    "Smithing",
    "Mining",
    "Herblore",
    "Agility",
    "Thieving",
    "Slayer",
    "Farming",
    "Runecrafting",
    "Hunter",
    "Construction",
    "Summoning",
    "Dungeoneering",
    "Divination",
    "Invention",
)

OLDSCHOOL_SKILL_NAMES: Final[tuple[str, ...]] = SKILL_NAMES[:24]

ACTIVITY_NAMES: Final[tuple[str, ...]] = (
    "Bounty Hunter",
    "B.H. Rogues",
    "Dominion Tower",
    "The Crucible",
    "Castle Wars games",
    "B.A. Attackers",
    "B.A. Defenders",
    "B.A. Collectors",
    "B.A. Healers",
    "Duel Tournament",
    "Mobilising Armies",
    "Conquest",
    "Fist of Guthix",
    "GG: Athletics",
    "GG: Resource Race",
    "WE2: Armadyl Lifetime Contribution",
    "WE2: Bandos Lifetime Contribution",
    "WE2: Armadyl PvP kills",
    "WE2: Bandos PvP kills",
    "Heist Guard Level",
    "Heist Robber Level",
    "CFP: 5 game average",
    "AF15: Cow Tipping",
    "AF15: Rats killed after the miniquest",
    "Clue Scrolls (easy)",
    "Clue Scrolls (medium)",
    "Clue Scrolls (hard)",
    "Clue Scrolls (elite)",
    "Clue Scrolls (master)",
)

OLDSCHOOL_ACTIVITY_NAMES: Final[tuple[str, ...]] = (
    "Clues",
    "Bounty Hunter",
    "B.H. Rogues",
)


def _check_names(names: tuple[str, ...], kind: str) -> None:
    if not names:
        raise ValueError(f"{kind} names must not be empty")
    seen: set[str] = set()
    for name in names:
        if name in seen:
            raise ValueError(f"Duplicate {kind} name: {name!r}")
        seen.add(name)


@dataclass(frozen=True)
class RankingSchema:
    """Positional layout of one hiscore table variant.

    Attributes:
        identifier: Name callers use to select the table (e.g. ``"ironman"``)
        endpoint: Web-service module serving it (the ``m=`` path segment)
        skill_names: Skill columns, in row order
        activity_names: Activity columns, in row order after the skills
    """

    identifier: str
    endpoint: str
    skill_names: tuple[str, ...]
    activity_names: tuple[str, ...]

    def __post_init__(self) -> None:
        # Accept any sequence but always store tuples so the order is fixed.
        object.__setattr__(self, "skill_names", tuple(self.skill_names))
        object.__setattr__(self, "activity_names", tuple(self.activity_names))
        _check_names(self.skill_names, "skill")
        _check_names(self.activity_names, "activity")

    @property
    def row_count(self) -> int:
        """Minimum number of rows a table must have to be decodable."""
        return len(self.skill_names) + len(self.activity_names)


DEFAULT: Final = RankingSchema("default", "hiscore", SKILL_NAMES, ACTIVITY_NAMES)
IRONMAN: Final = RankingSchema("ironman", "hiscore_ironman", SKILL_NAMES, ACTIVITY_NAMES)
HARDCORE_IRONMAN: Final = RankingSchema(
    "hardcore_ironman", "hiscore_hardcore_ironman", SKILL_NAMES, ACTIVITY_NAMES
)
OLDSCHOOL: Final = RankingSchema(
    "oldschool", "hiscore_oldschool", OLDSCHOOL_SKILL_NAMES, OLDSCHOOL_ACTIVITY_NAMES
)
OLDSCHOOL_IRONMAN: Final = RankingSchema(
    "oldschool_ironman",
    "hiscore_oldschool_ironman",
    OLDSCHOOL_SKILL_NAMES,
    OLDSCHOOL_ACTIVITY_NAMES,
)
OLDSCHOOL_ULTIMATE_IRONMAN: Final = RankingSchema(
    "oldschool_ultimate_ironman",
    "hiscore_oldschool_ultimate",
    OLDSCHOOL_SKILL_NAMES,
    OLDSCHOOL_ACTIVITY_NAMES,
)

SCHEMAS: Final[Mapping[str, RankingSchema]] = MappingProxyType(
    {
        schema.identifier: schema
        for schema in (
            DEFAULT,
            IRONMAN,
            HARDCORE_IRONMAN,
            OLDSCHOOL,
            OLDSCHOOL_IRONMAN,
            OLDSCHOOL_ULTIMATE_IRONMAN,
        )
    }
)


def get_schema(identifier: str) -> RankingSchema:
    """Return the registered schema for ``identifier``.

    Raises:
        UnknownSchemaError: If no table variant uses that identifier
    """
    try:
        return SCHEMAS[identifier]
    except KeyError:
        raise UnknownSchemaError(identifier) from None
