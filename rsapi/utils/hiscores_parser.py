"""Parser utilities for the hiscores CSV endpoints.

This module turns the header-less row tables served by ``index_lite.ws`` and
``members_lite.ws`` into typed models. Everything here is pure: the rows are
fetched elsewhere and nothing is cached.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from rsapi.errors import DecodeFailure, DecodeFailureKind
from rsapi.models.hiscores import Activity, ClanMate, Player, Skill
from rsapi.utils.ranking_schema import RankingSchema

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"-?\d+")

SKILL_FIELDS = ("rank", "level", "experience")
ACTIVITY_FIELDS = ("rank", "score")
CLAN_MEMBER_CELLS = 4


def _parse_int(cell: str, field: str) -> int:
    """Parse a strictly decimal integer cell, surrounding whitespace allowed."""
    text = cell.strip()
    if not _INTEGER_RE.fullmatch(text):
        raise ValueError(f"{field} is not an integer: {cell!r}")
    return int(text)


def _read_fields(row: Sequence[str], fields: tuple[str, ...]) -> dict[str, int]:
    if len(row) < len(fields):
        raise ValueError(f"expected {len(fields)} cells, got {len(row)}")
    return {field: _parse_int(cell, field) for field, cell in zip(fields, row)}


def decode_player(
    rows: Sequence[Sequence[str]], schema: RankingSchema
) -> Player | DecodeFailure:
    """Decode a hiscore row table positionally using ``schema``.

    Rows ``0..M-1`` hold ``rank,level,experience`` for each skill and the next
    ``A`` rows hold ``rank,score`` for each activity. Trailing rows beyond
    ``M + A`` are ignored.

    Args:
        rows: Row table as returned by the resource fetcher
        schema: Column layout of the table the rows came from

    Returns:
        A fully populated Player, or a DecodeFailure describing why the table
        could not be used. A partially decoded player is never returned.
    """
    if len(rows) < schema.row_count:
        return DecodeFailure(
            kind=DecodeFailureKind.INSUFFICIENT_ROWS,
            detail=f"expected at least {schema.row_count} rows, got {len(rows)}",
        )

    skill_count = len(schema.skill_names)
    skills: dict[str, Skill] = {}
    activities: dict[str, Activity] = {}
    index = 0

    try:
        for index, name in enumerate(schema.skill_names):
            skills[name] = Skill(**_read_fields(rows[index], SKILL_FIELDS))

        for offset, name in enumerate(schema.activity_names):
            index = skill_count + offset
            activities[name] = Activity(**_read_fields(rows[index], ACTIVITY_FIELDS))
    except ValueError as exc:
        # pydantic's ValidationError is a ValueError too, so range violations
        # (e.g. a rank of -2) land here alongside unparseable cells.
        return DecodeFailure(
            kind=DecodeFailureKind.MALFORMED_FIELD,
            detail=f"row {index}: {exc}",
        )

    return Player(skills=skills, activities=activities)


def parse_clan_members(rows: Sequence[Sequence[str]]) -> list[ClanMate]:
    """Parse the ``members_lite.ws`` table into clan members.

    The first row is a column header and is skipped. Rows that do not have
    exactly four cells or fail to parse are dropped.
    """
    members: list[ClanMate] = []

    for row in rows[1:]:
        if len(row) != CLAN_MEMBER_CELLS:
            continue

        name, rank, experience, kills = row
        try:
            members.append(
                ClanMate(
                    # Display names use non-breaking spaces on the wire.
                    name=name.replace("\xa0", " ").strip(),
                    rank=rank.strip(),
                    experience=_parse_int(experience, "experience"),
                    kills=_parse_int(kills, "kills"),
                )
            )
        except ValueError:
            logger.debug("Skipping malformed clan member row: %r", row)

    return members
