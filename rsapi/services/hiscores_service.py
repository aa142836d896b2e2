"""Service layer for player and clan hiscore lookups."""

from __future__ import annotations

import logging
from urllib.parse import urlencode

from rsapi.client import ResourceFetcher
from rsapi.config import DEFAULT_BASE_URL
from rsapi.errors import DecodeFailure
from rsapi.models.hiscores import ClanMate, Player
from rsapi.utils.hiscores_parser import decode_player, parse_clan_members
from rsapi.utils.ranking_schema import RankingSchema, get_schema

logger = logging.getLogger(__name__)

CLAN_MEMBERS_PATH = "/m=clan-hiscores/members_lite.ws"


class HiscoresService:
    """Look up players on any hiscore table and list clan members."""

    def __init__(self, fetcher: ResourceFetcher, base_url: str = DEFAULT_BASE_URL) -> None:
        self._fetcher = fetcher
        self._base_url = base_url.rstrip("/")

    def player_url(self, display_name: str, schema: RankingSchema) -> str:
        query = urlencode({"player": display_name})
        return f"{self._base_url}/m={schema.endpoint}/index_lite.ws?{query}"

    def lookup_player(
        self, display_name: str, table: str | RankingSchema = "default"
    ) -> Player | DecodeFailure:
        """Fetch and decode a player, keeping the reason when decoding fails.

        Args:
            display_name: Player's display name (spaces allowed)
            table: Schema identifier such as ``"oldschool"``, or a schema

        Raises:
            UnknownSchemaError: If ``table`` names no registered hiscore table
        """
        schema = table if isinstance(table, RankingSchema) else get_schema(table)
        rows = self._fetcher.fetch_rows(self.player_url(display_name, schema))

        outcome = decode_player(rows, schema)
        if isinstance(outcome, DecodeFailure):
            logger.debug(
                "No %s hiscores for %r (%s: %s)",
                schema.identifier,
                display_name,
                outcome.kind.value,
                outcome.detail,
            )
        return outcome

    def player(self, display_name: str, table: str | RankingSchema = "default") -> Player | None:
        """Return the player's hiscores, or None if they are not ranked on ``table``."""
        outcome = self.lookup_player(display_name, table)
        if isinstance(outcome, DecodeFailure):
            return None
        return outcome

    def clan_members(self, clan_name: str) -> list[ClanMate]:
        query = urlencode({"clanName": clan_name})
        rows = self._fetcher.fetch_rows(f"{self._base_url}{CLAN_MEMBERS_PATH}?{query}")
        return parse_clan_members(rows)
