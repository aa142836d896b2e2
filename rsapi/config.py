"""Centralized configuration for the RuneScape web-services client."""

from __future__ import annotations

import logging
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Populate os.environ from a local .env before the settings singleton reads it.
load_dotenv()

DEFAULT_BASE_URL = "http://services.runescape.com"
DEFAULT_USER_AGENT = "rsapi/0.1 (+local)"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_LOG_LEVEL = "INFO"


class ClientSettings(BaseSettings):
    """Typed configuration surface built on top of ``pydantic-settings``."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        alias="RSAPI_BASE_URL",
        description="Root of the web services; module paths such as /m=hiscore are appended.",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        alias="RSAPI_USER_AGENT",
        description="User-Agent header sent with every request.",
    )
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        alias="RSAPI_TIMEOUT_SECONDS",
        gt=0,
        description="Per-request timeout applied by the HTTP fetcher.",
    )
    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL,
        alias="LOG_LEVEL",
        description="Root logging level (e.g. INFO, DEBUG, WARNING).",
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.strip().rstrip("/")

    @property
    def log_level_numeric(self) -> int:
        """Translate ``log_level`` into the numeric constant expected by logging."""

        candidate = logging.getLevelName(self.log_level.upper())
        if isinstance(candidate, int):
            return candidate
        return logging.INFO


@lru_cache(maxsize=1)
def get_settings() -> ClientSettings:
    """Return a cached instance of :class:`ClientSettings`."""

    return ClientSettings()


__all__ = [
    "ClientSettings",
    "DEFAULT_BASE_URL",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_USER_AGENT",
    "get_settings",
]
