"""
Configuration loader.

- Reads env vars (.env supported by deploy)
- Provides strongly-typed Settings
- Holds upstream endpoints & registration knobs
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Optional


def _get(name: str, default: Optional[str] = None) -> str:
    v = os.environ.get(name, default)
    if v is None:
        raise RuntimeError(f"Missing required env: {name}")
    return v


@dataclass(frozen=True)
class Settings:
    # Discord application
    DISCORD_PUBLIC_KEY: str      # hex Ed25519 key; required by the web app
    DISCORD_APP_ID: str
    DISCORD_BOT_TOKEN: str
    DISCORD_API_URL: str

    # Merriam-Webster
    MW_API_KEY: str
    MW_API_URL: str
    MW_POPULAR_URL: str
    MW_AUTOCOMPLETE_URL: str

    # Upstream HTTP
    HTTP_TIMEOUT: float

    # Startup
    REGISTER_COMMANDS: bool

    # Logging
    LOG_DIR: str                 # empty -> console only
    LOG_LEVEL: str


def _to_bool(s: str | bool | None, default: bool = False) -> bool:
    if s is None:
        return default
    if isinstance(s, bool):
        return s
    return s.strip().lower() in {"1", "true", "yes", "on"}


def load_settings(override: dict | None = None) -> Settings:
    o = override or {}
    return Settings(
        DISCORD_PUBLIC_KEY=o.get("DISCORD_PUBLIC_KEY", _get("DISCORD_PUBLIC_KEY", "")),
        DISCORD_APP_ID=o.get("DISCORD_APP_ID", _get("DISCORD_APP_ID", "")),
        DISCORD_BOT_TOKEN=o.get("DISCORD_BOT_TOKEN", _get("DISCORD_BOT_TOKEN", "")),
        DISCORD_API_URL=o.get("DISCORD_API_URL", _get("DISCORD_API_URL", "https://discord.com/api/v10")),

        MW_API_KEY=o.get("MW_API_KEY", _get("MW_API_KEY", "")),
        MW_API_URL=o.get(
            "MW_API_URL",
            _get("MW_API_URL", "https://dictionaryapi.com/api/v3/references/collegiate/json"),
        ),
        MW_POPULAR_URL=o.get(
            "MW_POPULAR_URL",
            _get("MW_POPULAR_URL", "https://www.merriam-webster.com/lapi/v1/mwol-mp/get-lookups-data-homepage"),
        ),
        MW_AUTOCOMPLETE_URL=o.get(
            "MW_AUTOCOMPLETE_URL",
            _get("MW_AUTOCOMPLETE_URL", "https://www.merriam-webster.com/lapi/v1/mwol-search/autocomplete"),
        ),

        HTTP_TIMEOUT=float(o.get("HTTP_TIMEOUT", os.environ.get("HTTP_TIMEOUT", 10))),

        REGISTER_COMMANDS=_to_bool(o.get("REGISTER_COMMANDS", os.environ.get("REGISTER_COMMANDS")), True),

        LOG_DIR=o.get("LOG_DIR", os.environ.get("LOG_DIR", "logs")),
        LOG_LEVEL=o.get("LOG_LEVEL", os.environ.get("LOG_LEVEL", "INFO")).upper(),
    )
