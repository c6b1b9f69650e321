"""
Connectors package exports.

Factories:
- make_dictionary_client(settings) -> DictionaryClient

These are thin adapters; heavy logic lives in each module.
"""

from __future__ import annotations

from app.config import Settings
from .merriam_webster import DictionaryClient, UpstreamError
from .discord import register_commands


def make_dictionary_client(settings: Settings) -> DictionaryClient:
    """
    Build a DictionaryClient from settings.
    Env:
      MW_API_KEY, MW_API_URL, MW_POPULAR_URL, MW_AUTOCOMPLETE_URL, HTTP_TIMEOUT
    """
    return DictionaryClient.from_settings(settings)


__all__ = ["DictionaryClient", "UpstreamError", "make_dictionary_client", "register_commands"]
