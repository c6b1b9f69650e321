"""
Container: creates and holds singletons.

Provides:
- Verify key for inbound signatures
- Upstream dictionary client (connectors/merriam_webster.py)
- Lookup caches (retrieval/cache.py), the only mutable process state
- ResponseBuilder + CommandRouter wired to those caches
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from nacl.signing import VerifyKey

from app.config import Settings
from connectors import make_dictionary_client
from retrieval.cache import DictionarySource, LookupCache
from service.response_builder import ResponseBuilder
from service.router import CommandRouter
from service.security import load_verify_key


@dataclass
class Container:
    settings: Settings
    # Tests inject a fake; production builds one from settings
    client: Optional[DictionarySource] = None
    # Filled during __post_init__
    verify_key: VerifyKey = field(init=False)
    cache: LookupCache = field(init=False)
    builder: ResponseBuilder = field(init=False)
    router: CommandRouter = field(init=False)

    def __post_init__(self):
        self.verify_key = load_verify_key(self.settings.DISCORD_PUBLIC_KEY)

        if self.client is None:
            self.client = make_dictionary_client(self.settings)

        self.cache = LookupCache(self.client)
        self.builder = ResponseBuilder(self.cache)
        self.router = CommandRouter(self.cache, self.builder)
