"""
Merriam-Webster connector.

Three upstream GETs, all single-attempt (no retries):
- lookup(term)         -> raw Collegiate JSON (list)
- autocomplete(prefix) -> raw `docs` list [{word, ref}, ...]
- popular_terms()      -> list of currently popular words

Any transport error, non-2xx status or undecodable body raises UpstreamError.
Parsing into Entry values happens in retrieval/entries.py, not here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from app.config import Settings

logger = logging.getLogger("MWConnector")


class UpstreamError(RuntimeError):
    """An upstream reference service failed or answered garbage."""


@dataclass
class DictionaryClient:
    api_key: str
    lookup_url: str
    popular_url: str
    autocomplete_url: str
    timeout: float = 10.0
    session: requests.Session = field(default_factory=requests.Session)

    # -------- construction --------

    @classmethod
    def from_settings(cls, settings: Settings) -> "DictionaryClient":
        return cls(
            api_key=settings.MW_API_KEY,
            lookup_url=settings.MW_API_URL,
            popular_url=settings.MW_POPULAR_URL,
            autocomplete_url=settings.MW_AUTOCOMPLETE_URL,
            timeout=settings.HTTP_TIMEOUT,
        )

    # -------- internals --------

    def _get_json(self, url: str, params: Optional[Dict[str, str]] = None) -> Any:
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise UpstreamError(f"GET {url} failed: {exc}") from exc

        if resp.status_code >= 400:
            logger.warning(
                "upstream returned non-2xx",
                extra={"status": resp.status_code, "url": url},
            )
            raise UpstreamError(f"GET {url} returned {resp.status_code}")

        try:
            return resp.json()
        except ValueError as exc:
            raise UpstreamError(f"GET {url} returned malformed JSON") from exc

    # -------- public API --------

    def lookup(self, term: str) -> Any:
        url = f"{self.lookup_url.rstrip('/')}/{quote(term, safe='')}"
        logger.info("MW lookup term=%r", term)
        return self._get_json(url, params={"key": self.api_key})

    def autocomplete(self, prefix: str) -> List[Dict[str, Any]]:
        logger.info("MW autocomplete prefix=%r", prefix)
        data = self._get_json(self.autocomplete_url, params={"search": prefix})
        docs = data.get("docs") if isinstance(data, dict) else None
        if not isinstance(docs, list):
            raise UpstreamError("autocomplete response has no `docs` list")
        return docs

    def popular_terms(self) -> List[str]:
        data = self._get_json(self.popular_url)
        inner = data.get("data") if isinstance(data, dict) else None
        words = inner.get("words") if isinstance(inner, dict) else None
        if not isinstance(words, list):
            raise UpstreamError("popular-terms response has no `data.words` list")
        return [w for w in words if isinstance(w, str)]
