"""
Lookup caches.

LookupCache holds two process-local mappings:
- results:     raw term   -> LookupResult
- suggestions: raw prefix -> tuple of up to 25 autocomplete words

Contract:
    resolve(term)        hit -> stored value, no network
                         miss -> one upstream fetch, parse, store, return
    autocomplete(prefix) same, filtered to MW's "owl-combined" provenance

Nothing is ever evicted. There are no locks: two threads missing on the same
key both fetch and both write; the last write wins and the data is equivalent.
Upstream failures propagate (UpstreamError) and leave the cache untouched.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Protocol, Tuple

from retrieval.entries import LookupResult, parse_lookup

logger = logging.getLogger("LookupCache")

MAX_SUGGESTIONS = 25
SUGGESTION_REF = "owl-combined"


class DictionarySource(Protocol):
    def lookup(self, term: str) -> Any: ...
    def autocomplete(self, prefix: str) -> List[Dict[str, Any]]: ...
    def popular_terms(self) -> List[str]: ...


@dataclass
class LookupCache:
    source: DictionarySource
    results: Dict[str, LookupResult] = field(default_factory=dict)
    suggestions: Dict[str, Tuple[str, ...]] = field(default_factory=dict)

    def resolve(self, term: str) -> LookupResult:
        cached = self.results.get(term)
        if cached is not None:
            return cached

        result = parse_lookup(self.source.lookup(term))
        self.results[term] = result
        size = self.stats()
        logger.info(
            "cached %d entries for term=%r (cache: %d terms, %d prefixes)",
            len(result), term, size["terms"], size["prefixes"],
        )
        return result

    def autocomplete(self, prefix: str) -> Tuple[str, ...]:
        cached = self.suggestions.get(prefix)
        if cached is not None:
            return cached

        docs = self.source.autocomplete(prefix)
        words = tuple(
            d["word"]
            for d in docs
            if isinstance(d, dict) and d.get("ref") == SUGGESTION_REF and isinstance(d.get("word"), str)
        )[:MAX_SUGGESTIONS]
        self.suggestions[prefix] = words
        return words

    def popular_terms(self) -> List[str]:
        # Homepage trends move; not cached.
        return self.source.popular_terms()

    def stats(self) -> Dict[str, int]:
        return {"terms": len(self.results), "prefixes": len(self.suggestions)}
