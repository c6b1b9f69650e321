"""
Retrieval package convenience exports.

Provides:
- Entry model + parser for Merriam-Webster lookups
- LookupCache (per-term results, per-prefix suggestions)
"""

from __future__ import annotations

from .entries import (
    CrossReference,
    Definitions,
    Entry,
    LookupResult,
    TitleOnly,
    parse_entry,
    parse_lookup,
)
from .cache import LookupCache

__all__ = [
    "CrossReference",
    "Definitions",
    "Entry",
    "LookupCache",
    "LookupResult",
    "TitleOnly",
    "parse_entry",
    "parse_lookup",
]
