"""
Dictionary entry model.

Turns the Merriam-Webster Collegiate JSON into immutable values:

- Entry: one sense record (headword, part of speech, body)
- LookupResult: ordered tuple of Entry; the position is the "page"

The body of an entry is resolved once, here, into one of three variants:
    Definitions(items)              short definitions present
    CrossReference(label, target)   no short definitions, but a `cxs` block
    TitleOnly()                     nothing else usable

Upstream items without a headword (e.g. the plain spelling-suggestion strings
the API returns for unknown words) are dropped, so every Entry has a title.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

# Syllable marker used inside MW headwords ("dic*tio*nary")
SYLLABLE_MARK = "*"


@dataclass(frozen=True)
class Definitions:
    items: Tuple[str, ...]


@dataclass(frozen=True)
class CrossReference:
    label: str
    target: str

    @property
    def text(self) -> str:
        return f"{self.label} {self.target}"


@dataclass(frozen=True)
class TitleOnly:
    pass


Body = Union[Definitions, CrossReference, TitleOnly]


@dataclass(frozen=True)
class Entry:
    title: str                   # raw headword, syllable marks included
    label: Optional[str] = None  # functional label ("noun", "verb", ...)
    body: Body = TitleOnly()

    @property
    def plain_title(self) -> str:
        return self.title.replace(SYLLABLE_MARK, "")

    @property
    def display_title(self) -> str:
        return self.title.replace(SYLLABLE_MARK, "·")

    @property
    def summary(self) -> Optional[str]:
        """Single-line body text, as used for select option descriptions."""
        if isinstance(self.body, Definitions):
            return ", ".join(self.body.items)
        if isinstance(self.body, CrossReference):
            return self.body.text
        return None

    @property
    def bulleted(self) -> Optional[str]:
        """Multi-line body text, as used for the embed description."""
        if isinstance(self.body, Definitions):
            return "\n".join(f"• {d}" for d in self.body.items)
        if isinstance(self.body, CrossReference):
            return self.body.text
        return None


LookupResult = Tuple[Entry, ...]


def _parse_body(raw: dict) -> Body:
    shortdefs = raw.get("shortdef")
    if isinstance(shortdefs, list):
        items = tuple(s for s in shortdefs if isinstance(s, str) and s)
        if items:
            return Definitions(items)

    cxs = raw.get("cxs")
    if isinstance(cxs, list) and cxs and isinstance(cxs[0], dict):
        label = cxs[0].get("cxl")
        tis = cxs[0].get("cxtis")
        target = None
        if isinstance(tis, list) and tis and isinstance(tis[0], dict):
            target = tis[0].get("cxt")
        if isinstance(label, str) and isinstance(target, str):
            return CrossReference(label=label, target=target)

    return TitleOnly()


def parse_entry(raw: Any) -> Optional[Entry]:
    """Parse one upstream item; None when it has no headword."""
    if not isinstance(raw, dict):
        return None
    hwi = raw.get("hwi")
    hw = hwi.get("hw") if isinstance(hwi, dict) else None
    if not isinstance(hw, str) or not hw:
        return None
    fl = raw.get("fl")
    return Entry(
        title=hw,
        label=fl if isinstance(fl, str) and fl else None,
        body=_parse_body(raw),
    )


def parse_lookup(payload: Any) -> LookupResult:
    """Parse a full lookup response. Anything but a JSON list yields ()."""
    if not isinstance(payload, list):
        return ()
    entries = (parse_entry(item) for item in payload)
    return tuple(e for e in entries if e is not None)
