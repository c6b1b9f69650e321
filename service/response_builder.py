from __future__ import annotations

from typing import Any, Dict, List, Optional
from urllib.parse import quote

from retrieval.cache import LookupCache
from retrieval.entries import Entry, LookupResult
from service.interactions import BUTTON_STYLE_PRIMARY, EPHEMERAL, ComponentType
from service.tokens import Action, InteractionToken, encode_token

MAX_TEXT = 100
ELLIPSIS = "…"

ENTRY_URL = "https://www.merriam-webster.com/dictionary/"
FOOTER = "Powered by Merriam-Webster"
NOT_FOUND = "Not found"
SELECT_ID = "select"
SELECT_PLACEHOLDER = "Choose a definition"


def trim(text: Optional[str], limit: int = MAX_TEXT) -> Optional[str]:
    if text is None or len(text) <= limit:
        return text
    return text[: limit - 1] + ELLIPSIS


class ResponseBuilder:
    """
    Renders one page of a lookup as Discord message data.

    - NO routing here; the router decides which page to show.
    - `hide=None` marks a page-turn: visibility flags are left out so the
      edited message keeps whatever visibility it was created with.
    """

    def __init__(self, cache: LookupCache) -> None:
        self.cache = cache

    # ------------------------------------------------------------------
    # PUBLIC ENTRYPOINT
    # ------------------------------------------------------------------

    def build(self, term: str, page: int, hide: Optional[bool] = None) -> Dict[str, Any]:
        result = self.cache.resolve(term)

        if not 0 <= page < len(result):
            data: Dict[str, Any] = {"content": NOT_FOUND}
            if hide is not None:
                data["flags"] = EPHEMERAL
            return data

        data = {
            "embeds": [self._embed(result[page])],
            "components": [
                self._pagination_row(term, page, result),
                self._select_row(term, page, result),
            ],
        }
        if hide is not None:
            data["flags"] = EPHEMERAL if hide else 0
        return data

    # ------------------------------------------------------------------
    # PIECES
    # ------------------------------------------------------------------

    @staticmethod
    def _heading(entry: Entry, title: str) -> str:
        return f"{title} ({entry.label})" if entry.label else title

    def _embed(self, entry: Entry) -> Dict[str, Any]:
        embed: Dict[str, Any] = {
            "title": self._heading(entry, entry.display_title),
            "url": ENTRY_URL + quote(entry.plain_title, safe=""),
            "footer": {"text": FOOTER},
        }
        if entry.bulleted:
            embed["description"] = entry.bulleted
        return embed

    @staticmethod
    def _button(term: str, target: int, action: Action, label: str, disabled: bool) -> Dict[str, Any]:
        return {
            "type": ComponentType.BUTTON,
            "style": BUTTON_STYLE_PRIMARY,
            "label": trim(label),
            "custom_id": encode_token(InteractionToken(term, target, action)),
            "disabled": disabled,
        }

    def _pagination_row(self, term: str, page: int, result: LookupResult) -> Dict[str, Any]:
        last = len(result) - 1
        has_prev = page - 1 >= 0
        has_next = page + 1 <= last
        return {
            "type": ComponentType.ACTION_ROW,
            "components": [
                self._button(term, 0, Action.FIRST, "1", page == 0),
                self._button(
                    term, page - 1, Action.PREV,
                    f"Previous ({page})" if has_prev else "Previous",
                    not has_prev,
                ),
                self._button(
                    term, page + 1, Action.NEXT,
                    f"Next ({page + 2})" if has_next else "Next",
                    not has_next,
                ),
                self._button(term, last, Action.LAST, str(len(result)), page == last),
            ],
        }

    def _option(self, term: str, index: int, entry: Entry, selected: bool) -> Dict[str, Any]:
        option: Dict[str, Any] = {
            "label": trim(f"{index + 1}. {self._heading(entry, entry.plain_title)}"),
            "value": encode_token(InteractionToken(term, index, Action.SELECT)),
            "default": selected,
        }
        if entry.summary:
            option["description"] = trim(entry.summary)
        return option

    def _select_row(self, term: str, page: int, result: LookupResult) -> Dict[str, Any]:
        options: List[Dict[str, Any]] = [
            self._option(term, i, entry, i == page) for i, entry in enumerate(result)
        ]
        return {
            "type": ComponentType.ACTION_ROW,
            "components": [{
                "type": ComponentType.STRING_SELECT,
                "custom_id": SELECT_ID,
                "placeholder": SELECT_PLACEHOLDER,
                "options": options,
            }],
        }
