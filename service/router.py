"""
Interaction router.

One verified webhook call = one transition; nothing is held between calls.

    PING                 -> PONG
    APPLICATION_COMMAND  -> first page of /define (new message)
    MESSAGE_COMPONENT    -> page from the token (in-place update)
    AUTOCOMPLETE         -> popular terms or cached suggestions
    anything else        -> "Unknown command."

Every branch returns exactly one response body. Upstream failures are caught
at each boundary and degraded to an ephemeral message (or no choices).
"""

from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from retrieval.cache import MAX_SUGGESTIONS, LookupCache
from service.interactions import InteractionType, ResponseType, ephemeral_message
from service.response_builder import ResponseBuilder
from service.tokens import token_from_component

logger = logging.getLogger("Router")

NO_TERM = "You didn't enter a term."
FAILED = "Something went wrong, please try again later."
UNKNOWN = "Unknown command."
POPULAR_PROMPT = "Type your query, or select a current top Merriam-Webster lookup:"
MAX_POPULAR = MAX_SUGGESTIONS - 1


def _option(data: Dict[str, Any], name: str) -> Any:
    for opt in data.get("options") or []:
        if isinstance(opt, dict) and opt.get("name") == name:
            return opt.get("value")
    return None


def _choices(words: List[str]) -> List[Dict[str, str]]:
    return [{"name": w, "value": w} for w in words]


class CommandRouter:
    def __init__(self, cache: LookupCache, builder: ResponseBuilder) -> None:
        self.cache = cache
        self.builder = builder

    # ---------- entry point ----------

    def handle(self, body: Dict[str, Any]) -> Dict[str, Any]:
        kind = body.get("type")
        data = body.get("data") or {}

        if kind == InteractionType.PING:
            return {"type": ResponseType.PONG}
        if kind == InteractionType.APPLICATION_COMMAND:
            return self._command(data)
        if kind == InteractionType.MESSAGE_COMPONENT:
            return self._component(data)
        if kind == InteractionType.APPLICATION_COMMAND_AUTOCOMPLETE:
            return self._autocomplete(data)

        logger.info("unhandled interaction type=%r", kind)
        return ephemeral_message(UNKNOWN)

    # ---------- branches ----------

    def _command(self, data: Dict[str, Any]) -> Dict[str, Any]:
        term = _option(data, "term")
        hide = bool(_option(data, "hide"))
        if not term:
            return ephemeral_message(NO_TERM)

        try:
            message = self.builder.build(term, 0, hide)
        except Exception as exc:
            logger.exception("/define term=%r failed: %s", term, exc)
            return ephemeral_message(FAILED)

        return {"type": ResponseType.CHANNEL_MESSAGE_WITH_SOURCE, "data": message}

    def _component(self, data: Dict[str, Any]) -> Dict[str, Any]:
        try:
            token = token_from_component(data)
            message = self.builder.build(token.term, token.page)
        except Exception as exc:
            logger.exception("page turn custom_id=%r values=%r failed: %s",
                             data.get("custom_id"), data.get("values"), exc)
            return ephemeral_message(FAILED)

        logger.debug("page turn term=%r page=%d action=%s", token.term, token.page, token.action.value)
        return {"type": ResponseType.UPDATE_MESSAGE, "data": message}

    def _autocomplete(self, data: Dict[str, Any]) -> Dict[str, Any]:
        query: Optional[str] = _option(data, "term")
        try:
            if not query:
                popular = self.cache.popular_terms()[:MAX_POPULAR]
                choices = [{"name": POPULAR_PROMPT, "value": ""}] + _choices(popular)
            else:
                choices = _choices(list(self.cache.autocomplete(query)[:MAX_SUGGESTIONS]))
        except Exception as exc:
            logger.exception("autocomplete query=%r failed: %s", query, exc)
            choices = []

        return {
            "type": ResponseType.APPLICATION_COMMAND_AUTOCOMPLETE_RESULT,
            "data": {"choices": choices},
        }
