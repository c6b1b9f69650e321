"""
Interaction token codec.

A token is the whole pagination state, carried by Discord in a button's
`custom_id` or a select option's `value`:

    "<term>:<page>:<action>"      e.g. "run:2:next"

The server keeps no session; every page turn is rebuilt from the token alone.
Range checks on `page` are the response builder's job, not this module's.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

DELIMITER = ":"


class TokenError(ValueError):
    pass


class Action(str, Enum):
    FIRST = "first"
    PREV = "prev"
    NEXT = "next"
    LAST = "last"
    SELECT = "select"
    INITIAL = "initial"


@dataclass(frozen=True)
class InteractionToken:
    term: str
    page: int
    action: Action = Action.INITIAL


def encode_token(token: InteractionToken) -> str:
    return DELIMITER.join((token.term, str(token.page), token.action.value))


def decode_token(value: str) -> InteractionToken:
    # page and action come off the right; the term itself may contain ":"
    parts = (value or "").rsplit(DELIMITER, 2)
    if len(parts) != 3 or not parts[0]:
        raise TokenError(f"malformed token: {value!r}")

    term, page, action = parts
    try:
        page_no = int(page)
    except ValueError:
        raise TokenError(f"non-integer page in token: {value!r}") from None
    try:
        act = Action(action)
    except ValueError:
        raise TokenError(f"unknown action in token: {value!r}") from None
    return InteractionToken(term=term, page=page_no, action=act)


def token_from_component(data: Dict[str, Any]) -> InteractionToken:
    """Select menus carry the token as the chosen value; buttons as custom_id."""
    values = data.get("values") or []
    raw = values[0] if values else data.get("custom_id")
    if not isinstance(raw, str):
        raise TokenError("component interaction carries no token")
    return decode_token(raw)
