"""
Discord interaction protocol constants.

Only the numbers this server reads or writes are listed.
"""

from __future__ import annotations
from enum import IntEnum


class InteractionType(IntEnum):
    PING = 1
    APPLICATION_COMMAND = 2
    MESSAGE_COMPONENT = 3
    APPLICATION_COMMAND_AUTOCOMPLETE = 4


class ResponseType(IntEnum):
    PONG = 1
    CHANNEL_MESSAGE_WITH_SOURCE = 4
    UPDATE_MESSAGE = 7
    APPLICATION_COMMAND_AUTOCOMPLETE_RESULT = 8


class ComponentType(IntEnum):
    ACTION_ROW = 1
    BUTTON = 2
    STRING_SELECT = 3


class OptionType(IntEnum):
    STRING = 3
    BOOLEAN = 5


BUTTON_STYLE_PRIMARY = 1

# Message flag: only the invoking user sees the message
EPHEMERAL = 1 << 6


def ephemeral_message(content: str) -> dict:
    return {
        "type": ResponseType.CHANNEL_MESSAGE_WITH_SOURCE,
        "data": {"content": content, "flags": EPHEMERAL},
    }
