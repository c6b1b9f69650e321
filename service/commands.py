"""
Command surface registered with Discord at startup.
"""

from __future__ import annotations
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Tuple

from service.interactions import OptionType


@dataclass(frozen=True)
class CommandOption:
    name: str
    description: str
    type: int
    required: bool = False
    autocomplete: bool = False


@dataclass(frozen=True)
class CommandSpec:
    name: str
    description: str
    options: Tuple[CommandOption, ...] = ()
    # 0 = guild install, 1 = user install
    integration_types: Tuple[int, ...] = (0, 1)
    # 0 = guild, 2 = private channel
    contexts: Tuple[int, ...] = (0, 2)

    def to_json(self) -> Dict[str, Any]:
        out = asdict(self)
        out["options"] = [asdict(o) for o in self.options]
        out["integration_types"] = list(self.integration_types)
        out["contexts"] = list(self.contexts)
        return out


DEFINE = CommandSpec(
    name="define",
    description="Look up a word's definition",
    options=(
        CommandOption(
            name="term",
            description="The word to define",
            type=OptionType.STRING,
            required=True,
            autocomplete=True,
        ),
        CommandOption(
            name="hide",
            description="Hide command output",
            type=OptionType.BOOLEAN,
        ),
    ),
)

COMMANDS: List[CommandSpec] = [DEFINE]


def commands_payload() -> List[Dict[str, Any]]:
    return [c.to_json() for c in COMMANDS]
