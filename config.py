"""Bot configuration.

The command/trigger configuration lives in a JSON file (see
config.example.json). The Discord token is read from the environment so it
never ends up in that file.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from core.registry import CommandRegistry
from core.triggers import TriggerTables
from core.validator import validate_config
from utils.errors import ConfigError

# Resolve file paths relative to this script
BASE_DIR = Path(__file__).resolve().parent

CONFIG_PATH = Path(os.environ.get("BOT_CONFIG", BASE_DIR / "config.json"))

DISCORD_TOKEN = os.environ.get("DISCORD_TOKEN", "")


@dataclass(frozen=True)
class BotConfig:
    """Validated configuration. Immutable after startup."""
    sign: str
    debug: bool
    masters: tuple[str, ...]
    commands: CommandRegistry
    triggers: TriggerTables
    subprocesses: tuple[str, ...] = ()
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "BotConfig":
        """Validate `raw` and build the config. Raises ConfigError."""
        validate_config(raw)
        # masters is only type-checked when at least one command exists
        masters = raw.get("masters")
        if not isinstance(masters, (list, tuple)):
            masters = ()
        return cls(
            sign=raw["sign"],
            debug=raw["debug"],
            masters=tuple(str(m) for m in masters),
            commands=CommandRegistry.from_config(raw["commands"]),
            triggers=TriggerTables(
                reacts=raw.get("reacts", {}),
                gifs=raw.get("gifs", {}),
            ),
            subprocesses=tuple(raw.get("subprocesses", ())),
            raw=raw,
        )


def load_config(path: str | Path = CONFIG_PATH) -> BotConfig:
    """Read, validate and build the configuration from a JSON file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError) as exc:
        raise ConfigError(
            f"Failed to read {path}. Either it is not present or it is corrupted: {exc}",
            cause=exc,
        ) from exc
    return BotConfig.from_dict(raw)
