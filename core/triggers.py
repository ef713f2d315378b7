"""Reaction and gif trigger tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from core.models import TriggerKind

__all__ = ["TriggerTables"]


@dataclass(frozen=True)
class TriggerTables:
    """Bare token -> payload lookups.

    reacts: payload is text (usually an emoji) sent to the channel.
    gifs:   payload is an image URL posted as an embed.
    """
    reacts: Mapping[str, str] = field(default_factory=dict)
    gifs: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "reacts", MappingProxyType(dict(self.reacts)))
        object.__setattr__(self, "gifs", MappingProxyType(dict(self.gifs)))

    def lookup(self, token: str) -> Optional[tuple[TriggerKind, str]]:
        """Reacts take precedence over gifs for the same token."""
        payload = self.reacts.get(token)
        if isinstance(payload, str):
            return TriggerKind.REACTION, payload
        payload = self.gifs.get(token)
        if isinstance(payload, str):
            return TriggerKind.GIF, payload
        return None

    def __len__(self) -> int:
        return len(self.reacts) + len(self.gifs)
