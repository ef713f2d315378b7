"""Value types passed between the router, the executor and command handlers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, Union

if TYPE_CHECKING:
    from config import BotConfig


@dataclass(frozen=True)
class InboundMessage:
    """One inbound chat event, reduced to what routing needs."""
    text: str
    channel_id: str
    user_id: str
    timestamp: str
    subtype: Optional[str] = None
    is_direct: bool = False
    sender_is_self: bool = False


class TriggerKind(Enum):
    REACTION = "reaction"
    GIF = "gif"


@dataclass(frozen=True)
class Ignored:
    reason: str


@dataclass(frozen=True)
class CommandInvocation:
    command_name: str
    original_token: str
    args: tuple[str, ...]


@dataclass(frozen=True)
class TriggerMatch:
    kind: TriggerKind
    token: str
    payload: str
    delete_original: bool = False


@dataclass(frozen=True)
class TriggerScan:
    """Result of the fallback scan; `matches` is empty when nothing fired."""
    matches: tuple[TriggerMatch, ...] = ()


RoutingDecision = Union[Ignored, CommandInvocation, TriggerScan]


@dataclass(frozen=True)
class CommandContext:
    """Context bundle handed to every command handler.

    `command` is the token as the user typed it, before alias resolution.
    """
    config: "BotConfig"
    command: str
    masters: tuple[str, ...]


@dataclass(frozen=True)
class SendOutcome:
    """Result of one fire-and-forget send (reaction, gif, delete, reply)."""
    action: str
    ok: bool
    error: Optional[BaseException] = None
    result: Any = None
