"""Discord event handlers.

Turns discord.py objects into InboundMessage, asks the router what to do and
hands the decision to the executor.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import discord

from core.models import CommandInvocation, Ignored, InboundMessage, TriggerScan
from core.router import NOT_ADDRESSED
from utils.errors import log_error
from utils.logging import log, log_debug

if TYPE_CHECKING:
    from core.executor import ActionExecutor
    from core.router import MessageRouter

__all__ = ["to_inbound", "on_message", "format_command_error"]

# Discord message types that count as "no subtype".
_PLAIN_TYPES = frozenset({discord.MessageType.default, discord.MessageType.reply})


def _subtype(message: discord.Message) -> str | None:
    """None for plain messages, else the MessageType name (e.g. "pins_add").

    Discord has no /me message type, so no name produced here is in
    ACCEPTED_SUBTYPES: every non-plain Discord message is ignored.
    """
    if message.type in _PLAIN_TYPES:
        return None
    return message.type.name


def to_inbound(message: discord.Message, client: discord.Client) -> InboundMessage:
    me = client.user
    return InboundMessage(
        text=message.content or "",
        channel_id=str(message.channel.id),
        user_id=str(message.author.id),
        timestamp=message.created_at.isoformat(),
        subtype=_subtype(message),
        is_direct=isinstance(message.channel, discord.DMChannel),
        sender_is_self=me is not None and message.author.id == me.id,
    )


def format_command_error(command: str, exc: BaseException) -> str:
    return f"Failed to run command `{command}`. Here's what I know: ```{exc}```"


def _channel_name(channel) -> str:
    if isinstance(channel, discord.DMChannel):
        return "DM"
    return getattr(channel, "name", None) or str(channel.id)


async def on_message(
    message: discord.Message,
    client: discord.Client,
    router: "MessageRouter",
    executor: "ActionExecutor",
) -> None:
    """
    Main message handler.
    Order:
    1) Route (pure); drop self / subtype / empty silently
    2) Log everything else, including messages that are not addressed to us
    3) Run the matched command, or apply the matched triggers
    """
    inbound = to_inbound(message, client)
    decision = router.route(inbound)

    if isinstance(decision, Ignored) and decision.reason != NOT_ADDRESSED:
        return

    kind = inbound.subtype or "message"
    log(f"Message: [{kind}]<{_channel_name(message.channel)}> {message.author.name}: {inbound.text}")

    if isinstance(decision, CommandInvocation):
        log_debug(f"[Router] {decision.original_token} -> {decision.command_name} {list(decision.args)}")
        try:
            await executor.invoke(decision, message, inbound.timestamp)
        except Exception as exc:
            log_error(f"Command `{decision.command_name}` failed.", exc)
            executor.reply_error(message.channel, format_command_error(decision.command_name, exc))
        return

    if isinstance(decision, TriggerScan) and decision.matches:
        log_debug(f"[Router] triggers: {[m.token for m in decision.matches]}")
        executor.apply_triggers(decision, message)
