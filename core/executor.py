"""Carries out routing decisions against Discord.

Command handlers are awaited so their failures can be reported. Everything
else (reactions, gif posts, origin deletion, error replies) is scheduled as a
background task: the router never waits on it, but each task reports a
SendOutcome to the `on_outcome` hook.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Mapping, Optional

import discord

from core.models import (
    CommandContext,
    CommandInvocation,
    SendOutcome,
    TriggerKind,
    TriggerScan,
)
from utils.errors import CommandError, log_error
from utils.logging import log_debug

if TYPE_CHECKING:
    from config import BotConfig

__all__ = ["CommandHandler", "ActionExecutor", "log_outcome"]

# async def handler(client, channel, user, args, timestamp, context)
CommandHandler = Callable[..., Awaitable[Any]]


def log_outcome(outcome: SendOutcome) -> None:
    """Default outcome hook: failures are logged, successes only in debug mode."""
    if outcome.ok:
        log_debug(f"[Send] {outcome.action}: ok")
    else:
        log_error(f"[Send] {outcome.action} failed.", outcome.error)


class ActionExecutor:
    """Side-effect half of routing."""

    def __init__(
        self,
        client: discord.Client,
        config: "BotConfig",
        handlers: Mapping[str, CommandHandler],
        *,
        on_outcome: Optional[Callable[[SendOutcome], None]] = log_outcome,
    ):
        self.client = client
        self.config = config
        self.handlers = dict(handlers)
        self.on_outcome = on_outcome
        self._pending: set[asyncio.Task] = set()

    # =========================
    # Commands
    # =========================

    async def invoke(
        self,
        invocation: CommandInvocation,
        message: discord.Message,
        timestamp: str,
    ) -> None:
        """Run the handler registered for a matched command.

        Raises CommandError if no handler is registered; handler exceptions
        propagate unchanged.
        """
        handler = self.handlers.get(invocation.command_name)
        if handler is None:
            raise CommandError(f"No handler registered for command `{invocation.command_name}`.")
        context = CommandContext(
            config=self.config,
            command=invocation.original_token,
            masters=self.config.masters,
        )
        await handler(
            self.client,
            message.channel,
            message.author,
            list(invocation.args),
            timestamp,
            context,
        )

    # =========================
    # Triggers
    # =========================

    def apply_triggers(self, scan: TriggerScan, message: discord.Message) -> None:
        channel = message.channel
        for match in scan.matches:
            if match.kind is TriggerKind.REACTION:
                self.fire(f"reaction '{match.token}'", channel.send(match.payload))
            else:
                embed = discord.Embed()
                embed.set_image(url=match.payload)
                self.fire(f"gif '{match.token}'", channel.send(embed=embed))
            if match.delete_original:
                self.fire(f"delete origin of '{match.token}'", message.delete())

    def reply_error(self, channel: discord.abc.Messageable, text: str) -> None:
        self.fire("error reply", channel.send(text))

    # =========================
    # Fire-and-forget plumbing
    # =========================

    def fire(self, action: str, coro: Awaitable[Any]) -> asyncio.Task:
        """Schedule `coro` without waiting for it."""
        task = asyncio.ensure_future(self._run(action, coro))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _run(self, action: str, coro: Awaitable[Any]) -> SendOutcome:
        try:
            result = await coro
        except Exception as exc:
            outcome = SendOutcome(action=action, ok=False, error=exc)
        else:
            outcome = SendOutcome(action=action, ok=True, result=result)
        if self.on_outcome is not None:
            try:
                self.on_outcome(outcome)
            except Exception as exc:
                log_error(f"[Send] Outcome hook failed for {action}.", exc)
        return outcome

    @property
    def pending(self) -> int:
        return len(self._pending)

    async def drain(self) -> None:
        """Wait for every scheduled send to finish (tests, shutdown)."""
        while self._pending:
            await asyncio.gather(*list(self._pending))
