"""
Message routing.

MessageRouter.route() decides what an inbound message means and nothing
else; it never touches the network. The executor (core/executor.py) carries
out the decision.

Order:
1) Ignore self / unsupported subtypes / empty messages
2) Require the sign, except in direct messages
3) Resolve alias, match command, check arity -> CommandInvocation
4) Otherwise scan every signed token against reacts, then gifs -> TriggerScan
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from core.models import (
    CommandInvocation,
    Ignored,
    InboundMessage,
    RoutingDecision,
    TriggerMatch,
    TriggerScan,
)

if TYPE_CHECKING:
    from core.registry import CommandRegistry
    from core.triggers import TriggerTables

__all__ = ["ACCEPTED_SUBTYPES", "NOT_ADDRESSED", "MessageRouter"]

# Subtypes routed like a plain message. A message without subtype is always accepted.
# Transport-neutral: "me_message" comes from transports with /me messages; the
# Discord adapter (core/handlers.py) never produces it.
ACCEPTED_SUBTYPES = frozenset({"me_message"})

# Ignored reason for messages without the sign outside direct messages.
NOT_ADDRESSED = "not addressed"


class MessageRouter:
    """Stateless router over an immutable registry and trigger tables."""

    def __init__(self, registry: "CommandRegistry", triggers: "TriggerTables", sign: str):
        self.registry = registry
        self.triggers = triggers
        self.sign = sign

    def route(self, message: InboundMessage) -> RoutingDecision:
        if message.sender_is_self:
            return Ignored("self")
        if message.subtype is not None and message.subtype not in ACCEPTED_SUBTYPES:
            return Ignored(f"subtype {message.subtype}")
        text = message.text
        if len(text) < 1:
            return Ignored("empty")
        if not (text.startswith(self.sign) or message.is_direct):
            return Ignored(NOT_ADDRESSED)

        invocation = self.match_command(text)
        if invocation is not None:
            return invocation
        return self.scan_triggers(text)

    def match_command(self, text: str) -> CommandInvocation | None:
        """Tokenize and resolve a command; None if nothing (or wrong arity) matched."""
        parts = text.split(" ")
        word = parts[0].lower()
        args = tuple(parts[1:])
        if word.startswith(self.sign):
            word = word[len(self.sign):]

        name = self.registry.resolve_alias(word)
        spec = self.registry.get(name)
        if spec is None or not spec.accepts(len(args)):
            return None
        return CommandInvocation(command_name=spec.name, original_token=word, args=args)

    def scan_triggers(self, text: str) -> TriggerScan:
        matches: list[TriggerMatch] = []
        for part in text.split(" "):
            if not part.startswith(self.sign):
                continue
            token = part[len(self.sign):].lower()
            found = self.triggers.lookup(token)
            if found is None:
                continue
            kind, payload = found
            matches.append(
                TriggerMatch(
                    kind=kind,
                    token=token,
                    payload=payload,
                    delete_original=text == self.sign + token,
                )
            )
        return TriggerScan(tuple(matches))
