"""Core commands: help, ping, uptime."""
from __future__ import annotations

from typing import TYPE_CHECKING

from subprocesses import uptime

if TYPE_CHECKING:
	from core.models import CommandContext
	from core.registry import CommandSpec


def describe_command(spec: "CommandSpec", sign: str) -> str:
	line = f"`{sign}{spec.name}` - {spec.description}"
	if spec.aliases:
		aliases = ", ".join(f"`{sign}{a}`" for a in sorted(spec.aliases))
		line += f" (aliases: {aliases})"
	return line


async def handle_help(client, channel, user, args: list[str], ts: str, context: "CommandContext"):
	config = context.config
	sign = config.sign
	if args:
		wanted = args[0].lower()
		if wanted.startswith(sign):
			wanted = wanted[len(sign):]
		spec = config.commands.get(config.commands.resolve_alias(wanted))
		if spec is None:
			await channel.send(f"Unknown command `{wanted}`.")
			return
		await channel.send(f"{describe_command(spec, sign)}\nUsage:\n```{spec.usage(sign)}```")
		return
	if not len(config.commands):
		await channel.send("No commands are configured.")
		return
	lines = [describe_command(spec, sign) for spec in config.commands]
	await channel.send("Commands:\n" + "\n".join(lines))


async def handle_ping(client, channel, user, args: list[str], ts: str, context: "CommandContext"):
	await channel.send("Pong!")


async def handle_uptime(client, channel, user, args: list[str], ts: str, context: "CommandContext"):
	if not uptime.CLOCK:
		await channel.send("Uptime tracking is not running (add `uptime` to `subprocesses`).")
		return
	await channel.send(uptime.CLOCK.format_status())
