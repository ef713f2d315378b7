"""Error types for the bot and helpers for reporting them.

ConfigError and BootstrapError stop the bot at startup (bot.main turns them
into fatal()). CommandError, like any exception raised by a command handler,
is caught in core.handlers.on_message and answered in the channel.
wrap_discord_errors guards the on_message event itself.
"""

from __future__ import annotations
import functools
import traceback
from typing import Any, Callable, Coroutine, TypeVar
from utils.logging import log

import discord

__all__ = [
	"BotError",
	"ConfigError",
	"BootstrapError",
	"CommandError",
	"log_error",
	"report_discord_error",
	"wrap_discord_errors",
]

class BotError(Exception):
	"""Base exception for bot errors."""
	def __init__(self, message: str, *, cause: Exception | None = None):
		super().__init__(message)
		self.cause = cause

class ConfigError(BotError):
	"""The configuration is missing, unreadable or has the wrong shape."""

class BootstrapError(BotError):
	"""A configured subprocess could not be loaded or started."""

class CommandError(BotError):
	"""A matched command could not be run."""

def log_error(message: str, exc: BaseException | None = None) -> None:
	"""Log an error with traceback if available."""
	if exc:
		tb = ''.join(traceback.format_exception(type(exc), exc, exc.__traceback__))
		log(f"[ERROR] {message}\n{tb}")
	else:
		log(f"[ERROR] {message}")

async def report_discord_error(channel: discord.abc.Messageable, message: str, exc: Exception | None = None) -> None:
	"""Send a user-friendly error message to Discord and log details."""
	log_error(message, exc)
	try:
		await channel.send(f"❌ {message}")
	except Exception as e:
		log(f"[ERROR] Failed to send error to Discord: {e}")

F = TypeVar("F", bound=Callable[..., Coroutine[Any, Any, Any]])
def wrap_discord_errors(func: F) -> F:
	"""Decorator: catch and report errors in Discord event handlers."""
	@functools.wraps(func)
	async def wrapper(*args, **kwargs):
		try:
			return await func(*args, **kwargs)
		except Exception as exc:
			channel = None
			# Try to find a Discord channel in args
			for arg in args:
				if isinstance(arg, discord.abc.Messageable):
					channel = arg
					break
				if hasattr(arg, "channel") and isinstance(arg.channel, discord.abc.Messageable):
					channel = arg.channel
					break
			msg = "An internal error occurred. Please try again later."
			if channel is not None:
				await report_discord_error(channel, msg, exc)
			else:
				log_error(msg, exc)
	return wrapper  # type: ignore
