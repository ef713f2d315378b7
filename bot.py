"""
Discord bot entry point.

Key rules:
- config.json is validated before anything else runs; any problem is fatal.
- Subprocesses start sequentially after validation; any failure is fatal.
- Every message goes through core.handlers.on_message; a failing command is
  reported in its channel and never stops the bot.
"""

from __future__ import annotations

import discord

from commands import HANDLERS
from config import BASE_DIR, CONFIG_PATH, DISCORD_TOKEN, BotConfig, load_config
from core.bootstrap import start_subprocesses
from core.executor import ActionExecutor
from core.handlers import on_message as handle_message
from core.router import MessageRouter
from subprocesses import uptime
from utils.errors import BootstrapError, ConfigError, wrap_discord_errors
from utils.logging import fatal, log, log_debug, log_warn, set_debug


def build_client() -> discord.Client:
    intents = discord.Intents.default()
    intents.message_content = True
    return discord.Client(intents=intents)


def create_bot(config: BotConfig, client: discord.Client | None = None) -> discord.Client:
    """Wire router, executor and event handlers onto a Discord client."""
    client = client or build_client()

    unbound = [name for name in config.commands.names if name not in HANDLERS]
    for name in unbound:
        log_warn(f"Command '{name}' is configured but has no handler.")

    router = MessageRouter(config.commands, config.triggers, config.sign)
    executor = ActionExecutor(client, config, HANDLERS)

    @client.event
    async def on_connect() -> None:
        if uptime.CLOCK:
            uptime.CLOCK.mark_connect()
            if uptime.CLOCK.reconnects > 0:
                log(f"[Uptime] Reconnected to Discord (#{uptime.CLOCK.reconnects}).")

    @client.event
    async def on_disconnect() -> None:
        if uptime.CLOCK:
            uptime.CLOCK.mark_disconnect()
        log_warn("Disconnected from Discord.")

    @client.event
    async def on_resumed() -> None:
        if uptime.CLOCK:
            uptime.CLOCK.mark_resume()
        log_debug("Session resumed.")

    @client.event
    async def on_ready() -> None:
        log(f"Logged in as {client.user} (ID: {client.user.id})")
        log_debug("Messages will now be received.")

    @client.event
    @wrap_discord_errors
    async def on_message(message: discord.Message) -> None:
        await handle_message(message, client, router, executor)

    return client


def main() -> None:
    try:
        config = load_config(CONFIG_PATH)
    except ConfigError as e:
        log("[ERROR] Failed to start. Either config.json is not present, corrupted or missing arguments.")
        fatal(f"Error: {e}")
    set_debug(config.debug)

    if not DISCORD_TOKEN:
        fatal("DISCORD_TOKEN is not set.")

    client = build_client()
    try:
        start_subprocesses(client, config, BASE_DIR)
    except BootstrapError as e:
        fatal(str(e))

    create_bot(config, client)
    client.run(DISCORD_TOKEN)


# =========================
# Start bot
# =========================

if __name__ == "__main__":
    main()
