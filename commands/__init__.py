"""Command handler table.

Maps a configured command name to its handler. Every handler is called as
`await handler(client, channel, user, args, timestamp, context)`.
"""

from commands.admin import handle_say
from commands.core import handle_help, handle_ping, handle_uptime

HANDLERS = {
    "help": handle_help,
    "ping": handle_ping,
    "uptime": handle_uptime,
    "say": handle_say,
}

__all__ = ["HANDLERS"]
