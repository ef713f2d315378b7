# utils package - shared utilities for the bot
from utils.logging import log, log_debug, log_warn, fatal, set_debug, is_debug, DEFAULT_TZ
from utils.errors import BotError, ConfigError, BootstrapError, CommandError, log_error

__all__ = [
    # logging
    "log",
    "log_debug",
    "log_warn",
    "fatal",
    "set_debug",
    "is_debug",
    "DEFAULT_TZ",
    # errors
    "BotError",
    "ConfigError",
    "BootstrapError",
    "CommandError",
    "log_error",
]
