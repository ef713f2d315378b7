"""Console logging for the bot."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, NoReturn

import pytz

if TYPE_CHECKING:
    from pytz.tzinfo import BaseTzInfo

# Default timezone for timestamps
DEFAULT_TZ: BaseTzInfo = pytz.timezone("UTC")

_DEBUG = False


def set_debug(enabled: bool) -> None:
    """Turn debug output on or off (driven by the `debug` config key)."""
    global _DEBUG
    _DEBUG = bool(enabled)


def is_debug() -> bool:
    return _DEBUG


def log(message: str, tz: BaseTzInfo | None = None) -> None:
    """Print console messages with a local timestamp."""
    tz = tz or DEFAULT_TZ
    ts = datetime.now(tz).strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] {message}")


def log_debug(message: str) -> None:
    """Like log(), but only when debug mode is enabled."""
    if _DEBUG:
        log(f"[DEBUG] {message}")


def log_warn(message: str) -> None:
    log(f"[WARN] {message}")


def fatal(message: str) -> NoReturn:
    """Log a fatal message and exit the process."""
    log(f"[FATAL] {message}")
    raise SystemExit(1)
