# subprocesses/uptime.py
"""Session uptime tracking.

Started as a subprocess; bot.py feeds it connect/disconnect/resume events and
the `uptime` command reads it.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo
import time
from typing import Optional

from utils.logging import DEFAULT_TZ, log_debug


@dataclass
class SessionClock:
    tz: tzinfo
    started_at: datetime
    started_mono: float

    connects: int = 0
    disconnects: int = 0
    resumes: int = 0

    @classmethod
    def start(cls, tz: tzinfo) -> "SessionClock":
        return cls(tz=tz, started_at=datetime.now(tz), started_mono=time.monotonic())

    @property
    def reconnects(self) -> int:
        return max(0, self.connects - 1)

    def mark_connect(self) -> None:
        self.connects += 1

    def mark_disconnect(self) -> None:
        self.disconnects += 1

    def mark_resume(self) -> None:
        self.resumes += 1

    def uptime(self) -> timedelta:
        return timedelta(seconds=int(time.monotonic() - self.started_mono))

    def format_status(self) -> str:
        up = self.uptime()
        hours, rem = divmod(up.seconds, 3600)
        mins, secs = divmod(rem, 60)
        up_str = (f"{up.days}d " if up.days else "") + f"{hours:02d}:{mins:02d}:{secs:02d}"
        since = self.started_at.strftime("%Y-%m-%d %H:%M:%S %Z")
        return (
            f"Up for **{up_str}** (since {since}). "
            f"Reconnects: {self.reconnects}, disconnects: {self.disconnects}, "
            f"resumes: {self.resumes}."
        )


# Set by main() at startup.
CLOCK: Optional[SessionClock] = None


def main(client, config, base_dir) -> None:
    global CLOCK
    CLOCK = SessionClock.start(DEFAULT_TZ)
    log_debug(f"[Uptime] Clock started at {CLOCK.started_at:%H:%M:%S}.")
