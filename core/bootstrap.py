"""Starts the configured side processes (modules under subprocesses/)."""

from __future__ import annotations

import importlib
from pathlib import Path
from types import ModuleType
from typing import TYPE_CHECKING, Iterable

from utils.errors import BootstrapError
from utils.logging import log_debug

if TYPE_CHECKING:
    import discord
    from config import BotConfig

__all__ = ["SUBPROCESS_PACKAGE", "load_subprocess", "start_subprocesses"]

SUBPROCESS_PACKAGE = "subprocesses"


def load_subprocess(name: str, package: str = SUBPROCESS_PACKAGE) -> ModuleType:
    try:
        return importlib.import_module(f"{package}.{name}")
    except Exception as exc:
        raise BootstrapError(f"Failed to start subprocess '{name}': {exc}", cause=exc) from exc


def start_subprocesses(
    client: "discord.Client",
    config: "BotConfig",
    base_dir: str | Path,
    names: Iterable[str] | None = None,
    *,
    package: str = SUBPROCESS_PACKAGE,
) -> list[ModuleType]:
    """Load and start each subprocess in declared order.

    The first failure raises BootstrapError; later subprocesses are not started.
    """
    started: list[ModuleType] = []
    for name in config.subprocesses if names is None else names:
        module = load_subprocess(name, package)
        entry = getattr(module, "main", None)
        if not callable(entry):
            raise BootstrapError(f"Failed to start subprocess '{name}': no main() entry point.")
        try:
            entry(client, config, base_dir)
        except Exception as exc:
            raise BootstrapError(f"Failed to start subprocess '{name}': {exc}", cause=exc) from exc
        log_debug(f"[Bootstrap] Subprocess '{name}' started.")
        started.append(module)
    return started
