"""Startup validation of the raw configuration object.

Configuration is all-or-nothing: the first problem raises ConfigError and the
bot refuses to start.
"""

from __future__ import annotations

from typing import Any

from utils.errors import ConfigError

__all__ = ["validate_config"]

# JSON arrays only; a str is a sequence too and must not pass.
_SEQUENCE_TYPES = (list, tuple)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, _SEQUENCE_TYPES)


def _wrong_type(part: str, command: Any, key: Any) -> ConfigError:
    return ConfigError(f"Incorrect type for {part} in command {command} at key {key}.")


def _validate_command(config: dict, command: Any, key: int) -> None:
    if not isinstance(command, dict) or not isinstance(command.get("command"), str):
        raise ConfigError(f"Missing command name ['command'] at key {key}.")
    name = command["command"]
    if not isinstance(command.get("description"), str):
        raise _wrong_type("description ['description']", name, key)
    if not _is_sequence(config.get("masters")):
        raise _wrong_type("masters ['masters']", name, key)
    if not _is_sequence(command.get("args")):
        raise _wrong_type("arguments ['args']", name, key)
    for i, signature in enumerate(command["args"]):
        if not _is_sequence(signature):
            raise _wrong_type("arguments ['args']", name, i)
    if "aliases" in command:
        aliases = command["aliases"]
        if not _is_sequence(aliases):
            raise _wrong_type("aliases ['aliases']", name, key)
        for i, alias in enumerate(aliases):
            if not isinstance(alias, str):
                raise _wrong_type("aliases ['aliases']", name, i)


def _validate_subprocesses(subprocesses: Any, sign: str) -> None:
    if not _is_sequence(subprocesses):
        raise ConfigError("Section `subprocesses` should be an array.")
    for key, name in enumerate(subprocesses):
        if not isinstance(name, str):
            raise _wrong_type("subprocess ['subprocesses']", "subprocesses", key)
        if name.startswith(sign):
            raise ConfigError(
                f"Subprocess '{name}' at key {key} starts with the bot sign; "
                "subprocess names cannot start with the sign."
            )


def _validate_triggers(section: str, table: Any, sign: str) -> None:
    if not isinstance(table, dict):
        raise ConfigError(f"Section `{section}` should be an object.")
    for token, payload in table.items():
        if not isinstance(payload, str):
            raise _wrong_type(f"payload ['{section}']", section, token)
        if token.startswith(sign):
            raise ConfigError(
                f"Trigger '{token}' in `{section}` starts with the bot sign; "
                "triggers are written without it."
            )


def validate_config(config: Any) -> None:
    """Check the shape of a loaded configuration. Raises ConfigError."""
    if not isinstance(config, dict):
        raise ConfigError("Configuration root should be an object.")

    sign = config.get("sign")
    if not isinstance(sign, str) or not sign or not isinstance(config.get("debug"), bool):
        raise ConfigError("Configuration of 'sign' and/or 'debug' is incorrect.")

    commands = config.get("commands")
    if not _is_sequence(commands):
        raise ConfigError("Section `commands` should be an array.")

    seen: dict[str, int] = {}
    for key, command in enumerate(commands):
        _validate_command(config, command, key)
        name = command["command"]
        if name in seen:
            raise ConfigError(
                f"Duplicate command name '{name}' at key {key} (first declared at key {seen[name]})."
            )
        seen[name] = key

    _validate_subprocesses(config.get("subprocesses", []), sign)
    _validate_triggers("reacts", config.get("reacts", {}), sign)
    _validate_triggers("gifs", config.get("gifs", {}), sign)
