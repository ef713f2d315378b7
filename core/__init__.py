# core package - routing and startup logic

from .registry import CommandRegistry, CommandSpec
from .triggers import TriggerTables
from .router import MessageRouter
from .executor import ActionExecutor
from .bootstrap import start_subprocesses
from .validator import validate_config

__all__ = [
    "CommandRegistry",
    "CommandSpec",
    "TriggerTables",
    "MessageRouter",
    "ActionExecutor",
    "start_subprocesses",
    "validate_config",
]
