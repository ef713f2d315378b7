"""Command registry built from the validated `commands` config section."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

__all__ = ["CommandSpec", "CommandRegistry"]


@dataclass(frozen=True)
class CommandSpec:
    """A declared command.

    An empty `arg_signatures` disables the arity check entirely. A signature
    that is itself empty means "exactly zero arguments".
    """
    name: str
    description: str
    aliases: frozenset[str] = frozenset()
    arg_signatures: tuple[tuple[str, ...], ...] = ()

    @classmethod
    def from_config(cls, raw: dict[str, Any]) -> "CommandSpec":
        return cls(
            name=raw["command"],
            description=raw["description"],
            aliases=frozenset(raw.get("aliases") or ()),
            arg_signatures=tuple(tuple(sig) for sig in raw["args"]),
        )

    @property
    def accepted_arities(self) -> frozenset[int]:
        return frozenset(len(sig) for sig in self.arg_signatures)

    def accepts(self, arg_count: int) -> bool:
        if not self.arg_signatures:
            return True
        return arg_count in self.accepted_arities

    def usage(self, sign: str) -> str:
        """Human readable usage lines, e.g. `!foo <a> <b>`."""
        if not self.arg_signatures:
            return f"{sign}{self.name} ..."
        lines = []
        for sig in self.arg_signatures:
            params = " ".join(f"<{p}>" for p in sig)
            lines.append(f"{sign}{self.name} {params}".rstrip())
        return "\n".join(lines)


class CommandRegistry:
    """Ordered, read-only collection of command specs.

    Declaration order matters: when two commands share an alias the first
    declared one wins.
    """

    def __init__(self, specs: Iterable[CommandSpec] = ()):
        self._specs: tuple[CommandSpec, ...] = tuple(specs)
        self._by_name: dict[str, CommandSpec] = {}
        for spec in self._specs:
            self._by_name.setdefault(spec.name, spec)

    @classmethod
    def from_config(cls, commands: Iterable[dict[str, Any]]) -> "CommandRegistry":
        return cls(CommandSpec.from_config(raw) for raw in commands)

    def __iter__(self) -> Iterator[CommandSpec]:
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(spec.name for spec in self._specs)

    def resolve_alias(self, word: str) -> str:
        """Return the canonical name for `word` if it is an alias, else `word`.

        Single hop: the result is never resolved again.
        """
        for spec in self._specs:
            if word in spec.aliases:
                return spec.name
        return word

    def get(self, name: str) -> Optional[CommandSpec]:
        return self._by_name.get(name)
