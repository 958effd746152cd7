"""
registry.py
Command registry for the query session: maps a verb to its handler,
its fixed argument count and a usage line.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence


class UsageError(Exception):
    """Unknown verb, wrong argument count or an unparsable argument."""


@dataclass(frozen=True)
class Command:
    name: str
    handler: Callable[..., str]
    arity: int
    usage: str


class CommandRegistry:
    """
    Verb -> Command table.
    Handlers take exactly `arity` string arguments and return the text
    to print. Verbs are matched case-insensitively.
    """

    def __init__(self):
        self.commands: Dict[str, Command] = {}

    # COMMANDS ----------------------------------------------------------------
    def add_command(
        self, name: str, handler: Callable[..., str], arity: int, usage: str = ""
    ) -> None:
        """Registers (or replaces) a command."""
        key = name.lower()
        self.commands[key] = Command(key, handler, arity, usage or key)

    def dispatch(self, name: str, args: Sequence[str]) -> str:
        """
        Run the handler for `name`.
        Raises UsageError for an unknown verb or the wrong number of args.
        """
        cmd = self.commands.get(name.lower())
        if cmd is None:
            raise UsageError(f"unknown command: {name}")
        if len(args) != cmd.arity:
            raise UsageError(f"usage: {cmd.usage}")
        return cmd.handler(*args)

    # INTROSPECTION UTILITIES -------------------------------------------------
    def list_commands(self) -> List[str]:
        """Return a sorted list of registered command names."""
        return sorted(self.commands.keys())

    def usage_lines(self) -> List[str]:
        return [self.commands[n].usage for n in self.list_commands()]

    def __contains__(self, name: str) -> bool:
        return name.lower() in self.commands
