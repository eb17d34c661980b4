"""Help command."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import Command
from ..context import DebuggerContext

if TYPE_CHECKING:  # pragma: no cover
    from . import CommandRegistry


class HelpCommand(Command):
    def __init__(self) -> None:
        super().__init__(
            "help",
            "get documents on available commands",
            aliases=("?", "h", "man"),
            requires_program=False,
        )
        self._registry: CommandRegistry | None = None

    def bind(self, registry: "CommandRegistry") -> None:
        self._registry = registry

    def run(self, ctx: DebuggerContext, rest: str) -> int:
        registry = self._registry
        if not registry:
            return 1
        ctx.output.lines(command.format_help() for command in registry.list_commands())
        return 0
