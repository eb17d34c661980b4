"""Command base classes for mips-dbg."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from ..context import DebuggerContext


@dataclass
class Command:
    """Abstract command description.

    ``requires_program`` commands are only dispatched once a program has been
    loaded; the REPL checks this before calling :meth:`run`.
    """

    name: str
    description: str
    aliases: Sequence[str] = field(default_factory=tuple)
    requires_program: bool = True

    def run(self, ctx: DebuggerContext, rest: str) -> int:
        raise NotImplementedError("Command must implement run()")

    def directives(self) -> Sequence[str]:
        return (self.name, *self.aliases)

    def format_help(self) -> str:
        if self.aliases:
            return f"{self.name}({','.join(self.aliases)}): {self.description}"
        return f"{self.name}: {self.description}"
