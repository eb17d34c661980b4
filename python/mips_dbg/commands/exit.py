"""Quit command."""

from __future__ import annotations

from .base import Command
from ..context import DebuggerContext


class QuitCommand(Command):
    def __init__(self) -> None:
        super().__init__("quit", "quit", aliases=("q",), requires_program=False)

    def run(self, ctx: DebuggerContext, rest: str) -> int:
        raise SystemExit(0)
