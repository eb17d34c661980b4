"""Register listing command."""

from __future__ import annotations

from .base import Command
from ..context import DebuggerContext
from ..trace_format import render_register_dump


class RegsCommand(Command):
    def __init__(self) -> None:
        super().__init__("regs", "get register list and value")

    def run(self, ctx: DebuggerContext, rest: str) -> int:
        program = ctx.ensure_program()
        values = [(program.register_name(reg), program.read_register(reg)) for reg in program.register_numbers()]
        ctx.output.lines(render_register_dump(values))
        return 0
