"""Execution control commands (run/step/code)."""

from __future__ import annotations

import logging

from .base import Command
from ..context import DebuggerContext
from ..output import emit_error, emit_result
from ..trace_format import render_dirty_info, render_source_line

LOGGER = logging.getLogger("mips_dbg.commands.control")


def current_source_line(ctx: DebuggerContext) -> str:
    program = ctx.ensure_program()
    pc = program.program_counter()
    return render_source_line(pc, program.get_source(pc))


class RunCommand(Command):
    def __init__(self) -> None:
        super().__init__("run", "execute program till end", aliases=("r",))

    def run(self, ctx: DebuggerContext, rest: str) -> int:
        program = ctx.ensure_program()
        try:
            program.run()
        except KeyboardInterrupt:
            LOGGER.debug("run interrupted by operator")
            emit_error(ctx, message="run interrupted")
            return 1
        return 0


class CodeCommand(Command):
    def __init__(self) -> None:
        super().__init__("code", "next MIPS code to be executed", aliases=("c",))

    def run(self, ctx: DebuggerContext, rest: str) -> int:
        emit_result(ctx, message=current_source_line(ctx))
        return 0


class StepCommand(Command):
    def __init__(self) -> None:
        super().__init__("step", "single step execution", aliases=("s",))

    def run(self, ctx: DebuggerContext, rest: str) -> int:
        program = ctx.ensure_program()
        program.step()
        ctx.output.lines(render_dirty_info(program.get_dirty_info(), program.register_name))
        ctx.output.line("next:")
        emit_result(ctx, message=current_source_line(ctx))
        return 0
