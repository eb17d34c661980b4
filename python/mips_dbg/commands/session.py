"""Session lifecycle commands (file/load/reset)."""

from __future__ import annotations

from .base import Command
from ..context import DebuggerContext
from ..output import emit_error, emit_result


class FileCommand(Command):
    def __init__(self) -> None:
        super().__init__("file", "full path of loaded file", aliases=("f",), requires_program=False)

    def run(self, ctx: DebuggerContext, rest: str) -> int:
        emit_result(ctx, message=ctx.file_path or "")
        return 0


class ResetCommand(Command):
    def __init__(self) -> None:
        super().__init__("reset", "re-initialize registers and memory")

    def run(self, ctx: DebuggerContext, rest: str) -> int:
        ctx.reset()
        return 0


class LoadCommand(Command):
    def __init__(self) -> None:
        super().__init__(
            "load",
            "load program from local file-system, format: load {path-to-file}",
            aliases=("l",),
            requires_program=False,
        )

    def run(self, ctx: DebuggerContext, rest: str) -> int:
        if not rest:
            emit_error(ctx, message='missing file path, use "load {path-to-file}"')
            return 1
        # OSError and simulator construction errors are left to the caller
        ctx.load(rest)
        return 0
