"""Interactive REPL for mips-dbg."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.patch_stdout import patch_stdout

from .commands import CommandRegistry
from .completion import DebuggerCompleter
from .context import DebuggerContext
from .output import emit_error
from .parser import split_directive

LOGGER = logging.getLogger("mips_dbg.repl")

UNKNOWN_COMMAND = 'unknown command: {line}, use "help" to get documents'
PROGRAM_NOT_LOADED = 'program not loaded yet, use "load {path-to-file}" to load assembly'


class DebuggerREPL:
    """prompt-toolkit REPL, with a plain stream loop for pipes and scripts.

    Exceptions raised by commands (file errors during ``load``, simulator
    failures) are not caught here; they propagate to the CLI boundary.
    """

    def __init__(
        self,
        ctx: DebuggerContext,
        registry: CommandRegistry,
        *,
        input_stream: Optional[TextIO] = None,
    ) -> None:
        self.ctx = ctx
        self.registry = registry
        self.input_stream = input_stream

    def run(self) -> int:
        stream = self.input_stream
        if stream is None and not sys.stdin.isatty():
            stream = sys.stdin
        if stream is not None:
            return self._stream_loop(stream)
        session: PromptSession[str] = PromptSession(
            history=InMemoryHistory(),
            completer=DebuggerCompleter(self.registry),
            complete_while_typing=True,
        )
        while True:
            try:
                with patch_stdout():
                    line = session.prompt(self.ctx.prompt())
            except (EOFError, KeyboardInterrupt):
                self.ctx.output.line()
                return 0
            self.dispatch(line)

    def _stream_loop(self, stream: TextIO) -> int:
        self.ctx.output.write(self.ctx.prompt())
        for raw in stream:
            self.dispatch(raw.rstrip("\r\n"))
            self.ctx.output.write(self.ctx.prompt())
        self.ctx.output.line()
        return 0

    def dispatch(self, line: str) -> int:
        """Route one operator line to its command and return the command status."""
        directive, rest = split_directive(line)
        if not directive:
            return 0
        command = self.registry.get(directive)
        if command is None:
            LOGGER.debug("unknown directive %r", directive)
            emit_error(self.ctx, message=UNKNOWN_COMMAND.format(line=line))
            return 1
        if command.requires_program and not self.ctx.has_program:
            LOGGER.debug("%s requires a loaded program", command.name)
            emit_error(self.ctx, message=PROGRAM_NOT_LOADED)
            return 1
        LOGGER.debug("dispatching %s rest=%r", command.name, rest)
        return command.run(self.ctx, rest)
