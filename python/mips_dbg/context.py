"""Debugger context and session helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .output import OutputSink
from .simulator import ProgramFactory, SimulatorProgram

LOGGER = logging.getLogger("mips_dbg.context")


@dataclass
class DebuggerContext:
    """Holds shared CLI debugger state.

    One context is built at startup and handed to every command.  The
    program, its source lines and the file identity are only ever replaced
    together by :meth:`load`; :meth:`reset` rebuilds the program from the
    same source lines.
    """

    program_factory: ProgramFactory
    output: OutputSink = field(default_factory=OutputSink)
    source_lines: Optional[List[str]] = field(default=None, init=False)
    program: Optional[SimulatorProgram] = field(default=None, init=False, repr=False)
    file_path: Optional[str] = field(default=None, init=False)
    file_name: Optional[str] = field(default=None, init=False)

    @property
    def has_program(self) -> bool:
        return self.program is not None

    def prompt(self) -> str:
        return f"{self.file_name or ''}>"

    def ensure_program(self) -> SimulatorProgram:
        if self.program is None:
            raise RuntimeError("no program loaded")
        return self.program

    def load(self, path: str) -> SimulatorProgram:
        """Read *path*, build a program from its lines and make it current.

        Read errors (``OSError``) and simulator construction errors propagate
        to the caller; in both cases the previous session is left untouched.
        """
        self.output.line(f"loading file: {path}")
        text = Path(path).read_text(encoding="utf-8", errors="replace")
        self.output.line(f"loaded file: {path}")
        lines = text.splitlines()
        program = self.program_factory(lines)
        self.source_lines = lines
        self.program = program
        self.file_path = path
        self.file_name = Path(path).name
        LOGGER.debug("loaded %s (%d lines)", path, len(lines))
        return program

    def reset(self) -> SimulatorProgram:
        """Rebuild the program from the already-loaded source lines."""
        if self.source_lines is None:
            raise RuntimeError("reset requires a loaded program")
        self.program = self.program_factory(list(self.source_lines))
        LOGGER.debug("reset program from %s", self.file_path)
        return self.program
