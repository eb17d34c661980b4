"""Output helpers for mips-dbg."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Iterable, Optional, TextIO

if TYPE_CHECKING:  # pragma: no cover
    from .context import DebuggerContext

LOGGER = logging.getLogger("mips_dbg.output")


class OutputSink:
    """Single write channel for everything the debugger prints.

    Commands never touch ``sys.stdout`` directly; they write through the
    sink owned by the :class:`DebuggerContext`, so tests and scripted runs
    can capture output by handing in their own stream.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # resolved lazily so pytest's capsys sees writes made to sys.stdout
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str) -> None:
        stream = self.stream
        stream.write(text)
        stream.flush()

    def line(self, text: str = "") -> None:
        self.write(f"{text}\n")

    def lines(self, texts: Iterable[str]) -> None:
        for text in texts:
            self.line(text)


def emit_result(ctx: "DebuggerContext", *, message: str) -> None:
    """Emit a successful command result."""
    ctx.output.line(message)


def emit_error(ctx: "DebuggerContext", *, message: str) -> None:
    """Emit a recoverable, operator-facing error line."""
    LOGGER.debug("recoverable error: %s", message)
    ctx.output.line(message)


__all__ = ["OutputSink", "emit_result", "emit_error"]
