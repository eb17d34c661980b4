"""mips-dbg CLI entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List

from .commands import build_registry
from .context import DebuggerContext
from .repl import DebuggerREPL
from .simulator import SimulatorLoadError, load_program_factory

LOG = logging.getLogger("mips_dbg.cli")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mips-dbg", description="MIPS simulator debugger shell")
    parser.add_argument(
        "--simulator",
        required=True,
        metavar="MODULE:ATTR",
        help="Simulator program factory, called with the loaded source lines",
    )
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default WARNING)")
    parser.add_argument("--load", metavar="FILE", help="Load a program before the first prompt")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-c",
        "--command",
        help="Execute a single command non-interactively (quote the command string)",
    )
    mode.add_argument("--script", type=Path, help="Execute commands from a file, one per line")
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.log_level)
    try:
        factory = load_program_factory(args.simulator)
    except SimulatorLoadError as exc:
        parser.error(str(exc))
    ctx = DebuggerContext(program_factory=factory)
    registry = build_registry()
    repl = DebuggerREPL(ctx, registry)
    try:
        if args.load:
            ctx.load(args.load)
        if args.command:
            return _run_single_command(repl, args.command)
        if args.script:
            return _run_script(repl, args.script)
        return repl.run()
    except OSError as exc:
        LOG.error("%s", exc)
        return 1
    except KeyboardInterrupt:
        ctx.output.line()
        return 0


def _run_single_command(repl: DebuggerREPL, command_line: str) -> int:
    return 1 if repl.dispatch(command_line) else 0


def _run_script(repl: DebuggerREPL, path: Path) -> int:
    for raw in path.read_text(encoding="utf-8", errors="replace").splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if repl.dispatch(raw):
            LOG.debug("script stopped at %r", line)
            return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
