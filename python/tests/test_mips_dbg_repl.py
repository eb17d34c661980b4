"""Dispatcher and input loop tests for mips-dbg."""

from __future__ import annotations

import io
from typing import List

import pytest

from fake_sim import BASE, PC
from mips_dbg.commands import build_registry
from mips_dbg.commands.base import Command
from mips_dbg.repl import PROGRAM_NOT_LOADED, DebuggerREPL

UNKNOWN = 'unknown command: {}, use "help" to get documents\n'


class _Recorder(Command):
    def __init__(self, name: str, *, requires_program: bool) -> None:
        super().__init__(name, "records calls", requires_program=requires_program)
        self.calls: List[str] = []

    def run(self, ctx, rest: str) -> int:
        self.calls.append(rest)
        return 0


def test_blank_line_is_ignored(repl, out):
    assert repl.dispatch("   \t ") == 0
    assert out.getvalue() == ""


def test_unknown_directive_echoes_original_line(repl, out, ctx):
    assert repl.dispatch("  frob  a b ") == 1
    assert out.getvalue() == UNKNOWN.format("  frob  a b ")
    assert not ctx.has_program


def test_unknown_directive_invokes_no_handler(ctx):
    recorder = _Recorder("known", requires_program=False)
    repl = DebuggerREPL(ctx, build_registry([recorder]))
    repl.dispatch("unknown known")
    assert recorder.calls == []


@pytest.mark.parametrize("line", ["run", "r", "code", "c", "step", "s", "regs", "reset"])
def test_session_commands_are_guarded_before_load(repl, out, ctx, line):
    assert repl.dispatch(line) == 1
    assert out.getvalue() == PROGRAM_NOT_LOADED + "\n"
    assert ctx.program is None and ctx.source_lines is None
    assert ctx.file_path is None and ctx.file_name is None


def test_guarded_handler_is_not_invoked(ctx):
    recorder = _Recorder("needs", requires_program=True)
    repl = DebuggerREPL(ctx, build_registry([recorder]))
    repl.dispatch("needs x")
    assert recorder.calls == []


def test_rest_is_split_on_first_whitespace_run_and_trimmed(ctx):
    recorder = _Recorder("echo", requires_program=False)
    repl = DebuggerREPL(ctx, build_registry([recorder]))
    repl.dispatch("  echo \t  some  spaced   words  ")
    repl.dispatch("echo")
    assert recorder.calls == ["some  spaced   words", ""]


def test_load_then_file_reports_path_and_prompt(repl, ctx, out, good_asm):
    repl.dispatch(f"l {good_asm}")
    out.seek(0)
    out.truncate()
    repl.dispatch("f")
    assert out.getvalue() == f"{good_asm}\n"
    assert ctx.prompt() == "good.asm>"


def test_load_error_is_not_caught_by_dispatcher(repl, tmp_path):
    with pytest.raises(FileNotFoundError):
        repl.dispatch(f"load {tmp_path / 'missing.asm'}")


def test_quit_propagates_system_exit(repl):
    with pytest.raises(SystemExit) as excinfo:
        repl.dispatch("q")
    assert excinfo.value.code == 0


def test_step_sequence_updates_program_counter(repl, ctx, out, good_asm):
    repl.dispatch(f"load {good_asm}")
    out.seek(0)
    out.truncate()

    repl.dispatch("code")
    reported_pc = int(out.getvalue().split(":", 1)[0], 16)
    repl.dispatch("regs")
    before = out.getvalue().splitlines()
    out.seek(0)
    out.truncate()

    repl.dispatch("step")
    repl.dispatch("regs")
    after = out.getvalue().splitlines()

    assert reported_pc == BASE
    assert "$pc: 0x00400000" in before
    assert "$pc: 0x00400004" in after
    assert ctx.program.read_register(PC) == reported_pc + 4


def test_stream_loop_prompts_after_every_line(ctx, registry, out, good_asm):
    script = io.StringIO(f"\nhelp-me\nload {good_asm}\nstep\n")
    repl = DebuggerREPL(ctx, registry, input_stream=script)
    assert repl.run() == 0
    text = out.getvalue()
    assert text.startswith(">>" + UNKNOWN.format("help-me") + ">")
    assert f"loaded file: {good_asm}\ngood.asm>" in text
    assert text.endswith("0x00400004: store 0x1000 0xFF\ngood.asm>\n")


def test_stream_loop_stops_on_quit(ctx, registry, out):
    script = io.StringIO("help\nquit\nhelp\n")
    repl = DebuggerREPL(ctx, registry, input_stream=script)
    with pytest.raises(SystemExit):
        repl.run()
    assert out.getvalue().count("quit(q): quit") == 1
