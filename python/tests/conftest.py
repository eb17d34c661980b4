"""
Pytest configuration and fixtures for mips-dbg tests.
"""
import io
import sys
from pathlib import Path

import pytest

TESTS_DIR = Path(__file__).resolve().parent
PYTHON_SRC = TESTS_DIR.parent
for entry in (PYTHON_SRC, TESTS_DIR):
    if str(entry) not in sys.path:
        sys.path.insert(0, str(entry))

from fake_sim import FakeProgram  # noqa: E402
from mips_dbg.commands import build_registry  # noqa: E402
from mips_dbg.context import DebuggerContext  # noqa: E402
from mips_dbg.output import OutputSink  # noqa: E402
from mips_dbg.repl import DebuggerREPL  # noqa: E402

GOOD_PROGRAM = "\r\n".join(
    [
        "inc t0",
        "store 0x1000 0xFF",
        "addiu $t1, $zero, 1 | li $t1, 1 | 0",
        "nop",
    ]
)


@pytest.fixture(autouse=True)
def reset_fake_instances():
    FakeProgram.instances.clear()
    yield
    FakeProgram.instances.clear()


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def ctx(out):
    return DebuggerContext(program_factory=FakeProgram, output=OutputSink(out))


@pytest.fixture
def registry():
    return build_registry()


@pytest.fixture
def repl(ctx, registry):
    return DebuggerREPL(ctx, registry)


@pytest.fixture
def good_asm(tmp_path):
    path = tmp_path / "good.asm"
    path.write_bytes(GOOD_PROGRAM.encode("utf-8"))
    return path
