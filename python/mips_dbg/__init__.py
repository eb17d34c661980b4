"""
mips-dbg CLI package.

This package provides an interactive command shell that drives an external
MIPS instruction-level simulator: load a program, step or run it, and watch
register/memory changes.  Use ``python -m mips_dbg`` or the ``mips-dbg``
console script to launch the debugger.
"""

from __future__ import annotations

from .cli import main

__all__ = ["main"]
__version__ = "0.1.0"
