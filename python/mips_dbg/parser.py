"""Lightweight command parsing helpers for mips-dbg."""

from __future__ import annotations

from typing import Tuple


def split_directive(line: str) -> Tuple[str, str]:
    """Split a command line into ``(directive, rest)``.

    The line is trimmed first; the directive is everything up to the first
    whitespace run and ``rest`` is the trimmed remainder.  An empty or
    blank line yields ``("", "")``.
    """
    stripped = line.strip()
    if not stripped:
        return "", ""
    parts = stripped.split(None, 1)
    directive = parts[0]
    rest = parts[1].strip() if len(parts) > 1 else ""
    return directive, rest
