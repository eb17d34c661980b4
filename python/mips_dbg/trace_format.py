"""Rendering of step trace lines.

Change records reported by the simulator are turned into fixed-width,
upper-case hexadecimal lines:

    $t0: 0x00000000 -> 0x00000001
    0x10010000: 0x00 -> 0xFF

Register values and memory addresses are one machine word (32 bits); memory
values are one byte.  Values are rendered exactly as reported apart from
masking to their width, so a negative address key shows up as its
two's-complement address.
"""

from __future__ import annotations

from typing import Callable, Iterable, List

from .simulator import ChangeRecord, DirtyInfo, SourceRecord

WORD_BITS = 32
WORD_MASK = (1 << WORD_BITS) - 1
BYTE_MASK = 0xFF


def word_to_hex(value: int) -> str:
    return f"{int(value) & WORD_MASK:08X}"


def byte_to_hex(value: int) -> str:
    return f"{int(value) & BYTE_MASK:02X}"


def render_register_change(record: ChangeRecord[int, int], reg_name: Callable[[int], str]) -> str:
    name = reg_name(record.key)
    return f"${name}: 0x{word_to_hex(record.previous)} -> 0x{word_to_hex(record.current)}"


def render_memory_change(record: ChangeRecord[int, int]) -> str:
    return f"0x{word_to_hex(record.key)}: 0x{byte_to_hex(record.previous)} -> 0x{byte_to_hex(record.current)}"


def render_dirty_info(dirty: DirtyInfo, reg_name: Callable[[int], str]) -> List[str]:
    """Registers first, then memory, each in the order the simulator reported."""
    lines = [render_register_change(record, reg_name) for record in dirty.registers]
    lines.extend(render_memory_change(record) for record in dirty.memory)
    return lines


def render_source_line(pc: int, record: SourceRecord) -> str:
    """Render the instruction at *pc*, noting its pseudo-instruction origin if any."""
    line = f"0x{word_to_hex(pc)}: {record.source}"
    if record.origin and record.pseudo_index is not None:
        line += f" ({record.origin}  @{record.pseudo_index})"
    elif record.origin:
        line += f" ({record.origin})"
    return line


def render_register_dump(values: Iterable[tuple[str, int]]) -> List[str]:
    return [f"${name}: 0x{word_to_hex(value)}" for name, value in values]


__all__ = [
    "WORD_BITS",
    "byte_to_hex",
    "word_to_hex",
    "render_dirty_info",
    "render_memory_change",
    "render_register_change",
    "render_register_dump",
    "render_source_line",
]
