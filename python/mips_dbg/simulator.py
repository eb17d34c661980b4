"""Contract between mips-dbg and the external instruction-level simulator.

The debugger does not decode instructions or model the machine; it drives a
simulator program through the small surface described by
:class:`SimulatorProgram`.  Concrete simulators are plugged in with a
``module:attr`` factory spec (see :func:`load_program_factory`).  The factory
is called with the ordered source lines of the loaded file and must return an
object implementing the contract.
"""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, List, Optional, Sequence, TypeVar

LOGGER = logging.getLogger("mips_dbg.simulator")

K = TypeVar("K")
V = TypeVar("V")


class SimulatorLoadError(RuntimeError):
    """Raised when a simulator factory spec cannot be resolved."""


@dataclass(frozen=True)
class ChangeRecord(Generic[K, V]):
    """One observed mutation: a register or a memory cell, before and after."""

    key: K
    previous: V
    current: V


@dataclass(frozen=True)
class DirtyInfo:
    """Registers and memory cells mutated by the most recent step."""

    registers: Sequence[ChangeRecord[int, int]] = field(default_factory=tuple)
    memory: Sequence[ChangeRecord[int, int]] = field(default_factory=tuple)


@dataclass(frozen=True)
class SourceRecord:
    source: str
    origin: Optional[str] = None
    pseudo_index: Optional[int] = None


class SimulatorProgram:
    """Abstract simulator program consumed by the debugger."""

    def step(self) -> None:
        raise NotImplementedError("SimulatorProgram must implement step()")

    def run(self) -> None:
        raise NotImplementedError("SimulatorProgram must implement run()")

    def read_register(self, reg: int) -> int:
        raise NotImplementedError("SimulatorProgram must implement read_register()")

    def program_counter(self) -> int:
        raise NotImplementedError("SimulatorProgram must implement program_counter()")

    def get_source(self, address: int) -> SourceRecord:
        raise NotImplementedError("SimulatorProgram must implement get_source()")

    def get_dirty_info(self) -> DirtyInfo:
        raise NotImplementedError("SimulatorProgram must implement get_dirty_info()")

    def register_numbers(self) -> Sequence[int]:
        raise NotImplementedError("SimulatorProgram must implement register_numbers()")

    def register_name(self, reg: int) -> str:
        raise NotImplementedError("SimulatorProgram must implement register_name()")


ProgramFactory = Callable[[List[str]], SimulatorProgram]


def load_program_factory(spec: str) -> ProgramFactory:
    """Resolve a ``module:attr`` spec into a callable program factory."""
    module_name, _, attr = spec.partition(":")
    if not module_name or not attr:
        raise SimulatorLoadError(f"Invalid simulator spec: {spec!r} (expected module:attr)")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise SimulatorLoadError(f"cannot import simulator module {module_name!r}: {exc}") from exc
    factory: Any = getattr(module, attr, None)
    if factory is None:
        raise SimulatorLoadError(f"simulator module {module_name!r} has no attribute {attr!r}")
    if not callable(factory):
        raise SimulatorLoadError(f"simulator factory {spec!r} is not callable")
    LOGGER.debug("resolved simulator factory %s", spec)
    return factory


__all__ = [
    "ChangeRecord",
    "DirtyInfo",
    "ProgramFactory",
    "SimulatorLoadError",
    "SimulatorProgram",
    "SourceRecord",
    "load_program_factory",
]
