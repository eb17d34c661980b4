"""Command registry for mips-dbg."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .base import Command
from .control import CodeCommand, RunCommand, StepCommand
from .exit import QuitCommand
from .help import HelpCommand
from .registers import RegsCommand
from .session import FileCommand, LoadCommand, ResetCommand

Conflict = Tuple[str, str, str]


class DuplicateCommandError(ValueError):
    """Raised when two commands claim the same name or alias."""

    def __init__(self, conflicts: Sequence[Conflict]) -> None:
        self.conflicts: List[Conflict] = list(conflicts)
        details = "; ".join(
            f'directive "{directive}" is occupied by both "{new}" and "{existing}" handler'
            for directive, new, existing in self.conflicts
        )
        super().__init__(details)


class CommandRegistry:
    """Stores the known commands and resolves aliases."""

    def __init__(self) -> None:
        self._commands: Dict[str, Command] = {}
        self._ordered: List[Command] = []

    def register(self, command: Command) -> None:
        self.register_all([command])

    def register_all(self, commands: Iterable[Command]) -> None:
        """Index a command table, rejecting it whole if any directive clashes."""
        staged: Dict[str, Command] = {}
        ordered: List[Command] = []
        conflicts: List[Conflict] = []
        for command in commands:
            ordered.append(command)
            for directive in command.directives():
                owner = self._commands.get(directive) or staged.get(directive)
                if owner is not None:
                    conflicts.append((directive, command.name, owner.name))
                    continue
                staged[directive] = command
        if conflicts:
            raise DuplicateCommandError(conflicts)
        self._commands.update(staged)
        self._ordered.extend(ordered)

    def get(self, name: str) -> Optional[Command]:
        return self._commands.get(name)

    def list_commands(self) -> Iterable[Command]:
        return list(self._ordered)

    def directives(self) -> List[str]:
        return sorted(self._commands)


def default_commands() -> List[Command]:
    return [
        FileCommand(),
        ResetCommand(),
        LoadCommand(),
        RunCommand(),
        CodeCommand(),
        StepCommand(),
        RegsCommand(),
        HelpCommand(),
        QuitCommand(),
    ]


def build_registry(commands: Optional[Iterable[Command]] = None) -> CommandRegistry:
    registry = CommandRegistry()
    table = list(commands) if commands is not None else default_commands()
    registry.register_all(table)
    for command in table:
        bind = getattr(command, "bind", None)
        if callable(bind):
            bind(registry)
    return registry


__all__ = ["Command", "CommandRegistry", "DuplicateCommandError", "build_registry", "default_commands"]
