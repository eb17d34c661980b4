"""prompt_toolkit completer for mips-dbg."""

from __future__ import annotations

from typing import Iterable, List

from prompt_toolkit.completion import CompleteEvent, Completer, Completion, PathCompleter
from prompt_toolkit.document import Document

from .commands import CommandRegistry

PATH_COMMANDS = {"load"}


class DebuggerCompleter(Completer):
    """Completes directives, and file paths after ``load``."""

    def __init__(self, registry: CommandRegistry) -> None:
        self.registry = registry
        self._path = PathCompleter(expanduser=True)

    def get_completions(self, document: Document, complete_event: CompleteEvent) -> Iterable[Completion]:
        text = document.text_before_cursor.lstrip()
        parts = text.split(None, 1)
        if not parts or (len(parts) == 1 and not text[-1].isspace()):
            prefix = parts[0] if parts else ""
            for entry in self._command_candidates(prefix):
                yield Completion(entry, start_position=-len(prefix))
            return
        command = self.registry.get(parts[0])
        if command is None or command.name not in PATH_COMMANDS:
            return
        argument = parts[1] if len(parts) > 1 else ""
        path_document = Document(argument, cursor_position=len(argument))
        yield from self._path.get_completions(path_document, complete_event)

    def _command_candidates(self, prefix: str) -> List[str]:
        return [name for name in self.registry.directives() if name.startswith(prefix)]
