"""Tab completion for the interactive shell."""

from __future__ import annotations

from collections.abc import Iterable

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from pms.commands import Interpreter


class CommandCompleter(Completer):
    """Offer the candidates the command being typed publishes."""

    def __init__(self, interpreter: Interpreter) -> None:
        self._interpreter = interpreter

    def get_completions(self, document: Document, complete_event: CompleteEvent) -> Iterable[Completion]:
        state = self._interpreter.complete(document.text_before_cursor)
        for candidate in state.candidates:
            yield Completion(candidate, start_position=-len(state.partial))
