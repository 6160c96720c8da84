"""CLI renderer for pms."""

from __future__ import annotations

import threading

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer
from prompt_toolkit.patch_stdout import patch_stdout
from rich.console import Console
from rich.table import Table

from pms.commands import CommandResult
from pms.songlist import Songlist

PROMPT = "pms> "


class Renderer:
    """CLI renderer using Rich for terminal output."""

    def __init__(self, *, completer: Completer | None = None, console: Console | None = None) -> None:
        self.console: Console = console or Console()
        self._completer = completer
        self._prompt_session: PromptSession[str] | None = None
        self._print_lock = threading.Lock()

    def info(self, message: str) -> None:
        self._print(message)

    def error(self, message: str) -> None:
        self._print(f"[bold red]Error:[/bold red] {message}")

    def welcome(self, message: str = "[bold blue]pms[/bold blue] - practical music search") -> None:
        self._print(message)
        self._print("[dim]Try 'list goto my-playlists', 'cursor down' or 'list open'. Ctrl-D quits.[/dim]")

    def results(self, results: list[CommandResult]) -> None:
        for result in results:
            if not result.ok:
                self.error(result.error)

    def songlist(self, lst: Songlist | None, *, height: int) -> None:
        """Render a window of ``height`` rows around the cursor."""

        if lst is None:
            self._print("[dim](no list)[/dim]")
            return

        columns = lst.visible_columns or lst.column_names()
        table = Table(title=f"{lst.name} [dim]({lst.cursor + 1}/{len(lst)})[/dim]" if len(lst) else lst.name)
        table.add_column("#", justify="right", style="dim")
        for column in columns:
            table.add_column(column)

        first = max(0, min(lst.cursor - height // 2, len(lst) - height))
        for index in range(first, min(first + height, len(lst))):
            row = lst.row(index) or {}
            style = "reverse" if index == lst.cursor else None
            table.add_row(str(index + 1), *(row.get(column, "") for column in columns), style=style)
        with self._print_lock:
            self.console.print(table)

    def get_user_input(self) -> str:
        if self._prompt_session is None:
            self._prompt_session = PromptSession(completer=self._completer, complete_while_typing=False)
        with patch_stdout(raw=True):
            return self._prompt_session.prompt(PROMPT)

    def _print(self, message: str) -> None:
        with self._print_lock:
            self.console.print(message)
