"""Command protocol shared by every verb."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from pms.api import API
from pms.errors import ParseError
from pms.input.lexer import Token, TokenClass


@dataclass(frozen=True)
class TabComplete:
    """Completion state: the word being typed and what it may become."""

    partial: str = ""
    candidates: tuple[str, ...] = ()

    def matches(self) -> list[str]:
        return [candidate for candidate in self.candidates if candidate.startswith(self.partial)]


def describe(token: Token) -> str:
    """Render a token for error messages."""

    if token.kind is TokenClass.END:
        return "END"
    return token.text


class Command(ABC):
    """Two-phase command: ``parse`` every token of a statement, then ``exec``.

    ``parse`` is called once per token, ending with the END token, and raises
    ``ParseError`` on invalid input. ``exec`` runs once after END was parsed.
    Once ``finished`` is set the command's grammar is satisfied and only END
    is accepted.
    """

    name: ClassVar[str] = ""

    def __init__(self, api: API) -> None:
        self.api = api
        self.finished = False
        self.tab_complete = TabComplete()

    @abstractmethod
    def parse(self, token: Token) -> None:
        """Consume one token."""

    @abstractmethod
    def exec(self) -> None:
        """Apply the parsed action to the application."""

    def expect_end(self, token: Token) -> None:
        if token.kind is not TokenClass.END:
            raise ParseError(f"Unknown input '{describe(token)}', expected END")
        self.set_tab_complete_empty()

    def set_tab_complete(self, partial: str, candidates: Iterable[str]) -> None:
        self.tab_complete = TabComplete(partial, tuple(candidates))

    def set_tab_complete_empty(self) -> None:
        self.tab_complete = TabComplete()
