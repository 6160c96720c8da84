"""Verb registry."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from pms.api import API
from pms.commands.base import Command
from pms.commands.cursor import CursorCommand
from pms.commands.list import ListCommand
from pms.errors import ParseError

CommandFactory = Callable[[API], Command]

VERBS: dict[str, CommandFactory] = {
    CursorCommand.name: CursorCommand,
    ListCommand.name: ListCommand,
}


def verbs(factories: Mapping[str, CommandFactory] = VERBS) -> list[str]:
    return sorted(factories)


def new_command(verb: str, api: API, factories: Mapping[str, CommandFactory] = VERBS) -> Command:
    """Create a fresh command for ``verb``."""

    factory = factories.get(verb)
    if factory is None:
        raise ParseError(f"unknown command '{verb}'")
    return factory(api)
