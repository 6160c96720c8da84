"""Command protocol, verbs and interpreter."""

from pms.commands.base import Command, TabComplete
from pms.commands.cursor import CursorCommand
from pms.commands.interpreter import CommandResult, Interpreter
from pms.commands.list import ListCommand
from pms.commands.registry import VERBS, new_command, verbs

__all__ = [
    "VERBS",
    "Command",
    "CommandResult",
    "CursorCommand",
    "Interpreter",
    "ListCommand",
    "TabComplete",
    "new_command",
    "verbs",
]
