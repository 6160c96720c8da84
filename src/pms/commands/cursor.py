"""Cursor movement in the songlist view."""

from __future__ import annotations

import random
import re
import time

from pms.api import API
from pms.commands.base import Command, describe
from pms.errors import ExecError, ParseError
from pms.input.lexer import Token, TokenClass

PAGE_UP = ("pgup", "pageup")
PAGE_DOWN = ("pgdn", "pagedn", "pagedown")
DIRECTIVES = ("up", "down", *PAGE_UP, *PAGE_DOWN, "home", "end", "current", "random")

SIGNED_INT_RE = re.compile(r"^[+-]?\d+$")


class CursorCommand(Command):
    """Move the cursor in the songlist view.

    Accepts human-readable directives such as ``up`` and ``pgdn``, or a
    signed number for a relative move.
    """

    name = "cursor"

    def __init__(self, api: API, *, rng: random.Random | None = None) -> None:
        super().__init__(api)
        self.rng = rng or random.Random(time.time_ns())
        self.relative = 0
        self.absolute = 0
        self.current = False

    def parse(self, token: Token) -> None:
        if self.finished:
            self.expect_end(token)
            return

        if token.kind is TokenClass.END:
            self.set_tab_complete("", DIRECTIVES)
            raise ParseError(
                "Unexpected END, expected cursor offset. "
                "Try one of: up, down, pgup, pgdn, home, end, current, random, <number>"
            )
        if token.kind is not TokenClass.IDENTIFIER:
            raise ParseError(f"Unexpected '{describe(token)}', expected cursor offset")

        self.set_tab_complete(token.text, DIRECTIVES)
        self._parse_directive(token.text)
        self.finished = True

    def _parse_directive(self, text: str) -> None:
        widget = self.api.widget
        if text == "up":
            self.relative = -1
        elif text == "down":
            self.relative = 1
        elif text in PAGE_UP:
            _, height = widget.size()
            self.relative = -height
        elif text in PAGE_DOWN:
            _, height = widget.size()
            self.relative = height
        elif text == "home":
            self.absolute = 0
        elif text == "end":
            self.absolute = len(widget) - 1
        elif text == "current":
            self.current = True
        elif text == "random":
            # An empty list leaves the target at its default.
            length = len(widget)
            if length > 0:
                self.absolute = self.rng.randrange(length)
        elif SIGNED_INT_RE.match(text):
            self.relative = int(text)
        else:
            raise ParseError(f"Cannot move cursor: input '{text}' is not recognized, and is not a number")

    def exec(self) -> None:
        widget = self.api.widget
        if self.current:
            song = self.api.current_song()
            if song is None:
                raise ExecError("No song is currently playing.")
            widget.cursor_to_song(song)
        elif self.relative != 0:
            widget.move_cursor(self.relative)
        else:
            widget.set_cursor(self.absolute)
