"""Run command lines and compute completions."""

from __future__ import annotations

import time
from collections.abc import Mapping
from dataclasses import dataclass

from loguru import logger

from pms.api import API
from pms.commands.base import Command, TabComplete, describe
from pms.commands.registry import VERBS, CommandFactory, new_command, verbs
from pms.errors import ParseError, PmsError
from pms.input.lexer import END_TOKEN, Token, TokenClass, tokenize
from pms.input.scanner import Scanner

STATEMENT_BOUNDARIES = (TokenClass.STOP, TokenClass.COMMENT)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one statement."""

    verb: str
    status: str
    error: str
    elapsed_ms: int

    @property
    def ok(self) -> bool:
        return self.status == "ok"


class Interpreter:
    """Dispatch each statement of a line to a fresh command.

    Statements are separated by ``;`` and a ``#`` comment ends the line. The
    first failing statement stops the rest of the line.
    """

    def __init__(self, api: API, *, factories: Mapping[str, CommandFactory] | None = None) -> None:
        self.api = api
        self._factories: Mapping[str, CommandFactory] = factories if factories is not None else VERBS

    def verbs(self) -> list[str]:
        return verbs(self._factories)

    def run(self, line: str) -> list[CommandResult]:
        scanner = Scanner(line)
        results: list[CommandResult] = []
        while True:
            token = scanner.scan()
            if token.kind in (TokenClass.END, TokenClass.COMMENT):
                return results
            if token.kind is TokenClass.STOP:
                continue

            result = self._run_statement(token, scanner)
            results.append(result)
            if not result.ok:
                return results

    def _run_statement(self, verb: Token, scanner: Scanner) -> CommandResult:
        start = time.monotonic()
        try:
            if verb.kind is not TokenClass.IDENTIFIER:
                raise ParseError(f"unexpected '{describe(verb)}', expected command")
            command = new_command(verb.text, self.api, self._factories)
            self._feed(command, scanner)
            command.exec()
            status, error = "ok", ""
        except PmsError as exc:
            status, error = "error", str(exc)

        elapsed_ms = int((time.monotonic() - start) * 1000)
        logger.info("command.run verb={} status={} elapsed_ms={}", verb.text, status, elapsed_ms)
        if error:
            logger.debug("command.error verb={} error={}", verb.text, error)
        return CommandResult(verb=verb.text, status=status, error=error, elapsed_ms=elapsed_ms)

    @staticmethod
    def _feed(command: Command, scanner: Scanner) -> None:
        while True:
            token = scanner.scan()
            if token.kind in STATEMENT_BOUNDARIES:
                # Leave the boundary for the statement loop; the command sees END.
                scanner.unscan()
                token = END_TOKEN
            command.parse(token)
            if token.kind is TokenClass.END:
                return

    def complete(self, line: str) -> TabComplete:
        """Return the completion state for the word at the end of ``line``."""

        tokens = [token for token in tokenize(line) if token.kind is not TokenClass.END]
        if any(token.kind is TokenClass.COMMENT for token in tokens):
            return TabComplete()

        statement = _last_statement(tokens)
        trailing_space = not line or line[-1].isspace()
        if not statement:
            return TabComplete("", tuple(self.verbs()))

        verb, args = statement[0], statement[1:]
        if not args and not trailing_space:
            return _filtered(TabComplete(verb.text, tuple(self.verbs())))
        if verb.kind is not TokenClass.IDENTIFIER or verb.text not in self._factories:
            return TabComplete()

        command = new_command(verb.text, self.api, self._factories)
        if trailing_space:
            args.append(END_TOKEN)
        for token in args:
            try:
                command.parse(token)
            except ParseError:
                break
        return _filtered(command.tab_complete)


def _last_statement(tokens: list[Token]) -> list[Token]:
    for index in range(len(tokens) - 1, -1, -1):
        if tokens[index].kind is TokenClass.STOP:
            return tokens[index + 1 :]
    return tokens


def _filtered(state: TabComplete) -> TabComplete:
    return TabComplete(state.partial, tuple(state.matches()))
