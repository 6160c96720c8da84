"""Token source with one token of pushback."""

from __future__ import annotations

from pms.input.lexer import Token, next_token


class Scanner:
    """Scan tokens from one input line.

    Whitespace never reaches the caller; the lexer folds it into the
    consumed count of the following token.
    """

    def __init__(self, line: str) -> None:
        self.line = line
        self._pos = 0
        self._last: Token | None = None
        self._pushed_back = False

    @property
    def position(self) -> int:
        return self._pos

    def scan(self) -> Token:
        if self._pushed_back and self._last is not None:
            self._pushed_back = False
            return self._last

        token, consumed = next_token(self.line[self._pos :])
        self._pos += consumed
        self._last = token
        return token

    def unscan(self) -> None:
        """Push the last scanned token back so the next ``scan`` returns it again."""

        if self._last is None:
            raise RuntimeError("unscan called before scan")
        if self._pushed_back:
            raise RuntimeError("only one token can be pushed back")
        self._pushed_back = True
