"""Line lexer for the command language.

``next_token`` is a pure function: it looks at the head of the remaining
input, returns one token and the number of characters it consumed. Callers
drive iteration by slicing the input and calling it again; ``tokenize`` does
exactly that.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class TokenClass(Enum):
    """Lexical class of a token."""

    IDENTIFIER = "identifier"
    SEPARATOR = "separator"
    STOP = "stop"
    OPEN = "open"
    CLOSE = "close"
    VARIABLE = "variable"
    COMMENT = "comment"
    END = "end"


@dataclass(frozen=True)
class Token:
    """One lexical unit of a command line."""

    kind: TokenClass
    text: str

    def __str__(self) -> str:
        return self.text


END_TOKEN = Token(TokenClass.END, "")

COMMENT_CHAR = "#"
QUOTE_CHAR = '"'
ESCAPE_CHAR = "\\"

_SINGLE_CHAR_TOKENS: dict[str, TokenClass] = {
    ";": TokenClass.STOP,
    "|": TokenClass.SEPARATOR,
    "$": TokenClass.VARIABLE,
    "{": TokenClass.OPEN,
    "}": TokenClass.CLOSE,
}

# Characters that terminate an unquoted word.
WORD_BREAKS = frozenset(_SINGLE_CHAR_TOKENS) | {COMMENT_CHAR}


def next_token(text: str) -> tuple[Token, int]:
    """Return the next token in ``text`` and how many characters it consumed."""

    pos = _skip_whitespace(text, 0)
    if pos >= len(text):
        return END_TOKEN, pos

    char = text[pos]
    if char == COMMENT_CHAR:
        return Token(TokenClass.COMMENT, text[pos:]), len(text)

    kind = _SINGLE_CHAR_TOKENS.get(char)
    if kind is not None:
        return Token(kind, char), pos + 1

    return _scan_identifier(text, pos)


def tokenize(text: str) -> Iterator[Token]:
    """Yield every token of ``text``, ending with exactly one END token."""

    pos = 0
    while True:
        token, consumed = next_token(text[pos:])
        pos += consumed
        yield token
        if token.kind is TokenClass.END:
            return


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _scan_identifier(text: str, pos: int) -> tuple[Token, int]:
    chars: list[str] = []
    quoted = False
    while pos < len(text):
        char = text[pos]
        if quoted:
            if char == ESCAPE_CHAR and pos + 1 < len(text):
                chars.append(text[pos + 1])
                pos += 2
                continue
            if char == QUOTE_CHAR:
                quoted = False
            else:
                chars.append(char)
            pos += 1
            continue

        if char == QUOTE_CHAR:
            quoted = True
            pos += 1
            continue
        if char.isspace() or char in WORD_BREAKS:
            break
        chars.append(char)
        pos += 1

    # An unterminated quote is closed implicitly at end of input.
    return Token(TokenClass.IDENTIFIER, "".join(chars)), pos
