"""Command line input: lexer and scanner."""

from pms.input.lexer import END_TOKEN, Token, TokenClass, next_token, tokenize
from pms.input.scanner import Scanner

__all__ = ["END_TOKEN", "Scanner", "Token", "TokenClass", "next_token", "tokenize"]
