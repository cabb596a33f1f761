"""Turn source text into a flat list of tokens."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum

__all__ = ["TokenType", "Token", "TokeniseError", "tokenise"]


class TokenType(IntEnum):
    """Kinds of token the language knows."""

    INT = 0
    SEMI = 1
    MULT = 2
    ADD = 3
    DIV = 4
    MINUS = 5
    KEYWORD = 6


@dataclass(frozen=True)
class Token:
    """A single token: its kind and the text it was read from."""

    kind: TokenType
    lexeme: str


class TokeniseError(ValueError):
    """Raised when the source holds a character that starts no token."""


_OPERATORS = {
    "*": TokenType.MULT,
    "+": TokenType.ADD,
    "-": TokenType.MINUS,
    "/": TokenType.DIV,
}

# Every byte below '!' (spaces, tabs, newlines, control bytes) is skipped.
_TOKEN_RE = re.compile(
    rb"(?P<skip>[\x00-\x20]+)"
    rb"|(?P<int>[0-9]+)"
    rb"|(?P<op>[-*+/])"
    rb"|(?P<semi>;)"
    rb"|(?P<keyword>[a-z]+)"
)


def tokenise(src: bytes | str) -> list[Token]:
    """Split ``src`` into tokens, raising TokeniseError on an unknown character."""
    if isinstance(src, str):
        src = src.encode("utf-8")
    src = bytes(src)

    tokens: list[Token] = []
    pos = 0
    while pos < len(src):
        match = _TOKEN_RE.match(src, pos)
        if match is None:
            bad = chr(src[pos])
            raise TokeniseError(f"cannot tokenise {bad!r}")
        pos = match.end()
        group = match.lastgroup
        if group == "skip":
            continue
        lexeme = match.group().decode("ascii")
        if group == "int":
            tokens.append(Token(TokenType.INT, lexeme))
        elif group == "op":
            tokens.append(Token(_OPERATORS[lexeme], lexeme))
        elif group == "semi":
            tokens.append(Token(TokenType.SEMI, lexeme))
        else:
            tokens.append(Token(TokenType.KEYWORD, lexeme))
    return tokens