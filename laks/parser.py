"""Build expression trees from a token list."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Union

from laks.tokeniser import Token, TokenType

__all__ = [
    "ExpressionType",
    "BinaryOperator",
    "Expression",
    "BinaryExpression",
    "ParseError",
    "parse",
]

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


class ExpressionType(IntEnum):
    """Kinds of expression node."""

    LIT = 0
    BINOP = 1
    PRINT = 2


class BinaryOperator(IntEnum):
    """Operators of a binary expression."""

    ADD = 0
    MINUS = 1
    MULT = 2
    DIV = 3


@dataclass(frozen=True)
class BinaryExpression:
    """An operator applied to two operand expressions."""

    operator: BinaryOperator
    left: "Expression"
    right: "Expression"


@dataclass(frozen=True)
class Expression:
    """An expression node.

    ``value`` is an ``int`` for a literal, a BinaryExpression for a binary
    operation and the printed Expression for a print statement.
    """

    kind: ExpressionType
    value: Union[int, BinaryExpression, "Expression", None]


class ParseError(ValueError):
    """Raised when the tokens do not form a valid program."""


_BINARY_OPERATORS = {
    TokenType.ADD: BinaryOperator.ADD,
    TokenType.MINUS: BinaryOperator.MINUS,
    TokenType.MULT: BinaryOperator.MULT,
    TokenType.DIV: BinaryOperator.DIV,
}


class _Parser:
    def __init__(self, tokens: list[Token]) -> None:
        self._tokens = tokens
        self._pos = 0

    def program(self) -> list[Expression]:
        statements = []
        while self._pos < len(self._tokens):
            statements.append(self._statement())
        return statements

    def _statement(self) -> Expression:
        token = self._peek()
        if token.kind == TokenType.INT:
            parse_body = self._sum
        elif token.kind == TokenType.KEYWORD:
            parse_body = self._keyword
        else:
            raise ParseError(f"do not know how to handle {token!r}")
        try:
            statement = parse_body()
        except ParseError as err:
            raise ParseError(f"error parsing statement. {err}") from err
        self._consume(TokenType.SEMI)
        return statement

    def _keyword(self) -> Expression:
        keyword = self._read()
        if keyword.lexeme == "print":
            return Expression(ExpressionType.PRINT, self._sum())
        raise ParseError(f"do not recognise keyword {keyword.lexeme!r}")

    def _sum(self) -> Expression:
        return self._binary(self._product, (TokenType.ADD, TokenType.MINUS))

    def _product(self) -> Expression:
        return self._binary(self._literal, (TokenType.MULT, TokenType.DIV))

    def _binary(
        self,
        operand: Callable[[], Expression],
        operators: tuple[TokenType, ...],
    ) -> Expression:
        expr = operand()
        while self._peek().kind in operators:
            operator = _BINARY_OPERATORS[self._read().kind]
            right = operand()
            expr = Expression(
                ExpressionType.BINOP, BinaryExpression(operator, expr, right)
            )
        return expr

    def _literal(self) -> Expression:
        lexeme = self._read().lexeme
        if not _INTEGER_RE.fullmatch(lexeme):
            raise ParseError(f"could not parse literal {lexeme!r}. invalid syntax")
        value = int(lexeme)
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise ParseError(f"could not parse literal {lexeme!r}. value out of range")
        return Expression(ExpressionType.LIT, value)

    def _consume(self, kind: TokenType) -> None:
        token = self._peek()
        if token.kind != kind:
            raise ParseError(
                f"error consuming. wanted {kind.name} but got {token.kind.name}"
            )
        self._pos += 1

    def _peek(self) -> Token:
        if self._pos >= len(self._tokens):
            raise ParseError("unexpected end of input")
        return self._tokens[self._pos]

    def _read(self) -> Token:
        token = self._peek()
        self._pos += 1
        return token


def parse(tokens) -> list[Expression]:
    """Parse a sequence of tokens into a list of statements."""
    return _Parser(list(tokens)).program()