import pytest

from laks.parser import (
    BinaryExpression,
    BinaryOperator,
    Expression,
    ExpressionType,
    ParseError,
    parse,
)
from laks.tokeniser import Token, TokenType


def lit(value):
    return Expression(ExpressionType.LIT, value)


def binop(operator, left, right):
    return Expression(ExpressionType.BINOP, BinaryExpression(operator, left, right))


def test_empty():
    assert parse([]) == []


def test_literal():
    tokens = [Token(TokenType.INT, "44"), Token(TokenType.SEMI, ";")]
    assert parse(tokens) == [lit(44)]


def test_simple_add():
    tokens = [
        Token(TokenType.INT, "6"),
        Token(TokenType.ADD, "+"),
        Token(TokenType.INT, "7"),
        Token(TokenType.SEMI, ";"),
    ]
    assert parse(tokens) == [binop(BinaryOperator.ADD, lit(6), lit(7))]


def test_multiplication_binds_tighter_on_right():
    tokens = [
        Token(TokenType.INT, "6"),
        Token(TokenType.ADD, "+"),
        Token(TokenType.INT, "7"),
        Token(TokenType.MULT, "*"),
        Token(TokenType.INT, "9"),
        Token(TokenType.SEMI, ";"),
    ]
    assert parse(tokens) == [
        binop(
            BinaryOperator.ADD,
            lit(6),
            binop(BinaryOperator.MULT, lit(7), lit(9)),
        )
    ]


def test_multiplication_binds_tighter_on_left():
    tokens = [
        Token(TokenType.INT, "6"),
        Token(TokenType.MULT, "*"),
        Token(TokenType.INT, "7"),
        Token(TokenType.ADD, "+"),
        Token(TokenType.INT, "9"),
        Token(TokenType.SEMI, ";"),
    ]
    assert parse(tokens) == [
        binop(
            BinaryOperator.ADD,
            binop(BinaryOperator.MULT, lit(6), lit(7)),
            lit(9),
        )
    ]


def test_print_something():
    tokens = [
        Token(TokenType.KEYWORD, "print"),
        Token(TokenType.INT, "7"),
        Token(TokenType.MULT, "*"),
        Token(TokenType.INT, "8"),
        Token(TokenType.SEMI, ";"),
    ]
    assert parse(tokens) == [
        Expression(
            ExpressionType.PRINT,
            binop(BinaryOperator.MULT, lit(7), lit(8)),
        )
    ]


def test_same_precedence_is_left_associative():
    tokens = [
        Token(TokenType.INT, "1"),
        Token(TokenType.MINUS, "-"),
        Token(TokenType.INT, "2"),
        Token(TokenType.ADD, "+"),
        Token(TokenType.INT, "3"),
        Token(TokenType.SEMI, ";"),
    ]
    assert parse(tokens) == [
        binop(
            BinaryOperator.ADD,
            binop(BinaryOperator.MINUS, lit(1), lit(2)),
            lit(3),
        )
    ]


def test_several_statements():
    tokens = [
        Token(TokenType.INT, "1"),
        Token(TokenType.SEMI, ";"),
        Token(TokenType.INT, "2"),
        Token(TokenType.SEMI, ";"),
    ]
    assert parse(tokens) == [lit(1), lit(2)]


def test_statement_starting_with_operator_raises():
    with pytest.raises(ParseError, match="do not know how to handle"):
        parse([Token(TokenType.ADD, "+"), Token(TokenType.SEMI, ";")])


def test_unknown_keyword_raises():
    tokens = [
        Token(TokenType.KEYWORD, "show"),
        Token(TokenType.INT, "1"),
        Token(TokenType.SEMI, ";"),
    ]
    with pytest.raises(ParseError, match="do not recognise keyword 'show'"):
        parse(tokens)


def test_wrong_terminator_raises():
    tokens = [
        Token(TokenType.INT, "1"),
        Token(TokenType.INT, "2"),
    ]
    with pytest.raises(ParseError, match="wanted SEMI but got INT"):
        parse(tokens)


def test_missing_semicolon_raises():
    with pytest.raises(ParseError):
        parse([Token(TokenType.INT, "1")])


def test_bad_operand_raises():
    tokens = [
        Token(TokenType.INT, "1"),
        Token(TokenType.ADD, "+"),
        Token(TokenType.SEMI, ";"),
    ]
    with pytest.raises(ParseError, match="could not parse literal"):
        parse(tokens)


def test_literal_out_of_range_raises():
    tokens = [Token(TokenType.INT, "9223372036854775808"), Token(TokenType.SEMI, ";")]
    with pytest.raises(ParseError, match="out of range"):
        parse(tokens)


def test_largest_literal_is_accepted():
    tokens = [Token(TokenType.INT, "9223372036854775807"), Token(TokenType.SEMI, ";")]
    assert parse(tokens) == [lit(2**63 - 1)]