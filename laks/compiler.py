"""Compile expression trees to stack-machine bytecode."""

from __future__ import annotations

import struct
from enum import IntEnum

from laks.parser import BinaryExpression, BinaryOperator, Expression, ExpressionType

__all__ = ["OpCode", "CompileError", "compile_program"]

_INT64 = struct.Struct("<q")


class OpCode(IntEnum):
    """Bytecode instructions. PUSH is followed by an 8-byte little-endian operand."""

    PUSH = 0
    ADD = 1
    MULT = 2
    PRINT = 3


class CompileError(ValueError):
    """Raised when an expression tree cannot be compiled."""


_OPCODES = {
    BinaryOperator.ADD: OpCode.ADD,
    BinaryOperator.MULT: OpCode.MULT,
}


def compile_program(exprs) -> bytes:
    """Compile a sequence of statements into one bytecode string."""
    return b"".join(_compile(expr) for expr in exprs)


def _compile(expr: Expression) -> bytes:
    if expr.kind == ExpressionType.LIT:
        return _compile_literal(expr)
    if expr.kind == ExpressionType.BINOP:
        return _compile_binary(expr)
    if expr.kind == ExpressionType.PRINT:
        return _compile_print(expr)
    raise CompileError(f"did not recognise expression type {expr.kind!r}")


def _compile_print(expr: Expression) -> bytes:
    inner = expr.value
    if not isinstance(inner, Expression):
        raise CompileError(f"print expression was not an expression {expr!r}")
    try:
        body = _compile(inner)
    except CompileError as err:
        raise CompileError(
            f"error compiling expression for printing {expr!r}. {err}"
        ) from err
    return body + bytes([OpCode.PRINT])


def _compile_binary(expr: Expression) -> bytes:
    binary = expr.value
    if not isinstance(binary, BinaryExpression):
        raise CompileError(f"failed to convert {expr!r} to a BinaryExpression")
    left = _compile(binary.left)
    right = _compile(binary.right)
    opcode = _OPCODES.get(binary.operator)
    if opcode is None:
        raise CompileError(f"dunno how to handle {binary.operator!r}")
    return left + right + bytes([opcode])


def _compile_literal(expr: Expression) -> bytes:
    value = expr.value
    if not isinstance(value, int) or isinstance(value, bool):
        raise CompileError(f"value of lit expr {expr!r} was not int64")
    try:
        operand = _INT64.pack(value)
    except struct.error as err:
        raise CompileError(f"value of lit expr {expr!r} was not int64") from err
    return bytes([OpCode.PUSH]) + operand