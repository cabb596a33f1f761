"""A stack machine that executes compiled bytecode."""

from __future__ import annotations

import struct
from typing import TextIO

from laks.compiler import OpCode

__all__ = ["Stack", "BytecodeError", "run"]

_INT64 = struct.Struct("<q")


class BytecodeError(ValueError):
    """Raised when bytecode cannot be executed."""


class Stack:
    """A last-in, first-out stack of integers."""

    def __init__(self) -> None:
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: int) -> None:
        self._items.append(value)

    def pop(self) -> int:
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()


def _wrap_int64(value: int) -> int:
    return (value + 2**63) % 2**64 - 2**63


def run(bytecode: bytes, out: TextIO) -> None:
    """Execute ``bytecode``, writing printed values to ``out``."""
    code = bytes(bytecode)
    stack = Stack()
    ip = 0
    try:
        while ip < len(code):
            opcode = code[ip]
            ip += 1
            if opcode == OpCode.PUSH:
                if ip + _INT64.size > len(code):
                    raise BytecodeError("truncated operand for push")
                (value,) = _INT64.unpack_from(code, ip)
                ip += _INT64.size
                stack.push(value)
            elif opcode == OpCode.MULT:
                a = stack.pop()
                b = stack.pop()
                stack.push(_wrap_int64(a * b))
            elif opcode == OpCode.PRINT:
                out.write(f"{stack.pop()}\n")
            else:
                raise BytecodeError(f"could not decode byte code '{opcode}'")
    except IndexError as err:
        raise BytecodeError("value stack underflow") from err