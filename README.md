# laks

`laks` is a very small programming language for integer arithmetic. A program
is a sequence of statements, each ending in `;`. A statement is either an
expression or a `print` of an expression:

```
print 7 * 8;
print 6 * 7;
```

Integer literals are unsigned decimal digits and must fit in a signed 64-bit
integer. `print` is the only keyword. A statement must start with an integer
literal or a keyword, so there is no unary minus.

## How a program runs

Source text goes through four stages:

1. `laks.tokeniser.tokenise` turns source bytes (or a `str`, which is encoded
   as UTF-8) into a list of `Token`s. Each token has a `kind` (a `TokenType`)
   and a `lexeme`. Every byte below `!` (spaces, tabs, newlines and control
   bytes) is skipped.
2. `laks.parser.parse` turns tokens into a list of `Expression` trees. `*` and
   `/` bind more tightly than `+` and `-`, and operators of equal precedence
   group from the left. An `Expression` has a `kind` (an `ExpressionType`) and
   a `value`: an `int` for a literal, a `BinaryExpression` for a binary
   operation, or the printed `Expression` for a `print` statement.
3. `laks.compiler.compile_program` turns the expressions into bytecode. Each
   literal becomes an `OpCode.PUSH` byte followed by a signed 64-bit
   little-endian integer; a binary operation is its left operand, its right
   operand and then its opcode; `print` is its operand followed by
   `OpCode.PRINT`.
4. `laks.interpreter.run` executes the bytecode on a value stack and writes
   each printed value to a text stream, one per line. Multiplication wraps
   around at 64 bits.

## What the language does not do yet

- The stack machine runs only push, multiply and print. The compiler emits
  `OpCode.ADD` for `+`, but running it raises `BytecodeError`.
- The parser accepts `-` and `/`, but the compiler has no instructions for
  them and raises `CompileError`.
- There are no variables, no parentheses and no keywords other than `print`.

## Installation

```
pip install .
```

## Command line

```
laks program.laks
```

With no file name, the program is read from standard input:

```
echo "print 7 * 8;" | laks
```

The command first prints the tokens and the parsed expressions, each on a line
starting with a tab. It then runs the program and prints its output. If the
file cannot be read or any stage fails, it prints `laks: ` and the error to
standard error and exits with status 1.

## Library use

```python
import io

from laks.tokeniser import tokenise
from laks.parser import parse
from laks.compiler import compile_program
from laks.interpreter import run

tokens = tokenise(b"print 7 * 8;")
exprs = parse(tokens)
bytecode = compile_program(exprs)

out = io.StringIO()
run(bytecode, out)
assert out.getvalue() == "56\n"
```

`laks.interpreter` also provides `Stack`, the last-in, first-out stack of
integers the machine uses, with `push` and `pop`.

## Errors

Each stage raises its own exception, all subclasses of `ValueError`, when its
input is invalid:

- `TokeniseError` for a character that starts no token;
- `ParseError` for tokens that do not form a program, such as a missing `;`,
  an unknown keyword, an unexpected end of input or an out-of-range literal;
- `CompileError` for an expression that cannot be compiled, including `-` and
  `/`;
- `BytecodeError` for an unknown opcode, a truncated `PUSH` operand or a pop
  from an empty value stack.

## Running the tests

```
pip install .[test]
pytest
```