"""Command line entry point: tokenise, parse, compile and run a program."""

from __future__ import annotations

import argparse
import sys

from laks.compiler import CompileError, compile_program
from laks.interpreter import BytecodeError, run
from laks.parser import ParseError, parse
from laks.tokeniser import TokeniseError, tokenise

__all__ = ["main"]


def main(argv=None) -> int:
    """Run a program from a file, or from standard input when no file is given."""
    arg_parser = argparse.ArgumentParser(prog="laks", description=__doc__)
    arg_parser.add_argument("file", nargs="?", help="source file (default: stdin)")
    args = arg_parser.parse_args(argv)

    try:
        if args.file is None:
            source = sys.stdin.buffer.read()
        else:
            with open(args.file, "rb") as handle:
                source = handle.read()

        tokens = tokenise(source)
        print(f"\t{tokens}")
        exprs = parse(tokens)
        for expr in exprs:
            print(f"\t{expr}")
        bytecode = compile_program(exprs)
        run(bytecode, sys.stdout)
    except (OSError, TokeniseError, ParseError, CompileError, BytecodeError) as err:
        print(f"laks: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())