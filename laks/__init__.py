"""A tiny integer-arithmetic language: tokeniser, parser, bytecode compiler and stack machine."""

__version__ = "0.1.0"
__all__ = ["tokeniser", "parser", "compiler", "interpreter", "cli"]