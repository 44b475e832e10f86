"""Lexer, Pratt parser, parser tracing and parse-and-print REPL for the Monke programming language."""

__version__ = "0.1.0"