"""Interactive loop that parses each line and prints the parsed program."""

from __future__ import annotations

import getpass
import sys
from collections.abc import Sequence
from typing import TextIO

from monke.lexer import Lexer
from monke.parsing import Parser

PROMPT = ">>"


def _print_parser_errors(stream_out: TextIO, errors: list[str]) -> None:
    stream_out.write("Woops! We ran into some monkey business here!\n")
    stream_out.write(" parser errors:\n")
    for msg in errors:
        stream_out.write(f"\t{msg}\n")


def start(stream_in: TextIO, stream_out: TextIO) -> None:
    """Read lines from ``stream_in`` and write each parsed program to ``stream_out``."""
    while True:
        stream_out.write(PROMPT)
        stream_out.flush()
        line = stream_in.readline()
        if not line:
            return
        line = line.removesuffix("\n").removesuffix("\r")

        parser = Parser(Lexer(line))
        program = parser.parse_program()
        if parser.errors:
            _print_parser_errors(stream_out, parser.errors)
            continue
        stream_out.write(f"{program}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Greet the current user and run the interactive loop on stdin/stdout."""
    username = getpass.getuser()
    print(f"Hello {username}! This is the Monke programming language!")
    print("Type in any commands to see generated parsed code")
    start(sys.stdin, sys.stdout)
    return 0