"""Indented BEGIN/END tracing of parser calls."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

_INDENT = "\t"


class Tracer:
    """Writes nested BEGIN/END lines, indented one tab per nesting level."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self.level = 0

    def _print(self, text: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(f"{_INDENT * (self.level - 1)}{text}\n")

    def trace(self, msg: str) -> str:
        """Enter a traced section and return its name."""
        self.level += 1
        self._print(f"BEGIN {msg}")
        return msg

    def untrace(self, msg: str) -> None:
        """Leave the traced section named ``msg``."""
        self._print(f"END {msg}")
        self.level -= 1

    @contextmanager
    def span(self, msg: str) -> Iterator[None]:
        """Trace the body of a ``with`` block as one section."""
        self.trace(msg)
        try:
            yield
        finally:
            self.untrace(msg)