from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

DEBUG = os.environ.get("EXPRTREE_DEBUG", "").lower() in ("1", "true", "yes")


class IndentingWriter:
    def __init__(self, indent_size: int = 3) -> None:
        self._indent_size = indent_size
        self._indents = 0

    def debug(self, message: str) -> None:
        if DEBUG:
            self._print_indentation()
            print(message, end="")

    def debugln(self, message: str) -> None:
        if DEBUG:
            self.debug(message)
            print()

    def indent(self) -> None:
        if DEBUG:
            self._indents += 1

    def dedent(self) -> None:
        if DEBUG:
            self._indents -= 1

    def _print_indentation(self) -> None:
        if DEBUG:
            print(" " * self._indent_size * self._indents, end="")


@contextmanager
def indented_output(output_writer: IndentingWriter) -> Iterator[None]:
    output_writer.indent()
    try:
        yield
    finally:
        output_writer.dedent()
