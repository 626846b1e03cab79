from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

# DEBUG = True
DEBUG = False


class IndentingWriter:
    """Prints to stdout; `debug*` output and indentation only when DEBUG is on."""

    def __init__(self, indent_size: int = 3) -> None:
        self._indent_size = indent_size
        self._indents = 0

    def debug(self, message: str) -> None:
        if DEBUG:
            print(self._indentation() + message, end="")

    def debugln(self, message: str) -> None:
        if DEBUG:
            self.debug(message)
            print()

    def println(self, message: str) -> None:
        print(self._indentation() + message)

    def indent(self) -> None:
        if DEBUG:
            self._indents += 1

    def dedent(self) -> None:
        if DEBUG:
            self._indents -= 1

    def print_division_line(self, size: int = 80) -> None:
        print("-" * size)

    def _indentation(self) -> str:
        if DEBUG:
            return " " * self._indent_size * self._indents
        return ""


@contextmanager
def indented_output(output_writer: IndentingWriter) -> Iterator[None]:
    output_writer.indent()
    try:
        yield
    finally:
        output_writer.dedent()


@contextmanager
def surrounding_box_title(
    output_writer: IndentingWriter, omit_lower_line: bool = False
) -> Iterator[None]:
    output_writer.print_division_line()
    try:
        yield
    finally:
        if not omit_lower_line:
            output_writer.print_division_line()
