"""Writer that turns a parsed wordlang program into a runnable Python module."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Protocol

INDENT = "    "

_HEADER = """\
import sys

from wordlang.control import (  # noqa: F401
    Conditional,
    ConditionalType,
    Else,
    If,
    Loop,
    Scope,
    While,
)
from wordlang.expressions import (  # noqa: F401
    Binary,
    ExpressionType,
    Identifier,
    Literal,
    Unary,
)
from wordlang.operations import Operator  # noqa: F401
from wordlang.scope import Runtime
from wordlang.statements import (  # noqa: F401
    Assignment,
    Declaration,
    Input,
    Output,
    StatementType,
    execute_all,
)
from wordlang.symbol import Symbol, ValueType, WordlangError  # noqa: F401


"""


class Emittable(Protocol):
    """Anything that can write itself as a Python expression."""

    def emit(self, writer: "CodeWriter") -> None: ...


class CodeWriter:
    """Writes a compiled program to ``<path>/<filename>.py``.

    Nodes emit themselves through :meth:`write`, :meth:`writeln` and the
    indentation helpers.  An ``emit`` call starts at the current cursor
    position, indents its own continuation lines and ends without a newline.
    """

    def __init__(self, path, filename):
        self.path = Path(path)
        self.filename = filename
        self.file_path = self.path / f"{filename}.py"
        self.level = 0
        self._file = self.file_path.open("w", encoding="utf-8")
        self._file.write(_HEADER)

    @property
    def closed(self) -> bool:
        return self._file.closed

    def write(self, text: str) -> None:
        self._file.write(text)

    def writeln(self, text: str = "") -> None:
        self._file.write(text)
        self._file.write("\n")

    def write_indent(self) -> None:
        self._file.write(INDENT * self.level)

    def indent(self) -> None:
        self.level += 1

    def dedent(self) -> None:
        if self.level == 0:
            raise ValueError("indentation is already at the outermost level")
        self.level -= 1

    def _line(self, text: str) -> None:
        self.write_indent()
        self.writeln(text)

    def write_program(self, statements: Iterable[Emittable]) -> None:
        """Write a ``main`` function that builds and runs ``statements``."""
        self.writeln("def main():")
        self.indent()
        self._line("runtime = Runtime(sys.stdin, sys.stdout)")
        self._line("program = [")
        self.indent()
        for statement in statements:
            self.write_indent()
            statement.emit(self)
            self.writeln(",")
        self.dedent()
        self._line("]")
        self._line("try:")
        self.indent()
        self._line("execute_all(program, runtime)")
        self.dedent()
        self._line("except WordlangError as error:")
        self.indent()
        self._line('print(f"Error: {error}", file=sys.stderr)')
        self._line("return 1")
        self.dedent()
        self._line("return 0")
        self.dedent()
        self.writeln()
        self.writeln()
        self.writeln('if __name__ == "__main__":')
        self.indent()
        self._line("sys.exit(main())")
        self.dedent()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> "CodeWriter":
        return self

    def __exit__(self, *args) -> None:
        self.close()