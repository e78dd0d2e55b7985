"""Nested symbol tables and the runtime a program executes in."""

from __future__ import annotations

import string
import sys
from contextlib import contextmanager
from typing import Iterable, Iterator, TextIO

from wordlang.symbol import Symbol, WordlangError


class SymbolTableStack:
    """A stack of symbol tables; the innermost scope is searched first."""

    def __init__(self):
        self._tables: list[dict[str, Symbol]] = [{}]

    def __len__(self) -> int:
        return len(self._tables)

    def push(self) -> None:
        self._tables.append({})

    def pop(self) -> None:
        if len(self._tables) == 1:
            raise WordlangError("cannot leave the global scope")
        self._tables.pop()

    @contextmanager
    def scope(self) -> Iterator["SymbolTableStack"]:
        """Run a block inside a fresh inner scope."""
        self.push()
        try:
            yield self
        finally:
            self.pop()

    def declare(self, symbol: Symbol) -> None:
        """Add ``symbol`` to the innermost scope."""
        if symbol.name is None:
            raise WordlangError("cannot declare an unnamed symbol")
        self._tables[-1].setdefault(symbol.name, symbol)

    def lookup(self, name: str) -> Symbol | None:
        """The nearest symbol called ``name``, or None."""
        for table in reversed(self._tables):
            found = table.get(name)
            if found is not None:
                return found
        return None

    def declared_in_top(self, names: Iterable[str]) -> bool:
        """Whether any of ``names`` is already declared in the innermost scope."""
        top = self._tables[-1]
        return any(name in top for name in names)

    def clear(self) -> None:
        """Drop every scope and start again with an empty global one."""
        self._tables = [{}]


class Runtime:
    """Symbols and the input and output streams of a running program."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.symbols = SymbolTableStack()
        self._pushback: list[str] = []

    def _getc(self) -> str:
        if self._pushback:
            return self._pushback.pop()
        return self.stdin.read(1)

    def _ungetc(self, char: str) -> None:
        if char:
            self._pushback.append(char)

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def read_line(self) -> str:
        """Read a line, skipping leading blank lines; the newline is dropped."""
        char = self._getc()
        while char == "\n":
            char = self._getc()
        chars = []
        while char not in ("\n", ""):
            chars.append(char)
            char = self._getc()
        return "".join(chars)

    def read_char(self) -> str:
        """Read exactly one character; ``"\\0"`` at end of input."""
        char = self._getc()
        return char if char else "\0"

    def read_int(self) -> int:
        """Read an optionally signed decimal integer after any whitespace."""
        char = self._getc()
        while char and char.isspace():
            char = self._getc()
        text = ""
        if char in ("+", "-"):
            text = char
            char = self._getc()
        while char and char in string.digits:
            text += char
            char = self._getc()
        self._ungetc(char)
        if text in ("", "+", "-"):
            raise WordlangError("expected an integer")
        return int(text)