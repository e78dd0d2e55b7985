"""Values, their types, and the error raised by wordlang programs."""

from __future__ import annotations

import enum
from dataclasses import dataclass

MAX_NAME_LENGTH = 32


class WordlangError(Exception):
    """An error in a wordlang program, reported as ``Error: <message>``."""


class ValueType(enum.Enum):
    """The value types of the language."""

    INT = "int"
    CHAR = "char"
    WORD = "word"
    SENTENCE = "sentence"
    BOOLEAN = "boolean"

    def default_value(self):
        """The value a freshly declared variable of this type holds."""
        return _DEFAULTS[self]

    def type_name(self) -> str:
        """The name of the type as written in programs."""
        return self.value


_DEFAULTS = {
    ValueType.INT: 0,
    ValueType.CHAR: "\0",
    ValueType.WORD: "",
    ValueType.SENTENCE: "\n",
    ValueType.BOOLEAN: False,
}


@dataclass
class Symbol:
    """A named or anonymous typed value.

    Chars are one-character strings (``"\\0"`` for the empty char); sentences
    carry a trailing newline.
    """

    name: str | None = None
    type: ValueType | None = None
    value: object = None

    def reset(self) -> None:
        """Give the symbol the default value of its type."""
        if self.type is not None:
            self.value = self.type.default_value()

    def truthy(self) -> bool:
        """Whether the value counts as true in a condition."""
        if self.type is ValueType.INT:
            return self.value != 0
        if self.type is ValueType.CHAR:
            return self.value not in ("", "\0")
        if self.type is ValueType.WORD:
            return len(self.value) > 0
        if self.type is ValueType.SENTENCE:
            return self.value not in ("", "\n")
        if self.type is ValueType.BOOLEAN:
            return bool(self.value)
        return False

    def format_value(self) -> str:
        """The value as the program prints it."""
        if self.type is ValueType.BOOLEAN:
            return "true" if self.value else "false"
        if self.type is ValueType.INT:
            return str(self.value)
        if self.type in (ValueType.CHAR, ValueType.WORD, ValueType.SENTENCE):
            return str(self.value)
        return ""

    def type_name(self) -> str:
        """The type name, or ``no_type`` for an untyped symbol."""
        return self.type.type_name() if self.type is not None else "no_type"

    def emit(self, writer) -> None:
        """Write an expression that rebuilds this symbol without its value."""
        type_code = f"ValueType.{self.type.name}" if self.type is not None else "None"
        writer.write(f"Symbol({self.name!r}, {type_code})")