"""Statement nodes: declarations, assignments, input and output."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Iterable, Sequence

from wordlang.expressions import Expression
from wordlang.symbol import MAX_NAME_LENGTH, Symbol, ValueType, WordlangError


class StatementType(enum.Enum):
    """The kinds of statement node."""

    LOOP = "LOOP_STATEMENT"
    WHILE = "WHILE_STATEMENT"
    CONDITIONAL = "CONDITIONAL_STATEMENT"
    SCOPE = "SCOPE_STATEMENT"
    DECLARATION = "DECLARATION_STATEMENT"
    ASSIGNMENT = "ASSIGNMENT_STATEMENT"
    OUTPUT = "OUTPUT_STATEMENT"
    INPUT = "INPUT_STATEMENT"


class Statement(ABC):
    """A node that runs against a runtime and can write itself as code."""

    kind: ClassVar[StatementType]

    @abstractmethod
    def execute(self, runtime) -> None:
        """Run the statement in ``runtime``."""

    @abstractmethod
    def emit(self, writer) -> None:
        """Write a Python expression that rebuilds this node."""


def execute_all(statements: Iterable[Statement], runtime) -> None:
    """Run ``statements`` one after another, in order."""
    for statement in statements:
        statement.execute(runtime)


def emit_block(writer, statements: Iterable[Statement]) -> None:
    """Write ``statements`` as a Python list literal."""
    statements = list(statements)
    if not statements:
        writer.write("[]")
        return
    writer.writeln("[")
    writer.indent()
    for statement in statements:
        writer.write_indent()
        statement.emit(writer)
        writer.writeln(",")
    writer.dedent()
    writer.write_indent()
    writer.write("]")


def _type_name(value_type: ValueType | None) -> str:
    return value_type.type_name() if value_type is not None else "unknown"


def _check_name(name: str) -> None:
    if len(name) > MAX_NAME_LENGTH:
        raise WordlangError(
            f"Variable name too long: {name}\n"
            f"Should be less than or equal to {MAX_NAME_LENGTH} characters"
        )


@dataclass(frozen=True)
class Declaration(Statement):
    """Declares one or more variables of one type with default values."""

    kind: ClassVar[StatementType] = StatementType.DECLARATION

    names: Sequence[str]
    type: ValueType

    def __post_init__(self) -> None:
        object.__setattr__(self, "names", tuple(self.names))

    def execute(self, runtime) -> None:
        symbols = runtime.symbols
        for name in self.names:
            if symbols.declared_in_top([name]):
                raise WordlangError(
                    f"Variable {name} already declared\n"
                    "Cannot declare variable with same name twice"
                )
        for name in self.names:
            _check_name(name)
        for name in self.names:
            symbols.declare(Symbol(name, self.type, self.type.default_value()))

    def emit(self, writer) -> None:
        writer.write(f"Declaration({self.names!r}, ValueType.{self.type.name})")


@dataclass(frozen=True)
class Assignment(Statement):
    """Stores the value of an expression in a declared variable."""

    kind: ClassVar[StatementType] = StatementType.ASSIGNMENT

    identifier: str
    expression: Expression

    def execute(self, runtime) -> None:
        target = runtime.symbols.lookup(self.identifier)
        if target is None:
            raise WordlangError(f"Variable {self.identifier} not declared")
        result = self.expression.evaluate(runtime)
        if target.type is not result.type:
            raise WordlangError(
                f"Type mismatch, cannot assign {_type_name(target.type)} "
                f"<- {_type_name(result.type)}"
            )
        target.value = result.value

    def emit(self, writer) -> None:
        writer.writeln("Assignment(")
        writer.indent()
        writer.write_indent()
        writer.writeln(f"{self.identifier!r},")
        writer.write_indent()
        self.expression.emit(writer)
        writer.writeln(",")
        writer.dedent()
        writer.write_indent()
        writer.write(")")


@dataclass(frozen=True)
class Input(Statement):
    """Shows a prompt and reads a value into a declared variable."""

    kind: ClassVar[StatementType] = StatementType.INPUT

    identifier: str
    prompt: Expression

    def execute(self, runtime) -> None:
        runtime.write(self.prompt.evaluate(runtime).format_value())
        target = runtime.symbols.lookup(self.identifier)
        if target is None:
            raise WordlangError(f"Variable {self.identifier} not declared")
        if target.type is ValueType.INT:
            target.value = runtime.read_int()
        elif target.type is ValueType.CHAR:
            target.value = runtime.read_char()
        elif target.type is ValueType.WORD:
            word = runtime.read_line()
            if " " in word:
                raise WordlangError("Word cannot contain space character")
            target.value = word
        elif target.type is ValueType.SENTENCE:
            target.value = runtime.read_line() + "\n"

    def emit(self, writer) -> None:
        writer.writeln("Input(")
        writer.indent()
        writer.write_indent()
        writer.writeln(f"{self.identifier!r},")
        writer.write_indent()
        self.prompt.emit(writer)
        writer.writeln(",")
        writer.dedent()
        writer.write_indent()
        writer.write(")")


@dataclass(frozen=True)
class Output(Statement):
    """Prints the value of an expression after ``Output: ``."""

    kind: ClassVar[StatementType] = StatementType.OUTPUT

    expression: Expression

    def execute(self, runtime) -> None:
        value = self.expression.evaluate(runtime).format_value()
        runtime.write(f"Output: {value}\n")

    def emit(self, writer) -> None:
        writer.writeln("Output(")
        writer.indent()
        writer.write_indent()
        self.expression.emit(writer)
        writer.writeln(",")
        writer.dedent()
        writer.write_indent()
        writer.write(")")