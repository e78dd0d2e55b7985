"""Expression nodes: literals, identifiers and unary and binary operations."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar

from wordlang.operations import Operator, binary_operation, unary_operation
from wordlang.symbol import MAX_NAME_LENGTH, Symbol, ValueType, WordlangError


class ExpressionType(enum.Enum):
    """The kinds of expression node."""

    LITERAL = "LITERAL_EXPRESSION"
    IDENTIFIER = "IDENTIFIER_EXPRESSION"
    UNARY = "UNARY_EXPRESSION"
    BINARY = "BINARY_EXPRESSION"


class Expression(ABC):
    """A node that evaluates to a symbol and can write itself as code."""

    kind: ClassVar[ExpressionType]

    @abstractmethod
    def evaluate(self, runtime) -> Symbol:
        """Compute the value of the expression in ``runtime``."""

    @abstractmethod
    def emit(self, writer) -> None:
        """Write a Python expression that rebuilds this node."""


@dataclass(frozen=True)
class Literal(Expression):
    """A constant value written in the program."""

    kind: ClassVar[ExpressionType] = ExpressionType.LITERAL

    type: ValueType
    value: object

    def evaluate(self, runtime) -> Symbol:
        return Symbol(None, self.type, self.value)

    def emit(self, writer) -> None:
        writer.write(f"Literal(ValueType.{self.type.name}, {self.value!r})")


@dataclass(frozen=True)
class Identifier(Expression):
    """A reference to a declared variable."""

    kind: ClassVar[ExpressionType] = ExpressionType.IDENTIFIER

    name: str

    def __post_init__(self) -> None:
        if len(self.name) > MAX_NAME_LENGTH:
            raise WordlangError(
                f"Variable name too long: {self.name}\n"
                f"Should be less than or equal to {MAX_NAME_LENGTH} characters"
            )

    def evaluate(self, runtime) -> Symbol:
        symbol = runtime.symbols.lookup(self.name)
        if symbol is None:
            raise WordlangError(f"Variable {self.name} not declared")
        return symbol

    def emit(self, writer) -> None:
        writer.write(f"Identifier({self.name!r})")


@dataclass(frozen=True)
class Unary(Expression):
    """An operator applied to one operand."""

    kind: ClassVar[ExpressionType] = ExpressionType.UNARY

    operator: Operator
    operand: Expression

    def evaluate(self, runtime) -> Symbol:
        return unary_operation(self.operator, self.operand.evaluate(runtime))

    def emit(self, writer) -> None:
        writer.writeln("Unary(")
        writer.indent()
        writer.write_indent()
        writer.writeln(f"Operator.{self.operator.name},")
        writer.write_indent()
        self.operand.emit(writer)
        writer.writeln(",")
        writer.dedent()
        writer.write_indent()
        writer.write(")")


@dataclass(frozen=True)
class Binary(Expression):
    """An operator applied to two operands, evaluated left first."""

    kind: ClassVar[ExpressionType] = ExpressionType.BINARY

    left: Expression
    operator: Operator
    right: Expression

    def evaluate(self, runtime) -> Symbol:
        left = self.left.evaluate(runtime)
        right = self.right.evaluate(runtime)
        return binary_operation(left, self.operator, right)

    def emit(self, writer) -> None:
        writer.writeln("Binary(")
        writer.indent()
        writer.write_indent()
        self.left.emit(writer)
        writer.writeln(",")
        writer.write_indent()
        writer.writeln(f"Operator.{self.operator.name},")
        writer.write_indent()
        self.right.emit(writer)
        writer.writeln(",")
        writer.dedent()
        writer.write_indent()
        writer.write(")")