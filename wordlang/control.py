"""Control-flow statements: scopes, counted loops, while loops and conditionals."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar, Sequence

from wordlang.expressions import Expression
from wordlang.statements import Statement, StatementType, emit_block, execute_all
from wordlang.symbol import ValueType, WordlangError


def _freeze(instance, field: str) -> None:
    object.__setattr__(instance, field, tuple(getattr(instance, field)))


def _emit_call(writer, name: str, *parts) -> None:
    """Write ``name(`` followed by one indented argument per line and ``)``."""
    writer.writeln(f"{name}(")
    writer.indent()
    for part in parts:
        writer.write_indent()
        part(writer)
        writer.writeln(",")
    writer.dedent()
    writer.write_indent()
    writer.write(")")


@dataclass(frozen=True)
class Scope(Statement):
    """A block that runs its statements in a fresh inner scope."""

    kind: ClassVar[StatementType] = StatementType.SCOPE

    statements: Sequence[Statement] = ()

    def __post_init__(self) -> None:
        _freeze(self, "statements")

    def execute(self, runtime) -> None:
        with runtime.symbols.scope():
            execute_all(self.statements, runtime)

    def emit(self, writer) -> None:
        _emit_call(writer, "Scope", lambda w: emit_block(w, self.statements))


@dataclass(frozen=True)
class Loop(Statement):
    """Runs its body a number of times fixed when the loop starts."""

    kind: ClassVar[StatementType] = StatementType.LOOP

    count: Expression
    statements: Sequence[Statement] = ()

    def __post_init__(self) -> None:
        _freeze(self, "statements")

    def execute(self, runtime) -> None:
        symbol = self.count.evaluate(runtime)
        if symbol.type is not ValueType.INT:
            raise WordlangError("Loop statement expression must evaluate to an int")
        for _ in range(symbol.value):
            execute_all(self.statements, runtime)

    def emit(self, writer) -> None:
        _emit_call(
            writer,
            "Loop",
            self.count.emit,
            lambda w: emit_block(w, self.statements),
        )


@dataclass(frozen=True)
class While(Statement):
    """Runs its body for as long as the condition holds."""

    kind: ClassVar[StatementType] = StatementType.WHILE

    condition: Expression
    statements: Sequence[Statement] = ()

    def __post_init__(self) -> None:
        _freeze(self, "statements")

    def execute(self, runtime) -> None:
        while self.condition.evaluate(runtime).truthy():
            execute_all(self.statements, runtime)

    def emit(self, writer) -> None:
        _emit_call(
            writer,
            "While",
            self.condition.emit,
            lambda w: emit_block(w, self.statements),
        )


class ConditionalType(enum.Enum):
    """The kinds of branch in a conditional."""

    IF = "IF_CONDITIONAL"
    ELSE = "ELSE_CONDITIONAL"


@dataclass(frozen=True)
class If:
    """A guarded branch; runs its body when the condition holds."""

    kind: ClassVar[ConditionalType] = ConditionalType.IF

    condition: Expression
    statements: Sequence[Statement] = ()

    def __post_init__(self) -> None:
        _freeze(self, "statements")

    def execute(self, runtime) -> bool:
        """Run the body if the condition holds; return whether it did."""
        taken = self.condition.evaluate(runtime).truthy()
        if taken:
            execute_all(self.statements, runtime)
        return taken

    def emit(self, writer) -> None:
        _emit_call(
            writer,
            "If",
            self.condition.emit,
            lambda w: emit_block(w, self.statements),
        )


@dataclass(frozen=True)
class Else:
    """An unconditional branch; always runs its body."""

    kind: ClassVar[ConditionalType] = ConditionalType.ELSE

    statements: Sequence[Statement] = ()

    def __post_init__(self) -> None:
        _freeze(self, "statements")

    def execute(self, runtime) -> bool:
        """Run the body; an else branch is always taken."""
        execute_all(self.statements, runtime)
        return True

    def emit(self, writer) -> None:
        _emit_call(writer, "Else", lambda w: emit_block(w, self.statements))


@dataclass(frozen=True)
class Conditional(Statement):
    """A chain of branches; the first one taken ends the chain."""

    kind: ClassVar[StatementType] = StatementType.CONDITIONAL

    branches: Sequence[If | Else] = ()

    def __post_init__(self) -> None:
        _freeze(self, "branches")

    def execute(self, runtime) -> bool:
        """Try the branches in order; return whether any was taken."""
        return any(branch.execute(runtime) for branch in self.branches)

    def emit(self, writer) -> None:
        _emit_call(writer, "Conditional", lambda w: emit_block(w, self.branches))