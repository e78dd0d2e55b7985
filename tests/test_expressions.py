import ast
import io

import pytest

from wordlang.codewriter import CodeWriter
from wordlang.expressions import (
    Binary,
    ExpressionType,
    Identifier,
    Literal,
    Unary,
)
from wordlang.operations import Operator, binary_operation
from wordlang.scope import Runtime
from wordlang.symbol import Symbol, ValueType, WordlangError


@pytest.fixture
def runtime():
    return Runtime(io.StringIO(), io.StringIO())


def emitted_call(tmp_path, expression):
    """Emit ``expression`` into a file and return its parsed call node."""
    with CodeWriter(tmp_path, "out") as writer:
        writer.write("result = ")
        expression.emit(writer)
        writer.writeln()
    tree = ast.parse((tmp_path / "out.py").read_text(encoding="utf-8"))
    for node in tree.body:
        if isinstance(node, ast.Assign) and node.targets[0].id == "result":
            return node.value
    raise AssertionError("no result assignment emitted")


def test_expression_kinds():
    assert Literal(ValueType.INT, 1).kind is ExpressionType.LITERAL
    assert Identifier("x").kind is ExpressionType.IDENTIFIER
    assert Unary(Operator.MINUS, Literal(ValueType.INT, 1)).kind is ExpressionType.UNARY
    assert ExpressionType.BINARY.value == "BINARY_EXPRESSION"


@pytest.mark.parametrize(
    "value_type, value",
    [
        (ValueType.INT, 42),
        (ValueType.CHAR, "a"),
        (ValueType.WORD, "hello"),
        (ValueType.SENTENCE, "hello world\n"),
        (ValueType.BOOLEAN, True),
    ],
)
def test_literal_evaluates_to_anonymous_symbol(runtime, value_type, value):
    symbol = Literal(value_type, value).evaluate(runtime)
    assert symbol.name is None
    assert symbol.type is value_type
    assert symbol.value == value


def test_identifier_finds_declared_symbol(runtime):
    declared = Symbol("count", ValueType.INT, 7)
    runtime.symbols.declare(declared)
    assert Identifier("count").evaluate(runtime) is declared


def test_identifier_sees_outer_scope(runtime):
    runtime.symbols.declare(Symbol("w", ValueType.WORD, "abc"))
    with runtime.symbols.scope():
        assert Identifier("w").evaluate(runtime).value == "abc"


def test_undeclared_identifier_raises(runtime):
    with pytest.raises(WordlangError, match="Variable missing not declared"):
        Identifier("missing").evaluate(runtime)


def test_identifier_name_limit():
    assert Identifier("a" * 32).name == "a" * 32
    with pytest.raises(WordlangError, match="Variable name too long"):
        Identifier("a" * 33)


def test_unary_minus(runtime):
    result = Unary(Operator.MINUS, Literal(ValueType.INT, 5)).evaluate(runtime)
    assert result.type is ValueType.INT
    assert result.value == -5


def test_unary_not_of_identifier(runtime):
    runtime.symbols.declare(Symbol("flag", ValueType.BOOLEAN, True))
    result = Unary(Operator.NOT, Identifier("flag")).evaluate(runtime)
    assert result.type is ValueType.BOOLEAN
    assert result.value is False


def test_unary_invalid_type(runtime):
    with pytest.raises(WordlangError, match="Invalid operation - on type word"):
        Unary(Operator.MINUS, Literal(ValueType.WORD, "x")).evaluate(runtime)


def test_binary_matches_operation(runtime):
    left = Literal(ValueType.WORD, "foo")
    right = Literal(ValueType.WORD, "bar")
    result = Binary(left, Operator.CONCAT, right).evaluate(runtime)
    expected = binary_operation(
        left.evaluate(runtime), Operator.CONCAT, right.evaluate(runtime)
    )
    assert result == expected


def test_binary_with_identifiers(runtime):
    runtime.symbols.declare(Symbol("a", ValueType.INT, 3))
    result = Binary(Identifier("a"), Operator.MINUS, Identifier("a")).evaluate(runtime)
    assert result.value == 0


def test_binary_comparison_is_boolean(runtime):
    result = Binary(
        Literal(ValueType.INT, 1), Operator.LT, Literal(ValueType.INT, 2)
    ).evaluate(runtime)
    assert result.type is ValueType.BOOLEAN
    assert result.value is True


def test_binary_invalid_types(runtime):
    expression = Binary(Literal(ValueType.INT, 1), Operator.PLUS, Literal(ValueType.WORD, "x"))
    with pytest.raises(WordlangError, match="Invalid operation on types int \\+ word"):
        expression.evaluate(runtime)


def test_binary_propagates_undeclared(runtime):
    expression = Binary(Identifier("nope"), Operator.PLUS, Literal(ValueType.INT, 1))
    with pytest.raises(WordlangError, match="not declared"):
        expression.evaluate(runtime)


def test_emit_literal(tmp_path):
    call = emitted_call(tmp_path, Literal(ValueType.SENTENCE, "a b\n"))
    assert call.func.id == "Literal"
    assert call.args[0].attr == "SENTENCE"
    assert call.args[1].value == "a b\n"


def test_emit_identifier(tmp_path):
    call = emitted_call(tmp_path, Identifier("name"))
    assert call.func.id == "Identifier"
    assert call.args[0].value == "name"


def test_emit_nested_binary_and_unary(tmp_path):
    expression = Binary(
        Unary(Operator.MINUS, Literal(ValueType.INT, 4)),
        Operator.GE,
        Identifier("x"),
    )
    call = emitted_call(tmp_path, expression)
    assert call.func.id == "Binary"
    left, operator, right = call.args
    assert left.func.id == "Unary"
    assert left.args[0].attr == "MINUS"
    assert left.args[1].args[1].value == 4
    assert operator.attr == "GE"
    assert right.func.id == "Identifier"


def test_emit_restores_indentation(tmp_path):
    expression = Binary(Literal(ValueType.INT, 1), Operator.PLUS, Literal(ValueType.INT, 2))
    with CodeWriter(tmp_path, "out") as writer:
        writer.write("result = ")
        expression.emit(writer)
        assert writer.level == 0
        writer.writeln()
    text = (tmp_path / "out.py").read_text(encoding="utf-8")
    assert text.rstrip().endswith(")")