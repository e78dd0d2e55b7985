import io

import pytest

from wordlang.scope import Runtime, SymbolTableStack
from wordlang.symbol import Symbol, ValueType, WordlangError


def _symbol(name, value=0):
    return Symbol(name, ValueType.INT, value)


def test_declare_and_lookup():
    stack = SymbolTableStack()
    symbol = _symbol("a", 1)
    stack.declare(symbol)
    assert stack.lookup("a") is symbol


def test_lookup_missing_is_none():
    assert SymbolTableStack().lookup("nothing") is None


def test_inner_scope_shadows_and_pop_restores():
    stack = SymbolTableStack()
    outer = _symbol("a", 1)
    inner = _symbol("a", 2)
    stack.declare(outer)
    stack.push()
    stack.declare(inner)
    assert stack.lookup("a") is inner
    stack.pop()
    assert stack.lookup("a") is outer


def test_outer_symbols_visible_inside():
    stack = SymbolTableStack()
    outer = _symbol("a")
    stack.declare(outer)
    with stack.scope():
        assert stack.lookup("a") is outer


def test_scope_pops_on_exception():
    stack = SymbolTableStack()
    with pytest.raises(RuntimeError):
        with stack.scope():
            stack.declare(_symbol("tmp"))
            raise RuntimeError
    assert len(stack) == 1
    assert stack.lookup("tmp") is None


def test_declared_in_top_only_checks_innermost():
    stack = SymbolTableStack()
    stack.declare(_symbol("a"))
    assert stack.declared_in_top(["b", "a"]) is True
    stack.push()
    assert stack.declared_in_top(["a"]) is False
    stack.declare(_symbol("b"))
    assert stack.declared_in_top(["a", "b"]) is True


def test_first_declaration_wins_in_same_scope():
    stack = SymbolTableStack()
    first = _symbol("a", 1)
    stack.declare(first)
    stack.declare(_symbol("a", 2))
    assert stack.lookup("a") is first


def test_unnamed_symbol_cannot_be_declared():
    with pytest.raises(WordlangError):
        SymbolTableStack().declare(Symbol(None, ValueType.INT, 0))


def test_pop_global_scope_raises():
    with pytest.raises(WordlangError):
        SymbolTableStack().pop()


def test_clear_resets():
    stack = SymbolTableStack()
    stack.declare(_symbol("a"))
    stack.push()
    stack.push()
    stack.clear()
    assert len(stack) == 1
    assert stack.lookup("a") is None


def test_runtime_has_global_scope():
    runtime = Runtime(io.StringIO(), io.StringIO())
    assert len(runtime.symbols) == 1


def test_runtime_write():
    out = io.StringIO()
    Runtime(io.StringIO(), out).write("hello")
    assert out.getvalue() == "hello"


def test_read_line_skips_blank_lines():
    runtime = Runtime(io.StringIO("\n\nhello world\nnext"), io.StringIO())
    assert runtime.read_line() == "hello world"
    assert runtime.read_line() == "next"
    assert runtime.read_line() == ""


def test_read_int_then_char():
    runtime = Runtime(io.StringIO("  42 x"), io.StringIO())
    assert runtime.read_int() == 42
    assert runtime.read_char() == " "
    assert runtime.read_char() == "x"
    assert runtime.read_char() == "\0"


def test_read_negative_int():
    runtime = Runtime(io.StringIO("\n-7\n"), io.StringIO())
    assert runtime.read_int() == -7


def test_read_int_leaves_rest_for_read_line():
    runtime = Runtime(io.StringIO("12\nsome words\n"), io.StringIO())
    assert runtime.read_int() == 12
    assert runtime.read_line() == "some words"


@pytest.mark.parametrize("text", ["abc", "", "-", "  + 3"])
def test_read_int_invalid(text):
    runtime = Runtime(io.StringIO(text), io.StringIO())
    with pytest.raises(WordlangError):
        runtime.read_int()