"""Unary and binary operators on wordlang values."""

from __future__ import annotations

import enum
import operator as _op
import re
from typing import Callable, Optional

from wordlang.symbol import Symbol, ValueType, WordlangError

_INT = ValueType.INT
_CHAR = ValueType.CHAR
_WORD = ValueType.WORD
_SENTENCE = ValueType.SENTENCE
_BOOLEAN = ValueType.BOOLEAN

_NUL = "\0"


class Operator(enum.Enum):
    """The operators of the language, valued by how they are written."""

    MINUS = "-"
    PLUS = "+"
    CONCAT = "#"
    INDEX = ":"
    LT = "<"
    GT = ">"
    LE = "<="
    GE = ">="
    EQ = "=="
    NE = "!="
    NOT = "!"

    @property
    def symbol(self) -> str:
        return self.value


def _cstr(text: str) -> str:
    """Text up to the first NUL, as a terminated string would read."""
    return text.split(_NUL, 1)[0]


def _drop_last(text: str) -> str:
    return text[:-1]


def _result(value_type: ValueType, value) -> Symbol:
    return Symbol(None, value_type, value)


def _space_tokens(text: str) -> list[str]:
    return [token for token in text.split(" ") if token]


def _whitespace_word_count(text: str) -> int:
    return len([word for word in re.split(r"[ \t\n]+", text) if word])


def _remove_word(sentence: str, word: str) -> str:
    """Remove the first occurrence of ``word`` when it stands as a whole word."""
    pos = sentence.find(word)
    if pos < 0:
        return sentence
    after = pos + len(word)
    is_start = pos == 0
    is_end = sentence[after:] == "\n"
    space_before = pos > 0 and sentence[pos - 1] == " "
    space_after = sentence[after:after + 1] == " "

    if is_start and is_end:
        return sentence[:pos] + sentence[after:]
    if is_start and space_after:
        return sentence[:pos] + sentence[after + 1:]
    if is_end and space_before:
        return sentence[:pos - 1] + sentence[after:]
    if space_before and space_after:
        return sentence[:pos - 1] + sentence[after:]
    return sentence


def _remove_char(text: str, char: str) -> str:
    pos = text.find(char)
    if pos < 0:
        return text
    return text[:pos] + text[pos + 1:]


def _minus(left: Symbol, right: Symbol) -> Optional[Symbol]:
    types = (left.type, right.type)
    if types == (_INT, _INT):
        return _result(_INT, left.value - right.value)
    if types == (_CHAR, _CHAR):
        return _result(_CHAR, _NUL if left.value == right.value else left.value)
    if types == (_SENTENCE, _WORD):
        return _result(_SENTENCE, _remove_word(left.value, right.value))
    if types == (_SENTENCE, _CHAR):
        return _result(_SENTENCE, _remove_char(left.value, right.value))
    if types == (_WORD, _CHAR):
        return _result(_WORD, _remove_char(left.value, right.value))
    return None


def _plus(left: Symbol, right: Symbol) -> Optional[Symbol]:
    if left.type is _INT and right.type is _INT:
        return _result(_INT, left.value + right.value)
    return None


def _concat(left: Symbol, right: Symbol) -> Optional[Symbol]:
    types = (left.type, right.type)
    a, b = left.value, right.value
    if types == (_CHAR, _CHAR):
        if a == " " or b == " ":
            return _result(_SENTENCE, _cstr(a + b + "\n"))
        return _result(_WORD, _cstr(a + b))
    if types == (_WORD, _WORD):
        return _result(_WORD, a + b)
    if types == (_SENTENCE, _SENTENCE):
        return _result(_SENTENCE, _drop_last(a) + b)
    if types == (_CHAR, _WORD):
        if a == " ":
            return _result(_SENTENCE, a + b + "\n")
        return _result(_WORD, _cstr(a + b))
    if types == (_WORD, _CHAR):
        if b == " ":
            return _result(_SENTENCE, a + b + "\n")
        return _result(_WORD, _cstr(a + b))
    if types == (_CHAR, _SENTENCE):
        return _result(_SENTENCE, _cstr(a + b))
    if types == (_SENTENCE, _CHAR):
        head = _drop_last(a) if b != _NUL else a
        return _result(_SENTENCE, _cstr(head + b + "\n"))
    if types == (_WORD, _SENTENCE):
        return _result(_SENTENCE, a + " " + b)
    if types == (_SENTENCE, _WORD):
        head = _drop_last(a)
        body = f"{head} {b}" if head else b
        return _result(_SENTENCE, body + "\n")
    return None


def _word_at(sentence: str, index: int) -> str:
    tokens = _space_tokens(sentence)
    return tokens[index] if index < len(tokens) else ""


def _word_from_end(sentence: str, position: int) -> str:
    if position > _whitespace_word_count(sentence):
        return ""
    tokens = _space_tokens(sentence)
    return tokens[-position] if position <= len(tokens) else ""


def _index(left: Symbol, right: Symbol) -> Optional[Symbol]:
    if left.type not in (_CHAR, _WORD, _SENTENCE) or right.type is not _INT:
        return None
    index = right.value
    if left.type is _CHAR:
        return _result(_CHAR, left.value if index == 0 else _NUL)
    if left.type is _WORD:
        word = left.value
        if index >= 0:
            char = word[index] if index < len(word) else _NUL
        else:
            char = word[index] if -len(word) <= index else _NUL
        return _result(_CHAR, char)
    sentence = _drop_last(left.value)
    if index >= 0:
        word = _word_at(sentence, index)
    else:
        word = _word_from_end(sentence, -index)
    return _result(_WORD, word)


_COMPARABLE = (_INT, _CHAR, _WORD, _SENTENCE)


def _comparison(compare: Callable[[object, object], bool]):
    def apply(left: Symbol, right: Symbol) -> Optional[Symbol]:
        if left.type is not right.type or left.type not in _COMPARABLE:
            return None
        return _result(_BOOLEAN, bool(compare(left.value, right.value)))

    return apply


_BINARY = {
    Operator.MINUS: _minus,
    Operator.PLUS: _plus,
    Operator.CONCAT: _concat,
    Operator.INDEX: _index,
    Operator.LT: _comparison(_op.lt),
    Operator.LE: _comparison(_op.le),
    Operator.GT: _comparison(_op.gt),
    Operator.GE: _comparison(_op.ge),
    Operator.EQ: _comparison(_op.eq),
    Operator.NE: _comparison(_op.ne),
}


def unary_operation(operator: Operator, symbol: Symbol) -> Symbol:
    """Apply a unary operator; raise WordlangError if the type does not allow it."""
    result = None
    if operator is Operator.MINUS and symbol.type is _INT:
        result = _result(_INT, -symbol.value)
    elif operator is Operator.NOT and symbol.type is _BOOLEAN:
        result = _result(_BOOLEAN, not symbol.value)
    if result is None:
        raise WordlangError(
            f"Invalid operation {operator.symbol} on type {symbol.type_name()}"
        )
    return result


def binary_operation(left: Symbol, operator: Operator, right: Symbol) -> Symbol:
    """Apply a binary operator; raise WordlangError if the types do not allow it."""
    handler = _BINARY.get(operator)
    result = handler(left, right) if handler is not None else None
    if result is None:
        raise WordlangError(
            f"Invalid operation on types {left.type_name()} "
            f"{operator.symbol} {right.type_name()}"
        )
    return result