# wordlang

An interpreter for WordLang program trees. WordLang is a small statically
typed language whose values are characters, words and sentences as well as
integers and booleans. A program tree can be run directly, or written out as
a Python module that rebuilds the same tree and runs it.

## What it does not do

The package has no parser and no command-line tool. Programs are not read
from WordLang source text: they are built in Python out of the expression and
statement classes described below.

## Values

Every value is a `Symbol` (in `wordlang.symbol`) with a name (or `None`), a
`ValueType` and a value:

| type       | Python value             | default | truthy when                         |
|------------|--------------------------|---------|-------------------------------------|
| `int`      | `int`                    | `0`     | non-zero                            |
| `char`     | one-character `str`      | `"\0"`  | not the empty char `"\0"`           |
| `word`     | `str`                    | `""`    | not empty                           |
| `sentence` | `str` ending in `"\n"`   | `"\n"`  | holds more than the closing newline |
| `boolean`  | `bool`                   | `False` | `True`                              |

`Symbol.truthy()`, `Symbol.format_value()` (booleans print as `true` and
`false`) and `Symbol.reset()` work on these rules.

## Operators

`wordlang.operations` defines the `Operator` enumeration and the functions
`unary_operation(operator, symbol)` and `binary_operation(left, operator, right)`:

- `Operator.MINUS` on one int negates it; `Operator.NOT` negates a boolean.
- `PLUS` adds two ints.
- `MINUS` subtracts ints; on two chars gives the empty char when they are
  equal and the left char otherwise; removes a whole word from a sentence;
  removes the first occurrence of a char from a word or sentence.
- `CONCAT` (`#`) joins chars, words and sentences; joining with a space char
  turns the result into a sentence.
- `INDEX` (`:`) picks the n-th char of a word or the n-th word of a sentence.
  Negative indices count from the end; out-of-range indices give an empty
  char or word.
- `LT`, `LE`, `GT`, `GE`, `EQ`, `NE` compare two ints, chars, words or
  sentences of the same type and give a boolean.

Any other combination of operator and types raises `WordlangError`.

## Building and running programs

Expressions live in `wordlang.expressions` (`Literal`, `Identifier`, `Unary`,
`Binary`); statements in `wordlang.statements` (`Declaration`, `Assignment`,
`Input`, `Output`) and `wordlang.control` (`Scope`, `Loop`, `While`, and
`Conditional` with `If` and `Else` branches).

A program runs in a `Runtime` from `wordlang.scope`, which holds a
`SymbolTableStack` of nested scopes (`runtime.symbols`) and the input and
output streams. `Runtime(stdin, stdout)` takes any text streams and falls back
to `sys.stdin` and `sys.stdout`.

```python
import io

from wordlang.expressions import Binary, Identifier, Literal
from wordlang.operations import Operator
from wordlang.scope import Runtime
from wordlang.statements import Assignment, Declaration, Output, execute_all
from wordlang.symbol import ValueType

program = [
    Declaration(["greeting"], ValueType.SENTENCE),
    Assignment(
        "greeting",
        Binary(
            Literal(ValueType.WORD, "hello"),
            Operator.CONCAT,
            Literal(ValueType.SENTENCE, "world\n"),
        ),
    ),
    Output(Binary(Identifier("greeting"), Operator.INDEX, Literal(ValueType.INT, -1))),
]

out = io.StringIO()
execute_all(program, Runtime(io.StringIO(), out))
assert out.getvalue() == "Output: world\n"
```

- `execute_all(statements, runtime)` runs statements in order.
- `Output` writes `Output: <value>` and a newline.
- `Input(identifier, prompt)` writes the prompt, then reads an int, a single
  char, a word (a line without spaces) or a sentence (a line, given a closing
  newline) according to the variable's type. Blank lines are skipped before a
  word or sentence.
- `Scope` runs its statements in a fresh inner scope.
- `Loop(count, statements)` runs its body a number of times fixed when it
  starts; `While(condition, statements)` runs it while the condition is truthy.
- `Conditional(branches)` tries its `If` branches in order and stops at the
  first one taken; an `Else` branch is always taken.

Errors the language reports raise `WordlangError`: an undeclared variable, a
variable declared twice in one scope, a name longer than 32 characters, a
type mismatch in an assignment, a word input holding a space, input that is
not an integer, and a loop count that is not an int.

## Emitting Python

`CodeWriter(path, filename)` from `wordlang.codewriter` opens
`<path>/<filename>.py` (the directory must exist) and is a context manager.
`write_program(statements)` writes a `main()` function that rebuilds the
program tree, runs it on standard input and output, prints `Error: <message>`
to standard error and returns 1 on a `WordlangError`, and returns 0 otherwise;
the module calls `main()` when run as a script. Every expression and
statement has an `emit(writer)` method that writes the Python expression
rebuilding it.

```python
from wordlang.codewriter import CodeWriter

with CodeWriter("build", "greeting") as writer:
    writer.write_program(program)
```