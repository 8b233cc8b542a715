# minipy

A small interpreter for a Python-like language. It reads code, breaks it
into tokens, parses it into a syntax tree and evaluates that tree.

## What the language supports

- Integers (`10`), floats (`3.14`), strings (`'text'` or `"text"`) and the
  booleans `True` and `False`.
- Arithmetic: `+`, `-`, `*`, `/`, `//`, `%` and `**`. `**` is
  right-associative. Unary minus is also supported. Arithmetic is done in
  floating point, so `2 + 3` gives a float. A float prints without a
  trailing `.0`, so this shows as `5`. `%` and `//` truncate toward zero and
  give integers. Dividing by zero raises `Division by zero`.
- Comparisons: `==`, `!=`, `<`, `<=`, `>`, `>=`. They work on numbers and on
  strings.
- String concatenation with `+`. String repetition with `*` and an integer,
  on either side.
- Variables and assignment: `x = 5`. Chained assignment `a = b = 1` also
  works.
- Parentheses for grouping.
- `if` / `elif` / `else` blocks with indented bodies.
- Comments that start with `#`.

## Interactive use

Install the package, then start the prompt:

```
minipy
```

The command prints a greeting. When standard input is a terminal, it then
shows a `>>>` prompt. Type an expression and its value is printed. A plain
assignment prints nothing. An error is shown as `Error: <message>`, for
example `Error: Undefined variable: y`. Type `exit`, `quit` or `q` to leave.
The session also ends at end of input.

```
>>> x = 7
>>> x * 2
14
>>> 'ab' * 3
'ababab'
>>> 7 // 2
3
```

A line that ends with `:` opens a block, and the prompt changes to `...`.
Type the body lines with indentation. An empty line runs the whole block:

```
>>> if x > 5:
...     y = 1
... else:
...     y = 0
...
>>> y
1
```

## Using it from Python

```python
from minipy.environment import Environment
from minipy.parser import parse

env = Environment()
parse("x = 2 ** 3").eval(env)
print(parse("x + 1").eval(env))   # 9
```

- `minipy.lexer.tokenize(code)` returns the list of `Token`s. The list ends
  with an `EOF` token and includes `NEWLINE`, `INDENT` and `DEDENT` tokens.
- `minipy.parser.Parser(tokens).parse()` parses one statement.
  `minipy.parser.parse(source)` does the same directly from text. Both
  return `None` when there is nothing to parse.
- The tree is made of the nodes in `minipy.nodes`: `ValueNode`, `VarNode`,
  `BinOpNode`, `AssignNode` and `IfNode`. Each node has `eval(env)`, and
  `str(node)` renders it as source-like text.
- `minipy.value.Value` wraps a runtime value. `str()` gives its printed
  form, and `bool()` gives its truth value.
- All lexing, parsing and evaluation errors are raised as
  `minipy.value.InterpreterError`.
- `minipy.repl.Repl` drives the same loop that the `minipy` command uses.
  Give it one line at a time with `feed(line)`, which returns the text to
  print, or `None`. `prompt()` tells you which prompt to show next.

## What it does not do

- There are no functions (`def` is reserved but not usable), no loops, no
  lists or dicts, and no calls, so there is no `print()`.
- Names may contain only letters and underscores, not digits.
- Integer literals outside the 32-bit signed range read as `0`.
- An empty string literal (`''`) is dropped by the lexer.
- The prompt has no line editing and no input history.
- It cannot run a script file. The command reads lines from standard input
  only.