"""Interactive read-eval-print loop."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .environment import Environment
from .nodes import AssignNode
from .parser import parse
from .value import InterpreterError

PROMPT_MAIN = ">>> "
PROMPT_CONTINUE = "... "
_GREEN = "\033[32m"
_RESET = "\033[0m"
_EXIT_COMMANDS = frozenset({"exit", "quit", "q"})
_BANNER = "Hello and welcome to my minimal Python interpreter!\nLet's code!"


class Repl:
    """Line-oriented interpreter session with support for indented blocks.

    A line ending in ``:`` opens a block; following lines are collected until
    an empty line, at which point the whole block is executed. Any other line
    is evaluated at once and its value, unless it is an assignment, is shown.
    """

    def __init__(self) -> None:
        self.env = Environment()
        self.closed = False
        self._block: list[str] = []

    def prompt(self) -> str:
        """The prompt to show before the next line."""
        return PROMPT_CONTINUE if self._block else PROMPT_MAIN

    def feed(self, line: str) -> str | None:
        """Process one line of input and return the text to print, if any."""
        if self.closed:
            raise InterpreterError("Session is closed")

        if self._block:
            if line:
                self._block.append(line)
                return None
            source = "\n".join(self._block)
            self._block.clear()
            return self._execute(source, show_result=False)

        if not line:
            return None
        if line in _EXIT_COMMANDS:
            self.closed = True
            return None
        if line.endswith(":"):
            self._block.append(line)
            return None
        return self._execute(line, show_result=True)

    def _execute(self, source: str, *, show_result: bool) -> str | None:
        try:
            tree = parse(source)
            if tree is None:
                return None
            result = tree.eval(self.env)
        except InterpreterError as error:
            return f"Error: {error}"
        if not show_result or isinstance(tree, AssignNode):
            return None
        text = str(result)
        return text or None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interpreter on standard input until it ends or is told to exit."""
    repl = Repl()
    interactive = sys.stdin.isatty()
    print(_BANNER)

    while not repl.closed:
        if interactive:
            sys.stdout.write(f"{_GREEN}{repl.prompt()}{_RESET}")
            sys.stdout.flush()
        raw = sys.stdin.readline()
        if not raw:
            if repl.prompt() == PROMPT_CONTINUE:
                output = repl.feed("")
                if output:
                    print(output)
            break
        output = repl.feed(raw.rstrip("\r\n"))
        if output:
            print(output)
    return 0