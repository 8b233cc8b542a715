"""Runtime values handled by the interpreter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class InterpreterError(Exception):
    """Raised for any failure while lexing, parsing or evaluating code."""


def _format_float(number: float) -> str:
    """Render a float the way the interpreter prints it (six significant digits)."""
    return f"{number:g}"


@dataclass(frozen=True)
class Value:
    """A dynamically typed value.

    ``data`` holds an int, float, bool, str, list, dict or a function object
    (any other object, typically a syntax tree node). A default value is the
    integer zero.
    """

    data: Any = 0

    def __str__(self) -> str:
        data = self.data
        if isinstance(data, bool):
            return "True" if data else "False"
        if isinstance(data, int):
            return str(data)
        if isinstance(data, float):
            return _format_float(data)
        if isinstance(data, str):
            return f"'{data}'"
        if isinstance(data, list):
            return "[...]"
        if isinstance(data, dict):
            return "{...}"
        if data is not None:
            return "<function>"
        return "Unknown unsupported type"

    def __bool__(self) -> bool:
        data = self.data
        if isinstance(data, bool):
            return data
        if isinstance(data, (int, float)):
            return data != 0
        if isinstance(data, str):
            return data != ""
        if isinstance(data, (list, dict)):
            # Containers are always truthy, even when empty.
            return True
        if data is not None:
            return True
        raise InterpreterError("Unsupported type")