"""Variable storage for a single scope."""

from __future__ import annotations

from .value import InterpreterError, Value


class Environment:
    """Maps variable names to their current values."""

    def __init__(self) -> None:
        self._variables: dict[str, Value] = {}

    def __setitem__(self, name: str, value: Value) -> None:
        self._variables[name] = value

    def __getitem__(self, name: str) -> Value:
        try:
            return self._variables[name]
        except KeyError:
            raise InterpreterError(f"Undefined variable: {name}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._variables