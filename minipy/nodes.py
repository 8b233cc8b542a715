"""Syntax tree nodes and their evaluation."""

from __future__ import annotations

import enum
import math
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from .environment import Environment
from .value import InterpreterError, Value


class Operation(enum.Enum):
    """Binary operators, keyed by their source symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    POWER = "**"
    DIVIDE = "/"
    MODULO = "%"
    INT_DIVIDE = "//"
    EQUAL = "=="
    NOT_EQUAL = "!="
    GREATER = ">"
    GREATER_EQUAL = ">="
    LESS = "<"
    LESS_EQUAL = "<="

    @classmethod
    def from_symbol(cls, symbol: str) -> Operation:
        try:
            return cls(symbol)
        except ValueError:
            raise InterpreterError(f"Unsupported operation: {symbol}") from None


_DIVISIONS = frozenset({Operation.DIVIDE, Operation.MODULO, Operation.INT_DIVIDE})


def _is_number(data: Any) -> bool:
    return isinstance(data, (int, float)) and not isinstance(data, bool)


def _is_int(data: Any) -> bool:
    return isinstance(data, int) and not isinstance(data, bool)


def _to_int(number: float) -> int:
    """Truncate towards zero, as a C integer conversion does."""
    try:
        return int(number)
    except (OverflowError, ValueError):
        raise InterpreterError("Integer overflow") from None


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except ValueError:
        return math.nan
    except OverflowError:
        return math.inf


def _remainder(dividend: int, divisor: int) -> int:
    """Remainder whose sign follows the dividend."""
    if divisor == 0:
        raise InterpreterError("Division by zero")
    result = abs(dividend) % abs(divisor)
    return -result if dividend < 0 else result


def _run_block(statements: Sequence[Node], env: Environment) -> Value:
    last = Value()
    for statement in statements:
        last = statement.eval(env)
    return last


def _indent_block(statements: Sequence[Node]) -> str:
    return "".join(f"    {statement}\n" for statement in statements)


class Node(ABC):
    """A node of the syntax tree."""

    @abstractmethod
    def eval(self, env: Environment) -> Value:
        """Evaluate the node in ``env`` and return its value."""

    @abstractmethod
    def __str__(self) -> str:
        """Render the node as source-like text."""


@dataclass(frozen=True)
class ValueNode(Node):
    """A literal value."""

    value: Value

    def eval(self, env: Environment) -> Value:
        return self.value

    def __str__(self) -> str:
        data = self.value.data
        if isinstance(data, bool):
            return "True" if data else "False"
        if isinstance(data, (int, float)):
            return str(self.value)
        if isinstance(data, str):
            return f"'{data}'"
        return "<Unknown type of value>"


@dataclass(frozen=True)
class BinOpNode(Node):
    """A binary operation applied to two sub-expressions."""

    left: Node
    op: str
    right: Node

    def eval(self, env: Environment) -> Value:
        left = self.left.eval(env).data
        right = self.right.eval(env).data

        if _is_number(left) and _is_number(right):
            return self._numbers(float(left), float(right))
        both_str_or_int = all(isinstance(x, str) or _is_int(x) for x in (left, right))
        if both_str_or_int:
            if isinstance(left, str) and isinstance(right, str):
                return self._strings(left, right)
            return self._repeat(left, right)
        raise InterpreterError(f"Unsupported operation: {self.op} in eval")

    def __str__(self) -> str:
        return f"({self.left} {self.op} {self.right})"

    def _numbers(self, lv: float, rv: float) -> Value:
        operation = Operation.from_symbol(self.op)
        if operation in _DIVISIONS and rv == 0:
            raise InterpreterError("Division by zero")

        if operation is Operation.ADD:
            return Value(lv + rv)
        if operation is Operation.SUBTRACT:
            return Value(lv - rv)
        if operation is Operation.MULTIPLY:
            return Value(lv * rv)
        if operation is Operation.POWER:
            return Value(_power(lv, rv))
        if operation is Operation.DIVIDE:
            return Value(lv / rv)
        if operation is Operation.MODULO:
            return Value(_remainder(_to_int(lv), _to_int(rv)))
        if operation is Operation.INT_DIVIDE:
            return Value(_to_int(lv / rv))
        if operation is Operation.EQUAL:
            return Value(lv == rv)
        if operation is Operation.NOT_EQUAL:
            return Value(lv != rv)
        if operation is Operation.GREATER:
            return Value(lv > rv)
        if operation is Operation.GREATER_EQUAL:
            return Value(lv >= rv)
        if operation is Operation.LESS:
            return Value(lv < rv)
        return Value(lv <= rv)

    def _strings(self, lv: str, rv: str) -> Value:
        operation = Operation.from_symbol(self.op)
        if operation is Operation.ADD:
            return Value(lv + rv)
        if operation is Operation.EQUAL:
            return Value(lv == rv)
        if operation is Operation.NOT_EQUAL:
            return Value(lv != rv)
        if operation is Operation.LESS_EQUAL:
            return Value(lv <= rv)
        if operation is Operation.LESS:
            return Value(lv < rv)
        if operation is Operation.GREATER_EQUAL:
            return Value(lv >= rv)
        if operation is Operation.GREATER:
            return Value(lv > rv)
        raise InterpreterError(f"Unsupported operation: {self.op}in evalTwoStrings")

    def _repeat(self, left: Any, right: Any) -> Value:
        if self.op != "*":
            raise InterpreterError(f"Unsupported operation: {self.op}")
        text, count = (right, left) if _is_int(left) else (left, right)
        return Value(text * count)


@dataclass(frozen=True)
class VarNode(Node):
    """A reference to a variable."""

    name: str

    def eval(self, env: Environment) -> Value:
        return env[self.name]

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class AssignNode(Node):
    """Assignment of an expression's value to a variable."""

    var_name: str
    value_expr: Node

    def eval(self, env: Environment) -> Value:
        value = self.value_expr.eval(env)
        env[self.var_name] = value
        return value

    def __str__(self) -> str:
        return f"{self.var_name} = {self.value_expr}"


@dataclass(frozen=True)
class IfNode(Node):
    """An if statement with optional elif branches and else block."""

    condition: Node
    body: Sequence[Node]
    elifs: Sequence[tuple[Node, Sequence[Node]]] = field(default_factory=tuple)
    else_body: Sequence[Node] = field(default_factory=tuple)

    def eval(self, env: Environment) -> Value:
        if self.condition.eval(env):
            return _run_block(self.body, env)
        for condition, body in self.elifs:
            if condition.eval(env):
                return _run_block(body, env)
        if self.else_body:
            return _run_block(self.else_body, env)
        return Value()

    def __str__(self) -> str:
        parts = [f"if {self.condition}:\n", _indent_block(self.body)]
        for condition, body in self.elifs:
            parts.append(f"elif {condition}:\n")
            parts.append(_indent_block(body))
        if self.else_body:
            parts.append("else:\n")
            parts.append(_indent_block(self.else_body))
        return "".join(parts)