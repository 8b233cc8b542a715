"""Turning a token stream into a syntax tree."""

from __future__ import annotations

from collections.abc import Iterable

from .lexer import Token, TokenType, tokenize
from .nodes import AssignNode, BinOpNode, IfNode, Node, ValueNode, VarNode
from .value import InterpreterError, Value

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_EOF = Token(TokenType.EOF, "", 0)

# Operators matched only when the token is an operator token.
_COMPARISON_OPS = frozenset({"==", "!=", "<", "<="})
_TERM_OPS = frozenset({"*", "/"})
# Operators matched on their text alone, whatever the token type.
_LOOSE_COMPARISON_OPS = frozenset({">", ">="})
_LOOSE_TERM_OPS = frozenset({"//", "%"})


def _parse_int(text: str) -> int:
    """Read a 32-bit integer literal; out-of-range literals read as zero."""
    try:
        number = int(text)
    except ValueError:
        return 0
    return number if _INT_MIN <= number <= _INT_MAX else 0


class Parser:
    """Recursive-descent parser producing a single statement or expression."""

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens = list(tokens)
        self._current = 0

    def parse(self) -> Node | None:
        """Parse one statement; return None when there is nothing to parse."""
        if self._peek().type is TokenType.EOF:
            return None
        return self._assignment()

    # Token access

    def _peek(self) -> Token:
        if self._current < len(self._tokens):
            return self._tokens[self._current]
        return _EOF

    def _advance(self) -> Token:
        token = self._peek()
        if self._current < len(self._tokens):
            self._current += 1
        return token

    def _at_op(self, *values: str) -> bool:
        token = self._peek()
        return token.type is TokenType.OP and token.value in values

    def _expect_op(self, value: str, message: str) -> None:
        if not self._at_op(value):
            raise InterpreterError(message)
        self._advance()

    # Expressions, from lowest to highest precedence

    def _assignment(self) -> Node:
        left = self._comparison()
        if self._at_op("="):
            self._advance()
            right = self._assignment()
            if not isinstance(left, VarNode):
                raise InterpreterError("Invalid assignment target")
            return AssignNode(left.name, right)
        return left

    def _comparison(self) -> Node:
        left = self._addition()
        while True:
            token = self._peek()
            matches = (
                token.type is TokenType.OP and token.value in _COMPARISON_OPS
            ) or token.value in _LOOSE_COMPARISON_OPS
            if not matches:
                return left
            op = self._advance().value
            left = BinOpNode(left, op, self._addition())

    def _addition(self) -> Node:
        left = self._term()
        while self._at_op("+", "-"):
            op = self._advance().value
            left = BinOpNode(left, op, self._term())
        return left

    def _term(self) -> Node:
        left = self._unary_minus()
        while True:
            token = self._peek()
            matches = (
                token.type is TokenType.OP and token.value in _TERM_OPS
            ) or token.value in _LOOSE_TERM_OPS
            if not matches:
                return left
            op = self._advance().value
            left = BinOpNode(left, op, self._unary_minus())

    def _unary_minus(self) -> Node:
        if self._at_op("-"):
            self._advance()
            operand = self._unary_minus()
            return BinOpNode(ValueNode(Value(0)), "-", operand)
        return self._power()

    def _power(self) -> Node:
        left = self._primary()
        if self._at_op("**"):
            op = self._advance().value
            return BinOpNode(left, op, self._power())
        return left

    def _primary(self) -> Node:
        token = self._peek()
        kind = token.type
        if kind is TokenType.NUMBER:
            return self._number()
        if kind is TokenType.STRING:
            return ValueNode(Value(self._advance().value))
        if kind is TokenType.BOOL:
            return ValueNode(Value(self._advance().value == "True"))
        if kind is TokenType.ID:
            return VarNode(self._advance().value)
        if kind is TokenType.OP and token.value == "(":
            return self._parenthesized()
        if kind is TokenType.KEYWORD and token.value == "if":
            return self._if_statement()
        if kind is TokenType.EOF:
            raise InterpreterError("Unexpected end of input")
        raise InterpreterError(f'Unexpected token: "{token.value}"')

    def _number(self) -> Node:
        text = self._advance().value
        dots = text.count(".")
        if dots == 0:
            return ValueNode(Value(_parse_int(text)))
        if dots == 1:
            return ValueNode(Value(float(text)))
        raise InterpreterError("Invalid number format")

    def _parenthesized(self) -> Node:
        self._advance()
        expr = self._assignment()
        self._expect_op(")", "Expected ')'")
        return expr

    # Statements

    def _if_statement(self) -> Node:
        self._advance()
        condition = self._assignment()
        self._expect_op(":", "Expected ':' after if condition")
        body = self._block()

        elifs: list[tuple[Node, tuple[Node, ...]]] = []
        while self._peek().type is TokenType.KEYWORD and self._peek().value == "elif":
            self._advance()
            elif_condition = self._assignment()
            self._expect_op(":", "Expected ':' after elif condition")
            elifs.append((elif_condition, self._block()))

        else_body: tuple[Node, ...] = ()
        if self._peek().type is TokenType.KEYWORD and self._peek().value == "else":
            self._advance()
            self._expect_op(":", "Expected ':' after else")
            else_body = self._block()

        return IfNode(condition, body, tuple(elifs), else_body)

    def _block(self) -> tuple[Node, ...]:
        if self._peek().type is not TokenType.NEWLINE:
            raise InterpreterError("Expected newline after statement")
        self._advance()
        if self._peek().type is not TokenType.INDENT:
            raise InterpreterError("Expected indent after statement")
        self._advance()

        statements: list[Node] = []
        while self._peek().type not in (TokenType.DEDENT, TokenType.EOF):
            statements.append(self._assignment())
            if self._peek().type is TokenType.NEWLINE:
                self._advance()

        if self._peek().type is not TokenType.DEDENT:
            raise InterpreterError("Expected dedent after block")
        self._advance()
        return tuple(statements)


def parse(source: str) -> Node | None:
    """Tokenize and parse ``source``; return None if it holds no statement."""
    return Parser(tokenize(source)).parse()