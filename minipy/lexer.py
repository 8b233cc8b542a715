"""Splitting source text into tokens, including indentation tokens."""

from __future__ import annotations

import enum
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from .value import InterpreterError


class TokenType(enum.Enum):
    """Kinds of token the lexer produces."""

    ID = enum.auto()
    NUMBER = enum.auto()
    STRING = enum.auto()
    BOOL = enum.auto()
    KEYWORD = enum.auto()
    OP = enum.auto()
    NEWLINE = enum.auto()
    INDENT = enum.auto()
    DEDENT = enum.auto()
    EOF = enum.auto()


@dataclass(frozen=True)
class Token:
    """A token with its text and the line it was read on."""

    type: TokenType
    value: str
    line: int


_KEYWORDS = frozenset({"if", "elif", "else", "def"})
_BOOLS = frozenset({"True", "False"})
_TWO_CHAR_OPS = frozenset({"==", "+=", "!=", "-=", "//", "**", "<=", ">="})


class _Scanner:
    def __init__(self, code: str) -> None:
        self.code = code
        self.pos = 0
        self.line = 1
        self.indents = [0]

    def tokens(self) -> Iterator[Token]:
        code = self.code
        while self.pos < len(code):
            if code[self.pos] == "\n":
                yield Token(TokenType.NEWLINE, "", self.line)
                self.pos += 1
                self.line += 1
                yield from self._indentation()
                continue

            token = self._next_token()
            if token is None:
                break
            # Tokens with empty text, such as an empty string literal, are dropped.
            if token.value:
                yield token

        while len(self.indents) > 1:
            self.indents.pop()
            yield Token(TokenType.DEDENT, "", self.line)
        yield Token(TokenType.EOF, "", self.line)

    def _take_while(self, predicate: Callable[[str], bool]) -> str:
        start = self.pos
        code = self.code
        while self.pos < len(code) and predicate(code[self.pos]):
            self.pos += 1
        return code[start:self.pos]

    def _indentation(self) -> Iterator[Token]:
        width = len(self._take_while(lambda ch: ch == " "))
        if width > self.indents[-1]:
            self.indents.append(width)
            yield Token(TokenType.INDENT, "", self.line)
        else:
            while width < self.indents[-1]:
                self.indents.pop()
                yield Token(TokenType.DEDENT, "", self.line)

    def _next_token(self) -> Token | None:
        self._take_while(lambda ch: ch.isspace() and ch != "\n")
        self._skip_comment()

        if self.pos >= len(self.code):
            return None

        ch = self.code[self.pos]
        if ch.isdecimal():
            return self._read_number()
        if ch in "\"'":
            return self._read_string()
        if ch.isalpha() or ch == "_":
            return self._read_word()
        return self._read_operator()

    def _skip_comment(self) -> None:
        if self.pos < len(self.code) and self.code[self.pos] == "#":
            self._take_while(lambda ch: ch != "\n")
            # The newline ending the comment is consumed along with it.
            self.line += 1
            self.pos += 1

    def _read_number(self) -> Token:
        text = self._take_while(lambda ch: ch.isdecimal() or ch == ".")
        return Token(TokenType.NUMBER, text, self.line)

    def _read_string(self) -> Token:
        quote = self.code[self.pos]
        self.pos += 1
        text = self._take_while(lambda ch: ch != quote)
        if self.pos >= len(self.code):
            raise InterpreterError("Unterminated string literal")
        self.line += text.count("\n")
        self.pos += 1
        return Token(TokenType.STRING, text, self.line)

    def _read_word(self) -> Token:
        word = self._take_while(lambda ch: ch.isalpha() or ch == "_")
        if word in _KEYWORDS:
            kind = TokenType.KEYWORD
        elif word in _BOOLS:
            kind = TokenType.BOOL
        else:
            kind = TokenType.ID
        return Token(kind, word, self.line)

    def _read_operator(self) -> Token:
        pair = self.code[self.pos:self.pos + 2]
        if pair in _TWO_CHAR_OPS:
            self.pos += 2
            return Token(TokenType.OP, pair, self.line)
        op = self.code[self.pos]
        self.pos += 1
        return Token(TokenType.OP, op, self.line)


def tokenize(code: str) -> list[Token]:
    """Split ``code`` into tokens, ending with a single EOF token."""
    return list(_Scanner(code).tokens())