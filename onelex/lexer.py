"""Tokenizer for the 101D scripting language."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator


class TokenType(IntEnum):
    """Kinds of token the lexer produces."""

    EOF = 0
    ERROR = 1

    # Symbols
    PLUS = 2
    MINUS = 3
    STAR = 4
    SLASH = 5
    BANG = 6
    EQUAL = 7
    GREATER = 8
    LESS = 9
    EQUAL_EQUAL = 10
    GREATER_EQUAL = 11
    LESS_EQUAL = 12
    UNEQUAL = 13
    OR = 14
    AND = 15
    LEFT_PAREN = 16
    RIGHT_PAREN = 17
    LEFT_BRACE = 18
    RIGHT_BRACE = 19
    COMMA = 20
    DOT = 21

    # Keywords
    IF = 22
    ELSE = 23
    PRINT = 24
    NULL = 25
    VAR = 26
    FUNCTION = 27
    RETURN = 28

    # Literals
    NUMBER = 29
    IDENTIFIER = 30
    STRING = 31
    TRUE = 32
    FALSE = 33


@dataclass(frozen=True)
class Token:
    """A scanned token. For error tokens the lexeme holds the error message."""

    type: TokenType
    lexeme: str
    line: int


_END = "\0"
_DIGITS = frozenset(string.digits)
_WORD_START = frozenset(string.ascii_letters + "_")
_WORD_CHARS = _WORD_START | _DIGITS

_SINGLE_CHAR = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "/": TokenType.SLASH,
    "*": TokenType.STAR,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "[": TokenType.LEFT_BRACE,
    "]": TokenType.RIGHT_BRACE,
    "!": TokenType.BANG,
    ",": TokenType.COMMA,
    ".": TokenType.DOT,
}

_KEYWORDS = {
    "VAR": TokenType.VAR,
    "PRINT": TokenType.PRINT,
    "IF": TokenType.IF,
    "FALSE": TokenType.FALSE,
    "RET": TokenType.RETURN,
    "NIL": TokenType.NULL,
    "ELSE": TokenType.ELSE,
    "TRUE": TokenType.TRUE,
}


class Lexer:
    """Scans source text into tokens one at a time.

    A NUL character, like the end of the text, ends the input.
    """

    def __init__(self, source):
        self._source = source
        self._start = 0
        self._pos = 0
        self.line = 1

    # -- character access -------------------------------------------------

    def _char_at(self, index: int) -> str:
        if index < len(self._source):
            return self._source[index]
        return _END

    def _peek(self) -> str:
        return self._char_at(self._pos)

    def _at_end(self) -> bool:
        return self._peek() == _END

    def _peek_next(self) -> str:
        if self._at_end():
            return _END
        return self._char_at(self._pos + 1)

    def _advance(self) -> str:
        char = self._peek()
        self._pos += 1
        return char

    def _match(self, expected: str) -> bool:
        if self._at_end() or self._peek() != expected:
            return False
        self._pos += 1
        return True

    # -- token construction -----------------------------------------------

    def _make(self, token_type: TokenType) -> Token:
        return Token(token_type, self._source[self._start:self._pos], self.line)

    def _error(self, message: str) -> Token:
        return Token(TokenType.ERROR, message, self.line)

    # -- skipping ---------------------------------------------------------

    def _skip_block_comment(self) -> None:
        while not self._at_end():
            char = self._peek()
            if char == "\n":
                self.line += 1
            elif char == "<":
                self._pos += 1
                if self._match("#"):
                    return
                if self._at_end():
                    return
            self._pos += 1

    def _skip_line_comment(self) -> None:
        while self._peek() != "\n" and not self._at_end():
            self._pos += 1

    def _skip_whitespace(self) -> None:
        while True:
            char = self._peek()
            if char in " \r\t":
                self._pos += 1
            elif char == "\n":
                self._pos += 1
                self.line += 1
            elif char == "#":
                self._pos += 1
                if self._match(">"):
                    self._skip_block_comment()
                else:
                    self._skip_line_comment()
            else:
                return

    # -- token kinds ------------------------------------------------------

    def _number(self) -> Token:
        while self._peek() in _DIGITS:
            self._pos += 1
        if self._peek() == "." and self._peek_next() in _DIGITS:
            self._pos += 1
            while self._peek() in _DIGITS:
                self._pos += 1
        return self._make(TokenType.NUMBER)

    def _string(self) -> Token:
        while self._peek() != '"' and not self._at_end():
            if self._peek() == "\n":
                self.line += 1
            self._pos += 1
        if self._at_end():
            return self._error("Unterminated string")
        self._pos += 1
        return self._make(TokenType.STRING)

    def _identifier(self) -> Token:
        while self._peek() in _WORD_CHARS:
            self._pos += 1
        text = self._source[self._start:self._pos]
        if text.startswith("FN"):
            return self._make(TokenType.FUNCTION)
        return self._make(_KEYWORDS.get(text, TokenType.IDENTIFIER))

    # -- public -----------------------------------------------------------

    def scan(self) -> Token:
        """Return the next token; EOF is returned once the input is used up."""
        self._skip_whitespace()
        self._start = self._pos
        if self._at_end():
            return self._make(TokenType.EOF)

        char = self._advance()
        if char in _DIGITS:
            return self._number()
        if char in _WORD_START:
            return self._identifier()
        if char in _SINGLE_CHAR:
            return self._make(_SINGLE_CHAR[char])

        if char == "|" and self._match("|"):
            return self._make(TokenType.OR)
        if char == "&" and self._match("&"):
            return self._make(TokenType.AND)
        if char == "=":
            return self._make(
                TokenType.EQUAL_EQUAL if self._match("=") else TokenType.EQUAL
            )
        if char == ">":
            return self._make(
                TokenType.GREATER_EQUAL if self._match("=") else TokenType.GREATER
            )
        if char == "<":
            if self._match("="):
                return self._make(TokenType.LESS_EQUAL)
            if self._match(">"):
                return self._make(TokenType.UNEQUAL)
            return self._make(TokenType.LESS)
        if char == '"':
            return self._string()

        return self._error("Unexpected character.")

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including EOF; error tokens are yielded too."""
        while True:
            token = self.scan()
            yield token
            if token.type is TokenType.EOF:
                return


def tokenize(source) -> list[Token]:
    """Scan all of ``source`` and return its tokens, ending with EOF."""
    return list(Lexer(source))