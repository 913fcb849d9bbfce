"""
  Kappa Lexer

- Pull-based: each `next_token()` call scans and returns exactly one Token.
- After the input is exhausted every further call returns EOF.
- Identifiers are ASCII letters only and are upper-cased, so symbols are
  case-insensitive while string contents keep their case.
- A `+` or `-` directly followed by a digit starts a signed number.
"""

from __future__ import annotations

import logging
from typing import Iterator

from kappa.reader import token as tok
from kappa.reader.token import Token, TokenKind

_logger = logging.getLogger("kappa.reader.lexer")

_SINGLE_CHAR_TOKENS: dict[str, Token] = {
    "(": tok.LPAREN,
    ")": tok.RPAREN,
    "*": tok.ASTERISK,
    "/": tok.SLASH,
}

_SIGN_TOKENS: dict[str, Token] = {
    "+": tok.PLUS,
    "-": tok.MINUS,
}


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


# str.isspace also accepts the \x1c-\x1f separators, which are not Unicode White_Space
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


def _is_whitespace(ch: str) -> bool:
    return ch.isspace() and ch not in _NOT_WHITESPACE


def _is_ascii_letter(ch: str) -> bool:
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z")


class Lexer:
    def __init__(self, source: str):
        self.source = source
        self.pos = 0

    def _peek(self, offset: int = 0) -> str:
        i = self.pos + offset
        return self.source[i] if i < len(self.source) else ""

    def _skip_whitespace(self) -> None:
        n = len(self.source)
        while self.pos < n and _is_whitespace(self.source[self.pos]):
            self.pos += 1

    def next_token(self) -> Token:
        self._skip_whitespace()
        ch = self._peek()

        if ch == "":
            return tok.EOF

        if ch in _SINGLE_CHAR_TOKENS:
            self.pos += 1
            return _SINGLE_CHAR_TOKENS[ch]

        if ch in _SIGN_TOKENS:
            if _is_digit(self._peek(1)):
                return self._read_number()
            self.pos += 1
            return _SIGN_TOKENS[ch]

        if _is_digit(ch):
            return self._read_number()

        if ch == '"':
            return self._read_string()

        if _is_ascii_letter(ch):
            return self._read_literal()

        self.pos += 1
        _logger.debug("illegal character %r at %d", ch, self.pos - 1)
        return Token(TokenKind.ILLEGAL, ch)

    def _read_number(self) -> Token:
        start = self.pos
        self.pos += 1  # first digit or sign
        n = len(self.source)
        while self.pos < n and (_is_digit(self.source[self.pos]) or self.source[self.pos] == "."):
            self.pos += 1
        # float() raises ValueError on text such as "1.2.3"; that is not a recoverable token
        return Token(TokenKind.NUMBER, float(self.source[start:self.pos]))

    def _read_string(self) -> Token:
        self.pos += 1  # opening quote
        start = self.pos
        n = len(self.source)
        while self.pos < n:
            ch = self.source[self.pos]
            if ch == "\\" and self.pos + 1 < n:
                # keep the escape verbatim, but never stop on an escaped quote
                self.pos += 2
                continue
            if ch == '"':
                text = self.source[start:self.pos]
                self.pos += 1  # closing quote
                return Token(TokenKind.STRING, text)
            self.pos += 1
        # unterminated: take the rest of the input
        return Token(TokenKind.STRING, self.source[start:])

    def _read_literal(self) -> Token:
        start = self.pos
        n = len(self.source)
        while self.pos < n and _is_ascii_letter(self.source[self.pos]):
            self.pos += 1
        text = self.source[start:self.pos].upper()
        if text == "T" and self.pos == n:
            return tok.TRUE
        if text == "NIL":
            return tok.NIL
        return Token(TokenKind.LITERAL, text)

    def __iter__(self) -> Iterator[Token]:
        while (token := self.next_token()).kind is not TokenKind.EOF:
            yield token


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields every Token of `source` up to, not including, EOF."""
    return iter(Lexer(source))
