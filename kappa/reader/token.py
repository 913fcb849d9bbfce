from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class TokenKind(Enum):
    PLUS = auto()
    MINUS = auto()
    ASTERISK = auto()
    SLASH = auto()
    LPAREN = auto()
    RPAREN = auto()
    TRUE = auto()
    NIL = auto()
    EOF = auto()
    ILLEGAL = auto()
    NUMBER = auto()
    STRING = auto()
    LITERAL = auto()


# Fixed source text of the payload-free kinds
_TOKEN_TEXT = {
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
    TokenKind.ASTERISK: "*",
    TokenKind.SLASH: "/",
    TokenKind.LPAREN: "(",
    TokenKind.RPAREN: ")",
    TokenKind.TRUE: "T",
    TokenKind.NIL: "NIL",
    TokenKind.EOF: "EOF",
}

OPERATOR_KINDS = frozenset(
    {TokenKind.PLUS, TokenKind.MINUS, TokenKind.ASTERISK, TokenKind.SLASH}
)


@dataclass(frozen=True)
class Token:
    """A lexical unit. `value` is set only for NUMBER, STRING, LITERAL and ILLEGAL."""

    kind: TokenKind
    value: Union[float, str, None] = None

    def __str__(self) -> str:
        if self.kind is TokenKind.ILLEGAL:
            return f"ILLEGAL({self.value})"
        if self.kind is TokenKind.NUMBER:
            from kappa.printer import format_number
            return format_number(self.value)
        if self.kind in (TokenKind.STRING, TokenKind.LITERAL):
            return self.value
        return _TOKEN_TEXT[self.kind]


# Shared instances for the payload-free kinds
PLUS = Token(TokenKind.PLUS)
MINUS = Token(TokenKind.MINUS)
ASTERISK = Token(TokenKind.ASTERISK)
SLASH = Token(TokenKind.SLASH)
LPAREN = Token(TokenKind.LPAREN)
RPAREN = Token(TokenKind.RPAREN)
TRUE = Token(TokenKind.TRUE)
NIL = Token(TokenKind.NIL)
EOF = Token(TokenKind.EOF)
