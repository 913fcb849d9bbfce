"""
  Kappa Parser

Recursive descent over a Lexer, one expression per `parse()` call:

    - numbers   -> float
    - strings   -> str
    - literals  -> Symbol (already upper-cased by the lexer)
    - + - * /   -> Symbol, so operators resolve like any other name
    - t         -> T
    - nil       -> Nil
    - (...)     -> list

A `)` or the end of input closes the innermost open list; at top level both
read as Nil. An explicit NIL inside a list is kept as a list element.
"""

from __future__ import annotations

import logging
from typing import Iterator

from kappa import SExpression
from kappa.errors import KappaSyntaxError
from kappa.reader.lexer import Lexer
from kappa.reader.token import OPERATOR_KINDS, TokenKind
from kappa.types.nil import Nil, T
from kappa.types.symbol import Symbol

_logger = logging.getLogger("kappa.reader.parser")


class _EndOfList:
    """Marker for `)` / end of input; never escapes the parser."""

    def __repr__(self):
        return "<end of list>"


_END = _EndOfList()


class Parser:
    def __init__(self, lexer: Lexer):
        self.lexer = lexer

    def parse(self) -> SExpression:
        expr = self._parse_expr()
        if expr is _END:
            return Nil
        _logger.debug("parsed %r", expr)
        return expr

    def _parse_expr(self) -> SExpression | _EndOfList:
        token = self.lexer.next_token()
        kind = token.kind

        if kind is TokenKind.NUMBER or kind is TokenKind.STRING:
            return token.value
        if kind is TokenKind.LITERAL:
            return Symbol(token.value)
        if kind in OPERATOR_KINDS:
            return Symbol(str(token))
        if kind is TokenKind.TRUE:
            return T
        if kind is TokenKind.NIL:
            return Nil
        if kind is TokenKind.EOF or kind is TokenKind.RPAREN:
            return _END
        if kind is TokenKind.ILLEGAL:
            raise KappaSyntaxError(f"invalid token: {token.value}")

        # LPAREN
        items: list[SExpression] = []
        while (child := self._parse_expr()) is not _END:
            items.append(child)
        return items

    def parse_all(self) -> Iterator[SExpression]:
        """Yield successive top-level expressions until the input is exhausted."""
        while True:
            expr = self._parse_expr()
            if expr is _END:
                # a stray `)` is skipped; EOF stops
                if self.lexer.pos >= len(self.lexer.source):
                    break
                continue
            yield expr


def parse(source: str) -> SExpression:
    """Parse the first expression of `source`."""
    return Parser(Lexer(source)).parse()
