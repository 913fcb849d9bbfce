"""User-defined procedure representation for Kappa."""

from __future__ import annotations

from io import StringIO

from kappa import SExpression
from kappa.types.symbol import Symbol


class Lambda:
    """A user-defined procedure: ordered parameter names and a body form.

    The body is held by reference; every call and every environment snapshot
    holding this Lambda shares the same body object. There is no captured
    environment: calls are evaluated in a copy of the caller's environment.
    """

    __slots__ = ("params", "body")

    def __init__(self, params: list[Symbol], body: SExpression):
        self.params: list[Symbol] = params
        self.body: SExpression = body

    @property
    def arity(self) -> int:
        return len(self.params)

    def __str__(self) -> str:
        return "LAMBDA"

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Lambda (")
            buffer.write(" ".join(str(p) for p in self.params))
            buffer.write(")>")
            return buffer.getvalue()
