"""Runtime environment for Kappa.

The Environment is a flat mapping of Symbols to evaluated Lisp values. There
is no parent chain: a function call evaluates its body in a full copy of the
caller's environment, with the parameters bound in that copy.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterator

from kappa import LispValue
from kappa.errors import KappaInvalidSymbol, KappaUnboundSymbol
from kappa.types.symbol import Symbol


class Environment:
    """Mapping from Symbols to Lisp values, one binding per name."""

    __slots__ = ("vars",)

    def __init__(self, bindings: dict[Symbol, LispValue] | None = None):
        self.vars: dict[Symbol, LispValue] = dict(bindings) if bindings else {}

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value`, replacing any existing binding.

        Raises KappaInvalidSymbol if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise KappaInvalidSymbol(f"Cannot define {name} as a symbol")
        self.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        """Look up the value bound to `name`.

        Raises KappaUnboundSymbol, with a dump of the bindings, if not found.
        """
        try:
            return self.vars[name]
        except KeyError:
            raise KappaUnboundSymbol(f"not found symbol: {name}, env: {self}") from None

    def copy(self) -> Environment:
        """Independent snapshot; later changes to either side are not shared."""
        return Environment(self.vars)

    def update(self, mapping: dict[Symbol, LispValue]) -> None:
        """Bulk-define a mapping of Symbol -> value."""
        for k, v in mapping.items():
            self.define(k, v)

    def __contains__(self, name: Symbol) -> bool:
        return name in self.vars

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self.vars)

    def __len__(self) -> int:
        return len(self.vars)

    def __str__(self) -> str:
        from kappa.printer import to_lisp_string

        with StringIO() as buffer:
            first = True
            for k, v in self.vars.items():
                if not first:
                    buffer.write(" ")
                buffer.write(f"{k}={to_lisp_string(v)}")
                first = False
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {self}>"
