"""Opaque handle for a native built-in function.

A Func only stores an index into the fixed table in kappa.builtins, so the
value itself holds no Python callable and can be inspected or printed freely.
"""

from __future__ import annotations


class Func:
    __slots__ = ("index",)

    def __init__(self, index: int):
        self.index = index

    def __repr__(self) -> str:
        return f"Func({self.index})"

    def __str__(self) -> str:
        return "FUNCTION"
