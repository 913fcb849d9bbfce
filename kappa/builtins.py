from __future__ import annotations

from typing import Any, Callable

import numpy as np

from kappa.types import Environment, Func, Symbol
from kappa.errors import KappaTypeError, KappaArityError
from kappa.printer import to_lisp_string

BuiltinFn = Callable[[list[Any]], float]


# -------------------------------
# Argument coercion
# -------------------------------
def to_floats(args: list[Any]) -> np.ndarray:
    for x in args:
        # bool is an int subclass but never a Kappa number
        if isinstance(x, bool) or not isinstance(x, (int, float)):
            raise KappaTypeError(f"{to_lisp_string(x)} is not number")
    if not args:
        raise KappaArityError("expected at least one number")
    return np.asarray(args, dtype=np.float64)


def _fold(ufunc: np.ufunc) -> BuiltinFn:
    # accumulate is strictly sequential: (op a b c) == ((a op b) op c).
    # reduce is not; np.add.reduce sums float64 pairwise.
    def op(args: list[Any]) -> float:
        values = to_floats(args)
        with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
            return float(ufunc.accumulate(values)[-1])
    op.__name__ = ufunc.__name__
    return op


# -------------------------------
# Arithmetic
# -------------------------------
add = _fold(np.add)
sub = _fold(np.subtract)
mul = _fold(np.multiply)
div = _fold(np.true_divide)


# -------------------------------
# Fixed built-in table; Func(i) refers to BUILTINS[i]
# -------------------------------
BUILTINS: list[tuple[str, BuiltinFn]] = [
    ("+", add),
    ("-", sub),
    ("*", mul),
    ("/", div),
]


def call_builtin(fn: Func, args: list[Any]) -> float:
    _, impl = BUILTINS[fn.index]
    return impl(args)


def builtin_name(fn: Func) -> str:
    return BUILTINS[fn.index][0]


def register(env: Environment) -> None:
    """Bind every built-in under its name in `env`."""
    env.update({Symbol(name): Func(i) for i, (name, _) in enumerate(BUILTINS)})
