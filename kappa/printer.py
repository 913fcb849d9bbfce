"""Text rendering of Kappa values.

Numbers print without a trailing ``.0`` when integral, strings print as their
raw text, lists print parenthesised, and the opaque callables print as fixed
placeholder words.
"""

from __future__ import annotations

import math
from decimal import Decimal
from io import StringIO

from kappa import LispValue


def format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    # shortest round-tripping digits, written out without an exponent
    text = format(Decimal(repr(float(value))), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _write(buffer: StringIO, value: LispValue) -> None:
    if isinstance(value, list):
        buffer.write("(")
        for i, item in enumerate(value):
            if i:
                buffer.write(" ")
            _write(buffer, item)
        buffer.write(")")
    elif isinstance(value, (int, float)):
        buffer.write(format_number(value))
    elif isinstance(value, str):
        buffer.write(value)
    else:
        # Symbol, Nil, T, Func and Lambda all render through __str__
        buffer.write(str(value))


def to_lisp_string(value: LispValue) -> str:
    """Render a value the way the REPL prints it."""
    with StringIO() as buffer:
        _write(buffer, value)
        return buffer.getvalue()
