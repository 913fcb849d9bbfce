"""Line-oriented read-eval-print loop.

Blank lines are skipped; every other line is evaluated as one expression and
its rendering (or error message) is printed on its own line.
"""

from __future__ import annotations

import logging
import sys
from typing import Iterable, TextIO

from kappa.config import get_prompt
from kappa.interpreter import Interpreter

_logger = logging.getLogger("kappa.repl")


def repl(
    lines: Iterable[str],
    out: TextIO = sys.stdout,
    prompt: str | None = None,
    interpreter: Interpreter | None = None,
) -> Interpreter:
    if prompt is None:
        prompt = get_prompt()
    if interpreter is None:
        interpreter = Interpreter()

    out.write(prompt)
    out.flush()
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line.strip() == "":
            continue
        out.write(interpreter.run_line(line))
        out.write("\n")
        out.write(prompt)
        out.flush()
    _logger.debug("input exhausted; %d bindings in session", len(interpreter.env))
    return interpreter
