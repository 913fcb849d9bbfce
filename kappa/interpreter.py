from __future__ import annotations

import logging

from kappa import LispValue
from kappa.builtins import register
from kappa.errors import KappaError
from kappa.evaluation.evaluator import evaluate
from kappa.printer import to_lisp_string
from kappa.reader.lexer import Lexer
from kappa.reader.parser import Parser
from kappa.types.environment import Environment

_logger = logging.getLogger("kappa.interpreter")


class Interpreter:
    """
    One interpreter session: reads and evaluates Kappa code line by line.
    Owns the Environment, so independent sessions never share bindings.
    """

    def __init__(self, env: Environment | None = None):
        if env is None:
            env = Environment()
            register(env)
        self.env: Environment = env

    def eval(self, line: str) -> LispValue:
        """Parse one expression from `line` and evaluate it. Raises KappaError."""
        expr = Parser(Lexer(line)).parse()
        return evaluate(expr, self.env)

    def eval_source(self, code: str) -> list[LispValue]:
        """Evaluate every expression in `code`, in order."""
        return [evaluate(expr, self.env) for expr in Parser(Lexer(code)).parse_all()]

    def run_line(self, line: str) -> str:
        """Evaluate `line` and render the result, or the error message on failure."""
        try:
            return to_lisp_string(self.eval(line))
        except KappaError as e:
            _logger.debug("error evaluating %r: %s", line, e)
            return str(e)
