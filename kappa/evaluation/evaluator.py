"""Core tree-walking evaluator for the Kappa interpreter."""

from __future__ import annotations

import logging

from kappa import SExpression, LispValue
from kappa.errors import KappaInvalidExpression
from kappa.evaluation.apply import apply
from kappa.evaluation.special_forms import SPECIAL_FORMS
from kappa.printer import to_lisp_string
from kappa.types.environment import Environment
from kappa.types.nil import NilType, TrueType
from kappa.types.symbol import Symbol

_logger = logging.getLogger("kappa.evaluation")


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` against `env`, mutating `env` for SETQ and DEFUN."""
    match expr:
        case str() | float() | int() | NilType() | TrueType():
            return expr

        case Symbol():
            return env.lookup(expr)

        case []:
            raise KappaInvalidExpression("cannot evaluate empty list")

        case [head, *tail_args]:
            if isinstance(head, Symbol) and head in SPECIAL_FORMS:
                _logger.debug("special form %s", head)
                return SPECIAL_FORMS[head](tail_args, env, evaluate)
            fn = evaluate(head, env)
            return apply(fn, tail_args, env, evaluate)

    raise KappaInvalidExpression(f"invalid expr: {to_lisp_string(expr)}")
