"""Application engine for Kappa.

Centralizes function application for the evaluator:
- Built-ins (Func handles) receive already-evaluated arguments.
- Lambdas are applied with snapshot scoping: the body runs in a full copy of
  the caller's environment with the parameters bound, and the copy is
  dropped afterwards. The lambda sees the caller's bindings at call time, and
  nothing it binds leaks back to the caller.
"""

from __future__ import annotations

import logging

from kappa import LispValue, SExpression, EvaluatorFn
from kappa.builtins import builtin_name, call_builtin
from kappa.errors import KappaArityError, KappaTypeError
from kappa.printer import to_lisp_string
from kappa.types.builtin import Func
from kappa.types.environment import Environment
from kappa.types.lambda_fn import Lambda

_logger = logging.getLogger("kappa.evaluation")


def apply_lambda(
    fn: Lambda,
    arg_exprs: list[SExpression],
    caller_env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Lambda to unevaluated argument forms.

    The arity is checked before any argument is evaluated.
    """
    if len(arg_exprs) != fn.arity:
        raise KappaArityError("number of args and lambda's arg is not same")

    args = [evaluate_fn(a, caller_env) for a in arg_exprs]

    local_env = caller_env.copy()
    for param, value in zip(fn.params, args):
        local_env.define(param, value)

    if _logger.isEnabledFor(logging.DEBUG):
        _logger.debug("calling lambda %r with %s", fn, to_lisp_string(args))
    return evaluate_fn(fn.body, local_env)


def apply_builtin(
    fn: Func,
    arg_exprs: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    args = [evaluate_fn(a, env) for a in arg_exprs]
    if _logger.isEnabledFor(logging.DEBUG):
        _logger.debug("calling builtin %s with %s", builtin_name(fn), to_lisp_string(args))
    return call_builtin(fn, args)


def apply(
    head: LispValue,
    arg_exprs: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a built-in Func; anything else is a type error."""
    if isinstance(head, Func):
        return apply_builtin(head, arg_exprs, env, evaluate_fn)
    elif isinstance(head, Lambda):
        return apply_lambda(head, arg_exprs, env, evaluate_fn)
    else:
        raise KappaTypeError(f"cannot apply non-function: {to_lisp_string(head)}")
