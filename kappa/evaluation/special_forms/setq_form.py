from kappa import EvaluatorFn
from kappa import SExpression, LispValue
from kappa.errors import KappaInvalidSymbol, KappaArityError
from kappa.types.symbol import Symbol
from kappa.types.environment import Environment


def setq_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (setq var value)
    Binds in `env` itself, so at top level the binding is global and inside a
    call it only touches the call's private copy. Extra arguments are ignored.
    """
    if not tail:
        raise KappaArityError("expected first arg")
    var_sym = tail[0]
    if not isinstance(var_sym, Symbol):
        raise KappaInvalidSymbol("first arg must be symbol")
    if len(tail) < 2:
        raise KappaArityError("expected second arg")

    value = evaluate_fn(tail[1], env)
    env.define(var_sym, value)
    return value
