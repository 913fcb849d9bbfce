from kappa import EvaluatorFn
from kappa import SExpression, LispValue
from kappa.errors import KappaArityError, KappaInvalidSymbol, KappaTypeError
from kappa.printer import to_lisp_string
from kappa.types.environment import Environment
from kappa.types.lambda_fn import Lambda
from kappa.types.symbol import Symbol


def defun_form(
    tail: list[SExpression],
    env: Environment,
    _: EvaluatorFn,
) -> LispValue:
    """
    (defun name (params...) body)
    The body is stored unevaluated and shared by every call. Returns the
    function name as a string.
    """
    if len(tail) != 3:
        raise KappaArityError("unexpected function definition")

    name, params, body = tail
    if not isinstance(name, Symbol):
        raise KappaInvalidSymbol(f"invalid symbol: {to_lisp_string(name)}")
    if not isinstance(params, list):
        raise KappaTypeError(f"invalid list: {to_lisp_string(params)}")
    for p in params:
        if not isinstance(p, Symbol):
            raise KappaTypeError(f"{to_lisp_string(p)} is not symbol")

    env.define(name, Lambda(list(params), body))
    return name.name
