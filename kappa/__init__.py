# Core type aliases for Kappa's data model.
# We use plain Python types (float, str, list) plus a few small classes
# (Symbol, Nil, T, Func, Lambda) to represent both parsed forms and runtime values.
#
# Naming guidance:
# - SExpression: Use in reader/parser code to denote syntactic forms.
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type: used by special forms to evaluate sub-forms
EvaluatorFn = Callable[..., LispValue]

__version__ = "0.1.0"
