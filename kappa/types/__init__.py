from kappa.types.symbol import Symbol
from kappa.types.nil import Nil, NilType, T, TrueType
from kappa.types.builtin import Func
from kappa.types.lambda_fn import Lambda
from kappa.types.environment import Environment

__all__ = ["Symbol", "Nil", "NilType", "T", "TrueType", "Func", "Lambda", "Environment"]
