class KappaError(Exception):
    """ Base class for all Kappa errors"""
    pass

class KappaSyntaxError(KappaError):
    """ Raised when the reader meets an illegal character"""

class KappaInvalidSymbol(KappaError):
    """ Raised when a Symbol is required but something else was given"""

class KappaUnboundSymbol(KappaError):
    """ Raised when a symbol is used before it is bound"""

class KappaArityError(KappaError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class KappaTypeError(KappaError):
    """ Raised when the types of arguments passed to a function are incorrect"""

class KappaInvalidExpression(KappaError):
    """ Raised when a value cannot be evaluated as an expression"""
