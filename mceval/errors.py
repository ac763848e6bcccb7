from __future__ import annotations


class EvalError(Exception):
    """ Base class for all evaluation errors"""
    pass


class UnboundVariable(EvalError):
    """ Raised when no frame in the environment binds a symbol"""

    def __init__(self, symbol, message: str | None = None):
        self.symbol = symbol
        super().__init__(message or f"Unbound variable: {symbol}")


class UnassignedVariable(UnboundVariable):
    """ Raised when a letrec binding is read before its initializer finished"""

    def __init__(self, symbol):
        super().__init__(symbol, f"Variable {symbol} used before its letrec initializer completed")


class UnsupportedOperation(EvalError):
    """ Raised for operations the value model does not support (e.g. dotted pairs)"""


class ArityMismatch(EvalError):
    """ Raised when the number of arguments does not match the parameters"""


class EmptyListAccess(EvalError):
    """ Raised when car or cdr is applied to the empty list"""


class ArgumentTypeError(EvalError):
    """ Raised when a primitive receives an argument of the wrong type"""


class NotCallable(EvalError):
    """ Raised when the head of an application is not a function value"""


class MalformedExpression(EvalError):
    """ Raised when something that is not an expression reaches the evaluator"""


class MalformedForm(EvalError):
    """ Raised when a special form does not have the expected shape"""


class RecursionDepthExceeded(EvalError):
    """ Raised when evaluation exhausts the host call stack"""
