from __future__ import annotations


class CalcError(Exception):
    """ Base class for all calc errors"""

    def __init__(self, message: str, pos: int | None = None):
        super().__init__(message)
        self.message = message
        self.pos = pos


class CalcSyntaxError(CalcError):
    """ Raised when the source text cannot be tokenized or parsed"""


class CalcNameError(CalcError):
    """ Raised when an identifier has no binding in any namespace"""

    def __init__(self, name: str, pos: int | None = None):
        super().__init__(f"unknown identifier: {name}", pos)
        self.name = name


class CalcArityError(CalcError):
    """ Raised when the number of arguments passed to a builtin is incorrect"""


class CalcTypeError(CalcError):
    """ Raised when the types of arguments passed to a builtin are incorrect"""


# Faults are not user diagnostics: they abort the evaluation that raised them.

class CalcFault(CalcError):
    """ Base class for unrecoverable evaluation faults"""


class CalcInternalFault(CalcFault):
    """ Raised when the parser hands the evaluator a node it cannot handle"""


class CalcDivisionByZero(CalcFault, ZeroDivisionError):
    """ Raised when an integer is divided (or reduced modulo) by zero"""
