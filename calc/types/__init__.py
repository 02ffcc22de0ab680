from calc.types.nothing import Nothing, NothingType
from calc.types.values import (
    Builtin,
    Symbol,
    Thunk,
    UnresolvedIdentifier,
    display,
    is_callable,
    is_integer,
)
from calc.types.environment import Environment

__all__ = [
    "Builtin",
    "Environment",
    "Nothing",
    "NothingType",
    "Symbol",
    "Thunk",
    "UnresolvedIdentifier",
    "display",
    "is_callable",
    "is_integer",
]
